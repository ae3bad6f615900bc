# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# See the License at http://www.apache.org/licenses/LICENSE-2.0
# Distributed on an "AS IS" BASIS, WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND.

"""
Adapters read the plans of specific query engines as qpml plans, each engine is an
optional dependency and is only imported when its adapter is used.
"""

from qpml.adapters.opteryx_adapter import from_opteryx

__all__ = ("from_opteryx",)
