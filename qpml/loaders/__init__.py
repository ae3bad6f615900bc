# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# See the License at http://www.apache.org/licenses/LICENSE-2.0
# Distributed on an "AS IS" BASIS, WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND.

from qpml.loaders.plan_loader import load_plan
from qpml.loaders.plan_loader import plan_from_dict

__all__ = ("load_plan", "plan_from_dict")
