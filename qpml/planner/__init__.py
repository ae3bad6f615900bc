# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# See the License at http://www.apache.org/licenses/LICENSE-2.0
# Distributed on an "AS IS" BASIS, WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND.

"""
 ┌───────────┐      ┌───────────┐      ┌───────────┐      ┌───────────┐
 │ Query     │ Plan │ Diagram   │ Node │ Document  │ Doc  │ YAML      │
 │ Engine    ├──────► Builder   ├──────► Envelope  ├──────► Encoder   │
 └───────────┘      └───────────┘      └───────────┘      └───────────┘
"""

from qpml.planner.diagram_builder import build
from qpml.planner.diagram_builder import build_document
from qpml.planner.diagram_builder import build_document_text
from qpml.planner.diagram_builder import classify
from qpml.planner.title_renderers import register_render

__all__ = (
    "build",
    "build_document",
    "build_document_text",
    "classify",
    "register_render",
)
