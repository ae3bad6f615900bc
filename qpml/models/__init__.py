# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# See the License at http://www.apache.org/licenses/LICENSE-2.0
# Distributed on an "AS IS" BASIS, WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND.

from qpml.models.diagram import DiagramNode
from qpml.models.diagram import Document
from qpml.models.plan_node import FileSystemLocation
from qpml.models.plan_node import FileSystemRelation
from qpml.models.plan_node import PlanNode
from qpml.models.plan_node import PlanStepType
from qpml.models.plan_node import Relation

__all__ = (
    "DiagramNode",
    "Document",
    "FileSystemLocation",
    "FileSystemRelation",
    "PlanNode",
    "PlanStepType",
    "Relation",
)
