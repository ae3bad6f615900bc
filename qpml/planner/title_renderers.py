# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# See the License at http://www.apache.org/licenses/LICENSE-2.0
# Distributed on an "AS IS" BASIS, WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND.

"""
Titles for the plan operators which have a dedicated operator tag.

Each renderer is a pure function of a single plan node, inputs are not read. Operators
without an entry in the registry are titled by the builder using the node's own
description.
"""

from typing import Any
from typing import Callable
from typing import Dict
from typing import Tuple

from qpml.exceptions import InvalidPlanError
from qpml.exceptions import UnsupportedRelationError
from qpml.models import FileSystemRelation
from qpml.models import PlanNode
from qpml.models import PlanStepType
from qpml.utils.paths import get_name

_render_registry: Dict[PlanStepType, Tuple[str, Callable[[PlanNode], str]]] = {}


def register_render(step_type: PlanStepType, operator: str):
    """
    Decorator to register the operator tag and title function for a PlanStepType
    """

    def wrapper(func: Callable[[PlanNode], str]):
        _render_registry[step_type] = (operator, func)
        return func

    return wrapper


def get_renderer(step_type: Any):
    return _render_registry.get(step_type)


def expression_text(expression: Any) -> str:
    """The canonical text of an expression, missing expressions have no text."""
    if expression is None:
        return ""
    return str(expression)


@register_render(PlanStepType.Scan, "scan")
def render_scan(node: PlanNode) -> str:
    relation = node.relation
    if not isinstance(relation, FileSystemRelation):
        raise UnsupportedRelationError(relation)
    root_paths = relation.location.root_paths
    if not root_paths:
        raise InvalidPlanError("Scan has no root paths", node=node.simple_string())
    return get_name(root_paths[0])


@register_render(PlanStepType.Join, "join")
def render_join(node: PlanNode) -> str:
    if node.join_type is None:
        raise InvalidPlanError("Join has no join type", node=node.simple_string())
    return f"{node.join_type} Join: {expression_text(node.condition)}"


@register_render(PlanStepType.Project, "projection")
def render_project(node: PlanNode) -> str:
    columns = ", ".join(expression_text(column) for column in node.columns or [])
    return f"Projection: {columns}"


@register_render(PlanStepType.Filter, "filter")
def render_filter(node: PlanNode) -> str:
    return f"Filter: {expression_text(node.condition)}"
