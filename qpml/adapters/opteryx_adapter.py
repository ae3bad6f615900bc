# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# See the License at http://www.apache.org/licenses/LICENSE-2.0
# Distributed on an "AS IS" BASIS, WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND.

"""
Read an opteryx logical plan as a qpml plan.

Opteryx holds plans as graphs, edges run from each step to the step that consumes it
and joins label their edges 'left' and 'right'. The root of the plan is the graph's
exit point.

Scans are only treated as file scans when the connector reads blobs (files on disk or
in object storage), other scans are tagged with the name of their connector.
"""

import logging
from typing import Any
from typing import Callable
from typing import Dict
from typing import List
from typing import Optional

from qpml.exceptions import InvalidPlanError
from qpml.exceptions import MissingDependencyError
from qpml.models import FileSystemRelation
from qpml.models import PlanNode
from qpml.models import PlanStepType

logger = logging.getLogger(__name__)

_EDGE_ORDER = {"left": 0, "right": 1}


def _opteryx_formatter() -> Callable[[Any], str]:
    try:
        from opteryx.managers.expression import format_expression
    except ImportError as err:  # pragma: no cover
        raise MissingDependencyError(err.name) from err
    return format_expression


def normalize_join_type(join_type: str) -> str:
    """
    Opteryx names joins in lower case words ('left outer', 'cross join'), these are
    written as a single capitalized word ('LeftOuter', 'Cross').
    """
    words = str(join_type).split()
    if len(words) > 1 and words[-1].lower() == "join":
        words = words[:-1]
    return "".join(word.capitalize() for word in words)


def _join_condition(step, formatter: Callable[[Any], str]) -> Optional[str]:
    if step.on is not None:
        return formatter(step.on)
    if step.using:
        return "USING (" + ", ".join(formatter(column) for column in step.using) + ")"
    return None


def convert_step(nid: str, step, formatter: Callable[[Any], str]) -> PlanNode:
    """
    Convert a single opteryx step, without its inputs.
    """
    step_name = getattr(step.node_type, "name", str(step.node_type))

    if step_name == "Scan":
        connector = step.connector
        if connector is not None and getattr(connector, "__mode__", None) == "Blob":
            path = getattr(connector, "dataset", None) or step.relation
            relation = FileSystemRelation.from_paths(path, name=step.relation)
            return PlanNode(PlanStepType.Scan, relation=relation, nid=nid)
        variant = type(connector).__name__ if connector is not None else "Read"
        return PlanNode(variant, description=str(step), nid=nid)

    if step_name == "Join":
        return PlanNode(
            PlanStepType.Join,
            join_type=normalize_join_type(step.type),
            condition=_join_condition(step, formatter),
            nid=nid,
        )

    if step_name == "Project":
        return PlanNode(
            PlanStepType.Project,
            columns=[formatter(column) for column in step.columns or []],
            nid=nid,
        )

    if step_name == "Filter":
        return PlanNode(PlanStepType.Filter, condition=formatter(step.condition), nid=nid)

    return PlanNode(step_name, description=str(step), nid=nid)


def from_opteryx(plan, formatter: Optional[Callable[[Any], str]] = None) -> PlanNode:
    """
    Convert an opteryx LogicalPlan into a PlanNode tree.

    Parameters:
        plan: opteryx LogicalPlan
            The plan, it must have exactly one exit point.
        formatter: callable, optional
            Renders opteryx expressions as text, defaults to opteryx's own formatter.

    Returns:
        PlanNode: The root of the plan.
    """
    if formatter is None:
        formatter = _opteryx_formatter()

    exit_points = plan.get_exit_points()
    if len(exit_points) != 1:
        raise InvalidPlanError(f"Plans must have one exit point, this plan has {len(exit_points)}")

    root_nid = exit_points[0]
    nodes: Dict[str, PlanNode] = {root_nid: convert_step(root_nid, plan[root_nid], formatter)}
    stack: List[str] = [root_nid]

    while stack:
        nid = stack.pop()
        edges = sorted(plan.ingoing_edges(nid), key=lambda edge: _EDGE_ORDER.get(edge[2], 2))
        for source, _, _ in edges:
            # steps are visited once, the same as opteryx's own depth first search
            if source in nodes:
                logger.debug("Step '%s' is read by more than one step", source)
                continue
            nodes[source] = convert_step(source, plan[source], formatter)
            nodes[nid].children.append(nodes[source])
            stack.append(source)

    return nodes[root_nid]
