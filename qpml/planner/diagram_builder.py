# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# See the License at http://www.apache.org/licenses/LICENSE-2.0
# Distributed on an "AS IS" BASIS, WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND.

"""
Converts a query plan into a diagram.

The diagram has exactly the shape of the plan, every plan node becomes one diagram node
and the inputs of every node are kept in the order the plan has them. Each node is
classified by its variant:

    Scan     -> 'scan', the name of the first file or folder the scan reads
    Join     -> 'join', '<join type> Join: <condition>'
    Project  -> 'projection', 'Projection: <columns>'
    Filter   -> 'filter', 'Filter: <condition>'
    (other)  -> the variant name, the node's own single-line description

The plan is walked with an explicit stack rather than by recursion, so `build` has no
depth limit. Documents are written and read by PyYAML, which recurses for every level,
so `build_document` and `build_document_text` only accept plans up to
QPML_MAX_DOCUMENT_DEPTH nodes deep (100 by default).
"""

import logging
from typing import List
from typing import Optional
from typing import Tuple

from qpml import config
from qpml.exceptions import InvalidPlanError
from qpml.exceptions import UnknownOperatorError
from qpml.models import DiagramNode
from qpml.models import Document
from qpml.models import PlanNode
from qpml.planner.title_renderers import get_renderer

logger = logging.getLogger(__name__)


def classify(plan: PlanNode, strict: Optional[bool] = None) -> Tuple[str, str]:
    """
    Get the title and operator tag for a single plan node.

    Parameters:
        plan: PlanNode
            The node to classify, its inputs are not read.
        strict: bool, optional
            Raise an error for operators without a dedicated title, defaults to the
            QPML_STRICT_OPERATORS setting.

    Returns:
        Tuple[str, str]: The title and the operator tag.
    """
    renderer = get_renderer(plan.node_type)
    if renderer is not None:
        operator, render = renderer
        return render(plan), operator

    if strict is None:
        strict = config.QPML_STRICT_OPERATORS
    if strict:
        raise UnknownOperatorError(plan.variant)

    logger.debug("No dedicated title for '%s' operator", plan.variant)
    return plan.simple_string(), plan.variant


def build(plan: PlanNode, strict: Optional[bool] = None) -> DiagramNode:
    """
    Build the diagram for a plan.

    Every node's inputs are built before the node itself, as a diagram node can't be
    changed once it is created.

    Parameters:
        plan: PlanNode
            The root of the plan.
        strict: bool, optional
            Raise an error for operators without a dedicated title, defaults to the
            QPML_STRICT_OPERATORS setting.

    Returns:
        DiagramNode: The root of the diagram.
    """
    root: List[DiagramNode] = []
    # frames are (plan node, where to put its diagram node, its built inputs)
    stack: List[Tuple[PlanNode, List[DiagramNode], Optional[List[DiagramNode]]]] = [
        (plan, root, None)
    ]

    while stack:
        node, parent_inputs, inputs = stack.pop()
        if inputs is None:
            inputs = []
            stack.append((node, parent_inputs, inputs))
            # reversed so the first input is built, and appended, first
            for child in reversed(node.children):
                stack.append((child, inputs, None))
            continue

        title, operator = classify(node, strict=strict)
        parent_inputs.append(DiagramNode(title=title, operator=operator, inputs=tuple(inputs)))

    if logger.isEnabledFor(logging.DEBUG):
        logger.debug("Built diagram with %s nodes", root[0].count())
    return root[0]


def build_document(plan: PlanNode, strict: Optional[bool] = None) -> Document:
    """
    Build the diagram for a plan, wrapped as a document.

    Raises:
        InvalidPlanError: the plan is deeper than QPML_MAX_DOCUMENT_DEPTH.
    """
    diagram = build(plan, strict=strict)
    depth = diagram.depth()
    if depth > config.QPML_MAX_DOCUMENT_DEPTH:
        raise InvalidPlanError(
            f"Plan is {depth} nodes deep, documents can be at most "
            f"{config.QPML_MAX_DOCUMENT_DEPTH} nodes deep."
        )
    return Document(diagram=diagram)


def build_document_text(plan: PlanNode, strict: Optional[bool] = None) -> str:
    """
    Convert a plan to the text of a QPML document, this is the usual entry point.

    Either the complete document is returned or an error is raised, there are no
    partial documents. Plans deeper than QPML_MAX_DOCUMENT_DEPTH raise InvalidPlanError.
    """
    from qpml.serde import encode_document

    return encode_document(build_document(plan, strict=strict))
