# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# See the License at http://www.apache.org/licenses/LICENSE-2.0
# Distributed on an "AS IS" BASIS, WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND.

"""
Draw a diagram as an indented ASCII tree, this is the human-readable view of a plan
that is usually written alongside the QPML document.

    └─ Filter: age > 30 [filter]
       └─ orders.csv [scan]
"""

from typing import Iterator

from qpml.models import DiagramNode


def _label(node: DiagramNode) -> str:
    return f"{node.title} [{node.operator}]"


def print_tree_inner(tree: DiagramNode, prefix: str = "", last: bool = True) -> Iterator[str]:
    """
    Yields the parts of the ASCII tree, walking with an explicit stack so deep
    diagrams don't hit the recursion limit.
    """
    stack = [(tree, prefix, last)]
    while stack:
        node, prefix, last = stack.pop()
        yield prefix
        if last:
            yield "└─ "
            prefix += "   "
        else:
            yield "├─ "
            prefix += "│  "

        yield _label(node) + "\n"

        count = len(node.inputs)
        # pushed in reverse so the first input is drawn first
        for i in reversed(range(count)):
            stack.append((node.inputs[i], prefix, i == count - 1))


def draw_diagram(diagram: DiagramNode) -> str:
    return "".join(print_tree_inner(diagram))
