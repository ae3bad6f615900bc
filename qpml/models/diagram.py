# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# See the License at http://www.apache.org/licenses/LICENSE-2.0
# Distributed on an "AS IS" BASIS, WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND.

"""
The diagram is a copy of the shape of a plan, each node has a title, an operator tag
and its inputs. The field order of the dataclasses is the field order in documents.
"""

from dataclasses import dataclass
from dataclasses import field
from typing import Any
from typing import Dict
from typing import Tuple

from qpml.exceptions import DocumentError


@dataclass(frozen=True)
class DiagramNode:
    title: str
    operator: str
    inputs: Tuple["DiagramNode", ...] = field(default_factory=tuple)

    def __post_init__(self):
        # lists are accepted but stored as tuples so the node is immutable all the way down
        if not isinstance(self.inputs, tuple):
            object.__setattr__(self, "inputs", tuple(self.inputs))

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert to plain dicts and lists, without recursion so very deep diagrams
        don't exhaust the stack.
        """
        root: Dict[str, Any] = {}
        stack = [(self, root)]
        while stack:
            node, target = stack.pop()
            target["title"] = node.title
            target["operator"] = node.operator
            target["inputs"] = [{} for _ in node.inputs]
            stack.extend(zip(node.inputs, target["inputs"]))
        return root

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "DiagramNode":
        if not isinstance(data, dict):
            raise DocumentError(f"Diagram nodes must be mappings, found '{type(data).__name__}'.")
        missing = [key for key in ("title", "operator") if key not in data]
        if missing:
            raise DocumentError(f"Diagram node is missing {', '.join(missing)}.")
        for key in ("title", "operator"):
            if not isinstance(data[key], str):
                raise DocumentError(
                    f"Diagram node '{key}' must be text, found '{type(data[key]).__name__}'."
                )
        inputs = data.get("inputs") or []
        if not isinstance(inputs, list):
            raise DocumentError("Diagram node 'inputs' must be a list.")
        return cls(
            title=data["title"],
            operator=data["operator"],
            inputs=tuple(cls.from_dict(item) for item in inputs),
        )

    def count(self) -> int:
        """Number of nodes in this diagram, including this one."""
        total = 0
        stack = [self]
        while stack:
            node = stack.pop()
            total += 1
            stack.extend(node.inputs)
        return total

    def depth(self) -> int:
        """Number of nodes on the longest path from this node to a leaf."""
        deepest = 0
        stack = [(self, 1)]
        while stack:
            node, level = stack.pop()
            deepest = max(deepest, level)
            stack.extend((child, level + 1) for child in node.inputs)
        return deepest


@dataclass(frozen=True)
class Document:
    """Envelope so the diagram has a named key in the encoded document."""

    diagram: DiagramNode

    def to_dict(self) -> Dict[str, Any]:
        return {"diagram": self.diagram.to_dict()}

    @classmethod
    def from_dict(cls, data: Any) -> "Document":
        if not isinstance(data, dict) or "diagram" not in data:
            raise DocumentError("QPML documents must have a 'diagram' key.")
        return cls(diagram=DiagramNode.from_dict(data["diagram"]))
