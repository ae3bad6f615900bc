# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
"""
Plan Node Module

The plan tree is owned by the query engine, qpml only reads it. This module describes
what qpml reads from a plan, as a concrete class which engine adapters (and tests) can
build by hand.

Noteworthy features and design choices:

1. Dynamic Attributes: operator-specific fields (join_type, condition, columns,
   relation) are held in an internal dictionary, not every variant has every field.
2. Attribute Defaults: reading a field the node doesn't have returns None.
3. Variant Identity: `node_type` is usually a PlanStepType, engines with operators
   qpml doesn't know about can use any other tag, it is reported as-is.
4. Default Description: `simple_string` is the single-line description used for
   operators without a dedicated title, it embeds the engine's node id if there is one.
"""

import copy
from enum import Enum
from enum import auto
from typing import Any
from typing import Dict
from typing import List
from typing import Optional
from typing import Union


class PlanStepType(int, Enum):
    Scan = auto()  # read a dataset
    Join = auto()  # all joins
    Project = auto()  # field selection
    Filter = auto()  # tuple filtering

    # operators without a dedicated title
    Aggregate = auto()
    AggregateAndGroup = auto()  # group by
    CTE = auto()
    Difference = auto()  # relation intersection
    Distinct = auto()
    Exit = auto()
    Explain = auto()
    FunctionDataset = auto()  # generate series, values, fake
    HeapSort = auto()
    Limit = auto()  # limit and offset
    Order = auto()  # order by
    Set = auto()  # set a variable
    Show = auto()
    ShowColumns = auto()
    Subquery = auto()
    Union = auto()  # appending relations
    Unnest = auto()


class FileSystemLocation:
    """The file system location a relation reads from, one or more root paths."""

    __slots__ = ("root_paths",)

    def __init__(self, root_paths: List[str]):
        self.root_paths = list(root_paths)

    def __repr__(self) -> str:
        return f"<FileSystemLocation {self.root_paths}>"

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, FileSystemLocation):
            return NotImplemented
        return self.root_paths == other.root_paths

    __hash__ = None  # type:ignore


class Relation:
    """
    A relation read by a scan. Relations which aren't backed by files (databases,
    in-memory tables, services) only have a name.
    """

    __slots__ = ("name",)

    def __init__(self, name: Optional[str] = None):
        self.name = name

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.name}>"

    def __eq__(self, other: Any) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self.name == other.name and getattr(self, "location", None) == getattr(
            other, "location", None
        )

    __hash__ = None  # type:ignore


class FileSystemRelation(Relation):
    """A relation read from files, the only kind of relation a scan title is drawn from."""

    __slots__ = ("location",)

    def __init__(self, location: FileSystemLocation, name: Optional[str] = None):
        super().__init__(name)
        self.location = location

    @classmethod
    def from_paths(cls, *paths: str, name: Optional[str] = None) -> "FileSystemRelation":
        return cls(FileSystemLocation(list(paths)), name=name)


class PlanNode:
    __slots__ = ("_internal", "node_type", "children")

    def __init__(
        self,
        node_type: Union[PlanStepType, str, None] = None,
        children: Optional[List["PlanNode"]] = None,
        **kwargs: Any,
    ):
        """
        Initialize a PlanNode with attributes.

        Parameters:
            node_type: PlanStepType or str, optional
                The variant of the node.
            children: list of PlanNode, optional
                The inputs to this step, in data-flow order (for joins, left then right).
            **kwargs: Any
                Operator-specific fields for the node.
        """
        object.__setattr__(self, "_internal", kwargs)
        object.__setattr__(self, "children", list(children or []))
        self.node_type = node_type

    @property
    def properties(self) -> Dict[str, Any]:
        return self._internal

    @property
    def variant(self) -> str:
        """
        The name of the concrete variant of this node, this is the operator tag for
        nodes without a dedicated title.
        """
        if isinstance(self.node_type, Enum):
            return self.node_type.name
        if self.node_type:
            return str(self.node_type)
        return type(self).__name__

    def simple_string(self) -> str:
        """
        Single-line description of the node, with the engine's node identifier when
        the node has one.
        """
        text = self.description or self.variant
        if self.nid is not None:
            return f"{text} ({self.nid})"
        return text

    def __getattr__(self, name: str) -> Any:
        # only called for names not in __slots__, fields never start with an underscore
        if name.startswith("_"):
            raise AttributeError(name)
        return self._internal.get(name)

    def __setattr__(self, name: str, value: Any) -> None:
        if name in PlanNode.__slots__:
            object.__setattr__(self, name, value)
        elif value is None:
            self._internal.pop(name, None)
        else:
            self._internal[name] = value

    def __str__(self) -> str:
        import orjson

        return orjson.dumps(
            {"node_type": self.variant, **self._internal}, default=str
        ).decode()

    def __repr__(self) -> str:
        return f"<PlanNode type={self.variant}>"

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, PlanNode):
            return NotImplemented
        return (
            self.node_type == other.node_type
            and self._internal == other._internal
            and self.children == other.children
        )

    __hash__ = None  # type:ignore

    def copy(self) -> "PlanNode":
        """
        Create an independent deep copy of the node and its inputs.
        """
        return PlanNode(
            self.node_type,
            children=[child.copy() for child in self.children],
            **copy.deepcopy(self._internal),
        )
