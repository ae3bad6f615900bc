# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# See the License at http://www.apache.org/licenses/LICENSE-2.0
# Distributed on an "AS IS" BASIS, WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND.

"""
Build plans from descriptions held in JSON or YAML files, so plans captured from an
engine can be converted without the engine.

    type: filter
    condition: age > 30
    inputs:
      - type: scan
        paths: [/data/orders.csv]

`type` is a PlanStepType name (any case, 'projection' is accepted for 'project'),
other names are kept as they are and treated as operators without a dedicated title.
A scan reads files when it has `paths`, a scan with a `relation` name reads from
something other than files.
"""

import logging
from pathlib import Path
from typing import Any
from typing import Dict
from typing import Union

import orjson
import yaml

from qpml.exceptions import InvalidPlanError
from qpml.models import FileSystemRelation
from qpml.models import PlanNode
from qpml.models import PlanStepType
from qpml.models import Relation

logger = logging.getLogger(__name__)

_STEP_TYPES = {step.name.lower(): step for step in PlanStepType}
_STEP_TYPES["projection"] = PlanStepType.Project

# keys which are not copied onto the node as they are
_STRUCTURAL_KEYS = {"type", "node_type", "inputs", "children", "paths", "relation"}


def _step_type(name: Any) -> Union[PlanStepType, str]:
    if not isinstance(name, str) or not name.strip():
        raise InvalidPlanError(f"Plan node 'type' must be a non-empty string, found '{name}'")
    return _STEP_TYPES.get(name.strip().lower(), name.strip())


def _relation(data: Dict[str, Any]):
    paths = data.get("paths")
    if paths is not None:
        if isinstance(paths, str):
            paths = [paths]
        if not isinstance(paths, list) or not all(isinstance(p, str) for p in paths):
            raise InvalidPlanError("Scan 'paths' must be a path or a list of paths")
        return FileSystemRelation.from_paths(*paths, name=data.get("relation"))
    if data.get("relation") is not None:
        return Relation(str(data["relation"]))
    return None


def _columns(data: Dict[str, Any]):
    columns = data["columns"]
    if isinstance(columns, str):
        return [columns]
    if not isinstance(columns, list):
        raise InvalidPlanError(
            "Projection 'columns' must be a column or a list of columns", node=str(data.get("type"))
        )
    return columns


def plan_from_dict(data: Dict[str, Any]) -> PlanNode:
    """
    Build a plan from nested dictionaries.

    Parameters:
        data: dict
            The description of the root of the plan.

    Returns:
        PlanNode: The root of the plan.
    """
    if not isinstance(data, dict):
        raise InvalidPlanError(f"Plan nodes must be described by mappings, found '{type(data).__name__}'")

    inputs = data.get("inputs") or []
    if not isinstance(inputs, list):
        raise InvalidPlanError("Plan node 'inputs' must be a list", node=str(data.get("type")))

    fields = {key: value for key, value in data.items() if key not in _STRUCTURAL_KEYS}
    if fields.get("columns") is not None:
        fields["columns"] = _columns(data)
    relation = _relation(data)
    if relation is not None:
        fields["relation"] = relation

    return PlanNode(
        _step_type(data.get("type")),
        children=[plan_from_dict(child) for child in inputs],
        **fields,
    )


def load_plan(path: Union[str, Path]) -> PlanNode:
    """
    Read a plan description from a .json, .yaml or .yml file.
    """
    path = Path(path)
    suffix = path.suffix.lower()
    logger.debug("Loading plan description from %s", path)

    with open(path, "rb") as plan_file:
        content = plan_file.read()

    if suffix == ".json":
        try:
            data = orjson.loads(content)
        except orjson.JSONDecodeError as err:
            raise InvalidPlanError(f"Plan file '{path}' is not valid JSON - {err}") from err
    elif suffix in (".yaml", ".yml"):
        try:
            data = yaml.safe_load(content)
        except yaml.YAMLError as err:
            raise InvalidPlanError(f"Plan file '{path}' is not valid YAML - {err}") from err
    else:
        raise InvalidPlanError(f"Plan files must be JSON or YAML, '{path.name}' is neither")

    return plan_from_dict(data)
