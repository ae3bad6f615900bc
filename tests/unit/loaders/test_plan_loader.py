import os
import sys

sys.path.insert(1, os.path.join(sys.path[0], "../../.."))

import pytest

from qpml.exceptions import InvalidPlanError
from qpml.loaders import load_plan
from qpml.loaders import plan_from_dict
from qpml.models import FileSystemRelation
from qpml.models import PlanStepType
from qpml.models import Relation
from qpml.planner import build
from tests.tools import find_file


def test_step_types_are_case_insensitive():
    assert plan_from_dict({"type": "FILTER"}).node_type == PlanStepType.Filter
    assert plan_from_dict({"type": "filter"}).node_type == PlanStepType.Filter
    assert plan_from_dict({"type": "projection"}).node_type == PlanStepType.Project
    assert plan_from_dict({"type": "HeapSort"}).node_type == PlanStepType.HeapSort


def test_unknown_step_types_are_kept():
    plan = plan_from_dict({"type": "WindowAggregate", "description": "Window [rank()]"})
    assert plan.node_type == "WindowAggregate"
    assert build(plan).operator == "WindowAggregate"


def test_paths_make_file_system_relations():
    plan = plan_from_dict({"type": "scan", "paths": ["/a.csv", "/b.csv"], "relation": "ab"})
    assert isinstance(plan.relation, FileSystemRelation)
    assert plan.relation.location.root_paths == ["/a.csv", "/b.csv"]
    assert plan.relation.name == "ab"


def test_relation_without_paths():
    plan = plan_from_dict({"type": "scan", "relation": "jdbc:postgresql://db/orders"})
    assert type(plan.relation) is Relation


def test_other_fields_are_copied():
    plan = plan_from_dict({"type": "join", "join_type": "LeftOuter", "condition": "a = b", "nid": 9})
    assert plan.join_type == "LeftOuter"
    assert plan.condition == "a = b"
    assert plan.nid == 9


def test_inputs_keep_order():
    plan = plan_from_dict(
        {"type": "union", "inputs": [{"type": "limit", "nid": n} for n in range(5)]}
    )
    assert [child.nid for child in plan.children] == [0, 1, 2, 3, 4]


def test_single_column_is_a_list():
    plan = plan_from_dict(
        {"type": "project", "columns": "id", "inputs": [{"type": "scan", "paths": "/a.csv"}]}
    )
    assert plan.columns == ["id"]
    assert build(plan).title == "Projection: id"


def test_column_lists_are_kept():
    plan = plan_from_dict({"type": "projection", "columns": ["id", "name"]})
    assert plan.columns == ["id", "name"]


@pytest.mark.parametrize(
    "data",
    [
        [],
        "scan",
        {},
        {"type": ""},
        {"type": 7},
        {"type": "filter", "inputs": {"type": "scan"}},
        {"type": "filter", "inputs": ["scan"]},
        {"type": "scan", "paths": [1, 2]},
        {"type": "scan", "paths": {"a": "b"}},
        {"type": "project", "columns": {"a": "b"}},
        {"type": "project", "columns": 7},
    ],
)
def test_malformed_descriptions(data):
    with pytest.raises(InvalidPlanError):
        plan_from_dict(data)


def test_load_yaml_plan():
    plan = load_plan(find_file("filter_plan.yaml"))
    diagram = build(plan)
    assert diagram.title == "Filter: age > 30"
    assert diagram.inputs[0].title == "orders.csv"


def test_load_json_plan():
    plan = load_plan(find_file("join_plan.json"))
    diagram = build(plan)
    assert diagram.title == "Projection: a.id, b.name"
    join = diagram.inputs[0]
    assert join.title == "Inner Join: a.id = b.id"
    assert [i.operator for i in join.inputs] == ["scan", "Aggregate"]
    assert join.inputs[1].title == "Aggregate [id], [max(name) AS name] (4)"
    assert join.inputs[1].inputs[0].title == "b"


def test_load_unsupported_suffix(tmp_path):
    plan_file = tmp_path / "plan.txt"
    plan_file.write_text("type: scan")
    with pytest.raises(InvalidPlanError):
        load_plan(plan_file)


def test_load_invalid_json(tmp_path):
    plan_file = tmp_path / "plan.json"
    plan_file.write_text("{'type': ")
    with pytest.raises(InvalidPlanError):
        load_plan(plan_file)


def test_load_invalid_yaml(tmp_path):
    plan_file = tmp_path / "plan.yaml"
    plan_file.write_text("type: [scan")
    with pytest.raises(InvalidPlanError):
        load_plan(plan_file)


def test_load_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_plan(tmp_path / "missing.json")


if __name__ == "__main__":  # pragma: no cover
    from tests import run_tests

    run_tests()
