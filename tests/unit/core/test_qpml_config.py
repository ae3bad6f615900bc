import importlib
import os
import sys

sys.path.insert(1, os.path.join(sys.path[0], "../../.."))

import pytest

from qpml import config
from qpml.config import get
from qpml.config import parse_bool


def test_get_default_value():
    assert get("NON_EXISTENT_KEY", default="default_value") == "default_value"


def test_get_prefers_environment(monkeypatch):
    monkeypatch.setenv("QPML_TEST_SETTING", "from-env")
    assert get("QPML_TEST_SETTING", default="default_value") == "from-env"


@pytest.mark.parametrize(
    "value, expected",
    [
        ("1", True),
        ("true", True),
        ("True", True),
        ("yes", True),
        ("0", False),
        ("false", False),
        ("FALSE", False),
        ("no", False),
        ("", False),
        (True, True),
        (False, False),
        (None, False),
        (1, True),
    ],
)
def test_parse_bool(value, expected):
    assert parse_bool(value) is expected


def test_defaults():
    assert config.QPML_INDENT == int(os.environ.get("QPML_INDENT", 2))
    assert isinstance(config.QPML_STRICT_OPERATORS, bool)
    assert isinstance(config.QPML_DEBUG, bool)


def test_settings_read_from_environment(monkeypatch):
    monkeypatch.setenv("QPML_STRICT_OPERATORS", "true")
    monkeypatch.setenv("QPML_INDENT", "4")
    try:
        importlib.reload(config)
        assert config.QPML_STRICT_OPERATORS is True
        assert config.QPML_INDENT == 4
    finally:
        monkeypatch.delenv("QPML_STRICT_OPERATORS")
        monkeypatch.delenv("QPML_INDENT")
        importlib.reload(config)

    assert config.QPML_INDENT == 2


if __name__ == "__main__":  # pragma: no cover
    from tests import run_tests

    run_tests()
