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

import logging
from os import environ
from pathlib import Path

import yaml

logger = logging.getLogger(__name__)

_config_values: dict = {}

# we need a preliminary version of this variable
_QPML_DEBUG = environ.get("QPML_DEBUG") is not None


def parse_bool(value) -> bool:
    """
    Interpret a configuration value as a boolean, environment variables are always
    strings so "false", "0" and "no" need to be treated as False.
    """
    if isinstance(value, str):
        return value.strip().lower() not in ("", "0", "false", "no", "off", "none")
    return bool(value)


try:  # pragma: no cover
    _config_path = Path(".") / "qpml.yaml"
    if _config_path.exists():
        with open(_config_path, "r", encoding="UTF8") as _config_file:
            _config_values = yaml.safe_load(_config_file) or {}
        if _QPML_DEBUG:
            logger.debug("Loading config from %s", _config_path)
except Exception as exception:  # pragma: no cover # it doesn't matter why - just use the defaults
    _config_values = {}
    if _QPML_DEBUG:
        logger.debug("Config file %s not used - %s", _config_path, exception)


def get(key, default=None):
    value = environ.get(key)
    if value is None:
        value = _config_values.get(key, default)
    return value


# fmt:off

# debug mode
QPML_DEBUG: bool = parse_bool(get("QPML_DEBUG", False))
# fail on plan operators without a dedicated title instead of tagging them with their variant name
QPML_STRICT_OPERATORS: bool = parse_bool(get("QPML_STRICT_OPERATORS", False))
# number of spaces to indent each level of the YAML document
QPML_INDENT: int = int(get("QPML_INDENT", 2))
# deepest plan, in nodes from the root to a leaf, that can be written as a document
QPML_MAX_DOCUMENT_DEPTH: int = int(get("QPML_MAX_DOCUMENT_DEPTH", 100))

# fmt:on
