# isort: skip_file
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# See the License at http://www.apache.org/licenses/LICENSE-2.0
# Distributed on an "AS IS" BASIS, WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND.

"""
qpml draws query plans as Query Plan Markup Language documents.

To get started:
    import qpml
    text = qpml.to_qpml(plan)

A plan is a tree of PlanNodes, either built by hand, read from a plan description
file with `qpml.load_plan`, or read from a query engine with one of the adapters in
`qpml.adapters`.
"""

import logging
import os
from pathlib import Path
from typing import Optional

# we do a separate check for debug mode here so we don't load the config module just yet
QPML_DEBUG = os.environ.get("QPML_DEBUG") is not None

if QPML_DEBUG:  # pragma: no cover
    logging.getLogger("qpml").setLevel(logging.DEBUG)

# python-dotenv allows us to create an environment file to hold settings.
# Only try to import dotenv if a .env file exists to avoid paying the
# import cost when no environment file is present.
_env_path = Path.cwd() / ".env"
if _env_path.exists():
    import dotenv  # type:ignore

    dotenv.load_dotenv(dotenv_path=_env_path)

from qpml import config

from qpml.__version__ import __author__
from qpml.__version__ import __build__
from qpml.__version__ import __version__

from qpml.loaders import load_plan
from qpml.loaders import plan_from_dict
from qpml.models import DiagramNode
from qpml.models import Document
from qpml.models import FileSystemLocation
from qpml.models import FileSystemRelation
from qpml.models import PlanNode
from qpml.models import PlanStepType
from qpml.models import Relation
from qpml.planner import build
from qpml.planner import build_document
from qpml.planner import build_document_text
from qpml.serde import decode_document
from qpml.serde import encode_document
from qpml.serde import encode_document_json
from qpml.utils.tree import draw_diagram

__all__ = [
    "build",
    "build_document",
    "build_document_text",
    "config",
    "decode_document",
    "draw_diagram",
    "encode_document",
    "encode_document_json",
    "load_plan",
    "plan_from_dict",
    "to_qpml",
    "DiagramNode",
    "Document",
    "FileSystemLocation",
    "FileSystemRelation",
    "PlanNode",
    "PlanStepType",
    "Relation",
]


def to_qpml(plan: PlanNode, strict: Optional[bool] = None) -> str:
    """
    Convert a plan to the text of a QPML document.

    Parameters:
        plan: PlanNode
            The root of the plan.
        strict: bool, optional
            Raise an error for operators without a dedicated title.

    Returns:
        str: The QPML document.
    """
    return build_document_text(plan, strict=strict)
