# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# See the License at http://www.apache.org/licenses/LICENSE-2.0
# Distributed on an "AS IS" BASIS, WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND.

"""
Reading and writing QPML documents.

Documents are block-style YAML, keys are written in declaration order:

    diagram:
      title: 'Filter: age > 30'
      operator: filter
      inputs:
      - title: orders.csv
        operator: scan
        inputs: []

Quoting and escaping are PyYAML's defaults. Errors from the encoder are not caught.
"""

from typing import Optional

import orjson
import yaml

from qpml import config
from qpml.exceptions import DocumentError
from qpml.models import Document


def encode_document(document: Document, indent: Optional[int] = None) -> str:
    if indent is None:
        indent = config.QPML_INDENT
    return yaml.safe_dump(
        document.to_dict(),
        default_flow_style=False,
        sort_keys=False,
        allow_unicode=True,
        indent=indent,
    )


def decode_document(text: str) -> Document:
    """
    Read a QPML document back into a Document.

    Raises:
        DocumentError: the text isn't YAML, or isn't shaped like a QPML document.
    """
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as err:
        raise DocumentError(f"QPML document is not valid YAML - {err}") from err
    return Document.from_dict(data)


def encode_document_json(document: Document) -> str:
    """The same document as indented JSON."""
    return orjson.dumps(document.to_dict(), option=orjson.OPT_INDENT_2).decode()
