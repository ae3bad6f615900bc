# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# See the License at http://www.apache.org/licenses/LICENSE-2.0
# Distributed on an "AS IS" BASIS, WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND.

from qpml.serde.yaml_codec import decode_document
from qpml.serde.yaml_codec import encode_document
from qpml.serde.yaml_codec import encode_document_json

__all__ = ("decode_document", "encode_document", "encode_document_json")
