#!/usr/bin/env python

# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# See the License at http://www.apache.org/licenses/LICENSE-2.0
# Distributed on an "AS IS" BASIS, WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND.

"""
A command line interface for qpml

    qpml plan.json
    qpml plan.yaml --o plan.qpml --tree
"""

import argparse
import logging
import sys
from typing import List
from typing import Optional

import qpml
from qpml import config
from qpml.exceptions import Error

# Define ANSI color codes
ANSI_RED = "\u001b[31m"
ANSI_RESET = "\u001b[0m"


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Convert a query plan to a QPML document")

    parser.add_argument("plan", type=str, help="Plan description file (.json, .yaml or .yml).")
    parser.add_argument(
        "--o", type=str, default="console", help="Output location", dest="output"
    )
    parser.add_argument(
        "--format",
        choices=("yaml", "json"),
        default="yaml",
        help="Document format, QPML is YAML.",
    )
    parser.add_argument(
        "--tree", action="store_true", default=False, help="Also print the plan as a tree."
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        default=config.QPML_STRICT_OPERATORS,
        help="Fail on operators without a dedicated title.",
    )

    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)

    if config.QPML_DEBUG:  # pragma: no cover
        logging.basicConfig(level=logging.DEBUG)

    try:
        plan = qpml.load_plan(args.plan)
        document = qpml.build_document(plan, strict=args.strict)
        if args.format == "json":
            text = qpml.encode_document_json(document) + "\n"
        else:
            text = qpml.encode_document(document)
    except (Error, OSError) as err:
        print(f"{ANSI_RED}Error{ANSI_RESET}: {err}", file=sys.stderr)
        return 1

    if args.tree:
        print(qpml.draw_diagram(document.diagram))

    if args.output == "console":
        print(text, end="")
    else:
        with open(args.output, "w", encoding="UTF8") as output_file:
            output_file.write(text)

    return 0


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
