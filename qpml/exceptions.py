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
Bespoke error types for qpml.

Exception Hierarchy:

Exception
 ├── MissingDependencyError
 └── Error
     ├── DocumentError
     └── PlanError
         ├── InvalidPlanError
         ├── UnknownOperatorError
         └── UnsupportedRelationError (also a TypeError)

Errors raised by the YAML encoder are not wrapped, they reach the caller as
they were raised.
"""

from typing import Optional


# ======================== Begin Codebase Errors ========================
class MissingDependencyError(Exception):  # pragma: no cover
    def __init__(self, dependency: str):
        self.dependency = dependency
        message = f"No module named '{dependency}' can be found, please install or include in requirements.txt"
        super().__init__(message)


# ======================== End Codebase Errors ==========================


# ======================== Begin qpml Superclasses ========================
# These should not be thrown directly
class Error(Exception):
    """
    Base class of all other qpml errors. You can use this to catch all errors with
    one single except statement.
    """


class PlanError(Error):
    """Superclass for errors about the plan being converted."""


# ======================== End qpml Superclasses ==========================


class InvalidPlanError(PlanError):
    """Exception raised when a plan, or a plan description, is not well-formed."""

    def __init__(self, message: str = None, node: Optional[str] = None):
        self.node = node
        if node is not None and message is not None:
            message = f"{message} (at '{node}')"
        super().__init__(message)


class UnknownOperatorError(PlanError):
    """
    Exception raised in strict mode when a plan node is not one of the operators with a
    dedicated title, rather than being tagged with its variant name.
    """

    def __init__(self, variant: str):
        self.variant = variant
        message = f"Plan operator '{variant}' is not recognized, strict operator checking is enabled."
        super().__init__(message)


class UnsupportedRelationError(PlanError, TypeError):
    """
    Exception raised when a scan is backed by a relation which is not read from a
    file system location, the title of a scan is always the name of a file or folder.
    """

    def __init__(self, relation=None):
        self.relation = relation
        kind = type(relation).__name__
        message = f"Scan relation of type '{kind}' cannot be cast to a file system relation."
        super().__init__(message)


class DocumentError(Error):
    """Exception raised when a QPML document cannot be read back into a diagram."""
