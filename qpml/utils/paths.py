# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# See the License at http://www.apache.org/licenses/LICENSE-2.0
# Distributed on an "AS IS" BASIS, WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND.

"""
Functions to help with handling file paths
"""

import re

# scheme and authority of a URI, e.g. s3a://bucket or file:
_URI_PREFIX = re.compile(r"^[a-zA-Z][a-zA-Z0-9+.-]*:(//[^/]*)?")


def get_name(path: str) -> str:
    """
    Get the final component of a path, the file name for a file or the folder name for
    a folder. Paths can be local (either separator), or URIs with a scheme.

    Parameters:
        path: str
            The path to get the name of.

    Returns:
        str: The name, this is empty for the root of a file system or bucket.
    """
    path = str(path).replace("\\", "/")
    # a Windows drive letter looks like a one-letter scheme
    if not re.match(r"^[a-zA-Z]:/", path):
        path = _URI_PREFIX.sub("", path, count=1)
    path = path.rstrip("/")
    return path.rsplit("/", 1)[-1]
