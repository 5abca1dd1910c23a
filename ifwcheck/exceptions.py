# Copyright 2025 Roger Cibrian
#
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

"""Exception hierarchy for IFWCheck.

This module defines the exceptions raised by the configuration loader and the
I/O collaborators:

- ConfigError: Configuration-related errors (YAML parse, missing fields, bad values)
- NetworkError: HTTP transport and status errors (GitHub API, manifest server)

All exceptions inherit from IFWCheckError, allowing users to catch all
IFWCheck errors with a single except clause if needed.

Note:
    UpdateChecker.check() never raises these. It converts collaborator
    failures into a CheckCode on the returned CheckOutcome. The exceptions
    only reach callers that use the loader or fetch helpers directly.

Example:
    Catching configuration errors:
        ```python
        from ifwcheck.config import load_config
        from ifwcheck.exceptions import ConfigError

        try:
            config = load_config(Path("ifwcheck.yaml"))
        except ConfigError as e:
            print(f"Config error: {e}")
        ```
"""

from __future__ import annotations

__all__ = [
    "IFWCheckError",
    "ConfigError",
    "NetworkError",
]


class IFWCheckError(Exception):
    """Base exception for all IFWCheck errors."""

    pass


class ConfigError(IFWCheckError):
    """Raised for configuration-related errors.

    This exception is raised when there are problems with:

    - YAML parsing (syntax errors, non-mapping top level)
    - Missing required fields (current_version)
    - Invalid values (unknown comparator, malformed github repo, bad timeout)
    """

    pass


class NetworkError(IFWCheckError):
    """Raised for HTTP transport or status failures.

    This exception is raised when there are problems with:

    - Connection errors and timeouts
    - Non-2xx responses from the GitHub API or the manifest server
    """

    pass
