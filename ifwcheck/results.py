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

"""Public API return types for IFWCheck.

This module defines the result of an update check. Every failure mode of a
check reduces to exactly one CheckCode, so callers branch on the returned
code instead of catching exceptions.

The outcome dataclass is frozen (immutable) to prevent accidental mutation
of return values.

Example:
    Branching on a check result:
        ```python
        from ifwcheck.checker import UpdateChecker
        from ifwcheck.results import CheckCode

        outcome = UpdateChecker(config).check()
        if outcome.code is CheckCode.SUCCEEDED and outcome.has_newer_version:
            print("Update available")
        ```
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum


class CheckSource(Enum):
    """Which strategy produced a CheckOutcome."""

    VENDOR_FEED = "vendor_feed"
    MANIFEST_DIFF = "manifest_diff"


class CheckCode(IntEnum):
    """Result code of an update check.

    Fetch failures are transient and safe to retry by checking again later.
    Parse failures mean content was retrieved but held no extractable
    entries; callers treat them like fetch failures.
    """

    SUCCEEDED = 0
    UNSPECIFIED_FAILURE = 1
    NO_REMOTE_SOURCE_CONFIGURED = 2
    LOCAL_MANIFEST_FETCH_FAILED = 3
    LOCAL_MANIFEST_PARSE_FAILED = 4
    REMOTE_MANIFEST_FETCH_FAILED = 5
    REMOTE_MANIFEST_PARSE_FAILED = 6


@dataclass(frozen=True)
class CheckOutcome:
    """Result of one update check.

    Attributes:
        source: Strategy that produced the outcome.
        code: Result code. SUCCEEDED is the only code carrying a definitive
            answer in has_newer_version.
        has_newer_version: True if an update is available. Always False
            unless code is SUCCEEDED.
        remote_version: Release tag read from the vendor feed, or None when
            the outcome came from another path.
    """

    source: CheckSource
    code: CheckCode = CheckCode.UNSPECIFIED_FAILURE
    has_newer_version: bool = False
    remote_version: str | None = None

    @property
    def succeeded(self) -> bool:
        return self.code is CheckCode.SUCCEEDED
