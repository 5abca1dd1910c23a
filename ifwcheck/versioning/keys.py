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

"""Core version comparison utilities for IFWCheck.

This module is format-agnostic: it does NOT download or read files.
It only compares version strings.

Two comparators are available, both with the signature
``(local, remote) -> bool`` answering "is remote newer than local?":

- lexicographic (default): plain string ordering, ``local < remote``.
  "0.5.10" sorts BEFORE "0.5.9" under this rule.
- numeric: dotted segments compared as integers ("0.5.10" > "0.5.9").
"""

from __future__ import annotations

from collections.abc import Callable
import re

from ifwcheck.exceptions import ConfigError

Comparator = Callable[[str, str], bool]

_NUM_SEP = re.compile(r"[._-]")


def is_newer(local: str, remote: str) -> bool:
    """Return True iff 'remote' sorts after 'local' as a plain string.

    No numeric-segment splitting is performed: is_newer("0.5.0", "0.5.10")
    is True, is_newer("0.5.9", "0.5.10") is False.
    """
    return local < remote


def _segment_key(s: str) -> tuple[tuple[int, object], ...]:
    """Split a version into comparable segments.

    Numeric segments become (0, int), text segments (1, str) so numbers
    sort before text at the same position. A leading "v" is dropped.
    """
    s2 = s.strip().lower()
    if s2.startswith("v"):
        s2 = s2[1:]
    out: list[tuple[int, object]] = []
    for part in _NUM_SEP.split(s2):
        if not part:
            continue
        if part.isdigit():
            out.append((0, int(part)))
        else:
            out.append((1, part))
    return tuple(out)


def compare_numeric(a: str, b: str) -> int:
    """Compare two versions segment by segment.

    Returns -1 if a < b, 0 if equal, 1 if a > b. Missing trailing segments
    count as zero, so "1.0" == "1.0.0".
    """
    ka = _segment_key(a)
    kb = _segment_key(b)
    n = max(len(ka), len(kb))
    ka = ka + ((0, 0),) * (n - len(ka))
    kb = kb + ((0, 0),) * (n - len(kb))
    return (ka > kb) - (ka < kb)


def is_newer_numeric(local: str, remote: str) -> bool:
    """Return True iff 'remote' is newer than 'local' by numeric segments."""
    return compare_numeric(remote, local) > 0


_COMPARATORS: dict[str, Comparator] = {
    "lexicographic": is_newer,
    "numeric": is_newer_numeric,
}


def get_comparator(name: str) -> Comparator:
    """Look up a comparator by its configuration name.

    Args:
        name: "lexicographic" or "numeric".

    Returns:
        The comparator function.

    Raises:
        ConfigError: If the name is unknown.
    """
    try:
        return _COMPARATORS[name]
    except KeyError as err:
        available = ", ".join(sorted(_COMPARATORS))
        raise ConfigError(
            f"Unknown comparator {name!r}. Available: {available}"
        ) from err


def comparator_names() -> list[str]:
    """Return the registered comparator names, sorted."""
    return sorted(_COMPARATORS)
