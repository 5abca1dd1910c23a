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

"""Manifest parsing for IFWCheck.

Extracts a component-name -> version mapping from raw manifest text. The
text is not parsed as XML or JSON: a regex is scanned across it, and each
match contributes one key/value pair. This keeps the parser tolerant of
partial or slightly malformed documents.

Two grammars are built in:

- COMPONENT_PATTERN: Qt Installer Framework manifests (components.xml,
    Updates.xml), matching ``<Name>X</Name> ... <Version>Y</Version>``.
- RELEASE_TAG_PATTERN: GitHub release JSON, matching ``"tag_name": "Y"``.
    The key is the literal ``tag_name``.

Parsing Rules:

- Newlines are removed before matching (the grammars are not newline-aware).
- Matches are found left to right without overlap.
- A repeated key keeps the value of its later occurrence.
- Matches with an empty key or value are skipped.
- No match at all yields an empty mapping, never an exception. Callers
    treat an empty mapping as a parse failure.

Example:
    Parse an installed components file:
        ```python
        from ifwcheck.manifest import parse_components

        components = parse_components(Path("../components.xml").read_text())
        # components returns: {'com.vendor.app': '0.5.0'}
        ```
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
import re
from types import MappingProxyType


@dataclass(frozen=True)
class ManifestPattern:
    """Describes one manifest grammar.

    Attributes:
        regex: Compiled pattern matched repeatedly against the text.
        key_group: Index of the capture group holding the component name.
        value_group: Index of the capture group holding the version.
    """

    regex: re.Pattern[str]
    key_group: int = 1
    value_group: int = 2


COMPONENT_PATTERN = ManifestPattern(
    re.compile(r"<Name>(.*?)</Name>.*?<Version>(.*?)</Version>")
)

RELEASE_TAG_PATTERN = ManifestPattern(re.compile(r'"(tag_name)": "(.*?)"'))


def parse_manifest(
    text: str, pattern: ManifestPattern = COMPONENT_PATTERN
) -> Mapping[str, str]:
    """Extract a component -> version mapping from manifest text.

    Args:
        text: Raw manifest content.
        pattern: Grammar to apply. Defaults to the IFW component grammar.

    Returns:
        A read-only mapping, empty if nothing matched.
    """
    flat = text.replace("\n", "")
    out: dict[str, str] = {}
    for match in pattern.regex.finditer(flat):
        key = match.group(pattern.key_group)
        value = match.group(pattern.value_group)
        if not key or not value:
            continue
        out[key] = value
    return MappingProxyType(out)


def parse_components(text: str) -> Mapping[str, str]:
    """Parse an IFW components/Updates manifest."""
    return parse_manifest(text, COMPONENT_PATTERN)


def parse_release_tag(text: str) -> str | None:
    """Return the release tag from a GitHub release document, or None."""
    tags = parse_manifest(text, RELEASE_TAG_PATTERN)
    return next(iter(tags.values()), None)
