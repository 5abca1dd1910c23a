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

"""I/O operations for IFWCheck.

Public API:

- http_get_text: GET a URL and return its body
- read_local_manifest: Read the installed components manifest
- github_latest_release_url: GitHub "latest release" API URL
- github_release_headers: GitHub API request headers
"""

from .fetch import (
    github_latest_release_url,
    github_release_headers,
    http_get_text,
    read_local_manifest,
)

__all__ = [
    "github_latest_release_url",
    "github_release_headers",
    "http_get_text",
    "read_local_manifest",
]
