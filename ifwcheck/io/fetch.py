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

"""HTTP and file collaborators for IFWCheck.

This module holds the only code that touches the network or the local
filesystem during a check:

- http_get_text: GET a URL and return the decoded body. Raises NetworkError
    on transport failures and non-2xx responses.
- read_local_manifest: Read the installed components manifest. Returns an
    empty string when the file is absent or unreadable.
- github_latest_release_url / github_release_headers: Build the GitHub
    "latest release" API request.

There is no retry logic: a failed request is reported once and the caller
decides what to do. Timeouts are per-request.

Example:
    Fetch the latest release document:
        ```python
        from ifwcheck.io.fetch import (
            github_latest_release_url,
            github_release_headers,
            http_get_text,
        )

        body = http_get_text(
            github_latest_release_url("owner", "repo"),
            headers=github_release_headers(token=None),
        )
        ```
"""

from __future__ import annotations

from pathlib import Path

import requests

from ifwcheck import __version__
from ifwcheck.exceptions import NetworkError
from ifwcheck.logging import Logger, get_global_logger

GITHUB_API_ROOT = "https://api.github.com"

USER_AGENT = f"ifwcheck/{__version__}"


def github_latest_release_url(owner: str, name: str) -> str:
    """Return the GitHub API URL of a repository's latest release."""
    return f"{GITHUB_API_ROOT}/repos/{owner}/{name}/releases/latest"


def github_release_headers(token: str | None = None) -> dict[str, str]:
    """Build headers for a GitHub API request.

    Args:
        token: Optional personal access token. Raises the rate limit from
            60 to 5000 requests per hour.

    Returns:
        Request headers.
    """
    headers = {
        "Accept": "application/vnd.github+json",
        "X-GitHub-Api-Version": "2022-11-28",
    }
    if token:
        headers["Authorization"] = f"token {token}"
    return headers


def http_get_text(
    url: str,
    headers: dict[str, str] | None = None,
    *,
    timeout: float = 30,
    logger: Logger | None = None,
) -> str:
    """GET 'url' and return the response body as text.

    Args:
        url: URL to fetch.
        headers: Extra request headers.
        timeout: Per-request timeout in seconds.
        logger: Logger for request details. Defaults to the global logger.

    Returns:
        Decoded response body (may be empty).

    Raises:
        NetworkError: On connection errors, timeouts, or non-2xx responses.
    """
    if logger is None:
        logger = get_global_logger()

    request_headers = {"User-Agent": USER_AGENT}
    if headers:
        request_headers.update(headers)

    logger.debug("HTTP", f"GET {url}")

    try:
        response = requests.get(url, headers=request_headers, timeout=timeout)
        response.raise_for_status()
    except requests.exceptions.HTTPError as err:
        status = err.response.status_code if err.response is not None else None
        if status == 404:
            raise NetworkError(f"Not found (404): {url}") from err
        elif status == 403:
            raise NetworkError(
                f"Access denied (403) for {url}. "
                f"GitHub API rate limit may be exceeded; consider using a token."
            ) from err
        else:
            raise NetworkError(f"Request to {url} failed: {err}") from err
    except requests.exceptions.RequestException as err:
        raise NetworkError(f"Failed to fetch {url}: {err}") from err

    logger.debug(
        "HTTP", f"{response.status_code} {url} ({len(response.content)} bytes)"
    )
    return response.text


def read_local_manifest(path: Path, logger: Logger | None = None) -> str:
    """Read the local components manifest.

    Args:
        path: Manifest path. Relative paths resolve against the current
            working directory.
        logger: Logger for the lookup result. Defaults to the global logger.

    Returns:
        The file content, or "" if the file is missing or cannot be read.
    """
    if logger is None:
        logger = get_global_logger()

    absolute = path.absolute()
    if not absolute.exists():
        logger.warning("IFW", f"No local manifest found at [{absolute}]")
        return ""

    try:
        content = absolute.read_text(encoding="utf-8", errors="replace")
    except OSError as err:
        logger.warning("IFW", f"Could not read local manifest [{absolute}]: {err}")
        return ""

    logger.verbose("IFW", f"Local manifest found at [{absolute}]")
    return content
