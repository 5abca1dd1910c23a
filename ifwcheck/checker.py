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

"""Update check orchestration for IFWCheck.

This module sequences the two check strategies and turns every collaborator
failure into a CheckCode. It never raises to callers.

Two-Path Architecture:

- **Vendor Feed Path** (tried first): Fetch the latest GitHub release of the
    configured repository, extract its tag, and compare it with the running
    application's current_version. A success here is final and the
    manifest-diff path is skipped entirely. Any failure (repository not
    configured, fetch error, no tag) is best-effort: it is logged and the
    check falls through to the second path.

- **Manifest Diff Path** (fallback): Read the installed IFW components
    manifest (../components.xml by default), fetch the remote IFW manifest,
    parse both, and reconcile them component by component. Every step that
    fails returns immediately with its own code.

Design Principles:

- UpdateChecker holds configuration only; each check() is independent and
    safe to run from any thread
- Collaborators (HTTP GET, file read) are injectable for testing
- No retries: callers check again later on transient failures
- Asynchronous use goes through concurrent.futures, layered over check()

Example:
    Synchronous check:
        ```python
        from pathlib import Path
        from ifwcheck.checker import UpdateChecker
        from ifwcheck.config import load_config

        checker = UpdateChecker(load_config(Path("ifwcheck.yaml")))
        outcome = checker.check()
        if outcome.succeeded and outcome.has_newer_version:
            print("Update available")
        ```

    Background check:
        ```python
        future = checker.check_async()
        # ... keep the UI responsive ...
        outcome = future.result()
        ```

"""

from __future__ import annotations

from collections.abc import Callable
from concurrent.futures import Executor, Future, ThreadPoolExecutor
from pathlib import Path

from ifwcheck.config import CheckerConfig
from ifwcheck.exceptions import IFWCheckError
from ifwcheck.io.fetch import (
    github_latest_release_url,
    github_release_headers,
    http_get_text,
    read_local_manifest,
)
from ifwcheck.logging import Logger, get_global_logger
from ifwcheck.manifest import parse_components, parse_release_tag
from ifwcheck.reconcile import reconcile
from ifwcheck.results import CheckCode, CheckOutcome, CheckSource
from ifwcheck.versioning import get_comparator

HttpGet = Callable[[str, dict[str, str]], str]
ReadFile = Callable[[Path], str]


class UpdateChecker:
    """Decides whether a newer version of the application is available.

    Attributes:
        config: Effective checker configuration.

    Example:
        Inject fake collaborators in tests:
            ```python
            checker = UpdateChecker(
                config,
                http_get=lambda url, headers: "",
                read_file=lambda path: "",
            )
            outcome = checker.check()
            # outcome.source is CheckSource.MANIFEST_DIFF
            ```

    """

    def __init__(
        self,
        config: CheckerConfig,
        *,
        http_get: HttpGet | None = None,
        read_file: ReadFile | None = None,
        logger: Logger | None = None,
    ) -> None:
        """Initialize the checker.

        Args:
            config: Effective checker configuration.
            http_get: Callable(url, headers) -> body. Defaults to a requests
                GET with the configured timeout. May raise IFWCheckError.
            read_file: Callable(path) -> content. Defaults to
                read_local_manifest.
            logger: Logger instance. Defaults to the global logger at call
                time.

        """
        self.config = config
        self._http_get = http_get
        self._read_file = read_file
        self._logger = logger
        self._is_newer = get_comparator(config.comparator)

    # -------------------------------
    # Collaborators
    # -------------------------------

    @property
    def logger(self) -> Logger:
        return self._logger if self._logger is not None else get_global_logger()

    def _fetch(self, url: str, headers: dict[str, str]) -> str:
        """GET 'url', returning "" on any transport failure."""
        try:
            if self._http_get is not None:
                return self._http_get(url, headers)
            return http_get_text(
                url, headers, timeout=self.config.timeout, logger=self.logger
            )
        except IFWCheckError as err:
            self.logger.debug("HTTP", str(err))
            return ""

    def _read_local(self, path: Path) -> str:
        if self._read_file is not None:
            return self._read_file(path)
        return read_local_manifest(path, logger=self.logger)

    # -------------------------------
    # Public API
    # -------------------------------

    def check(self) -> CheckOutcome:
        """Run the vendor-feed check, falling back to the manifest diff.

        Returns:
            The outcome of the first path that succeeded, or the manifest-diff
                failure outcome.

        """
        self.logger.verbose(
            "CHECK", f'Local version is "{self.config.current_version}"'
        )
        self.logger.verbose("CHECK", "Checking updates...")

        try:
            vendor = self.check_vendor_feed()
        except Exception as err:
            self.logger.warning("GITHUB", f"Unexpected error during check: {err}")
            vendor = CheckOutcome(CheckSource.VENDOR_FEED)
        if vendor.succeeded:
            return vendor
        self.logger.debug(
            "CHECK",
            f"Vendor feed check ended with {vendor.code.name}, "
            f"falling back to manifest diff",
        )

        try:
            return self.check_manifest_diff()
        except Exception as err:
            self.logger.warning("IFW", f"Unexpected error during check: {err}")
            return CheckOutcome(CheckSource.MANIFEST_DIFF)

    def check_async(self, executor: Executor | None = None) -> Future[CheckOutcome]:
        """Run check() in the background.

        Args:
            executor: Executor to submit to. When None, a single-worker
                thread pool is created for this call.

        Returns:
            A future resolving to the CheckOutcome.

        """
        if executor is not None:
            return executor.submit(self.check)

        pool = ThreadPoolExecutor(max_workers=1, thread_name_prefix="ifwcheck")
        try:
            return pool.submit(self.check)
        finally:
            pool.shutdown(wait=False)

    def check_vendor_feed(self) -> CheckOutcome:
        """Compare current_version with the latest GitHub release tag."""
        cfg = self.config
        logger = self.logger

        if not cfg.has_github_repo:
            logger.verbose(
                "GITHUB",
                "github.owner or github.name not configured, cannot check "
                "updates against the official repository",
            )
            return CheckOutcome(
                CheckSource.VENDOR_FEED, CheckCode.NO_REMOTE_SOURCE_CONFIGURED
            )

        url = github_latest_release_url(cfg.github_owner, cfg.github_name)
        logger.verbose("GITHUB", f"Downloading remote releases manifest [{url}]")
        body = self._fetch(url, github_release_headers(cfg.github_token))
        if not body:
            logger.warning("GITHUB", f"Could not download remote manifest [{url}]")
            return CheckOutcome(
                CheckSource.VENDOR_FEED, CheckCode.REMOTE_MANIFEST_FETCH_FAILED
            )

        remote_version = parse_release_tag(body)
        if remote_version is None:
            logger.warning("GITHUB", f"No remote version found in [{url}]")
            return CheckOutcome(
                CheckSource.VENDOR_FEED, CheckCode.REMOTE_MANIFEST_PARSE_FAILED
            )

        logger.verbose("GITHUB", f"Remote version {remote_version}")
        newer = self._is_newer(cfg.current_version, remote_version)
        if newer:
            logger.verbose(
                "GITHUB",
                f"Local version [{cfg.current_version}] older than remote "
                f"[{remote_version}]",
            )
        else:
            logger.verbose("GITHUB", "No components to be updated")

        return CheckOutcome(
            CheckSource.VENDOR_FEED,
            CheckCode.SUCCEEDED,
            has_newer_version=newer,
            remote_version=remote_version,
        )

    def check_manifest_diff(self) -> CheckOutcome:
        """Reconcile the local IFW manifest against the remote one."""
        cfg = self.config
        logger = self.logger
        source = CheckSource.MANIFEST_DIFF

        if not cfg.remote_manifest_url:
            logger.warning("IFW", "No remote manifest url configured")
            return CheckOutcome(source, CheckCode.NO_REMOTE_SOURCE_CONFIGURED)

        local_raw = self._read_local(cfg.local_manifest_path)
        if not local_raw:
            logger.warning(
                "IFW",
                f"Error while fetching local manifest [{cfg.local_manifest_path}]",
            )
            return CheckOutcome(source, CheckCode.LOCAL_MANIFEST_FETCH_FAILED)

        local = parse_components(local_raw)
        if not local:
            logger.warning(
                "IFW",
                f"No components found in local manifest [{cfg.local_manifest_path}]",
            )
            return CheckOutcome(source, CheckCode.LOCAL_MANIFEST_PARSE_FAILED)

        url = cfg.remote_manifest_url
        logger.verbose("IFW", f"Downloading remote manifest [{url}]")
        remote_raw = self._fetch(url, {})
        if not remote_raw:
            logger.warning("IFW", f"Error while fetching remote manifest [{url}]")
            return CheckOutcome(source, CheckCode.REMOTE_MANIFEST_FETCH_FAILED)

        remote = parse_components(remote_raw)
        if not remote:
            logger.warning("IFW", f"No components found in remote manifest [{url}]")
            return CheckOutcome(source, CheckCode.REMOTE_MANIFEST_PARSE_FAILED)

        newer = reconcile(local, remote, is_newer=self._is_newer, logger=logger)
        return CheckOutcome(source, CheckCode.SUCCEEDED, has_newer_version=newer)
