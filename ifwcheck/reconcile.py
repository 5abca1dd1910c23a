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

"""Manifest reconciliation for IFWCheck.

Decides whether the remote component manifest holds an update for the
locally installed one. An update is available when any of these is true:

- a local component is missing from the remote manifest,
- a remote component version is newer than the local one,
- the remote manifest lists a component the local one never had.

The scan stops at the first difference; no full diff is computed.
"""

from __future__ import annotations

from collections.abc import Mapping

from ifwcheck.logging import Logger, get_global_logger
from ifwcheck.versioning import Comparator, is_newer as _lexicographic


def reconcile(
    local: Mapping[str, str],
    remote: Mapping[str, str],
    *,
    is_newer: Comparator = _lexicographic,
    logger: Logger | None = None,
) -> bool:
    """Return True if 'remote' holds an update for 'local'.

    Args:
        local: Installed component -> version mapping.
        remote: Published component -> version mapping. Not modified.
        is_newer: Comparator called as is_newer(local_version, remote_version).
        logger: Logger for per-component decisions. Defaults to the global
            logger.

    Returns:
        True if an update is available, False if fully reconciled.
    """
    if logger is None:
        logger = get_global_logger()

    pending = dict(remote)

    for component, local_version in local.items():
        if component not in pending:
            logger.verbose(
                "IFW", f"Local component [{component}] not found on remote"
            )
            return True

        remote_version = pending[component]
        if is_newer(local_version, remote_version):
            logger.verbose(
                "IFW",
                f"Local component [{component} : {local_version}] older than "
                f"remote [{remote_version}]",
            )
            return True

        logger.verbose("IFW", f"Local component [{component}] up-to-date")
        del pending[component]

    if pending:
        first = next(iter(pending))
        logger.verbose("IFW", f"Remote component [{first}] not found in local")
        return True

    logger.verbose("IFW", "No components to be updated")
    return False
