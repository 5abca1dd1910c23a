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

"""Maintenance tool launcher for IFWCheck.

Starts the Qt Installer Framework maintenance tool in updater mode. The
process is not waited on: the caller is expected to exit right after a
successful launch so the tool can replace the application's files.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
import os
from pathlib import Path
import subprocess
import sys
from typing import Any

from ifwcheck.logging import Logger, get_global_logger

UPDATER_ARGS = ("--updater",)

Spawn = Callable[[Sequence[str]], Any]


def default_updater_path(
    cwd: Path | None = None, platform: str | None = None
) -> Path:
    """Return the expected maintenance tool location.

    The tool sits in the installation root, one level above the working
    directory of the running application.

    Args:
        cwd: Working directory. Defaults to Path.cwd().
        platform: Platform string. Defaults to sys.platform.

    Returns:
        Path to maintenancetool.exe on Windows, maintenancetool elsewhere.
    """
    cwd = cwd if cwd is not None else Path.cwd()
    platform = platform if platform is not None else sys.platform
    name = "maintenancetool.exe" if platform == "win32" else "maintenancetool"
    return cwd.parent / name


def launch_updater(
    path: Path | None = None,
    *,
    spawn: Spawn = subprocess.Popen,
    logger: Logger | None = None,
) -> bool:
    """Launch the maintenance tool without waiting for it.

    Args:
        path: Maintenance tool path. Defaults to default_updater_path().
        spawn: Process launcher called with the argument vector.
        logger: Logger instance. Defaults to the global logger.

    Returns:
        True if the tool was launched, False if it does not exist or could
        not be started.
    """
    if logger is None:
        logger = get_global_logger()

    updater_path = path if path is not None else default_updater_path()
    if not updater_path.exists():
        logger.warning(
            "LAUNCH", f"Cannot find updater at [{updater_path}], aborting"
        )
        return False

    logger.verbose("LAUNCH", f"Launching updater [{updater_path}] ...")
    try:
        spawn([os.fspath(updater_path), *UPDATER_ARGS])
    except OSError as err:
        logger.warning("LAUNCH", f"Cannot start updater [{updater_path}]: {err}")
        return False
    logger.verbose("LAUNCH", "Updater started, caller should quit now")
    return True
