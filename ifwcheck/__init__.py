"""
IFWCheck - update checks for Qt Installer Framework applications

A Python library and CLI that tells an installed application whether a newer
version is available, and starts the IFW maintenance tool to install it.

IFWCheck provides:
  - A GitHub release check (latest release tag vs. the running version)
  - A fallback IFW manifest diff (installed components.xml vs. remote
    Updates.xml)
  - Result codes for every failure mode instead of exceptions
  - Synchronous and background (future-based) checks
  - A fire-and-forget maintenance tool launcher
  - Declarative YAML configuration

Quick Start
-----------
Check for updates:

    $ ifwcheck check --current-version 0.5.0 --github-repo owner/app

Check against an IFW repository and launch the updater if needed:

    $ ifwcheck check --config ifwcheck.yaml --launch

Package Structure
-----------------
cli : module
    Command-line interface with argparse.
checker : module
    UpdateChecker, the check orchestration.
manifest : module
    Regex-based manifest parsing.
reconcile : module
    Component-by-component manifest comparison.
launcher : module
    Maintenance tool launcher.
config : package
    YAML configuration loading and merging.
versioning : package
    Version comparators.
io : package
    HTTP and file collaborators.

Public API
----------
    from ifwcheck import UpdateChecker, load_config, launch_updater
    from ifwcheck import CheckCode, CheckOutcome, CheckSource

Project Information
-------------------
Author: Roger Cibrian
License: Apache-2.0
"""

__version__ = "0.1.0"
__author__ = "Roger Cibrian"
__license__ = "Apache-2.0"
__description__ = "Update checks for Qt Installer Framework applications"

# Re-export commonly used functions for convenience
from ifwcheck.checker import UpdateChecker
from ifwcheck.config import CheckerConfig, load_config
from ifwcheck.launcher import default_updater_path, launch_updater
from ifwcheck.manifest import parse_components, parse_manifest, parse_release_tag
from ifwcheck.reconcile import reconcile
from ifwcheck.results import CheckCode, CheckOutcome, CheckSource
from ifwcheck.versioning import is_newer

__all__ = [
    "__version__",
    "__author__",
    "__license__",
    "__description__",
    "UpdateChecker",
    "CheckerConfig",
    "load_config",
    "default_updater_path",
    "launch_updater",
    "parse_components",
    "parse_manifest",
    "parse_release_tag",
    "reconcile",
    "CheckCode",
    "CheckOutcome",
    "CheckSource",
    "is_newer",
]
