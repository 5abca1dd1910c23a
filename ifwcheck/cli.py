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

"""Command-line interface for IFWCheck.

This module provides the main CLI entry point for the ifwcheck tool.

Commands:

    check: Check whether a newer version is available
    launch: Start the maintenance tool in updater mode

Example:
    Check against a GitHub repository:
        ```bash
        $ ifwcheck check --current-version 0.5.0 --github-repo owner/app
        ```

    Check with a config file and launch the updater when needed:
        ```bash
        $ ifwcheck check --config ifwcheck.yaml --launch
        ```

    Launch the maintenance tool directly:
        ```bash
        $ ifwcheck launch --path /opt/MyApp/maintenancetool
        ```

Exit Codes:

- 0: Success (check completed, or updater launched)
- 1: Error (configuration error, check failure, or updater not found)

Note:
    The CLI uses argparse for command parsing.
    Each command has its own handler function (cmd_<command>).
    Verbose mode shows full tracebacks on errors for debugging.

"""

from __future__ import annotations

import argparse
from importlib.metadata import PackageNotFoundError, version
from pathlib import Path
import sys
from typing import Any

from ifwcheck import __version__
from ifwcheck.checker import UpdateChecker
from ifwcheck.config import load_config
from ifwcheck.exceptions import ConfigError
from ifwcheck.launcher import default_updater_path, launch_updater
from ifwcheck.logging import get_logger, set_global_logger
from ifwcheck.versioning import comparator_names


def _installed_version() -> str:
    try:
        return version("ifwcheck")
    except PackageNotFoundError:
        return __version__


def _overrides_from_args(args: argparse.Namespace) -> dict[str, Any]:
    """Translate CLI flags into a config overrides mapping."""
    github: dict[str, Any] = {}
    if args.github_repo:
        github["repo"] = args.github_repo
    if args.github_token:
        github["token"] = args.github_token
    return {
        "current_version": args.current_version,
        "remote_manifest_url": args.remote_url,
        "local_manifest_path": args.local_manifest,
        "comparator": args.comparator,
        "github": github,
    }


def cmd_check(args: argparse.Namespace) -> int:
    """Handler for 'ifwcheck check' command.

    Loads the configuration, runs the vendor-feed check with manifest-diff
    fallback, and prints the outcome. With --launch, starts the maintenance
    tool when an update is available.

    Args:
        args: Parsed command-line arguments.

    Returns:
        Exit code (0 when the check succeeded, 1 otherwise).

    """
    logger = get_logger(verbose=args.verbose, debug=args.debug)
    set_global_logger(logger)

    config_path = Path(args.config).resolve() if args.config else None

    logger.step(1, 2, "Loading configuration...")

    try:
        config = load_config(config_path, overrides=_overrides_from_args(args))
    except ConfigError as err:
        print(f"Error: {err}")
        if args.verbose or args.debug:
            import traceback

            traceback.print_exc()
        return 1

    logger.step(2, 2, "Checking updates...")
    outcome = UpdateChecker(config).check()
    print()

    print("=" * 70)
    print("UPDATE CHECK RESULTS")
    print("=" * 70)
    print(f"Current Version: {config.current_version}")
    print(f"Source:          {outcome.source.value}")
    print(f"Result:          {outcome.code.name}")
    if outcome.remote_version:
        print(f"Remote Version:  {outcome.remote_version}")
    if outcome.succeeded:
        print(f"Update:          {'available' if outcome.has_newer_version else 'none'}")
    print("=" * 70)
    print()

    if not outcome.succeeded:
        print(f"[FAILED] Could not determine update state ({outcome.code.name}).")
        return 1

    if not outcome.has_newer_version:
        print("[SUCCESS] Application is up to date.")
        return 0

    print("[SUCCESS] A newer version is available.")
    if args.launch:
        if not launch_updater(config.updater_path):
            print("[FAILED] Maintenance tool not found or could not be started.")
            return 1
        print("[SUCCESS] Maintenance tool launched.")
    return 0


def cmd_launch(args: argparse.Namespace) -> int:
    """Handler for 'ifwcheck launch' command.

    Args:
        args: Parsed command-line arguments containing the optional
            maintenance tool path.

    Returns:
        Exit code (0 when launched, 1 if the tool was not found or failed
        to start).

    """
    logger = get_logger(verbose=args.verbose, debug=False)
    set_global_logger(logger)

    path = Path(args.path) if args.path else default_updater_path()
    print(f"Maintenance tool: {path}")

    if not launch_updater(path):
        print("[FAILED] Maintenance tool not found or could not be started.")
        return 1

    print("[SUCCESS] Maintenance tool launched.")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ifwcheck",
        description="IFWCheck - update checks for Qt Installer Framework applications",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"ifwcheck {_installed_version()}",
    )

    subparsers = parser.add_subparsers(
        dest="command",
        help="Available commands",
        required=True,
    )

    # 'check' command
    parser_check = subparsers.add_parser(
        "check",
        help="Check whether a newer version is available",
        description="Check the GitHub release feed, falling back to an IFW manifest diff.",
    )
    parser_check.add_argument(
        "--config",
        default=None,
        help="Path to the YAML config file",
    )
    parser_check.add_argument(
        "--current-version",
        default=None,
        help="Version of the running application (overrides config)",
    )
    parser_check.add_argument(
        "--remote-url",
        default=None,
        help="URL of the remote IFW manifest (overrides config)",
    )
    parser_check.add_argument(
        "--local-manifest",
        default=None,
        help="Path to the installed components manifest (default: ../components.xml)",
    )
    parser_check.add_argument(
        "--github-repo",
        default=None,
        help="GitHub repository in 'owner/name' format (overrides config)",
    )
    parser_check.add_argument(
        "--github-token",
        default=None,
        help="GitHub token for higher API rate limits",
    )
    parser_check.add_argument(
        "--comparator",
        default=None,
        choices=comparator_names(),
        help="Version comparator (default: lexicographic)",
    )
    parser_check.add_argument(
        "--launch",
        action="store_true",
        help="Launch the maintenance tool if an update is available",
    )
    parser_check.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Show progress and high-level status updates",
    )
    parser_check.add_argument(
        "-d",
        "--debug",
        action="store_true",
        help="Show detailed debugging output (implies --verbose)",
    )
    parser_check.set_defaults(func=cmd_check)

    # 'launch' command
    parser_launch = subparsers.add_parser(
        "launch",
        help="Start the maintenance tool in updater mode",
        description="Start the IFW maintenance tool with --updater and return immediately.",
    )
    parser_launch.add_argument(
        "--path",
        default=None,
        help="Maintenance tool path (default: ../maintenancetool[.exe])",
    )
    parser_launch.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Show launch details",
    )
    parser_launch.set_defaults(func=cmd_launch)

    return parser


def main(argv: list[str] | None = None) -> None:
    """Main entry point for the ifwcheck CLI.

    This function is registered as the 'ifwcheck' console script in
    pyproject.toml.
    """
    args = build_parser().parse_args(argv)
    exit_code = args.func(args)
    sys.exit(exit_code)


if __name__ == "__main__":
    main()
