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

"""
Configuration loading for IFWCheck.

The checker is configured from an optional YAML file layered over built-in
defaults, with command-line overrides applied last.

Configuration Layers
--------------------
1. **Built-in defaults** (DEFAULTS below)
2. **Config file** (e.g. ifwcheck.yaml), optional
3. **Overrides** (dict built from CLI flags), optional

Merge Behavior
--------------
Deep merge with "last wins" semantics:
  - **Dicts**: Recursively merged (keys from overlay override base)
  - **Lists**: Completely replaced (NOT appended/extended)
  - **Scalars**: Overwritten (strings, numbers, booleans)

Environment Expansion
---------------------
``github.token`` and ``remote_manifest_url`` may be written as ``${VAR}``.
The value is read from the environment after loading the nearest ``.env`` file
in or above the working directory (if any) with python-dotenv. An unset variable
yields an empty value.

Example file
------------
    current_version: "0.5.0"
    remote_manifest_url: "https://example.com/repository/Updates.xml"
    comparator: lexicographic
    github:
      owner: "amphaal"
      name: "myapp"
      token: "${GITHUB_TOKEN}"

Error Handling
--------------
- ConfigError: missing file, YAML parse errors, non-mapping top level,
  missing current_version, unknown comparator, malformed values
- All errors are chained with "from err" for better debugging

Examples
--------
    >>> from pathlib import Path
    >>> from ifwcheck.config import load_config
    >>> cfg = load_config(Path("ifwcheck.yaml"))
    >>> cfg.current_version
    '0.5.0'
"""

from __future__ import annotations

from copy import deepcopy
from dataclasses import dataclass
import os
from pathlib import Path
import re
from typing import Any

from dotenv import find_dotenv, load_dotenv
import yaml

from ifwcheck.exceptions import ConfigError
from ifwcheck.logging import get_global_logger
from ifwcheck.versioning import comparator_names

DEFAULT_LOCAL_MANIFEST = "../components.xml"

DEFAULTS: dict[str, Any] = {
    "current_version": None,
    "remote_manifest_url": "",
    "local_manifest_path": DEFAULT_LOCAL_MANIFEST,
    "comparator": "lexicographic",
    "timeout": 30,
    "github": {
        "owner": "",
        "name": "",
        "token": None,
    },
    "updater": {
        "path": None,
    },
}

_ENV_REF = re.compile(r"^\$\{(?P<var>[A-Za-z_][A-Za-z0-9_]*)\}$")


# -------------------------------
# Data types
# -------------------------------


@dataclass(frozen=True)
class CheckerConfig:
    """Effective configuration for an update check.

    Attributes:
        current_version: Version string of the running application.
        remote_manifest_url: URL of the remote IFW manifest ("" disables the
            manifest-diff check).
        local_manifest_path: Installed components manifest. Relative paths
            resolve against the working directory at check time.
        comparator: Comparator name ("lexicographic" or "numeric").
        timeout: Per-request HTTP timeout in seconds.
        github_owner: GitHub repository owner ("" disables the feed check).
        github_name: GitHub repository name ("" disables the feed check).
        github_token: Optional GitHub token.
        updater_path: Maintenance tool path, or None for the default location.
    """

    current_version: str
    remote_manifest_url: str = ""
    local_manifest_path: Path = Path(DEFAULT_LOCAL_MANIFEST)
    comparator: str = "lexicographic"
    timeout: float = 30
    github_owner: str = ""
    github_name: str = ""
    github_token: str | None = None
    updater_path: Path | None = None

    @property
    def has_github_repo(self) -> bool:
        return bool(self.github_owner) and bool(self.github_name)


# -------------------------------
# YAML helpers
# -------------------------------


def _load_yaml_file(p: Path) -> dict[str, Any]:
    """
    Load a YAML config file and return the parsed mapping.

    An empty file is treated as an empty mapping.
    """
    if not p.exists():
        raise ConfigError(f"Config file not found: {p}")
    try:
        with p.open("r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as err:
        raise ConfigError(f"Error parsing YAML: {p}: {err}") from err
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(f"Top-level YAML must be a mapping (dict): {p}")
    return data


# -------------------------------
# Merge logic
# -------------------------------


def _deep_merge_dicts(base: dict[str, Any], overlay: dict[str, Any]) -> dict[str, Any]:
    """
    Deep-merge two dicts with "overlay wins".

    Rules:
      - dict + dict -> deep merge
      - list + list -> overlay REPLACES base (not concatenated)
      - everything else -> overlay overwrites base

    This function does not mutate inputs; returns a new dict.
    """
    result: dict[str, Any] = dict(base)
    for k, v in overlay.items():
        if k in result and isinstance(result[k], dict) and isinstance(v, dict):
            result[k] = _deep_merge_dicts(result[k], v)
        else:
            result[k] = v
    return result


# -------------------------------
# Value helpers
# -------------------------------


def _expand_env(value: Any) -> Any:
    """Replace a "${VAR}" string with the environment value ("" if unset)."""
    if not isinstance(value, str):
        return value
    m = _ENV_REF.match(value.strip())
    if not m:
        return value
    env_var = m.group("var")
    resolved = os.environ.get(env_var, "")
    if not resolved:
        get_global_logger().warning(
            "CONFIG", f"Environment variable {env_var} not set"
        )
    return resolved


def _split_repo(repo: str) -> tuple[str, str]:
    if repo.count("/") != 1:
        raise ConfigError(
            f"Invalid github.repo format: {repo!r}. Expected 'owner/repository'"
        )
    owner, name = repo.split("/")
    return owner.strip(), name.strip()


def _require_str(cfg: dict[str, Any], key: str, label: str) -> str:
    value = cfg.get(key)
    if value is None:
        return ""
    if not isinstance(value, str):
        raise ConfigError(f"{label} must be a string")
    return value.strip()


def _build_config(merged: dict[str, Any]) -> CheckerConfig:
    """Validate the merged mapping and build a CheckerConfig."""
    current_version = merged.get("current_version")
    if current_version is None or (
        isinstance(current_version, str) and current_version.strip() == ""
    ):
        raise ConfigError("Missing required field: current_version")
    if not isinstance(current_version, str):
        raise ConfigError(
            f"current_version must be a string, got {current_version!r}. "
            'Quote the version in YAML, e.g. current_version: "1.10"'
        )
    current_version = current_version.strip()

    comparator = merged.get("comparator") or "lexicographic"
    if comparator not in comparator_names():
        raise ConfigError(
            f"Unknown comparator {comparator!r}. "
            f"Available: {', '.join(comparator_names())}"
        )

    timeout = merged.get("timeout", 30)
    if isinstance(timeout, bool) or not isinstance(timeout, (int, float)):
        raise ConfigError("timeout must be a number")
    if timeout <= 0:
        raise ConfigError("timeout must be positive")

    github = merged.get("github") or {}
    if not isinstance(github, dict):
        raise ConfigError("github must be a mapping")
    if github.get("repo"):
        owner, name = _split_repo(str(github["repo"]))
    else:
        owner = _require_str(github, "owner", "github.owner")
        name = _require_str(github, "name", "github.name")
    token = _expand_env(github.get("token")) or None

    remote_url = _expand_env(merged.get("remote_manifest_url")) or ""
    if not isinstance(remote_url, str):
        raise ConfigError("remote_manifest_url must be a string")

    local_path = merged.get("local_manifest_path") or DEFAULT_LOCAL_MANIFEST

    updater = merged.get("updater") or {}
    if not isinstance(updater, dict):
        raise ConfigError("updater must be a mapping")
    updater_path = updater.get("path")

    return CheckerConfig(
        current_version=current_version,
        remote_manifest_url=remote_url.strip(),
        local_manifest_path=Path(str(local_path)),
        comparator=comparator,
        timeout=timeout,
        github_owner=owner,
        github_name=name,
        github_token=token,
        updater_path=Path(str(updater_path)) if updater_path else None,
    )


# -------------------------------
# Public API
# -------------------------------


def load_config(
    config_path: Path | None = None,
    *,
    overrides: dict[str, Any] | None = None,
) -> CheckerConfig:
    """
    Load the effective checker configuration.

    Steps
      1) Load the nearest .env, searching up from the working directory
         (existing variables win).
      2) Start from DEFAULTS.
      3) Merge the YAML file, if given.
      4) Merge overrides, if given (None values are ignored).
      5) Expand ${VAR} references and validate.

    Returns
      A frozen CheckerConfig.

    Raises
      ConfigError on a missing file, invalid YAML, or invalid values.
    """
    logger = get_global_logger()
    load_dotenv(find_dotenv(usecwd=True))

    merged = deepcopy(DEFAULTS)
    layers = ["defaults"]

    if config_path is not None:
        logger.verbose("CONFIG", f"Loading: {config_path}")
        merged = _deep_merge_dicts(merged, _load_yaml_file(config_path))
        layers.append(config_path.name)

    if overrides:
        merged = _deep_merge_dicts(merged, _drop_none(overrides))
        layers.append("overrides")

    logger.debug("CONFIG", f"Merged {len(layers)} layer(s): {', '.join(layers)}")
    return _build_config(merged)


def _drop_none(d: dict[str, Any]) -> dict[str, Any]:
    """Remove None values recursively so unset CLI flags don't clobber config."""
    out: dict[str, Any] = {}
    for k, v in d.items():
        if v is None:
            continue
        if isinstance(v, dict):
            v = _drop_none(v)
            if not v:
                continue
        out[k] = v
    return out
