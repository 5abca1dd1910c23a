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

"""Configuration loading for IFWCheck.

Settings are layered: built-in defaults, then an optional YAML file, then
overrides from the command line. Dicts merge recursively, lists and scalars
are replaced (last wins).

Public API:

- load_config: Load and validate the checker configuration
- CheckerConfig: Frozen dataclass holding the effective settings

Example:
    Basic usage:

        from pathlib import Path
        from ifwcheck.config import load_config

        config = load_config(Path("ifwcheck.yaml"))
        print(config.current_version)  # "0.5.0"

"""

from .loader import CheckerConfig, load_config

__all__ = ["CheckerConfig", "load_config"]
