"""
Pytest configuration and shared fixtures for IFWCheck tests.

This module provides reusable fixtures and test utilities used across
the test suite.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import pytest
import yaml

from ifwcheck.logging import SilentLogger, set_global_logger


@pytest.fixture(autouse=True)
def _silent_global_logger():
    """Reset the global logger so CLI tests don't leak verbosity."""
    set_global_logger(SilentLogger())
    yield
    set_global_logger(SilentLogger())


@pytest.fixture
def tmp_test_dir(tmp_path: Path) -> Path:
    """
    Provide a temporary directory for test artifacts.

    Automatically cleaned up after test completion.
    """
    return tmp_path


@pytest.fixture
def local_manifest_text() -> str:
    """Provide an installed IFW components.xml with two components."""
    return """<?xml version="1.0" encoding="UTF-8"?>
<Packages>
    <ApplicationName>MyApp</ApplicationName>
    <ApplicationVersion>0.5.0</ApplicationVersion>
    <Package>
        <Name>com.vendor.myapp</Name>
        <Title>MyApp</Title>
        <Version>0.5.0</Version>
        <Installed>true</Installed>
    </Package>
    <Package>
        <Name>com.vendor.myapp.plugins</Name>
        <Title>Plugins</Title>
        <Version>1.2.0</Version>
        <Installed>true</Installed>
    </Package>
</Packages>
"""


@pytest.fixture
def remote_manifest_text() -> str:
    """Provide a remote IFW Updates.xml matching the local manifest."""
    return """<Updates>
    <ApplicationName>{AnyApplication}</ApplicationName>
    <ApplicationVersion>1.0.0</ApplicationVersion>
    <Checksum>true</Checksum>
    <PackageUpdate>
        <Name>com.vendor.myapp</Name>
        <DisplayName>MyApp</DisplayName>
        <Version>0.5.0</Version>
        <ReleaseDate>2025-01-10</ReleaseDate>
    </PackageUpdate>
    <PackageUpdate>
        <Name>com.vendor.myapp.plugins</Name>
        <DisplayName>Plugins</DisplayName>
        <Version>1.2.0</Version>
        <ReleaseDate>2025-01-10</ReleaseDate>
    </PackageUpdate>
</Updates>
"""


@pytest.fixture
def release_json() -> str:
    """Provide a GitHub 'latest release' API response body."""
    return """{
  "url": "https://api.github.com/repos/owner/myapp/releases/1",
  "tag_name": "0.6.0",
  "name": "MyApp 0.6.0",
  "prerelease": false,
  "assets": []
}"""


@pytest.fixture
def create_yaml_file(tmp_test_dir: Path):
    """
    Factory fixture for creating temporary YAML files.

    Usage:
        yaml_path = create_yaml_file("ifwcheck.yaml", {"key": "value"})
    """

    def _create(filename: str, data: dict[str, Any]) -> Path:
        path = tmp_test_dir / filename
        path.parent.mkdir(parents=True, exist_ok=True)
        with path.open("w", encoding="utf-8") as f:
            yaml.dump(data, f)
        return path

    return _create
