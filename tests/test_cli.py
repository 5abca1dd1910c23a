"""
Tests for ifwcheck.cli module.

Tests the command-line interface including:
- check exit codes and output
- --launch behavior
- launch command
"""

from __future__ import annotations

from unittest.mock import patch

import pytest
import requests_mock

from ifwcheck.cli import main

RELEASE_URL = "https://api.github.com/repos/owner/myapp/releases/latest"


def _run(argv: list[str]) -> int:
    with pytest.raises(SystemExit) as exc_info:
        main(argv)
    return exc_info.value.code


class TestCheckCommand:
    """Tests for 'ifwcheck check'."""

    def test_update_available(self, capsys, release_json):
        """Test exit code 0 and output when a release is newer."""
        with requests_mock.Mocker() as m:
            m.get(RELEASE_URL, text=release_json)
            code = _run(
                ["check", "--current-version", "0.5.0", "--github-repo", "owner/myapp"]
            )

        out = capsys.readouterr().out
        assert code == 0
        assert "vendor_feed" in out
        assert "Remote Version:  0.6.0" in out
        assert "A newer version is available" in out

    def test_up_to_date(self, capsys):
        """Test exit code 0 when already on the latest release."""
        with requests_mock.Mocker() as m:
            m.get(RELEASE_URL, text='{"tag_name": "0.5.0"}')
            code = _run(
                ["check", "--current-version", "0.5.0", "--github-repo", "owner/myapp"]
            )

        assert code == 0
        assert "up to date" in capsys.readouterr().out

    def test_check_failure(self, capsys):
        """Test exit code 1 when nothing could be checked."""
        code = _run(["check", "--current-version", "0.5.0"])

        out = capsys.readouterr().out
        assert code == 1
        assert "NO_REMOTE_SOURCE_CONFIGURED" in out
        assert "manifest_diff" in out

    def test_config_error(self, capsys):
        """Test exit code 1 when current_version is missing."""
        code = _run(["check"])

        assert code == 1
        assert "current_version" in capsys.readouterr().out

    def test_config_file(self, create_yaml_file, release_json):
        """Test that settings are read from --config."""
        path = create_yaml_file(
            "ifwcheck.yaml",
            {"current_version": "0.6.0", "github": {"repo": "owner/myapp"}},
        )

        with requests_mock.Mocker() as m:
            m.get(RELEASE_URL, text=release_json)
            code = _run(["check", "--config", str(path)])

        assert code == 0

    def test_launch_when_update_available(self, release_json):
        """Test that --launch starts the updater on an available update."""
        with requests_mock.Mocker() as m, patch(
            "ifwcheck.cli.launch_updater", return_value=True
        ) as mock_launch:
            m.get(RELEASE_URL, text=release_json)
            code = _run(
                [
                    "check",
                    "--current-version",
                    "0.5.0",
                    "--github-repo",
                    "owner/myapp",
                    "--launch",
                ]
            )

        assert code == 0
        mock_launch.assert_called_once_with(None)

    def test_launch_failure_exit_code(self, release_json, capsys):
        """Test exit code 1 when the updater cannot be started."""
        with requests_mock.Mocker() as m, patch(
            "ifwcheck.cli.launch_updater", return_value=False
        ):
            m.get(RELEASE_URL, text=release_json)
            code = _run(
                [
                    "check",
                    "--current-version",
                    "0.5.0",
                    "--github-repo",
                    "owner/myapp",
                    "--launch",
                ]
            )

        assert code == 1
        assert "could not be started" in capsys.readouterr().out

    def test_no_launch_when_up_to_date(self):
        """Test that --launch does nothing without an update."""
        with requests_mock.Mocker() as m, patch(
            "ifwcheck.cli.launch_updater"
        ) as mock_launch:
            m.get(RELEASE_URL, text='{"tag_name": "0.5.0"}')
            _run(
                [
                    "check",
                    "--current-version",
                    "0.5.0",
                    "--github-repo",
                    "owner/myapp",
                    "--launch",
                ]
            )

        mock_launch.assert_not_called()


class TestLaunchCommand:
    """Tests for 'ifwcheck launch'."""

    def test_missing_tool(self, tmp_test_dir, capsys):
        """Test exit code 1 when the tool does not exist."""
        code = _run(["launch", "--path", str(tmp_test_dir / "maintenancetool")])

        assert code == 1
        assert "not found" in capsys.readouterr().out

    def test_launches_tool(self, tmp_test_dir):
        """Test exit code 0 when the tool is launched."""
        tool = tmp_test_dir / "maintenancetool"
        tool.write_bytes(b"")

        with patch("ifwcheck.cli.launch_updater", return_value=True) as mock_launch:
            code = _run(["launch", "--path", str(tool)])

        assert code == 0
        mock_launch.assert_called_once_with(tool)
