# Copyright 2026 Jarmin Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tests for the external process runner."""

import subprocess
from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest

from jarmin.errors import ToolError, ToolNotFoundError
from jarmin.tools.process import require_tools, run_tool, run_tool_raw


class TestRequireTools:
    def test_passes_when_all_found(self):
        with patch("shutil.which", return_value="/usr/bin/tool") as mock_which:
            require_tools("zip", "unzip")
        assert mock_which.call_count == 2

    def test_raises_for_first_missing_tool(self):
        def which(name):
            return None if name == "unzip" else f"/usr/bin/{name}"

        with patch("shutil.which", side_effect=which):
            with pytest.raises(ToolNotFoundError, match="No unzip found") as exc_info:
                require_tools("jdeps", "unzip", "zip")
        assert exc_info.value.tool == "unzip"


class TestRunToolRaw:
    def test_captures_text_output(self, tmp_path: Path):
        """The tool runs with captured text output in the given directory."""
        completed = MagicMock(returncode=0, stdout="out", stderr="")
        with patch("subprocess.run", return_value=completed) as mock_run:
            result = run_tool_raw(["jdeps", "-version"], cwd=tmp_path, timeout=5)

        assert result is completed
        mock_run.assert_called_once_with(
            ["jdeps", "-version"],
            capture_output=True,
            text=True,
            cwd=tmp_path,
            timeout=5,
        )

    def test_no_timeout_by_default(self):
        completed = MagicMock(returncode=0, stdout="", stderr="")
        with patch("subprocess.run", return_value=completed) as mock_run:
            run_tool_raw(["zip"])
        assert mock_run.call_args.kwargs["timeout"] is None

    def test_missing_executable_raises_tool_not_found(self):
        with patch("subprocess.run", side_effect=FileNotFoundError):
            with pytest.raises(ToolNotFoundError, match="No jdeps found"):
                run_tool_raw(["jdeps"])

    def test_timeout_raises_tool_error(self):
        with patch("subprocess.run", side_effect=subprocess.TimeoutExpired(cmd="jdeps", timeout=1)):
            with pytest.raises(ToolError, match="timed out"):
                run_tool_raw(["jdeps", "classes"], timeout=1)


class TestRunTool:
    def test_returns_stdout_on_success(self):
        completed = MagicMock(returncode=0, stdout="line\n", stderr="")
        with patch("subprocess.run", return_value=completed):
            assert run_tool(["jdeps"]) == "line\n"

    def test_non_zero_exit_raises_with_stderr(self):
        completed = MagicMock(returncode=11, stdout="", stderr="caution: filename not matched:  a/B.class\n")
        with patch("subprocess.run", return_value=completed):
            with pytest.raises(ToolError, match="exited with code 11") as exc_info:
                run_tool(["unzip", "-q", "lib.jar", "a/B.class"])

        assert exc_info.value.output == "caution: filename not matched:  a/B.class"
        assert exc_info.value.command == ["unzip", "-q", "lib.jar", "a/B.class"]

    def test_non_zero_exit_falls_back_to_stdout(self):
        """Tools that report errors on stdout still surface their message."""
        completed = MagicMock(returncode=12, stdout="zip error: Nothing to do!\n", stderr="")
        with patch("subprocess.run", return_value=completed):
            with pytest.raises(ToolError) as exc_info:
                run_tool(["zip", "-r", "out.jar"])
        assert exc_info.value.output == "zip error: Nothing to do!"
