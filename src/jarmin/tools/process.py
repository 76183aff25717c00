# Copyright 2026 Jarmin Contributors
# SPDX-License-Identifier: Apache-2.0

"""Running external command-line tools."""

import shutil
import subprocess
from pathlib import Path

from jarmin.errors import ToolError, ToolNotFoundError

# ###############
# Public Interface
# ###############


def require_tools(*executables: str) -> None:
    """Check that every executable is available on PATH.

    Raises:
        ToolNotFoundError: For the first executable that cannot be found.
    """
    for executable in executables:
        if shutil.which(executable) is None:
            raise ToolNotFoundError(executable)


def run_tool_raw(
    args: list[str],
    *,
    cwd: Path | None = None,
    timeout: float | None = None,
) -> subprocess.CompletedProcess[str]:
    """Run an external tool and return the raw CompletedProcess result.

    The first element of *args* is the executable.  Output is captured as text.

    Raises:
        ToolNotFoundError: If the executable is not found.
        ToolError: If the command times out.
    """
    try:
        return subprocess.run(
            args,
            capture_output=True,
            text=True,
            cwd=cwd,
            timeout=timeout,
        )
    except FileNotFoundError as exc:
        raise ToolNotFoundError(args[0]) from exc
    except subprocess.TimeoutExpired as exc:
        raise ToolError(f"Command timed out: {' '.join(args)}", command=args) from exc


def run_tool(
    args: list[str],
    *,
    cwd: Path | None = None,
    timeout: float | None = None,
) -> str:
    """Run an external tool and return its stdout, raising ToolError on non-zero exit.

    Raises:
        ToolNotFoundError: If the executable is not found.
        ToolError: If the command times out or exits with a non-zero code.
    """
    result = run_tool_raw(args, cwd=cwd, timeout=timeout)
    if result.returncode != 0:
        output = _diagnostic_output(result)
        raise ToolError(
            f"{args[0]} exited with code {result.returncode}: {output}",
            command=args,
            output=output,
        )
    return result.stdout


# ################
# Implementation
# ################


def _diagnostic_output(result: subprocess.CompletedProcess[str]) -> str:
    """Return stderr, falling back to stdout for tools that report errors there."""
    stderr = (result.stderr or "").strip()
    if stderr:
        return stderr
    return (result.stdout or "").strip()
