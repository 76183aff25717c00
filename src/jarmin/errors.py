# Copyright 2026 Jarmin Contributors
# SPDX-License-Identifier: Apache-2.0

"""Exception hierarchy shared by all jarmin components."""

from __future__ import annotations

from pathlib import Path

# ###############
# Public Interface
# ###############


class JarminError(Exception):
    """Base class for every error reported to the user as a failed command."""


class ConfigError(JarminError):
    """Raised when a configuration file is invalid or cannot be loaded."""


class ClassListError(JarminError):
    """Raised when a class list file cannot be read."""


class ToolNotFoundError(JarminError):
    """Raised when a required external executable is not available."""

    def __init__(self, tool: str) -> None:
        super().__init__(f"No {tool} found - is it installed and on your PATH?")
        self.tool = tool


class ToolError(JarminError):
    """Raised when an external tool exits with a non-zero status or times out.

    Attributes:
        command: The command line that was run.
        output: The combined diagnostic output of the tool, stripped.
    """

    def __init__(self, message: str, command: list[str] | None = None, output: str = "") -> None:
        super().__init__(message)
        self.command = command or []
        self.output = output


class PathNotFoundError(JarminError):
    """Raised when an input path does not exist."""

    def __init__(self, path: Path | str, message: str | None = None) -> None:
        super().__init__(message or f'Path "{path}" does not exist')
        self.path = Path(path)


class NoCompiledClassesError(JarminError):
    """Raised when none of the analysis paths contain compiled classes."""


class NoDependenciesFoundError(JarminError):
    """Raised when no reference to the target library could be found."""


class EmptyClassListError(JarminError):
    """Raised when a class list file names no class files."""


class DestinationExistsError(JarminError):
    """Raised when the minimized archive would overwrite an existing file."""

    def __init__(self, path: Path) -> None:
        super().__init__(f"Destination path {path} exists")
        self.path = path


class TransitiveResolutionError(JarminError):
    """Raised when the transitive dependencies inside the library cannot be resolved."""


class ExtractionError(JarminError):
    """Raised when entries cannot be extracted from the library archive."""


class PackagingError(JarminError):
    """Raised when the minimized archive cannot be written."""
