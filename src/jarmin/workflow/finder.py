# Copyright 2026 Jarmin Contributors
# SPDX-License-Identifier: Apache-2.0

"""Finding the classes of the target library a project references.

The project's compiled classes are analyzed without the library on the
classpath.  Every library class they use then shows up as an unresolved
reference, which is exactly the set of classes the project needs.  Putting the
library itself on the classpath would resolve all of them and hide the usage,
so paths that look like the library archive trigger a warning.
"""

from __future__ import annotations

import zipfile
from collections.abc import Callable, Iterable
from dataclasses import dataclass, field
from pathlib import Path

from jarmin.config.settings import LibrarySettings
from jarmin.errors import NoCompiledClassesError, NoDependenciesFoundError, PathNotFoundError, ToolError
from jarmin.model.classes import CLASS_SUFFIX, DependencyList, OutputMode
from jarmin.model.listing import render_listing
from jarmin.tools.base import DependencyAnalyzer

# ###############
# Public Interface
# ###############


@dataclass(frozen=True)
class FindRequest:
    """Everything ``find`` needs, assembled once from the command line.

    Attributes:
        paths: Class directories, class files or archives to analyze.
        classpath: Additional archives or directories searched for dependencies.
        mode: Whether to list class files or source files.
        library: The target library.
    """

    paths: tuple[Path, ...]
    classpath: tuple[Path, ...] = ()
    mode: OutputMode = OutputMode.CLASS
    library: LibrarySettings = field(default_factory=LibrarySettings)


@dataclass(frozen=True)
class FindResult:
    """Outcome of a successful ``find``.

    Attributes:
        dependencies: The referenced library classes.
        mode: Output mode requested for rendering.
        warnings: Non-fatal remarks about the supplied paths.
    """

    dependencies: DependencyList
    mode: OutputMode = OutputMode.CLASS
    warnings: tuple[str, ...] = ()

    def render(self) -> str:
        return render_listing(self.dependencies, self.mode)


def find_dependencies(
    request: FindRequest,
    analyzer: DependencyAnalyzer,
    warn: Callable[[str], None] | None = None,
) -> FindResult:
    """Determine which library classes the analyzed paths reference.

    Args:
        request: The paths to analyze and how to report the result.
        analyzer: Dependency analyzer used to resolve class references.
        warn: Called with each warning as soon as it is detected, so that it
            reaches the user even if the analysis fails afterwards.

    Returns:
        The sorted, deduplicated references together with any warnings.

    Raises:
        ValueError: If *request* holds no path to analyze.
        PathNotFoundError: If any supplied path does not exist.
        NoCompiledClassesError: If the analysis paths contain no class files.
        NoDependenciesFoundError: If the analyzer fails or reports no library usage,
            or source mode leaves nothing to list.
        ToolNotFoundError: If the analyzer executable is missing.
    """
    if not request.paths:
        raise ValueError("At least one path to analyze is required")

    all_paths = (*request.classpath, *request.paths)
    for path in all_paths:
        if not path.exists():
            raise PathNotFoundError(path)

    warnings = tuple(library_path_warnings(all_paths, request.library))
    if warn is not None:
        for warning in warnings:
            warn(warning)

    if count_compiled_classes(request.paths) == 0:
        raise NoCompiledClassesError("No *.class files found in any of the specified paths")

    missing = f"No unresolved references found - is {request.library.name} on the classpath?"
    try:
        names = analyzer.find_unresolved(request.paths, request.classpath, request.library.namespace_pattern)
    except ToolError as exc:
        raise NoDependenciesFoundError(f"{missing} ({exc})") from exc
    if not names:
        raise NoDependenciesFoundError(missing)

    dependencies = DependencyList(names)
    if not dependencies.paths(request.mode):
        raise NoDependenciesFoundError(
            f"Only nested {request.library.name} classes are referenced - no source files to list"
        )
    return FindResult(dependencies=dependencies, mode=request.mode, warnings=warnings)


def library_path_warnings(paths: Iterable[Path], library: LibrarySettings) -> list[str]:
    """Return a warning for every path whose name suggests it is the library itself."""
    needle = library.name.lower()
    return [
        f"Path {path} looks like a {library.name} archive - you probably don't want to include this"
        for path in paths
        if needle in path.name.lower()
    ]


def count_compiled_classes(paths: Iterable[Path]) -> int:
    """Count the class files in *paths*.

    Directories are searched recursively, ``.class`` files count once, and any
    other file is read as a zip archive.  Unreadable archives count zero.
    """
    total = 0
    for path in paths:
        if path.is_dir():
            total += sum(1 for candidate in path.rglob(f"*{CLASS_SUFFIX}") if candidate.is_file())
        elif path.suffix == CLASS_SUFFIX:
            total += 1
        elif path.is_file():
            total += _count_archive_classes(path)
    return total


# ################
# Implementation
# ################


def _count_archive_classes(archive: Path) -> int:
    try:
        with zipfile.ZipFile(archive) as zf:
            return sum(1 for name in zf.namelist() if name.endswith(CLASS_SUFFIX))
    except (zipfile.BadZipFile, OSError):
        return 0
