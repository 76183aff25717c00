# Copyright 2026 Jarmin Contributors
# SPDX-License-Identifier: Apache-2.0

"""Building a minimized library archive from a class list.

The listed classes are expanded to their transitive dependencies inside the
library, extracted together with the archive metadata into a scratch
directory, and packed into ``<archive-stem>-min<suffix>`` next to the source
archive.  The scratch directory is removed on every exit path.
"""

from __future__ import annotations

import tempfile
from collections.abc import Callable
from dataclasses import dataclass, field
from pathlib import Path

from jarmin.config.settings import DEFAULT_COMPRESSION_LEVEL, LibrarySettings
from jarmin.errors import (
    ClassListError,
    DestinationExistsError,
    EmptyClassListError,
    ExtractionError,
    PackagingError,
    PathNotFoundError,
    ToolError,
    TransitiveResolutionError,
)
from jarmin.model.classes import DependencyList
from jarmin.model.listing import read_class_list
from jarmin.tools.base import Archiver, DependencyAnalyzer

# ###############
# Public Interface
# ###############

MINIMIZED_SUFFIX = "-min"
SCRATCH_PREFIX = "jarmin-min."
STAGING_PREFIX = ".jarmin-staging."

ProgressCallback = Callable[[str], None]


@dataclass(frozen=True)
class MinimizeRequest:
    """Everything ``minimize`` needs, assembled once from the command line.

    Attributes:
        archive: The complete library archive.
        class_list: File listing the required class files, one per line.
        destination: Where to write the result; derived from *archive* if None.
        library: The target library.
        compression_level: zip compression level, 0 to 9.
    """

    archive: Path
    class_list: Path
    destination: Path | None = None
    library: LibrarySettings = field(default_factory=LibrarySettings)
    compression_level: int = DEFAULT_COMPRESSION_LEVEL

    def __post_init__(self) -> None:
        if not 0 <= self.compression_level <= 9:
            raise ValueError(f"Compression level must be between 0 and 9, got {self.compression_level}")

    @property
    def target(self) -> Path:
        """The archive this request will create."""
        return self.destination if self.destination is not None else minimized_archive_path(self.archive)


@dataclass(frozen=True)
class MinimizeResult:
    """Outcome of a successful ``minimize``.

    Attributes:
        destination: The minimized archive that was written.
        requested: Number of distinct classes named in the class list.
        packed: Number of classes packed, transitive dependencies included.
    """

    destination: Path
    requested: int
    packed: int


def minimized_archive_path(archive: Path) -> Path:
    """Return the default output path: ``lib-1.0.jar`` becomes ``lib-1.0-min.jar``."""
    return archive.with_name(f"{archive.stem}{MINIMIZED_SUFFIX}{archive.suffix}")


def minimize_archive(
    request: MinimizeRequest,
    analyzer: DependencyAnalyzer,
    archiver: Archiver,
    progress: ProgressCallback | None = None,
) -> MinimizeResult:
    """Create a minimized copy of the library archive.

    Args:
        request: Source archive, class list and output options.
        analyzer: Dependency analyzer used to compute the transitive closure.
        archiver: Archiver used to extract and repack entries.
        progress: Called with a human-readable message before each step.

    Returns:
        Where the archive was written and how many classes it holds.

    Raises:
        PathNotFoundError: If the archive or the class list is not a file, or the
            destination directory does not exist.
        DestinationExistsError: If the output archive already exists.
        ClassListError: If the class list cannot be read or holds invalid paths.
        EmptyClassListError: If the class list names no class files.
        TransitiveResolutionError: If the analyzer fails or finds no dependency.
        ExtractionError: If the entries cannot be extracted from the archive.
        PackagingError: If the minimized archive cannot be written.
        ToolNotFoundError: If an external executable is missing.
    """
    report = progress or _ignore_progress

    archive = request.archive.resolve()
    _require_file(archive)
    class_list = request.class_list.resolve()
    _require_file(class_list)

    destination = request.target.resolve()
    if destination.exists():
        raise DestinationExistsError(destination)
    if not destination.parent.is_dir():
        raise PathNotFoundError(destination.parent, f'No directory at "{destination.parent}"')

    class_paths = read_class_list(class_list)
    if not class_paths:
        raise EmptyClassListError(
            f"No classes found in {class_list} - make sure they are proper paths to .class files"
        )
    try:
        requested = DependencyList.from_class_paths(class_paths)
    except ValueError as exc:
        raise ClassListError(f"Invalid entry in {class_list}: {exc}") from exc

    with tempfile.TemporaryDirectory(prefix=SCRATCH_PREFIX) as tmp:
        scratch = Path(tmp)

        report("Resolving transitive dependencies")
        unresolvable = (
            f"Could not resolve dependencies with {archive} - "
            f"probably not a complete {request.library.name} archive."
        )
        try:
            found = analyzer.find_dependencies(
                [ref.name for ref in requested],
                [archive],
                request.library.namespace_pattern,
                cwd=scratch,
            )
        except ToolError as exc:
            raise TransitiveResolutionError(f"{unresolvable} ({exc})") from exc
        if not found:
            raise TransitiveResolutionError(unresolvable)

        closure = requested.union(found)

        report(f"Unpacking archive from {archive}")
        try:
            archiver.extract(archive, [*request.library.metadata, *closure.class_paths()], scratch)
        except ToolError as exc:
            raise ExtractionError(exc.output or str(exc)) from exc

        report(f"Creating minimized archive at {destination}")
        _pack(archiver, scratch, destination, request.compression_level)

    return MinimizeResult(destination=destination, requested=len(requested), packed=len(closure))


# ################
# Implementation
# ################


def _ignore_progress(message: str) -> None:
    pass


def _pack(archiver: Archiver, src_dir: Path, destination: Path, compression_level: int) -> None:
    """Pack *src_dir* into a staged ``.zip`` beside *destination*, then move it into place.

    zip appends ``.zip`` to archive names without an extension, so it never
    writes to *destination* directly.  A failed run leaves nothing behind.
    """
    with tempfile.TemporaryDirectory(prefix=STAGING_PREFIX, dir=destination.parent) as tmp:
        staged = Path(tmp) / "minimized.zip"
        try:
            archiver.create(src_dir, staged, compression_level)
        except ToolError as exc:
            raise PackagingError(exc.output or str(exc)) from exc
        if not staged.is_file():
            raise PackagingError(f"zip did not write {staged}")
        if destination.exists():
            raise DestinationExistsError(destination)
        staged.rename(destination)


def _require_file(path: Path) -> None:
    if not path.is_file():
        raise PathNotFoundError(path, f'No file at "{path}"')
