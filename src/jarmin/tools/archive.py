# Copyright 2026 Jarmin Contributors
# SPDX-License-Identifier: Apache-2.0

"""Archive extraction and packing with the ``unzip`` and ``zip`` tools."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

from jarmin.tools.process import run_tool

# ###############
# Public Interface
# ###############


class ZipArchiver:
    """Archiver backed by Info-ZIP ``unzip`` and ``zip``."""

    def __init__(self, zip_executable: str = "zip", unzip_executable: str = "unzip", *, timeout: float | None = None):
        self.zip_executable = zip_executable
        self.unzip_executable = unzip_executable
        self.timeout = timeout

    def extract(self, archive: Path, entries: Sequence[str], dest_dir: Path) -> None:
        """Extract the named entries of *archive* into *dest_dir*.

        Entries are matched by unzip, so ``META-INF/*`` style wildcards select
        whole directories.  Every entry must match at least one member.

        Raises:
            ValueError: If *entries* is empty.
            ToolNotFoundError: If unzip is not available.
            ToolError: If unzip fails, e.g. because an entry does not exist.
        """
        if not entries:
            raise ValueError("No entries to extract")
        args = [self.unzip_executable, "-q", str(archive), *entries, "-d", str(dest_dir)]
        run_tool(args, timeout=self.timeout)

    def create(self, src_dir: Path, dest: Path, compression_level: int = 9) -> None:
        """Pack everything below *src_dir* into a new archive at *dest*.

        Paths inside the archive are relative to *src_dir*.  zip appends
        ``.zip`` to a *dest* without an extension.

        Raises:
            ValueError: If *compression_level* is outside 0..9 or *src_dir* is empty.
            ToolNotFoundError: If zip is not available.
            ToolError: If zip fails.
        """
        if not 0 <= compression_level <= 9:
            raise ValueError(f"Compression level must be between 0 and 9, got {compression_level}")
        members = sorted(child.name for child in src_dir.iterdir())
        if not members:
            raise ValueError(f"Nothing to pack in {src_dir}")
        args = [
            self.zip_executable,
            f"-{compression_level}",
            "-q",
            "-r",
            str(dest.resolve()),
            *members,
        ]
        run_tool(args, cwd=src_dir, timeout=self.timeout)
