# Copyright 2026 Jarmin Contributors
# SPDX-License-Identifier: Apache-2.0

"""Contracts for the external tools the workflows depend on.

The workflows only talk to these protocols, so tests can pass in fakes
instead of running jdeps, unzip and zip.
"""

from __future__ import annotations

import re
from collections.abc import Sequence
from pathlib import Path
from typing import Protocol, runtime_checkable

# ###############
# Public Interface
# ###############


@runtime_checkable
class DependencyAnalyzer(Protocol):
    """Resolves class dependencies from compiled classes."""

    def find_unresolved(
        self,
        paths: Sequence[Path],
        classpath: Sequence[Path],
        namespace: re.Pattern[str],
    ) -> set[str]:
        """Return names of *namespace* classes referenced from *paths* but not on the classpath."""
        ...

    def find_dependencies(
        self,
        roots: Sequence[str],
        classpath: Sequence[Path],
        namespace: re.Pattern[str],
        cwd: Path | None = None,
    ) -> set[str]:
        """Return names of *namespace* classes the *roots* depend on, transitively."""
        ...


@runtime_checkable
class Archiver(Protocol):
    """Selectively unpacks and packs zip-based archives."""

    def extract(self, archive: Path, entries: Sequence[str], dest_dir: Path) -> None: ...

    def create(self, src_dir: Path, dest: Path, compression_level: int = 9) -> None: ...
