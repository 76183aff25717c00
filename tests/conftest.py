# Copyright 2026 Jarmin Contributors
# SPDX-License-Identifier: Apache-2.0

"""Shared fixtures: fake tool implementations for workflow and CLI tests."""

import fnmatch
import re
import zipfile
from collections.abc import Sequence
from pathlib import Path

import pytest

from jarmin.errors import ToolError

# ###############
# Fakes
# ###############


class FakeAnalyzer:
    """In-memory DependencyAnalyzer returning canned results."""

    def __init__(
        self,
        unresolved: set[str] | None = None,
        dependencies: set[str] | None = None,
        error: ToolError | None = None,
    ) -> None:
        self.unresolved = unresolved or set()
        self.dependencies = dependencies or set()
        self.error = error
        self.calls: list[tuple] = []

    def find_unresolved(self, paths, classpath, namespace: re.Pattern[str]) -> set[str]:
        self.calls.append(("find_unresolved", tuple(paths), tuple(classpath), namespace.pattern))
        if self.error is not None:
            raise self.error
        return {name for name in self.unresolved if namespace.fullmatch(name)}

    def find_dependencies(self, roots, classpath, namespace: re.Pattern[str], cwd: Path | None = None) -> set[str]:
        self.calls.append(("find_dependencies", tuple(roots), tuple(classpath), namespace.pattern, cwd))
        if self.error is not None:
            raise self.error
        return set(self.dependencies)


class FakeArchiver:
    """Archiver that serves entries from an in-memory member list.

    ``extract`` writes a small file for every requested member and fails like
    unzip does when a requested name matches nothing.  ``create`` writes a real
    zip file so that tests can inspect the result.
    """

    def __init__(self, members: Sequence[str], create_error: ToolError | None = None) -> None:
        self.members = list(members)
        self.create_error = create_error
        self.extract_calls: list[tuple[Path, list[str], Path]] = []
        self.create_calls: list[tuple[Path, Path, int]] = []

    def extract(self, archive: Path, entries: Sequence[str], dest_dir: Path) -> None:
        self.extract_calls.append((archive, list(entries), dest_dir))
        unmatched = [entry for entry in entries if not fnmatch.filter(self.members, entry)]
        if unmatched:
            raise ToolError(
                "unzip exited with code 11",
                command=["unzip"],
                output=f"caution: filename not matched:  {unmatched[0]}",
            )
        for entry in entries:
            for member in fnmatch.filter(self.members, entry):
                target = dest_dir / member
                target.parent.mkdir(parents=True, exist_ok=True)
                target.write_text(member, encoding="utf-8")

    def create(self, src_dir: Path, dest: Path, compression_level: int = 9) -> None:
        self.create_calls.append((src_dir, dest, compression_level))
        with zipfile.ZipFile(dest, "w") as zf:
            for path in sorted(src_dir.rglob("*")):
                if path.is_file():
                    zf.write(path, path.relative_to(src_dir).as_posix())
        if self.create_error is not None:
            raise self.create_error


# ###############
# Fixtures
# ###############

FASTUTIL_MEMBERS = [
    "META-INF/MANIFEST.MF",
    "META-INF/maven/it.unimi.dsi/fastutil/pom.properties",
    "it/unimi/dsi/fastutil/Function.class",
    "it/unimi/dsi/fastutil/Hash.class",
    "it/unimi/dsi/fastutil/ints/AbstractIntCollection.class",
    "it/unimi/dsi/fastutil/ints/AbstractIntList.class",
    "it/unimi/dsi/fastutil/ints/Int2IntMap$Entry.class",
    "it/unimi/dsi/fastutil/ints/Int2IntMap.class",
    "it/unimi/dsi/fastutil/ints/IntArrayList.class",
    "it/unimi/dsi/fastutil/ints/IntCollection.class",
    "it/unimi/dsi/fastutil/ints/IntList.class",
    "it/unimi/dsi/fastutil/longs/LongArrayList.class",
]


@pytest.fixture
def fastutil_members() -> list[str]:
    return list(FASTUTIL_MEMBERS)


@pytest.fixture
def library_jar(tmp_path: Path) -> Path:
    """A real zip archive laid out like the fastutil jar."""
    jar = tmp_path / "lib" / "fastutil-8.5.12.jar"
    jar.parent.mkdir()
    with zipfile.ZipFile(jar, "w") as zf:
        for member in FASTUTIL_MEMBERS:
            zf.writestr(member, member)
    return jar


@pytest.fixture
def project_classes(tmp_path: Path) -> Path:
    """A directory holding compiled project classes."""
    classes = tmp_path / "build" / "classes"
    (classes / "com" / "example").mkdir(parents=True)
    (classes / "com" / "example" / "App.class").write_bytes(b"\xca\xfe\xba\xbe")
    (classes / "com" / "example" / "App$Inner.class").write_bytes(b"\xca\xfe\xba\xbe")
    return classes


@pytest.fixture
def fake_analyzer_factory():
    return FakeAnalyzer


@pytest.fixture
def fake_archiver_factory():
    return FakeArchiver
