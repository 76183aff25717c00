# Copyright 2026 Jarmin Contributors
# SPDX-License-Identifier: Apache-2.0

"""Class references and dependency lists.

A class is identified by its JVM binary name in dotted form, e.g.
``it.unimi.dsi.fastutil.ints.Int2IntMap$Entry``.  The ``$`` marker separates
a nested class from its enclosing class.  Nested classes are compiled to their
own ``.class`` file but share the ``.java`` file of their outermost class.
"""

from __future__ import annotations

import enum
from collections.abc import Iterable, Iterator
from dataclasses import dataclass

# ###############
# Public Interface
# ###############

CLASS_SUFFIX = ".class"
SOURCE_SUFFIX = ".java"
NESTED_MARKER = "$"


class OutputMode(enum.Enum):
    """How a dependency list is rendered."""

    CLASS = "class"
    SOURCE = "source"


@dataclass(frozen=True, order=True)
class ClassReference:
    """A fully-qualified, dot-separated class name."""

    name: str

    def __post_init__(self) -> None:
        if not self.name or "/" in self.name or self.name.startswith(".") or self.name.endswith("."):
            raise ValueError(f"Invalid class name: {self.name!r}")

    @classmethod
    def from_class_path(cls, path: str) -> ClassReference:
        """Build a reference from a relative class-file path such as ``a/b/C$D.class``."""
        if not path.endswith(CLASS_SUFFIX):
            raise ValueError(f"Not a class file path: {path!r}")
        return cls(path[: -len(CLASS_SUFFIX)].replace("/", "."))

    @property
    def package(self) -> str:
        """The package part of the name, or an empty string for the default package."""
        package, _, _ = self.name.rpartition(".")
        return package

    @property
    def simple_name(self) -> str:
        return self.name.rpartition(".")[2]

    @property
    def is_nested(self) -> bool:
        return NESTED_MARKER in self.simple_name

    @property
    def class_path(self) -> str:
        """Relative path of the compiled class file inside an archive or class directory."""
        return self.name.replace(".", "/") + CLASS_SUFFIX

    @property
    def source_path(self) -> str:
        """Relative path of the source file declaring this class.

        Raises:
            ValueError: If the class is nested and therefore has no source file
                of its own.
        """
        if self.is_nested:
            raise ValueError(f"Nested class {self.name} has no source file of its own")
        return self.name.replace(".", "/") + SOURCE_SUFFIX

    def __str__(self) -> str:
        return self.name


class DependencyList:
    """An immutable, deduplicated and sorted collection of class references."""

    __slots__ = ("_classes",)

    def __init__(self, classes: Iterable[ClassReference | str] = ()) -> None:
        refs = {c if isinstance(c, ClassReference) else ClassReference(c) for c in classes}
        self._classes: tuple[ClassReference, ...] = tuple(sorted(refs))

    @classmethod
    def from_class_paths(cls, paths: Iterable[str]) -> DependencyList:
        return cls(ClassReference.from_class_path(p) for p in paths)

    def union(self, other: Iterable[ClassReference | str]) -> DependencyList:
        return DependencyList([*self._classes, *other])

    def class_paths(self) -> list[str]:
        """Class-file paths of every class, nested ones included."""
        return [c.class_path for c in self._classes]

    def source_paths(self) -> list[str]:
        """Source-file paths of the top-level classes; nested classes are skipped."""
        return [c.source_path for c in self._classes if not c.is_nested]

    def paths(self, mode: OutputMode) -> list[str]:
        if mode is OutputMode.SOURCE:
            return self.source_paths()
        return self.class_paths()

    def __iter__(self) -> Iterator[ClassReference]:
        return iter(self._classes)

    def __len__(self) -> int:
        return len(self._classes)

    def __bool__(self) -> bool:
        return bool(self._classes)

    def __contains__(self, item: object) -> bool:
        if isinstance(item, str):
            return any(c.name == item for c in self._classes)
        return item in self._classes

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DependencyList):
            return NotImplemented
        return self._classes == other._classes

    def __hash__(self) -> int:
        return hash(self._classes)

    def __repr__(self) -> str:
        return f"DependencyList({[c.name for c in self._classes]!r})"
