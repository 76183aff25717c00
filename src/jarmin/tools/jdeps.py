# Copyright 2026 Jarmin Contributors
# SPDX-License-Identifier: Apache-2.0

"""Class dependency analysis with the JDK ``jdeps`` tool.

``jdeps -verbose:class`` reports one dependency edge per line.  Two layouts
are in use, depending on the JDK release:

* JDK 8 groups edges under the class they originate from::

      fastutil.jar -> java.base
         it.unimi.dsi.fastutil.ints.IntList (fastutil.jar)
            -> it.unimi.dsi.fastutil.ints.IntCollection        fastutil.jar
            -> java.util.List

* JDK 9 and later print the origin on every edge line::

      classes -> not found
         com.example.App          -> it.unimi.dsi.fastutil.ints.IntList      not found
         com.example.App          -> java.lang.Object                        java.base

Summary lines (``origin -> archive or module``) start in the first column and
are never edges.  An edge line is indented, and ``->`` is either its first
token (grouped layout) or its second one (flat layout).  The token following
``->`` is the target class; the rest of the line is the location the target
was resolved from, or ``not found`` when it is missing from the classpath.
"""

from __future__ import annotations

import os
import re
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path

from jarmin.tools.process import run_tool

# ###############
# Public Interface
# ###############

ARROW = "->"
NOT_FOUND = "not found"


@dataclass(frozen=True)
class DependencyEdge:
    """A single ``source -> target`` line of jdeps output.

    Attributes:
        source: Origin class, or None in the grouped layout where the origin is
            given on a preceding line.
        target: The class depended upon.
        location: Archive, directory or module the target was found in, or
            ``not found``.  Empty when jdeps omits it.
    """

    source: str | None
    target: str
    location: str

    @property
    def is_unresolved(self) -> bool:
        return self.location == NOT_FOUND


def parse_edge(line: str) -> DependencyEdge | None:
    """Parse one line of ``jdeps -verbose:class`` output.

    Returns:
        The edge described by *line*, or None if the line is not an edge.
    """
    if not line[:1].isspace():
        return None
    tokens = line.split()
    if ARROW not in tokens:
        return None
    arrow = tokens.index(ARROW)
    if arrow > 1 or arrow + 1 >= len(tokens):
        return None
    source = tokens[0] if arrow == 1 else None
    return DependencyEdge(
        source=source,
        target=tokens[arrow + 1],
        location=" ".join(tokens[arrow + 2 :]),
    )


def iter_edges(output: str) -> list[DependencyEdge]:
    """Return every edge in a complete jdeps report, in output order."""
    edges = []
    for line in output.splitlines():
        edge = parse_edge(line)
        if edge is not None:
            edges.append(edge)
    return edges


def parse_unresolved(output: str, namespace: re.Pattern[str]) -> set[str]:
    """Return the unresolved targets whose names match *namespace*."""
    return {
        edge.target for edge in iter_edges(output) if edge.is_unresolved and namespace.fullmatch(edge.target)
    }


def parse_dependencies(output: str, namespace: re.Pattern[str]) -> set[str]:
    """Return every target matching *namespace*, resolved or not."""
    return {edge.target for edge in iter_edges(output) if namespace.fullmatch(edge.target)}


class JdepsAnalyzer:
    """Dependency analyzer backed by the ``jdeps`` executable."""

    def __init__(self, executable: str = "jdeps", *, timeout: float | None = None) -> None:
        self.executable = executable
        self.timeout = timeout

    def find_unresolved(
        self,
        paths: Sequence[Path],
        classpath: Sequence[Path],
        namespace: re.Pattern[str],
    ) -> set[str]:
        """Return the library classes referenced from *paths* but missing from the classpath.

        Raises:
            ToolNotFoundError: If jdeps is not available.
            ToolError: If jdeps fails.
        """
        args = [self.executable, "-recursive", "-verbose:class"]
        if classpath:
            args += ["-cp", _join_classpath(classpath)]
        args += [str(path) for path in paths]
        output = run_tool(args, timeout=self.timeout)
        return parse_unresolved(output, namespace)

    def find_dependencies(
        self,
        roots: Sequence[str],
        classpath: Sequence[Path],
        namespace: re.Pattern[str],
        cwd: Path | None = None,
    ) -> set[str]:
        """Return the library classes the *roots* depend on, transitively.

        Args:
            roots: Fully-qualified names of the classes to start from.
            classpath: Archives or directories the roots are loaded from.
            namespace: Pattern restricting the analysis to the library.
            cwd: Working directory for the jdeps process.

        Raises:
            ToolNotFoundError: If jdeps is not available.
            ToolError: If jdeps fails.
        """
        args = [
            self.executable,
            "-recursive",
            "-regex",
            namespace.pattern,
            "-verbose:class",
            "-cp",
            _join_classpath(classpath),
            *roots,
        ]
        output = run_tool(args, cwd=cwd, timeout=self.timeout)
        return parse_dependencies(output, namespace)


# ################
# Implementation
# ################


def _join_classpath(entries: Sequence[Path]) -> str:
    return os.pathsep.join(str(entry) for entry in entries)
