# Copyright 2026 Jarmin Contributors
# SPDX-License-Identifier: Apache-2.0

"""Reading and writing the line-oriented class list file.

The file produced by ``jarmin find`` holds one relative path per line.  In
class mode every line ends in ``.class`` and the file can be passed unchanged
to ``jarmin minimize``.
"""

from __future__ import annotations

from pathlib import Path

from jarmin.errors import ClassListError
from jarmin.model.classes import CLASS_SUFFIX, DependencyList, OutputMode

# ###############
# Public Interface
# ###############


def render_listing(dependencies: DependencyList, mode: OutputMode) -> str:
    """Render *dependencies* as newline-separated paths, with a trailing newline.

    An empty listing renders as an empty string.
    """
    lines = dependencies.paths(mode)
    return "".join(f"{line}\n" for line in lines)


def parse_class_list(text: str) -> list[str]:
    """Return the class-file paths listed in *text*.

    Lines are stripped; blank lines, ``#`` comments and lines not ending in
    ``.class`` are dropped.  Duplicates are kept in their original order.
    """
    paths: list[str] = []
    for raw in text.splitlines():
        line = raw.strip()
        if not line or line.startswith("#"):
            continue
        if line.endswith(CLASS_SUFFIX):
            paths.append(line)
    return paths


def read_class_list(path: Path) -> list[str]:
    """Read a class list file and return its class-file paths.

    Raises:
        ClassListError: If the file cannot be read or is not UTF-8 text.
    """
    try:
        text = path.read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        raise ClassListError(f"Class list '{path}' is not UTF-8 text: {exc}") from exc
    except OSError as exc:
        raise ClassListError(f"Cannot read class list '{path}': {exc}") from exc
    return parse_class_list(text)
