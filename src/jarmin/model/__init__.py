# Copyright 2026 Jarmin Contributors
# SPDX-License-Identifier: Apache-2.0

"""Data model for class references and class list files."""

from jarmin.model.classes import (
    CLASS_SUFFIX,
    NESTED_MARKER,
    SOURCE_SUFFIX,
    ClassReference,
    DependencyList,
    OutputMode,
)
from jarmin.model.listing import parse_class_list, read_class_list, render_listing

__all__ = [
    "CLASS_SUFFIX",
    "ClassReference",
    "DependencyList",
    "NESTED_MARKER",
    "OutputMode",
    "SOURCE_SUFFIX",
    "parse_class_list",
    "read_class_list",
    "render_listing",
]
