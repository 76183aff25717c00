# Copyright 2026 Jarmin Contributors
# SPDX-License-Identifier: Apache-2.0

"""The find and minimize workflows."""

from jarmin.workflow.finder import (
    FindRequest,
    FindResult,
    count_compiled_classes,
    find_dependencies,
    library_path_warnings,
)
from jarmin.workflow.minimizer import (
    MINIMIZED_SUFFIX,
    MinimizeRequest,
    MinimizeResult,
    minimize_archive,
    minimized_archive_path,
)

__all__ = [
    "FindRequest",
    "FindResult",
    "MINIMIZED_SUFFIX",
    "MinimizeRequest",
    "MinimizeResult",
    "count_compiled_classes",
    "find_dependencies",
    "library_path_warnings",
    "minimize_archive",
    "minimized_archive_path",
]
