# Copyright 2026 Jarmin Contributors
# SPDX-License-Identifier: Apache-2.0

"""Wrappers around the external tools jarmin delegates to."""

from jarmin.config.settings import ToolSettings
from jarmin.tools.archive import ZipArchiver
from jarmin.tools.base import Archiver, DependencyAnalyzer
from jarmin.tools.jdeps import (
    DependencyEdge,
    JdepsAnalyzer,
    iter_edges,
    parse_dependencies,
    parse_edge,
    parse_unresolved,
)
from jarmin.tools.process import require_tools, run_tool, run_tool_raw


def analyzer_from_settings(tools: ToolSettings) -> JdepsAnalyzer:
    """Build the jdeps analyzer described by *tools*."""
    return JdepsAnalyzer(tools.jdeps, timeout=tools.timeout)


def archiver_from_settings(tools: ToolSettings) -> ZipArchiver:
    """Build the zip archiver described by *tools*."""
    return ZipArchiver(tools.zip, tools.unzip, timeout=tools.timeout)


__all__ = [
    "Archiver",
    "DependencyAnalyzer",
    "DependencyEdge",
    "JdepsAnalyzer",
    "ZipArchiver",
    "analyzer_from_settings",
    "archiver_from_settings",
    "iter_edges",
    "parse_dependencies",
    "parse_edge",
    "parse_unresolved",
    "require_tools",
    "run_tool",
    "run_tool_raw",
]
