# Copyright 2026 Jarmin Contributors
# SPDX-License-Identifier: Apache-2.0

"""Configuration for jarmin."""

from jarmin.config.settings import (
    DEFAULT_COMPRESSION_LEVEL,
    DEFAULT_LIBRARY_NAME,
    DEFAULT_METADATA,
    DEFAULT_NAMESPACE,
    SETTINGS_FILE_NAME,
    LibrarySettings,
    Settings,
    ToolSettings,
    discover_settings,
    load_settings,
)

__all__ = [
    "DEFAULT_COMPRESSION_LEVEL",
    "DEFAULT_LIBRARY_NAME",
    "DEFAULT_METADATA",
    "DEFAULT_NAMESPACE",
    "LibrarySettings",
    "SETTINGS_FILE_NAME",
    "Settings",
    "ToolSettings",
    "discover_settings",
    "load_settings",
]
