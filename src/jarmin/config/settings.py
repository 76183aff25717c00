# Copyright 2026 Jarmin Contributors
# SPDX-License-Identifier: Apache-2.0

"""Settings model and YAML loader for the optional ``.jarmin.yaml`` file."""

from __future__ import annotations

import re
from pathlib import Path

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from jarmin.errors import ConfigError

# ###############
# Public Interface
# ###############

SETTINGS_FILE_NAME = ".jarmin.yaml"

DEFAULT_LIBRARY_NAME = "fastutil"
DEFAULT_NAMESPACE = r"it\.unimi\.dsi\.fastutil\..*"
DEFAULT_METADATA = ("META-INF/*",)
DEFAULT_COMPRESSION_LEVEL = 9


class LibrarySettings(BaseModel):
    """The target library whose usage is analyzed and whose archive is minimized.

    Attributes:
        name: Short library name, used to spot the library archive among the
            supplied paths and in messages.
        namespace: Regular expression matching the fully-qualified names of the
            library's classes.
        metadata: Archive entry patterns always copied into the minimized archive.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    name: str = DEFAULT_LIBRARY_NAME
    namespace: str = DEFAULT_NAMESPACE
    metadata: tuple[str, ...] = DEFAULT_METADATA

    @field_validator("namespace")
    @classmethod
    def _check_namespace(cls, value: str) -> str:
        try:
            re.compile(value)
        except re.error as exc:
            raise ValueError(f"invalid regular expression {value!r}: {exc}") from exc
        return value

    @field_validator("name")
    @classmethod
    def _check_name(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("library name must not be empty")
        return value

    @property
    def namespace_pattern(self) -> re.Pattern[str]:
        return re.compile(self.namespace)


class ToolSettings(BaseModel):
    """Executables used for dependency analysis and archive handling.

    Attributes:
        jdeps: The class dependency analyzer.
        zip: The archive packer.
        unzip: The archive extractor.
        timeout: Seconds to wait for a single tool run, or None to wait forever.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    jdeps: str = "jdeps"
    zip: str = "zip"
    unzip: str = "unzip"
    timeout: float | None = Field(default=None, gt=0)


class Settings(BaseModel):
    """Top-level jarmin settings."""

    model_config = ConfigDict(extra="forbid", frozen=True, populate_by_name=True)

    library: LibrarySettings = Field(default_factory=LibrarySettings)
    tools: ToolSettings = Field(default_factory=ToolSettings)
    compression_level: int = Field(default=DEFAULT_COMPRESSION_LEVEL, ge=0, le=9, alias="compression-level")


def load_settings(path: Path) -> Settings:
    """Load and validate a settings file.

    An empty file yields the default settings.

    Args:
        path: Path to the YAML settings file.

    Returns:
        A validated Settings instance.

    Raises:
        ConfigError: If the file cannot be read, contains invalid YAML,
            or does not conform to the expected schema.
    """
    try:
        raw = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        raise ConfigError(f"Settings file not found: {path}") from None
    except OSError as exc:
        raise ConfigError(f"Cannot read settings file '{path}': {exc}") from exc

    return _parse_settings(raw, source_label=str(path))


def discover_settings(directory: Path) -> Settings:
    """Load ``.jarmin.yaml`` from *directory*, or return defaults if there is none."""
    candidate = directory / SETTINGS_FILE_NAME
    if not candidate.is_file():
        return Settings()
    return load_settings(candidate)


# ################
# Implementation
# ################


def _parse_settings(text: str, source_label: str = "<string>") -> Settings:
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML in {source_label}: {exc}") from exc

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigError(f"{source_label}: settings must be a YAML mapping")

    try:
        return Settings.model_validate(data)
    except ValidationError as exc:
        raise ConfigError(f"Invalid settings in {source_label}: {_summarize(exc)}") from exc


def _summarize(exc: ValidationError) -> str:
    """Collapse a pydantic validation error into a single line."""
    parts = []
    for error in exc.errors():
        location = ".".join(str(item) for item in error["loc"]) or "<root>"
        parts.append(f"{location}: {error['msg']}")
    return "; ".join(parts)
