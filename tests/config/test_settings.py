# Copyright 2026 Jarmin Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tests for the settings module."""

from pathlib import Path

import pytest
from pydantic import ValidationError

from jarmin.config import (
    DEFAULT_NAMESPACE,
    SETTINGS_FILE_NAME,
    LibrarySettings,
    Settings,
    discover_settings,
    load_settings,
)
from jarmin.errors import ConfigError

# ###############
# Helpers
# ###############


def _write_config(tmp_path: Path, content: str) -> Path:
    """Write a settings file and return its path."""
    config_file = tmp_path / SETTINGS_FILE_NAME
    config_file.write_text(content, encoding="utf-8")
    return config_file


# ###############
# Normal Cases
# ###############


def test_defaults_target_fastutil():
    """Without configuration the target library is fastutil."""
    settings = Settings()
    assert settings.library.name == "fastutil"
    assert settings.library.namespace == DEFAULT_NAMESPACE
    assert settings.library.metadata == ("META-INF/*",)
    assert settings.tools.jdeps == "jdeps"
    assert settings.tools.timeout is None
    assert settings.compression_level == 9


def test_default_namespace_matches_library_classes():
    pattern = LibrarySettings().namespace_pattern
    assert pattern.fullmatch("it.unimi.dsi.fastutil.ints.IntList")
    assert pattern.fullmatch("it.unimi.dsi.fastutil.ints.Int2IntMap$Entry")
    assert not pattern.fullmatch("java.util.List")
    assert not pattern.fullmatch("it.unimi.dsi.fastutilx.Foo")


def test_empty_file_yields_defaults(tmp_path: Path):
    assert load_settings(_write_config(tmp_path, "")) == Settings()


def test_full_config(tmp_path: Path):
    content = """\
library:
  name: guava
  namespace: 'com\\.google\\.common\\..*'
  metadata:
    - 'META-INF/MANIFEST.MF'
    - 'META-INF/maven/*'
tools:
  jdeps: /opt/jdk/bin/jdeps
  zip: /usr/bin/zip
  unzip: /usr/bin/unzip
  timeout: 300
compression-level: 6
"""
    settings = load_settings(_write_config(tmp_path, content))

    assert settings.library.name == "guava"
    assert settings.library.namespace_pattern.fullmatch("com.google.common.collect.ImmutableList")
    assert settings.library.metadata == ("META-INF/MANIFEST.MF", "META-INF/maven/*")
    assert settings.tools.jdeps == "/opt/jdk/bin/jdeps"
    assert settings.tools.timeout == 300
    assert settings.compression_level == 6


def test_partial_config_keeps_other_defaults(tmp_path: Path):
    settings = load_settings(_write_config(tmp_path, "compression-level: 1\n"))
    assert settings.compression_level == 1
    assert settings.library == LibrarySettings()


def test_discover_returns_defaults_without_file(tmp_path: Path):
    assert discover_settings(tmp_path) == Settings()


def test_discover_loads_file_from_directory(tmp_path: Path):
    _write_config(tmp_path, "library:\n  name: mylib\n")
    assert discover_settings(tmp_path).library.name == "mylib"


def test_settings_are_frozen():
    with pytest.raises(ValidationError):
        Settings().compression_level = 1  # type: ignore[misc]


# ###############
# Error Cases
# ###############


def test_missing_file_raises(tmp_path: Path):
    with pytest.raises(ConfigError, match="not found"):
        load_settings(tmp_path / "nope.yaml")


def test_invalid_yaml_raises(tmp_path: Path):
    with pytest.raises(ConfigError, match="Invalid YAML"):
        load_settings(_write_config(tmp_path, "library: [unterminated\n"))


def test_non_mapping_raises(tmp_path: Path):
    with pytest.raises(ConfigError, match="must be a YAML mapping"):
        load_settings(_write_config(tmp_path, "- a\n- b\n"))


def test_unknown_key_raises(tmp_path: Path):
    with pytest.raises(ConfigError, match="Invalid settings"):
        load_settings(_write_config(tmp_path, "colour: blue\n"))


def test_invalid_namespace_regex_raises(tmp_path: Path):
    with pytest.raises(ConfigError, match="library.namespace"):
        load_settings(_write_config(tmp_path, "library:\n  namespace: 'it.(unclosed'\n"))


def test_compression_level_out_of_range_raises(tmp_path: Path):
    with pytest.raises(ConfigError, match="compression-level"):
        load_settings(_write_config(tmp_path, "compression-level: 10\n"))


def test_empty_library_name_raises(tmp_path: Path):
    with pytest.raises(ConfigError, match="library.name"):
        load_settings(_write_config(tmp_path, "library:\n  name: '  '\n"))


def test_non_positive_timeout_raises(tmp_path: Path):
    with pytest.raises(ConfigError, match="tools.timeout"):
        load_settings(_write_config(tmp_path, "tools:\n  timeout: 0\n"))
