# topmark:header:start
#
#   project      : SnapMark
#   file         : test_config_model.py
#   file_relpath : tests/config/test_config_model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for the configuration model in `snapmark.config.model`.

Covers the built-in defaults, TOML loading (``snapmark.toml`` and
``[tool.snapmark]`` in ``pyproject.toml``), discovery, merge precedence and
CLI overrides.
"""

from __future__ import annotations

import dataclasses
import logging
from pathlib import Path
from typing import Any

import pytest
import toml

from snapmark.config import ConfigError, MutableParserConfig, ParserConfig, validate_max_depth
from snapmark.core.versions import MarkdownVersion
from snapmark.rendering.formats import OutputFormat


def write(path: Path, text: str) -> Path:
    path.write_text(text, encoding="utf-8")
    return path


def test_defaults_match_parser_config_defaults() -> None:
    """The bundled defaults freeze into the dataclass defaults."""
    assert MutableParserConfig.from_defaults().freeze() == ParserConfig()


def test_frozen_config_is_immutable() -> None:
    """`ParserConfig` cannot be mutated."""
    config = ParserConfig()
    with pytest.raises(dataclasses.FrozenInstanceError):
        config.max_depth = 3  # type: ignore[misc]


def test_thaw_freeze_round_trip() -> None:
    """Thawing and freezing again gives an equal config."""
    config = ParserConfig(preserve_whitespace=True, max_depth=7, output_format=OutputFormat.HTML)
    draft: MutableParserConfig = config.thaw()
    assert draft.freeze() == config
    draft.max_depth = 2
    assert draft.freeze().max_depth == 2
    assert config.max_depth == 7


@pytest.mark.parametrize("value", [0, -5, True, "3", 2.0])
def test_validate_max_depth_rejects(value: Any) -> None:
    """Only integers of at least 1 are valid."""
    with pytest.raises(ConfigError):
        validate_max_depth(value)


def test_config_error_is_value_error() -> None:
    """`ConfigError` can be caught as ValueError."""
    with pytest.raises(ValueError):
        ParserConfig(max_depth=0)


def test_to_toml_dict() -> None:
    """The TOML view mirrors the default file layout."""
    assert ParserConfig().to_toml_dict() == {
        "parser": {"version": 0, "preserve_whitespace": False, "max_depth": 64},
        "output": {"format": "tree"},
    }


def test_from_toml_file(tmp_path: Path) -> None:
    """Values in ``snapmark.toml`` are read and the file is recorded."""
    path: Path = write(
        tmp_path / "snapmark.toml",
        '[parser]\npreserve_whitespace = true\nmax_depth = 4\n[output]\nformat = "HTML"\n',
    )
    draft = MutableParserConfig.from_toml_file(path)
    assert draft is not None
    assert draft.preserve_whitespace is True
    assert draft.max_depth == 4
    assert draft.output_format is OutputFormat.HTML
    assert draft.version is None
    assert draft.config_files == [path]


def test_from_pyproject_tool_section(tmp_path: Path) -> None:
    """``pyproject.toml`` is read from ``[tool.snapmark]``."""
    path: Path = write(tmp_path / "pyproject.toml", "[tool.snapmark.parser]\nmax_depth = 9\n")
    draft = MutableParserConfig.from_toml_file(path)
    assert draft is not None
    assert draft.max_depth == 9


def test_pyproject_without_tool_section(tmp_path: Path) -> None:
    """A ``pyproject.toml`` with no SnapMark table yields no config."""
    path: Path = write(tmp_path / "pyproject.toml", '[project]\nname = "x"\n')
    assert MutableParserConfig.from_toml_file(path) is None


@pytest.mark.parametrize(
    "text",
    [
        "[parser]\nmax_depth = 0\n",
        '[parser]\nmax_depth = "deep"\n',
        "[parser]\nversion = 3\n",
        '[parser]\npreserve_whitespace = "yes"\n',
        '[output]\nformat = "pdf"\n',
    ],
)
def test_invalid_values_raise(tmp_path: Path, text: str) -> None:
    """Bad values are reported as ConfigError."""
    path: Path = write(tmp_path / "snapmark.toml", text)
    with pytest.raises(ConfigError):
        MutableParserConfig.from_toml_file(path)


def test_unknown_keys_are_ignored(tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
    """Unknown sections and keys are logged, not fatal."""
    caplog.set_level(logging.WARNING)
    path: Path = write(tmp_path / "snapmark.toml", "[render]\nx = 1\n[parser]\ncolour = 2\n")
    draft = MutableParserConfig.from_toml_file(path)
    assert draft is not None
    assert draft.freeze() == ParserConfig(config_files=(path,))
    assert "'render'" in caplog.text
    assert "'colour'" in caplog.text


def test_discovery_prefers_snapmark_toml(tmp_path: Path) -> None:
    """``snapmark.toml`` wins over ``pyproject.toml``."""
    write(tmp_path / "pyproject.toml", "[tool.snapmark.parser]\nmax_depth = 9\n")
    assert MutableParserConfig.discover_config_file(tmp_path) == tmp_path / "pyproject.toml"
    write(tmp_path / "snapmark.toml", "[parser]\nmax_depth = 5\n")
    assert MutableParserConfig.discover_config_file(tmp_path) == tmp_path / "snapmark.toml"


def test_discovery_ignores_unrelated_pyproject(tmp_path: Path) -> None:
    """A ``pyproject.toml`` without ``[tool.snapmark]`` is not a config file."""
    write(tmp_path / "pyproject.toml", '[project]\nname = "x"\n')
    assert MutableParserConfig.discover_config_file(tmp_path) is None


def test_load_merged_precedence(tmp_path: Path) -> None:
    """Defaults < config file < CLI arguments."""
    write(tmp_path / "snapmark.toml", "[parser]\nmax_depth = 5\npreserve_whitespace = true\n")
    draft = MutableParserConfig.load_merged(start=tmp_path)
    assert draft.max_depth == 5
    assert draft.preserve_whitespace is True
    assert draft.output_format is OutputFormat.TREE

    draft.apply_cli_args({"max_depth": 2, "preserve_whitespace": None, "output_format": "json"})
    config: ParserConfig = draft.freeze()
    assert config.max_depth == 2
    assert config.preserve_whitespace is True
    assert config.output_format is OutputFormat.JSON
    assert config.config_files == (tmp_path / "snapmark.toml",)


def test_load_merged_no_config(tmp_path: Path) -> None:
    """``no_config`` skips discovery."""
    write(tmp_path / "snapmark.toml", "[parser]\nmax_depth = 5\n")
    assert MutableParserConfig.load_merged(start=tmp_path, no_config=True).freeze() == (
        ParserConfig()
    )


def test_load_merged_explicit_file(tmp_path: Path) -> None:
    """An explicit file is used even when discovery is off."""
    path: Path = write(tmp_path / "custom.toml", "[parser]\nmax_depth = 3\n")
    draft = MutableParserConfig.load_merged(config_file=path, no_config=True, start=tmp_path)
    assert draft.max_depth == 3


def test_merge_with_keeps_unset_values() -> None:
    """Unset fields of the overriding draft do not clear the base."""
    base = MutableParserConfig(max_depth=5, preserve_whitespace=True)
    merged = base.merge_with(MutableParserConfig(output_format=OutputFormat.TEXT))
    assert merged.max_depth == 5
    assert merged.preserve_whitespace is True
    assert merged.output_format is OutputFormat.TEXT


def test_apply_cli_args_accepts_enums_and_strings() -> None:
    """Versions and formats may be given as members or strings."""
    draft = MutableParserConfig().apply_cli_args(
        {"version": "0", "output_format": OutputFormat.HTML}
    )
    assert draft.version is MarkdownVersion.V0
    assert draft.output_format is OutputFormat.HTML


@pytest.mark.parametrize(
    "args",
    [{"version": 7}, {"max_depth": 0}, {"output_format": "yaml"}],
)
def test_apply_cli_args_rejects_bad_values(args: dict[str, Any]) -> None:
    """Out-of-range arguments raise ConfigError."""
    with pytest.raises(ConfigError):
        MutableParserConfig().apply_cli_args(args)


@pytest.mark.parametrize("pyproject", [False, True])
def test_default_config_toml(pyproject: bool) -> None:
    """The default document parses back to the defaults."""
    text: str = MutableParserConfig.get_default_config_toml(pyproject=pyproject)
    data: dict[str, Any] = toml.loads(text)
    if pyproject:
        data = data["tool"]["snapmark"]
    assert data == ParserConfig().to_toml_dict()
