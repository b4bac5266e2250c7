# topmark:header:start
#
#   project      : SnapMark
#   file         : model.py
#   file_relpath : src/snapmark/config/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration model and merge policy.

This module defines:
    - `ParserConfig`: an immutable runtime snapshot used by the parser and renderers.
    - `MutableParserConfig`: a mutable builder used during discovery/merge; it
      can be frozen into `ParserConfig` and thawed back for edits.

Precedence (lowest → highest):
    1) Built-in defaults (``snapmark-default.toml``)
    2) The discovered or explicit config file
    3) CLI or API overrides (`MutableParserConfig.apply_cli_args`)

Immutability:
    - `ParserConfig` is ``frozen=True``. Use `ParserConfig.thaw` → edit →
      `MutableParserConfig.freeze` for safe updates.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, Any

from snapmark.config.io import (
    get_bool_value_or_none,
    get_int_value_or_none,
    get_string_value_or_none,
    get_table_value,
    load_defaults_dict,
    load_defaults_text,
    load_toml_dict,
    nest_toml_under_section,
)
from snapmark.config.keys import Toml
from snapmark.config.logging import get_logger
from snapmark.constants import (
    CONFIG_FILE_NAME,
    DEFAULT_MAX_DEPTH,
    PYPROJECT_FILE_NAME,
    PYPROJECT_TOOL_SECTION,
)
from snapmark.core.versions import MarkdownVersion
from snapmark.rendering.formats import OutputFormat

if TYPE_CHECKING:
    from snapmark.config.io import TomlTable
    from snapmark.config.logging import SnapmarkLogger

# ArgsLike: generic mapping accepted by config loaders (works for CLI namespaces and API dicts).
ArgsLike = Mapping[str, Any]

logger: SnapmarkLogger = get_logger(__name__)


class ConfigError(ValueError):
    """Raised when a configuration value has the wrong type or is out of range."""


# ------------------ Immutable runtime config ------------------


@dataclass(frozen=True, slots=True)
class ParserConfig:
    """Immutable runtime configuration for SnapMark.

    Attributes:
        version (MarkdownVersion): Markup grammar version.
        preserve_whitespace (bool): Keep internal whitespace and line endings of
            plain text runs instead of collapsing them to single spaces.
        max_depth (int): Deepest list nesting recognised by the block splitter.
            Bullets nested deeper are read as paragraph text.
        output_format (OutputFormat): Default rendering used by the CLI.
        config_files (tuple[Path, ...]): Config sources merged into this snapshot.
    """

    version: MarkdownVersion = MarkdownVersion.V0
    preserve_whitespace: bool = False
    max_depth: int = DEFAULT_MAX_DEPTH
    output_format: OutputFormat = OutputFormat.TREE
    config_files: tuple[Path, ...] = ()

    def __post_init__(self) -> None:
        validate_max_depth(self.max_depth)

    def to_toml_dict(self) -> TomlTable:
        """Convert this config into a TOML-serializable dict.

        Returns:
            TomlTable: The ``[parser]`` and ``[output]`` tables.
        """
        return {
            Toml.SECTION_PARSER: {
                Toml.KEY_VERSION: int(self.version),
                Toml.KEY_PRESERVE_WHITESPACE: self.preserve_whitespace,
                Toml.KEY_MAX_DEPTH: self.max_depth,
            },
            Toml.SECTION_OUTPUT: {
                Toml.KEY_FORMAT: self.output_format.value,
            },
        }

    def thaw(self) -> MutableParserConfig:
        """Return a mutable copy of this frozen config.

        Returns:
            MutableParserConfig: A mutable builder initialized from this snapshot.
        """
        return MutableParserConfig(
            version=self.version,
            preserve_whitespace=self.preserve_whitespace,
            max_depth=self.max_depth,
            output_format=self.output_format,
            config_files=list(self.config_files),
        )


def validate_max_depth(value: int) -> int:
    """Return ``value`` if it is a usable list nesting limit.

    Raises:
        ConfigError: If ``value`` is not an integer of at least 1.
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise ConfigError(f"max_depth must be an integer, got {value!r}")
    if value < 1:
        raise ConfigError(f"max_depth must be at least 1, got {value}")
    return value


# -------------------------- Mutable builder --------------------------


@dataclass
class MutableParserConfig:
    """Mutable configuration used during discovery and merging.

    Fields set to ``None`` are unset and inherit from the layer below when
    merged; `freeze` fills whatever is still unset with the built-in defaults.
    """

    version: MarkdownVersion | None = None
    preserve_whitespace: bool | None = None
    max_depth: int | None = None
    output_format: OutputFormat | None = None
    config_files: list[Path] = field(default_factory=lambda: [])

    # ---------------------------- Build/freeze ----------------------------
    def freeze(self) -> ParserConfig:
        """Freeze this mutable builder into an immutable `ParserConfig`.

        Raises:
            ConfigError: If ``max_depth`` is out of range.
        """
        return ParserConfig(
            version=self.version if self.version is not None else MarkdownVersion.V0,
            preserve_whitespace=bool(self.preserve_whitespace),
            max_depth=self.max_depth if self.max_depth is not None else DEFAULT_MAX_DEPTH,
            output_format=self.output_format or OutputFormat.TREE,
            config_files=tuple(self.config_files),
        )

    # --------------------------- Loaders/parsers --------------------------
    @classmethod
    def get_default_config_toml(cls, *, pyproject: bool = False) -> str:
        """Return the bundled default configuration as a TOML document.

        Args:
            pyproject (bool): Nest the document under ``[tool.snapmark]`` for
                inclusion in ``pyproject.toml``.

        Returns:
            str: The default configuration, comments included.
        """
        text: str = load_defaults_text()
        if pyproject:
            return nest_toml_under_section(text, PYPROJECT_TOOL_SECTION)
        return text

    @classmethod
    def from_defaults(cls) -> MutableParserConfig:
        """Load the default configuration from the bundled ``snapmark-default.toml``.

        Returns:
            MutableParserConfig: A builder populated with default values.
        """
        return cls.from_toml_dict(load_defaults_dict())

    @classmethod
    def from_toml_file(cls, path: Path) -> MutableParserConfig | None:
        """Load configuration from a single TOML file.

        ``pyproject.toml`` files are read from their ``[tool.snapmark]`` table.

        Args:
            path (Path): Path to the TOML file.

        Returns:
            MutableParserConfig | None: The loaded builder, or ``None`` when a
                ``pyproject.toml`` has no ``[tool.snapmark]`` table.

        Raises:
            ConfigError: If a value in the file has the wrong type.
        """
        logger.debug("Creating MutableParserConfig from TOML config: %s", path)

        toml_data: TomlTable = load_toml_dict(path)

        if path.name == PYPROJECT_FILE_NAME:
            toml_data = _tool_section(toml_data)
            if not toml_data:
                logger.warning(
                    "[%s] section missing or malformed in %s", PYPROJECT_TOOL_SECTION, path
                )
                return None

        draft: MutableParserConfig = cls.from_toml_dict(toml_data, config_file=path)
        logger.debug("Generated MutableParserConfig: %s", draft)
        return draft

    @classmethod
    def from_toml_dict(
        cls,
        data: TomlTable,
        config_file: Path | None = None,
    ) -> MutableParserConfig:
        """Create a draft config from a parsed TOML dict.

        Unknown sections and keys are logged and ignored.

        Args:
            data (TomlTable): The parsed TOML data.
            config_file (Path | None): Optional path to the source TOML file.

        Returns:
            MutableParserConfig: The resulting builder.

        Raises:
            ConfigError: If a value has the wrong type or is out of range.
        """
        source: str = str(config_file) if config_file else "<defaults>"
        for key in data:
            if key not in Toml.ALLOWED_TOP_LEVEL_KEYS:
                logger.warning("Ignoring unknown config key %r in %s", key, source)

        parser_tbl: TomlTable = get_table_value(data, Toml.SECTION_PARSER)
        logger.trace("TOML [parser]: %s", parser_tbl)

        output_tbl: TomlTable = get_table_value(data, Toml.SECTION_OUTPUT)
        logger.trace("TOML [output]: %s", output_tbl)

        sections: tuple[tuple[str, TomlTable], ...] = (
            (Toml.SECTION_PARSER, parser_tbl),
            (Toml.SECTION_OUTPUT, output_tbl),
        )
        for section, tbl in sections:
            for key in tbl:
                if key not in Toml.ALLOWED_SECTION_KEYS[section]:
                    logger.warning("Ignoring unknown key %r in [%s] of %s", key, section, source)

        draft: MutableParserConfig = cls()
        if config_file is not None:
            draft.config_files = [config_file]

        try:
            raw_version: int | None = get_int_value_or_none(parser_tbl, Toml.KEY_VERSION)
            raw_depth: int | None = get_int_value_or_none(parser_tbl, Toml.KEY_MAX_DEPTH)
        except ValueError as exc:
            raise ConfigError(f"Invalid [{Toml.SECTION_PARSER}] value in {source}: {exc}") from exc

        if raw_version is not None:
            draft.version = _parse_version(raw_version, source)
        if raw_depth is not None:
            draft.max_depth = validate_max_depth(raw_depth)

        if Toml.KEY_PRESERVE_WHITESPACE in parser_tbl:
            preserve: bool | None = get_bool_value_or_none(
                parser_tbl, Toml.KEY_PRESERVE_WHITESPACE
            )
            if preserve is None:
                raise ConfigError(
                    f"Invalid [{Toml.SECTION_PARSER}] value in {source}: "
                    f"{Toml.KEY_PRESERVE_WHITESPACE!r} must be a boolean"
                )
            draft.preserve_whitespace = preserve

        fmt: str | None = get_string_value_or_none(output_tbl, Toml.KEY_FORMAT)
        if fmt is not None:
            draft.output_format = _parse_output_format(fmt, source)

        return draft

    @classmethod
    def discover_config_file(cls, start: Path) -> Path | None:
        """Return the config file to use for ``start``, if any.

        ``snapmark.toml`` wins over a ``pyproject.toml`` in the same directory;
        a ``pyproject.toml`` only counts when it has a ``[tool.snapmark]`` table.

        Args:
            start (Path): Directory to look in.

        Returns:
            Path | None: The discovered config file, or ``None``.
        """
        candidate: Path = start / CONFIG_FILE_NAME
        if candidate.is_file():
            logger.debug("Discovered config file: %s", candidate)
            return candidate

        pyproject: Path = start / PYPROJECT_FILE_NAME
        if pyproject.is_file() and _tool_section(load_toml_dict(pyproject)):
            logger.debug("Discovered config file: %s", pyproject)
            return pyproject

        return None

    @classmethod
    def load_merged(
        cls,
        *,
        config_file: Path | None = None,
        no_config: bool = False,
        start: Path | None = None,
    ) -> MutableParserConfig:
        """Merge the built-in defaults with an explicit or discovered config file.

        Args:
            config_file (Path | None): Explicit config file (``--config``); skips discovery.
            no_config (bool): If True, skip discovery.
            start (Path | None): Discovery directory (defaults to the current directory).

        Returns:
            MutableParserConfig: A draft ready to be frozen or further edited.

        Raises:
            ConfigError: If the config file holds invalid values.
        """
        draft: MutableParserConfig = cls.from_defaults()

        path: Path | None = config_file
        if path is None and not no_config:
            path = cls.discover_config_file(start or Path.cwd())

        if path is not None:
            loaded: MutableParserConfig | None = cls.from_toml_file(path)
            if loaded is not None:
                draft = draft.merge_with(loaded)

        return draft

    # ------------------------------- Merging -------------------------------
    def merge_with(self, other: MutableParserConfig) -> MutableParserConfig:
        """Return a new draft where the set values of ``other`` override this draft.

        Args:
            other (MutableParserConfig): The config whose values override those of this draft.

        Returns:
            MutableParserConfig: The merged builder.
        """
        return MutableParserConfig(
            version=other.version if other.version is not None else self.version,
            preserve_whitespace=other.preserve_whitespace
            if other.preserve_whitespace is not None
            else self.preserve_whitespace,
            max_depth=other.max_depth if other.max_depth is not None else self.max_depth,
            output_format=other.output_format
            if other.output_format is not None
            else self.output_format,
            config_files=self.config_files + other.config_files,
        )

    def apply_cli_args(self, args: ArgsLike) -> MutableParserConfig:
        """Update fields from an arguments mapping (CLI or API).

        Keys with a ``None`` value are left untouched. Recognized keys:
        ``version``, ``preserve_whitespace``, ``max_depth`` and ``output_format``.

        Args:
            args (ArgsLike): Parsed arguments mapping.

        Returns:
            MutableParserConfig: This builder, for chaining.

        Raises:
            ConfigError: If a value is out of range.
        """
        version: MarkdownVersion | int | str | None = args.get("version")
        if version is not None:
            self.version = _parse_version(version, "arguments")

        preserve: bool | None = args.get("preserve_whitespace")
        if preserve is not None:
            self.preserve_whitespace = bool(preserve)

        max_depth: int | None = args.get("max_depth")
        if max_depth is not None:
            self.max_depth = validate_max_depth(max_depth)

        output_format: OutputFormat | str | None = args.get("output_format")
        if output_format is not None:
            self.output_format = (
                output_format
                if isinstance(output_format, OutputFormat)
                else _parse_output_format(output_format, "arguments")
            )

        return self


def _tool_section(toml_data: TomlTable) -> TomlTable:
    table: TomlTable = toml_data
    for key in PYPROJECT_TOOL_SECTION.split("."):
        table = get_table_value(table, key)
    return table


def _parse_version(value: MarkdownVersion | int | str, source: str) -> MarkdownVersion:
    try:
        return MarkdownVersion.parse(value)
    except ValueError as exc:
        raise ConfigError(f"Invalid markdown version in {source}: {value!r}") from exc


def _parse_output_format(value: str, source: str) -> OutputFormat:
    try:
        return OutputFormat(value.strip().lower())
    except ValueError as exc:
        choices: str = ", ".join(f.value for f in OutputFormat)
        raise ConfigError(
            f"Invalid output format in {source}: {value!r} (expected one of {choices})"
        ) from exc
