# topmark:header:start
#
#   project      : SnapMark
#   file         : io.py
#   file_relpath : src/snapmark/config/io.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Lightweight TOML I/O helpers for SnapMark configuration.

This module centralizes **pure** helpers for reading and writing TOML used by
the configuration layer. Keeping these utilities separate avoids import cycles
and keeps the model classes small.

Typical flow:
    1. Load defaults from the packaged resource (``load_defaults_dict``).
    2. Load project TOML files (``load_toml_dict``).
    3. Inspect values using typed helpers (``get_table_value``,
       ``get_int_value_or_none``, etc.).
    4. Serialize back to TOML when needed (``to_toml``).
    5. Optionally wrap a TOML document under a dotted section using
       ``nest_toml_under_section`` (e.g., when generating a pyproject.toml block).

Notes:
    - Reading and plain dumping use `toml`. `tomlkit` is used by
      ``nest_toml_under_section`` to keep the comments of the nested document.
"""

from __future__ import annotations

from importlib.resources import files
from typing import TYPE_CHECKING, Any, TypeGuard

import toml
import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError
from tomlkit.items import Table

from snapmark.config.logging import get_logger
from snapmark.constants import (
    DEFAULT_TOML_CONFIG_NAME,
    DEFAULT_TOML_CONFIG_PACKAGE,
)

if TYPE_CHECKING:
    import sys
    from pathlib import Path

    if sys.version_info >= (3, 14):
        from importlib.resources.abc import Traversable
    else:
        from importlib.abc import Traversable

    from snapmark.config.logging import SnapmarkLogger

logger: SnapmarkLogger = get_logger(__name__)

TomlTable = dict[str, Any]


__all__: list[str] = [
    "TomlTable",
    "is_toml_table",
    "get_table_value",
    "get_string_value_or_none",
    "get_bool_value_or_none",
    "get_int_value_or_none",
    "load_defaults_dict",
    "load_defaults_text",
    "load_toml_dict",
    "clean_toml",
    "to_toml",
    "nest_toml_under_section",
]


def is_toml_table(val: Any) -> TypeGuard[TomlTable]:
    """Type guard for a TOML table-like mapping.

    Args:
        val (Any): Value to test.

    Returns:
        TypeGuard[TomlTable]: ``True`` if ``val`` is a ``dict[str, Any]``.
    """
    return isinstance(val, dict)


def get_table_value(table: TomlTable, key: str) -> TomlTable:
    """Extract a sub-table from a TOML table.

    Returns a new empty dict if the sub-table is missing or not a mapping.

    Args:
        table (TomlTable): Parent table mapping.
        key (str): Sub-table key.

    Returns:
        TomlTable: The sub-table if present and a mapping, otherwise an empty dict.
    """
    value: Any | None = table.get(key)
    return value if is_toml_table(value) else {}


def get_string_value_or_none(table: TomlTable, key: str) -> str | None:
    """Extract an optional string value from a TOML table.

    Integers, floats and booleans are coerced with ``str(...)``. Returns
    ``None`` when the key is absent or the value is not coercible.

    Args:
        table (TomlTable): Table to query.
        key (str): Key to extract.

    Returns:
        str | None: The extracted or coerced string value, or ``None``.
    """
    value: Any | None = table.get(key)
    if value is None:
        return None
    if isinstance(value, str):
        return value
    if isinstance(value, (int, float, bool)):
        return str(value)
    return None


def get_bool_value_or_none(table: TomlTable, key: str) -> bool | None:
    """Extract an optional boolean value from a TOML table.

    Integers are coerced with ``bool(value)``. Returns ``None`` when the key is
    absent or the value is not coercible.

    Args:
        table (TomlTable): Table to query.
        key (str): Key to extract.

    Returns:
        bool | None: The extracted or coerced boolean value, or ``None``.
    """
    value: Any | None = table.get(key)
    if value is None:
        return None
    if isinstance(value, bool):
        return value
    if isinstance(value, int):
        return bool(value)
    return None


def get_int_value_or_none(table: TomlTable, key: str) -> int | None:
    """Extract an optional integer value from a TOML table.

    Decimal strings are accepted; booleans are not integers here.

    Args:
        table (TomlTable): Table to query.
        key (str): Key to extract.

    Returns:
        int | None: The integer value, or ``None`` when absent.

    Raises:
        ValueError: If the key is present but the value is not an integer.
    """
    value: Any | None = table.get(key)
    if value is None:
        return None
    if isinstance(value, bool):
        raise ValueError(f"{key!r} must be an integer, got {value!r}")
    if isinstance(value, int):
        return value
    if isinstance(value, str) and value.strip().lstrip("-").isdigit():
        return int(value.strip())
    raise ValueError(f"{key!r} must be an integer, got {value!r}")


def load_defaults_text() -> str:
    """Return the packaged default configuration document, comments included.

    Raises:
        RuntimeError: If the bundled default config resource cannot be read.
    """
    resource: Traversable = files(DEFAULT_TOML_CONFIG_PACKAGE).joinpath(DEFAULT_TOML_CONFIG_NAME)
    logger.debug("Loading defaults from package resource: %s", resource)
    try:
        return resource.read_text(encoding="utf8")
    except OSError as exc:
        raise RuntimeError(
            f"Cannot read bundled default config {DEFAULT_TOML_CONFIG_PACKAGE!r}/"
            f"{DEFAULT_TOML_CONFIG_NAME!r}: {exc}"
        ) from exc


def load_defaults_dict() -> TomlTable:
    """Return the packaged default configuration as a Python dict.

    Returns:
        TomlTable: The parsed default configuration.

    Raises:
        RuntimeError: If the bundled default config resource cannot be read or
            parsed as TOML.
    """
    text: str = load_defaults_text()
    try:
        data: TomlTable = toml.loads(text)
    except toml.TomlDecodeError as exc:
        raise RuntimeError(
            f"Bundled default config {DEFAULT_TOML_CONFIG_PACKAGE!r}/"
            f"{DEFAULT_TOML_CONFIG_NAME!r} is invalid TOML: {exc}"
        ) from exc

    return data


def load_toml_dict(path: Path) -> TomlTable:
    """Load and parse a TOML file from the filesystem.

    Args:
        path (Path): Path to a TOML document (``snapmark.toml`` or ``pyproject.toml``).

    Returns:
        TomlTable: The parsed TOML content.

    Notes:
        - Errors are logged and an empty dict is returned on failure.
        - Encoding is assumed to be UTF-8.
    """
    try:
        val: TomlTable = toml.load(path)
    except OSError as e:
        logger.error("Error loading TOML from %s: %s", path, e)
        val = {}
    except toml.TomlDecodeError as e:
        logger.error("Error decoding TOML from %s: %s", path, e)
        val = {}
    except (TypeError, ValueError) as e:
        logger.error("Invalid TOML content in %s: %s", path, e)
        val = {}
    return val


def clean_toml(text: str) -> str:
    """Normalize a TOML document, removing comments and formatting noise.

    Args:
        text (str): Raw TOML content.

    Returns:
        str: The document round-tripped through the TOML parser and dumper.
    """
    return toml.dumps(toml.loads(text))


def to_toml(toml_dict: TomlTable) -> str:
    """Serialize a TOML mapping to a string.

    Args:
        toml_dict (TomlTable): TOML mapping to render.

    Returns:
        str: The rendered TOML document as a string.
    """
    return toml.dumps(toml_dict)


def nest_toml_under_section(toml_doc: str, section_keys: str) -> str:
    r"""Return a new TOML document nested under a dotted section path.

    ``nest_toml_under_section("[parser]\nmax_depth = 64\n", "tool.snapmark")``
    yields a document equivalent to::

        [tool.snapmark.parser]
        max_depth = 64

    Comments before the first key are kept at the top of the new document;
    comments inside tables travel with their tables.

    Args:
        toml_doc (str): Original TOML document to nest.
        section_keys (str): Dotted section path such as ``"tool.snapmark"``.

    Returns:
        str: The nested TOML document.

    Raises:
        ValueError: If ``section_keys`` has no non-empty component.
        RuntimeError: If the TOML document cannot be parsed.
    """
    try:
        doc: tomlkit.TOMLDocument = tomlkit.parse(toml_doc)
    except TomlkitParseError as exc:
        raise RuntimeError(f"Error parsing TOML document: {exc}") from exc

    keys: list[str] = [k for k in section_keys.split(".") if k]
    if not keys:
        raise ValueError("section_keys must contain at least one non-empty component")

    # Preamble: the unkeyed items (comments, whitespace) before the first key.
    start_index: int = len(doc.body)
    for i, (key, _) in enumerate(doc.body):
        if key is not None:
            start_index = i
            break

    new_doc: tomlkit.TOMLDocument = tomlkit.document()
    new_doc.body.extend(doc.body[0:start_index])

    # Intermediate tables are super tables so that only the leaf gets a header.
    leaf_is_super: bool = all(isinstance(v, Table) for v in doc.values())
    tables: list[Table] = [
        tomlkit.table(is_super_table=i < len(keys) - 1 or leaf_is_super) for i in range(len(keys))
    ]
    for parent, key, child in zip(tables, keys[1:], tables[1:]):
        parent.add(key, child)

    for item_key, item_value in doc.items():
        tables[-1].add(item_key, item_value)

    new_doc.add(keys[0], tables[0])
    return new_doc.as_string()
