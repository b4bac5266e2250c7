# topmark:header:start
#
#   project      : SnapMark
#   file         : parser.py
#   file_relpath : src/snapmark/parser.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Public parser API.

`MarkdownParser` turns a snap description into a list of block nodes:

    >>> from snapmark import MarkdownParser, NodeType
    >>> [node.kind for node in MarkdownParser().parse("Hello *world*")]
    [<NodeType.PARAGRAPH: 'paragraph'>]

Parsing never fails on string input: malformed markup is kept as text.
"""

from __future__ import annotations

from dataclasses import replace
from typing import TYPE_CHECKING

from snapmark.blocks import parse_blocks
from snapmark.config.logging import get_logger
from snapmark.config.model import ParserConfig
from snapmark.constants import DEFAULT_MAX_DEPTH
from snapmark.core.versions import MarkdownVersion

if TYPE_CHECKING:
    from snapmark.config.logging import SnapmarkLogger
    from snapmark.core.nodes import Node

logger: SnapmarkLogger = get_logger(__name__)


class MarkdownParser:
    """Parser for the snap description markup dialect.

    Instances hold only a frozen `ParserConfig` and can be shared freely.

    Args:
        version (MarkdownVersion | int): Markup grammar version supported by the caller.
        config (ParserConfig | None): Parser options; its ``version`` is replaced
            by ``version``.

    Raises:
        ValueError: If ``version`` is not a known `MarkdownVersion`.
    """

    __slots__ = ("_config",)

    def __init__(
        self,
        version: MarkdownVersion | int = MarkdownVersion.V0,
        *,
        config: ParserConfig | None = None,
    ) -> None:
        resolved: MarkdownVersion = MarkdownVersion.parse(version)
        base: ParserConfig = config if config is not None else ParserConfig()
        self._config: ParserConfig = replace(base, version=resolved)

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}(version={self.version!r}, "
            f"preserve_whitespace={self.preserve_whitespace!r}, "
            f"max_depth={self.max_depth!r})"
        )

    @property
    def config(self) -> ParserConfig:
        """The effective parser configuration."""
        return self._config

    @property
    def version(self) -> MarkdownVersion:
        """The markup grammar version this parser accepts."""
        return self._config.version

    @property
    def preserve_whitespace(self) -> bool:
        """Whether plain text keeps its internal whitespace."""
        return self._config.preserve_whitespace

    @property
    def max_depth(self) -> int:
        """Deepest list nesting recognised."""
        return self._config.max_depth

    def parse(self, text: str) -> list[Node]:
        """Parse ``text`` into block nodes.

        Args:
            text (str): The description text.

        Returns:
            list[Node]: Top-level `PARAGRAPH`, `UNORDERED_LIST` and
                `CODE_BLOCK` nodes in document order; empty for empty text.

        Raises:
            TypeError: If ``text`` is not a ``str``.
        """
        if not isinstance(text, str):
            raise TypeError(f"text must be a str, not {type(text).__name__}")
        nodes: list[Node] = parse_blocks(text, config=self._config)
        logger.debug("Parsed %d character(s) into %d block(s)", len(text), len(nodes))
        return nodes


def parse(
    text: str,
    *,
    version: MarkdownVersion | int = MarkdownVersion.V0,
    preserve_whitespace: bool = False,
    max_depth: int = DEFAULT_MAX_DEPTH,
) -> list[Node]:
    """Parse a snap description with a one-off `MarkdownParser`.

    Args:
        text (str): The description text.
        version (MarkdownVersion | int): Markup grammar version.
        preserve_whitespace (bool): Keep internal whitespace of plain text.
        max_depth (int): Deepest list nesting recognised (at least 1).

    Returns:
        list[Node]: The parsed block nodes.

    Raises:
        TypeError: If ``text`` is not a ``str``.
        ValueError: If ``version`` or ``max_depth`` is invalid.
    """
    config = ParserConfig(preserve_whitespace=preserve_whitespace, max_depth=max_depth)
    return MarkdownParser(version, config=config).parse(text)
