# topmark:header:start
#
#   project      : SnapMark
#   file         : blocks.py
#   file_relpath : src/snapmark/blocks.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

r"""Block splitter: turn description text into paragraphs, lists and code blocks.

The text is split into lines (terminators kept) and walked top to bottom:

- blank lines separate blocks and are otherwise skipped;
- a line indented by at least four spaces starts an indented code block;
- a line starting with ``-``, ``+`` or ``*`` followed by whitespace starts a
  bullet list; the text of each item is parsed again as blocks;
- anything else starts a paragraph, whose text is handed to the inline
  pipeline.

List nesting is bounded by ``ParserConfig.max_depth``: at that depth bullets
are no longer recognised and their lines are read as paragraph text.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Final

from snapmark.config.logging import get_logger
from snapmark.core.chars import (
    WHITESPACE_CHARS,
    is_blank,
    is_space,
    leading_spaces,
    skip_space,
)
from snapmark.core.nodes import Container, NodeType, wrap_text
from snapmark.pipeline.runner import markup_inline

if TYPE_CHECKING:
    from snapmark.config.logging import SnapmarkLogger
    from snapmark.config.model import ParserConfig
    from snapmark.core.nodes import Node

logger: SnapmarkLogger = get_logger(__name__)

BULLET_SYMBOLS: Final[frozenset[str]] = frozenset("-+*")

CODE_INDENT: Final[int] = 4


@dataclass(frozen=True, slots=True)
class BulletItem:
    """A line that opens a bullet list item.

    Attributes:
        symbol (str): The marker character (``-``, ``+`` or ``*``).
        text (str): Everything after the single whitespace character that
            follows the marker, terminator included.
        offset (int): Column continuation lines must be indented to.
    """

    symbol: str
    text: str
    offset: int


def split_lines(text: str) -> list[str]:
    r"""Split ``text`` on ``\n``, ``\r`` and ``\r\n``, keeping the terminators.

    The returned lines concatenate back to ``text``. A trailing fragment with
    no terminator is returned as the last line; an empty text has no lines.
    """
    lines: list[str] = []
    start = 0
    i = 0
    while i < len(text):
        c: str = text[i]
        if c == "\n" or c == "\r":
            if c == "\r" and text.startswith("\n", i + 1):
                i += 1
            lines.append(text[start : i + 1])
            start = i + 1
        i += 1
    if start < len(text):
        lines.append(text[start:])
    return lines


def parse_bullet_item(line: str) -> BulletItem | None:
    """Return the bullet item opened by ``line``, or ``None``.

    A bullet is optional leading whitespace, one of ``-+*``, then a whitespace
    character. A marker at the very end of the line is not a bullet.
    """
    marker: int = skip_space(line)
    if marker >= len(line) or line[marker] not in BULLET_SYMBOLS:
        return None

    i: int = marker + 1
    if i >= len(line) or not is_space(line[i]):
        return None
    i += 1

    offset: int = skip_space(line, i)
    # A blank item continues one column after its marker.
    if offset >= len(line):
        offset = marker + 1

    return BulletItem(symbol=line[marker], text=line[i:], offset=offset)


def parse_list_item_line(line: str, offset: int) -> str | None:
    """Return the continuation text of ``line`` for an item at ``offset``.

    The first ``offset`` characters must all be whitespace.
    """
    if len(line) < offset or not is_blank(line[:offset]):
        return None
    return line[offset:]


def parse_code_line(line: str) -> str | None:
    """Return ``line`` without its code indent if it is indented code."""
    if leading_spaces(line) < CODE_INDENT:
        return None
    return line[CODE_INDENT:]


class _BlockSplitter:
    """Walks the lines of one block-level text (the document or a list item)."""

    def __init__(self, text: str, config: ParserConfig, depth: int) -> None:
        self.lines: list[str] = split_lines(text)
        self.index: int = 0
        self.config: ParserConfig = config
        self.depth: int = depth
        self.lists_allowed: bool = depth < config.max_depth

    def current(self) -> str | None:
        if self.index < len(self.lines):
            return self.lines[self.index]
        return None

    def bullet(self, line: str) -> BulletItem | None:
        if not self.lists_allowed:
            return None
        return parse_bullet_item(line)

    def split(self) -> list[Node]:
        nodes: list[Node] = []
        while True:
            line = self.current()
            if line is None:
                break
            if is_blank(line):
                self.index += 1
                continue

            code: str | None = parse_code_line(line)
            if code is not None:
                nodes.append(self.code_block(code))
                continue

            item: BulletItem | None = self.bullet(line)
            if item is not None:
                nodes.append(self.bullet_list(item))
                continue

            nodes.append(self.paragraph())
        return nodes

    def code_block(self, first: str) -> Node:
        parts: list[str] = [first]
        self.index += 1
        while True:
            line = self.current()
            if line is None:
                break
            code: str | None = parse_code_line(line)
            if code is not None:
                parts.append(code)
            elif is_blank(line):
                parts.append("\n")
            else:
                break
            self.index += 1

        code_text: str = "".join(parts)
        while code_text.endswith("\n\n"):
            code_text = code_text[:-1]
        logger.trace("code block at depth %d: %r", self.depth, code_text)
        return wrap_text(NodeType.CODE_BLOCK, code_text)

    def bullet_list(self, item: BulletItem) -> Node:
        items: list[Node] = []
        symbol: str = item.symbol
        offset: int = item.offset
        data: list[str] = [item.text]
        starts_empty: bool = item.text == ""
        have_item = True

        self.index += 1
        while True:
            line = self.current()
            if line is None:
                break
            if is_blank(line):
                if starts_empty:
                    break
                data.append(line)
                have_item = True
                self.index += 1
                continue
            starts_empty = False

            continuation: str | None = parse_list_item_line(line, offset)
            if continuation is not None:
                data.append(continuation)
                have_item = True
                self.index += 1
                continue

            if have_item:
                items.append(self.list_item(data))
                data = []
                have_item = False

            # Later markers are not checked against the first item's offset.
            next_item: BulletItem | None = parse_bullet_item(line)
            if next_item is None or next_item.symbol != symbol:
                break
            offset = next_item.offset
            data = [next_item.text]
            have_item = True
            self.index += 1

        if have_item:
            items.append(self.list_item(data))

        logger.trace("list %r at depth %d: %d item(s)", symbol, self.depth, len(items))
        return Container(NodeType.UNORDERED_LIST, tuple(items))

    def list_item(self, data: list[str]) -> Node:
        children: list[Node] = parse_blocks("".join(data), config=self.config, depth=self.depth + 1)
        return Container(NodeType.LIST_ITEM, tuple(children))

    def paragraph(self) -> Node:
        parts: list[str] = []
        while True:
            line = self.current()
            if line is None:
                break
            parts.append(line[skip_space(line) :])
            self.index += 1

            following: str | None = self.current()
            if following is None or is_blank(following):
                break
            item: BulletItem | None = self.bullet(following)
            if item is not None and item.text:
                break

        text: str = "".join(parts).strip(WHITESPACE_CHARS)
        return Container(NodeType.PARAGRAPH, tuple(markup_inline(text, self.config)))


def parse_blocks(text: str, *, config: ParserConfig, depth: int = 0) -> list[Node]:
    """Split ``text`` into block nodes.

    Args:
        text (str): The description text (or the accumulated text of a list item).
        config (ParserConfig): Parser options.
        depth (int): List nesting depth of ``text``; 0 for the whole document.

    Returns:
        list[Node]: The block nodes, in document order.
    """
    if depth >= config.max_depth:
        logger.debug("List nesting limit %d reached; bullets read as text", config.max_depth)
    return _BlockSplitter(text, config, depth).split()
