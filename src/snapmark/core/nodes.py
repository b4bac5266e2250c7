# topmark:header:start
#
#   project      : SnapMark
#   file         : nodes.py
#   file_relpath : src/snapmark/core/nodes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Markup node model produced by the SnapMark parser.

A parsed description is an ordered sequence of block nodes. Every node is one of
two shapes:

- `Text`: a leaf carrying a string payload (``kind`` is always `NodeType.TEXT`).
- `Container`: any other node type, carrying an ordered tuple of child nodes.

Both shapes are frozen dataclasses; a node is never mutated after construction.
Tree rewrites (coalescing, URL extraction) build new containers bottom-up via
`rebuild`, which walks the tree with an explicit stack so that deeply nested
inline markup cannot exhaust the interpreter's recursion limit.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, ClassVar

if TYPE_CHECKING:
    from collections.abc import Callable, Iterator, Sequence


class NodeType(str, Enum):
    """Variant tag of a markup node.

    Attributes:
        TEXT: Literal text (leaf).
        PARAGRAPH: A paragraph of inline content.
        UNORDERED_LIST: A bullet list; children are `LIST_ITEM` nodes.
        LIST_ITEM: One bullet item; children are block nodes.
        CODE_BLOCK: An indented code block wrapping a single `TEXT` child.
        CODE_SPAN: An inline code span wrapping a single `TEXT` child.
        EMPHASIS: Emphasised inline content.
        STRONG_EMPHASIS: Strongly emphasised inline content.
        URL: An auto-detected link wrapping a single `TEXT` child.
    """

    TEXT = "text"
    PARAGRAPH = "paragraph"
    UNORDERED_LIST = "unordered-list"
    LIST_ITEM = "list-item"
    CODE_BLOCK = "code-block"
    CODE_SPAN = "code-span"
    EMPHASIS = "emphasis"
    STRONG_EMPHASIS = "strong-emphasis"
    URL = "url"


class Node:
    """Common base of `Text` and `Container`.

    Attributes:
        kind (NodeType): The variant tag of this node.
    """

    __slots__ = ()

    kind: NodeType

    @property
    def is_text(self) -> bool:
        """Whether this node is a `Text` leaf."""
        return self.kind is NodeType.TEXT


@dataclass(frozen=True, slots=True)
class Text(Node):
    """Leaf node carrying literal text.

    Attributes:
        text (str): The text payload.
    """

    kind: ClassVar[NodeType] = NodeType.TEXT

    text: str

    def __str__(self) -> str:
        return self.text


@dataclass(frozen=True, slots=True)
class Container(Node):
    """Node carrying an ordered, possibly empty, sequence of children.

    Attributes:
        kind (NodeType): Any `NodeType` except `NodeType.TEXT`.
        children (tuple[Node, ...]): The child nodes, in document order.
    """

    kind: NodeType
    children: tuple[Node, ...] = ()


def wrap_text(kind: NodeType, text: str) -> Container:
    """Return a container of ``kind`` holding a single `Text` child.

    Used for code blocks, code spans and URLs, which always wrap exactly one
    text leaf.
    """
    return Container(kind, (Text(text),))


def rebuild(
    nodes: Sequence[Node],
    visit: Callable[[list[Node]], list[Node]],
    *,
    skip: frozenset[NodeType] = frozenset(),
) -> list[Node]:
    """Rebuild a node sequence bottom-up.

    ``visit`` is applied to every child list (post-order: the children of a
    container are rebuilt before the list containing the container is visited),
    and finally to the top-level list itself. Containers whose kind is in
    ``skip`` are kept as they are and their children are not visited.

    The walk uses an explicit stack rather than recursion.

    Args:
        nodes (Sequence[Node]): The top-level node sequence.
        visit (Callable[[list[Node]], list[Node]]): Rewrites one finalized list of
            siblings and returns the replacement list.
        skip (frozenset[NodeType]): Container kinds that are not descended into.

    Returns:
        list[Node]: The rewritten top-level sequence.
    """
    # Each frame: (container being rebuilt or None for the root, source children,
    # next index to process, rebuilt children so far).
    stack: list[tuple[Container | None, Sequence[Node], int, list[Node]]] = [
        (None, nodes, 0, [])
    ]
    while True:
        owner, source, index, done = stack[-1]
        if index < len(source):
            node: Node = source[index]
            stack[-1] = (owner, source, index + 1, done)
            if isinstance(node, Container) and node.kind not in skip and node.children:
                stack.append((node, node.children, 0, []))
            else:
                done.append(node)
            continue

        stack.pop()
        visited: list[Node] = visit(done)
        if owner is None:
            return visited
        stack[-1][3].append(Container(owner.kind, tuple(visited)))


def iter_text(nodes: Sequence[Node]) -> Iterator[str]:
    """Yield the text of every `Text` leaf in document order."""
    stack: list[Iterator[Node]] = [iter(nodes)]
    while stack:
        node: Node | None = next(stack[-1], None)
        if node is None:
            stack.pop()
        elif isinstance(node, Text):
            yield node.text
        elif isinstance(node, Container):
            stack.append(iter(node.children))


def walk(nodes: Sequence[Node]) -> Iterator[tuple[Node, bool]]:
    """Yield ``(node, entering)`` pairs in document order.

    A container is yielded twice: entering, before its children, and leaving,
    after them. A `Text` leaf is yielded once, as entering. Like `rebuild`, the
    walk keeps its own stack.
    """
    stack: list[tuple[Container | None, Iterator[Node]]] = [(None, iter(nodes))]
    while stack:
        owner, children = stack[-1]
        node: Node | None = next(children, None)
        if node is None:
            stack.pop()
            if owner is not None:
                yield owner, False
        elif isinstance(node, Container):
            yield node, True
            stack.append((node, iter(node.children)))
        else:
            yield node, True
