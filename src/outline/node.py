"""Read-only helpers over concrete syntax tree nodes.

The engine only relies on the structural surface below, which
``tree_sitter.Node`` provides. All text is sliced from the source buffer by
byte range, never from the node itself.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol


class CstNode(Protocol):
    """Structural view of a tree-sitter node used by the adapters."""

    @property
    def type(self) -> str: ...

    @property
    def is_named(self) -> bool: ...

    @property
    def start_byte(self) -> int: ...

    @property
    def end_byte(self) -> int: ...

    @property
    def start_point(self) -> tuple[int, int]: ...

    @property
    def end_point(self) -> tuple[int, int]: ...

    @property
    def children(self) -> Sequence[CstNode]: ...

    @property
    def named_children(self) -> Sequence[CstNode]: ...

    @property
    def parent(self) -> CstNode | None: ...

    @property
    def prev_sibling(self) -> CstNode | None: ...

    @property
    def prev_named_sibling(self) -> CstNode | None: ...

    def child_by_field_name(self, name: str, /) -> CstNode | None: ...

    def children_by_field_name(self, name: str, /) -> Sequence[CstNode]: ...


def node_text(source: bytes, node: CstNode | None) -> str:
    """Decode the source slice covered by ``node`` ("" when missing)."""
    if node is None:
        return ""
    return source[node.start_byte : node.end_byte].decode("utf8", errors="ignore")


def slice_text(source: bytes, start: int, end: int) -> str:
    if end <= start:
        return ""
    return source[start:end].decode("utf8", errors="ignore")


def start_line(node: CstNode) -> int:
    """1-indexed source row where ``node`` starts."""
    return node.start_point[0] + 1


def field(node: CstNode, name: str) -> CstNode | None:
    return node.child_by_field_name(name)


def field_text(source: bytes, node: CstNode, name: str) -> str:
    return node_text(source, node.child_by_field_name(name))


def first_child(node: CstNode, *kinds: str) -> CstNode | None:
    """Return the first child (named or not) whose kind is in ``kinds``."""
    for child in node.children:
        if child.type in kinds:
            return child
    return None


def children_of(node: CstNode | None, *kinds: str) -> list[CstNode]:
    if node is None:
        return []
    return [child for child in node.named_children if child.type in kinds]


def field_or_child(node: CstNode, name: str, *kinds: str) -> CstNode | None:
    """Look up a field, falling back to the first child of the given kinds.

    Grammar releases do not always agree on field names, so adapters pair
    each field with the node kinds it is known to hold.
    """
    found = node.child_by_field_name(name)
    if found is not None:
        return found
    return first_child(node, *kinds)


def has_keyword(node: CstNode, keyword: str) -> bool:
    """True when an anonymous child token equals ``keyword``."""
    return any(not child.is_named and child.type == keyword for child in node.children)


def is_comment(node: CstNode) -> bool:
    return "comment" in node.type


__all__ = [
    "CstNode",
    "children_of",
    "field",
    "field_or_child",
    "field_text",
    "first_child",
    "has_keyword",
    "is_comment",
    "node_text",
    "slice_text",
    "start_line",
]
