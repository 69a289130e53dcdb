"""Leading documentation attachment."""

from __future__ import annotations

import inspect
import re
from typing import TYPE_CHECKING

from outline.node import is_comment, node_text

if TYPE_CHECKING:
    from outline.node import CstNode

_STRING_PREFIX = re.compile(r"^[rRbBuUfF]{0,2}")
_QUOTES = ('"""', "'''", '"', "'")


def _is_trailing(comment: CstNode) -> bool:
    """True for a comment that shares its first row with preceding code.

    Preprocessor lines and Go terminators end at column 0 of the next row
    because they own their newline; they share no text with the comment.
    """
    before = comment.prev_sibling
    if before is None or is_comment(before):
        return False
    row, column = before.end_point
    return row == comment.start_point[0] and column > 0


def resolve_documentation(node: CstNode, source: bytes) -> str | None:
    """Collect the contiguous comment run directly above ``node``.

    Walks previous named siblings while they are comments. The run ends at
    the first non-comment sibling, at a blank line between two entries, or
    at a trailing comment that belongs to the code before it. Each comment
    is trimmed and the block is returned in top-to-bottom order.
    """
    if node.parent is None:
        return None

    lines: list[str] = []
    below = node
    current = node.prev_named_sibling
    while current is not None and is_comment(current):
        if current.end_point[0] + 1 < below.start_point[0]:
            break
        if _is_trailing(current):
            break
        lines.append(node_text(source, current).strip())
        below = current
        current = current.prev_named_sibling

    if not lines:
        return None
    lines.reverse()
    return "\n".join(lines)


def strip_docstring(raw: str) -> str:
    """Remove string prefix and quote delimiters, then clean indentation."""
    text = _STRING_PREFIX.sub("", raw.strip(), count=1)
    for quote in _QUOTES:
        if (
            text.startswith(quote)
            and text.endswith(quote)
            and len(text) >= 2 * len(quote)
        ):
            text = text[len(quote) : -len(quote)]
            break
    return inspect.cleandoc(text)


__all__ = ["resolve_documentation", "strip_docstring"]
