"""Outline extraction entry points.

Each call is a pure function of (source bytes, syntax tree, language tag).
A fresh adapter is built per call; the registry itself is read-only.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from outline.adapters import ADAPTERS
from outline.errors import UnsupportedLanguageError
from outline.models import OutlineDocument
from outline.render import render_outline

if TYPE_CHECKING:
    from outline.adapters.base import GrammarAdapter
    from outline.node import CstNode

logger = logging.getLogger(__name__)


def supported_languages() -> tuple[str, ...]:
    """Language tags with a registered grammar adapter, sorted."""
    return tuple(sorted(ADAPTERS))


def get_adapter(language: str) -> type[GrammarAdapter]:
    try:
        return ADAPTERS[language]
    except KeyError:
        raise UnsupportedLanguageError(language) from None


def extract_symbols(source: bytes, root: CstNode, language: str) -> OutlineDocument:
    """Build the symbol forest for one file.

    Args:
        source: The exact bytes the tree was parsed from.
        root: Root node of the concrete syntax tree.
        language: A tag from ``supported_languages()``.

    Raises:
        UnsupportedLanguageError: If no adapter is registered for ``language``.
    """
    adapter = get_adapter(language)(source)
    symbols = adapter.extract(root)
    logger.debug("%s: extracted %d top-level symbols", language, len(symbols))
    return OutlineDocument(language=language, symbols=symbols)


def extract_outline(source: bytes, root: CstNode, language: str) -> str:
    """Extract and render the outline text for one file."""
    return render_outline(extract_symbols(source, root, language))


__all__ = [
    "extract_outline",
    "extract_symbols",
    "get_adapter",
    "render_outline",
    "supported_languages",
]
