"""Symbol outline extraction over concrete syntax trees."""

from outline.engine import (
    extract_outline,
    extract_symbols,
    render_outline,
    supported_languages,
)
from outline.errors import OutlineError, UnsupportedLanguageError
from outline.models import OutlineDocument, Symbol, SymbolKind

__all__ = [
    "OutlineDocument",
    "OutlineError",
    "Symbol",
    "SymbolKind",
    "UnsupportedLanguageError",
    "extract_outline",
    "extract_symbols",
    "render_outline",
    "supported_languages",
]
