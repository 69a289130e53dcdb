"""Errors raised by the outline engine."""

from __future__ import annotations


class OutlineError(Exception):
    """Base class for outline engine errors."""


class UnsupportedLanguageError(OutlineError):
    """Raised when no grammar adapter is registered for a language tag."""

    def __init__(self, language: str) -> None:
        self.language = language
        super().__init__(f"unsupported language: {language}")


__all__ = ["OutlineError", "UnsupportedLanguageError"]
