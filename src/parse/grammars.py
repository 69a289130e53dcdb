"""Tree-sitter grammar loading and parsing.

A parser is built for every call; nothing is cached at module level, so
concurrent callers never share a parser instance.
"""

from __future__ import annotations

import importlib

from tree_sitter import Language, Parser, Tree

from outline.errors import UnsupportedLanguageError
from parse.languages import LANGUAGES


def load_language(language: str) -> Language:
    """Load the tree-sitter grammar for a language tag.

    Raises:
        UnsupportedLanguageError: If the tag is unknown.
        ImportError: If the grammar package is not installed.
    """
    spec = LANGUAGES.get(language)
    if spec is None:
        raise UnsupportedLanguageError(language)
    module = importlib.import_module(spec.grammar_module)
    factory = getattr(module, spec.grammar_factory)
    return Language(factory())


def parse_source(source: bytes, language: str) -> Tree:
    parser = Parser(load_language(language))
    return parser.parse(source)


__all__ = ["load_language", "parse_source"]
