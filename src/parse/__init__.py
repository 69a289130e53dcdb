"""Language detection, grammar loading and parsing for outline callers."""

from parse.grammars import load_language, parse_source
from parse.languages import LANGUAGES, detect_language, language_names
from parse.pipeline import FileOutline, outline_file, outline_source

__all__ = [
    "LANGUAGES",
    "FileOutline",
    "detect_language",
    "language_names",
    "load_language",
    "outline_file",
    "outline_source",
    "parse_source",
]
