"""Caller-side pipeline: bytes or a file path to outline text."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from outline.engine import extract_symbols, get_adapter
from outline.errors import UnsupportedLanguageError
from outline.render import render_outline
from parse.grammars import parse_source
from parse.languages import detect_language

if TYPE_CHECKING:
    from collections.abc import Mapping
    from pathlib import Path

    from outline.models import OutlineDocument

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FileOutline:
    language: str
    document: OutlineDocument
    text: str
    path: str | None = None


def outline_source(
    source: bytes, language: str, *, path: str | None = None
) -> FileOutline:
    """Parse ``source`` as ``language`` and build its outline.

    Raises:
        UnsupportedLanguageError: If no adapter is registered for the tag.
    """
    get_adapter(language)
    tree = parse_source(source, language)
    if tree.root_node.has_error:
        logger.info(
            "%s: syntax errors present, outline is best effort", path or language
        )
    document = extract_symbols(source, tree.root_node, language)
    return FileOutline(
        language=language,
        document=document,
        text=render_outline(document),
        path=path,
    )


def outline_file(
    path: Path,
    language: str | None = None,
    extra_extensions: Mapping[str, str] | None = None,
) -> FileOutline:
    """Read ``path`` and outline it, detecting the language when not given.

    Raises:
        UnsupportedLanguageError: If the language is unknown or cannot be
            detected from the file extension.
        OSError: If the file cannot be read.
    """
    if language is None:
        language = detect_language(path, extra_extensions)
        if language is None:
            raise UnsupportedLanguageError(path.suffix or path.name)
    source = path.read_bytes()
    return outline_source(source, language, path=path.as_posix())


__all__ = ["FileOutline", "outline_file", "outline_source"]
