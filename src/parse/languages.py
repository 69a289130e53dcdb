"""Supported languages and file-extension detection."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import PurePath
from types import MappingProxyType
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Mapping
    from pathlib import Path


@dataclass(frozen=True)
class LanguageSpec:
    """A language tag, its file extensions and the grammar that parses it."""

    name: str
    extensions: tuple[str, ...]
    description: str
    grammar_module: str
    grammar_factory: str = "language"


LANGUAGES: MappingProxyType[str, LanguageSpec] = MappingProxyType(
    {
        spec.name: spec
        for spec in (
            LanguageSpec("go", (".go",), "Go", "tree_sitter_go"),
            LanguageSpec("java", (".java",), "Java", "tree_sitter_java"),
            LanguageSpec(
                "javascript",
                (".js", ".jsx", ".mjs", ".cjs"),
                "JavaScript",
                "tree_sitter_javascript",
            ),
            LanguageSpec(
                "typescript",
                (".ts", ".mts", ".cts"),
                "TypeScript",
                "tree_sitter_typescript",
                "language_typescript",
            ),
            LanguageSpec(
                "tsx",
                (".tsx",),
                "TypeScript JSX",
                "tree_sitter_typescript",
                "language_tsx",
            ),
            LanguageSpec("python", (".py", ".pyi"), "Python", "tree_sitter_python"),
            LanguageSpec("swift", (".swift",), "Swift", "tree_sitter_swift"),
            LanguageSpec("c", (".c", ".h"), "C", "tree_sitter_c"),
            LanguageSpec(
                "cpp",
                (".cpp", ".cxx", ".cc", ".hpp", ".hxx", ".hh"),
                "C++",
                "tree_sitter_cpp",
            ),
        )
    }
)

EXTENSIONS: MappingProxyType[str, str] = MappingProxyType(
    {ext: spec.name for spec in LANGUAGES.values() for ext in spec.extensions}
)


def language_names() -> list[str]:
    return sorted(LANGUAGES)


def extension_map(extra_extensions: Mapping[str, str] | None = None) -> dict[str, str]:
    """Built-in extension table, overlaid with configured extras.

    Extra keys are normalized to lowercase with a leading dot.
    """
    mapping = dict(EXTENSIONS)
    for ext, language in (extra_extensions or {}).items():
        key = ext.lower() if ext.startswith(".") else f".{ext.lower()}"
        mapping[key] = language
    return mapping


def detect_language(
    path: str | Path,
    extra_extensions: Mapping[str, str] | None = None,
) -> str | None:
    """Return the language tag for ``path`` by extension, or None."""
    suffix = PurePath(path).suffix.lower()
    if not suffix:
        return None
    return extension_map(extra_extensions).get(suffix)


__all__ = [
    "EXTENSIONS",
    "LANGUAGES",
    "LanguageSpec",
    "detect_language",
    "extension_map",
    "language_names",
]
