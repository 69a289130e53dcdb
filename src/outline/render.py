"""Outline serializer.

Rendering is a pure pass over a finished symbol forest. Each language has a
``RenderStyle``: the indentation unit, the line-comment marker and whether
bodies are brace-delimited or introduced by a colon.
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import TYPE_CHECKING

from outline.errors import UnsupportedLanguageError
from outline.models import SymbolKind

if TYPE_CHECKING:
    from collections.abc import Sequence

    from outline.models import OutlineDocument, Symbol

_PRELUDE_KINDS = frozenset({SymbolKind.PACKAGE, SymbolKind.IMPORT})


@dataclass(frozen=True)
class RenderStyle:
    indent: str
    marker: str
    braces: bool = True
    comment_tokens: tuple[str, ...] = ("//", "/*", "*")
    block: tuple[str, str] | None = ("/*", "*/")

    def annotate(self, text: str, line: int) -> str:
        return f"{text} {self.marker} line {line}"

    def comment(self, indent: str, line: str) -> str:
        if not line:
            return f"{indent}{self.marker}"
        if line.startswith(self.comment_tokens):
            return f"{indent}{line}"
        return f"{indent}{self.marker} {line}"

    def documentation(self, indent: str, text: str) -> list[str]:
        """Comment lines for a doc block.

        Lines inside an open block comment are kept without a marker.
        """
        lines: list[str] = []
        open_block = False
        for raw in text.splitlines():
            line = raw.strip()
            if open_block:
                lines.append(f"{indent}{line}" if line else "")
            else:
                lines.append(self.comment(indent, line))
                if self.block is not None and line.startswith(self.block[0]):
                    open_block = True
                    line = line[len(self.block[0]) :]
            if open_block and self.block is not None and self.block[1] in line:
                open_block = False
        return lines


_TAB_BRACES = RenderStyle(indent="\t", marker="//")
_SPACE_BRACES = RenderStyle(indent="  ", marker="//")

STYLES: MappingProxyType[str, RenderStyle] = MappingProxyType(
    {
        "go": _TAB_BRACES,
        "java": _TAB_BRACES,
        "c": _TAB_BRACES,
        "cpp": _TAB_BRACES,
        "javascript": _SPACE_BRACES,
        "typescript": _SPACE_BRACES,
        "tsx": _SPACE_BRACES,
        "swift": _SPACE_BRACES,
        "python": RenderStyle(
            indent="    ", marker="#", braces=False, comment_tokens=("#",), block=None
        ),
    }
)


def _blank(out: list[str]) -> None:
    if out and out[-1] != "":
        out.append("")


def _trim(out: list[str]) -> None:
    while out and out[-1] == "":
        out.pop()


def _needs_gap(previous: Symbol, current: Symbol) -> bool:
    if previous.kind is SymbolKind.PACKAGE:
        return True
    return previous.kind in _PRELUDE_KINDS and current.kind not in _PRELUDE_KINDS


def _render_block(
    symbols: Sequence[Symbol], depth: int, style: RenderStyle, out: list[str]
) -> None:
    previous: Symbol | None = None
    for symbol in symbols:
        if previous is not None and _needs_gap(previous, symbol):
            _blank(out)
        _render_symbol(symbol, depth, style, out)
        previous = symbol


def _render_symbol(
    symbol: Symbol, depth: int, style: RenderStyle, out: list[str]
) -> None:
    indent = style.indent * depth
    if symbol.documentation:
        out.extend(style.documentation(indent, symbol.documentation))

    if not symbol.has_body:
        out.append(indent + style.annotate(symbol.signature, symbol.start_line))
        return

    inner = indent + style.indent
    if style.braces:
        out.append(indent + style.annotate(f"{symbol.signature} {{", symbol.start_line))
        if symbol.is_callable:
            out.append(f"{inner}{style.marker} ...")
        _render_block(symbol.children, depth + 1, style, out)
        _trim(out)
        out.append(f"{indent}}}{symbol.trailer}")
    else:
        out.append(indent + style.annotate(f"{symbol.signature}:", symbol.start_line))
        if symbol.children:
            _render_block(symbol.children, depth + 1, style, out)
            _trim(out)
        elif symbol.is_callable:
            out.append(f"{inner}...")
        else:
            out.append(f"{inner}pass")
    _blank(out)


def render_outline(document: OutlineDocument) -> str:
    """Render a document to outline text.

    Raises:
        UnsupportedLanguageError: If no render style exists for the
            document's language.
    """
    style = STYLES.get(document.language)
    if style is None:
        raise UnsupportedLanguageError(document.language)

    out: list[str] = []
    _render_block(document.symbols, 0, style, out)
    _trim(out)
    if not out:
        return ""
    return "\n".join(out) + "\n"


__all__ = ["STYLES", "RenderStyle", "render_outline"]
