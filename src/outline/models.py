"""Symbol models for source outlines.

A Symbol is one declared entity (function, class, field, import, ...) found
in a concrete syntax tree. Symbols form an immutable forest that is built
once per extraction call and then rendered.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class SymbolKind(str, Enum):
    """Kinds of declarations the outline engine recognizes."""

    PACKAGE = "package"
    IMPORT = "import"
    EXPORT = "export"
    FUNCTION = "function"
    METHOD = "method"
    TYPE = "type"
    STRUCT = "struct"
    INTERFACE = "interface"
    CLASS = "class"
    ENUM = "enum"
    ENUM_CONSTANT = "enum_constant"
    FIELD = "field"
    VARIABLE = "variable"
    CONSTANT = "constant"
    TYPE_ALIAS = "type_alias"
    SUBSCRIPT = "subscript"
    INITIALIZER = "initializer"
    DEINITIALIZER = "deinitializer"
    NAMESPACE = "namespace"
    EXTENSION = "extension"


CALLABLE_KINDS = frozenset(
    {
        SymbolKind.FUNCTION,
        SymbolKind.METHOD,
        SymbolKind.INITIALIZER,
        SymbolKind.DEINITIALIZER,
        SymbolKind.SUBSCRIPT,
    }
)

CONTAINER_KINDS = frozenset(
    {
        SymbolKind.STRUCT,
        SymbolKind.INTERFACE,
        SymbolKind.CLASS,
        SymbolKind.ENUM,
        SymbolKind.NAMESPACE,
        SymbolKind.EXTENSION,
    }
)


class Symbol(BaseModel):
    """A declaration extracted from a syntax tree."""

    model_config = ConfigDict(frozen=True)

    kind: SymbolKind
    name: str
    signature: str
    start_line: int = Field(description="1-indexed row of the declaration")
    documentation: str | None = Field(
        default=None,
        description="Trimmed leading comments or docstring, newline-joined",
    )
    modifiers: tuple[str, ...] = ()
    heritage: str | None = Field(
        default=None,
        description="Rendered extends/implements/base-class clause",
    )
    has_body: bool = Field(
        default=False,
        description="Rendered with a body block and closing delimiter",
    )
    trailer: str = Field(
        default="",
        description="Text appended after the closing delimiter",
    )
    children: tuple[Symbol, ...] = ()

    @property
    def is_callable(self) -> bool:
        return self.kind in CALLABLE_KINDS


class OutlineDocument(BaseModel):
    """Ordered top-level symbols of one source file."""

    model_config = ConfigDict(frozen=True)

    language: str
    symbols: tuple[Symbol, ...] = ()

    def walk(self) -> list[Symbol]:
        """Return every symbol in document order (pre-order)."""
        found: list[Symbol] = []
        stack = list(reversed(self.symbols))
        while stack:
            symbol = stack.pop()
            found.append(symbol)
            stack.extend(reversed(symbol.children))
        return found


Symbol.model_rebuild()

__all__ = [
    "CALLABLE_KINDS",
    "CONTAINER_KINDS",
    "OutlineDocument",
    "Symbol",
    "SymbolKind",
]
