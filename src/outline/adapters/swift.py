"""Swift grammar adapter.

The Swift grammar uses one ``class_declaration`` node for classes,
structs, enums, actors and extensions; the keyword decides the kind.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from outline.adapters.base import Action, Context, GrammarAdapter, Rule, table
from outline.models import CONTAINER_KINDS, Symbol, SymbolKind
from outline.node import children_of, first_child, slice_text

if TYPE_CHECKING:
    from outline.node import CstNode

_DECLARATION_KINDS = {
    "class": SymbolKind.CLASS,
    "actor": SymbolKind.CLASS,
    "struct": SymbolKind.STRUCT,
    "enum": SymbolKind.ENUM,
    "extension": SymbolKind.EXTENSION,
}


class SwiftAdapter(GrammarAdapter):
    language = "swift"
    body_fields = ("body", "computed_value")
    rules = table(
        {
            "import_declaration": Rule(SymbolKind.IMPORT, "passthrough"),
            "class_declaration": Rule(SymbolKind.CLASS, "nominal"),
            "protocol_declaration": Rule(SymbolKind.INTERFACE, "nominal"),
            "function_declaration": Rule(SymbolKind.FUNCTION, "function"),
            "init_declaration": Rule(SymbolKind.INITIALIZER, "function"),
            "deinit_declaration": Rule(SymbolKind.DEINITIALIZER, "function"),
            "subscript_declaration": Rule(SymbolKind.SUBSCRIPT, "function"),
            "protocol_function_declaration": Rule(SymbolKind.METHOD, "requirement"),
            "protocol_property_declaration": Rule(SymbolKind.FIELD, "requirement"),
            "associatedtype_declaration": Rule(SymbolKind.TYPE_ALIAS, "requirement"),
            "typealias_declaration": Rule(SymbolKind.TYPE_ALIAS, "requirement"),
            "property_declaration": Rule(SymbolKind.VARIABLE, "property"),
            "enum_entry": Rule(SymbolKind.ENUM_CONSTANT, "requirement"),
            "comment": Action.IGNORE,
            "multiline_comment": Action.IGNORE,
            "statements": Action.IGNORE,
        }
    )

    def name(self, node: CstNode) -> str:
        names = node.children_by_field_name("name")
        if names:
            return self.text(names[0])
        keyword = {
            "init_declaration": "init",
            "deinit_declaration": "deinit",
            "subscript_declaration": "subscript",
        }.get(node.type, "")
        return keyword

    def modifiers(self, node: CstNode) -> tuple[str, ...]:
        found: list[str] = []
        for child in children_of(node, "modifiers", "attribute"):
            if child.type == "attribute":
                found.append(self.text(child).strip())
            else:
                found.extend(self.text(item).strip() for item in child.named_children)
        return tuple(found)

    def heritage(self, node: CstNode) -> str | None:
        inherited = [
            self.text(child).strip()
            for child in children_of(node, "inheritance_specifier")
        ]
        return ", ".join(inherited) or None

    def declaration_kind(self, node: CstNode, default: SymbolKind) -> SymbolKind:
        keyword = self.field_text(node, "declaration_kind")
        if not keyword:
            token = first_child(node, *_DECLARATION_KINDS)
            keyword = token.type if token is not None else ""
        return _DECLARATION_KINDS.get(keyword, default)

    # -- handlers -------------------------------------------------------

    def nominal(self, node: CstNode, ctx: Context, kind: SymbolKind) -> list[Symbol]:
        if node.type == "class_declaration":
            kind = self.declaration_kind(node, kind)
        return self.emit(
            kind,
            node,
            ctx,
            name=self.name(node),
            signature=self.header(node),
            modifiers=self.modifiers(node),
            heritage=self.heritage(node),
            has_body=True,
            children=self.visit_children(self.body(node), ctx.enter(kind)),
        )

    def function(self, node: CstNode, ctx: Context, kind: SymbolKind) -> list[Symbol]:
        if kind is SymbolKind.FUNCTION and ctx.parent in CONTAINER_KINDS:
            kind = SymbolKind.METHOD
        return self.emit(
            kind,
            node,
            ctx,
            name=self.name(node),
            signature=self.header(node),
            modifiers=self.modifiers(node),
            has_body=self.body(node) is not None,
        )

    def requirement(
        self, node: CstNode, ctx: Context, kind: SymbolKind
    ) -> list[Symbol]:
        """Declarations without a body, rendered from their own text."""
        text = self.text(node).strip()
        return self.emit(
            kind,
            node,
            ctx,
            name=self.name(node) or text,
            signature=text,
            modifiers=self.modifiers(node),
        )

    def property(self, node: CstNode, ctx: Context, kind: SymbolKind) -> list[Symbol]:
        """Stored and computed properties, with values and accessors elided."""
        if ctx.parent in CONTAINER_KINDS:
            kind = SymbolKind.FIELD
        end = self.body(node) or node.child_by_field_name("value")
        if end is None:
            signature = self.text(node)
        else:
            signature = slice_text(self.source, node.start_byte, end.start_byte)
        return self.emit(
            kind,
            node,
            ctx,
            name=self.name(node),
            signature=signature.strip().rstrip("=").rstrip(),
            modifiers=self.modifiers(node),
        )


__all__ = ["SwiftAdapter"]
