"""Java grammar adapter."""

from __future__ import annotations

from typing import TYPE_CHECKING

from outline.adapters.base import Context, GrammarAdapter, Rule, table
from outline.models import Symbol, SymbolKind
from outline.node import children_of, first_child
from outline.signature import join_words

if TYPE_CHECKING:
    from outline.node import CstNode

_TYPE_KEYWORDS = {
    "class_declaration": "class",
    "interface_declaration": "interface",
    "enum_declaration": "enum",
    "record_declaration": "record",
    "annotation_type_declaration": "@interface",
}


class JavaAdapter(GrammarAdapter):
    language = "java"
    rules = table(
        {
            "package_declaration": Rule(SymbolKind.PACKAGE, "passthrough"),
            "import_declaration": Rule(SymbolKind.IMPORT, "passthrough"),
            "class_declaration": Rule(SymbolKind.CLASS, "type_declaration"),
            "record_declaration": Rule(SymbolKind.CLASS, "type_declaration"),
            "interface_declaration": Rule(SymbolKind.INTERFACE, "type_declaration"),
            "annotation_type_declaration": Rule(
                SymbolKind.INTERFACE, "type_declaration"
            ),
            "enum_declaration": Rule(SymbolKind.ENUM, "type_declaration"),
            "enum_constant": Rule(SymbolKind.ENUM_CONSTANT, "enum_constant"),
            "method_declaration": Rule(SymbolKind.METHOD, "method"),
            "annotation_type_element_declaration": Rule(SymbolKind.METHOD, "method"),
            "constructor_declaration": Rule(SymbolKind.INITIALIZER, "method"),
            "compact_constructor_declaration": Rule(SymbolKind.INITIALIZER, "method"),
            "field_declaration": Rule(SymbolKind.FIELD, "field"),
            "constant_declaration": Rule(SymbolKind.CONSTANT, "field"),
        }
    )

    def modifiers(self, node: CstNode) -> tuple[str, ...]:
        found = first_child(node, "modifiers")
        if found is None:
            return ()
        return tuple(self.text(child).strip() for child in found.children)

    def heritage(self, node: CstNode) -> str | None:
        clauses = [
            self.field_text(node, "superclass"),
            self.field_text(node, "interfaces"),
            self.text(first_child(node, "extends_interfaces")),
        ]
        return join_words(clauses) or None

    def type_declaration(
        self, node: CstNode, ctx: Context, kind: SymbolKind
    ) -> list[Symbol]:
        name = self.name(node)
        modifiers = self.modifiers(node)
        heritage = self.heritage(node)
        signature = join_words(
            [
                *modifiers,
                _TYPE_KEYWORDS[node.type],
                self.render(
                    name,
                    self.field_text(node, "type_parameters"),
                    self.parameters(node),
                ),
                heritage,
            ]
        )
        return self.emit(
            kind,
            node,
            ctx,
            name=name,
            signature=signature,
            modifiers=modifiers,
            heritage=heritage,
            has_body=True,
            children=self.visit_children(self.body(node), ctx.enter(kind)),
        )

    def enum_constant(
        self, node: CstNode, ctx: Context, kind: SymbolKind
    ) -> list[Symbol]:
        name = self.name(node)
        return self.emit(
            kind,
            node,
            ctx,
            name=name,
            signature=self.render(name, self.field_text(node, "arguments")),
        )

    def method(self, node: CstNode, ctx: Context, kind: SymbolKind) -> list[Symbol]:
        name = self.name(node)
        modifiers = self.modifiers(node)
        body = self.body(node)
        signature = join_words(
            [
                *modifiers,
                self.field_text(node, "type_parameters"),
                self.field_text(node, "type"),
                self.render(
                    name,
                    self.parameters(node),
                    self.field_text(node, "dimensions"),
                ),
                self.text(first_child(node, "throws")),
            ]
        )
        return self.emit(
            kind,
            node,
            ctx,
            name=name,
            signature=signature,
            modifiers=modifiers,
            has_body=body is not None,
        )

    def field(self, node: CstNode, ctx: Context, kind: SymbolKind) -> list[Symbol]:
        """One symbol per declarator: ``int a, b;`` yields ``a`` and ``b``."""
        modifiers = self.modifiers(node)
        type_text = self.field_text(node, "type")
        found: list[Symbol] = []
        for declarator in children_of(node, "variable_declarator"):
            name = self.name(declarator)
            signature = join_words(
                [
                    *modifiers,
                    type_text,
                    self.render(name, self.field_text(declarator, "dimensions")),
                ]
            )
            found.extend(
                self.emit(
                    kind,
                    node,
                    ctx,
                    name=name,
                    signature=signature,
                    modifiers=modifiers,
                )
            )
        return found


__all__ = ["JavaAdapter"]
