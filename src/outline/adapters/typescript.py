"""TypeScript and TSX grammar adapters."""

from __future__ import annotations

from typing import TYPE_CHECKING

from outline.adapters.base import Context, Rule, table
from outline.adapters.javascript import JAVASCRIPT_RULES, JavaScriptAdapter
from outline.models import Symbol, SymbolKind

if TYPE_CHECKING:
    from outline.node import CstNode


class TypeScriptAdapter(JavaScriptAdapter):
    language = "typescript"
    rules = table(
        {
            **JAVASCRIPT_RULES,
            "function_signature": Rule(SymbolKind.FUNCTION, "function"),
            "abstract_class_declaration": Rule(SymbolKind.CLASS, "class_"),
            "public_field_definition": Rule(SymbolKind.FIELD, "field_"),
            "method_signature": Rule(SymbolKind.METHOD, "method"),
            "abstract_method_signature": Rule(SymbolKind.METHOD, "method"),
            "interface_declaration": Rule(SymbolKind.INTERFACE, "interface"),
            "property_signature": Rule(SymbolKind.FIELD, "member"),
            "index_signature": Rule(SymbolKind.FIELD, "member"),
            "call_signature": Rule(SymbolKind.METHOD, "member"),
            "construct_signature": Rule(SymbolKind.INITIALIZER, "member"),
            "type_alias_declaration": Rule(SymbolKind.TYPE_ALIAS, "member"),
            "enum_declaration": Rule(SymbolKind.ENUM, "enum"),
            "internal_module": Rule(SymbolKind.NAMESPACE, "namespace"),
            "module": Rule(SymbolKind.NAMESPACE, "namespace"),
            "ambient_declaration": Rule(SymbolKind.VARIABLE, "ambient"),
        }
    )

    def interface(self, node: CstNode, ctx: Context, kind: SymbolKind) -> list[Symbol]:
        return self.emit(
            kind,
            node,
            ctx,
            name=self.name(node),
            signature=self.header(node),
            heritage=self.heritage(node),
            has_body=True,
            children=self.visit_children(self.body(node), ctx.enter(kind)),
        )

    def member(self, node: CstNode, ctx: Context, kind: SymbolKind) -> list[Symbol]:
        """Body-less declarations rendered from their own text."""
        text = self.text(node).strip().rstrip(";,").rstrip()
        return self.emit(
            kind,
            node,
            ctx,
            name=self.name(node) or text,
            signature=text,
            modifiers=self.modifiers(node),
        )

    def enum(self, node: CstNode, ctx: Context, kind: SymbolKind) -> list[Symbol]:
        inner = ctx.enter(kind)
        body = self.body(node)
        entries = body.named_children if body is not None else ()
        constants: list[Symbol] = []
        for entry in entries:
            if entry.type == "comment":
                continue
            text = self.text(entry).strip()
            name = self.field_text(entry, "name") or text
            constants.extend(
                self.emit(
                    SymbolKind.ENUM_CONSTANT, entry, inner, name=name, signature=text
                )
            )
        return self.emit(
            kind,
            node,
            ctx,
            name=self.name(node),
            signature=self.header(node),
            has_body=True,
            children=constants,
        )

    def namespace(self, node: CstNode, ctx: Context, kind: SymbolKind) -> list[Symbol]:
        body = self.body(node)
        return self.emit(
            kind,
            node,
            ctx,
            name=self.name(node),
            signature=self.header(node),
            has_body=True,
            children=self.visit_children(body, ctx.enter(kind)),
        )

    def ambient(self, node: CstNode, ctx: Context, kind: SymbolKind) -> list[Symbol]:
        """``declare ...``: the wrapped declaration carries the prefix."""
        del kind
        wrapped = ctx.wrap(node, "declare ")
        found: list[Symbol] = []
        for child in node.named_children:
            found.extend(self.visit(child, wrapped))
        return found


class TsxAdapter(TypeScriptAdapter):
    language = "tsx"


__all__ = ["TsxAdapter", "TypeScriptAdapter"]
