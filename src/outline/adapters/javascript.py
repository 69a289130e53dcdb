"""JavaScript grammar adapter.

Headers are sliced verbatim from the declaration start up to its body, so
``async``, generator stars, parameter lists and (in TypeScript) type
annotations come through exactly as written.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from outline.adapters.base import Action, Context, GrammarAdapter, Rule, table
from outline.models import Symbol, SymbolKind
from outline.node import first_child, has_keyword, slice_text

if TYPE_CHECKING:
    from outline.node import CstNode

FUNCTION_VALUES = frozenset(
    {"arrow_function", "function_expression", "function", "generator_function"}
)
CLASS_VALUES = frozenset({"class", "class_expression"})
MEMBER_KEYWORDS = frozenset(
    {
        "static",
        "async",
        "get",
        "set",
        "*",
        "readonly",
        "abstract",
        "override",
        "declare",
    }
)

JAVASCRIPT_RULES = {
    "import_statement": Rule(SymbolKind.IMPORT, "passthrough"),
    "export_statement": Rule(SymbolKind.EXPORT, "export"),
    "function_declaration": Rule(SymbolKind.FUNCTION, "function"),
    "generator_function_declaration": Rule(SymbolKind.FUNCTION, "function"),
    "class_declaration": Rule(SymbolKind.CLASS, "class_"),
    "method_definition": Rule(SymbolKind.METHOD, "method"),
    "field_definition": Rule(SymbolKind.FIELD, "field_"),
    "lexical_declaration": Rule(SymbolKind.VARIABLE, "variables"),
    "variable_declaration": Rule(SymbolKind.VARIABLE, "variables"),
    "comment": Action.IGNORE,
    # Function and class values reached through expressions hold locals,
    # not API. Bound and exported values go through ``value``.
    **{kind: Action.IGNORE for kind in FUNCTION_VALUES | CLASS_VALUES},
}


def _first_line(text: str) -> str:
    lines = text.strip().splitlines()
    if len(lines) <= 1:
        return text.strip()
    return f"{lines[0].rstrip()} ..."


class JavaScriptAdapter(GrammarAdapter):
    language = "javascript"
    rules = table(JAVASCRIPT_RULES)

    def name(self, node: CstNode) -> str:
        return self.field_text(node, "name") or self.field_text(node, "property")

    def modifiers(self, node: CstNode) -> tuple[str, ...]:
        found: list[str] = []
        for child in node.children:
            if child.type == "accessibility_modifier":
                found.append(self.text(child))
            elif not child.is_named and child.type in MEMBER_KEYWORDS:
                found.append(child.type)
        return tuple(found)

    def heritage(self, node: CstNode) -> str | None:
        clause = first_child(node, "class_heritage", "extends_type_clause")
        return self.text(clause).strip() or None

    # -- statements -----------------------------------------------------

    def export(self, node: CstNode, ctx: Context, kind: SymbolKind) -> list[Symbol]:
        prefix = "export default " if has_keyword(node, "default") else "export "
        declaration = node.child_by_field_name("declaration")
        if declaration is not None:
            return self.visit(declaration, ctx.wrap(node, prefix))

        value = node.child_by_field_name("value")
        if value is not None and value.type in FUNCTION_VALUES | CLASS_VALUES:
            return self.value(value, ctx.wrap(node, prefix), node, "default", "")

        text = _first_line(self.text(node))
        return self.emit(kind, node, ctx, name=text, signature=text)

    def function(self, node: CstNode, ctx: Context, kind: SymbolKind) -> list[Symbol]:
        body = self.body(node)
        return self.emit(
            kind,
            node,
            ctx,
            name=self.name(node),
            signature=self.header(node),
            modifiers=self.modifiers(node),
            has_body=body is not None,
        )

    def class_(self, node: CstNode, ctx: Context, kind: SymbolKind) -> list[Symbol]:
        modifiers = ("abstract",) if has_keyword(node, "abstract") else ()
        return self.emit(
            kind,
            node,
            ctx,
            name=self.name(node) or "default",
            signature=self.header(node),
            modifiers=modifiers,
            heritage=self.heritage(node),
            has_body=True,
            children=self.visit_children(self.body(node), ctx.enter(kind)),
        )

    def method(self, node: CstNode, ctx: Context, kind: SymbolKind) -> list[Symbol]:
        name = self.name(node)
        if name == "constructor":
            kind = SymbolKind.INITIALIZER
        return self.emit(
            kind,
            node,
            ctx,
            name=name,
            signature=self.header(node),
            modifiers=self.modifiers(node),
            has_body=self.body(node) is not None,
        )

    def field_(self, node: CstNode, ctx: Context, kind: SymbolKind) -> list[Symbol]:
        value = node.child_by_field_name("value")
        if value is not None:
            signature = slice_text(self.source, node.start_byte, value.start_byte)
            signature = signature.strip().rstrip("=").rstrip()
        else:
            signature = self.header(node)
        return self.emit(
            kind,
            node,
            ctx,
            name=self.name(node),
            signature=signature,
            modifiers=self.modifiers(node),
        )

    def variables(self, node: CstNode, ctx: Context, kind: SymbolKind) -> list[Symbol]:
        keyword = self.text(node.children[0]) if node.children else ""
        found: list[Symbol] = []
        for declarator in node.named_children:
            if declarator.type != "variable_declarator":
                continue
            name = self.name(declarator)
            value = declarator.child_by_field_name("value")
            if value is None:
                found.extend(
                    self.emit(
                        kind,
                        node,
                        ctx,
                        name=name,
                        signature=f"{keyword} {self.text(declarator)}",
                    )
                )
            elif self._is_require(value):
                # The whole statement becomes one import line.
                found.extend(self.passthrough(node, ctx, SymbolKind.IMPORT))
                break
            elif value.type in FUNCTION_VALUES | CLASS_VALUES:
                found.extend(self.value(value, ctx, node, name, f"{keyword} "))
            else:
                binding = slice_text(
                    self.source, declarator.start_byte, value.start_byte
                )
                found.extend(
                    self.emit(
                        kind,
                        node,
                        ctx,
                        name=name,
                        signature=f"{keyword} {binding.strip().rstrip('=').rstrip()}",
                    )
                )
        return found

    def value(
        self,
        value: CstNode,
        ctx: Context,
        anchor: CstNode,
        name: str,
        lead: str,
    ) -> list[Symbol]:
        """Symbol for a function or class bound to a name or default export.

        ``anchor`` is the statement that carries the documentation and the
        line number; the header runs from the binding to the value's body.
        """
        body = self.body(value)
        declarator = value.parent if value.parent is not None else value
        start = declarator.start_byte if lead else value.start_byte
        end = body.start_byte if body is not None else value.end_byte
        signature = lead + slice_text(self.source, start, end).strip()

        if value.type in CLASS_VALUES:
            kind = SymbolKind.CLASS
            return self.emit(
                kind,
                anchor,
                ctx,
                name=name,
                signature=signature,
                heritage=self.heritage(value),
                has_body=True,
                children=self.visit_children(body, ctx.enter(kind)),
            )
        return self.emit(
            SymbolKind.FUNCTION,
            anchor,
            ctx,
            name=name,
            signature=signature,
            modifiers=self.modifiers(value),
            has_body=body is not None,
        )

    def _is_require(self, value: CstNode) -> bool:
        if value.type == "await_expression" and value.named_children:
            value = value.named_children[0]
        if value.type != "call_expression":
            return False
        return self.field_text(value, "function") == "require"


__all__ = [
    "CLASS_VALUES",
    "FUNCTION_VALUES",
    "JAVASCRIPT_RULES",
    "JavaScriptAdapter",
]
