"""Python grammar adapter.

Documentation comes from the body docstring when there is one and falls
back to the ``#`` comment run above the definition. Names with a leading
underscore are filtered by the visibility policy for ``python``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from outline.adapters.base import Action, Context, GrammarAdapter, Rule, table
from outline.docs import strip_docstring
from outline.models import Symbol, SymbolKind
from outline.node import children_of, has_keyword

if TYPE_CHECKING:
    from outline.node import CstNode


class PythonAdapter(GrammarAdapter):
    language = "python"
    rules = table(
        {
            "import_statement": Rule(SymbolKind.IMPORT, "passthrough"),
            "import_from_statement": Rule(SymbolKind.IMPORT, "passthrough"),
            "future_import_statement": Rule(SymbolKind.IMPORT, "passthrough"),
            "function_definition": Rule(SymbolKind.FUNCTION, "function"),
            "class_definition": Rule(SymbolKind.CLASS, "class_"),
            "decorated_definition": Rule(SymbolKind.FUNCTION, "decorated"),
            "comment": Action.IGNORE,
            "string": Action.IGNORE,
        }
    )

    def return_type(self, node: CstNode) -> str:
        annotation = self.field_text(node, "return_type")
        return f" -> {annotation}" if annotation else ""

    def heritage(self, node: CstNode) -> str | None:
        return self.field_text(node, "superclasses") or None

    def docstring(self, node: CstNode) -> str | None:
        body = self.body(node)
        if body is None or not body.named_children:
            return None
        first = body.named_children[0]
        if first.type != "expression_statement" or not first.named_children:
            return None
        expr = first.named_children[0]
        if expr.type != "string":
            return None
        return strip_docstring(self.text(expr)) or None

    def documentation(self, node: CstNode, ctx: Context) -> str | None:
        return self.docstring(node) or super().documentation(node, ctx)

    def decorated(self, node: CstNode, ctx: Context, kind: SymbolKind) -> list[Symbol]:
        del kind
        definition = node.child_by_field_name("definition")
        if definition is None:
            return []
        decorators = tuple(
            self.text(decorator).strip() for decorator in children_of(node, "decorator")
        )
        return self.visit(definition, ctx.wrap(node, modifiers=decorators))

    def function(self, node: CstNode, ctx: Context, kind: SymbolKind) -> list[Symbol]:
        if ctx.parent is SymbolKind.CLASS:
            kind = SymbolKind.METHOD
        name = self.name(node)
        if not self.included(kind, name, ctx):
            return []
        signature = self.render(
            "async " if has_keyword(node, "async") else "",
            "def ",
            name,
            self.field_text(node, "type_parameters"),
            self.parameters(node),
            self.return_type(node),
        )
        return [
            self.symbol(
                kind,
                node,
                ctx,
                name=name,
                signature=signature,
                modifiers=("async",) if has_keyword(node, "async") else (),
                has_body=True,
            )
        ]

    def class_(self, node: CstNode, ctx: Context, kind: SymbolKind) -> list[Symbol]:
        name = self.name(node)
        if not self.included(kind, name, ctx):
            return []
        heritage = self.heritage(node)
        signature = self.render(
            "class ", name, self.field_text(node, "type_parameters"), heritage
        )
        return [
            self.symbol(
                kind,
                node,
                ctx,
                name=name,
                signature=signature,
                heritage=heritage,
                has_body=True,
                children=self.visit_children(self.body(node), ctx.enter(kind)),
            )
        ]


__all__ = ["PythonAdapter"]
