"""C and C++ grammar adapters.

Declarations in these grammars routinely span lines, so signatures use the
collapsed regime. Preprocessor includes and defines pass through verbatim;
conditional blocks are recursed so declarations inside them still appear.
"""

from __future__ import annotations

from dataclasses import replace
from typing import TYPE_CHECKING

from outline.adapters.base import Action, Context, GrammarAdapter, Rule, table
from outline.models import Symbol, SymbolKind
from outline.node import first_child
from outline.signature import Regime, collapse, join_words

if TYPE_CHECKING:
    from outline.node import CstNode

_NAME_KINDS = frozenset(
    {
        "identifier",
        "field_identifier",
        "type_identifier",
        "qualified_identifier",
        "destructor_name",
        "operator_name",
        "template_function",
    }
)
_AGGREGATES = frozenset(
    {"struct_specifier", "union_specifier", "enum_specifier", "class_specifier"}
)
_MEMBER_OWNERS = frozenset({SymbolKind.CLASS, SymbolKind.STRUCT})


class CAdapter(GrammarAdapter):
    language = "c"
    regime = Regime.COLLAPSED
    rules = table(
        {
            "preproc_include": Rule(SymbolKind.IMPORT, "passthrough"),
            "preproc_def": Rule(SymbolKind.CONSTANT, "passthrough"),
            "preproc_function_def": Rule(SymbolKind.CONSTANT, "passthrough"),
            "function_definition": Rule(SymbolKind.FUNCTION, "function"),
            "declaration": Rule(SymbolKind.VARIABLE, "declaration"),
            "field_declaration": Rule(SymbolKind.FIELD, "declaration"),
            "struct_specifier": Rule(SymbolKind.STRUCT, "aggregate"),
            "union_specifier": Rule(SymbolKind.STRUCT, "aggregate"),
            "enum_specifier": Rule(SymbolKind.ENUM, "aggregate"),
            "class_specifier": Rule(SymbolKind.CLASS, "aggregate"),
            "enumerator": Rule(SymbolKind.ENUM_CONSTANT, "passthrough"),
            "type_definition": Rule(SymbolKind.TYPE_ALIAS, "typedef"),
            "namespace_definition": Rule(SymbolKind.NAMESPACE, "namespace"),
            "template_declaration": Rule(SymbolKind.FUNCTION, "template"),
            "alias_declaration": Rule(SymbolKind.TYPE_ALIAS, "passthrough"),
            "using_declaration": Rule(SymbolKind.IMPORT, "passthrough"),
            "friend_declaration": Action.IGNORE,
            "compound_statement": Action.IGNORE,
            "comment": Action.IGNORE,
        }
    )

    # -- declarators ----------------------------------------------------

    def declarator_name(self, declarator: CstNode | None) -> str:
        current = declarator
        while current is not None and current.type not in _NAME_KINDS:
            inner = current.child_by_field_name("declarator")
            if inner is None and current.named_children:
                inner = current.named_children[0]
            current = inner
        return self.text(current)

    def is_function_declarator(self, declarator: CstNode | None) -> bool:
        current = declarator
        while current is not None and current.type not in _NAME_KINDS:
            if current.type == "function_declarator":
                return True
            current = current.child_by_field_name("declarator")
        return False

    def name(self, node: CstNode) -> str:
        declarator = node.child_by_field_name("declarator")
        if declarator is None:
            return self.field_text(node, "name")
        return self.declarator_name(declarator)

    def heritage(self, node: CstNode) -> str | None:
        clause = first_child(node, "base_class_clause")
        return collapse(self.text(clause)) or None

    def callable_kind(self, node: CstNode, ctx: Context) -> SymbolKind:
        declarator = node.child_by_field_name("declarator")
        if "~" in self.declarator_name(declarator):
            return SymbolKind.DEINITIALIZER
        if ctx.parent in _MEMBER_OWNERS:
            return SymbolKind.METHOD
        return SymbolKind.FUNCTION

    # -- handlers -------------------------------------------------------

    def function(self, node: CstNode, ctx: Context, kind: SymbolKind) -> list[Symbol]:
        del kind
        body = self.body(node)
        return self.emit(
            self.callable_kind(node, ctx),
            node,
            ctx,
            name=self.name(node),
            signature=self.header(node),
            has_body=body is not None,
        )

    def declaration(
        self, node: CstNode, ctx: Context, kind: SymbolKind
    ) -> list[Symbol]:
        """Prototypes, variables and fields, with initializer values elided."""
        declarators = node.children_by_field_name("declarator")
        if any(self.is_function_declarator(d) for d in declarators):
            return self.emit(
                self.callable_kind(node, ctx),
                node,
                ctx,
                name=self.name(node),
                signature=self.header(node),
            )

        found: list[Symbol] = []
        type_node = node.child_by_field_name("type")
        if type_node is not None and type_node.type in _AGGREGATES:
            if self.body(type_node) is not None:
                found.extend(self.visit(type_node, ctx))

        if not declarators:
            if not found:
                found.extend(self.passthrough(node, ctx, kind))
            return found

        specifiers: list[str] = []
        for child in node.named_children:
            if child.start_byte >= declarators[0].start_byte:
                break
            if child.type == "comment":
                continue
            if child.type in _AGGREGATES and self.body(child) is not None:
                specifiers.append(self.header(child))
            else:
                specifiers.append(self.text(child))

        names: list[str] = []
        for declarator in declarators:
            inner = declarator
            if declarator.type == "init_declarator":
                inner = declarator.child_by_field_name("declarator") or declarator
            names.append(self.text(inner))

        signature = join_words([*specifiers, ", ".join(names)])
        found.extend(
            self.emit(
                kind,
                node,
                ctx,
                name=self.declarator_name(declarators[0]),
                signature=signature,
            )
        )
        return found

    def aggregate(
        self, node: CstNode, ctx: Context, kind: SymbolKind
    ) -> list[Symbol]:
        body = self.body(node)
        if body is None:
            return self.passthrough(node, ctx, kind)
        return self.emit(
            kind,
            node,
            ctx,
            name=self.name(node),
            signature=self.header(node),
            heritage=self.heritage(node),
            has_body=True,
            children=self.members(body, ctx.enter(kind)),
        )

    def members(self, body: CstNode, ctx: Context) -> list[Symbol]:
        """Visit a member list, tagging members with their access section."""
        found: list[Symbol] = []
        section = ctx
        for child in body.named_children:
            if child.type == "access_specifier":
                access = self.text(child).strip().rstrip(":").strip()
                section = replace(ctx, modifiers=(access,))
                continue
            found.extend(self.visit(child, section))
        return found

    def typedef(self, node: CstNode, ctx: Context, kind: SymbolKind) -> list[Symbol]:
        type_node = node.child_by_field_name("type")
        body = self.body(type_node) if type_node is not None else None
        if type_node is None or body is None or type_node.type not in _AGGREGATES:
            text = self.header(node)
            return self.emit(kind, node, ctx, name=self.name(node), signature=text)

        names = [self.text(d) for d in node.children_by_field_name("declarator")]
        aggregate_kind = self.classify(type_node.type)
        if not isinstance(aggregate_kind, SymbolKind):
            aggregate_kind = SymbolKind.STRUCT
        return self.emit(
            aggregate_kind,
            node,
            ctx,
            name=self.name(node),
            signature=self.header(node, end=body),
            has_body=True,
            children=self.members(body, ctx.enter(aggregate_kind)),
            trailer=f" {', '.join(names)};",
        )

    def namespace(self, node: CstNode, ctx: Context, kind: SymbolKind) -> list[Symbol]:
        return self.emit(
            kind,
            node,
            ctx,
            name=self.name(node),
            signature=self.header(node),
            has_body=True,
            children=self.visit_children(self.body(node), ctx.enter(kind)),
        )

    def template(self, node: CstNode, ctx: Context, kind: SymbolKind) -> list[Symbol]:
        """``template <...>`` becomes a prefix of the inner declaration."""
        del kind
        parameters = node.child_by_field_name("parameters")
        wrapped = ctx.wrap(node, f"template {collapse(self.text(parameters))} ")
        found: list[Symbol] = []
        for child in node.named_children:
            if child.type == "template_parameter_list":
                continue
            found.extend(self.visit(child, wrapped))
        return found


class CppAdapter(CAdapter):
    language = "cpp"


__all__ = ["CAdapter", "CppAdapter"]
