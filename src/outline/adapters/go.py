"""Go grammar adapter."""

from __future__ import annotations

from typing import TYPE_CHECKING

from outline.adapters.base import Action, Context, GrammarAdapter, Rule, table
from outline.docs import resolve_documentation
from outline.models import Symbol, SymbolKind
from outline.node import children_of, first_child, has_keyword

if TYPE_CHECKING:
    from outline.node import CstNode


class GoAdapter(GrammarAdapter):
    language = "go"
    rules = table(
        {
            "package_clause": Rule(SymbolKind.PACKAGE, "package"),
            "import_declaration": Rule(SymbolKind.IMPORT, "passthrough"),
            "function_declaration": Rule(SymbolKind.FUNCTION, "function"),
            "method_declaration": Rule(SymbolKind.METHOD, "function"),
            "type_declaration": Rule(SymbolKind.TYPE, "type_declaration"),
            "const_declaration": Rule(SymbolKind.CONSTANT, "value_declaration"),
            "var_declaration": Rule(SymbolKind.VARIABLE, "value_declaration"),
            "comment": Action.IGNORE,
        }
    )

    def return_type(self, node: CstNode) -> str:
        result = self.field_text(node, "result")
        return f" {result}" if result else ""

    def package(self, node: CstNode, ctx: Context, kind: SymbolKind) -> list[Symbol]:
        name = self.text(first_child(node, "package_identifier"))
        return self.emit(kind, node, ctx, name=name, signature=f"package {name}")

    def function(self, node: CstNode, ctx: Context, kind: SymbolKind) -> list[Symbol]:
        name = self.name(node)
        receiver = self.field_text(node, "receiver")
        signature = self.render(
            "func ",
            f"{receiver} " if receiver else "",
            name,
            self.field_text(node, "type_parameters"),
            self.parameters(node),
            self.return_type(node),
        )
        return self.emit(
            kind,
            node,
            ctx,
            name=name,
            signature=signature,
            has_body=self.body(node) is not None,
        )

    # -- type declarations ----------------------------------------------

    def type_declaration(
        self, node: CstNode, ctx: Context, kind: SymbolKind
    ) -> list[Symbol]:
        del kind
        specs = children_of(node, "type_spec", "type_alias")
        grouped = has_keyword(node, "(")
        found: list[Symbol] = []
        for index, spec in enumerate(specs):
            if grouped:
                documentation = self._group_doc(node, spec) if index == 0 else None
                found.append(self._type_spec(spec, spec, ctx, documentation))
            else:
                found.append(self._type_spec(spec, node, ctx))
        return found

    def _group_doc(self, node: CstNode, first: CstNode) -> str | None:
        """Doc of a parenthesized block, carried by its first spec.

        The comment run above the block comes first, followed by the first
        spec's own run.
        """
        parts = [
            resolve_documentation(node, self.source),
            resolve_documentation(first, self.source),
        ]
        return "\n".join(part for part in parts if part) or None

    def _type_spec(
        self,
        spec: CstNode,
        anchor: CstNode,
        ctx: Context,
        documentation: str | None = None,
    ) -> Symbol:
        name = self.name(spec)
        type_node = spec.child_by_field_name("type")
        type_params = self.field_text(spec, "type_parameters")

        if spec.type == "type_alias":
            return self.symbol(
                SymbolKind.TYPE_ALIAS,
                anchor,
                ctx,
                name=name,
                signature=f"type {name}{type_params} = {self.text(type_node)}",
                documentation=documentation,
            )

        if type_node is not None and type_node.type == "struct_type":
            fields = first_child(type_node, "field_declaration_list")
            return self.symbol(
                SymbolKind.STRUCT,
                anchor,
                ctx,
                name=name,
                signature=f"type {name}{type_params} struct",
                has_body=True,
                children=self._fields(fields, ctx.enter(SymbolKind.STRUCT)),
                documentation=documentation,
            )

        if type_node is not None and type_node.type == "interface_type":
            return self.symbol(
                SymbolKind.INTERFACE,
                anchor,
                ctx,
                name=name,
                signature=f"type {name}{type_params} interface",
                has_body=True,
                children=self._interface_members(
                    type_node, ctx.enter(SymbolKind.INTERFACE)
                ),
                documentation=documentation,
            )

        return self.symbol(
            SymbolKind.TYPE,
            anchor,
            ctx,
            name=name,
            signature=self.render(
                "type ", name, type_params, " ", self.text(type_node)
            ),
            documentation=documentation,
        )

    def _fields(self, fields: CstNode | None, ctx: Context) -> list[Symbol]:
        found: list[Symbol] = []
        for field in children_of(fields, "field_declaration"):
            names = field.children_by_field_name("name")
            name = self.text(names[0]) if names else self.field_text(field, "type")
            found.append(
                self.symbol(
                    SymbolKind.FIELD,
                    field,
                    ctx,
                    name=name,
                    signature=self.text(field),
                )
            )
        return found

    def _interface_members(self, type_node: CstNode, ctx: Context) -> list[Symbol]:
        members: list[CstNode] = []
        for child in type_node.named_children:
            if child.type == "method_spec_list":
                members.extend(child.named_children)
            else:
                members.append(child)

        found: list[Symbol] = []
        for member in members:
            if member.type in ("method_elem", "method_spec"):
                name = self.name(member)
                signature = self.render(
                    name, self.parameters(member), self.return_type(member)
                )
                found.append(
                    self.symbol(
                        SymbolKind.METHOD, member, ctx, name=name, signature=signature
                    )
                )
            elif member.type in ("type_elem", "constraint_elem", "type_identifier"):
                text = self.text(member)
                found.append(
                    self.symbol(SymbolKind.TYPE, member, ctx, name=text, signature=text)
                )
        return found

    # -- const / var ----------------------------------------------------

    def value_declaration(
        self, node: CstNode, ctx: Context, kind: SymbolKind
    ) -> list[Symbol]:
        keyword = "const" if kind is SymbolKind.CONSTANT else "var"
        specs: list[CstNode] = []
        for child in node.named_children:
            if child.type == "var_spec_list":
                specs.extend(children_of(child, "var_spec"))
            elif child.type in ("const_spec", "var_spec"):
                specs.append(child)

        grouped = len(specs) > 1 or has_keyword(node, "(") or any(
            has_keyword(child, "(") for child in children_of(node, "var_spec_list")
        )
        found: list[Symbol] = []
        for index, spec in enumerate(specs):
            names = spec.children_by_field_name("name")
            name = self.text(names[0]) if names else ""
            documentation = None
            if grouped and index == 0:
                documentation = self._group_doc(node, spec)
            found.append(
                self.symbol(
                    kind,
                    spec if grouped else node,
                    ctx,
                    name=name,
                    signature=f"{keyword} {self.text(spec)}",
                    documentation=documentation,
                )
            )
        return found


__all__ = ["GoAdapter"]
