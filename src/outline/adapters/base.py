"""Shared traversal for grammar adapters.

An adapter is a dispatch table from node kind to a classification outcome.
Recognized kinds name a handler that turns the node into zero or more
Symbols; every other kind is either recursed into or ignored. The descent
is a fold: handlers return finished symbols and never mutate shared state.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, replace
from enum import Enum
from types import MappingProxyType
from typing import TYPE_CHECKING, ClassVar

from outline.docs import resolve_documentation
from outline.models import Symbol, SymbolKind
from outline.node import node_text, slice_text, start_line
from outline.signature import Regime, assemble
from outline.visibility import is_included

if TYPE_CHECKING:
    from outline.node import CstNode

logger = logging.getLogger(__name__)


class Action(str, Enum):
    """Outcome for node kinds that do not produce a symbol themselves."""

    RECURSE = "recurse"
    IGNORE = "ignore"


@dataclass(frozen=True)
class Rule:
    """Classify a node kind as ``kind`` and build it with ``handler``.

    ``handler`` names an adapter method called as
    ``handler(node, ctx, kind)`` that returns the symbols for the node.
    """

    kind: SymbolKind
    handler: str


@dataclass(frozen=True)
class Context:
    """Where the traversal currently is.

    ``prefix`` is prepended to the next rendered signature (``export ``,
    ``declare ``, ``template <...> ``) and ``anchor`` is the wrapper node
    whose leading comments document that declaration. Both apply to the
    wrapped declaration only and are cleared for its children.
    """

    depth: int = 0
    parent: SymbolKind | None = None
    prefix: str = ""
    anchor: CstNode | None = None
    modifiers: tuple[str, ...] = ()

    def enter(self, kind: SymbolKind) -> Context:
        return Context(depth=self.depth + 1, parent=kind)

    def wrap(
        self,
        node: CstNode,
        prefix: str = "",
        modifiers: tuple[str, ...] = (),
    ) -> Context:
        return replace(
            self,
            prefix=self.prefix + prefix,
            anchor=self.anchor or node,
            modifiers=self.modifiers + modifiers,
        )


Entry = Rule | Action


def table(entries: Mapping[str, Entry]) -> MappingProxyType[str, Entry]:
    return MappingProxyType(dict(entries))


class GrammarAdapter:
    """Base class for per-language adapters.

    Subclasses declare ``language``, ``rules`` and optionally ``regime``.
    One instance serves a single extraction call and holds that call's
    source buffer.
    """

    language: ClassVar[str]
    rules: ClassVar[Mapping[str, Entry]] = MappingProxyType({})
    default: ClassVar[Action] = Action.RECURSE
    regime: ClassVar[Regime] = Regime.AS_IS
    body_fields: ClassVar[tuple[str, ...]] = ("body",)

    def __init__(self, source: bytes) -> None:
        self.source = source

    # -- classification -------------------------------------------------

    def classify(self, node_kind: str) -> SymbolKind | Action:
        entry = self.rules.get(node_kind, self.default)
        if isinstance(entry, Rule):
            return entry.kind
        return entry

    # -- traversal ------------------------------------------------------

    def extract(self, root: CstNode) -> tuple[Symbol, ...]:
        return tuple(self.visit(root, Context()))

    def visit(self, node: CstNode, ctx: Context) -> list[Symbol]:
        entry = self.rules.get(node.type, self.default)
        if entry is Action.IGNORE:
            return []
        if isinstance(entry, Rule):
            handler = getattr(self, entry.handler)
            return handler(node, ctx, entry.kind)
        return self.visit_children(node, self.descend(node, ctx))

    def visit_children(self, node: CstNode | None, ctx: Context) -> list[Symbol]:
        if node is None:
            return []
        found: list[Symbol] = []
        for child in node.named_children:
            found.extend(self.visit(child, ctx))
        return found

    def descend(self, node: CstNode, ctx: Context) -> Context:
        """Context used for the children of a recursed node."""
        del node
        return ctx

    # -- accessors ------------------------------------------------------

    def text(self, node: CstNode | None) -> str:
        return node_text(self.source, node)

    def field_text(self, node: CstNode, name: str) -> str:
        return node_text(self.source, node.child_by_field_name(name))

    def name(self, node: CstNode) -> str:
        return self.field_text(node, "name")

    def modifiers(self, node: CstNode) -> tuple[str, ...]:
        del node
        return ()

    def heritage(self, node: CstNode) -> str | None:
        del node
        return None

    def parameters(self, node: CstNode) -> str:
        return self.field_text(node, "parameters")

    def return_type(self, node: CstNode) -> str:
        del node
        return ""

    def body(self, node: CstNode) -> CstNode | None:
        for name in self.body_fields:
            found = node.child_by_field_name(name)
            if found is not None:
                return found
        return None

    def header(self, node: CstNode, end: CstNode | None = None) -> str:
        """Source text from ``node`` up to its body (or ``end``)."""
        stop = end if end is not None else self.body(node)
        if stop is None:
            return self.text(node).strip().rstrip(";").rstrip()
        return slice_text(self.source, node.start_byte, stop.start_byte).strip()

    def render(self, *parts: str | None) -> str:
        return assemble(parts, self.regime)

    def documentation(self, node: CstNode, ctx: Context) -> str | None:
        return resolve_documentation(ctx.anchor or node, self.source)

    # -- construction ---------------------------------------------------

    def included(
        self,
        kind: SymbolKind,
        name: str,
        ctx: Context,
        modifiers: tuple[str, ...] = (),
    ) -> bool:
        return is_included(
            kind, name, ctx.modifiers + modifiers, ctx.depth, self.language
        )

    def symbol(
        self,
        kind: SymbolKind,
        node: CstNode,
        ctx: Context,
        *,
        name: str,
        signature: str,
        modifiers: tuple[str, ...] = (),
        heritage: str | None = None,
        has_body: bool = False,
        children: list[Symbol] | tuple[Symbol, ...] = (),
        documentation: str | None = None,
        trailer: str = "",
    ) -> Symbol:
        if not name:
            logger.debug(
                "%s: %s at line %d has no name",
                self.language,
                node.type,
                start_line(node),
            )
        if documentation is None:
            documentation = self.documentation(node, ctx)
        return Symbol(
            kind=kind,
            name=name,
            signature=self.render(ctx.prefix, signature),
            start_line=start_line(node),
            documentation=documentation,
            modifiers=ctx.modifiers + modifiers,
            heritage=heritage or None,
            has_body=has_body,
            trailer=trailer,
            children=tuple(children),
        )

    def emit(
        self,
        kind: SymbolKind,
        node: CstNode,
        ctx: Context,
        *,
        name: str,
        signature: str,
        modifiers: tuple[str, ...] = (),
        **fields: object,
    ) -> list[Symbol]:
        """Build one symbol, or none when the visibility policy hides it."""
        if not self.included(kind, name, ctx, modifiers):
            return []
        return [
            self.symbol(
                kind,
                node,
                ctx,
                name=name,
                signature=signature,
                modifiers=modifiers,
                **fields,  # type: ignore[arg-type]
            )
        ]

    def passthrough(
        self, node: CstNode, ctx: Context, kind: SymbolKind
    ) -> list[Symbol]:
        """Emit the node's own text as a leaf line (imports, directives)."""
        text = self.text(node).strip()
        return self.emit(kind, node, ctx, name=text, signature=text)


__all__ = ["Action", "Context", "Entry", "GrammarAdapter", "Rule", "table"]
