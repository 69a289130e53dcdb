"""Inclusion policy for outline symbols.

Inclusion is a pure function of a declaration's kind, name, modifiers and
nesting depth. Policies are data: a table of rules per language, each rule
naming the kinds it applies to and the name pattern that hides them.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from types import MappingProxyType

from outline.models import SymbolKind


@dataclass(frozen=True)
class VisibilityRule:
    """Hide symbols of ``kinds`` whose name matches ``hidden_name``."""

    kinds: frozenset[SymbolKind]
    hidden_name: re.Pattern[str]
    max_depth: int | None = None

    def hides(self, kind: SymbolKind, name: str, depth: int) -> bool:
        if kind not in self.kinds:
            return False
        if self.max_depth is not None and depth > self.max_depth:
            return False
        return self.hidden_name.match(name) is not None


_UNDERSCORE_PRIVATE = VisibilityRule(
    kinds=frozenset({SymbolKind.FUNCTION, SymbolKind.METHOD, SymbolKind.CLASS}),
    hidden_name=re.compile(r"_"),
)

POLICIES: MappingProxyType[str, tuple[VisibilityRule, ...]] = MappingProxyType(
    {
        "python": (_UNDERSCORE_PRIVATE,),
    }
)


def is_included(
    kind: SymbolKind,
    name: str,
    modifiers: tuple[str, ...],
    depth: int,
    language: str,
) -> bool:
    """Return True when a symbol belongs in the outline.

    Languages without a policy include everything. Modifiers are accepted
    for completeness but no policy filters on them.
    """
    del modifiers
    rules = POLICIES.get(language, ())
    return not any(rule.hides(kind, name, depth) for rule in rules)


__all__ = ["POLICIES", "VisibilityRule", "is_included"]
