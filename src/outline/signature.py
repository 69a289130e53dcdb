"""Signature assembly from verbatim source substrings."""

from __future__ import annotations

import re
from collections.abc import Iterable
from enum import Enum

_SPACE_RUN = re.compile(r" {2,}")


class Regime(str, Enum):
    """How interior whitespace of a rendered signature is treated."""

    AS_IS = "as_is"
    COLLAPSED = "collapsed"


def collapse(text: str) -> str:
    """Replace newlines and tabs with spaces and squeeze runs of spaces."""
    flattened = text.replace("\r", " ").replace("\n", " ").replace("\t", " ")
    return _SPACE_RUN.sub(" ", flattened).strip()


def join_words(parts: Iterable[str | None]) -> str:
    """Join non-empty parts with single spaces."""
    return " ".join(part.strip() for part in parts if part and part.strip())


def assemble(parts: Iterable[str | None], regime: Regime = Regime.AS_IS) -> str:
    """Concatenate parts in order, skipping missing ones.

    Parts are glued without separators; callers include the spaces they
    want. Interior whitespace is preserved unless the regime collapses it.
    """
    text = "".join(part for part in parts if part)
    if regime is Regime.COLLAPSED:
        return collapse(text)
    return text.strip()


__all__ = ["Regime", "assemble", "collapse", "join_words"]
