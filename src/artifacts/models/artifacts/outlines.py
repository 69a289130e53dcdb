"""Outline artifact models.

One ``OutlineRecord`` per source file, plus a repository-level
``OutlineSummary``.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from outline.models import Symbol

# Schema version constant
SCHEMA_VERSION = 1


class OutlineRecord(BaseModel):
    """The outline of one source file."""

    schema_version: int = Field(default=SCHEMA_VERSION)
    path: str = Field(description="POSIX path relative to the repository root")
    language: str
    symbol_count: int = Field(description="Symbols at every nesting depth")
    outline: str = Field(description="Rendered outline text")
    symbols: list[Symbol] = Field(default_factory=list)


class OutlineSummary(BaseModel):
    """Counts across all outlined files."""

    schema_version: int = Field(default=SCHEMA_VERSION)
    file_count: int
    symbol_count: int
    languages: dict[str, int] = Field(
        default_factory=dict, description="Outlined file count per language"
    )
    skipped: list[str] = Field(
        default_factory=list, description="Files that could not be read"
    )


__all__ = ["SCHEMA_VERSION", "OutlineRecord", "OutlineSummary"]
