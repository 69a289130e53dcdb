"""Outline artifact contract definitions.

Filenames, formats and the schema version every generated artifact carries.
"""

from __future__ import annotations

from dataclasses import dataclass

# Artifact schema version for outline artifacts.
ARTIFACT_SCHEMA_VERSION = 1

# Artifact filename constants (stable contract identifiers).
OUTLINES_JSONL = "outlines.jsonl"
OUTLINE_SUMMARY_JSON = "outline_summary.json"


@dataclass(frozen=True)
class ArtifactSpec:
    """Specification for a contract artifact."""

    filename: str
    format: str
    required_fields_note: str


ARTIFACT_SPECS: dict[str, ArtifactSpec] = {
    "outlines": ArtifactSpec(
        filename=OUTLINES_JSONL,
        format="jsonl",
        required_fields_note="OutlineRecord fields required by contract.",
    ),
    "outline_summary": ArtifactSpec(
        filename=OUTLINE_SUMMARY_JSON,
        format="json",
        required_fields_note="OutlineSummary fields required by contract.",
    ),
}
