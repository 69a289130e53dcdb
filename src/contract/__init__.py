"""Stable contract surface for outline artifacts."""

from contract.artifacts import (
    ARTIFACT_SCHEMA_VERSION,
    ARTIFACT_SPECS,
    OUTLINE_SUMMARY_JSON,
    OUTLINES_JSONL,
    ArtifactSpec,
)


def __getattr__(name: str) -> object:
    if name in {"OutlineRecord", "OutlineSummary"}:
        from contract.models import OutlineRecord, OutlineSummary

        return {
            "OutlineRecord": OutlineRecord,
            "OutlineSummary": OutlineSummary,
        }[name]

    if name in {"ValidationMessage", "ValidationResult", "validate_artifacts"}:
        from contract.validation import (
            ValidationMessage,
            ValidationResult,
            validate_artifacts,
        )

        return {
            "ValidationMessage": ValidationMessage,
            "ValidationResult": ValidationResult,
            "validate_artifacts": validate_artifacts,
        }[name]

    msg = f"module 'contract' has no attribute {name!r}"
    raise AttributeError(msg)


__all__ = [
    "ARTIFACT_SCHEMA_VERSION",
    "ARTIFACT_SPECS",
    "OUTLINES_JSONL",
    "OUTLINE_SUMMARY_JSON",
    "ArtifactSpec",
    "OutlineRecord",
    "OutlineSummary",
    "ValidationMessage",
    "ValidationResult",
    "validate_artifacts",
]
