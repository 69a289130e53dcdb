"""Validation helpers for outline contract artifacts."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, TypeVar

import orjson
from pydantic import BaseModel, ValidationError

from contract.artifacts import ARTIFACT_SCHEMA_VERSION, ARTIFACT_SPECS
from contract.models import OutlineRecord, OutlineSummary

if TYPE_CHECKING:
    from pathlib import Path

_ModelT = TypeVar("_ModelT", bound=BaseModel)


@dataclass(frozen=True)
class ValidationMessage:
    artifact: str
    path: Path
    message: str
    line: int | None = None

    def location(self) -> str:
        if self.line is None:
            return str(self.path)
        return f"{self.path}:{self.line}"

    def to_dict(self) -> dict[str, object]:
        return {
            "artifact": self.artifact,
            "path": str(self.path),
            "line": self.line,
            "message": self.message,
        }


@dataclass
class ValidationResult:
    errors: list[ValidationMessage] = field(default_factory=list)
    warnings: list[ValidationMessage] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.errors

    def error(
        self, artifact: str, path: Path, message: str, line: int | None = None
    ) -> None:
        self.errors.append(ValidationMessage(artifact, path, message, line))


def validate_artifacts(
    artifacts_dir: Path, *, strict_schema_version: bool = False
) -> ValidationResult:
    result = ValidationResult()

    if not artifacts_dir.exists():
        result.error(
            "artifacts_dir", artifacts_dir, "Artifacts directory does not exist."
        )
        return result

    if not artifacts_dir.is_dir():
        result.error(
            "artifacts_dir", artifacts_dir, "Artifacts path is not a directory."
        )
        return result

    for artifact_name, spec in ARTIFACT_SPECS.items():
        path = artifacts_dir / spec.filename
        if not path.exists():
            result.error(artifact_name, path, "Required artifact file is missing.")
            continue

        if spec.format == "jsonl":
            _validate_outlines(
                artifact_name,
                path,
                result,
                strict_schema_version=strict_schema_version,
            )
        elif spec.format == "json":
            _validate_summary(
                artifact_name,
                path,
                result,
                strict_schema_version=strict_schema_version,
            )
        else:
            result.error(
                artifact_name, path, f"Unsupported artifact format: {spec.format}."
            )

    return result


def _validate_outlines(
    artifact_name: str,
    path: Path,
    result: ValidationResult,
    *,
    strict_schema_version: bool,
) -> None:
    try:
        handle = path.open("rb")
    except OSError as exc:
        result.error(artifact_name, path, f"Failed to read file: {exc}.")
        return

    schema_reported = False
    previous_path: str | None = None
    with handle:
        for line_number, raw_line in enumerate(handle, 1):
            line = raw_line.strip()
            if not line:
                continue
            try:
                data = orjson.loads(line)
            except orjson.JSONDecodeError as exc:
                result.error(artifact_name, path, f"Invalid JSON: {exc}.", line_number)
                continue

            record = _validate_model(
                OutlineRecord, data, artifact_name, path, line_number, result
            )
            if record is None:
                continue

            if not schema_reported:
                schema_reported = _check_schema_version(
                    artifact_name,
                    path,
                    line_number,
                    isinstance(data, dict) and "schema_version" in data,
                    record.schema_version,
                    result,
                    strict_schema_version=strict_schema_version,
                )

            if previous_path is not None and record.path <= previous_path:
                message = (
                    f"Duplicate path '{record.path}'."
                    if record.path == previous_path
                    else f"Records not sorted by path at '{record.path}'."
                )
                result.error(artifact_name, path, message, line_number)
            previous_path = record.path


def _validate_summary(
    artifact_name: str,
    path: Path,
    result: ValidationResult,
    *,
    strict_schema_version: bool,
) -> None:
    try:
        raw = orjson.loads(path.read_bytes())
    except (OSError, orjson.JSONDecodeError) as exc:
        result.error(artifact_name, path, f"Invalid JSON: {exc}.")
        return

    if not isinstance(raw, dict):
        result.error(
            artifact_name, path, f"Expected JSON object for {path.name}."
        )
        return

    summary = _validate_model(OutlineSummary, raw, artifact_name, path, None, result)
    if summary is None:
        return

    _check_schema_version(
        artifact_name,
        path,
        None,
        "schema_version" in raw,
        summary.schema_version,
        result,
        strict_schema_version=strict_schema_version,
    )


def _validate_model(
    model: type[_ModelT],
    data: Any,
    artifact_name: str,
    path: Path,
    line: int | None,
    result: ValidationResult,
) -> _ModelT | None:
    try:
        return model.model_validate(data)
    except ValidationError as exc:
        result.error(artifact_name, path, f"Schema validation failed: {exc}.", line)
        return None


def _check_schema_version(
    artifact_name: str,
    path: Path,
    line: int | None,
    schema_present: bool,
    schema_version: int,
    result: ValidationResult,
    *,
    strict_schema_version: bool,
) -> bool:
    """Report a missing or mismatched schema version; True if reported."""
    if schema_present and schema_version != ARTIFACT_SCHEMA_VERSION:
        result.error(
            artifact_name,
            path,
            (
                "Schema version mismatch: "
                f"expected {ARTIFACT_SCHEMA_VERSION}, got {schema_version}."
            ),
            line,
        )
        return True

    if not schema_present:
        message = ValidationMessage(
            artifact=artifact_name,
            path=path,
            line=line,
            message=f"Missing schema_version; defaulted to {ARTIFACT_SCHEMA_VERSION}.",
        )
        if strict_schema_version:
            result.errors.append(message)
        else:
            result.warnings.append(message)
        return True

    return False


__all__ = [
    "ValidationMessage",
    "ValidationResult",
    "validate_artifacts",
]
