from __future__ import annotations

import json
from pathlib import Path
from typing import Any
from unittest.mock import patch

from contract.artifacts import (
    ARTIFACT_SCHEMA_VERSION,
    ARTIFACT_SPECS,
    OUTLINE_SUMMARY_JSON,
    OUTLINES_JSONL,
)
from contract.validation import (
    ValidationMessage,
    ValidationResult,
    validate_artifacts,
)


def _outline_record(path: str = "pkg/mod.py", **overrides: Any) -> dict[str, Any]:
    record: dict[str, Any] = {
        "schema_version": ARTIFACT_SCHEMA_VERSION,
        "path": path,
        "language": "python",
        "symbol_count": 1,
        "outline": "def f(): # line 1\n    ...\n",
        "symbols": [
            {
                "kind": "function",
                "name": "f",
                "signature": "def f()",
                "start_line": 1,
                "has_body": True,
            }
        ],
    }
    record.update(overrides)
    return record


def _write_outlines(d: Path, *records: dict[str, Any]) -> None:
    payload = "".join(json.dumps(record) + "\n" for record in records)
    (d / OUTLINES_JSONL).write_text(payload, encoding="utf-8")


def _write_valid_artifacts(d: Path) -> None:
    """Write a minimal valid outline artifact set to directory d."""
    d.mkdir(parents=True, exist_ok=True)
    _write_outlines(d, _outline_record())

    summary = {
        "schema_version": ARTIFACT_SCHEMA_VERSION,
        "file_count": 1,
        "symbol_count": 1,
        "languages": {"python": 1},
        "skipped": [],
    }
    (d / OUTLINE_SUMMARY_JSON).write_text(json.dumps(summary), encoding="utf-8")


def _messages_contain(messages: list[ValidationMessage], needle: str) -> bool:
    """Return True when any validation message contains the given substring."""
    return any(needle in message.message for message in messages)


# Group 1: Data class tests


def test_validation_message_location_with_line() -> None:
    """ValidationMessage.location returns path:line when line is present."""
    msg = ValidationMessage("outlines", Path("x.jsonl"), "bad", line=7)
    assert msg.location() == "x.jsonl:7"


def test_validation_message_location_without_line() -> None:
    """ValidationMessage.location returns only path when line is missing."""
    msg = ValidationMessage("outlines", Path("x.jsonl"), "bad")
    assert msg.location() == "x.jsonl"


def test_validation_message_to_dict() -> None:
    """ValidationMessage.to_dict returns the expected payload."""
    msg = ValidationMessage("outlines", Path("x.jsonl"), "bad", line=3)
    assert msg.to_dict() == {
        "artifact": "outlines",
        "path": "x.jsonl",
        "line": 3,
        "message": "bad",
    }


def test_validation_result_ok_tracks_errors() -> None:
    """ValidationResult.ok flips once an error is recorded."""
    result = ValidationResult()
    assert result.ok is True

    result.error("x", Path("a"), "boom")
    assert result.ok is False


# Group 2: Directory handling


def test_missing_directory() -> None:
    """validate_artifacts reports a missing artifacts directory."""
    result = validate_artifacts(Path("/nonexistent"))
    assert result.ok is False
    assert _messages_contain(result.errors, "Artifacts directory does not exist")


def test_not_a_directory(tmp_path: Path) -> None:
    """validate_artifacts reports a path that is not a directory."""
    file_path = tmp_path / "not-a-dir"
    file_path.write_text("x", encoding="utf-8")

    result = validate_artifacts(file_path)

    assert result.ok is False
    assert _messages_contain(result.errors, "Artifacts path is not a directory")


def test_missing_artifact_files(tmp_path: Path) -> None:
    """validate_artifacts reports each required artifact when directory is empty."""
    artifacts_dir = tmp_path / "artifacts"
    artifacts_dir.mkdir()

    result = validate_artifacts(artifacts_dir)

    assert result.ok is False
    assert len(result.errors) == len(ARTIFACT_SPECS)
    assert all("Required artifact file is missing" in m.message for m in result.errors)


# Group 3: Happy path


def test_valid_artifacts_pass(tmp_path: Path) -> None:
    """A complete valid artifact set produces no errors or warnings."""
    artifacts_dir = tmp_path / "artifacts"
    _write_valid_artifacts(artifacts_dir)

    result = validate_artifacts(artifacts_dir)

    assert result.ok is True
    assert result.errors == []
    assert result.warnings == []


# Group 4: outlines.jsonl


def test_outlines_invalid_json(tmp_path: Path) -> None:
    """Invalid JSON in JSONL produces a line-level JSON error."""
    artifacts_dir = tmp_path / "artifacts"
    _write_valid_artifacts(artifacts_dir)
    (artifacts_dir / OUTLINES_JSONL).write_text("{not-json}\n", encoding="utf-8")

    result = validate_artifacts(artifacts_dir)

    assert result.ok is False
    assert _messages_contain(result.errors, "Invalid JSON")
    assert result.errors[0].line == 1


def test_outlines_schema_failure(tmp_path: Path) -> None:
    """Schema-invalid records produce schema validation errors."""
    artifacts_dir = tmp_path / "artifacts"
    _write_valid_artifacts(artifacts_dir)
    (artifacts_dir / OUTLINES_JSONL).write_text(
        json.dumps({"schema_version": ARTIFACT_SCHEMA_VERSION}) + "\n",
        encoding="utf-8",
    )

    result = validate_artifacts(artifacts_dir)

    assert result.ok is False
    assert _messages_contain(result.errors, "Schema validation failed")


def test_outlines_unknown_symbol_kind(tmp_path: Path) -> None:
    """Nested symbols are validated against the symbol kind enumeration."""
    artifacts_dir = tmp_path / "artifacts"
    _write_valid_artifacts(artifacts_dir)
    record = _outline_record()
    record["symbols"][0]["kind"] = "macro"
    _write_outlines(artifacts_dir, record)

    result = validate_artifacts(artifacts_dir)

    assert result.ok is False
    assert _messages_contain(result.errors, "Schema validation failed")


def test_outlines_missing_schema_version_lenient(tmp_path: Path) -> None:
    """Missing schema_version is a single warning in lenient mode."""
    artifacts_dir = tmp_path / "artifacts"
    _write_valid_artifacts(artifacts_dir)
    first = _outline_record("a.py")
    second = _outline_record("b.py")
    del first["schema_version"]
    del second["schema_version"]
    _write_outlines(artifacts_dir, first, second)

    result = validate_artifacts(artifacts_dir)

    assert result.ok is True
    warnings = [m for m in result.warnings if m.artifact == "outlines"]
    assert len(warnings) == 1
    assert "Missing schema_version" in warnings[0].message


def test_outlines_missing_schema_version_strict(tmp_path: Path) -> None:
    """Missing schema_version is an error in strict mode."""
    artifacts_dir = tmp_path / "artifacts"
    _write_valid_artifacts(artifacts_dir)
    record = _outline_record()
    del record["schema_version"]
    _write_outlines(artifacts_dir, record)

    result = validate_artifacts(artifacts_dir, strict_schema_version=True)

    assert result.ok is False
    assert _messages_contain(result.errors, "Missing schema_version")


def test_outlines_wrong_schema_version(tmp_path: Path) -> None:
    """Wrong schema_version produces a schema mismatch error."""
    artifacts_dir = tmp_path / "artifacts"
    _write_valid_artifacts(artifacts_dir)
    _write_outlines(artifacts_dir, _outline_record(schema_version=999))

    result = validate_artifacts(artifacts_dir)

    assert result.ok is False
    assert _messages_contain(result.errors, "Schema version mismatch")


def test_outlines_must_be_sorted_and_unique(tmp_path: Path) -> None:
    """Records out of path order or repeated are reported by line."""
    artifacts_dir = tmp_path / "artifacts"
    _write_valid_artifacts(artifacts_dir)
    _write_outlines(
        artifacts_dir,
        _outline_record("b.py"),
        _outline_record("a.py"),
        _outline_record("a.py"),
    )

    result = validate_artifacts(artifacts_dir)

    assert result.ok is False
    assert [(m.line, m.message) for m in result.errors] == [
        (2, "Records not sorted by path at 'a.py'."),
        (3, "Duplicate path 'a.py'."),
    ]


def test_outlines_os_error(tmp_path: Path) -> None:
    """JSONL file open OSError is surfaced as a validation error."""
    artifacts_dir = tmp_path / "artifacts"
    _write_valid_artifacts(artifacts_dir)
    target = artifacts_dir / OUTLINES_JSONL
    original_open = Path.open

    def _patched_open(self: Path, *args: Any, **kwargs: Any) -> Any:
        if self == target and args and args[0] == "rb":
            raise OSError("boom")
        return original_open(self, *args, **kwargs)

    with patch.object(Path, "open", _patched_open):
        result = validate_artifacts(artifacts_dir)

    assert result.ok is False
    assert _messages_contain(result.errors, "Failed to read file")


def test_outlines_empty_lines_skipped(tmp_path: Path) -> None:
    """Blank JSONL lines are ignored by validation."""
    artifacts_dir = tmp_path / "artifacts"
    _write_valid_artifacts(artifacts_dir)
    (artifacts_dir / OUTLINES_JSONL).write_text(
        "\n\n" + json.dumps(_outline_record()) + "\n\n", encoding="utf-8"
    )

    result = validate_artifacts(artifacts_dir)

    assert result.ok is True


# Group 5: outline_summary.json


def test_summary_invalid_json(tmp_path: Path) -> None:
    """Invalid summary JSON is reported as an error."""
    artifacts_dir = tmp_path / "artifacts"
    _write_valid_artifacts(artifacts_dir)
    (artifacts_dir / OUTLINE_SUMMARY_JSON).write_text("{", encoding="utf-8")

    result = validate_artifacts(artifacts_dir)

    assert result.ok is False
    assert _messages_contain(result.errors, "Invalid JSON")


def test_summary_non_dict(tmp_path: Path) -> None:
    """A non-object summary payload is rejected."""
    artifacts_dir = tmp_path / "artifacts"
    _write_valid_artifacts(artifacts_dir)
    (artifacts_dir / OUTLINE_SUMMARY_JSON).write_text("[]", encoding="utf-8")

    result = validate_artifacts(artifacts_dir)

    assert result.ok is False
    assert _messages_contain(result.errors, "Expected JSON object")


def test_summary_schema_failure(tmp_path: Path) -> None:
    """Schema-invalid summary payload produces validation error."""
    artifacts_dir = tmp_path / "artifacts"
    _write_valid_artifacts(artifacts_dir)
    bad_summary = {
        "schema_version": ARTIFACT_SCHEMA_VERSION,
        "file_count": "not_an_int",
    }
    (artifacts_dir / OUTLINE_SUMMARY_JSON).write_text(
        json.dumps(bad_summary), encoding="utf-8"
    )

    result = validate_artifacts(artifacts_dir)

    assert result.ok is False
    assert _messages_contain(result.errors, "Schema validation failed")
