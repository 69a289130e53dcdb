from __future__ import annotations

import json
import shutil
from pathlib import Path

from artifacts.write import generate_all_artifacts
from contract.artifacts import OUTLINE_SUMMARY_JSON, OUTLINES_JSONL
from contract.validation import validate_artifacts


def read_jsonl(path: Path) -> list[dict[str, object]]:
    records: list[dict[str, object]] = []
    for raw_line in path.read_text(encoding="utf-8").splitlines():
        line = raw_line.strip()
        if not line:
            continue
        records.append(json.loads(line))
    return records


def _copy_fixture(tmp_path: Path) -> Path:
    fixture_root = Path(__file__).parent / "fixtures" / "mini_repo"
    repo_root = tmp_path / "repo"
    shutil.copytree(fixture_root, repo_root)
    return repo_root


def test_artifact_contents_generated_from_committed_fixture(tmp_path: Path) -> None:
    repo_root = _copy_fixture(tmp_path)

    out_dir = tmp_path / "artifacts"
    result = generate_all_artifacts(root=repo_root, out_dir=out_dir)

    validation = validate_artifacts(out_dir)
    assert validation.errors == [], [m.to_dict() for m in validation.errors]

    records = read_jsonl(out_dir / OUTLINES_JSONL)
    by_path = {record["path"]: record for record in records}

    assert list(by_path) == ["pkg/greet.go", "pkg/service.py", "web/app.ts"]
    assert "build/generated.py" not in by_path
    assert result["file_count"] == 3

    go_outline = by_path["pkg/greet.go"]["outline"]
    assert isinstance(go_outline, str)
    assert "// Greet returns a greeting." in go_outline
    assert "func Greet(name string) string { // line 4" in go_outline

    py_record = by_path["pkg/service.py"]
    assert py_record["language"] == "python"
    py_outline = py_record["outline"]
    assert isinstance(py_outline, str)
    assert "class Service: # line 6" in py_outline
    assert "    def run(self, job): # line 9" in py_outline
    assert "_dispatch" not in py_outline
    assert "_helper" not in py_outline

    ts_outline = by_path["web/app.ts"]["outline"]
    assert isinstance(ts_outline, str)
    assert "export interface Job { // line 3" in ts_outline
    assert "export function start(job: Job): void { // line 7" in ts_outline

    summary = json.loads((out_dir / OUTLINE_SUMMARY_JSON).read_text(encoding="utf-8"))
    assert summary["file_count"] == 3
    assert summary["languages"] == {"go": 1, "python": 1, "typescript": 1}
    assert summary["symbol_count"] == sum(
        int(record["symbol_count"]) for record in records  # type: ignore[call-overload]
    )
    assert summary["skipped"] == []


def test_symbol_forest_is_serialized(tmp_path: Path) -> None:
    repo_root = _copy_fixture(tmp_path)
    out_dir = tmp_path / "artifacts"
    generate_all_artifacts(root=repo_root, out_dir=out_dir)

    records = read_jsonl(out_dir / OUTLINES_JSONL)
    service = next(r for r in records if r["path"] == "pkg/service.py")
    symbols = service["symbols"]
    assert isinstance(symbols, list)

    kinds = [symbol["kind"] for symbol in symbols]
    assert kinds == ["import", "class"]
    klass = symbols[1]
    assert klass["name"] == "Service"
    assert klass["documentation"] == "Runs jobs."
    assert [child["name"] for child in klass["children"]] == ["run"]
    assert service["symbol_count"] == 3


def test_generation_is_byte_identical_across_runs(tmp_path: Path) -> None:
    repo_root = _copy_fixture(tmp_path)

    first = tmp_path / "first"
    second = tmp_path / "second"
    generate_all_artifacts(root=repo_root, out_dir=first)
    generate_all_artifacts(root=repo_root, out_dir=second)

    for name in (OUTLINES_JSONL, OUTLINE_SUMMARY_JSON):
        assert (first / name).read_bytes() == (second / name).read_bytes()


def test_config_restricts_languages(tmp_path: Path) -> None:
    repo_root = _copy_fixture(tmp_path)
    (repo_root / "outline.toml").write_text(
        'languages = ["go"]\n', encoding="utf-8"
    )

    out_dir = tmp_path / "artifacts"
    result = generate_all_artifacts(root=repo_root, out_dir=out_dir)

    records = read_jsonl(out_dir / OUTLINES_JSONL)
    assert [record["path"] for record in records] == ["pkg/greet.go"]
    assert result["file_count"] == 1


def test_default_output_dir_is_skipped_on_rerun(tmp_path: Path) -> None:
    repo_root = _copy_fixture(tmp_path)

    generate_all_artifacts(root=repo_root)
    (repo_root / ".outline" / "stray.py").write_text("def stray():\n    pass\n")
    result = generate_all_artifacts(root=repo_root)

    records = read_jsonl(repo_root / ".outline" / OUTLINES_JSONL)
    assert all(not str(r["path"]).startswith(".outline/") for r in records)
    assert result["file_count"] == 3
