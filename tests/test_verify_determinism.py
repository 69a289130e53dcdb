from __future__ import annotations

from typing import TYPE_CHECKING

import pytest
from artifacts.write import generate_all_artifacts
from verify.verify import DeterminismResult, verify_determinism

if TYPE_CHECKING:
    from pathlib import Path


def _write_minimal_repo(root: Path) -> None:
    (root / "pkg").mkdir(parents=True, exist_ok=True)
    (root / "pkg" / "module.py").write_text(
        '"""Minimal module."""\n\n\ndef run():\n    pass\n',
        encoding="utf-8",
    )
    (root / "pkg" / "main.go").write_text(
        "package pkg\n\nfunc Main() {}\n",
        encoding="utf-8",
    )


def test_verify_determinism_requires_artifacts_dir(tmp_path: Path) -> None:
    repo_root = tmp_path / "repo"
    repo_root.mkdir()
    _write_minimal_repo(repo_root)

    missing_dir = tmp_path / "missing"
    with pytest.raises(FileNotFoundError, match="Artifacts directory does not exist"):
        verify_determinism(root=repo_root, artifacts_dir=missing_dir)


def test_verify_determinism_rejects_file(tmp_path: Path) -> None:
    repo_root = tmp_path / "repo"
    repo_root.mkdir()
    not_a_dir = tmp_path / "artifacts"
    not_a_dir.write_text("x", encoding="utf-8")

    with pytest.raises(NotADirectoryError):
        verify_determinism(root=repo_root, artifacts_dir=not_a_dir)


def test_verify_determinism_accepts_fresh_artifacts(tmp_path: Path) -> None:
    repo_root = tmp_path / "repo"
    repo_root.mkdir()
    _write_minimal_repo(repo_root)

    artifacts_dir = tmp_path / "artifacts"
    generate_all_artifacts(root=repo_root, out_dir=artifacts_dir)

    assert verify_determinism(root=repo_root, artifacts_dir=artifacts_dir) == (
        DeterminismResult(ok=True)
    )


def test_verify_determinism_detects_source_change(tmp_path: Path) -> None:
    repo_root = tmp_path / "repo"
    repo_root.mkdir()
    _write_minimal_repo(repo_root)

    artifacts_dir = tmp_path / "artifacts"
    generate_all_artifacts(root=repo_root, out_dir=artifacts_dir)
    (repo_root / "pkg" / "extra.py").write_text("def extra():\n    pass\n")

    result = verify_determinism(root=repo_root, artifacts_dir=artifacts_dir)

    assert result.ok is False
    assert result.mismatches == ("outline_summary.json", "outlines.jsonl")


def test_verify_determinism_relative_paths_and_sorted_mismatches(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    repo_root = tmp_path / "repo"
    repo_root.mkdir()
    _write_minimal_repo(repo_root)

    artifacts_dir = tmp_path / "artifacts"
    artifacts_dir.mkdir()

    for rel_path, content in (
        ("b.txt", "b-original"),
        ("a.txt", "a-original"),
        ("gone.txt", "gone"),
    ):
        path = artifacts_dir / rel_path
        path.write_text(content, encoding="utf-8")

    def _fake_generate_all_artifacts(*, root: Path, out_dir: Path) -> dict[str, object]:
        (out_dir / "a.txt").write_text("a-original", encoding="utf-8")
        (out_dir / "b.txt").write_text("b-regenerated", encoding="utf-8")
        (out_dir / "new.txt").write_text("new", encoding="utf-8")
        return {"artifacts": [str(out_dir / "a.txt"), str(out_dir / "b.txt")]}

    monkeypatch.setattr(
        "verify.verify.generate_all_artifacts",
        _fake_generate_all_artifacts,
    )

    result = verify_determinism(root=repo_root, artifacts_dir=artifacts_dir)

    assert result == DeterminismResult(
        ok=False,
        mismatches=("b.txt",),
        missing=("gone.txt",),
        extra=("new.txt",),
    )
