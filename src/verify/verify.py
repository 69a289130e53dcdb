"""Determinism verification for outline artifacts."""

from __future__ import annotations

import filecmp
import logging
import tempfile
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING

from artifacts.write import generate_all_artifacts

if TYPE_CHECKING:
    from rules.config import OutlineConfig

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DeterminismResult:
    ok: bool
    mismatches: tuple[str, ...] = field(default_factory=tuple)
    missing: tuple[str, ...] = field(default_factory=tuple)
    extra: tuple[str, ...] = field(default_factory=tuple)


def _relative_files(root: Path) -> set[Path]:
    return {path.relative_to(root) for path in root.rglob("*") if path.is_file()}


def _compare_trees(expected: Path, actual: Path) -> DeterminismResult:
    expected_files = _relative_files(expected)
    actual_files = _relative_files(actual)

    missing = sorted(str(path) for path in expected_files - actual_files)
    extra = sorted(str(path) for path in actual_files - expected_files)
    mismatches = sorted(
        str(path)
        for path in expected_files & actual_files
        if not filecmp.cmp(expected / path, actual / path, shallow=False)
    )

    return DeterminismResult(
        ok=not missing and not extra and not mismatches,
        mismatches=tuple(mismatches),
        missing=tuple(missing),
        extra=tuple(extra),
    )


def verify_determinism(
    *,
    root: Path,
    artifacts_dir: Path,
    config: OutlineConfig | None = None,
) -> DeterminismResult:
    """Verify that outline artifacts are deterministic.

    Regenerates the artifacts into a temporary directory and compares them
    byte-for-byte against ``artifacts_dir``. File sets are compared on
    relative paths so the result does not depend on where either tree lives.

    Raises:
        FileNotFoundError: If artifacts_dir does not exist.
        NotADirectoryError: If artifacts_dir is not a directory.
    """
    if not artifacts_dir.exists():
        msg = f"Artifacts directory does not exist: {artifacts_dir}"
        raise FileNotFoundError(msg)
    if not artifacts_dir.is_dir():
        msg = f"Artifacts path is not a directory: {artifacts_dir}"
        raise NotADirectoryError(msg)

    with tempfile.TemporaryDirectory() as temp_dir:
        temp_path = Path(temp_dir)
        if config is None:
            generate_all_artifacts(root=root, out_dir=temp_path)
        else:
            generate_all_artifacts(root=root, out_dir=temp_path, config=config)
        result = _compare_trees(artifacts_dir, temp_path)

    if not result.ok:
        logger.info(
            "artifacts differ: %d mismatched, %d missing, %d extra",
            len(result.mismatches),
            len(result.missing),
            len(result.extra),
        )
    return result
