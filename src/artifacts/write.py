from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from artifacts.generators import OutlinesGenerator
from contract.artifacts import OUTLINE_SUMMARY_JSON, OUTLINES_JSONL
from rules.config import load_config, resolve_output_dir

if TYPE_CHECKING:
    from pathlib import Path

    from rules.config import OutlineConfig

logger = logging.getLogger(__name__)


def generate_all_artifacts(
    *,
    root: Path,
    out_dir: Path | None = None,
    config: OutlineConfig | None = None,
) -> dict[str, object]:
    """Generate deterministic outline artifacts for a repository.

    Args:
        root: Root directory of the repository to outline
        out_dir: Optional output directory for generated artifacts
        config: Optional configuration; loaded from outline.toml when omitted

    Returns:
        Dictionary with counts and list of generated artifact paths.
    """
    if config is None:
        config = load_config(root)

    if out_dir is None:
        out_dir = resolve_output_dir(root, config.output_dir)

    outlines_gen = OutlinesGenerator()
    records, summary = outlines_gen.generate(
        root=root,
        out_dir=out_dir,
        include_patterns=config.include,
        exclude_patterns=config.exclude,
        nested_gitignore=config.nested_gitignore,
        extensions=config.extensions,
        languages=config.languages,
    )
    logger.info(
        "outlined %d files (%d symbols) into %s",
        len(records),
        summary["symbol_count"],
        out_dir,
    )

    artifacts_list = [OUTLINES_JSONL, OUTLINE_SUMMARY_JSON]

    return {
        "file_count": len(records),
        "symbol_count": summary["symbol_count"],
        "skipped_count": len(summary["skipped"]),
        "artifacts": [str(out_dir / name) for name in artifacts_list],
    }
