"""Outlines artifact generator."""

from __future__ import annotations

import logging
from collections import Counter
from typing import TYPE_CHECKING, Any

from artifacts.models.artifacts.outlines import OutlineRecord, OutlineSummary
from artifacts.utils import _get_output_dir_name, _write_json, _write_jsonl
from contract.artifacts import OUTLINE_SUMMARY_JSON, OUTLINES_JSONL
from parse.pipeline import outline_source
from scan.files import find_source_files

if TYPE_CHECKING:
    from pathlib import Path

logger = logging.getLogger(__name__)


class OutlinesGenerator:
    """Generates outlines.jsonl and outline_summary.json from source files."""

    @property
    def name(self) -> str:
        """Generator name for logging and identification."""
        return "outlines"

    def generate(
        self,
        root: Path,
        out_dir: Path,
        **kwargs: Any,
    ) -> tuple[list[dict[str, Any]], dict[str, Any]]:
        """Generate outline artifacts."""
        include_patterns: list[str] | None = kwargs.get("include_patterns")
        exclude_patterns: list[str] | None = kwargs.get("exclude_patterns")
        nested_gitignore: bool = kwargs.get("nested_gitignore", False)
        extensions: dict[str, str] | None = kwargs.get("extensions")
        languages: list[str] | None = kwargs.get("languages")

        out_dir.mkdir(parents=True, exist_ok=True)

        out_dir_name = _get_output_dir_name(out_dir, root)

        records: list[OutlineRecord] = []
        skipped: list[str] = []
        for file_path, language in find_source_files(
            root,
            output_dir=out_dir_name,
            include_patterns=include_patterns,
            exclude_patterns=exclude_patterns,
            nested_gitignore=nested_gitignore,
            extensions=extensions,
            languages=languages,
        ):
            relative_path = file_path.relative_to(root).as_posix()
            try:
                source = file_path.read_bytes()
            except OSError as exc:
                logger.warning("skipping %s: %s", relative_path, exc)
                skipped.append(relative_path)
                continue

            result = outline_source(source, language, path=relative_path)
            records.append(
                OutlineRecord(
                    path=relative_path,
                    language=language,
                    symbol_count=len(result.document.walk()),
                    outline=result.text,
                    symbols=list(result.document.symbols),
                )
            )

        records.sort(key=lambda r: r.path)

        summary = OutlineSummary(
            file_count=len(records),
            symbol_count=sum(r.symbol_count for r in records),
            languages=dict(sorted(Counter(r.language for r in records).items())),
            skipped=sorted(skipped),
        )

        _write_jsonl(out_dir / OUTLINES_JSONL, records)
        _write_json(out_dir / OUTLINE_SUMMARY_JSON, summary)

        record_dicts = [r.model_dump(mode="json") for r in records]

        return record_dicts, summary.model_dump(mode="json")
