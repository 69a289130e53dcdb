"""Command-line interface for the outline engine."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

import orjson

from artifacts.write import generate_all_artifacts
from contract.validation import validate_artifacts
from outline.errors import UnsupportedLanguageError
from parse.languages import LANGUAGES
from parse.pipeline import outline_file
from rules.config import ConfigError, load_config, resolve_output_dir
from verify.verify import verify_determinism

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


def _add_common_paths(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "root",
        nargs="?",
        default=".",
        help="Repository root (default: .)",
    )


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="outline")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=_LOG_LEVELS,
        help="Logging verbosity (default: WARNING)",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    show_parser = subparsers.add_parser("show", help="Print the outline of a file")
    show_parser.add_argument("file", help="Source file to outline")
    show_parser.add_argument(
        "--language",
        default=None,
        choices=sorted(LANGUAGES),
        help="Language tag (default: detected from the file extension)",
    )
    show_parser.add_argument(
        "--format",
        default="text",
        choices=("text", "json"),
        help="Output format (default: text)",
    )

    subparsers.add_parser("languages", help="List supported languages")

    generate_parser = subparsers.add_parser("generate", help="Generate artifacts")
    _add_common_paths(generate_parser)
    generate_parser.add_argument(
        "--out-dir",
        default=None,
        help="Output directory for generated artifacts (default: config output dir)",
    )

    validate_parser = subparsers.add_parser("validate", help="Validate artifacts")
    _add_common_paths(validate_parser)
    validate_parser.add_argument(
        "--artifacts-dir",
        default=None,
        help="Artifacts directory (default: config output dir)",
    )

    verify_parser = subparsers.add_parser(
        "verify", help="Verify determinism of artifacts"
    )
    _add_common_paths(verify_parser)
    verify_parser.add_argument(
        "--artifacts-dir",
        default=None,
        help="Artifacts directory (default: config output dir)",
    )

    return parser


def _resolve_artifacts_dir(root: Path, artifacts_dir: str | None) -> Path:
    if artifacts_dir is None:
        config = load_config(root)
        return resolve_output_dir(root, config.output_dir)
    return Path(artifacts_dir).expanduser().resolve()


def _handle_show(file: str, language: str | None, output_format: str) -> int:
    path = Path(file).expanduser()
    try:
        result = outline_file(path, language)
    except UnsupportedLanguageError as exc:
        sys.stderr.write(f"error: {exc}\n")
        return 1
    except OSError as exc:
        sys.stderr.write(f"error: cannot read {path}: {exc}\n")
        return 1

    if output_format == "json":
        payload = {
            "path": result.path,
            "language": result.language,
            "symbols": [
                symbol.model_dump(mode="json") for symbol in result.document.symbols
            ],
        }
        options = orjson.OPT_SORT_KEYS | orjson.OPT_INDENT_2
        sys.stdout.write(orjson.dumps(payload, option=options).decode())
        sys.stdout.write("\n")
        return 0

    sys.stdout.write(f"Language: {result.language}\n\n{result.text}")
    return 0


def _handle_languages() -> int:
    for name in sorted(LANGUAGES):
        spec = LANGUAGES[name]
        sys.stdout.write(f"{name}\t{' '.join(spec.extensions)}\t{spec.description}\n")
    return 0


def _handle_generate(root: Path, out_dir: str | None) -> int:
    resolved_out_dir = None
    if out_dir is not None:
        resolved_out_dir = Path(out_dir).expanduser().resolve()
    generate_all_artifacts(root=root, out_dir=resolved_out_dir)
    return 0


def _handle_validate(root: Path, artifacts_dir: str | None) -> int:
    resolved_artifacts_dir = _resolve_artifacts_dir(root, artifacts_dir)
    result = validate_artifacts(resolved_artifacts_dir)
    for warning in result.warnings:
        sys.stderr.write(f"warning: {warning.location()}: {warning.message}\n")
    if result.errors:
        for error in result.errors:
            sys.stderr.write(f"{error.location()}: {error.message}\n")
        return 1
    return 0


def _handle_verify(root: Path, artifacts_dir: str | None) -> int:
    resolved_artifacts_dir = _resolve_artifacts_dir(root, artifacts_dir)
    try:
        result = verify_determinism(root=root, artifacts_dir=resolved_artifacts_dir)
    except (FileNotFoundError, NotADirectoryError) as exc:
        sys.stderr.write(f"artifacts-dir: {resolved_artifacts_dir}\n")
        sys.stderr.write(f"error: {exc}\n")
        return 2
    if not result.ok:
        for label, paths in (
            ("missing", result.missing),
            ("extra", result.extra),
            ("mismatches", result.mismatches),
        ):
            for path in paths:
                sys.stderr.write(f"{label}: {path}\n")
        return 1
    return 0


def _dispatch(args: argparse.Namespace) -> int:
    if args.command == "show":
        return _handle_show(args.file, args.language, args.format)

    if args.command == "languages":
        return _handle_languages()

    root = Path(args.root).expanduser().resolve()

    if args.command == "generate":
        return _handle_generate(root, args.out_dir)

    if args.command == "validate":
        return _handle_validate(root, args.artifacts_dir)

    if args.command == "verify":
        return _handle_verify(root, args.artifacts_dir)

    raise AssertionError


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        return _dispatch(args)
    except ConfigError as exc:
        sys.stderr.write(f"config error: {exc}\n")
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
