from __future__ import annotations

from pathlib import Path
from typing import Any

import tomllib
from pydantic import BaseModel, ConfigDict, Field, field_validator

from parse.languages import LANGUAGES

CONFIG_FILENAME = "outline.toml"


class OutlineConfig(BaseModel):
    """Configuration for repository-wide outline generation."""

    model_config = ConfigDict(extra="forbid")

    output_dir: str = Field(
        default=".outline",
        description="Output directory for generated artifacts",
    )
    include: list[str] = Field(
        default_factory=list,
        description="Glob patterns for files to include (empty = all supported)",
    )
    exclude: list[str] = Field(
        default_factory=list,
        description="Glob patterns for files to exclude",
    )
    languages: list[str] = Field(
        default_factory=list,
        description="Restrict generation to these language tags (empty = all)",
    )
    extensions: dict[str, str] = Field(
        default_factory=dict,
        description="Additional file extension to language tag mappings",
    )
    nested_gitignore: bool = Field(
        default=False,
        description=(
            "Enable nested .gitignore composition (default: false for root-only)"
        ),
    )

    @field_validator("languages")
    @classmethod
    def validate_languages(cls, v: list[str]) -> list[str]:
        unknown = sorted(set(v) - set(LANGUAGES))
        if unknown:
            msg = (
                f"Unknown language(s): {', '.join(unknown)}. "
                f"Valid languages: {', '.join(sorted(LANGUAGES))}"
            )
            raise ValueError(msg)
        return v

    @field_validator("extensions", mode="before")
    @classmethod
    def validate_extensions(cls, v: Any) -> Any:
        """Validate that every extension maps to a supported language tag.

        Note: this runs in `mode="before"` so we can report a clear error
        message using the raw TOML values.
        """

        if v is None:
            return {}

        if not isinstance(v, dict):
            msg = "extensions must be a mapping of extension -> language"
            raise TypeError(msg)

        for ext, language in v.items():
            if not isinstance(ext, str) or not isinstance(language, str):
                msg = "extensions must be a mapping of str -> str"
                raise TypeError(msg)
            if language not in LANGUAGES:
                msg = (
                    f"Invalid language '{language}' for extension '{ext}'. "
                    f"Valid languages: {', '.join(sorted(LANGUAGES))}"
                )
                raise ValueError(msg)

        return v


class ConfigError(Exception):
    """Raised when config file exists but cannot be parsed."""


def resolve_output_dir(root: Path, output_dir: str) -> Path:
    """Resolve a config-provided output_dir safely within the repo root.

    The config output_dir must be a non-empty relative path that remains
    within the repository root after resolution. Absolute paths and paths
    that escape the root are rejected.
    """
    if not output_dir:
        msg = "output_dir must be a non-empty relative path"
        raise ConfigError(msg)

    if output_dir.startswith("~"):
        msg = "output_dir must be a relative path within the repo root"
        raise ConfigError(msg)

    output_path = Path(output_dir)
    if output_path.is_absolute():
        msg = "output_dir must be a relative path within the repo root"
        raise ConfigError(msg)

    try:
        resolved_root = root.resolve()
        resolved_output = (resolved_root / output_path).resolve()
    except OSError as exc:
        msg = f"Failed to resolve output_dir '{output_dir}': {exc}"
        raise ConfigError(msg) from exc

    try:
        resolved_output.relative_to(resolved_root)
    except ValueError as exc:
        msg = f"output_dir '{output_dir}' escapes the repository root"
        raise ConfigError(msg) from exc

    return resolved_output


def load_config(root: Path) -> OutlineConfig:
    """Load configuration from outline.toml if it exists."""
    config_path = Path(root) / CONFIG_FILENAME

    if not config_path.is_file():
        return OutlineConfig()

    try:
        with config_path.open("rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        msg = f"Invalid TOML in {config_path}: {e}"
        raise ConfigError(msg) from e

    try:
        return OutlineConfig.model_validate(data)
    except Exception as e:
        msg = f"Invalid config in {config_path}: {e}"
        raise ConfigError(msg) from e
