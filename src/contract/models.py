"""Artifact models exposed at the contract boundary."""

from artifacts.models.artifacts.outlines import OutlineRecord, OutlineSummary

__all__ = ["OutlineRecord", "OutlineSummary"]
