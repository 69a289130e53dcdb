"""Model namespace for outline artifact schemas."""

from artifacts.models.artifacts.outlines import OutlineRecord, OutlineSummary

__all__ = ["OutlineRecord", "OutlineSummary"]
