"""Artifact generators for outline output."""

from artifacts.generators.outlines import OutlinesGenerator

__all__ = ["OutlinesGenerator"]
