"""
Data loading and parsing module.

This package handles curriculum file I/O and transcript row parsing.
"""

from .loader import CatalogLoader
from .parser import TranscriptParser

__all__ = ["CatalogLoader", "TranscriptParser"]
