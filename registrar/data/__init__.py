"""
Data loading and parsing module.

This package turns materialized rows and catalogue exports into validated
records. It is the only place where the registrar core reads a file.
"""

from .loader import CatalogLoader
from .parser import TranscriptParser

__all__ = ["CatalogLoader", "TranscriptParser"]
