# ABOUTME: Data extraction from the Wikipedia medal table article
# ABOUTME: Pipeline Stage 1: Fetched HTML → Validated medal records

"""
Extraction Layer: Get medal rows from Wikipedia

This layer handles:
- Fetching the medal table article over HTTP
- Locating the sortable medal table and walking its rows
- Validating country names and medal counts

Data Flow: Wikipedia → Validated records → core/ service
"""

from .base import ExtractionError, MedalTableExtraction, MedalTableExtractor

__all__ = [
    "ExtractionError",
    "MedalTableExtraction",
    "MedalTableExtractor",
]
