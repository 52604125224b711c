# ABOUTME: Protocol interface and result model for medal table extraction
# ABOUTME: Separates "fetch failed" from "no qualifying rows" without raising to callers

from typing import Protocol

from pydantic import BaseModel, Field

from podium_watch.core.models import MedalRecord


class MedalTableExtractor(Protocol):
    """Protocol for turning a medal table page into validated records. Implementations
    soft-fail: they never raise, and an unusable page yields an empty result."""

    async def extract_result(self, url: str) -> "MedalTableExtraction":
        """Fetch ``url`` and extract its medal table.

        Args:
            url: Page holding the medal table

        Returns:
            Extraction carrying the records and whether the fetch/parse succeeded
        """
        ...

    async def extract(self, url: str) -> list[MedalRecord]:
        """Fetch ``url`` and return the validated records, empty on failure."""
        ...


class ExtractionError(Exception):
    """Raised when medal table markup cannot be fetched or processed."""

    pass


class MedalTableExtraction(BaseModel):
    """Outcome of a single extraction run."""

    source_url: str
    records: list[MedalRecord] = Field(default_factory=list)
    extraction_success: bool = True
    error_message: str | None = None

    @property
    def is_empty(self) -> bool:
        return not self.records
