# ABOUTME: High-level service API for loading the medal table
# ABOUTME: Wires the country registry into the extractor and owns its lifecycle

from __future__ import annotations

from podium_watch.core.models import MedalRecord
from podium_watch.core.registry import CountryRegistry, default_registry
from podium_watch.extraction.base import MedalTableExtraction, MedalTableExtractor
from podium_watch.extraction.wiki.wikipedia import MEDAL_TABLE_URL, WikipediaMedalTableExtractor
from podium_watch.utils.logging import get_logger


class MedalTableService:
    """Service for loading the filtered medal table."""

    def __init__(
        self,
        extractor: MedalTableExtractor | None = None,
        registry: CountryRegistry | None = None,
        url: str = MEDAL_TABLE_URL,
    ):
        self.registry = registry if registry is not None else default_registry()
        self.owns_extractor = extractor is None
        self.extractor = extractor or WikipediaMedalTableExtractor(registry=self.registry)
        self.url = url
        self.logger = get_logger(__name__)

    async def load(self) -> MedalTableExtraction:
        """Load the medal table, including whether the fetch succeeded."""
        self.logger.info("Loading medal table", url=self.url, countries=len(self.registry))
        result = await self.extractor.extract_result(self.url)
        self.logger.info(
            "Medal table loaded",
            record_count=len(result.records),
            extraction_success=result.extraction_success,
        )
        return result

    async def load_records(self) -> list[MedalRecord]:
        """Load the medal table records, empty when the fetch failed."""
        result = await self.load()
        return result.records

    async def close(self):
        """Clean up the extractor this service created."""
        if self.owns_extractor and isinstance(self.extractor, WikipediaMedalTableExtractor):
            await self.extractor.close()
