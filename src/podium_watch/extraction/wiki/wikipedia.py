# ABOUTME: httpx-based extractor for the 2024 Summer Olympics medal table on Wikipedia
# ABOUTME: Fetches the page once and soft-fails to an empty result on fetch or parse errors

import httpx

from podium_watch.config import get_config
from podium_watch.core.models import MedalRecord
from podium_watch.core.registry import CountryRegistry, default_registry
from podium_watch.extraction.base import ExtractionError, MedalTableExtraction
from podium_watch.extraction.wiki.parser import parse_medal_table
from podium_watch.utils.logging import get_logger

MEDAL_TABLE_URL = "https://en.wikipedia.org/wiki/2024_Summer_Olympics_medal_table#Medal_table"


class WikipediaMedalTableExtractor:
    """Medal table extractor that downloads the article with httpx and parses it with BeautifulSoup."""

    def __init__(self, registry: CountryRegistry | None = None, client: httpx.AsyncClient | None = None):
        config = get_config()
        self.registry = registry if registry is not None else default_registry()
        self.owns_client = client is None
        if client is None:
            client_options: dict = {"headers": {"User-Agent": config.user_agent}}
            if config.request_timeout is not None:
                client_options["timeout"] = config.request_timeout
            client = httpx.AsyncClient(**client_options)
        self.http_client = client  # Allow for dependency injection
        self.logger = get_logger(__name__)

    async def extract(self, url: str = MEDAL_TABLE_URL) -> list[MedalRecord]:
        """Return the validated records for ``url``, or an empty list if anything went wrong."""
        result = await self.extract_result(url)
        return result.records

    async def extract_result(self, url: str = MEDAL_TABLE_URL) -> MedalTableExtraction:
        """Fetch and parse the medal table, reporting failures instead of raising them."""
        try:
            markup = await self._fetch_markup(url)
            records = self._parse_markup(markup)
        except ExtractionError as e:
            self.logger.error("Medal table extraction failed", url=url, error=str(e))
            return MedalTableExtraction(source_url=url, extraction_success=False, error_message=str(e))

        self.logger.info("Extracted medal table", url=url, record_count=len(records))
        return MedalTableExtraction(source_url=url, records=records)

    async def _fetch_markup(self, url: str) -> str:
        self.logger.debug("Fetching medal table page", url=url)
        try:
            response = await self.http_client.get(url, follow_redirects=True)
            response.raise_for_status()
        except httpx.HTTPError as e:
            raise ExtractionError(f"Error fetching {url}: {e}") from e
        except Exception as e:
            # Invalid URLs and a closed client surface outside the HTTPError hierarchy
            raise ExtractionError(f"Unexpected error fetching {url}: {e}") from e

        self.logger.debug(
            "Fetched medal table page", url=url, status_code=response.status_code, content_length=len(response.text)
        )
        return response.text

    def _parse_markup(self, markup: str) -> list[MedalRecord]:
        try:
            return parse_medal_table(markup, self.registry)
        except Exception as e:
            raise ExtractionError(f"Unexpected error parsing medal table: {e}") from e

    async def close(self) -> None:
        """Close the HTTP client if this extractor created it."""
        if self.owns_client:
            await self.http_client.aclose()
