# ABOUTME: Tests for the Wikipedia medal table extractor covering fetch, parse, and soft-fail paths
# ABOUTME: Uses pytest-httpx to simulate Wikipedia and structlog capture to assert on diagnostics

from unittest.mock import patch

import httpx
import pytest
import pytest_asyncio
from structlog.testing import capture_logs

from podium_watch.core.models import Country
from podium_watch.core.registry import CountryRegistry
from podium_watch.extraction.base import MedalTableExtraction
from podium_watch.extraction.wiki.wikipedia import MEDAL_TABLE_URL, WikipediaMedalTableExtractor

MEDAL_PAGE = """
<html><body>
<table class="wikitable sortable plainrowheaders jquery-tablesorter">
<tbody>
<tr><th>Rank</th><th>NOC</th><th>Gold</th><th>Silver</th><th>Bronze</th><th>Total</th></tr>
<tr><td>1</td><th scope="row"><a href="/wiki/United_States">United States</a></th>
    <td>40</td><td>44</td><td>42</td><td>126</td></tr>
<tr><td>2</td><th scope="row"><a href="/wiki/China">China</a></th>
    <td>40</td><td>27</td><td>24</td><td>91</td></tr>
<tr><td>20</td><th scope="row"><a href="/wiki/Brazil">Brazil</a></th>
    <td>3</td><td>7</td><td>10</td><td>20</td></tr>
<tr><td></td><th scope="row"><a href="/wiki/Romania">Romania</a></th>
    <td>3</td><td>4</td><td>2</td><td>9</td></tr>
<tr><td>25</td><th scope="row"><a href="/wiki/Ireland">Ireland</a></th>
    <td>4</td><td>0</td><td>3</td><td>n/a</td></tr>
</tbody>
</table>
</body></html>
"""


def _error_entries(logs: list[dict]) -> list[dict]:
    return [entry for entry in logs if entry["log_level"] == "error"]


class TestWikipediaExtractorInitialization:
    """Test extractor construction and dependency injection."""

    def test_default_client_sends_user_agent(self):
        extractor = WikipediaMedalTableExtractor()
        assert "podium-watch" in extractor.http_client.headers["User-Agent"]
        assert extractor.owns_client is True

    def test_custom_user_agent_from_env(self, monkeypatch):
        monkeypatch.setenv("PODIUM_WATCH_USER_AGENT", "custom-agent/2.0")
        from podium_watch.config import reload_config

        reload_config()
        try:
            extractor = WikipediaMedalTableExtractor()
            assert extractor.http_client.headers["User-Agent"] == "custom-agent/2.0"
        finally:
            monkeypatch.delenv("PODIUM_WATCH_USER_AGENT")
            reload_config()

    def test_injected_client(self):
        client = httpx.AsyncClient()
        extractor = WikipediaMedalTableExtractor(client=client)
        assert extractor.http_client is client
        assert extractor.owns_client is False

    def test_injected_registry(self):
        registry = CountryRegistry([Country(name="Atlantis", flag="🔱")])
        assert WikipediaMedalTableExtractor(registry=registry).registry is registry


class TestWikipediaExtractorExtraction:
    """Test fetching and parsing through a mocked transport."""

    @pytest_asyncio.fixture
    async def extractor(self):
        extractor = WikipediaMedalTableExtractor()
        yield extractor
        await extractor.close()

    @pytest.mark.asyncio
    async def test_extract_filters_and_orders(self, extractor, httpx_mock):
        httpx_mock.add_response(text=MEDAL_PAGE)

        records = await extractor.extract()

        assert [r.country.name for r in records] == ["United States", "Brazil", "Romania"]
        assert records[0].counts == (40, 44, 42, 126)
        assert records[2].country.flag == "🇷🇴"

    @pytest.mark.asyncio
    async def test_extract_requests_medal_table_page(self, extractor, httpx_mock):
        httpx_mock.add_response(text=MEDAL_PAGE)

        await extractor.extract()

        request = httpx_mock.get_request()
        assert request.method == "GET"
        assert request.url.path == "/wiki/2024_Summer_Olympics_medal_table"
        assert request.url.host == "en.wikipedia.org"

    @pytest.mark.asyncio
    async def test_extract_result_reports_success(self, extractor, httpx_mock):
        httpx_mock.add_response(text=MEDAL_PAGE)

        result = await extractor.extract_result()

        assert isinstance(result, MedalTableExtraction)
        assert result.extraction_success is True
        assert result.error_message is None
        assert result.source_url == MEDAL_TABLE_URL
        assert len(result.records) == 3

    @pytest.mark.asyncio
    async def test_page_without_table_is_empty_success(self, extractor, httpx_mock):
        httpx_mock.add_response(text="<html><body><p>No table here</p></body></html>")

        result = await extractor.extract_result()

        assert result.extraction_success is True
        assert result.is_empty

    @pytest.mark.asyncio
    async def test_network_error_soft_fails_with_one_diagnostic(self, extractor, httpx_mock):
        httpx_mock.add_exception(httpx.ConnectError("Connection refused"))

        with capture_logs() as logs:
            records = await extractor.extract()

        assert records == []
        errors = _error_entries(logs)
        assert len(errors) == 1
        assert "Connection refused" in errors[0]["error"]

    @pytest.mark.asyncio
    async def test_http_error_status_soft_fails(self, extractor, httpx_mock):
        httpx_mock.add_response(status_code=503, text=MEDAL_PAGE)

        with capture_logs() as logs:
            result = await extractor.extract_result()

        assert result.records == []
        assert result.extraction_success is False
        assert "503" in result.error_message
        assert len(_error_entries(logs)) == 1

    @pytest.mark.asyncio
    async def test_parse_failure_soft_fails(self, extractor, httpx_mock):
        httpx_mock.add_response(text=MEDAL_PAGE)

        with (
            patch(
                "podium_watch.extraction.wiki.wikipedia.parse_medal_table",
                side_effect=RuntimeError("parser exploded"),
            ),
            capture_logs() as logs,
        ):
            result = await extractor.extract_result()

        assert result.records == []
        assert result.extraction_success is False
        assert "parser exploded" in result.error_message
        assert len(_error_entries(logs)) == 1

    @pytest.mark.asyncio
    async def test_empty_registry_yields_no_records(self, httpx_mock):
        httpx_mock.add_response(text=MEDAL_PAGE)
        extractor = WikipediaMedalTableExtractor(registry=CountryRegistry([]))

        try:
            assert await extractor.extract() == []
        finally:
            await extractor.close()

    @pytest.mark.asyncio
    async def test_custom_url(self, extractor, httpx_mock):
        httpx_mock.add_response(url="https://example.org/medals", text=MEDAL_PAGE)

        records = await extractor.extract("https://example.org/medals")

        assert len(records) == 3

    @pytest.mark.asyncio
    async def test_invalid_url_soft_fails(self, extractor, httpx_mock):
        with capture_logs() as logs:
            result = await extractor.extract_result("https://exa\nmple.org/")

        assert result.records == []
        assert result.extraction_success is False
        assert len(_error_entries(logs)) == 1

    @pytest.mark.asyncio
    async def test_closed_client_soft_fails(self):
        extractor = WikipediaMedalTableExtractor()
        await extractor.close()

        with capture_logs() as logs:
            records = await extractor.extract()

        assert records == []
        assert len(_error_entries(logs)) == 1


class TestClose:
    """Test client lifecycle."""

    @pytest.mark.asyncio
    async def test_close_owned_client(self):
        extractor = WikipediaMedalTableExtractor()
        await extractor.close()
        assert extractor.http_client.is_closed

    @pytest.mark.asyncio
    async def test_close_leaves_injected_client_open(self):
        client = httpx.AsyncClient()
        extractor = WikipediaMedalTableExtractor(client=client)
        await extractor.close()
        assert not client.is_closed
        await client.aclose()
