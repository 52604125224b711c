# ABOUTME: Pure HTML parsing of the Wikipedia medal table into validated records
# ABOUTME: Folds over table rows carrying the last seen rank for merged rank cells

import re
from collections.abc import Iterable
from typing import NamedTuple

from bs4 import BeautifulSoup, Tag

from podium_watch.core.models import MedalRecord
from podium_watch.core.registry import CountryRegistry
from podium_watch.utils.logging import get_logger

MEDAL_TABLE_ROWS_SELECTOR = "table.wikitable.sortable > tbody > tr, table.wikitable.sortable > tr"
MIN_CELLS = 5
COUNT_COLUMNS = 4

_COUNT_PATTERN = re.compile(r"[0-9]+")

logger = get_logger(__name__)


class FoldState(NamedTuple):
    """State carried across rows: the last non-empty rank and the records so far."""

    last_rank: str
    records: tuple[MedalRecord, ...]


INITIAL_STATE = FoldState(last_rank="", records=())


def select_rows(markup: str) -> list[Tag]:
    """Parse ``markup`` and return the medal table body rows in document order."""
    soup = BeautifulSoup(markup, "lxml")
    return soup.select(MEDAL_TABLE_ROWS_SELECTOR)


def carry_rank(last_rank: str, cell_text: str) -> str:
    """Resolve a row's rank, reusing ``last_rank`` when the rank cell was merged away."""
    return cell_text if cell_text else last_rank


def parse_count(text: str) -> int | None:
    """Parse a trimmed medal count as a non-negative base-10 integer, or None."""
    text = text.strip()
    if not _COUNT_PATTERN.fullmatch(text):
        return None
    try:
        return int(text)
    except ValueError:
        # Longer than the interpreter's integer string conversion limit
        return None


def _rank_text(row: Tag) -> str:
    first_cell = row.find("td")
    return first_cell.get_text().strip() if first_cell else ""


def _country_name(row: Tag) -> str:
    return "".join(link.get_text() for link in row.select("th a")).strip()


def parse_row(row: Tag, registry: CountryRegistry) -> MedalRecord | None:
    """Build a record from one table row, or None if the row does not qualify."""
    name = _country_name(row)
    country = registry.lookup(name)
    if country is None:
        return None

    cells = row.find_all(["td", "th"])
    if len(cells) < MIN_CELLS:
        logger.debug("Skipping row with too few cells", country=name, cell_count=len(cells))
        return None

    counts = [parse_count(cell.get_text()) for cell in cells[-COUNT_COLUMNS:]]
    if any(count is None for count in counts):
        logger.debug("Skipping row with malformed medal counts", country=name)
        return None

    gold, silver, bronze, total = counts
    return MedalRecord(country=country, gold=gold, silver=silver, bronze=bronze, total=total)


def step(state: FoldState, row: Tag, registry: CountryRegistry) -> FoldState:
    """Advance the fold by one row."""
    rank = carry_rank(state.last_rank, _rank_text(row))
    record = parse_row(row, registry)
    if record is None:
        return FoldState(last_rank=rank, records=state.records)

    logger.debug("Accepted medal row", rank=rank, country=record.country.name)
    return FoldState(last_rank=rank, records=(*state.records, record))


def fold_rows(rows: Iterable[Tag], registry: CountryRegistry, state: FoldState = INITIAL_STATE) -> FoldState:
    """Fold ``rows`` into records in a single pass."""
    for row in rows:
        state = step(state, row, registry)
    return state


def parse_medal_table(markup: str, registry: CountryRegistry) -> list[MedalRecord]:
    """Extract validated medal records from medal table markup.

    Rows are kept in document order. Rows naming a country outside ``registry``,
    rows with fewer than five cells, and rows whose last four cells are not all
    non-negative integers are skipped.
    """
    return list(fold_rows(select_rows(markup), registry).records)
