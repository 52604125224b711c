"""Wikipedia medal table fetching and parsing."""

from .parser import parse_medal_table
from .wikipedia import MEDAL_TABLE_URL, WikipediaMedalTableExtractor

__all__ = ["MEDAL_TABLE_URL", "WikipediaMedalTableExtractor", "parse_medal_table"]
