# ABOUTME: Closed allow-list of countries that may appear in the medal list
# ABOUTME: Exact, case-sensitive name lookup over an immutable set loaded once

from collections.abc import Iterable, Iterator

from podium_watch.core.models import Country

DEFAULT_COUNTRIES: tuple[Country, ...] = (
    Country(name="Brazil", flag="🇧🇷"),
    Country(name="United States", flag="🇺🇸"),
    Country(name="Ireland", flag="🇮🇪"),
    Country(name="Great Britain", flag="🇬🇧"),
    Country(name="Spain", flag="🇪🇸"),
    Country(name="France", flag="🇫🇷"),
    Country(name="Switzerland", flag="🇨🇭"),
    Country(name="Netherlands", flag="🇳🇱"),
    Country(name="Germany", flag="🇩🇪"),
    Country(name="Denmark", flag="🇩🇰"),
    Country(name="Norway", flag="🇳🇴"),
    Country(name="Sweden", flag="🇸🇪"),
    Country(name="Poland", flag="🇵🇱"),
    Country(name="Serbia", flag="🇷🇸"),
    Country(name="Lithuania", flag="🇱🇹"),
    Country(name="Romania", flag="🇷🇴"),
)


class CountryRegistry:
    """Immutable set of recognized countries keyed by exact name."""

    def __init__(self, countries: Iterable[Country]):
        by_name: dict[str, Country] = {}
        for country in countries:
            if country.name in by_name:
                raise ValueError(f"Duplicate country in registry: {country.name!r}")
            by_name[country.name] = country
        self._by_name = by_name

    def lookup(self, name: str) -> Country | None:
        """Return the country registered under ``name``, or None."""
        return self._by_name.get(name)

    def __contains__(self, name: object) -> bool:
        return name in self._by_name

    def __iter__(self) -> Iterator[Country]:
        return iter(self._by_name.values())

    def __len__(self) -> int:
        return len(self._by_name)


def default_registry() -> CountryRegistry:
    """Build the registry for the reference allow-list."""
    return CountryRegistry(DEFAULT_COUNTRIES)
