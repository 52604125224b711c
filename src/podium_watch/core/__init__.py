# ABOUTME: Domain models, country registry, and orchestration layer
# ABOUTME: Fetched medal rows → Validated records handed to the display layer

"""
Core Layer: Domain objects and workflow orchestration

This layer handles:
- Country and medal record models
- The closed allow-list of recognized countries
- The service API used by the CLI

Data Flow: extraction/ records → Service → CLI rendering
"""

from .models import Country, MedalRecord
from .registry import DEFAULT_COUNTRIES, CountryRegistry, default_registry

# Import service on-demand to avoid circular imports
# Use: from podium_watch.core.service import MedalTableService

__all__ = [
    "Country",
    "CountryRegistry",
    "DEFAULT_COUNTRIES",
    "MedalRecord",
    "default_registry",
]
