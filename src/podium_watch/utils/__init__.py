# ABOUTME: Cross-cutting utilities and shared infrastructure
# ABOUTME: Supporting services: logging, progress display, rich table rendering

"""
Utils Layer: Shared infrastructure and cross-cutting concerns

This layer provides:
- Logging configuration and the loading indicator
- Rich table builders for terminal display

Data Flow: Supporting services for all other layers
"""

from . import logging

__all__ = [
    "logging",
]
