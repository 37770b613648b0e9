"""
Dataembed Services Package

Usage:
    from dataembed.services import EmbedService, SourceMissingError

    service = EmbedService()
    target = service.resolve({"src": "https://docs.google.com/spreadsheets/d/abc"})
    payload = EmbedService.describe(target)
"""

from dataembed.services.embed_service import (
    EmbedService,
    EmbedTarget,
    EmbedError,
    SourceMissingError,
    UnsupportedSourceError,
    InvalidMatcherError,
)
from dataembed.services.matchers import (
    MatcherRegistry,
    SourceMatcher,
)

__all__ = [
    # Services
    "EmbedService",
    "EmbedTarget",
    "MatcherRegistry",
    "SourceMatcher",
    # Exceptions
    "EmbedError",
    "SourceMissingError",
    "UnsupportedSourceError",
    "InvalidMatcherError",
]
