"""
Embed service for turning invocation params into a supported data source.

Resolves the source URL and picks the matcher that will serve it.
"""

import logging
from dataclasses import dataclass
from typing import Any, List, Mapping, Optional

from dataembed.schemas import SourceDescription
from dataembed.services.matchers import MatcherRegistry, SourceMatcher
from dataembed.source import DataSource, resolve_data_source

logger = logging.getLogger(__name__)


class EmbedError(Exception):
    """Base exception for embed operations."""
    pass


class SourceMissingError(EmbedError):
    """Raised when no data source can be determined from the params."""
    pass


class UnsupportedSourceError(EmbedError):
    """Raised when the data source is not served by any enabled matcher."""

    def __init__(self, message: str, url: Optional[str] = None):
        super().__init__(message)
        self.url = url


class InvalidMatcherError(EmbedError):
    """Raised when an unknown matcher is enabled."""
    pass


@dataclass(frozen=True)
class EmbedTarget:
    """A resolved data source and the matcher that accepted it."""

    source: DataSource
    matcher: SourceMatcher


class EmbedService:
    """Service for resolving invocation params to an embeddable source.

    Stateless: each call to resolve() works only on its own params.
    """

    def __init__(self, enabled_matchers: Optional[List[str]] = None):
        if enabled_matchers is not None:
            for name in enabled_matchers:
                try:
                    MatcherRegistry.get_matcher(name)
                except ValueError:
                    logger.error(f"Invalid matcher enabled: {name}")
                    raise InvalidMatcherError(f"Unknown matcher: {name}")
        self._enabled = enabled_matchers

    @property
    def enabled_matchers(self) -> List[str]:
        if self._enabled is None:
            return list(MatcherRegistry.get_available_matchers())
        return list(self._enabled)

    def resolve(self, params: Mapping[str, Any]) -> EmbedTarget:
        """
        Resolve params to a data source served by an enabled matcher.

        Args:
            params: The invocation parameters.

        Returns:
            The EmbedTarget.

        Raises:
            SourceMissingError: If no source URL can be determined.
            UnsupportedSourceError: If no enabled matcher accepts the URL.
        """
        source = resolve_data_source(params)
        if source is None:
            raise SourceMissingError("Expected a URL")

        matcher = MatcherRegistry.find_matcher(source.url, self._enabled)
        if matcher is None:
            raise UnsupportedSourceError(
                f"No matcher found for {source.url.host}", url=source.url.href
            )

        logger.info(
            "Resolved source %s via %s", source.url.href, matcher.name
        )
        return EmbedTarget(source=source, matcher=matcher)

    @staticmethod
    def describe(target: EmbedTarget) -> SourceDescription:
        """Build the response payload for a resolved target."""
        url = target.source.url
        return SourceDescription(
            url=url.href,
            host=url.host,
            matcher=target.matcher.name,
            query=target.source.query,
            query_params=url.query_params,
        )
