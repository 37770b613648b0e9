"""
Absolute source URL value type.

Wraps urllib.parse with the checks a data source needs: a URL is only
accepted when it carries both a scheme and a host. Instances are frozen;
appending query parameters returns a new SourceURL.
"""

import logging
from dataclasses import dataclass, replace
from typing import Iterable, List, Optional, Tuple
from urllib.parse import parse_qsl, unquote, urlencode, urlsplit, urlunsplit

logger = logging.getLogger(__name__)

# Schemes whose empty path serializes as "/"
HIERARCHICAL_SCHEMES = {"http", "https", "ftp", "ws", "wss"}

# Characters that may not appear in a host, even percent-encoded
FORBIDDEN_HOST_CHARS = set("<>[]^|%#?/\\ ")


class InvalidSourceURLError(ValueError):
    """Raised when a value cannot be parsed as an absolute URL."""
    pass


@dataclass(frozen=True)
class SourceURL:
    """An absolute URL with an ordered, duplicate-friendly query."""

    scheme: str
    netloc: str
    path: str = ""
    query: str = ""
    fragment: str = ""

    @property
    def host(self) -> Optional[str]:
        return urlsplit(self.href).hostname

    @property
    def query_params(self) -> List[Tuple[str, str]]:
        """Query as (key, value) pairs, in order, blank values kept."""
        return parse_qsl(self.query, keep_blank_values=True)

    @property
    def href(self) -> str:
        return urlunsplit(
            (self.scheme, self.netloc, self.path, self.query, self.fragment)
        )

    def with_query_params(
        self, params: Iterable[Tuple[str, str]]
    ) -> "SourceURL":
        """
        Return a copy with params appended after the existing query.

        The existing query is re-serialized only when something is
        appended, so an untouched URL keeps its original encoding.
        """
        extra = list(params)
        if not extra:
            return self
        return replace(self, query=urlencode(self.query_params + extra))

    def __str__(self) -> str:
        return self.href


def _validate_host(hostname: str, text: str) -> None:
    """Reject hosts that are only well-formed before percent-decoding."""
    try:
        host = unquote(hostname, errors="strict")
        host.encode("idna")
    except UnicodeError as e:
        raise InvalidSourceURLError(f"Invalid host in URL: {text!r}") from e

    for ch in host:
        if ch.isspace() or ch in FORBIDDEN_HOST_CHARS or ord(ch) < 0x20:
            raise InvalidSourceURLError(f"Invalid host in URL: {text!r}")


def parse_source_url(value) -> SourceURL:
    """
    Parse a string into an absolute SourceURL.

    Args:
        value: The candidate URL.

    Returns:
        The parsed SourceURL.

    Raises:
        InvalidSourceURLError: If the value is empty, not a string,
            lacks a scheme or host, or has a host that is invalid once
            percent-decoded.
    """
    if not value or not isinstance(value, str):
        raise InvalidSourceURLError(f"Not a URL: {value!r}")

    text = value.strip()
    try:
        parts = urlsplit(text)
        # Accessing port validates it
        parts.port
    except ValueError as e:
        raise InvalidSourceURLError(f"Malformed URL {text!r}: {e}") from e

    if not parts.scheme or not parts.netloc or not parts.hostname:
        raise InvalidSourceURLError(f"URL is not absolute: {text!r}")
    if any(ch.isspace() for ch in parts.netloc):
        raise InvalidSourceURLError(f"Invalid host in URL: {text!r}")
    _validate_host(parts.hostname, text)

    scheme = parts.scheme.lower()
    netloc = parts.netloc if "@" in parts.netloc else parts.netloc.lower()
    path = parts.path
    if not path and scheme in HIERARCHICAL_SCHEMES:
        path = "/"

    return SourceURL(
        scheme=scheme,
        netloc=netloc,
        path=path,
        query=parts.query,
        fragment=parts.fragment,
    )
