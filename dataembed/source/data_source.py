"""
Data source resolution for a single action invocation.

The source is normally given by the `src` parameter. For backward
compatibility it may also be carried in the invocation path, either
percent-encoded (/https%3A%2F%2F...) or unescaped (/https://...).
"""

import logging
import re
from dataclasses import dataclass
from typing import Any, Mapping, Optional
from urllib.parse import parse_qsl, unquote

from .params import (
    PATH_PARAM,
    QUERY_PARAM,
    SOURCE_PARAM,
    build_query_string,
    collect_query_params,
    is_query_builder_key,
    url_param_value,
)
from .url import InvalidSourceURLError, SourceURL, parse_source_url

logger = logging.getLogger(__name__)

# The runtime's escaping is inconsistent: the colon may already be decoded
ESCAPED_PATH_PATTERN = re.compile(r"^/https(:|%3A)%2F")
ESCAPED_PREFIX_PATTERN = re.compile(r"^https(:|%3A)%2F([^%])")
MALFORMED_ESCAPE_PATTERN = re.compile(r"%(?![0-9A-Fa-f]{2})")

# The runtime collapses consecutive slashes, and may duplicate them
UNESCAPED_PATH_PREFIX = "/https:/"
UNESCAPED_PREFIX_PATTERN = re.compile(r"^https:/+([^/])")


@dataclass(frozen=True)
class DataSource:
    """A resolved source URL and the invocation's combined query string."""

    url: SourceURL
    query: str


def source_from_path(path: str) -> SourceURL:
    """
    Extract the source URL carried in an invocation path.

    Raises:
        InvalidSourceURLError: If the path does not encode a URL.
    """
    if not isinstance(path, str):
        raise InvalidSourceURLError(f"Path is not a string: {path!r}")

    if ESCAPED_PATH_PATTERN.match(path):
        candidate = ESCAPED_PREFIX_PATTERN.sub(r"https://\2", path[1:])
        if MALFORMED_ESCAPE_PATTERN.search(candidate):
            raise InvalidSourceURLError(f"Malformed escape in path: {path!r}")
        try:
            decoded = unquote(candidate, errors="strict")
        except UnicodeDecodeError as e:
            raise InvalidSourceURLError(f"Undecodable path: {path!r}") from e
        return parse_source_url(decoded)

    if not path.startswith(UNESCAPED_PATH_PREFIX):
        raise InvalidSourceURLError(f"Unrecognized path format: {path!r}")

    return parse_source_url(UNESCAPED_PREFIX_PATTERN.sub(r"https://\1", path[1:]))


def resolve_data_source(params: Mapping[str, Any]) -> Optional[DataSource]:
    """
    Analyse invocation params and extract the data source.

    When no combined query string was supplied, one is rebuilt from the
    remaining params. Those params are also appended to the source URL,
    except query-builder (hlx_) keys, and except when an explicit `src`
    was given. A supplied combined query string is instead appended to
    the URL as-is, minus hlx_ keys.

    Args:
        params: The invocation parameters. Not modified.

    Returns:
        The DataSource, or None if no usable source could be determined.
    """
    path = params.get(PATH_PARAM) or ""
    src = params.get(SOURCE_PARAM) or ""

    try:
        url = source_from_path(path) if path else parse_source_url(src)
    except InvalidSourceURLError as e:
        logger.debug(f"Could not resolve data source: {e}")
        return None

    combined_query = params.get(QUERY_PARAM)
    if not combined_query:
        query_params = collect_query_params(params)
        if not src:
            url = url.with_query_params(
                (key, url_param_value(value))
                for key, value in query_params
                if not is_query_builder_key(key)
            )
        query = build_query_string(query_params)
    else:
        url = url.with_query_params(
            (key, value)
            for key, value in parse_qsl(combined_query, keep_blank_values=True)
            if not is_query_builder_key(key)
        )
        query = combined_query

    logger.debug(f"Resolved data source: {url}")
    return DataSource(url=url, query=query)
