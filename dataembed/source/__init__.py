"""Source package — data source URL resolution from invocation params."""

from .data_source import DataSource, resolve_data_source
from .url import InvalidSourceURLError, SourceURL, parse_source_url

__all__ = [
    "DataSource",
    "InvalidSourceURLError",
    "SourceURL",
    "parse_source_url",
    "resolve_data_source",
]
