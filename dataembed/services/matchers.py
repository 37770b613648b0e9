import re
from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional

from dataembed.source import SourceURL


@dataclass(frozen=True)
class SourceMatcher:
    """A named data source type, recognized by its URL."""

    name: str
    description: str
    pattern: re.Pattern

    def matches(self, url: SourceURL) -> bool:
        return bool(self.pattern.match(url.href))


GOOGLE_SHEETS = SourceMatcher(
    name="google-sheets",
    description="Google Sheets spreadsheet",
    pattern=re.compile(r"^https://docs\.google\.com/spreadsheets/d/"),
)
EXCEL = SourceMatcher(
    name="excel",
    description="Excel workbook on SharePoint",
    pattern=re.compile(r"^https://[^/]+\.sharepoint\.com/"),
)
ONEDRIVE = SourceMatcher(
    name="onedrive",
    description="Excel workbook shared from OneDrive",
    pattern=re.compile(r"^https://(onedrive\.live\.com|1drv\.ms)/"),
)
RUN_QUERY = SourceMatcher(
    name="run-query",
    description="Helix run-query action",
    pattern=re.compile(
        r"^https://adobeioruntime\.net/api/v1/web/helix/helix-services/run-query"
    ),
)


class MatcherRegistry:
    """Registry for data source matchers."""

    _matchers: Dict[str, SourceMatcher] = {}

    @classmethod
    def register(cls, matcher: SourceMatcher) -> None:
        """Register a new matcher."""
        cls._matchers[matcher.name] = matcher

    @classmethod
    def get_matcher(cls, name: str) -> SourceMatcher:
        """Get a matcher by name."""
        if name not in cls._matchers:
            raise ValueError(f"Unknown matcher: {name}")
        return cls._matchers[name]

    @classmethod
    def get_available_matchers(cls) -> Dict[str, SourceMatcher]:
        """Get all available matchers."""
        return cls._matchers.copy()

    @classmethod
    def list_matchers(cls) -> List[dict]:
        """List all matchers with their metadata, in registration order."""
        return [
            {
                "name": matcher.name,
                "description": matcher.description,
                "pattern": matcher.pattern.pattern,
            }
            for matcher in cls._matchers.values()
        ]

    @classmethod
    def find_matcher(
        cls, url: SourceURL, names: Optional[Iterable[str]] = None
    ) -> Optional[SourceMatcher]:
        """Return the first matcher accepting url, limited to names if given."""
        if names is None:
            candidates = list(cls._matchers.values())
        else:
            candidates = [cls.get_matcher(name) for name in names]

        for matcher in candidates:
            if matcher.matches(url):
                return matcher
        return None


# Register all matchers
MatcherRegistry.register(GOOGLE_SHEETS)
MatcherRegistry.register(EXCEL)
MatcherRegistry.register(ONEDRIVE)
MatcherRegistry.register(RUN_QUERY)
