"""Data models and constants for search collection."""

from dataclasses import dataclass

PAGE_SIZE = 10  # Custom Search API hard limit per request
MAX_RESULTS = 100  # API refuses start + num > 101
DEFAULT_TARGET_COUNT = 30
REQUEST_DELAY_SECONDS = 1.0

DEFAULT_QUERY = "Interior Design Company"
DEFAULT_LOCATION = "Hong Kong"
DEFAULT_OUTPUT_PATH = "search-results.json"


@dataclass(frozen=True)
class SearchItem:
    """A single result as returned by the search API."""

    title: str
    link: str
    snippet: str
    display_link: str

    @classmethod
    def from_api(cls, item: dict) -> "SearchItem":
        return cls(
            title=item.get("title") or "",
            link=item.get("link") or "",
            snippet=item.get("snippet") or "",
            display_link=item.get("displayLink") or "",
        )


@dataclass(frozen=True)
class RankedResult:
    rank: int
    item: SearchItem


@dataclass(frozen=True)
class SearchRun:
    """One execution of the collector: the query and its ranked results.

    Ranks are assigned from list position when the run is built, so they are
    always 1..n with no gaps.
    """

    query: str
    location: str
    timestamp: str  # ISO-8601, UTC
    results: tuple[RankedResult, ...] = ()

    @classmethod
    def from_items(cls, query: str, location: str, timestamp: str, items: list[SearchItem]) -> "SearchRun":
        ranked = tuple(RankedResult(rank=i, item=item) for i, item in enumerate(items, start=1))
        return cls(query=query, location=location, timestamp=timestamp, results=ranked)

    @property
    def total_results(self) -> int:
        return len(self.results)
