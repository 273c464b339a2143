"""Paginated collection of search results."""

import math
import time
from datetime import datetime, timezone

from .client import CustomSearchClient, get_client
from .models import DEFAULT_TARGET_COUNT, MAX_RESULTS, PAGE_SIZE, REQUEST_DELAY_SECONDS, SearchItem, SearchRun


def _timestamp() -> str:
    """Current UTC time as ISO-8601 with millisecond precision."""
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def collect(
    query: str,
    location: str,
    target_count: int = DEFAULT_TARGET_COUNT,
    client: CustomSearchClient | None = None,
) -> SearchRun:
    """Collect up to target_count results for "<query> <location>".

    Requests pages of PAGE_SIZE until enough items are collected, the API's
    MAX_RESULTS ceiling is reached, or a page comes back empty, sleeping
    REQUEST_DELAY_SECONDS between requests. Any request failure propagates
    and nothing collected so far is returned.
    """
    if not query or not query.strip():
        raise ValueError("query must be a non-empty string")
    if not location or not location.strip():
        raise ValueError("location must be a non-empty string")
    if target_count < 1:
        raise ValueError(f"target_count must be positive, got {target_count}")

    owns_client = client is None
    client = client or get_client()
    full_query = f"{query} {location}"
    # The API serves at most MAX_RESULTS; asking past that is a 400
    reachable = min(target_count, MAX_RESULTS)
    num_requests = math.ceil(reachable / PAGE_SIZE)
    collected: list[SearchItem] = []

    try:
        for i in range(num_requests):
            start = i * PAGE_SIZE + 1
            end = min(start + PAGE_SIZE - 1, reachable)
            print(f"Fetching results {start}-{end}...", flush=True)

            page = client.search(full_query, start=start, num=PAGE_SIZE)
            items = page.get("items") or []

            if not items:
                print("No more results available\n", flush=True)
                break

            collected.extend(SearchItem.from_api(item) for item in items)
            print(f"Retrieved {len(items)} results\n", flush=True)

            if i < num_requests - 1:
                time.sleep(REQUEST_DELAY_SECONDS)
    finally:
        if owns_client:
            client.close()

    return SearchRun.from_items(query, location, _timestamp(), collected[:target_count])
