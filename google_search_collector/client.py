"""Google Custom Search JSON API client using httpx."""

import logging

import httpx

from .models import PAGE_SIZE
from .settings import get_settings

API_URL = "https://www.googleapis.com/customsearch/v1"

# Results are restricted to Hong Kong
COUNTRY_CODE = "hk"
COUNTRY_RESTRICT = "countryHK"

# httpx logs full request URLs at INFO, which would include the API key
logging.getLogger("httpx").setLevel(logging.WARNING)
logging.getLogger("httpcore").setLevel(logging.WARNING)

_BAD_REQUEST_TIPS = (
    "Check if your API key is correct",
    "Check if your Search Engine ID is correct",
    "Make sure Custom Search API is enabled in Google Cloud Console",
)
_QUOTA_HINT = "Rate limit exceeded. You may have hit your daily quota."


class SearchApiError(Exception):
    """Non-2xx response from the search API."""

    def __init__(self, status: int, message: str):
        super().__init__(f"Search API error {status}: {message}")
        self.status = status
        self.message = message

    @property
    def hint(self) -> str | None:
        """Human-readable diagnosis for the status, if there is one."""
        if self.status == 400:
            return "Tips:\n" + "\n".join(f"- {tip}" for tip in _BAD_REQUEST_TIPS)
        if self.status == 429:
            return _QUOTA_HINT
        return None


def _error_message(resp: httpx.Response) -> str:
    try:
        body = resp.json()
    except ValueError:
        return "Unknown error"
    error = body.get("error") if isinstance(body, dict) else None
    if isinstance(error, dict) and error.get("message"):
        return error["message"]
    return "Unknown error"


class CustomSearchClient:
    """Thin client for the Custom Search endpoint. No retries, no caching."""

    def __init__(self, api_key: str, search_engine_id: str, timeout: float = 30.0):
        self._api_key = api_key
        self._search_engine_id = search_engine_id
        self._client = httpx.Client(timeout=timeout)

    def search(self, q: str, start: int = 1, num: int = PAGE_SIZE) -> dict:
        """Fetch one page of results.

        Args:
            q: Full query string, location included
            start: 1-based index of the first result
            num: Page size (at most 10)

        Returns:
            Decoded JSON body. Pages past the end of results have no "items" key.
        """
        params = {
            "key": self._api_key,
            "cx": self._search_engine_id,
            "q": q,
            "start": start,
            "num": num,
            "gl": COUNTRY_CODE,
            "cr": COUNTRY_RESTRICT,
        }
        resp = self._client.get(API_URL, params=params)

        if not 200 <= resp.status_code < 300:
            raise SearchApiError(resp.status_code, _error_message(resp))

        return resp.json() if resp.content else {}

    def close(self):
        self._client.close()


def get_client() -> CustomSearchClient:
    """Create a client configured from settings."""
    settings = get_settings()
    return CustomSearchClient(
        settings.google_api_key,
        settings.google_search_engine_id,
        timeout=settings.request_timeout,
    )
