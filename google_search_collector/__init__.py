"""Collect Google Custom Search results for a query and save them as JSON.

Pages through the Custom Search JSON API ten results at a time, pausing
between requests, then prints the ranked results and writes them to a file.
"""

from .cli import main
from .client import CustomSearchClient, SearchApiError, get_client
from .collect import collect
from .models import SearchItem, SearchRun

__all__ = ["main", "collect", "get_client", "CustomSearchClient", "SearchApiError", "SearchItem", "SearchRun"]
