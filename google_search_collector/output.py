"""Console rendering and JSON serialization of a search run."""

import json
import sys
from pathlib import Path
from typing import TextIO

from .models import SearchRun

BANNER = "═" * 63
RULE = "─" * 60


def run_to_dict(run: SearchRun) -> dict:
    return {
        "query": run.query,
        "location": run.location,
        "timestamp": run.timestamp,
        "totalResults": run.total_results,
        "results": [
            {
                "rank": r.rank,
                "title": r.item.title,
                "url": r.item.link,
                "snippet": r.item.snippet,
                "displayLink": r.item.display_link,
            }
            for r in run.results
        ],
    }


def render_results(run: SearchRun, stream: TextIO | None = None) -> None:
    """Print a numbered listing of the run's results."""
    out = stream or sys.stdout
    out.write(f"{BANNER}\n")
    out.write(f"SEARCH RESULTS ({run.total_results} total)\n")
    out.write(f"{BANNER}\n\n")

    for r in run.results:
        out.write(f"\n{r.rank}. {r.item.title}\n")
        out.write(f"   URL: {r.item.link}\n")
        out.write(f"   Snippet: {r.item.snippet}\n")
        out.write(f"   {RULE}\n")
    out.flush()


def write_results(run: SearchRun, path: Path) -> Path:
    """Write the run as indented JSON, creating parent directories."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        json.dump(run_to_dict(run), f, indent=2, ensure_ascii=False)
    return path
