"""E2E tests for the google-search CLI.

No mocks. Real Custom Search API.
Skip if GOOGLE_API_KEY is not set.
"""

import json
import os
import subprocess
import sys
from pathlib import Path

import pytest

pytestmark = pytest.mark.skipif(
    not (os.environ.get("GOOGLE_API_KEY") and os.environ.get("GOOGLE_SEARCH_ENGINE_ID")),
    reason="GOOGLE_API_KEY and GOOGLE_SEARCH_ENGINE_ID required for E2E tests",
)

PROJECT_ROOT = Path(__file__).resolve().parents[2]


def _run_cli(*args, timeout=120):
    """Run the collector as a module and return CompletedProcess."""
    cmd = [sys.executable, "-m", "google_search_collector", *args]
    return subprocess.run(
        cmd, capture_output=True, text=True, timeout=timeout, cwd=PROJECT_ROOT,
    )


def test_collects_small_run(tmp_path):
    """A 10-result run writes a ranked JSON file."""
    output = tmp_path / "search-results.json"
    result = _run_cli("--count", "10", "-o", str(output))
    assert result.returncode == 0, f"stderr: {result.stderr}\nstdout: {result.stdout}"

    data = json.loads(output.read_text(encoding="utf-8"))
    assert 0 < data["totalResults"] <= 10
    assert data["totalResults"] == len(data["results"])
    assert [r["rank"] for r in data["results"]] == list(range(1, data["totalResults"] + 1))


def test_bad_key_exits_1(tmp_path):
    """An invalid key fails the run and writes nothing."""
    output = tmp_path / "out.json"
    env = {**os.environ, "GOOGLE_API_KEY": "invalid-key"}
    result = subprocess.run(
        [sys.executable, "-m", "google_search_collector", "--count", "10", "-o", str(output)],
        capture_output=True, text=True, timeout=120, cwd=PROJECT_ROOT, env=env,
    )
    assert result.returncode == 1
    assert "Search failed" in result.stderr
    assert not output.exists()
