"""CLI entry point for search collection."""

import argparse
import sys
from pathlib import Path

import httpx

from .client import SearchApiError
from .models import DEFAULT_LOCATION, DEFAULT_OUTPUT_PATH, DEFAULT_QUERY, DEFAULT_TARGET_COUNT


def _log(msg: str):
    sys.stderr.write(f"{msg}\n")
    sys.stderr.flush()


def _positive_int(value: str) -> int:
    try:
        n = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid int value: {value!r}") from None
    if n < 1:
        raise argparse.ArgumentTypeError(f"must be a positive integer, got {n}")
    return n


def _report_failure(e: Exception):
    _log("Error fetching search results:")
    if isinstance(e, SearchApiError):
        _log(f"Status: {e.status}")
        _log(f"Message: {e.message}")
        if e.hint:
            _log(f"\n{e.hint}")
    else:
        _log(str(e) or type(e).__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Collect Google Custom Search results for a query",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "query",
        nargs="?",
        default=DEFAULT_QUERY,
        help=f'Search query (default: "{DEFAULT_QUERY}")',
    )
    parser.add_argument(
        "--location",
        default=DEFAULT_LOCATION,
        help=f'Location appended to the query (default: "{DEFAULT_LOCATION}")',
    )
    parser.add_argument(
        "--count",
        type=_positive_int,
        default=DEFAULT_TARGET_COUNT,
        help=f"Number of results to collect (default: {DEFAULT_TARGET_COUNT})",
    )
    parser.add_argument(
        "-o",
        "--output",
        type=Path,
        default=Path(DEFAULT_OUTPUT_PATH),
        help=f"Output JSON file (default: {DEFAULT_OUTPUT_PATH})",
    )
    return parser


def main(argv: list[str] | None = None):
    args = build_parser().parse_args(argv)

    from .client import get_client
    from .collect import collect
    from .output import render_results, write_results

    print("Starting Google Search...")
    print(f'Query: "{args.query}"')
    print(f"Location: {args.location}")
    print(f"Fetching {args.count} results...\n", flush=True)

    client = get_client()
    try:
        run = collect(args.query, args.location, args.count, client=client)
        render_results(run)
        path = write_results(run, args.output)
    except (SearchApiError, httpx.HTTPError, ValueError, OSError) as e:
        _report_failure(e)
        _log("\nSearch failed")
        sys.exit(1)
    finally:
        client.close()

    print(f"\n\nResults saved to: {path}")
    print("\nSearch completed successfully!", flush=True)


if __name__ == "__main__":
    main()
