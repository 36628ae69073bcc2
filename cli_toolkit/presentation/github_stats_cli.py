"""Fetch and display GitHub repository statistics for a user or organization.

Usage:
  github-stats USERNAME [--limit N] [--sort stars|name] [--language LANG] [-v]
"""
import argparse
import asyncio
import logging
import sys
from typing import List, Optional, TextIO

from cli_toolkit.application.stats_service import DEFAULT_SORT_KEY, StatsService
from cli_toolkit.config import load_settings
from cli_toolkit.domain.errors import ToolkitError
from cli_toolkit.domain.models import RepositoryStats
from cli_toolkit.infrastructure.github_client import GitHubRestClient
from cli_toolkit.logging_setup import configure_logging


logger = logging.getLogger(__name__)

NO_VALUE = "(none)"


def _non_negative_int(value: str) -> int:
    number = int(value)
    if number < 0:
        raise argparse.ArgumentTypeError(f"must not be negative: {value}")
    return number


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="github-stats",
        description="Fetch and display GitHub repository statistics for a user or organization"
    )
    parser.add_argument("username", help="GitHub username or organization")
    parser.add_argument(
        "-l", "--limit",
        type=_non_negative_int,
        default=10,
        help="Maximum number of repos to display (default: 10)"
    )
    parser.add_argument(
        "-s", "--sort",
        default=DEFAULT_SORT_KEY,
        help="Sort by: stars or name (default: stars)"
    )
    parser.add_argument(
        "--language",
        default=None,
        help="Filter by programming language (case-insensitive)"
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log progress to stderr")
    return parser.parse_args(argv)


def render_stats(username: str, stats: RepositoryStats, out: Optional[TextIO] = None) -> None:
    """Print the header, the ranked table and the summary block."""
    out = out or sys.stdout

    print(f"\n{username}", file=out)
    print("=" * len(username), file=out)

    if stats.is_empty:
        if stats.language:
            print(f"No repositories found for language '{stats.language}'.", file=out)
        else:
            print("No repositories found.", file=out)
        return

    print(
        f"Public repos: {stats.filtered_count} "
        f"(showing top {len(stats.displayed)} by {stats.sort_key})\n",
        file=out
    )

    print(f"  {'Repository':<28} {'Stars':<10} {'Language':<15}", file=out)
    print("  " + "-" * 53, file=out)
    for repo in stats.displayed:
        print(f"  {repo.name:<28} {repo.star_count:<10} {repo.language or NO_VALUE:<15}", file=out)

    render_summary(stats, out)


def render_summary(stats: RepositoryStats, out: TextIO) -> None:
    languages = ", ".join(f"{language} ({count})" for language, count in stats.top_languages)

    print("\nSummary:", file=out)
    print(f"  Total stars:  {stats.total_stars}", file=out)
    if languages:
        print(f"  Languages:    {languages}", file=out)
    if stats.most_starred is not None:
        top = stats.most_starred
        print(f"  Most starred: {top.name} ({top.star_count} stars)", file=out)


async def _collect(client: GitHubRestClient, args: argparse.Namespace) -> RepositoryStats:
    service = StatsService(github_client=client)
    try:
        return await service.collect(
            args.username,
            limit=args.limit,
            sort_by=args.sort,
            language=args.language
        )
    finally:
        await service.close()


def main(argv: Optional[List[str]] = None) -> int:
    """Run the tool and return the process exit code."""
    args = parse_args(argv)

    try:
        settings = load_settings()
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    configure_logging(settings.log_level, verbose=args.verbose)

    print(f"Fetching repos for {args.username}...")

    client = GitHubRestClient(
        api_url=settings.github_api_url,
        max_pages=settings.max_pages,
        timeout=settings.request_timeout
    )

    try:
        stats = asyncio.run(_collect(client, args))
    except ToolkitError as e:
        logger.debug(f"Fetch for {args.username} failed", exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return 1

    render_stats(args.username, stats)
    return 0


def run() -> None:
    sys.exit(main())


if __name__ == "__main__":
    run()
