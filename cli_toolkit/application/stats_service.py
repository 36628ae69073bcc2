"""Repository statistics: the fetch, filter, sort and aggregate pipeline."""
import logging
from collections import Counter
from typing import Iterable, List, Optional, Tuple
from cli_toolkit.domain.github_interface import IGitHubClient
from cli_toolkit.domain.models import Repository, RepositoryStats


logger = logging.getLogger(__name__)

SORT_KEYS = ("stars", "name")
DEFAULT_SORT_KEY = "stars"
TOP_LANGUAGE_COUNT = 5


def normalize(text: str) -> str:
    """Case-fold used for every case-insensitive comparison."""
    return text.lower()


def resolve_sort_key(sort_by: Optional[str]) -> str:
    """Map a requested sort key onto a supported one; unknown keys sort by stars."""
    if sort_by is not None and normalize(sort_by) in SORT_KEYS:
        return normalize(sort_by)
    return DEFAULT_SORT_KEY


def drop_forks(repositories: Iterable[Repository]) -> List[Repository]:
    return [repo for repo in repositories if not repo.is_fork]


def filter_by_language(repositories: Iterable[Repository], language: str) -> List[Repository]:
    """Keep repositories whose language matches, ignoring case.

    Repositories without a detected language never match.
    """
    wanted = normalize(language)
    return [
        repo for repo in repositories
        if repo.language is not None and normalize(repo.language) == wanted
    ]


def sort_repositories(repositories: Iterable[Repository], sort_by: str) -> List[Repository]:
    """Sort by stars (descending) or name (ascending, case-insensitive).

    Python's sort is stable, so equal keys keep their input order.
    """
    if resolve_sort_key(sort_by) == "name":
        return sorted(repositories, key=lambda repo: normalize(repo.name))
    return sorted(repositories, key=lambda repo: repo.star_count, reverse=True)


def top_languages(repositories: Iterable[Repository], count: int = TOP_LANGUAGE_COUNT) -> List[Tuple[str, int]]:
    """Most common known languages, by occurrence count descending.

    Ties keep the order in which languages were first seen.
    """
    counts = Counter(repo.language for repo in repositories if repo.language is not None)
    return counts.most_common(count)


def most_starred(repositories: List[Repository]) -> Optional[Repository]:
    """Repository with the highest star count; the first one wins a tie."""
    if not repositories:
        return None
    return max(repositories, key=lambda repo: repo.star_count)


def build_stats(
    repositories: Iterable[Repository],
    limit: int,
    sort_by: str = DEFAULT_SORT_KEY,
    language: Optional[str] = None
) -> RepositoryStats:
    """Run the pipeline over a full fetch result.

    Aggregates are computed over every repository left after fork removal
    and language filtering; ``limit`` only affects what is displayed.

    Args:
        repositories: Records as returned by the fetcher
        limit: Maximum number of repositories to display
        sort_by: "stars" or "name"; anything else sorts by stars
        language: Optional case-insensitive language filter

    Returns:
        RepositoryStats with the display slice and the aggregates
    """
    if limit < 0:
        raise ValueError(f"limit must not be negative, got {limit}")

    filtered = drop_forks(repositories)
    if language is not None:
        filtered = filter_by_language(filtered, language)

    sort_key = resolve_sort_key(sort_by)
    ordered = sort_repositories(filtered, sort_key)

    return RepositoryStats(
        displayed=ordered[:limit],
        filtered_count=len(ordered),
        total_stars=sum(repo.star_count for repo in ordered),
        top_languages=top_languages(filtered),
        most_starred=most_starred(filtered),
        sort_key=sort_key,
        language=language
    )


class StatsService:
    """Application service producing repository statistics for one account.

    Orchestrates the GitHub client and the pipeline; owns no state between calls.
    """

    def __init__(self, github_client: IGitHubClient):
        """Initialize stats service.

        Args:
            github_client: GitHub API client implementation
        """
        self._github_client = github_client

    async def collect(
        self,
        username: str,
        limit: int,
        sort_by: str = DEFAULT_SORT_KEY,
        language: Optional[str] = None
    ) -> RepositoryStats:
        """Fetch an account's repositories and run the pipeline over them."""
        repositories = await self._github_client.fetch_repositories(username)

        stats = build_stats(repositories, limit, sort_by=sort_by, language=language)

        logger.info(
            f"{username}: {len(repositories)} fetched, {stats.filtered_count} after filtering, "
            f"{len(stats.displayed)} displayed"
        )
        return stats

    async def close(self) -> None:
        """Close connections."""
        await self._github_client.close()
