"""GitHub API interface (port) for fetching repository data.

This is the anti-corruption layer that shields the domain from GitHub API specifics.
"""
from abc import ABC, abstractmethod
from typing import List
from cli_toolkit.domain.models import Repository


class IGitHubClient(ABC):
    """Abstract interface for GitHub API operations."""

    @abstractmethod
    async def fetch_repositories(self, username: str) -> List[Repository]:
        """Fetch every repository owned by a user or organization.

        Args:
            username: GitHub user or organization handle

        Returns:
            Repository entities in the order the API returned them

        Raises:
            GitHubApiError: When any page request fails
        """
        pass

    @abstractmethod
    async def close(self) -> None:
        """Close any open connections."""
        pass
