"""GitHub REST API client implementation with sequential page-by-page fetching."""
import asyncio
import json
import logging
from typing import List, Optional
from urllib.parse import quote

import aiohttp

from cli_toolkit.domain.errors import (
    GitHubApiError,
    PaginationLimitError,
    ResponseParseError,
    UserNotFoundError,
)
from cli_toolkit.domain.github_interface import IGitHubClient
from cli_toolkit.domain.models import Repository


logger = logging.getLogger(__name__)


class GitHubRestClient(IGitHubClient):
    """GitHub REST API client listing the repositories of one account.

    Implements the IGitHubClient port, providing an anti-corruption layer
    between the domain and GitHub's API. Pages are requested one at a time
    and nothing is retried: the first failure aborts the whole fetch.
    """

    PAGE_SIZE = 100  # GitHub max is 100
    HEADERS = {
        "User-Agent": "cli-toolkit-github-stats",
        "Accept": "application/vnd.github+json",
    }

    def __init__(
        self,
        api_url: str = "https://api.github.com",
        max_pages: int = 100,
        timeout: float = 30,
        session: Optional[aiohttp.ClientSession] = None
    ):
        """Initialize GitHub client.

        Args:
            api_url: Base URL of the REST API
            max_pages: Upper bound on the number of pages requested per account
            timeout: Total timeout in seconds for a single page request
            session: Existing session to use; the client then leaves closing it to the caller
        """
        self._api_url = api_url.rstrip("/")
        self._max_pages = max_pages
        self._timeout = timeout
        self._session = session
        self._owns_session = session is None

    async def _init_session(self) -> None:
        """Initialize the HTTP session (lazy initialization)."""
        if self._session is None:
            self._session = aiohttp.ClientSession(
                timeout=aiohttp.ClientTimeout(total=self._timeout)
            )

    async def _fetch_page(self, username: str, page: int) -> List[Repository]:
        """Request a single page of the account's repository listing.

        Args:
            username: Account handle
            page: 1-based page number

        Returns:
            Repositories on that page; an empty list marks the end of the listing

        Raises:
            UserNotFoundError: On HTTP 404
            GitHubApiError: On transport failure or any other non-success status
            ResponseParseError: When the body is not a list of repository objects
        """
        await self._init_session()

        url = f"{self._api_url}/users/{quote(username, safe='')}/repos"
        params = {
            "per_page": self.PAGE_SIZE,
            "page": page,
            "sort": "stars",
            "direction": "desc",
        }

        try:
            async with self._session.get(url, params=params, headers=self.HEADERS) as response:
                status = response.status
                raw = await response.read()
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            logger.error(f"Request for page {page} of {username} failed: {e!r}")
            raise GitHubApiError(f"Request failed: {str(e) or type(e).__name__}") from e

        if status == 404:
            raise UserNotFoundError(
                f"User '{username}' not found",
                status=status,
                body=raw.decode("utf-8", errors="replace")
            )

        if not 200 <= status < 300:
            body = raw.decode("utf-8", errors="replace")
            logger.error(f"GitHub API returned {status} for page {page} of {username}")
            raise GitHubApiError(
                f"GitHub API error: {status} {body or 'unknown error'}",
                status=status,
                body=body
            )

        return self._parse_page(raw)

    @staticmethod
    def _field(node: dict, key: str, expected: type, optional: bool = False):
        """Read one field of a repository object, enforcing its JSON type."""
        value = node.get(key)
        if value is None:
            if optional:
                return None
            raise ResponseParseError(f"Failed to parse response: field '{key}' is missing or null")
        # bool is a subclass of int
        if not isinstance(value, expected) or (expected is int and isinstance(value, bool)):
            raise ResponseParseError(
                f"Failed to parse response: field '{key}' has unexpected value {value!r}"
            )
        return value

    @classmethod
    def _parse_page(cls, raw: bytes) -> List[Repository]:
        """Transform one page of GitHub API JSON into domain entities."""
        try:
            nodes = json.loads(raw.decode("utf-8"))
        except (UnicodeDecodeError, ValueError) as e:
            raise ResponseParseError(f"Failed to parse response: {e}") from e

        if not isinstance(nodes, list):
            raise ResponseParseError(
                f"Failed to parse response: expected a JSON array, got {type(nodes).__name__}"
            )

        repositories = []
        for node in nodes:
            if not isinstance(node, dict):
                raise ResponseParseError(
                    f"Failed to parse response: expected a repository object, got {type(node).__name__}"
                )
            try:
                repositories.append(Repository(
                    name=cls._field(node, "name", str),
                    star_count=cls._field(node, "stargazers_count", int),
                    url=cls._field(node, "html_url", str),
                    language=cls._field(node, "language", str, optional=True),
                    description=cls._field(node, "description", str, optional=True),
                    is_fork=cls._field(node, "fork", bool)
                ))
            except ValueError as e:
                raise ResponseParseError(f"Failed to parse response: {e}") from e

        return repositories

    async def fetch_repositories(self, username: str) -> List[Repository]:
        """Fetch every repository of a user or organization.

        Requests successive pages sorted by stars until GitHub returns an
        empty page, accumulating the records in order.

        Args:
            username: GitHub user or organization handle

        Returns:
            Repository domain entities, in API order
        """
        repositories: List[Repository] = []
        page = 1

        logger.info(f"Starting to fetch repositories of {username}")

        while True:
            if page > self._max_pages:
                raise PaginationLimitError(
                    f"Stopped after {self._max_pages} pages without reaching the end "
                    f"of the repository listing for '{username}'"
                )

            batch = await self._fetch_page(username, page)
            if not batch:
                break

            repositories.extend(batch)
            logger.info(f"Fetched page {page}: {len(repositories)} repositories so far")
            page += 1

        logger.info(f"Successfully fetched {len(repositories)} repositories of {username}")
        return repositories

    async def close(self) -> None:
        """Close the HTTP session if this client created it."""
        if self._session is not None and self._owns_session:
            await self._session.close()
        self._session = None
