"""Shared fixtures: repository factories and an in-memory stand-in for aiohttp.ClientSession."""
import json

import pytest

from cli_toolkit.domain.models import Repository


class FakeResponse:
    """Async context manager mimicking the parts of aiohttp.ClientResponse the client reads."""

    def __init__(self, status: int, body):
        self.status = status
        self._body = body.encode("utf-8") if isinstance(body, str) else body

    async def read(self) -> bytes:
        return self._body

    async def __aenter__(self):
        return self

    async def __aexit__(self, *exc_info):
        return False


class FakeSession:
    """Returns queued responses in order and records every request made."""

    def __init__(self, responses):
        self._responses = list(responses)
        self.requests = []
        self.closed = False

    def get(self, url, params=None, headers=None):
        self.requests.append({"url": url, "params": dict(params or {}), "headers": headers})
        item = self._responses.pop(0)
        if isinstance(item, BaseException):
            raise item
        return item

    async def close(self):
        self.closed = True


def api_repo(name, stars=0, language=None, fork=False, description=None):
    """One repository object as returned by the GitHub REST API."""
    return {
        "name": name,
        "stargazers_count": stars,
        "language": language,
        "description": description,
        "fork": fork,
        "html_url": f"https://github.com/octocat/{name}",
    }


def page(*repos, status=200):
    return FakeResponse(status, json.dumps(list(repos)))


@pytest.fixture
def make_repo():
    def _make(name, stars=0, language=None, fork=False):
        return Repository(
            name=name,
            star_count=stars,
            url=f"https://github.com/octocat/{name}",
            language=language,
            is_fork=fork
        )
    return _make


@pytest.fixture
def fake_session():
    return FakeSession


@pytest.fixture
def fake_response():
    return FakeResponse


@pytest.fixture
def api_page():
    return page


@pytest.fixture
def api_repo_factory():
    return api_repo


@pytest.fixture(autouse=True)
def isolated_environment(monkeypatch, tmp_path):
    """Keep a developer's .env and environment out of the tests."""
    monkeypatch.chdir(tmp_path)
    for name in (
        "GITHUB_API_URL",
        "GITHUB_STATS_MAX_PAGES",
        "GITHUB_REQUEST_TIMEOUT",
        "TODO_FILE",
        "WORD_COUNT_TOP",
        "LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)
