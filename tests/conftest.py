"""
Pytest fixtures shared by the labelnotes tests.

Usage:
    def test_something(pr_factory, release_config):
        pr = pr_factory(number=1, labels=['bug'])
        ...
"""

from datetime import datetime, timedelta, timezone
from typing import Callable, Dict, List, Optional

import pytest

from labelnotes.config import CategoryRule, Config, ReleaseConfig
from labelnotes.errors import ApiError
from labelnotes.models import PullRequest

BASE_TIME = datetime(2024, 1, 1, tzinfo=timezone.utc)


# ============================================================================
# Config Fixtures
# ============================================================================


@pytest.fixture
def config() -> Config:
    return Config(github_token='test-token', github_owner='acme', github_repo='widgets')


@pytest.fixture
def release_config() -> ReleaseConfig:
    """Features/Fixes categories with a skip-changelog exclusion."""
    return ReleaseConfig(
        categories=[
            CategoryRule(title='Features', labels=['enhancement']),
            CategoryRule(title='Fixes', labels=['bug']),
        ],
        exclude_labels=['skip-changelog'],
    )


# ============================================================================
# Pull Request Factories
# ============================================================================


@pytest.fixture
def pr_factory() -> Callable[..., PullRequest]:
    def _make(number: int, labels: Optional[List[str]] = None, title: Optional[str] = None,
              user: str = 'octocat', merged_at: Optional[datetime] = BASE_TIME) -> PullRequest:
        return PullRequest(
            number=number,
            title=title or f'Change {number}',
            user=user,
            url=f'https://github.com/acme/widgets/pull/{number}',
            merged_at=merged_at,
            labels=tuple(labels or ()),
        )

    return _make


def pr_payload(number: int, labels: Optional[List[str]] = None, merged_at: Optional[str] = None,
               title: Optional[str] = None) -> Dict:
    """Pull request JSON shaped like GET /repos/{owner}/{repo}/pulls/{number}."""
    return {
        'number': number,
        'title': title or f'Change {number}',
        'user': {'login': 'octocat'},
        'html_url': f'https://github.com/acme/widgets/pull/{number}',
        'merged_at': merged_at,
        'labels': [{'name': name} for name in labels or []],
    }


def merged_at(hours: int) -> str:
    return (BASE_TIME + timedelta(hours=hours)).strftime('%Y-%m-%dT%H:%M:%SZ')


# ============================================================================
# In-memory GitHub client
# ============================================================================


class FakeGitHubClient:
    """Serves canned compare/search/pull responses and records calls."""

    def __init__(self, commits=None, search_items=None, pulls=None, compare_error=None):
        self.commits = commits or []
        self.search_items = search_items or []
        self.pulls = pulls or {}
        self.compare_error = compare_error
        self.fetched: List[int] = []
        self.searched = False
        self.closed = False

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        self.closed = True

    def compare(self, base, head):
        if self.compare_error:
            raise self.compare_error
        return {'commits': self.commits}

    def search_merged_issues(self, base, head):
        self.searched = True
        return {'items': self.search_items}

    def get_pull_request(self, number):
        self.fetched.append(number)
        if number not in self.pulls:
            raise ApiError(f'GitHub API error 404: pull {number}', status_code=404, body='Not Found')
        return self.pulls[number]


@pytest.fixture
def fake_client_factory() -> Callable[..., FakeGitHubClient]:
    return FakeGitHubClient
