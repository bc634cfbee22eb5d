"""GitHub REST API client using requests."""

import logging
from typing import Any, Dict, Optional
from urllib.parse import quote

import requests

from ..config import Config
from ..errors import ApiError, NetworkTimeout


DEFAULT_TIMEOUT = 30
SEARCH_PAGE_SIZE = 100


class GitHubClient:
    """Read-only wrapper for the parts of the GitHub API release notes need."""

    def __init__(self, config: Config, logger: Optional[logging.Logger] = None,
                 session: Optional[requests.Session] = None, timeout: float = DEFAULT_TIMEOUT):
        """Initialize GitHub client.

        Args:
            config: Configuration object containing token and repository
            logger: Logger instance
            session: Optional requests session, created when omitted
            timeout: Seconds to wait for each response
        """
        self.config = config
        self.logger = logger or logging.getLogger(__name__)
        self.timeout = timeout

        self.session = session or requests.Session()
        self.session.headers.update({
            'Authorization': f"Bearer {config.github_token}",
            'Accept': 'application/vnd.github+json',
            'User-Agent': 'labelnotes',
        })

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        self.close()

    def close(self) -> None:
        self.session.close()

    @property
    def _repo_path(self) -> str:
        return f"/repos/{quote(self.config.github_owner, safe='')}/{quote(self.config.github_repo, safe='')}"

    def _get(self, path: str, params: Optional[Dict[str, Any]] = None) -> Any:
        """Issue a GET request and return the parsed JSON body.

        Raises:
            NetworkTimeout: If no response arrives within the timeout
            ApiError: On transport failure or any non-2xx status
        """
        url = f"{self.config.github_api_url}{path}"
        self.logger.debug(f"GET {url} params={params}")

        try:
            response = self.session.get(url, params=params, timeout=self.timeout)
        except requests.Timeout as e:
            raise NetworkTimeout(f"GitHub API request timed out after {self.timeout}s: {url}") from e
        except requests.RequestException as e:
            raise ApiError(f"GitHub API request failed: {e}") from e

        if not 200 <= response.status_code < 300:
            raise ApiError(
                f"GitHub API error {response.status_code}: {response.text}",
                status_code=response.status_code,
                body=response.text,
            )

        try:
            return response.json()
        except ValueError as e:
            raise ApiError(
                f"GitHub API returned invalid JSON for {url}",
                status_code=response.status_code,
                body=response.text,
            ) from e

    def compare(self, base: str, head: str) -> Dict[str, Any]:
        """Compare two refs.

        Args:
            base: Older tag or ref
            head: Newer tag or ref

        Returns:
            Comparison data including the ``commits`` list
        """
        return self._get(f"{self._repo_path}/compare/{quote(base, safe='')}...{quote(head, safe='')}")

    def search_merged_issues(self, base: str, head: str) -> Dict[str, Any]:
        """Search merged issues and pull requests between two tags.

        Args:
            base: Older tag
            head: Newer tag

        Returns:
            Search result data including the ``items`` list
        """
        query = f"repo:{self.config.repository} is:merged base:{base} merged:{base}..{head}"
        return self._get('/search/issues', params={'q': query, 'per_page': SEARCH_PAGE_SIZE})

    def get_pull_request(self, number: int) -> Dict[str, Any]:
        """Get a pull request by number.

        Args:
            number: Pull request number

        Returns:
            Pull request data
        """
        return self._get(f"{self._repo_path}/pulls/{number}")
