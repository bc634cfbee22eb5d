"""GitHub API access."""

from .client import GitHubClient

__all__ = ["GitHubClient"]
