"""Value types built from GitHub API payloads."""

from datetime import datetime
from typing import Any, Dict, Optional, Tuple

from dateutil import parser as date_parser
from pydantic import BaseModel, ConfigDict


class Commit(BaseModel):
    model_config = ConfigDict(frozen=True)

    sha: str
    message: str = ""

    @classmethod
    def from_api(cls, data: Dict[str, Any]) -> "Commit":
        # compare API nests the message under "commit"
        message = data.get('message')
        if message is None:
            message = (data.get('commit') or {}).get('message', '')
        return cls(sha=data['sha'], message=message or '')


class PullRequest(BaseModel):
    """A pull request as fetched from GitHub."""

    model_config = ConfigDict(frozen=True)

    number: int
    title: str
    user: str
    url: str
    merged_at: Optional[datetime] = None
    labels: Tuple[str, ...] = ()

    @classmethod
    def from_api(cls, data: Dict[str, Any]) -> "PullRequest":
        """Build from a GitHub pull request payload.

        Args:
            data: JSON from GET /repos/{owner}/{repo}/pulls/{number}

        Returns:
            PullRequest instance
        """
        merged_at = data.get('merged_at')
        return cls(
            number=data['number'],
            title=data.get('title') or '',
            user=(data.get('user') or {}).get('login', ''),
            url=data.get('html_url') or '',
            merged_at=date_parser.isoparse(merged_at) if merged_at else None,
            labels=tuple(label['name'] for label in data.get('labels') or []),
        )


class CategorizedEntry(BaseModel):
    """A pull request projected into a changelog category."""

    model_config = ConfigDict(frozen=True)

    number: int
    title: str
    user: str
    url: str
    labels: Tuple[str, ...] = ()

    @classmethod
    def from_pull_request(cls, pr: PullRequest) -> "CategorizedEntry":
        return cls(
            number=pr.number,
            title=pr.title,
            user=pr.user,
            url=pr.url,
            labels=pr.labels,
        )
