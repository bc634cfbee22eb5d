"""Resolve the merged pull requests between two tags."""

import logging
import re
from typing import List

from ..errors import InvalidInput
from ..models import Commit, PullRequest


logger = logging.getLogger(__name__)

PR_REFERENCE_RE = re.compile(r'#(\d+)')


def pr_num_for_commit_from_message(commit_message: str) -> int:
    """Extract the first pull request reference from a commit message.

    Args:
        commit_message: Git commit message

    Returns:
        Pull request number or 0 if not found
    """
    match = PR_REFERENCE_RE.search(commit_message or '')
    if not match:
        return 0
    return int(match.group(1))


def require_tags(from_tag: str, to_tag: str) -> None:
    """Raise InvalidInput unless both range tags are given."""
    if not from_tag or not to_tag:
        raise InvalidInput("--from and --to tags are required")


def get_merged_prs(client, from_tag: str, to_tag: str) -> List[PullRequest]:
    """Get merged pull requests between two tags.

    The result is the set of search hits confirmed merged by fetching each
    pull request; numbers referenced in commit messages are only logged.

    Args:
        client: GitHub client instance
        from_tag: Older tag
        to_tag: Newer tag

    Returns:
        Pull requests, most recently merged first

    Raises:
        InvalidInput: If either tag is missing
        ApiError: If any API call fails
    """
    require_tags(from_tag, to_tag)

    comparison = client.compare(from_tag, to_tag)
    commits = [Commit.from_api(c) for c in comparison.get('commits') or []]
    if not commits:
        logger.warning("No commits found between tags")
        return []

    referenced = []
    for commit in commits:
        number = pr_num_for_commit_from_message(commit.message)
        if number > 0 and number not in referenced:
            referenced.append(number)
    logger.debug(f"{len(commits)} commits reference pull requests {referenced}")

    search = client.search_merged_issues(from_tag, to_tag)

    prs = []
    for item in search.get('items') or []:
        if 'pull_request' not in item:
            continue

        pr = PullRequest.from_api(client.get_pull_request(item['number']))
        if pr.merged_at is None:
            logger.debug(f"Skipping PR #{pr.number}: not merged")
            continue
        prs.append(pr)

    # sorted() is stable with reverse=True, so equal timestamps keep fetch order
    return sorted(prs, key=lambda pr: pr.merged_at, reverse=True)
