"""Release note generation logic."""

import logging
from collections import OrderedDict
from typing import Dict, Iterable, List

from ..config import ReleaseConfig
from ..models import CategorizedEntry, PullRequest


logger = logging.getLogger(__name__)


class CategorizedNotes:
    """Pull requests grouped by category title, in release config order."""

    def __init__(self, titles: Iterable[str]):
        self.categories: Dict[str, List[CategorizedEntry]] = OrderedDict(
            (title, []) for title in titles
        )
        self.uncategorized: List[PullRequest] = []
        self.excluded = 0

    def add(self, title: str, entry: CategorizedEntry) -> None:
        self.categories[title].append(entry)

    def deduplicate(self) -> None:
        """Keep the first entry per pull request number within each category."""
        for title, entries in self.categories.items():
            seen = set()
            unique = []
            for entry in entries:
                if entry.number not in seen:
                    seen.add(entry.number)
                    unique.append(entry)
            self.categories[title] = unique

    def __getitem__(self, title: str) -> List[CategorizedEntry]:
        return self.categories[title]

    def __iter__(self):
        return iter(self.categories.items())


def has_excluded_label(labels: Iterable[str], exclude_labels: Iterable[str]) -> bool:
    """Check if any label is in the exclusion list.

    Args:
        labels: Pull request label names
        exclude_labels: Labels that remove a pull request from release notes

    Returns:
        True if pull request should be excluded from release notes
    """
    return not set(labels).isdisjoint(exclude_labels)


def matching_categories(labels: Iterable[str], release_config: ReleaseConfig) -> List[str]:
    """Titles of every category whose labels intersect the given labels."""
    labels = set(labels)
    titles = []
    for rule in release_config.categories:
        if not labels.isdisjoint(rule.labels) and rule.title not in titles:
            titles.append(rule.title)
    return titles


def categorize(prs: Iterable[PullRequest], release_config: ReleaseConfig) -> CategorizedNotes:
    """Group pull requests into release config categories.

    A pull request carrying an excluded label is dropped. One matching
    several categories is added to each of them, and one matching none is
    dropped with a warning.

    Args:
        prs: Pull requests in the order they should be listed
        release_config: Category rules and exclusion labels

    Returns:
        Deduplicated categorized notes
    """
    notes = CategorizedNotes(rule.title for rule in release_config.categories)

    for pr in prs:
        if has_excluded_label(pr.labels, release_config.exclude_labels):
            logger.debug(f"PR #{pr.number} excluded by label")
            notes.excluded += 1
            continue

        titles = matching_categories(pr.labels, release_config)
        if not titles:
            logger.warning(f'PR #{pr.number} ("{pr.title}") has no matching category labels')
            notes.uncategorized.append(pr)
            continue

        entry = CategorizedEntry.from_pull_request(pr)
        for title in titles:
            notes.add(title, entry)

    notes.deduplicate()
    return notes


def format_entry(entry: CategorizedEntry) -> str:
    label_list = f" ({', '.join(entry.labels)})" if entry.labels else ''
    return f"- [#{entry.number}]({entry.url}): {entry.title} (@{entry.user}){label_list}"


def render_release_notes(notes: CategorizedNotes) -> str:
    """Format categorized notes as markdown.

    Args:
        notes: Output of categorize()

    Returns:
        Markdown with one level-2 section per non-empty category
    """
    sections = []
    for title, entries in notes:
        if not entries:
            continue
        lines = [f"## {title}", ""]
        lines.extend(format_entry(entry) for entry in entries)
        sections.append('\n'.join(lines))

    return '\n\n'.join(sections).strip()


def generate_release_notes(prs: Iterable[PullRequest], release_config: ReleaseConfig) -> str:
    """Generate formatted release notes from pull requests."""
    return render_release_notes(categorize(prs, release_config))
