"""Release note generation module."""

from .generator import (
    CategorizedNotes,
    categorize,
    format_entry,
    generate_release_notes,
    has_excluded_label,
    matching_categories,
    render_release_notes,
)
from .resolver import (
    get_merged_prs,
    pr_num_for_commit_from_message,
    require_tags,
)

__all__ = [
    "CategorizedNotes",
    "categorize",
    "format_entry",
    "generate_release_notes",
    "has_excluded_label",
    "matching_categories",
    "render_release_notes",
    "get_merged_prs",
    "pr_num_for_commit_from_message",
    "require_tags",
]
