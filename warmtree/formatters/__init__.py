"""Formatting utilities for warmtree.

- worktree: menu labels and table cells for worktrees
"""

from .worktree import (
    extract_directory_name,
    format_branch_name,
    format_worktree_display,
    format_commit,
    create_menu_options,
)

__all__ = [
    "extract_directory_name",
    "format_branch_name",
    "format_worktree_display",
    "format_commit",
    "create_menu_options",
]
