"""Worktree label formatting utilities."""

from typing import List, Sequence

from warmtree.constants import (
    CREATE_NEW_LABEL,
    LOCAL_BRANCH_REF_PREFIX,
    SHORT_COMMIT_LENGTH,
)
from warmtree.models.worktree import Worktree


def extract_directory_name(path: str) -> str:
    """
    Get the last segment of a slash-separated path.

    Args:
        path: Worktree path

    Returns:
        Leaf directory name, or the path itself when it has no separator
    """
    return path.split("/")[-1]


def format_branch_name(branch: str) -> str:
    """
    Strip the refs/heads/ prefix from a branch ref.

    Other values ("detached", "feature/test", remote refs) are returned as-is.
    """
    if branch.startswith(LOCAL_BRANCH_REF_PREFIX):
        return branch[len(LOCAL_BRANCH_REF_PREFIX):]
    return branch


def format_worktree_display(worktree: Worktree) -> str:
    """
    Format a worktree as a menu label.

    Example:
        "/repo/feature-branch" on "refs/heads/feature" -> "feature-branch (feature)"
    """
    name = extract_directory_name(worktree.path)
    branch = format_branch_name(worktree.branch)
    return f"{name} ({branch})"


def format_commit(commit: str) -> str:
    """Abbreviate a commit sha for display."""
    return commit[:SHORT_COMMIT_LENGTH]


def create_menu_options(worktrees: Sequence[Worktree]) -> List[str]:
    """Build menu labels: the create action first, then one per worktree."""
    options = [CREATE_NEW_LABEL]
    for worktree in worktrees:
        options.append(format_worktree_display(worktree))
    return options
