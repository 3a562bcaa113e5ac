"""Shared constants for warmtree."""

from dataclasses import dataclass
from typing import List


# Porcelain line prefixes emitted by `git worktree list --porcelain`
WORKTREE_PREFIX = "worktree "
HEAD_PREFIX = "HEAD "
BRANCH_PREFIX = "branch "

# Branch value used when a worktree has no branch checked out
DETACHED_BRANCH = "detached"

# Prefix stripped from fully-qualified local branch refs for display
LOCAL_BRANCH_REF_PREFIX = "refs/heads/"

SHORT_COMMIT_LENGTH = 7


# Menu and prompt text
CREATE_NEW_LABEL = "Create New Worktree"
SELECT_PROMPT = "Select worktree option"
PATH_PROMPT = "Enter worktree directory name"
BRANCH_PROMPT = "Enter branch name"
CREATED_MESSAGE = "✅ Worktree created successfully!"
COMPLETED_MESSAGE = "Warmtree completed successfully!"


@dataclass
class ColumnDefinition:
    """Definition of a table column."""

    key: str
    label: str
    width: int = 0  # 0 means auto-width


# Columns for the non-interactive worktree table
COLUMNS: List[ColumnDefinition] = [
    ColumnDefinition("name", "Name", 24),
    ColumnDefinition("branch", "Branch", 30),
    ColumnDefinition("commit", "Commit", 8),
    ColumnDefinition("path", "Path"),
]
