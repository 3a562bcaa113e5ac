"""Git-related services for warmtree."""

from .runner import CommandResult, CommandRunner, GitRunner
from .porcelain import parse_worktree_output
from .worktrees import WorktreeService

__all__ = [
    "CommandResult",
    "CommandRunner",
    "GitRunner",
    "parse_worktree_output",
    "WorktreeService",
]
