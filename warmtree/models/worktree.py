"""Worktree data models."""

from dataclasses import dataclass

from warmtree.constants import DETACHED_BRANCH


@dataclass(frozen=True)
class Worktree:
    """A git worktree as reported by `git worktree list --porcelain`."""

    path: str
    branch: str  # Fully-qualified ref, or "detached"
    commit: str  # HEAD sha, empty if git did not report one

    @property
    def is_detached(self) -> bool:
        """True if no branch is checked out in this worktree."""
        return self.branch == DETACHED_BRANCH

    def __str__(self) -> str:
        """String representation of worktree."""
        return f"{self.branch} @ {self.path}"
