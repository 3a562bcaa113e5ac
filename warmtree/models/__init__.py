"""Data models for warmtree."""

from .worktree import Worktree

__all__ = ["Worktree"]
