"""
warmtree - An interactive helper for listing and creating git worktrees
"""

from .__version__ import __version__
from .workflow import WorktreeMenu
from .cli.main import main

__all__ = ["WorktreeMenu", "main", "__version__"]
