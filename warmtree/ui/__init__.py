"""Terminal user interface components for warmtree."""

from .prompts import Prompter, RichPrompter
from .display import WorktreeDisplay

__all__ = ["Prompter", "RichPrompter", "WorktreeDisplay"]
