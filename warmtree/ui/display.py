"""Table display of worktrees for non-interactive use."""
from typing import Optional, Sequence

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from warmtree.constants import COLUMNS
from warmtree.formatters import extract_directory_name, format_branch_name, format_commit
from warmtree.models.worktree import Worktree


class WorktreeDisplay:
    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console()

    def build_table(self, worktrees: Sequence[Worktree]) -> Table:
        """Build a table with one row per worktree."""
        table = Table()

        for col in COLUMNS:
            table.add_column(col.label, min_width=col.width or None)

        # Match COLUMNS order: Name, Branch, Commit, Path
        for worktree in worktrees:
            table.add_row(
                escape(extract_directory_name(worktree.path)),
                escape(format_branch_name(worktree.branch)),
                format_commit(worktree.commit),
                escape(worktree.path),
                style="yellow" if worktree.is_detached else None,
            )

        return table

    def display_worktree_table(self, worktrees: Sequence[Worktree]) -> None:
        """Print the worktree table, or a notice if there is nothing to show."""
        if not worktrees:
            self.console.print("[yellow]No worktrees found[/yellow]")
            return
        self.console.print(self.build_table(worktrees))
