"""Interactive worktree menu for warmtree"""

from typing import Optional, Sequence

from rich.console import Console
from rich.markup import escape

from warmtree.constants import (
    BRANCH_PROMPT,
    CREATED_MESSAGE,
    PATH_PROMPT,
    SELECT_PROMPT,
)
from warmtree.formatters import create_menu_options
from warmtree.logging_config import get_logger
from warmtree.models.worktree import Worktree
from warmtree.services.git.worktrees import WorktreeService
from warmtree.ui.prompts import Prompter

logger = get_logger(__name__)


class WorktreeMenu:
    """Lists worktrees as a menu and runs the create or inspect flow."""

    def __init__(self, service: WorktreeService, prompter: Prompter, console: Optional[Console] = None):
        """Initialize the menu.

        Args:
            service: Lists and creates worktrees
            prompter: Asks the user questions
            console: Where results are printed
        """
        self.service = service
        self.prompter = prompter
        self.console = console or Console()

    def run(self) -> None:
        """List worktrees, show the menu and handle the user's choice.

        Git failures are not caught here; they end the session.
        """
        worktrees = self.service.list_worktrees()
        self.display_worktree_menu(worktrees)

    def display_worktree_menu(self, worktrees: Sequence[Worktree]) -> None:
        options = create_menu_options(worktrees)
        selection = self.prompter.select(SELECT_PROMPT, options)
        logger.debug(f"Selected option {selection} of {len(options)}")

        if selection == 0:
            self.handle_create_new_worktree()
        elif 1 <= selection <= len(worktrees):
            self.handle_existing_worktree(worktrees[selection - 1])
        else:
            logger.debug(f"Ignoring out-of-range selection {selection}")

    def handle_create_new_worktree(self) -> bool:
        """Ask for a path and branch, confirm, then create the worktree.

        Returns:
            True if a worktree was created, False if the user declined
        """
        path = self.prompter.text(PATH_PROMPT)
        branch = self.prompter.text(BRANCH_PROMPT)
        return self.confirm_and_create_worktree(path, branch)

    def confirm_and_create_worktree(self, path: str, branch: str) -> bool:
        if not self.prompter.confirm(f"Create worktree '{path}' from branch '{branch}'?"):
            logger.info("Worktree creation cancelled")
            return False

        self.service.create_worktree(path, branch)
        self.console.print(f"[green]{CREATED_MESSAGE}[/green]")
        return True

    def handle_existing_worktree(self, worktree: Worktree) -> None:
        self.console.print(f"Selected worktree: {escape(worktree.path)}", highlight=False)
