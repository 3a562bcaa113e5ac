"""Worktree operations service for warmtree."""

from typing import List, Sequence

from warmtree.exceptions import ExternalToolError
from warmtree.logging_config import get_logger
from warmtree.models.worktree import Worktree
from warmtree.services.git.porcelain import parse_worktree_output
from warmtree.services.git.runner import CommandResult, CommandRunner

logger = get_logger(__name__)


class WorktreeService:
    """Service for listing and creating git worktrees."""

    def __init__(self, runner: CommandRunner):
        """Initialize the worktree service.

        Args:
            runner: Executes git subcommands and captures their output
        """
        self.runner = runner

    def _run(self, args: Sequence[str]) -> CommandResult:
        """Run a git subcommand once, raising on a non-zero exit."""
        result = self.runner.run(args)
        if not result.ok:
            operation = " ".join(args[:2])
            logger.debug(f"git {operation} failed with exit code {result.exit_code}")
            raise ExternalToolError(operation, result.stderr, result.exit_code)
        return result

    def list_worktrees(self) -> List[Worktree]:
        """Get all worktrees of the repository.

        Returns:
            Worktrees in the order git reports them

        Raises:
            ExternalToolError: If git fails or cannot be started
        """
        result = self._run(["worktree", "list", "--porcelain"])
        worktrees = parse_worktree_output(result.stdout)
        for wt in worktrees:
            logger.debug(f"  {wt}")
        return worktrees

    def create_worktree(self, path: str, branch: str) -> None:
        """Create a worktree at `path` checking out `branch`.

        Both arguments are passed to `git worktree add` as given.

        Raises:
            ExternalToolError: If git fails or cannot be started
        """
        self._run(["worktree", "add", path, branch])
        logger.info(f"Created worktree at {path} for branch {branch}")
