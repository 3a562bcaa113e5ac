"""Process execution for git commands."""

import os
from dataclasses import dataclass
from typing import Protocol, Sequence

import git

from warmtree.exceptions import ExternalToolError
from warmtree.logging_config import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class CommandResult:
    """Captured outcome of a finished command.

    GitPython drops one trailing newline from stderr; stdout is kept as git
    wrote it.
    """

    exit_code: int
    stdout: str
    stderr: str

    @property
    def ok(self) -> bool:
        return self.exit_code == 0


class CommandRunner(Protocol):
    """Anything that can run a git subcommand and capture its output."""

    def run(self, args: Sequence[str]) -> CommandResult:
        ...


class GitRunner:
    """Runs git subcommands through GitPython.

    Non-zero exits are returned as results rather than raised, so callers
    decide what a failure means. Only a process that never started raises.
    """

    def __init__(self, repo_path: str = ".", git_executable: str = "git"):
        """Initialize the runner.

        Args:
            repo_path: Directory git runs in
            git_executable: Name or path of the git binary
        """
        self.repo_path = repo_path
        self.git_executable = git_executable

    def _get_git(self) -> git.Git:
        """Get a fresh git.Git command wrapper bound to the repo directory."""
        return git.Git(self.repo_path)

    def run(self, args: Sequence[str]) -> CommandResult:
        """Run `git <args>` and capture exit code, stdout and stderr.

        Raises:
            ExternalToolError: If the git process could not be spawned.
        """
        # GitPython silently falls back to the current directory for a cwd it
        # cannot enter, which would run git against the wrong repository.
        if not os.path.isdir(self.repo_path) or not os.access(self.repo_path, os.X_OK):
            logger.debug(f"Cannot enter {self.repo_path}")
            raise ExternalToolError(" ".join(args), f"Not a directory: {self.repo_path}")

        command = [self.git_executable, *args]
        logger.debug(f"Running: {' '.join(command)} (cwd={self.repo_path})")
        try:
            status, stdout, stderr = self._get_git().execute(
                command,
                with_extended_output=True,
                with_exceptions=False,
                strip_newline_in_stdout=False,
            )
        except git.exc.GitCommandNotFound as e:
            logger.debug(f"Could not start git: {e}")
            raise ExternalToolError(" ".join(args), f"Could not run '{self.git_executable}': {e}")
        except OSError as e:
            logger.debug(f"Could not start git: {e}")
            raise ExternalToolError(" ".join(args), str(e))

        logger.debug(f"Exit code {status}")
        return CommandResult(exit_code=status, stdout=stdout, stderr=stderr)
