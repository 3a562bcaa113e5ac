"""Pytest fixtures for warmtree tests"""
import io
import tempfile
from pathlib import Path
from typing import List, Sequence

import pytest
import git
from rich.console import Console

from warmtree.models.worktree import Worktree
from warmtree.services.git.runner import CommandResult


TWO_WORKTREES_OUTPUT = (
    "worktree /repo\nHEAD abc123\nbranch refs/heads/main\n\n"
    "worktree /repo/feature\nHEAD def456\nbranch refs/heads/feature\n\n"
)


class FakeRunner:
    """CommandRunner that replays canned results and records calls."""

    def __init__(self, *results: CommandResult):
        self.results = list(results)
        self.calls: List[List[str]] = []

    def run(self, args: Sequence[str]) -> CommandResult:
        self.calls.append(list(args))
        return self.results.pop(0)


class ScriptedPrompter:
    """Prompter that answers from fixed lists and records the questions."""

    def __init__(self, selections=(), texts=(), confirmations=()):
        self.selections = list(selections)
        self.texts = list(texts)
        self.confirmations = list(confirmations)
        self.asked = []
        self.options_seen = []

    def select(self, prompt, options):
        self.asked.append(prompt)
        self.options_seen.append(list(options))
        return self.selections.pop(0)

    def text(self, prompt):
        self.asked.append(prompt)
        return self.texts.pop(0)

    def confirm(self, prompt):
        self.asked.append(prompt)
        return self.confirmations.pop(0)


@pytest.fixture
def temp_dir():
    """Create a temporary directory for testing."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def console():
    """Rich console that writes plain text into a buffer."""
    return Console(file=io.StringIO(), width=200, force_terminal=False, color_system=None)


@pytest.fixture
def sample_worktrees():
    """Worktrees matching TWO_WORKTREES_OUTPUT."""
    return [
        Worktree(path="/repo", branch="refs/heads/main", commit="abc123"),
        Worktree(path="/repo/feature", branch="refs/heads/feature", commit="def456"),
    ]


@pytest.fixture
def list_ok():
    """Successful listing result with two worktrees."""
    return CommandResult(exit_code=0, stdout=TWO_WORKTREES_OUTPUT, stderr="")


@pytest.fixture
def git_repo(temp_dir):
    """Create a real Git repository for testing."""
    repo_path = temp_dir / "test_repo"
    repo_path.mkdir()

    # Initialize repository
    repo = git.Repo.init(repo_path)

    # Configure git user for commits
    repo.config_writer().set_value("user", "name", "Test User").release()
    repo.config_writer().set_value("user", "email", "test@example.com").release()

    # Create initial commit on main branch
    test_file = repo_path / "README.md"
    test_file.write_text("# Test Repository\n")
    repo.index.add(["README.md"])
    repo.index.commit("Initial commit")

    # Rename master to main if needed
    repo.git.branch('-M', 'main')

    yield repo

    # Cleanup
    repo.close()


@pytest.fixture
def git_repo_with_branch(git_repo):
    """Repository with an extra `feature` branch that is not checked out."""
    git_repo.create_head("feature")
    yield git_repo
