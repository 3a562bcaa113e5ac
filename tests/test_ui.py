"""Tests for terminal prompts and the worktree table"""
from unittest.mock import patch

from warmtree.models.worktree import Worktree
from warmtree.ui import RichPrompter, WorktreeDisplay


class TestRichPrompter:
    """Test RichPrompter against patched rich prompts."""

    @patch("warmtree.ui.prompts.Prompt.ask", return_value="2")
    def test_select_returns_index(self, mock_ask, console):
        """Test that the chosen number comes back as an int."""
        prompter = RichPrompter(console)

        assert prompter.select("Select worktree option", ["Create New Worktree", "a (main)", "b (dev)"]) == 2

        _, kwargs = mock_ask.call_args
        assert kwargs["choices"] == ["0", "1", "2"]
        output = console.file.getvalue()
        assert "0. Create New Worktree" in output
        assert "2. b (dev)" in output

    @patch("warmtree.ui.prompts.Prompt.ask", return_value="../wt")
    def test_text(self, mock_ask, console):
        assert RichPrompter(console).text("Enter branch name") == "../wt"
        assert "Enter branch name" in mock_ask.call_args[0][0]

    @patch("warmtree.ui.prompts.Confirm.ask", return_value=False)
    def test_confirm(self, mock_ask, console):
        assert RichPrompter(console).confirm("Create worktree 'x' from branch 'y'?") is False

    @patch("warmtree.ui.prompts.Prompt.ask", return_value="1")
    def test_options_with_brackets_are_not_markup(self, mock_ask, console):
        """Test that labels print literally."""
        RichPrompter(console).select("Pick", ["Create New Worktree", "[wip] (detached)"])

        assert "1. [wip] (detached)" in console.file.getvalue()


class TestWorktreeDisplay:
    """Test the non-interactive table."""

    def test_table_rows(self, console, sample_worktrees):
        display = WorktreeDisplay(console)
        display.display_worktree_table(sample_worktrees)

        output = console.file.getvalue()
        assert "Name" in output and "Branch" in output and "Commit" in output
        assert "/repo/feature" in output
        assert "main" in output

    def test_table_row_count(self, console, sample_worktrees):
        table = WorktreeDisplay(console).build_table(sample_worktrees)
        assert table.row_count == 2

    def test_detached_and_short_commit(self, console):
        worktree = Worktree(path="/tmp/scratch", branch="detached", commit="0123456789abcdef")
        WorktreeDisplay(console).display_worktree_table([worktree])

        output = console.file.getvalue()
        assert "detached" in output
        assert "0123456" in output
        assert "0123456789abcdef" not in output

    def test_no_worktrees(self, console):
        WorktreeDisplay(console).display_worktree_table([])
        assert "No worktrees found" in console.file.getvalue()
