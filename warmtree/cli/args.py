"""Command-line argument parsing for warmtree."""

import argparse
from warmtree.__version__ import __version__


def parse_args(argv=None):
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        prog="warmtree",
        description="Interactively list and create git worktrees",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Show verbose output")
    parser.add_argument("--version", action="version", version=f"warmtree {__version__}")
    parser.add_argument(
        "-C",
        "--repo",
        dest="repo_path",
        default=".",
        metavar="PATH",
        help="Run as if started in PATH (default: current directory)",
    )
    parser.add_argument(
        "--git",
        dest="git_executable",
        default="git",
        metavar="PATH",
        help="Git executable to use (default: git)",
    )
    parser.add_argument(
        "-l",
        "--list",
        dest="list_only",
        action="store_true",
        help="Print the worktrees as a table and exit without prompting",
    )
    parser.add_argument(
        "--debug", action="store_true", help="Show debug information for troubleshooting"
    )

    return parser.parse_args(argv)
