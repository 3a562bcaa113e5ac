"""Parser for `git worktree list --porcelain` output."""

from typing import Iterator, List, Optional

from warmtree.constants import (
    BRANCH_PREFIX,
    DETACHED_BRANCH,
    HEAD_PREFIX,
    WORKTREE_PREFIX,
)
from warmtree.logging_config import get_logger
from warmtree.models.worktree import Worktree

logger = get_logger(__name__)


def _iter_blocks(output: str) -> Iterator[List[str]]:
    """Yield runs of non-blank lines separated by blank lines."""
    block: List[str] = []
    for line in output.split("\n"):
        # Porcelain lines end at \n only; other separators are legal in paths
        if line.endswith("\r"):
            line = line[:-1]
        if line:
            block.append(line)
        elif block:
            yield block
            block = []
    # Last entry may come without a trailing blank line
    if block:
        yield block


def _find_value(block: List[str], prefix: str) -> Optional[str]:
    """Return the text after `prefix` on the first line that starts with it."""
    for line in block:
        if line.startswith(prefix):
            return line[len(prefix):]
    return None


def parse_block(block: List[str]) -> Optional[Worktree]:
    """Build a Worktree from one porcelain block.

    Returns None for blocks that do not start with a non-empty
    `worktree <path>` line.
    """
    first = block[0]
    if not first.startswith(WORKTREE_PREFIX):
        return None

    path = first[len(WORKTREE_PREFIX):]
    if not path:
        return None

    commit = _find_value(block, HEAD_PREFIX)
    branch = _find_value(block, BRANCH_PREFIX)

    return Worktree(
        path=path,
        branch=branch if branch is not None else DETACHED_BRANCH,
        commit=commit if commit is not None else "",
    )


def parse_worktree_output(output: str) -> List[Worktree]:
    """Parse porcelain worktree listing into Worktree records.

    Format (one block per worktree, blank line between blocks):
        worktree /path/to/worktree
        HEAD commit_sha
        branch refs/heads/branch-name   (or: detached)

    Blocks may carry extra lines such as `locked` or `prunable`; they are
    ignored. Malformed blocks are skipped, never raised.

    Args:
        output: Captured stdout of the listing command

    Returns:
        Worktrees in the order git listed them
    """
    worktrees = []
    for block in _iter_blocks(output):
        worktree = parse_block(block)
        if worktree is None:
            logger.debug(f"Skipping malformed worktree block: {block[0]!r}")
            continue
        worktrees.append(worktree)

    logger.debug(f"Parsed {len(worktrees)} worktrees")
    return worktrees
