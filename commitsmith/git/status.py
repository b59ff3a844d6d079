"""Git status utilities.

Contains:
- RepoStatus: Buckets of paths from the porcelain status output
- get_status: Get git status output in porcelain format
- parse_status: Parse porcelain output into a RepoStatus
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from commitsmith.git.runner import _run_git_command


@dataclass
class RepoStatus:
    """Working tree status grouped the way the engine consumes it.

    Attributes:
        staged: Paths with a change recorded in the index.
        modified: Paths modified in the index or the worktree.
        not_added: Untracked paths.
        deleted: Paths deleted in the index or the worktree.
    """

    staged: list[str] = field(default_factory=list)
    modified: list[str] = field(default_factory=list)
    not_added: list[str] = field(default_factory=list)
    deleted: list[str] = field(default_factory=list)

    @property
    def is_clean(self) -> bool:
        """True when nothing is staged, modified, untracked or deleted."""
        return not (self.staged or self.modified or self.not_added or self.deleted)


def get_status(cwd: Optional[Path] = None) -> str:
    """Get git status output in NUL-separated porcelain format.

    Paths are reported verbatim, without the quoting git applies to
    non-ASCII names in the line-based format.

    Args:
        cwd: Repository directory.

    Returns:
        The git status output.
    """
    return _run_git_command(["status", "--porcelain=v1", "-z"], cwd=cwd)


def parse_status(output: str) -> RepoStatus:
    """Parse ``git status --porcelain=v1 -z`` output.

    Each entry is ``XY path`` terminated by NUL, where X is the index
    column and Y the worktree column. Renames and copies are followed by
    one extra NUL-terminated field holding the source path.

    Args:
        output: Output of ``git status --porcelain=v1 -z``.

    Returns:
        RepoStatus with each path placed in every bucket it belongs to.
    """
    status = RepoStatus()

    fields = output.split("\0")
    i = 0
    while i < len(fields):
        entry = fields[i]
        i += 1
        if len(entry) < 4:
            continue

        index_col = entry[0]
        worktree_col = entry[1]
        filename = entry[3:]

        # The source path of a rename or copy is not a separate entry
        if index_col in ("R", "C") or worktree_col in ("R", "C"):
            i += 1

        if index_col == "?" and worktree_col == "?":
            status.not_added.append(filename)
            continue

        if index_col not in (" ", "?", "!"):
            status.staged.append(filename)
        if "M" in (index_col, worktree_col):
            status.modified.append(filename)
        if "D" in (index_col, worktree_col):
            status.deleted.append(filename)

    return status
