"""Git access for commitsmith.

This package provides the repository query layer with:
- exceptions: GitError
- runner: _run_git_command, is_inside_work_tree
- status: RepoStatus, get_status, parse_status
- diff: get_diff_summary, parse_numstat, get_file_diff
- repository: GitRepository
"""

# Exceptions
from commitsmith.git.exceptions import GitError

# Runner utilities
from commitsmith.git.runner import (
    _run_git_command,
    is_inside_work_tree,
)

# Status utilities
from commitsmith.git.status import (
    RepoStatus,
    get_status,
    parse_status,
)

# Diff utilities
from commitsmith.git.diff import (
    get_diff_summary,
    get_file_diff,
    parse_numstat,
)

# Repository collaborator
from commitsmith.git.repository import GitRepository


__all__ = [
    # Exceptions
    "GitError",
    # Runner
    "_run_git_command",
    "is_inside_work_tree",
    # Status
    "RepoStatus",
    "get_status",
    "parse_status",
    # Diff
    "get_diff_summary",
    "get_file_diff",
    "parse_numstat",
    # Repository
    "GitRepository",
]
