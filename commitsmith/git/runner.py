"""Git command runner and repository utilities.

Contains:
- _run_git_command: Run a git command and return its output
- is_inside_work_tree: Check whether a directory is a git working tree
"""

import logging
import subprocess
from pathlib import Path
from typing import Optional

from commitsmith.git.exceptions import GitError

logger = logging.getLogger(__name__)


def _run_git_command(args: list[str], cwd: Optional[Path] = None) -> str:
    """Run a git command and return its output.

    Output is decoded as UTF-8. Leading whitespace is preserved because
    porcelain formats are column-sensitive; only trailing whitespace is
    removed.

    Args:
        args: List of arguments to pass to git.
        cwd: Directory to run the command in (current directory if None).

    Returns:
        The stdout of the git command.

    Raises:
        GitError: If the command fails.
    """
    logger.debug("Running: git %s (cwd=%s)", " ".join(args), cwd)
    try:
        result = subprocess.run(
            ["git"] + args,
            capture_output=True,
            text=True,
            encoding="utf-8",
            errors="surrogateescape",
            check=True,
            cwd=cwd,
        )
        return result.stdout.rstrip()
    except subprocess.CalledProcessError as e:
        stderr = (e.stderr or "").strip()
        raise GitError(f"Git command failed: git {' '.join(args)}\n{stderr}") from e
    except FileNotFoundError as e:
        raise GitError("Git is not installed or not in PATH.") from e


def is_inside_work_tree(path: Path) -> bool:
    """Check whether a directory lies inside a git working tree.

    Args:
        path: Directory to check.

    Returns:
        True if git recognises the directory as part of a working tree.
    """
    try:
        output = _run_git_command(["rev-parse", "--is-inside-work-tree"], cwd=path)
    except GitError:
        return False
    return output.strip() == "true"
