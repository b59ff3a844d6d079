"""Git diff utilities.

Contains:
- get_diff_summary: Per-file insertion/deletion counts for a change set
- parse_numstat: Parse ``git diff --numstat -z`` output into ChangedFile records
- get_file_diff: Raw textual diff for a single path
"""

from pathlib import Path
from typing import Optional

from commitsmith.analysis.models import ChangedFile
from commitsmith.git.runner import _run_git_command


def _count(value: str) -> int:
    return int(value) if value.isdigit() else 0


def parse_numstat(output: str) -> list[ChangedFile]:
    """Parse NUL-separated numstat output into ChangedFile records.

    A regular entry is ``added\\tremoved\\tpath`` followed by NUL. A rename
    leaves the path column empty and is followed by two NUL-terminated
    fields, the source and the destination path. Binary files are reported
    with ``-`` in both count columns and carry no line counts.

    Args:
        output: Output of ``git diff --numstat -z``.

    Returns:
        One ChangedFile per distinct path, in git's order.
    """
    files: list[ChangedFile] = []
    seen: set[str] = set()

    fields = output.split("\0")
    i = 0
    while i < len(fields):
        parts = fields[i].split("\t", 2)
        i += 1
        if len(parts) != 3:
            continue

        added, removed, path = parts
        if not path:
            # Rename: source then destination follow as separate fields
            if i + 1 >= len(fields):
                break
            path = fields[i + 1]
            i += 2

        if not path or path in seen:
            continue
        seen.add(path)

        if added == "-" and removed == "-":
            files.append(ChangedFile(path=path, binary=True))
            continue

        files.append(ChangedFile(path=path, insertions=_count(added), deletions=_count(removed)))

    return files


def get_diff_summary(cached: bool = True, cwd: Optional[Path] = None) -> list[ChangedFile]:
    """Get per-file change counts.

    Args:
        cached: Summarise the staged change set instead of the worktree.
        cwd: Repository directory.

    Returns:
        List of ChangedFile records.
    """
    args = ["diff", "--numstat", "-z"]
    if cached:
        args.append("--cached")
    return parse_numstat(_run_git_command(args, cwd=cwd))


def get_file_diff(path: str, cached: bool = False, cwd: Optional[Path] = None) -> str:
    """Get the diff for a single path.

    Args:
        path: Repository-relative path, unquoted.
        cached: Diff the index against HEAD instead of the worktree.
        cwd: Repository directory.

    Returns:
        The raw unified diff text.
    """
    args = ["diff"]
    if cached:
        args.append("--cached")
    return _run_git_command(args + ["--", path], cwd=cwd)
