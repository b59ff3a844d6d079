"""Repository collaborator used by the engine.

GitRepository binds the module-level git helpers to one root directory so
the engine can be handed a single object, and tests can hand it a fake
with the same methods.
"""

from pathlib import Path

from commitsmith.analysis.models import ChangedFile
from commitsmith.git.diff import get_diff_summary, get_file_diff
from commitsmith.git.runner import is_inside_work_tree
from commitsmith.git.status import RepoStatus, get_status, parse_status


class GitRepository:
    """Read-only query interface over a git working tree.

    Args:
        root_dir: Path to the working tree.
    """

    def __init__(self, root_dir: str | Path):
        self.root = Path(root_dir).resolve()

    def __repr__(self) -> str:
        return f"GitRepository({str(self.root)!r})"

    def exists(self) -> bool:
        """Check that the root directory exists."""
        return self.root.exists()

    def is_repo(self) -> bool:
        """Check that the root directory is a git working tree."""
        return is_inside_work_tree(self.root)

    def status(self) -> RepoStatus:
        """Get the staged/modified/untracked/deleted buckets.

        Raises:
            GitError: If git fails.
        """
        return parse_status(get_status(cwd=self.root))

    def diff_summary(self, cached: bool = True) -> list[ChangedFile]:
        """Get per-file insertion/deletion counts.

        Args:
            cached: Summarise staged changes instead of worktree changes.

        Raises:
            GitError: If git fails.
        """
        return get_diff_summary(cached=cached, cwd=self.root)

    def file_diff(self, path: str, cached: bool = False) -> str:
        """Get the textual diff for a single path.

        Raises:
            GitError: If git fails.
        """
        return get_file_diff(path, cached=cached, cwd=self.root)
