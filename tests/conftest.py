"""Shared test fixtures and configuration."""

import shutil
import subprocess
import tempfile
from pathlib import Path

import pytest

from commitsmith.analysis.models import ChangedFile
from commitsmith.git.exceptions import GitError
from commitsmith.git.status import RepoStatus


class FakeRepository:
    """In-memory stand-in for GitRepository."""

    def __init__(
        self,
        root,
        staged=None,
        unstaged=None,
        status=None,
        diffs=None,
        exists=True,
        is_repo=True,
        error=None,
    ):
        self.root = Path(root)
        self.staged = list(staged or [])
        self.unstaged = list(unstaged or [])
        self._status = status or RepoStatus(staged=[f.path for f in self.staged])
        self.diffs = diffs or {}
        self._exists = exists
        self._is_repo = is_repo
        self.error = error
        self.diff_calls = []

    def exists(self):
        return self._exists

    def is_repo(self):
        return self._is_repo

    def status(self):
        if self.error:
            raise self.error
        return self._status

    def diff_summary(self, cached=True):
        if self.error:
            raise self.error
        return list(self.staged if cached else self.unstaged)

    def file_diff(self, path, cached=False):
        self.diff_calls.append((path, cached))
        value = self.diffs.get(path, f"diff --git a/{path} b/{path}")
        if isinstance(value, Exception):
            raise value
        return value


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def fake_repo():
    """Build a repository factory around a FakeRepository."""

    def _make(**kwargs):
        holder = {}

        def factory(root):
            holder["repo"] = FakeRepository(root, **kwargs)
            return holder["repo"]

        factory.holder = holder
        return factory

    return _make


@pytest.fixture
def git_error():
    """A GitError as raised by the runner."""
    return GitError("Git command failed: git status\nfatal: corrupt index")


def _git(repo: Path, *args: str) -> None:
    subprocess.run(["git", *args], cwd=repo, check=True, capture_output=True, text=True)


@pytest.fixture
def empty_git_repo(temp_dir):
    """A freshly initialised git repository without any commit."""
    if shutil.which("git") is None:
        pytest.skip("git is not installed")

    _git(temp_dir, "init", "-q")
    return temp_dir


@pytest.fixture
def git_repo(temp_dir):
    """A real git repository with one commit containing README.md."""
    if shutil.which("git") is None:
        pytest.skip("git is not installed")

    _git(temp_dir, "init", "-q")
    _git(temp_dir, "config", "user.name", "Test User")
    _git(temp_dir, "config", "user.email", "test@example.com")
    _git(temp_dir, "config", "commit.gpgsign", "false")
    (temp_dir / "README.md").write_text("# Test\n")
    _git(temp_dir, "add", "README.md")
    _git(temp_dir, "commit", "-q", "-m", "Initial commit")
    return temp_dir


@pytest.fixture
def git(git_repo):
    """Run git commands inside git_repo."""

    def _run(*args: str) -> None:
        _git(git_repo, *args)

    return _run


@pytest.fixture
def sample_files():
    """A mixed change set under src/auth."""
    return [
        ChangedFile("src/auth/login.ts", insertions=10, deletions=0),
        ChangedFile("src/auth/register.ts", insertions=0, deletions=4),
    ]
