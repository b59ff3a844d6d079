"""Tests for commitsmith.git package."""

import subprocess
from pathlib import Path
from unittest.mock import MagicMock

import pytest

from commitsmith.analysis.models import ChangedFile
from commitsmith.git import (
    GitError,
    GitRepository,
    _run_git_command,
    get_diff_summary,
    get_file_diff,
    get_status,
    is_inside_work_tree,
    parse_numstat,
    parse_status,
)


class TestRunGitCommand:
    """Tests for _run_git_command function."""

    def test_successful_command(self, mocker):
        """Test successful git command execution."""
        mock_result = MagicMock()
        mock_result.stdout = "output\n"
        mock_run = mocker.patch("subprocess.run", return_value=mock_result)

        result = _run_git_command(["status"], cwd=Path("/repo"))

        assert result == "output"
        assert mock_run.call_args.args[0] == ["git", "status"]
        assert mock_run.call_args.kwargs["cwd"] == Path("/repo")

    def test_preserves_leading_whitespace(self, mocker):
        """Test that porcelain column alignment survives."""
        mock_result = MagicMock()
        mock_result.stdout = " M file.py\n"
        mocker.patch("subprocess.run", return_value=mock_result)

        assert _run_git_command(["status", "--porcelain=v1"]) == " M file.py"

    def test_failed_command_raises_error(self, mocker):
        """Test that failed command raises GitError."""
        mocker.patch(
            "subprocess.run",
            side_effect=subprocess.CalledProcessError(1, "git", stderr="error"),
        )

        with pytest.raises(GitError) as exc_info:
            _run_git_command(["invalid"])

        assert "Git command failed" in str(exc_info.value)

    def test_git_not_found_raises_error(self, mocker):
        """Test that missing git raises GitError."""
        mocker.patch("subprocess.run", side_effect=FileNotFoundError())

        with pytest.raises(GitError) as exc_info:
            _run_git_command(["status"])

        assert "not installed" in str(exc_info.value)


class TestIsInsideWorkTree:
    """Tests for is_inside_work_tree function."""

    def test_true_inside_repo(self, mocker):
        """Test a working tree is recognised."""
        mocker.patch("commitsmith.git.runner._run_git_command", return_value="true")
        assert is_inside_work_tree(Path("/repo")) is True

    def test_false_on_git_error(self, mocker):
        """Test that git failure means not a repository."""
        mocker.patch(
            "commitsmith.git.runner._run_git_command",
            side_effect=GitError("not a git repository"),
        )
        assert is_inside_work_tree(Path("/tmp")) is False

    def test_false_inside_git_dir(self, mocker):
        """Test that the .git directory itself is not a working tree."""
        mocker.patch("commitsmith.git.runner._run_git_command", return_value="false")
        assert is_inside_work_tree(Path("/repo/.git")) is False


class TestParseStatus:
    """Tests for parse_status function."""

    def test_empty_output_is_clean(self):
        """Test that no output means a clean tree."""
        status = parse_status("")
        assert status.is_clean

    def test_staged_and_unstaged_columns(self):
        """Test index and worktree columns are read separately."""
        output = "\0".join([
            "M  staged.py",
            " M unstaged.py",
            "A  added.py",
            " D removed.py",
            "?? new.txt",
        ]) + "\0"

        status = parse_status(output)

        assert status.staged == ["staged.py", "added.py"]
        assert status.modified == ["staged.py", "unstaged.py"]
        assert status.deleted == ["removed.py"]
        assert status.not_added == ["new.txt"]
        assert not status.is_clean

    def test_rename_uses_new_path(self):
        """Test that renames are recorded under the new name only."""
        status = parse_status("R  new.py\0old.py\0M  other.py\0")
        assert status.staged == ["new.py", "other.py"]

    def test_paths_are_not_quoted(self):
        """Test that non-ASCII and spaced names come through verbatim."""
        status = parse_status("A  src/auth/café.ts\0?? notes draft.txt\0")
        assert status.staged == ["src/auth/café.ts"]
        assert status.not_added == ["notes draft.txt"]

    def test_arrow_in_filename_kept(self):
        """Test that a literal arrow is part of the name."""
        status = parse_status("A  a -> b.txt\0")
        assert status.staged == ["a -> b.txt"]


class TestParseNumstat:
    """Tests for parse_numstat function."""

    def test_counts(self):
        """Test insertion and deletion counts are parsed."""
        files = parse_numstat("3\t1\tsrc/app.ts\x0010\t0\tREADME.md\0")
        assert files == [
            ChangedFile("src/app.ts", insertions=3, deletions=1),
            ChangedFile("README.md", insertions=10, deletions=0),
        ]

    def test_binary_file(self):
        """Test binary files carry no counts."""
        files = parse_numstat("-\t-\tassets/logo.png\0")
        assert files == [ChangedFile("assets/logo.png", binary=True)]

    def test_rename_uses_destination(self):
        """Test renames resolve to the new path."""
        files = parse_numstat("1\t1\t\0src/old/file.ts\0src/new/file.ts\x002\t0\tb.ts\0")
        assert [f.path for f in files] == ["src/new/file.ts", "b.ts"]
        assert files[0].insertions == 1

    def test_non_ascii_path(self):
        """Test that non-ASCII names are taken verbatim."""
        files = parse_numstat("10\t0\tsrc/auth/café.ts\0")
        assert files == [ChangedFile("src/auth/café.ts", insertions=10, deletions=0)]

    def test_duplicate_paths_collapsed(self):
        """Test that each path appears once."""
        files = parse_numstat("1\t0\ta.ts\x002\t0\ta.ts\0")
        assert len(files) == 1

    def test_ignores_malformed_fields(self):
        """Test that unexpected fields are skipped."""
        assert parse_numstat("garbage\0\0") == []

    def test_truncated_rename(self):
        """Test a rename missing its paths is dropped."""
        assert parse_numstat("1\t1\t\0old.ts") == []


class TestDiffHelpers:
    """Tests for get_diff_summary and get_file_diff."""

    def test_summary_uses_cached_flag(self, mocker):
        """Test staged summaries pass --cached."""
        mock_cmd = mocker.patch("commitsmith.git.diff._run_git_command", return_value="1\t0\ta.ts\0")

        files = get_diff_summary(cached=True, cwd=Path("/repo"))

        mock_cmd.assert_called_once_with(["diff", "--numstat", "-z", "--cached"], cwd=Path("/repo"))
        assert files[0].path == "a.ts"

    def test_summary_unstaged(self, mocker):
        """Test worktree summaries omit --cached."""
        mock_cmd = mocker.patch("commitsmith.git.diff._run_git_command", return_value="")

        assert get_diff_summary(cached=False) == []
        mock_cmd.assert_called_once_with(["diff", "--numstat", "-z"], cwd=None)

    def test_status_is_nul_separated(self, mocker):
        """Test status is requested in -z form."""
        mock_cmd = mocker.patch("commitsmith.git.status._run_git_command", return_value="")

        get_status(cwd=Path("/repo"))

        mock_cmd.assert_called_once_with(["status", "--porcelain=v1", "-z"], cwd=Path("/repo"))

    def test_file_diff(self, mocker):
        """Test single path diff command."""
        mock_cmd = mocker.patch("commitsmith.git.diff._run_git_command", return_value="+line")

        assert get_file_diff("a.ts", cached=True) == "+line"
        mock_cmd.assert_called_once_with(["diff", "--cached", "--", "a.ts"], cwd=None)


class TestGitRepository:
    """Tests for the GitRepository collaborator."""

    def test_exists(self, temp_dir):
        """Test existence check."""
        assert GitRepository(temp_dir).exists() is True
        assert GitRepository(temp_dir / "missing").exists() is False

    def test_queries_run_in_root(self, mocker, temp_dir):
        """Test that every query runs in the repository root."""
        mock_cmd = mocker.patch("commitsmith.git.status._run_git_command", return_value="?? a.txt")

        status = GitRepository(temp_dir).status()

        assert status.not_added == ["a.txt"]
        assert mock_cmd.call_args.kwargs["cwd"] == temp_dir.resolve()

    def test_real_repository(self, git_repo, git):
        """Test queries against a real repository."""
        (git_repo / "app.ts").write_text("export const a = 1;\n")
        git("add", "app.ts")

        repo = GitRepository(git_repo)

        assert repo.is_repo() is True
        assert repo.status().staged == ["app.ts"]
        assert repo.diff_summary(cached=True) == [ChangedFile("app.ts", insertions=1, deletions=0)]
        assert "+export const a = 1;" in repo.file_diff("app.ts", cached=True)

    def test_plain_directory_is_not_repo(self, temp_dir):
        """Test that a plain directory is not a working tree."""
        assert GitRepository(temp_dir).is_repo() is False

    def test_real_repository_non_ascii_path(self, git_repo, git):
        """Test that names git would quote come back verbatim."""
        (git_repo / "src" / "auth").mkdir(parents=True)
        (git_repo / "src" / "auth" / "café.ts").write_text("export const café = 1;\n")
        git("add", "src")

        repo = GitRepository(git_repo)

        assert repo.status().staged == ["src/auth/café.ts"]
        assert repo.diff_summary(cached=True) == [ChangedFile("src/auth/café.ts", insertions=1, deletions=0)]
        assert "+export const café = 1;" in repo.file_diff("src/auth/café.ts", cached=True)

    def test_real_repository_rename(self, git_repo, git):
        """Test that a staged rename is reported under its new name."""
        git("mv", "README.md", "GUIDE.md")

        repo = GitRepository(git_repo)

        assert repo.status().staged == ["GUIDE.md"]
        assert [f.path for f in repo.diff_summary(cached=True)] == ["GUIDE.md"]
