"""Response models and assembly.

Contains:
- ResponseSummary, ResponseUsage, CommitResponse, FileDiff: Pydantic models
  for what the engine returns
- build_response: Wrap generated suggestions with summary and usage
- Terminal responses for clean trees, unstaged changes, excluded-only
  change sets and errors
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from commitsmith.analysis.aggregator import nature_of
from commitsmith.analysis.models import ChangedFile, ChangeNature
from commitsmith.git.status import RepoStatus
from commitsmith.styles.constants import FALLBACK_MESSAGE, MessageStyle, Priority
from commitsmith.styles.models import CommitSuggestion
from commitsmith.styles.renderers import commit_example


# Per-file labels reported in the summary
SUMMARY_LABELS = {
    ChangeNature.ADDITION: "additions",
    ChangeNature.DELETION: "deletions",
    ChangeNature.MODIFICATION: "modifications",
}


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ResponseSummary(_CamelModel):
    """Counts and headline information about a response."""

    total_suggestions: int
    files_changed: int
    change_types: list[str] = Field(default_factory=list)
    recommended_style: str
    primary_suggestion: str


class ResponseUsage(_CamelModel):
    """How to act on the suggestions."""

    how_to_use: str
    examples: list[str] = Field(default_factory=list)


class CommitResponse(_CamelModel):
    """Suggestions plus summary and usage for a single engine call."""

    suggestions: list[CommitSuggestion]
    summary: ResponseSummary
    usage: ResponseUsage

    @property
    def primary(self) -> Optional[CommitSuggestion]:
        """The variant-0 suggestion, if any."""
        return self.suggestions[0] if self.suggestions else None

    def to_json(self, indent: Optional[int] = 2) -> str:
        """Serialize with camelCase keys."""
        return self.model_dump_json(by_alias=True, indent=indent)


class FileDiff(BaseModel):
    """Raw diff for one changed file."""

    file: str
    diff: str


def _style_value(style) -> str:
    return style.value if isinstance(style, MessageStyle) else str(style)


def _terminal_suggestion(message: str, type: str, rationale: str, style) -> CommitSuggestion:
    try:
        safe_style = MessageStyle(style)
    except ValueError:
        safe_style = MessageStyle.CONVENTIONAL
    return CommitSuggestion(
        message=message,
        type=type,
        rationale=rationale,
        style=safe_style,
        priority=Priority.PRIMARY,
        length=len(message),
    )


def _terminal_response(
    message: str,
    type: str,
    rationale: str,
    style,
    files_changed: int,
    change_types: list[str],
    how_to_use: str,
    examples: list[str],
) -> CommitResponse:
    return CommitResponse(
        suggestions=[_terminal_suggestion(message, type, rationale, style)],
        summary=ResponseSummary(
            total_suggestions=1,
            files_changed=files_changed,
            change_types=change_types,
            recommended_style=_style_value(style),
            primary_suggestion=message,
        ),
        usage=ResponseUsage(how_to_use=how_to_use, examples=examples),
    )


def summary_change_types(files: list[ChangedFile]) -> list[str]:
    """Distinct per-file change labels in first-seen order.

    Args:
        files: Included changed files.

    Returns:
        Labels drawn from additions, deletions and modifications.
    """
    labels: list[str] = []
    for changed in files:
        label = SUMMARY_LABELS[nature_of(changed)]
        if label not in labels:
            labels.append(label)
    return labels


def build_response(
    suggestions: list[CommitSuggestion],
    included_files: list[ChangedFile],
    style,
) -> CommitResponse:
    """Wrap generated suggestions with summary and usage blocks.

    Args:
        suggestions: Suggestions in generation order.
        included_files: Non-excluded changed files.
        style: The requested style.

    Returns:
        The assembled CommitResponse.
    """
    primary = suggestions[0].message if suggestions else FALLBACK_MESSAGE

    examples = [
        commit_example(primary),
        f"git add . && {commit_example(primary)}",
    ]
    if len(suggestions) > 1:
        examples.append(commit_example(suggestions[1].message))

    return CommitResponse(
        suggestions=suggestions,
        summary=ResponseSummary(
            total_suggestions=len(suggestions),
            files_changed=len(included_files),
            change_types=summary_change_types(included_files),
            recommended_style=_style_value(style),
            primary_suggestion=primary,
        ),
        usage=ResponseUsage(
            how_to_use=f"Copy one of the suggested commit messages and use: {commit_example(primary)}",
            examples=examples,
        ),
    )


def no_changes_response(style) -> CommitResponse:
    """Response for a working tree without any changes."""
    return _terminal_response(
        message="No changes detected",
        type="none",
        rationale="No file changes found in the repository. Working directory is clean.",
        style=style,
        files_changed=0,
        change_types=[],
        how_to_use=(
            "Make some changes to your files and stage them with 'git add .' "
            "before generating commit messages"
        ),
        examples=[
            "# Make some changes first",
            "git add .",
            "# Then generate commit messages",
        ],
    )


def unstaged_response(style, status: RepoStatus) -> CommitResponse:
    """Response for changes that exist but are not staged."""
    first_file = next(iter(status.not_added + status.modified), "specific-file.txt")
    return _terminal_response(
        message="No staged changes detected",
        type="none",
        rationale=(
            "Files have been modified but not staged for commit. "
            "Use 'git add' to stage changes first."
        ),
        style=style,
        files_changed=len(status.modified) + len(status.not_added) + len(status.deleted),
        change_types=["unstaged"],
        how_to_use="Stage your changes first, then generate commit messages",
        examples=[
            "git add .",
            "# Then generate commit messages",
            f"git add {first_file}",
        ],
    )


def excluded_only_response(style, total_files: int) -> CommitResponse:
    """Response for change sets made up entirely of excluded paths."""
    message = "Only excluded files changed"
    return _terminal_response(
        message=message,
        type="chore",
        rationale="All changes are in excluded files (build artifacts, dependencies, etc.)",
        style=style,
        files_changed=total_files,
        change_types=["excluded"],
        how_to_use="Consider if these changes should be committed or excluded",
        examples=[
            "# If you want to commit these changes:",
            commit_example(message),
            "# Or add them to .gitignore",
        ],
    )


def validation_error_response(style, error: Exception) -> CommitResponse:
    """Response for invalid parameters or an unusable root directory."""
    return _terminal_response(
        message="Validation Error",
        type="error",
        rationale=str(error),
        style=style,
        files_changed=0,
        change_types=["error"],
        how_to_use="Fix the validation error and try again",
        examples=["# Fix the issue mentioned above and retry"],
    )


def git_error_response(style, error: Exception) -> CommitResponse:
    """Response for failures of the repository query layer."""
    return _terminal_response(
        message="Git Operation Failed",
        type="error",
        rationale=str(error),
        style=style,
        files_changed=0,
        change_types=["error"],
        how_to_use="Check Git repository status and try again",
        examples=[
            "git status",
            "git log --oneline -5",
            "# Fix any Git issues and retry",
        ],
    )
