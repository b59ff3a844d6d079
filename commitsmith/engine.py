"""Engine entry points.

Contains:
- generate_commit_messages: Ranked commit message suggestions for a repository
- get_file_changes: Per-file diffs for the non-excluded changed files
- validate_repository, validate_parameters: Input checks run before any git query

The repository is reached only through a collaborator built by
``repository_factory`` (GitRepository by default), so an in-memory fake
with the same methods can stand in for git.
"""

import logging
from pathlib import Path
from typing import Callable, Iterable, Optional, Union

from commitsmith.analysis.aggregator import aggregate_changes
from commitsmith.analysis.exclusions import partition_excluded
from commitsmith.analysis.models import ChangeAggregate, ChangedFile
from commitsmith.exceptions import GitOperationError, ValidationError
from commitsmith.git.exceptions import GitError
from commitsmith.git.repository import GitRepository
from commitsmith.git.status import RepoStatus
from commitsmith.response import (
    CommitResponse,
    FileDiff,
    build_response,
    excluded_only_response,
    git_error_response,
    no_changes_response,
    unstaged_response,
    validation_error_response,
)
from commitsmith.scope import ScopeConfig
from commitsmith.styles.constants import MAX_SUGGESTIONS, MIN_SUGGESTIONS, MessageStyle
from commitsmith.styles.models import CommitSuggestion
from commitsmith.styles.synthesizer import synthesize_suggestion

logger = logging.getLogger(__name__)

RepositoryFactory = Callable[[Union[str, Path]], GitRepository]


def validate_parameters(root_dir, style, max_suggestions) -> MessageStyle:
    """Check caller-supplied parameters.

    Args:
        root_dir: Root directory argument.
        style: Style argument.
        max_suggestions: Requested number of suggestions.

    Returns:
        The parsed MessageStyle.

    Raises:
        ValidationError: If any parameter is malformed.
    """
    if not root_dir or not isinstance(root_dir, (str, Path)):
        raise ValidationError("Root directory must be a non-empty string")

    if (
        not isinstance(max_suggestions, int)
        or isinstance(max_suggestions, bool)
        or not MIN_SUGGESTIONS <= max_suggestions <= MAX_SUGGESTIONS
    ):
        raise ValidationError(
            f"Maximum suggestions must be between {MIN_SUGGESTIONS} and {MAX_SUGGESTIONS}"
        )

    try:
        return MessageStyle(style)
    except ValueError:
        valid = ", ".join(s.value for s in MessageStyle)
        raise ValidationError(f"Invalid style: {style}. Valid styles: {valid}")


def validate_repository(repo: GitRepository, root_dir) -> None:
    """Check that the root exists and is a git working tree.

    Raises:
        ValidationError: If either check fails.
    """
    if not repo.exists():
        raise ValidationError(f"Directory does not exist: {root_dir}")

    try:
        is_repo = repo.is_repo()
    except Exception as e:
        logger.debug("Repository check failed for %s: %s", root_dir, e)
        is_repo = False

    if not is_repo:
        raise ValidationError(
            f"Directory is not a Git repository: {root_dir}. Initialize with 'git init' first."
        )


def _open_repository(root_dir, repository_factory: RepositoryFactory) -> GitRepository:
    repo = repository_factory(root_dir)
    validate_repository(repo, root_dir)
    return repo


def _query_state(repo: GitRepository, root_dir) -> tuple[RepoStatus, list[ChangedFile]]:
    """Fetch status and the staged diff summary.

    Raises:
        GitOperationError: If either query fails.
    """
    try:
        return repo.status(), repo.diff_summary(cached=True)
    except (GitError, OSError) as e:
        raise GitOperationError(f"Failed to get Git status for {root_dir}: {e}", cause=e) from e


def _changed_files(repo: GitRepository, root_dir) -> tuple[list[ChangedFile], bool]:
    """Staged change set, falling back to unstaged changes.

    Returns:
        Tuple of (files, cached) where cached tells which set was used.

    Raises:
        GitOperationError: If a query fails.
    """
    try:
        files = repo.diff_summary(cached=True)
        if files:
            return files, True
        return repo.diff_summary(cached=False), False
    except (GitError, OSError) as e:
        raise GitOperationError(f"Failed to get diff summary for {root_dir}: {e}", cause=e) from e


def generate_suggestions(
    aggregate: ChangeAggregate,
    style: MessageStyle,
    include_scope: bool,
    max_suggestions: int,
) -> list[CommitSuggestion]:
    """Render variants 0..max_suggestions-1 in order.

    A variant that fails is logged and skipped; the others still render.

    Args:
        aggregate: The change classification.
        style: Message style.
        include_scope: Whether the scope may appear in messages.
        max_suggestions: Number of variants to render.

    Returns:
        Suggestions in variant order.
    """
    suggestions = []
    for variant in range(max_suggestions):
        try:
            suggestions.append(synthesize_suggestion(aggregate, style, include_scope, variant))
        except Exception as e:
            logger.warning("Failed to generate suggestion %d: %s", variant + 1, e)
    return suggestions


def generate_commit_messages(
    root_dir: Union[str, Path],
    style: Union[MessageStyle, str] = MessageStyle.CONVENTIONAL,
    max_suggestions: int = 3,
    include_scope: bool = True,
    repository_factory: RepositoryFactory = GitRepository,
    exclude_markers: Optional[Iterable[str]] = None,
    scope_config: Optional[ScopeConfig] = None,
) -> CommitResponse:
    """Generate ranked commit message suggestions for a repository.

    Expected failures (bad parameters, missing directory, not a repository,
    git errors, nothing to commit) come back as single-suggestion terminal
    responses rather than exceptions.

    Args:
        root_dir: Path to the git working tree.
        style: conventional, semantic or descriptive.
        max_suggestions: Number of suggestions, 1 to 5.
        include_scope: Whether the scope may appear in messages.
        repository_factory: Builds the repository collaborator from root_dir.
        exclude_markers: Path markers left out of classification.
        scope_config: Scope inference configuration.

    Returns:
        The CommitResponse.
    """
    try:
        message_style = validate_parameters(root_dir, style, max_suggestions)
        repo = _open_repository(root_dir, repository_factory)

        status, summary = _query_state(repo, root_dir)

        if not summary:
            if status.is_clean:
                return no_changes_response(message_style)
            return unstaged_response(message_style, status)

        included, excluded = partition_excluded(summary, exclude_markers)
        if not included:
            logger.info("All %d changed files are excluded", len(excluded))
            return excluded_only_response(message_style, len(summary))

        result = aggregate_changes(included, scope_config)
        suggestions = generate_suggestions(result.aggregate, message_style, include_scope, max_suggestions)

        if not suggestions:
            raise GitOperationError("Failed to generate any commit message suggestions")

        return build_response(suggestions, included, message_style)

    except ValidationError as e:
        logger.error("Validation failed: %s", e)
        return validation_error_response(style, e)
    except GitOperationError as e:
        logger.error("Git operation failed: %s", e)
        return git_error_response(style, e)


def get_file_changes(
    root_dir: Union[str, Path],
    repository_factory: RepositoryFactory = GitRepository,
    exclude_markers: Optional[Iterable[str]] = None,
) -> list[FileDiff]:
    """List the diff of every non-excluded changed file.

    Staged changes are preferred; when nothing is staged the unstaged
    changes are listed instead. A diff that cannot be retrieved is replaced
    by a placeholder rather than failing the listing.

    Args:
        root_dir: Path to the git working tree.
        repository_factory: Builds the repository collaborator from root_dir.
        exclude_markers: Path markers to skip.

    Returns:
        List of FileDiff in git's order.

    Raises:
        ValidationError: If root_dir is empty, missing or not a repository.
        GitOperationError: If git fails or anything unexpected happens.
    """
    try:
        if not root_dir or not isinstance(root_dir, (str, Path)):
            raise ValidationError("Root directory must be a non-empty string")

        repo = _open_repository(root_dir, repository_factory)
        files, cached = _changed_files(repo, root_dir)
        included, _ = partition_excluded(files, exclude_markers)

        diffs = []
        for changed in included:
            try:
                diff = repo.file_diff(changed.path, cached=cached)
            except Exception as e:
                logger.warning("Failed to get diff for file %s: %s", changed.path, e)
                diff = f"Error: Could not retrieve diff for {changed.path}"
            diffs.append(FileDiff(file=changed.path, diff=diff))
        return diffs

    except (ValidationError, GitOperationError) as e:
        logger.error("Error in get_file_changes: %s", e)
        raise
    except Exception as e:
        logger.error("Unexpected error in get_file_changes: %s", e)
        raise GitOperationError(f"Unexpected error while getting file changes: {e}", cause=e) from e
