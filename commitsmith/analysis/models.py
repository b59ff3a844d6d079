"""Data models for change analysis.

Contains:
- ChangeNature: Addition/deletion/modification tag for a single file
- ChangedFile: One path in the change set with its line counts
- ChangeAggregate: The single classification derived from a change set
- AggregationResult: An aggregate plus the per-file warnings collected on the way
"""

from dataclasses import dataclass, field
from enum import Enum


class ChangeNature(Enum):
    """Nature of the edit made to one file."""

    ADDITION = "addition"
    DELETION = "deletion"
    MODIFICATION = "modification"


@dataclass(frozen=True)
class ChangedFile:
    """A changed path as reported by the repository.

    Attributes:
        path: Repository-relative path.
        insertions: Number of inserted lines.
        deletions: Number of deleted lines.
        binary: True when git reports no line counts for the file.
    """

    path: str
    insertions: int = 0
    deletions: int = 0
    binary: bool = False

    def __post_init__(self):
        if self.insertions < 0 or self.deletions < 0:
            raise ValueError(f"Line counts must be non-negative for {self.path!r}")


@dataclass(frozen=True)
class ChangeAggregate:
    """Classification of a whole change set.

    Attributes:
        type: Commit type (feat, fix, docs, style, refactor, test, chore).
        scope: Scope token, empty when none applies.
        description: Short imperative description.
        file_extensions: Extensions touched by the change set.
        change_natures: Natures observed across the change set.
    """

    type: str = "feat"
    scope: str = ""
    description: str = "update code"
    file_extensions: frozenset[str] = field(default_factory=lambda: frozenset({"unknown"}))
    change_natures: frozenset[ChangeNature] = field(
        default_factory=lambda: frozenset({ChangeNature.MODIFICATION}))


# Returned whenever aggregation cannot complete
DEFAULT_AGGREGATE = ChangeAggregate()


@dataclass
class AggregationResult:
    """Outcome of aggregating a change set.

    Attributes:
        aggregate: The classification.
        warnings: Non-fatal problems met while processing individual files.
    """

    aggregate: ChangeAggregate
    warnings: list[str] = field(default_factory=list)
