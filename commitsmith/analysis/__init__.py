"""Change analysis for commitsmith.

This package turns a change set into a single classification with:
- models: ChangedFile, ChangeNature, ChangeAggregate, AggregationResult
- exclusions: DEFAULT_EXCLUDE_MARKERS, is_excluded, partition_excluded
- rules: RULES, evaluate_rules, extension_of, is_test_path
- aggregator: aggregate_changes, nature_of
"""

# Models
from commitsmith.analysis.models import (
    DEFAULT_AGGREGATE,
    AggregationResult,
    ChangeAggregate,
    ChangedFile,
    ChangeNature,
)

# Exclusions
from commitsmith.analysis.exclusions import (
    DEFAULT_EXCLUDE_MARKERS,
    is_excluded,
    partition_excluded,
)

# Rules
from commitsmith.analysis.rules import (
    COMMIT_TYPES,
    DEFAULT_OUTCOME,
    RULES,
    ChangeSnapshot,
    Rule,
    RuleOutcome,
    evaluate_rules,
    extension_of,
    is_test_path,
)

# Aggregation
from commitsmith.analysis.aggregator import (
    aggregate_changes,
    build_snapshot,
    nature_of,
)


__all__ = [
    # Models
    "ChangedFile",
    "ChangeNature",
    "ChangeAggregate",
    "AggregationResult",
    "DEFAULT_AGGREGATE",
    # Exclusions
    "DEFAULT_EXCLUDE_MARKERS",
    "is_excluded",
    "partition_excluded",
    # Rules
    "COMMIT_TYPES",
    "RULES",
    "DEFAULT_OUTCOME",
    "ChangeSnapshot",
    "Rule",
    "RuleOutcome",
    "evaluate_rules",
    "extension_of",
    "is_test_path",
    # Aggregation
    "aggregate_changes",
    "build_snapshot",
    "nature_of",
]
