"""Change aggregation.

Folds the included change set into a single ChangeAggregate: each file is
tagged with its extension and nature, the resulting snapshot goes through
the ordered rule table, and the scope resolver fills in a scope when no
rule fixed one.
"""

import logging
from typing import Optional

from commitsmith.analysis.models import (
    DEFAULT_AGGREGATE,
    AggregationResult,
    ChangeAggregate,
    ChangedFile,
    ChangeNature,
)
from commitsmith.analysis.rules import ChangeSnapshot, evaluate_rules, extension_of
from commitsmith.scope import ScopeConfig, resolve_scope

logger = logging.getLogger(__name__)


def nature_of(changed: ChangedFile) -> ChangeNature:
    """Tag a single file change as addition, deletion or modification.

    Binary files carry no line signal and count as modifications.

    Args:
        changed: The changed file.

    Returns:
        The change nature.
    """
    if changed.binary:
        return ChangeNature.MODIFICATION
    if changed.insertions > 0 and changed.deletions == 0:
        return ChangeNature.ADDITION
    if changed.deletions > 0 and changed.insertions == 0:
        return ChangeNature.DELETION
    return ChangeNature.MODIFICATION


def _fold_files(files: list[ChangedFile]) -> tuple[list[tuple[ChangedFile, str, ChangeNature]], list[str]]:
    """Analyze each file, collecting failures instead of raising.

    Args:
        files: Included changed files.

    Returns:
        Tuple of ((file, extension, nature) records, warnings).
    """
    records = []
    warnings = []
    for changed in files:
        try:
            if not isinstance(changed, ChangedFile) or not changed.path:
                warnings.append(f"Invalid file entry skipped: {changed!r}")
                continue
            records.append((changed, extension_of(changed.path), nature_of(changed)))
        except Exception as e:
            path = getattr(changed, "path", None) or "unknown"
            warnings.append(f"Error analyzing file {path}: {e}")
    return records, warnings


def build_snapshot(records: list[tuple[ChangedFile, str, ChangeNature]]) -> ChangeSnapshot:
    """Freeze per-file records into the view the rules evaluate."""
    natures = {nature for _, _, nature in records} or {ChangeNature.MODIFICATION}
    return ChangeSnapshot(
        paths=tuple(changed.path for changed, _, _ in records),
        extensions=frozenset(ext for _, ext, _ in records if ext),
        has_additions=ChangeNature.ADDITION in natures,
        has_deletions=ChangeNature.DELETION in natures,
        has_modifications=ChangeNature.MODIFICATION in natures,
    )


def aggregate_changes(
    files: list[ChangedFile],
    scope_config: Optional[ScopeConfig] = None,
) -> AggregationResult:
    """Classify an included change set.

    Never raises: per-file problems become warnings and any other failure
    yields DEFAULT_AGGREGATE.

    Args:
        files: Changed files with excluded paths already removed.
        scope_config: Scope inference configuration.

    Returns:
        AggregationResult with the aggregate and collected warnings.
    """
    try:
        if not files:
            raise ValueError("No files provided for analysis")

        records, warnings = _fold_files(files)
        for warning in warnings:
            logger.warning(warning)

        snap = build_snapshot(records)
        rule_name, outcome = evaluate_rules(snap)
        logger.debug("Matched rule %s -> %s: %s", rule_name or "default", outcome.type, outcome.description)

        scope = outcome.scope or ""
        if not scope and snap.paths:
            scope = resolve_scope(list(snap.paths), scope_config)

        natures = frozenset(nature for _, _, nature in records) or frozenset({ChangeNature.MODIFICATION})
        aggregate = ChangeAggregate(
            type=outcome.type,
            scope=scope,
            description=outcome.description,
            file_extensions=snap.extensions or frozenset({"unknown"}),
            change_natures=natures,
        )
        return AggregationResult(aggregate=aggregate, warnings=warnings)
    except Exception as e:
        logger.warning("Error in aggregate_changes: %s", e)
        return AggregationResult(aggregate=DEFAULT_AGGREGATE, warnings=[str(e)])
