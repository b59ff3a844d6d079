"""Excluded path handling.

Build output, lock files, OS metadata and dependency directories never take
part in classification. Matching is a case-sensitive substring test against
the repository-relative path.
"""

from typing import Iterable, Optional

from commitsmith.analysis.models import ChangedFile


DEFAULT_EXCLUDE_MARKERS = [
    "dist",
    "bun.lock",
    ".DS_Store",
    "node_modules",
]


def is_excluded(path: str, markers: Optional[Iterable[str]] = None) -> bool:
    """Check if a path contains any exclusion marker.

    Args:
        path: Repository-relative path.
        markers: Substring markers. Defaults to DEFAULT_EXCLUDE_MARKERS.

    Returns:
        True if the path should be left out of classification.
    """
    if markers is None:
        markers = DEFAULT_EXCLUDE_MARKERS
    return any(marker in path for marker in markers)


def partition_excluded(
    files: list[ChangedFile],
    markers: Optional[Iterable[str]] = None,
) -> tuple[list[ChangedFile], list[ChangedFile]]:
    """Split a change set into included and excluded files.

    Args:
        files: The full change set.
        markers: Substring markers. Defaults to DEFAULT_EXCLUDE_MARKERS.

    Returns:
        Tuple of (included, excluded), each in input order.
    """
    markers = list(DEFAULT_EXCLUDE_MARKERS if markers is None else markers)
    included = []
    excluded = []
    for changed in files:
        if is_excluded(changed.path, markers):
            excluded.append(changed)
        else:
            included.append(changed)
    return included, excluded
