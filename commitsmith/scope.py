"""Scope inference for commitsmith.

Derives a directory-based scope token from the changed file paths, so that
changes under ``src/auth/`` produce messages like ``feat(auth): ...``.

The scope is the first segment of the longest common path prefix, unless
that segment is a generic container directory (``src`` by default), in
which case the next segment is used.
"""

import logging
from dataclasses import dataclass, field
from typing import Optional

logger = logging.getLogger(__name__)


# Top-level directories that say nothing about the area of a change
DEFAULT_CONTAINER_DIRS = {"src"}


@dataclass
class ScopeConfig:
    """Configuration for scope inference."""

    enabled: bool = True

    # Container directories skipped in favour of the next path segment
    container_dirs: set[str] = field(default_factory=lambda: DEFAULT_CONTAINER_DIRS.copy())


@dataclass
class ScopeResult:
    """Result of scope inference."""

    scope: str
    common_path: str
    reason: str  # Human-readable explanation


def normalize_path(path: str) -> str:
    """Normalize a file path for consistent processing.

    Args:
        path: The file path to normalize.

    Returns:
        Normalized path with forward slashes.
    """
    return path.replace("\\", "/").strip("/")


def find_common_path(paths: list[str]) -> str:
    """Find the longest common directory prefix of a set of paths.

    A single path yields its parent directory. Paths escaping the
    repository (starting with ``..``) and empty paths are ignored.

    Args:
        paths: Repository-relative file paths.

    Returns:
        The common prefix joined with ``/``, or an empty string.
    """
    valid_paths = [normalize_path(p) for p in paths if p and not p.startswith("..")]
    if not valid_paths:
        return ""

    if len(valid_paths) == 1:
        parts = valid_paths[0].split("/")
        return "/".join(parts[:-1]) if len(parts) > 1 else ""

    split_paths = [[part for part in p.split("/") if part] for p in valid_paths]
    first = split_paths[0]

    common = []
    for i, part in enumerate(first):
        if all(len(other) > i and other[i] == part for other in split_paths):
            common.append(part)
        else:
            break

    return "/".join(common)


def infer_scope(paths: list[str], config: ScopeConfig | None = None) -> ScopeResult:
    """Infer a scope token from changed file paths.

    Never raises; any failure leaves the scope empty.

    Args:
        paths: Repository-relative file paths.
        config: Scope inference configuration.

    Returns:
        ScopeResult with the inferred scope (possibly empty).
    """
    if config is None:
        config = ScopeConfig()

    if not config.enabled:
        return ScopeResult(scope="", common_path="", reason="Scope inference disabled")

    try:
        common_path = find_common_path(paths)
    except Exception as e:
        logger.warning("Error determining scope from paths: %s", e)
        return ScopeResult(scope="", common_path="", reason=f"Scope inference failed: {e}")

    segments = [s for s in common_path.split("/") if s]
    if not segments or common_path == ".":
        return ScopeResult(scope="", common_path=common_path, reason="No common directory")

    scope = segments[0]
    if scope in config.container_dirs and len(segments) > 1:
        scope = segments[1]
        reason = f"Common path '{common_path}' below container '{segments[0]}'"
    else:
        reason = f"Common path '{common_path}'"

    return ScopeResult(scope=scope, common_path=common_path, reason=reason)


def load_scope_config_from_dict(config_dict: dict) -> ScopeConfig:
    """Load ScopeConfig from a configuration dictionary.

    Malformed values fall back to the defaults with a warning.

    Args:
        config_dict: Dictionary with scope configuration.

    Returns:
        ScopeConfig instance.
    """
    scope_section = config_dict.get("scope") or {}
    if not isinstance(scope_section, dict):
        logger.warning("Ignoring scope config %r: expected a mapping", scope_section)
        scope_section = {}

    container_dirs = scope_section.get("container_dirs", None)
    if container_dirs is None:
        container_dirs = DEFAULT_CONTAINER_DIRS.copy()
    elif isinstance(container_dirs, (list, tuple, set)):
        container_dirs = {str(d) for d in container_dirs}
    else:
        logger.warning("Ignoring container_dirs %r: expected a list", container_dirs)
        container_dirs = DEFAULT_CONTAINER_DIRS.copy()

    return ScopeConfig(
        enabled=bool(scope_section.get("enabled", True)),
        container_dirs=container_dirs,
    )


def scope_config_to_dict(config: ScopeConfig) -> dict:
    """Convert ScopeConfig to a dictionary for saving.

    Args:
        config: ScopeConfig instance.

    Returns:
        Dictionary representation.
    """
    return {
        "scope": {
            "enabled": config.enabled,
            "container_dirs": sorted(config.container_dirs),
        }
    }


def resolve_scope(paths: list[str], config: Optional[ScopeConfig] = None) -> str:
    """Shorthand for the scope token alone."""
    result = infer_scope(paths, config)
    logger.debug("Scope %r: %s", result.scope, result.reason)
    return result.scope
