"""Repository configuration for commitsmith.

Reads the optional .commitsmith/config.yaml file in a repository. The file
is never created or modified by the engine; a missing or unreadable file
means defaults.
"""

import copy
import logging
from dataclasses import dataclass
from pathlib import Path

import yaml

from commitsmith.analysis.exclusions import DEFAULT_EXCLUDE_MARKERS
from commitsmith.scope import DEFAULT_CONTAINER_DIRS, ScopeConfig, load_scope_config_from_dict
from commitsmith.styles.constants import MAX_SUGGESTIONS, MIN_SUGGESTIONS, MessageStyle

logger = logging.getLogger(__name__)


CONFIG_DIR_NAME = ".commitsmith"

# Default configuration values
DEFAULT_CONFIG = {
    "defaults": {
        "style": MessageStyle.CONVENTIONAL.value,
        "max_suggestions": 3,
        "include_scope": True,
    },
    # Substring markers for paths left out of classification
    "exclude": list(DEFAULT_EXCLUDE_MARKERS),
    "scope": {
        "enabled": True,
        "container_dirs": sorted(DEFAULT_CONTAINER_DIRS),
    },
}


@dataclass
class DefaultOptions:
    """Suggestion options used when the caller does not give them."""

    style: MessageStyle = MessageStyle.CONVENTIONAL
    max_suggestions: int = 3
    include_scope: bool = True


def get_config_dir(repo_root: Path) -> Path:
    """Get the repository config directory.

    Args:
        repo_root: The root directory of the git repository.

    Returns:
        Path to .commitsmith/
    """
    return Path(repo_root) / CONFIG_DIR_NAME


def get_config_file(repo_root: Path) -> Path:
    """Return path to the config.yaml file.

    Args:
        repo_root: The root directory of the git repository.

    Returns:
        Path to .commitsmith/config.yaml.
    """
    return get_config_dir(repo_root) / "config.yaml"


def load_config(repo_root: Path) -> dict:
    """Load the commitsmith configuration from config.yaml.

    Sections whose type does not match the default (a list where a
    mapping is expected, for instance) are ignored with a warning.

    Args:
        repo_root: The root directory of the git repository.

    Returns:
        Configuration dictionary merged over the defaults.
    """
    config = copy.deepcopy(DEFAULT_CONFIG)
    config_file = get_config_file(repo_root)

    if not config_file.exists():
        return config

    try:
        with open(config_file, "r") as f:
            loaded = yaml.safe_load(f) or {}
    except (yaml.YAMLError, OSError) as e:
        logger.warning("Ignoring unreadable config %s: %s", config_file, e)
        return config

    if not isinstance(loaded, dict):
        logger.warning("Ignoring config %s: expected a mapping", config_file)
        return config

    for key, value in loaded.items():
        default = config.get(key)
        if isinstance(default, (dict, list)) and not isinstance(value, type(default)):
            logger.warning(
                "Ignoring %r in config %s: expected a %s", key, config_file, type(default).__name__
            )
        elif isinstance(default, dict):
            config[key].update(value)
        else:
            config[key] = value
    return config


def get_exclude_markers(repo_root: Path) -> list[str]:
    """Get the exclusion markers from config.

    Args:
        repo_root: The root directory of the git repository.

    Returns:
        List of substring markers.
    """
    markers = load_config(repo_root).get("exclude")
    if not isinstance(markers, list):
        return list(DEFAULT_EXCLUDE_MARKERS)
    return [str(m) for m in markers]


def get_scope_config(repo_root: Path) -> ScopeConfig:
    """Get the scope inference settings from config.

    Args:
        repo_root: The root directory of the git repository.

    Returns:
        ScopeConfig instance.
    """
    return load_scope_config_from_dict(load_config(repo_root))


def get_default_options(repo_root: Path) -> DefaultOptions:
    """Get default suggestion options from config.

    Invalid values are replaced by the built-in defaults.

    Args:
        repo_root: The root directory of the git repository.

    Returns:
        DefaultOptions instance.
    """
    section = load_config(repo_root).get("defaults") or {}
    options = DefaultOptions()

    try:
        options.style = MessageStyle(str(section.get("style", options.style.value)).lower())
    except ValueError:
        logger.warning("Unknown default style %r, using conventional", section.get("style"))

    max_suggestions = section.get("max_suggestions", options.max_suggestions)
    if (
        isinstance(max_suggestions, int)
        and not isinstance(max_suggestions, bool)
        and MIN_SUGGESTIONS <= max_suggestions <= MAX_SUGGESTIONS
    ):
        options.max_suggestions = max_suggestions
    else:
        logger.warning("Invalid default max_suggestions %r, using %d", max_suggestions, options.max_suggestions)

    options.include_scope = bool(section.get("include_scope", options.include_scope))
    return options
