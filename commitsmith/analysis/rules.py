"""Ordered classification rules.

Each rule pairs a predicate over an immutable ChangeSnapshot with the
outcome it yields. Rules are evaluated top to bottom and the first match
wins; when nothing matches, DEFAULT_OUTCOME applies.
"""

from dataclasses import dataclass
from typing import Callable, Optional


# Commit types a rule may produce
COMMIT_TYPES = frozenset({"feat", "fix", "docs", "style", "refactor", "test", "chore"})

SOURCE_EXTENSIONS = {"ts", "js", "jsx", "tsx"}
STYLESHEET_EXTENSIONS = {"css", "scss", "sass", "less"}
CONFIG_EXTENSIONS = {"yml", "yaml", "toml", "ini"}

MANIFEST_FILES = {"package.json"}
LOCKFILE_MARKERS = ["package-lock.json", "yarn.lock", "bun.lock"]

TEST_MARKERS = ["test", "spec", "__tests__"]
TEST_SUFFIXES = (".test.ts", ".test.js", ".spec.ts", ".spec.js")


@dataclass(frozen=True)
class ChangeSnapshot:
    """What the rules get to see of a change set.

    Attributes:
        paths: Included file paths.
        extensions: Lower-cased extensions touched.
        has_additions: Some file only gained lines.
        has_deletions: Some file only lost lines.
        has_modifications: Some file has mixed or no line signal.
    """

    paths: tuple[str, ...]
    extensions: frozenset[str]
    has_additions: bool = False
    has_deletions: bool = False
    has_modifications: bool = False


@dataclass(frozen=True)
class RuleOutcome:
    """Commit type, description and optional fixed scope produced by a rule."""

    type: str
    description: str
    scope: Optional[str] = None

    def __post_init__(self):
        if self.type not in COMMIT_TYPES:
            raise ValueError(f"Unknown commit type: {self.type!r}")


@dataclass(frozen=True)
class Rule:
    """A named predicate and the outcome it selects."""

    name: str
    matches: Callable[[ChangeSnapshot], bool]
    outcome: RuleOutcome


DEFAULT_OUTCOME = RuleOutcome("feat", "update code")


def extension_of(path: str) -> str:
    """Get the lower-cased text after the last dot of a path.

    Args:
        path: Repository-relative path.

    Returns:
        The extension, or an empty string when it is missing or longer
        than ten characters.
    """
    name = path.rsplit("/", 1)[-1]
    if "." not in name:
        return ""
    extension = name.rsplit(".", 1)[-1].lower()
    return extension if len(extension) <= 10 else ""


def is_test_path(path: str) -> bool:
    """Check if a path follows a test file naming convention."""
    return any(marker in path for marker in TEST_MARKERS) or path.endswith(TEST_SUFFIXES)


def _is_documentation(snap: ChangeSnapshot) -> bool:
    return "md" in snap.extensions and bool(snap.paths) and all(
        "readme" in path.lower() or path.endswith(".md") for path in snap.paths
    )


def _touches_manifest(snap: ChangeSnapshot) -> bool:
    return "json" in snap.extensions and any(path in MANIFEST_FILES for path in snap.paths)


def _touches_lockfile(snap: ChangeSnapshot) -> bool:
    return any(marker in path for path in snap.paths for marker in LOCKFILE_MARKERS)


def _touches_source(snap: ChangeSnapshot) -> bool:
    return bool(snap.extensions & SOURCE_EXTENSIONS)


def _only_tests(snap: ChangeSnapshot) -> bool:
    return _touches_source(snap) and bool(snap.paths) and all(is_test_path(p) for p in snap.paths)


def _adds_source(snap: ChangeSnapshot) -> bool:
    return _touches_source(snap) and snap.has_additions and not snap.has_deletions


def _removes_source(snap: ChangeSnapshot) -> bool:
    return _touches_source(snap) and snap.has_deletions and not snap.has_additions


def _restructures_source(snap: ChangeSnapshot) -> bool:
    return _touches_source(snap) and snap.has_deletions and snap.has_additions


def _modifies_source(snap: ChangeSnapshot) -> bool:
    # Any mixed file turns the whole set into a refactor.
    return _touches_source(snap) and snap.has_modifications


def _only_stylesheets(snap: ChangeSnapshot) -> bool:
    return bool(snap.paths) and all(extension_of(p) in STYLESHEET_EXTENSIONS for p in snap.paths)


def _touches_config(snap: ChangeSnapshot) -> bool:
    return bool(snap.extensions & CONFIG_EXTENSIONS)


RULES = [
    Rule("documentation", _is_documentation, RuleOutcome("docs", "update documentation")),
    Rule("manifest", _touches_manifest, RuleOutcome("chore", "update dependencies", "deps")),
    Rule("lockfile", _touches_lockfile, RuleOutcome("chore", "update lockfile", "deps")),
    Rule("source-tests", _only_tests, RuleOutcome("test", "update tests")),
    Rule("source-additions", _adds_source, RuleOutcome("feat", "add new functionality")),
    Rule("source-removals", _removes_source, RuleOutcome("refactor", "remove code")),
    Rule("source-restructure", _restructures_source, RuleOutcome("refactor", "restructure code")),
    Rule("source-modifications", _modifies_source, RuleOutcome("refactor", "update implementation")),
    Rule("source-fix", _touches_source, RuleOutcome("fix", "fix issue")),
    Rule("stylesheets", _only_stylesheets, RuleOutcome("style", "update styles")),
    Rule("configuration", _touches_config, RuleOutcome("chore", "update configuration", "config")),
]


def evaluate_rules(snap: ChangeSnapshot, rules: Optional[list[Rule]] = None) -> tuple[Optional[str], RuleOutcome]:
    """Find the first rule matching a snapshot.

    Args:
        snap: The change snapshot.
        rules: Rule table to evaluate. Defaults to RULES.

    Returns:
        Tuple of (rule name or None for the default, outcome).
    """
    for rule in RULES if rules is None else rules:
        if rule.matches(snap):
            return rule.name, rule.outcome
    return None, DEFAULT_OUTCOME
