"""Commit message styles and rendering for commitsmith.

Supports three message formats:
- conventional: Conventional Commits (type(scope): description)
- semantic: Upper-case or bracket-tagged type prefix (FEAT: description)
- descriptive: Plain capitalized sentence (Add new functionality)

This package provides modular style handling with:
- constants: MessageStyle, Priority, STYLE_DESCRIPTIONS
- models: MessageParts, CommitSuggestion
- renderers: Per-style variant tables and render_message
- synthesizer: synthesize_suggestion, fallback_suggestion
"""

# Constants
from commitsmith.styles.constants import (
    FALLBACK_MESSAGE,
    MAX_MESSAGE_LENGTH,
    MAX_SUGGESTIONS,
    MIN_SUGGESTIONS,
    STYLE_DESCRIPTIONS,
    MessageStyle,
    Priority,
)

# Models
from commitsmith.styles.models import (
    CommitSuggestion,
    MessageParts,
)

# Renderers
from commitsmith.styles.renderers import (
    VARIANT_TABLE,
    capitalize_first,
    commit_example,
    get_transform,
    render_message,
    replace_word,
)

# Synthesis
from commitsmith.styles.synthesizer import (
    fallback_suggestion,
    priority_for,
    synthesize_suggestion,
)


__all__ = [
    # Constants
    "MessageStyle",
    "Priority",
    "FALLBACK_MESSAGE",
    "MAX_MESSAGE_LENGTH",
    "MIN_SUGGESTIONS",
    "MAX_SUGGESTIONS",
    "STYLE_DESCRIPTIONS",
    # Models
    "MessageParts",
    "CommitSuggestion",
    # Renderers
    "VARIANT_TABLE",
    "get_transform",
    "render_message",
    "replace_word",
    "capitalize_first",
    "commit_example",
    # Synthesis
    "synthesize_suggestion",
    "fallback_suggestion",
    "priority_for",
]
