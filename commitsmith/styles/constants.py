"""Constants for commitsmith styles module.

Contains:
- MessageStyle: Available commit message styles
- Priority: Ranking of a suggestion within a response
- STYLE_DESCRIPTIONS: Descriptions for each style (for help/display)
"""

from enum import Enum


class MessageStyle(Enum):
    """Available commit message styles."""

    CONVENTIONAL = "conventional"
    SEMANTIC = "semantic"
    DESCRIPTIVE = "descriptive"


class Priority(Enum):
    """Rank of a suggestion: variant 0 is primary, the rest alternatives."""

    PRIMARY = "primary"
    ALTERNATIVE = "alternative"


# Messages longer than this are reported but never truncated
MAX_MESSAGE_LENGTH = 72

MIN_SUGGESTIONS = 1
MAX_SUGGESTIONS = 5

FALLBACK_MESSAGE = "Update code"


# Style descriptions for help/display (ordered for style list display)
STYLE_DESCRIPTIONS = {
    MessageStyle.CONVENTIONAL: {
        "name": "conventional",
        "description": "Conventional Commits format (type(scope): description)",
        "format": "<type>(<scope>): <description>",
        "variants": [
            "type(scope): description",
            "'update' reworded as 'improve'",
            "'update' reworded as 'modify'",
        ],
        "example": "feat(auth): add new functionality",
    },
    MessageStyle.SEMANTIC: {
        "name": "semantic",
        "description": "Upper-case or bracket-tagged type prefix",
        "format": "<TYPE>: <description>",
        "variants": [
            "TYPE: description",
            "[type] description",
            "type: description",
        ],
        "example": "FEAT: add new functionality",
    },
    MessageStyle.DESCRIPTIVE: {
        "name": "descriptive",
        "description": "Plain capitalized sentence without type or scope",
        "format": "<Description>",
        "variants": [
            "Description",
            "'update' reworded as 'refactor'",
        ],
        "example": "Add new functionality",
    },
}
