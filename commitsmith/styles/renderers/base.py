"""Base utilities for style renderers.

Contains common functions used across all style renderers:
- replace_word: Whole-word, case-sensitive replacement
- capitalize_first: Upper-case the first character only
- commit_example: Shell command committing with a message
"""

import re
from typing import Callable

from commitsmith.styles.models import MessageParts

# A variant transform renders parts into (message, rationale)
VariantTransform = Callable[[MessageParts, int], tuple[str, str]]


def replace_word(text: str, word: str, replacement: str) -> str:
    """Replace every whole-word occurrence of a word.

    "update" matches in "update docs" but not in "updates" or "Update".

    Args:
        text: Text to rewrite.
        word: Word to replace.
        replacement: Replacement word.

    Returns:
        The rewritten text.
    """
    return re.sub(rf"\b{re.escape(word)}\b", replacement, text)


def capitalize_first(text: str) -> str:
    """Upper-case the first character, leaving the rest untouched."""
    return text[:1].upper() + text[1:]


def commit_example(message: str) -> str:
    """Build the single-line git command for a message."""
    return f'git commit -m "{message}"'
