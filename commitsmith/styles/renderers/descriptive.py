"""Descriptive style renderer for commitsmith.

Plain sentence with the first character capitalized and no type or scope
prefix. Variant 1 rewords "update" as "refactor".
"""

from commitsmith.styles.models import MessageParts
from commitsmith.styles.renderers.base import capitalize_first, replace_word


def render_sentence(parts: MessageParts, variant: int) -> tuple[str, str]:
    message = capitalize_first(parts.description) if parts.description else "Update code"
    return message, "Natural language description focusing on what was actually changed"


def render_refactor(parts: MessageParts, variant: int) -> tuple[str, str]:
    reworded = replace_word(parts.description, "update", "refactor")
    message = capitalize_first(reworded) if reworded else "Refactor code"
    return message, "Action-focused message emphasizing the nature of the changes"


def render_repeat(parts: MessageParts, variant: int) -> tuple[str, str]:
    message = capitalize_first(parts.description) if parts.description else "Update code"
    return message, f"Descriptive format (variant {variant})"


DESCRIPTIVE_VARIANTS = {
    0: render_sentence,
    1: render_refactor,
}
