"""Conventional Commits style renderer for commitsmith.

Format:
    <type>(<scope>): <description>

Variants 1 and 2 reword "update" as "improve" and "modify"; later
variants repeat the standard rendering.
"""

from commitsmith.styles.models import MessageParts
from commitsmith.styles.renderers.base import replace_word


def _header(parts: MessageParts, description: str) -> str:
    scope_str = f"({parts.scope})" if parts.scope else ""
    return f"{parts.type}{scope_str}: {description}"


def render_standard(parts: MessageParts, variant: int) -> tuple[str, str]:
    scope_str = f"({parts.scope})" if parts.scope else ""
    return (
        _header(parts, parts.description),
        f"Standard conventional commit following the type{scope_str}: description format",
    )


def render_improve(parts: MessageParts, variant: int) -> tuple[str, str]:
    return (
        _header(parts, replace_word(parts.description, "update", "improve")),
        "Alternative wording emphasizing improvement over simple updates",
    )


def render_modify(parts: MessageParts, variant: int) -> tuple[str, str]:
    return (
        _header(parts, replace_word(parts.description, "update", "modify")),
        "Variation using 'modify' to indicate careful, deliberate changes",
    )


def render_repeat(parts: MessageParts, variant: int) -> tuple[str, str]:
    return _header(parts, parts.description), f"Standard conventional commit (variant {variant})"


CONVENTIONAL_VARIANTS = {
    0: render_standard,
    1: render_improve,
    2: render_modify,
}
