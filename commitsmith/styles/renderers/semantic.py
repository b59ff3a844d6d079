"""Semantic style renderer for commitsmith.

Formats:
    TYPE: <description>      (variant 0)
    [type] <description>     (variant 1)
    type: <description>      (later variants)
"""

from commitsmith.styles.models import MessageParts


def render_uppercase(parts: MessageParts, variant: int) -> tuple[str, str]:
    return (
        f"{parts.type.upper()}: {parts.description}",
        "Uppercase semantic format for clear type identification",
    )


def render_bracketed(parts: MessageParts, variant: int) -> tuple[str, str]:
    return (
        f"[{parts.type}] {parts.description}",
        "Bracketed format popular in many open source projects",
    )


def render_plain(parts: MessageParts, variant: int) -> tuple[str, str]:
    return f"{parts.type}: {parts.description}", f"Simple semantic format (variant {variant})"


SEMANTIC_VARIANTS = {
    0: render_uppercase,
    1: render_bracketed,
}
