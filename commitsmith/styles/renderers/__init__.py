"""Renderers package for commitsmith styles.

Each style contributes a table of variant transforms plus a default used
for variant indices beyond the table.
"""

from commitsmith.styles.constants import MessageStyle
from commitsmith.styles.models import MessageParts
from commitsmith.styles.renderers import conventional, descriptive, semantic
from commitsmith.styles.renderers.base import (
    VariantTransform,
    capitalize_first,
    commit_example,
    replace_word,
)


# style -> (variant table, default transform)
VARIANT_TABLE: dict[MessageStyle, tuple[dict[int, VariantTransform], VariantTransform]] = {
    MessageStyle.CONVENTIONAL: (conventional.CONVENTIONAL_VARIANTS, conventional.render_repeat),
    MessageStyle.SEMANTIC: (semantic.SEMANTIC_VARIANTS, semantic.render_plain),
    MessageStyle.DESCRIPTIVE: (descriptive.DESCRIPTIVE_VARIANTS, descriptive.render_repeat),
}


def get_transform(style: MessageStyle, variant: int) -> VariantTransform:
    """Look up the transform for a (style, variant) pair.

    Args:
        style: The message style.
        variant: Zero-based variant index.

    Returns:
        The variant transform.

    Raises:
        ValueError: If the variant index is negative.
    """
    if variant < 0:
        raise ValueError(f"Invalid variant number: {variant}")
    variants, default = VARIANT_TABLE[style]
    return variants.get(variant, default)


def render_message(parts: MessageParts, style: MessageStyle, variant: int) -> tuple[str, str]:
    """Render a message and its rationale.

    Args:
        parts: Sanitized message parts.
        style: The message style.
        variant: Zero-based variant index.

    Returns:
        Tuple of (message, rationale).
    """
    return get_transform(style, variant)(parts, variant)


__all__ = [
    "VARIANT_TABLE",
    "VariantTransform",
    "get_transform",
    "render_message",
    "replace_word",
    "capitalize_first",
    "commit_example",
]
