"""Suggestion synthesis.

Turns a ChangeAggregate into one CommitSuggestion per requested variant.
Synthesis is a pure function of its inputs and never raises: any failure
produces a fallback suggestion instead.
"""

import logging
from typing import Union

from commitsmith.analysis.models import ChangeAggregate
from commitsmith.styles.constants import (
    FALLBACK_MESSAGE,
    MAX_MESSAGE_LENGTH,
    MessageStyle,
    Priority,
)
from commitsmith.styles.models import CommitSuggestion, MessageParts
from commitsmith.styles.renderers import commit_example, render_message

logger = logging.getLogger(__name__)


def priority_for(variant: int) -> Priority:
    """Variant 0 is primary, everything else an alternative."""
    return Priority.PRIMARY if variant == 0 else Priority.ALTERNATIVE


def fallback_suggestion(
    style: Union[MessageStyle, str],
    variant: int,
    error: Exception,
) -> CommitSuggestion:
    """Build the suggestion returned when rendering fails.

    Args:
        style: Requested style (falls back to conventional if unknown).
        variant: Zero-based variant index.
        error: The failure that triggered the fallback.

    Returns:
        CommitSuggestion with the fallback message.
    """
    try:
        safe_style = MessageStyle(style)
    except ValueError:
        safe_style = MessageStyle.CONVENTIONAL

    return CommitSuggestion(
        message=FALLBACK_MESSAGE,
        type="feat",
        scope=None,
        rationale=f"Fallback suggestion due to error: {error}",
        style=safe_style,
        example=commit_example(FALLBACK_MESSAGE),
        priority=priority_for(variant),
        length=len(FALLBACK_MESSAGE),
    )


def synthesize_suggestion(
    aggregate: ChangeAggregate,
    style: Union[MessageStyle, str],
    include_scope: bool,
    variant: int,
) -> CommitSuggestion:
    """Render one suggestion for a classified change set.

    Args:
        aggregate: The change classification.
        style: Message style.
        include_scope: Whether the scope may appear in the message.
        variant: Zero-based variant index.

    Returns:
        The suggestion, or a fallback suggestion if rendering failed.
    """
    try:
        message_style = MessageStyle(style)
        parts = MessageParts.build(aggregate.type, aggregate.scope, aggregate.description, include_scope)
        message, rationale = render_message(parts, message_style, variant)

        if len(message) > MAX_MESSAGE_LENGTH:
            logger.warning(
                "Generated commit message is quite long (%d chars): %s", len(message), message
            )

        return CommitSuggestion(
            message=message,
            type=parts.type,
            scope=parts.scope or None,
            rationale=rationale,
            style=message_style,
            example=commit_example(message),
            priority=priority_for(variant),
            length=len(message),
        )
    except Exception as e:
        logger.warning("Error generating suggestion %d: %s", variant, e)
        return fallback_suggestion(style, variant, e)
