"""Data models for commitsmith styles module.

Contains:
- MessageParts: Sanitized type/scope/description handed to renderers
- CommitSuggestion: Pydantic model for one suggested commit message
"""

from dataclasses import dataclass
from typing import Optional

from pydantic import BaseModel, ConfigDict, model_validator

from commitsmith.styles.constants import MessageStyle, Priority


@dataclass(frozen=True)
class MessageParts:
    """Inputs of a render: type and scope lower-cased, all trimmed."""

    type: str
    scope: str
    description: str

    @classmethod
    def build(cls, type: str, scope: Optional[str], description: str, include_scope: bool = True) -> "MessageParts":
        """Sanitize raw classification fields.

        Args:
            type: Commit type.
            scope: Scope token (may be empty or None).
            description: Change description.
            include_scope: Drop the scope when False.

        Returns:
            MessageParts ready for rendering.
        """
        safe_scope = scope.lower().strip() if scope and include_scope else ""
        return cls(type=type.lower().strip(), scope=safe_scope, description=description.strip())


class CommitSuggestion(BaseModel):
    """A single suggested commit message.

    Attributes:
        message: The commit message.
        type: Commit type the message was built from.
        scope: Scope included in the message, if any.
        rationale: Why this phrasing was chosen.
        style: Style the message follows.
        example: Shell command committing with this message.
        priority: primary for variant 0, alternative otherwise.
        length: Character length of message.
    """

    model_config = ConfigDict(use_enum_values=True, validate_default=True)

    message: str
    type: str
    scope: Optional[str] = None
    rationale: str
    style: MessageStyle = MessageStyle.CONVENTIONAL
    example: Optional[str] = None
    priority: Priority = Priority.PRIMARY
    length: int = -1

    @model_validator(mode="after")
    def check_length(self):
        """Fill in or verify the message length."""
        if self.length == -1:
            self.length = len(self.message)
        elif self.length != len(self.message):
            raise ValueError(f"length {self.length} does not match message length {len(self.message)}")
        return self
