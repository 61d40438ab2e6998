"""Pydantic models for conversation state and service payloads.

Models:
    - TextPart / InlineDataPart: content units (ContentUnit union)
    - Turn: one immutable entry of the conversation log
    - Attachment: a file pending inclusion in the next turn
    - ApiContent / OutboundRequest: the generation service envelope
"""

from easychat.models.schemas import (
    ApiContent,
    Attachment,
    ContentUnit,
    InlineData,
    InlineDataPart,
    OutboundRequest,
    Role,
    TextPart,
    Turn,
)

__all__ = [
    "ApiContent",
    "Attachment",
    "ContentUnit",
    "InlineData",
    "InlineDataPart",
    "OutboundRequest",
    "Role",
    "TextPart",
    "Turn",
]
