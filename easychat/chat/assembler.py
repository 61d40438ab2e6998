"""Turn assembly: history, input text and attachments into one request."""

import asyncio
import logging
from collections.abc import Awaitable, Callable, Sequence

from easychat.models import (
    ApiContent,
    Attachment,
    ContentUnit,
    OutboundRequest,
    Role,
    TextPart,
    Turn,
)
from easychat.parsing import extract

logger = logging.getLogger(__name__)

Extractor = Callable[[Attachment], Awaitable[list[ContentUnit]]]


def attachment_summary(count: int) -> str:
    return f"(Attached: {count} files)"


def to_api_content(turn: Turn) -> ApiContent:
    """Map a stored turn to its service form, keeping text units only.

    Inline data from earlier turns is not resent. A turn with no text at
    all is represented by an attachment summary so its slot in the
    user/model alternation is kept.
    """
    role = "user" if turn.role is Role.USER else "model"
    parts: list[ContentUnit] = [p for p in turn.content if isinstance(p, TextPart)]
    if not parts:
        parts = [TextPart(text=attachment_summary(len(turn.attachments)))]
    return ApiContent(role=role, parts=parts)


def build_history(turns: Sequence[Turn]) -> list[ApiContent]:
    return [to_api_content(t) for t in turns]


def can_assemble(input_text: str, attachments: Sequence[Attachment]) -> bool:
    """Whether there is anything to send."""
    return bool(input_text.strip()) or bool(attachments)


async def assemble(
    input_text: str,
    attachments: Sequence[Attachment],
    history: Sequence[Turn],
    extractor: Extractor = extract,
) -> OutboundRequest:
    """Build the outbound request for one send.

    Attachments are extracted concurrently; their units are placed in
    attachment order whatever the completion order. Any extraction failure
    cancels the remaining extractions and propagates, aborting the whole
    request.

    Args:
        input_text: Free text typed by the user.
        attachments: Pending attachments, in selection order.
        history: Stored turns, oldest first.
        extractor: Per-file extraction coroutine.

    Returns:
        The request to send.

    Raises:
        ValueError: If there is neither text nor an attachment.
        FileReadError: If an attachment cannot be read.
        ParseError: If an attachment cannot be decoded.
    """
    if not can_assemble(input_text, attachments):
        raise ValueError("Nothing to send: empty input and no attachments")

    parts: list[ContentUnit] = []
    text = input_text.strip()
    if text:
        parts.append(TextPart(text=text))

    if attachments:
        try:
            async with asyncio.TaskGroup() as group:
                tasks = [group.create_task(extractor(a)) for a in attachments]
        except ExceptionGroup as eg:
            # First failing file wins
            raise eg.exceptions[0] from None
        for task in tasks:
            parts.extend(task.result())

    logger.debug(f"Assembled turn with {len(parts)} parts from {len(attachments)} attachments")

    return OutboundRequest(
        history=build_history(history),
        new_turn=ApiContent(role="user", parts=parts),
    )
