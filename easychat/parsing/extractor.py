"""Attachment extraction: one file in, ordered content units out.

A closed dispatch table maps (media type, file name) to a handler. Routes
are evaluated in order and the first match wins; the last route accepts
everything and degrades to an "unsupported" marker so no file is dropped.
"""

import asyncio
import base64
import logging
from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from easychat.errors import FileReadError, ParseError
from easychat.models import Attachment, ContentUnit, InlineData, InlineDataPart, TextPart
from easychat.parsing.docx_parser import parse_docx
from easychat.parsing.pdf_parser import parse_pdf
from easychat.parsing.spreadsheet_parser import parse_xls, parse_xlsx

logger = logging.getLogger(__name__)

# Suffixes read as text even when the declared media type is not text/*
TEXT_SUFFIXES = (".txt", ".csv", ".json", ".md")

Decoder = Callable[[bytes], list[str]]
Handler = Callable[[Attachment], Awaitable[list[ContentUnit]]]


def origin_marker(name: str) -> str:
    """Header placed before any text extracted from a file."""
    return f"[Content from file: {name}]\n\n"


async def read_bytes(attachment: Attachment) -> bytes:
    """Read the raw bytes of an attachment.

    Raises:
        FileReadError: If the backing file cannot be read.
    """
    if attachment.data is not None:
        return attachment.data
    try:
        return await asyncio.to_thread(attachment.path.read_bytes)
    except OSError as e:
        raise FileReadError(f"Failed to read file {attachment.name}: {e}") from e


async def read_text(attachment: Attachment) -> str:
    """Read an attachment as UTF-8 text."""
    data = await read_bytes(attachment)
    return data.decode("utf-8-sig", errors="replace")


async def _extract_image(attachment: Attachment) -> list[ContentUnit]:
    data = await read_bytes(attachment)
    encoded = base64.b64encode(data).decode("ascii")
    return [InlineDataPart(inline_data=InlineData(mime_type=attachment.mime_type, data=encoded))]


def _document(decoder: Decoder) -> Handler:
    """Wrap a pure bytes decoder into a handler emitting one marked text unit."""

    async def handler(attachment: Attachment) -> list[ContentUnit]:
        data = await read_bytes(attachment)
        try:
            fragments = await asyncio.to_thread(decoder, data)
        except Exception as e:
            raise ParseError(f"Failed to parse file content of {attachment.name}: {e}") from e
        return [TextPart(text=origin_marker(attachment.name) + "".join(fragments))]

    return handler


async def _extract_text(attachment: Attachment) -> list[ContentUnit]:
    text = await read_text(attachment)
    return [TextPart(text=origin_marker(attachment.name) + text)]


async def _unsupported(attachment: Attachment) -> list[ContentUnit]:
    notice = f"(This file type '{attachment.mime_type}' is not supported for text extraction.)"
    return [TextPart(text=origin_marker(attachment.name) + notice)]


@dataclass(frozen=True)
class Route:
    """One entry of the dispatch table.

    Attributes:
        kind: Short label used in logs.
        matches: Predicate on (media type, lower-cased file name).
        handler: Coroutine producing the content units.
    """

    kind: str
    matches: Callable[[str, str], bool]
    handler: Handler


ROUTES: tuple[Route, ...] = (
    Route("image", lambda mime, name: mime.startswith("image/"), _extract_image),
    Route("docx", lambda mime, name: name.endswith(".docx"), _document(parse_docx)),
    Route("pdf", lambda mime, name: name.endswith(".pdf"), _document(parse_pdf)),
    Route("xlsx", lambda mime, name: name.endswith(".xlsx"), _document(parse_xlsx)),
    Route("xls", lambda mime, name: name.endswith(".xls"), _document(parse_xls)),
    Route(
        "text",
        lambda mime, name: mime.startswith("text/") or name.endswith(TEXT_SUFFIXES),
        _extract_text,
    ),
    Route("unsupported", lambda mime, name: True, _unsupported),
)


def route_for(attachment: Attachment) -> Route:
    """Return the first route matching the attachment."""
    mime = attachment.mime_type.lower()
    name = attachment.name.lower()
    return next(r for r in ROUTES if r.matches(mime, name))


async def extract(attachment: Attachment) -> list[ContentUnit]:
    """Convert one attachment into ordered content units.

    Args:
        attachment: The file to extract.

    Returns:
        Content units in emission order (always exactly one today).

    Raises:
        FileReadError: If the file cannot be read.
        ParseError: If a document, PDF or workbook cannot be decoded.
    """
    route = route_for(attachment)
    logger.debug(f"Extracting {attachment.name} ({attachment.mime_type or 'unknown'}) as {route.kind}")
    return await route.handler(attachment)
