import mimetypes
from enum import Enum
from pathlib import Path
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, model_validator


class Role(str, Enum):
    """Author of a stored turn."""

    USER = "user"
    BOT = "bot"


class TextPart(BaseModel):
    """A plain text content unit."""

    model_config = ConfigDict(frozen=True)

    text: str


class InlineData(BaseModel):
    """Base64 payload tagged with its media type."""

    model_config = ConfigDict(frozen=True)

    mime_type: str
    data: str


class InlineDataPart(BaseModel):
    """A binary content unit sent inline (images)."""

    model_config = ConfigDict(frozen=True)

    inline_data: InlineData


ContentUnit = TextPart | InlineDataPart


class Turn(BaseModel):
    """One entry of the conversation log.

    Attributes:
        id: Monotonic identifier, stable key for rendering.
        role: Who authored the turn.
        content: Ordered content units.
        attachments: Names of the files that contributed to the turn.
    """

    model_config = ConfigDict(frozen=True)

    id: int = Field(ge=1)
    role: Role
    content: tuple[ContentUnit, ...]
    attachments: tuple[str, ...] = ()

    @property
    def text(self) -> str:
        """Text units of the turn joined by blank lines."""
        return "\n\n".join(p.text for p in self.content if isinstance(p, TextPart))


class Attachment(BaseModel):
    """A file selected by the user for the next outgoing turn.

    Exactly one byte source is set: a local ``path`` or in-memory ``data``
    (as delivered by an upload widget).
    """

    name: str = Field(..., min_length=1)
    mime_type: str = ""
    path: Path | None = None
    data: bytes | None = None

    @model_validator(mode="after")
    def check_source(self) -> "Attachment":
        """Require exactly one of path and data."""
        if (self.path is None) == (self.data is None):
            raise ValueError("Attachment needs exactly one of 'path' or 'data'")
        return self

    @classmethod
    def from_path(cls, path: Path | str, mime_type: str | None = None) -> "Attachment":
        """Build an attachment for a local file, guessing the media type from its name."""
        path = Path(path)
        if mime_type is None:
            mime_type = mimetypes.guess_type(path.name)[0] or ""
        return cls(name=path.name, mime_type=mime_type, path=path)


class ApiContent(BaseModel):
    """One role/parts entry of the service envelope."""

    role: Literal["user", "model"]
    parts: list[ContentUnit]


class OutboundRequest(BaseModel):
    """The request built for one orchestration cycle.

    Attributes:
        history: Prior turns in service form, oldest first.
        new_turn: The user turn being sent.
    """

    history: list[ApiContent] = Field(default_factory=list)
    new_turn: ApiContent

    def to_payload(self) -> dict:
        """Serialize into the ``{"contents": [...]}`` envelope."""
        contents = [*self.history, self.new_turn]
        return {"contents": [c.model_dump() for c in contents]}
