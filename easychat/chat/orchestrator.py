"""Request orchestration: one user send action from composer to stored reply.

State per send: Idle -> Composing -> Sending -> Idle. While sending, a
second send is rejected outright. Every failure inside a cycle becomes a
bot turn; nothing propagates to the presentation layer.
"""

import logging
from collections.abc import Callable, Iterable
from enum import Enum

import httpx

from easychat.chat.assembler import Extractor, assemble, can_assemble
from easychat.chat.config import ChatConfig, get_chat_config
from easychat.chat.gemini_client import GeminiClient
from easychat.chat.store import ConversationStore
from easychat.errors import ChatError, ConfigurationError
from easychat.models import Attachment, ContentUnit, Role, TextPart, Turn
from easychat.parsing import extract

logger = logging.getLogger(__name__)


class Change(str, Enum):
    """What a state-change notification is about."""

    TEXT = "text"  # composer text only
    ATTACHMENTS = "attachments"
    CONVERSATION = "conversation"  # turns, sending flag or the whole composer


Listener = Callable[[Change], None]


class ChatOrchestrator:
    """Owns the composer state and drives each send cycle.

    Wraps the assembler and the Gemini client with:
    - a single in-flight request gate (``is_sending``)
    - conversion of every failure into a bot turn
    - change notifications for the presentation layer

    Args:
        config: Service configuration. Loads from environment if not provided.
        store: Conversation log. A fresh one is created if not provided.
        transport: Optional httpx transport for the service client.
        extractor: Per-attachment extraction coroutine.
    """

    def __init__(
        self,
        config: ChatConfig | None = None,
        store: ConversationStore | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
        extractor: Extractor = extract,
    ) -> None:
        self._config = config or get_chat_config()
        self._store = store or ConversationStore()
        self._client = GeminiClient(self._config, transport=transport)
        self._extractor = extractor
        self._listeners: list[Listener] = []

        self.input_text: str = ""
        self.attachments: list[Attachment] = []
        self.is_sending: bool = False

    @property
    def store(self) -> ConversationStore:
        return self._store

    @property
    def can_send(self) -> bool:
        """Whether a send would be accepted right now."""
        return not self.is_sending and can_assemble(self.input_text, self.attachments)

    def add_listener(self, listener: Listener) -> None:
        """Register a callback run with the kind of every state change."""
        self._listeners.append(listener)

    def _notify(self, change: Change) -> None:
        for listener in self._listeners:
            listener(change)

    # === Intents ===

    def submit_text(self, text: str) -> None:
        self.input_text = text
        self._notify(Change.TEXT)

    def attach_files(self, files: Iterable[Attachment]) -> None:
        self.attachments.extend(files)
        self._notify(Change.ATTACHMENTS)

    def remove_attachment(self, attachment: Attachment) -> None:
        """Remove one pending attachment (by identity, not equality)."""
        self.attachments = [a for a in self.attachments if a is not attachment]
        self._notify(Change.ATTACHMENTS)

    async def send_turn(self) -> bool:
        """Run one orchestration cycle.

        Returns:
            False if the send was refused (nothing to send, or a request
            is already in flight), True once the cycle has completed.
        """
        if not self.can_send:
            logger.debug("Send refused: nothing to send or a request is in flight")
            return False

        self.is_sending = True
        self._notify(Change.CONVERSATION)
        try:
            await self._run_cycle()
        except ConfigurationError as e:
            logger.error(f"Configuration error: {e}")
            self._append_bot(f"Error: {e}")
        except ChatError as e:
            logger.warning(f"Send failed: {e}")
            self._append_bot(f"Sorry, an error occurred: {e}")
        except Exception:
            logger.exception("Unexpected error during send")
            self._append_bot("Sorry, an error occurred: An unknown error occurred.")
        finally:
            self.is_sending = False
            self._notify(Change.CONVERSATION)
        return True

    # === Cycle ===

    async def _run_cycle(self) -> None:
        if not self._config.api_key:
            raise ConfigurationError("API Key not configured.")

        attachments = tuple(self.attachments)
        request = await assemble(
            self.input_text,
            attachments,
            self._store.snapshot(),
            extractor=self._extractor,
        )

        self._store.append(
            Turn(
                id=self._store.next_id(),
                role=Role.USER,
                content=tuple(request.new_turn.parts),
                attachments=tuple(a.name for a in attachments),
            )
        )
        self.input_text = ""
        self.attachments = []
        self._notify(Change.CONVERSATION)

        reply = await self._client.generate(request)
        self._append_bot(reply)

    def _append_bot(self, text: str) -> Turn:
        content: tuple[ContentUnit, ...] = (TextPart(text=text),)
        turn = Turn(id=self._store.next_id(), role=Role.BOT, content=content)
        self._store.append(turn)
        return turn
