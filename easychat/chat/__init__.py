"""Conversation core: store, turn assembly and request orchestration.

Responsibilities:
    - Append-only conversation log rendered by the UI
    - Merging history, typed text and extracted attachments into one request
    - Single-shot calls to the Gemini generateContent endpoint
    - Mapping every failure of a send to a visible bot turn
"""

from easychat.chat.assembler import assemble, build_history
from easychat.chat.config import ChatConfig, get_chat_config
from easychat.chat.gemini_client import GeminiClient
from easychat.chat.orchestrator import Change, ChatOrchestrator
from easychat.chat.store import ConversationStore

__all__ = [
    "Change",
    "ChatConfig",
    "ChatOrchestrator",
    "ConversationStore",
    "GeminiClient",
    "assemble",
    "build_history",
    "get_chat_config",
]
