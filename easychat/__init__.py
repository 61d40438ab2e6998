"""Easychat - a conversational client with file-aware turns.

Keeps a running dialogue with a remote generation service and enriches
user turns with content extracted from attached files.

Components:
    - parsing: per-format extraction of attachments into content units
    - chat: conversation store, turn assembly and request orchestration
    - models: Pydantic schemas for turns, content units and requests
    - ui: NiceGUI chat page (presentation only)
"""

__version__ = "0.1.0"
