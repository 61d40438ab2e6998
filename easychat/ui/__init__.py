"""NiceGUI interface - thin visualization layer for chat interactions.

Responsibilities:
    - Conversation display with a typing indicator while a request is in flight
    - File attachment picker with per-file removal
    - Dark/light theme toggle persisted per user

Contains no business logic. Forwards user intents to ChatOrchestrator and
re-renders on its change notifications.
"""
