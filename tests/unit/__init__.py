"""Unit tests for individual components in isolation.

Coverage:
    - parsing/: per-format decoders and the extractor dispatch table
    - chat/: assembly, store, config, HTTP client and orchestrator
    - models/: validation and wire serialization
"""
