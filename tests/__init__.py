"""Test package for Easychat.

Structure:
    - unit/: parsers, extractor dispatch, assembly, store, config, orchestration
    - integration/: full send cycles with real files on disk

The generation service is always stubbed with httpx.MockTransport; sample
documents are generated by fixtures in conftest.py. Leverages pytest with
pytest-check for soft assertions.
"""
