"""Integration tests for components working together as a system.

Real files and real extractors; only the remote service is stubbed.
"""
