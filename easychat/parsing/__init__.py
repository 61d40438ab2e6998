"""Attachment parsing: turns files into content units for a chat turn.

Responsibilities:
    - Dispatch by media type and file name suffix
    - Image passthrough as base64 inline data
    - Text extraction from PDF (pypdf), Word (python-docx),
      spreadsheets (openpyxl / xlrd) and plain text files
    - Graceful "unsupported" marker for everything else
"""

from easychat.parsing.extractor import ROUTES, Route, extract, origin_marker, route_for

__all__ = ["ROUTES", "Route", "extract", "origin_marker", "route_for"]
