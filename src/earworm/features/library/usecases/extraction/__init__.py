"""
Summary: Public surface for track metadata extraction.
Why: Provide a stable import path for the library and tests.
"""

from ._tag_utils import first_text, select_cover, title_from_path
from .track_extractor import MetadataExtractor

__all__ = [
    "MetadataExtractor",
    "first_text",
    "select_cover",
    "title_from_path",
]
