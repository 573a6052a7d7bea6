"""
Summary: Shared domain records and errors used across features.
Why: Provide a stable import path for entities every layer needs.
"""

from .errors import (
    EarwormError,
    EmptyLibraryError,
    InvalidCandidateCountError,
    MetadataError,
    NoMetadataError,
)
from .track import CoverImage, Track

__all__ = [
    "CoverImage",
    "EarwormError",
    "EmptyLibraryError",
    "InvalidCandidateCountError",
    "MetadataError",
    "NoMetadataError",
    "Track",
]
