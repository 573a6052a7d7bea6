"""
Summary: Library scanning and metadata extraction usecases.
Why: Expose the library and extractor through one import path.
"""

from .extraction import MetadataExtractor
from .library import Library, new_library, scan_directory
from .library_types import LibraryEvent, ScanLogContext

__all__ = [
    "Library",
    "LibraryEvent",
    "MetadataExtractor",
    "ScanLogContext",
    "new_library",
    "scan_directory",
]
