"""Public surface for the track library feature."""

from .usecases import (
    Library,
    LibraryEvent,
    MetadataExtractor,
    new_library,
    scan_directory,
)

__all__ = [
    "Library",
    "LibraryEvent",
    "MetadataExtractor",
    "new_library",
    "scan_directory",
]
