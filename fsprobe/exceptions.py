"""
Custom exception hierarchy for the file prober.

Probe operations catch these internally and degrade to an "unknown" result,
so they rarely reach callers of the public API.
"""


class FileProbeError(Exception):
    """Base exception for all file probe errors."""
    pass


class FileStatError(FileProbeError):
    """Raised when a file cannot be stat'ed."""
    pass


class FileHashError(FileProbeError):
    """Raised when file hashing fails."""
    pass


class TypeResolutionError(FileProbeError):
    """Raised when a file's content type cannot be sniffed."""
    pass


class MetadataExtractionError(FileProbeError):
    """Raised when a media handler cannot extract metadata from a file."""
    pass
