from pathlib import Path
from typing import Optional

from ..models import ImageSize


class MediaHandler:
    """
    Extracts handler-specific metadata and dimensions for a family of MIME types.

    Subclasses raise MetadataExtractionError when a file cannot be parsed.
    Returning None from extract_dimensions is the normal answer for content
    that has no pixel size.
    """

    def extract_metadata(self, probe, path: Path) -> str:
        """Serialized metadata blob ('' when there is nothing to record)."""
        return ''

    def extract_dimensions(self, probe, path: Path, metadata: str) -> Optional[ImageSize]:
        return None
