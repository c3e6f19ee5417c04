from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional


class MediaType(str, Enum):
    """Coarse classification of a file's content."""
    UNKNOWN = 'UNKNOWN'
    BITMAP = 'BITMAP'
    DRAWING = 'DRAWING'
    AUDIO = 'AUDIO'
    VIDEO = 'VIDEO'
    MULTIMEDIA = 'MULTIMEDIA'
    OFFICE = 'OFFICE'
    TEXT = 'TEXT'
    EXECUTABLE = 'EXECUTABLE'
    ARCHIVE = 'ARCHIVE'
    MODEL_3D = '3D'


@dataclass
class ImageSize:
    """
    Dimensions reported by a media handler.
    """
    width: int
    height: int
    bits: Optional[int] = None  # bit depth or bitrate, handler specific

    def as_props(self) -> Dict[str, int]:
        return {
            'width': self.width,
            'height': self.height,
            'bits': self.bits if self.bits is not None else 0,
        }


# Every record carries exactly these keys, in this order
PROPERTY_KEYS = (
    'fileExists',
    'size',
    'file-mime',
    'major_mime',
    'minor_mime',
    'mime',
    'media_type',
    'metadata',
    'sha1',
    'width',
    'height',
    'bits',
)


def placeholder_props() -> Dict[str, Any]:
    """
    Properties of a file that does not exist.

    Callers rely on this exact shape for missing files, so every probe result
    starts from a fresh copy of it.
    """
    return {
        'fileExists': False,
        'size': 0,
        'file-mime': None,
        'major_mime': None,
        'minor_mime': None,
        'mime': None,
        'media_type': MediaType.UNKNOWN,
        'metadata': '',
        'sha1': '',
        'width': 0,
        'height': 0,
        'bits': 0,
    }
