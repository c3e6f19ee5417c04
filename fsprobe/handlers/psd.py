import json
import logging
from pathlib import Path
from typing import Any, Dict, Optional

from psd_tools import PSDImage

from ..exceptions import MetadataExtractionError
from ..models import ImageSize
from .base import MediaHandler


class PsdHandler(MediaHandler):
    """Photoshop documents, read with psd-tools."""

    def extract_metadata(self, probe, path: Path) -> str:
        try:
            psd = PSDImage.open(str(path))
        except Exception as e:
            raise MetadataExtractionError(f"Failed to parse PSD {path}: {e}") from e

        meta: Dict[str, Any] = {
            'width': psd.width,
            'height': psd.height,
            'depth': psd.depth,
            'channels': psd.channels,
            'color_mode': getattr(psd.color_mode, 'name', str(psd.color_mode)),
            'version': psd.version,
        }
        try:
            meta['layers'] = sum(1 for _ in psd.descendants())
        except Exception as e:
            logging.debug(f"Failed to walk PSD layers of {path}: {e}")

        return json.dumps(meta, sort_keys=True)

    def extract_dimensions(self, probe, path: Path, metadata: str) -> Optional[ImageSize]:
        try:
            meta = json.loads(metadata) if metadata else {}
        except ValueError:
            meta = {}

        if 'width' not in meta or 'height' not in meta:
            try:
                psd = PSDImage.open(str(path))
            except Exception as e:
                raise MetadataExtractionError(f"Failed to parse PSD {path}: {e}") from e
            meta = {'width': psd.width, 'height': psd.height, 'depth': psd.depth}

        return ImageSize(width=meta['width'], height=meta['height'], bits=meta.get('depth'))
