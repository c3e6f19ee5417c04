import json
import logging
from pathlib import Path
from typing import Any, Dict, Optional

import exifread
from PIL import Image

try:
    import imagehash
except ImportError:
    imagehash = None

from .. import config
from ..exceptions import MetadataExtractionError
from ..models import ImageSize
from .base import MediaHandler


class BitmapHandler(MediaHandler):
    """
    Raster images (JPEG, PNG, GIF, BMP, TIFF, WebP).

    Strategies:
      - Size, mode and frame count: Pillow.
      - Camera tags: 'exifread' (fast, Python-native).
      - Perceptual hash: 'imagehash' when installed.
    """

    def extract_metadata(self, probe, path: Path) -> str:
        meta: Dict[str, Any] = {}
        try:
            with Image.open(path) as im:
                meta['format'] = im.format
                meta['mode'] = im.mode
                meta['width'], meta['height'] = im.size
                meta['frames'] = getattr(im, 'n_frames', 1)
                phash = self._phash(im, path)
                if phash:
                    meta['phash'] = phash
        except Exception as e:
            # Pillow signals unreadable images with a mix of exception types
            raise MetadataExtractionError(f"Cannot open image {path}: {e}") from e

        if meta['format'] in config.EXIF_FORMATS:
            exif = self._exif_tags(path)
            if exif:
                meta['exif'] = exif

        return json.dumps(meta, sort_keys=True)

    def extract_dimensions(self, probe, path: Path, metadata: str) -> Optional[ImageSize]:
        meta = self._decode(metadata)
        if 'width' in meta and 'height' in meta:
            width, height, mode = meta['width'], meta['height'], meta.get('mode')
        else:
            try:
                with Image.open(path) as im:
                    (width, height), mode = im.size, im.mode
            except Exception as e:
                raise MetadataExtractionError(f"Cannot read image size of {path}: {e}") from e

        bits = config.MODE_BITS.get(mode, config.DEFAULT_MODE_BITS)
        return ImageSize(width=width, height=height, bits=bits)

    # --- Internal Helpers ---

    def _exif_tags(self, path: Path) -> Dict[str, str]:
        try:
            with open(path, 'rb') as f:
                # details=False skips maker notes and thumbnails
                tags = exifread.process_file(f, details=False)
        except Exception as e:
            logging.warning(f"EXIF read failed for {path}: {e}")
            return {}

        if not tags:
            logging.debug(f"No EXIF tags found for {path}")
            return {}
        return {name: str(value).strip() for name, value in tags.items()
                if not name.startswith('JPEGThumbnail')}

    def _phash(self, im, path: Path) -> Optional[str]:
        if imagehash is None:
            return None
        try:
            return str(imagehash.phash(im))
        except Exception as e:
            logging.warning(f"pHash computation failed for {path}: {e}")
            return None

    def _decode(self, metadata: str) -> Dict[str, Any]:
        if not metadata:
            return {}
        try:
            return json.loads(metadata)
        except ValueError:
            return {}
