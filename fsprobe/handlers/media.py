import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional

# Type hint 'Any' prevents Pylance from complaining about "None" having no attribute "parse"
MediaInfo: Any = None
try:
    from pymediainfo import MediaInfo
except ImportError:
    MediaInfo = None

from ..exceptions import MetadataExtractionError
from ..models import ImageSize
from .base import MediaHandler

# Track attributes worth keeping, per MediaInfo track type
TRACK_FIELDS = {
    'General': ('format', 'duration', 'overall_bit_rate'),
    'Video': ('format', 'codec_id', 'duration', 'bit_rate', 'width', 'height',
              'bit_depth', 'frame_rate'),
    'Audio': ('format', 'codec_id', 'duration', 'bit_rate', 'bit_depth',
              'sampling_rate', 'channel_s'),
}


class MediaInfoHandler(MediaHandler):
    """
    Audio and video containers, parsed with 'pymediainfo'.

    Durations are stored in seconds. Only files with a video track have
    pixel dimensions.
    """

    def extract_metadata(self, probe, path: Path) -> str:
        if MediaInfo is None:
            logging.info(f"pymediainfo not installed; skipping media metadata for {path}")
            return ''

        try:
            mi = MediaInfo.parse(str(path))
        except Exception as e:
            raise MetadataExtractionError(f"MediaInfo.parse failed for {path}: {e}") from e

        tracks: List[Dict[str, Any]] = []
        for track in mi.tracks:
            fields = TRACK_FIELDS.get(track.track_type)
            if fields is None:
                continue
            data: Dict[str, Any] = {'track_type': track.track_type}
            for field in fields:
                value = getattr(track, field, None)
                if value is None:
                    continue
                if field == 'duration':
                    # MediaInfo duration is in milliseconds
                    value = self._number(value)
                    value = value / 1000.0 if value is not None else None
                elif field not in ('format', 'codec_id'):
                    value = self._number(value)
                if value is not None:
                    data[field] = value
            tracks.append(data)

        return json.dumps({'tracks': tracks}, sort_keys=True)

    def extract_dimensions(self, probe, path: Path, metadata: str) -> Optional[ImageSize]:
        if not metadata:
            return None
        try:
            tracks = json.loads(metadata).get('tracks', [])
        except ValueError as e:
            raise MetadataExtractionError(f"Unreadable media metadata for {path}: {e}") from e

        for track in tracks:
            if track.get('track_type') == 'Video' and track.get('width') and track.get('height'):
                bits = track.get('bit_depth')
                return ImageSize(
                    width=int(track['width']),
                    height=int(track['height']),
                    bits=int(bits) if bits is not None else None,
                )
        return None

    def _number(self, value) -> Optional[float]:
        """MediaInfo reports numbers as int, float or string depending on version."""
        if isinstance(value, (int, float)):
            return value
        try:
            return float(str(value).split()[0])
        except (ValueError, IndexError):
            return None
