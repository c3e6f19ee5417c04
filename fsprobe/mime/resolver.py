import logging
import mimetypes
from pathlib import Path
from typing import Any, Optional, Tuple

import filetype

# Type hint 'Any' prevents Pylance from complaining about "None" having no attribute "parse"
MediaInfo: Any = None
try:
    from pymediainfo import MediaInfo
except ImportError:
    MediaInfo = None

from .. import config
from ..exceptions import TypeResolutionError
from ..models import MediaType


def split_mime(mime: Optional[str]) -> Tuple[Optional[str], Optional[str]]:
    """Split 'major/minor'. A value without a '/' gets 'unknown' as its minor part."""
    if mime is None:
        return None, None
    if '/' in mime:
        major, minor = mime.split('/', 1)
        return major, minor
    return mime, 'unknown'


class TypeResolver:
    """
    Works out what a file is.

    Steps:
      - sniff: magic bytes via 'filetype', falling back to a plain-text check.
      - refine: corrects the sniffed type using the file extension.
      - classify: maps the logical MIME type onto a MediaType.
    """

    def __init__(self):
        # A fresh table holds only the built-in defaults, not /etc/mime.types
        self._types = mimetypes.MimeTypes()
        for ext, mime in config.EXTRA_EXTENSION_TYPES.items():
            self._types.add_type(mime, '.' + ext)

    # --- Sniffing ---

    def sniff(self, path: Path) -> Optional[str]:
        """
        Raw MIME type from file content, or None if the file cannot be read.
        """
        try:
            sample = self._read_sample(path)
        except TypeResolutionError as e:
            logging.warning(f"Content sniffing failed for {path}: {e}")
            return None

        if not sample:
            return config.UNKNOWN_MIME

        kind = filetype.guess(sample)
        if kind is not None:
            return kind.mime

        text = self._as_text(sample)
        if text is None:
            return config.UNKNOWN_MIME
        if '<svg' in text:
            return 'image/svg+xml'
        return 'text/plain'

    def _read_sample(self, path: Path) -> bytes:
        try:
            with open(path, 'rb') as f:
                return f.read(config.SNIFF_BYTES)
        except OSError as e:
            raise TypeResolutionError(str(e)) from e

    def _as_text(self, sample: bytes) -> Optional[str]:
        if b'\x00' in sample:
            return None
        try:
            return sample.decode('utf-8')
        except UnicodeDecodeError as e:
            # A multi-byte character cut off by the sample boundary is fine
            if e.start >= len(sample) - 3 and len(sample) == config.SNIFF_BYTES:
                return sample[:e.start].decode('utf-8')
            return None

    # --- Refinement ---

    def type_for_extension(self, ext: Optional[str]) -> Optional[str]:
        """MIME type registered for an extension (without the dot)."""
        if not ext:
            return None
        key = '.' + ext.lower()
        mime = self._types.types_map[True].get(key) or self._types.types_map[False].get(key)
        if mime is None:
            return None
        return config.MIME_ALIASES.get(mime, mime)

    def is_recognizable(self, ext: str) -> bool:
        """True if filetype can identify files of this extension by signature."""
        return filetype.get_type(ext=ext.lower()) is not None

    def refine(self, mime: Optional[str], ext: Optional[str]) -> Optional[str]:
        """
        Improve a sniffed MIME type using the file extension.

        Content wins when it is specific. The extension is trusted when the
        content was not recognized and the extension is not one we could have
        recognized by content, or when it names a more specific flavor of
        a zip container or of plain text.
        """
        ext_mime = self.type_for_extension(ext)
        ext = ext.lower() if ext else ext

        if mime is None or mime in config.GENERIC_MIME_TYPES:
            if ext and self.is_recognizable(ext):
                logging.debug(f"Content of .{ext} file should have been recognized; keeping {mime}")
            elif ext_mime:
                mime = ext_mime
        elif mime == 'application/zip':
            if ext in config.ZIP_CONTAINER_EXTS and ext_mime:
                mime = ext_mime
        elif mime == 'text/plain':
            # csv, json and friends are sniffed as plain text
            if ext_mime and self._classify_mime(ext_mime) == MediaType.TEXT:
                mime = ext_mime

        if mime is not None:
            mime = config.MIME_ALIASES.get(mime, mime)

        logging.debug(f"Improved MIME type for .{ext}: {mime}")
        return mime

    # --- Classification ---

    def classify(self, path: Path, mime: Optional[str]) -> MediaType:
        if mime is None:
            return MediaType.UNKNOWN
        if mime == 'application/ogg':
            return self._classify_ogg(path)
        return self._classify_mime(mime)

    def _classify_mime(self, mime: str) -> MediaType:
        if mime in config.MEDIA_TYPE_BY_MIME:
            return MediaType(config.MEDIA_TYPE_BY_MIME[mime])

        major, _ = split_mime(mime)
        if major in config.MEDIA_TYPE_BY_MAJOR:
            return MediaType(config.MEDIA_TYPE_BY_MAJOR[major])
        return MediaType.UNKNOWN

    def _classify_ogg(self, path: Path) -> MediaType:
        """Ogg is a container; what it holds decides audio vs video."""
        if MediaInfo is None:
            return MediaType.MULTIMEDIA
        try:
            mi = MediaInfo.parse(str(path))
        except Exception as e:
            logging.warning(f"MediaInfo.parse failed for {path}: {e}")
            return MediaType.MULTIMEDIA

        track_types = {track.track_type for track in mi.tracks}
        if 'Video' in track_types:
            return MediaType.VIDEO
        if 'Audio' in track_types:
            return MediaType.AUDIO
        return MediaType.MULTIMEDIA
