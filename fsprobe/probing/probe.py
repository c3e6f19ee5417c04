import hashlib
import logging
import os
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, Optional, Union

from .. import config
from ..exceptions import FileHashError, FileStatError
from ..handlers.registry import HandlerRegistry, default_registry
from ..mime.resolver import TypeResolver, split_mime
from ..models import ImageSize, placeholder_props
from .encoding import extension_from_path, sha1_hex_to_base36

DERIVE = config.DERIVE_EXTENSION

# Extension hint: DERIVE, an explicit extension, or None/False to ignore it
ExtensionHint = Union[str, bool, None]


class FileProbe:
    """
    A non-directory file on local disk.

    Each query goes straight to the filesystem; nothing is held open between
    calls. The only state is the SHA-1, cached after the first successful
    computation until a recompute is asked for.
    """

    def __init__(self,
                 path: Union[str, Path],
                 resolver: Optional[TypeResolver] = None,
                 handlers: Optional[HandlerRegistry] = None):
        self._path = Path(path)
        self._sha1_base36: Optional[str] = None
        self.resolver = resolver if resolver is not None else TypeResolver()
        self.handlers = handlers if handlers is not None else default_registry()

    @property
    def path(self) -> Path:
        return self._path

    def __repr__(self) -> str:
        return f"FileProbe({str(self._path)!r})"

    # --- Filesystem queries ---

    def exists(self) -> bool:
        """True if the path is a regular file right now."""
        # os.path.isfile swallows permission errors too
        return os.path.isfile(self._path)

    def size(self) -> Optional[int]:
        """File size in bytes, or None if the file cannot be stat'ed."""
        try:
            return self._stat().st_size
        except FileStatError as e:
            logging.warning(f"Cannot get size of {self._path}: {e}")
            return None

    def modified_at(self) -> Optional[str]:
        """Last-modified time as a 14-digit UTC timestamp, or None on failure."""
        try:
            mtime = self._stat().st_mtime
        except FileStatError as e:
            logging.warning(f"Cannot get timestamp of {self._path}: {e}")
            return None
        return datetime.fromtimestamp(mtime, tz=timezone.utc).strftime(config.TIMESTAMP_FORMAT)

    def sha1_base36(self, recache: bool = False) -> Optional[str]:
        """
        SHA-1 of the file contents in lowercase base 36, zero padded to 31 digits.

        Returns None if the file cannot be read in full. A failed attempt
        clears the cache so the next call tries again.
        """
        if self._sha1_base36 is not None and not recache:
            return self._sha1_base36

        try:
            hexdigest = self._sha1_hex()
        except FileHashError as e:
            logging.warning(f"Failed to hash {self._path}: {e}")
            self._sha1_base36 = None
            return None

        self._sha1_base36 = sha1_hex_to_base36(hexdigest)
        return self._sha1_base36

    # --- Properties ---

    def properties(self, ext: ExtensionHint = DERIVE) -> Dict[str, Any]:
        """
        Everything known about the file, always with the same set of keys.

        Args:
            ext: DERIVE (or True) to take the extension from the path, None/False to
                 ignore the extension, anything else is used as-is.

        A missing file gets the placeholder record. Failures after that
        degrade the affected fields only.
        """
        info = placeholder_props()
        info['fileExists'] = self.exists()
        if not info['fileExists']:
            return info

        size = self.size()
        if size is not None:
            info['size'] = size
        info['sha1'] = self.sha1_base36() or ''

        if ext is True or ext == DERIVE:
            ext = extension_from_path(self._path)
        elif ext is None or ext is False:
            ext = None

        try:
            self._resolve_type(info, ext)
        except Exception as e:
            logging.warning(f"Type resolution failed for {self._path}: {e}")

        # Height, width and metadata
        info.update(self._handler_props(info['mime']))
        return info

    # --- Internal Helpers ---

    def _stat(self) -> os.stat_result:
        try:
            return os.stat(self._path)
        except OSError as e:
            raise FileStatError(str(e)) from e

    def _sha1_hex(self) -> str:
        """Reads entire file."""
        h = hashlib.sha1()
        try:
            with open(self._path, 'rb') as f:
                while chunk := f.read(config.HASH_CHUNK_SIZE):
                    h.update(chunk)
        except OSError as e:
            raise FileHashError(str(e)) from e
        return h.hexdigest()

    def _resolve_type(self, info: Dict[str, Any], ext: Optional[str]) -> None:
        # MIME type according to file contents
        info['file-mime'] = self.resolver.sniff(self._path)

        # Logical MIME type; set together with its halves so they never disagree
        mime = self.resolver.refine(info['file-mime'], ext)
        major, minor = split_mime(mime)
        info['mime'], info['major_mime'], info['minor_mime'] = mime, major, minor

        info['media_type'] = self.resolver.classify(self._path, mime)

    def _handler_props(self, mime: Optional[str]) -> Dict[str, Any]:
        handler = self.handlers.get(mime)
        if handler is None:
            return {}

        props: Dict[str, Any] = {}
        try:
            props['metadata'] = handler.extract_metadata(self, self._path) or ''
            size = handler.extract_dimensions(self, self._path, props['metadata'])
        except Exception as e:
            logging.warning(f"Metadata extraction failed for {self._path} ({mime}): {e}")
            return props

        if isinstance(size, ImageSize):
            props.update(size.as_props())
        return props


def properties_from_path(path: Union[str, Path],
                         ext: ExtensionHint = DERIVE,
                         resolver: Optional[TypeResolver] = None,
                         handlers: Optional[HandlerRegistry] = None) -> Dict[str, Any]:
    """Properties of a file in the local filesystem."""
    return FileProbe(path, resolver=resolver, handlers=handlers).properties(ext)


def sha1_base36_from_path(path: Union[str, Path]) -> Optional[str]:
    """Base-36 SHA-1 of a file in the local filesystem, or None on failure."""
    return FileProbe(path).sha1_base36()
