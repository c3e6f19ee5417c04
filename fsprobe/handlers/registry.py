import logging
from typing import Dict, Iterable, List, Optional, Union

from .. import config
from .base import MediaHandler
from .bitmap import BitmapHandler
from .media import MediaInfoHandler
from .psd import PsdHandler


class HandlerRegistry:
    """Maps logical MIME types to the handler responsible for them."""

    def __init__(self):
        self._handlers: Dict[str, MediaHandler] = {}

    def register(self, mime_types: Union[str, Iterable[str]], handler: MediaHandler) -> None:
        if isinstance(mime_types, str):
            mime_types = [mime_types]
        for mime in mime_types:
            self._handlers[mime] = handler

    def get(self, mime: Optional[str]) -> Optional[MediaHandler]:
        """Handler for `mime`, or None when nothing is registered for it."""
        if mime is None:
            return None
        handler = self._handlers.get(mime)
        if handler is None:
            logging.debug(f"No media handler registered for {mime}")
        return handler

    def mime_types(self) -> List[str]:
        return sorted(self._handlers)

    def __contains__(self, mime) -> bool:
        return mime in self._handlers

    def __len__(self) -> int:
        return len(self._handlers)


def default_registry() -> HandlerRegistry:
    """Registry populated with the built-in bitmap, PSD and audio/video handlers."""
    registry = HandlerRegistry()
    registry.register(config.BITMAP_MIME_TYPES, BitmapHandler())
    registry.register(config.PSD_MIME_TYPES, PsdHandler())
    registry.register(config.MEDIA_MIME_TYPES, MediaInfoHandler())
    return registry
