import pytest
from PIL import Image

from fsprobe.handlers.base import MediaHandler
from fsprobe.handlers.registry import HandlerRegistry
from fsprobe.models import ImageSize, MediaType


class StubResolver:
    """Resolver returning canned answers and remembering what it was asked."""

    def __init__(self, raw='application/x-stub', mime='application/x-stub',
                 media_type=MediaType.UNKNOWN):
        self.raw = raw
        self.mime = mime
        self.media_type = media_type
        self.refine_calls = []

    def sniff(self, path):
        return self.raw

    def refine(self, raw, ext):
        self.refine_calls.append((raw, ext))
        return self.mime

    def classify(self, path, mime):
        return self.media_type


class StubHandler(MediaHandler):
    def __init__(self, metadata='{"stub": true}', size=None):
        self.metadata = metadata
        self.size = size

    def extract_metadata(self, probe, path):
        return self.metadata

    def extract_dimensions(self, probe, path, metadata):
        return self.size


@pytest.fixture
def stub_resolver():
    return StubResolver()


@pytest.fixture
def empty_registry():
    return HandlerRegistry()


@pytest.fixture
def stub_registry():
    """Registry with a handler for the stub resolver's MIME type."""
    registry = HandlerRegistry()
    registry.register('application/x-stub', StubHandler(size=ImageSize(width=10, height=20)))
    return registry


@pytest.fixture
def sample_png(tmp_path):
    path = tmp_path / "image.png"
    Image.new("RGB", (32, 16), color="red").save(path)
    return path
