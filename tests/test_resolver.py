import pytest

from fsprobe import config
from fsprobe.mime.resolver import TypeResolver, split_mime
from fsprobe.models import MediaType


@pytest.fixture
def resolver():
    return TypeResolver()


def test_sniff_png(resolver, sample_png):
    assert resolver.sniff(sample_png) == 'image/png'


def test_sniff_text(resolver, tmp_path):
    path = tmp_path / "notes"
    path.write_text("just some words\n", encoding="utf-8")
    assert resolver.sniff(path) == 'text/plain'


def test_sniff_svg(resolver, tmp_path):
    path = tmp_path / "drawing"
    path.write_text('<?xml version="1.0"?>\n<svg xmlns="http://www.w3.org/2000/svg"/>\n', encoding="utf-8")
    assert resolver.sniff(path) == 'image/svg+xml'


def test_sniff_unrecognized_binary(resolver, tmp_path):
    path = tmp_path / "blob"
    path.write_bytes(b"\x00\x01\x02\x03garbage\x00")
    assert resolver.sniff(path) == config.UNKNOWN_MIME


def test_sniff_empty_file(resolver, tmp_path):
    path = tmp_path / "empty"
    path.write_bytes(b"")
    assert resolver.sniff(path) == config.UNKNOWN_MIME


def test_sniff_unreadable(resolver, tmp_path):
    assert resolver.sniff(tmp_path / "missing") is None


def test_refine_textual_extension(resolver):
    assert resolver.refine('text/plain', 'csv') == 'text/csv'
    assert resolver.refine('text/plain', 'json') == 'application/json'
    assert resolver.refine('text/plain', 'md') == 'text/markdown'


def test_refine_keeps_specific_content_type(resolver):
    assert resolver.refine('image/png', 'jpg') == 'image/png'
    # .png is not a textual type, so plain text stays plain text
    assert resolver.refine('text/plain', 'png') == 'text/plain'


def test_refine_trusts_extension_for_unknown_content(resolver):
    assert resolver.refine(config.UNKNOWN_MIME, 'txt') == 'text/plain'
    assert resolver.refine(None, 'md') == 'text/markdown'


def test_refine_keeps_unknown_for_recognizable_extension(resolver):
    # A .png we could not recognize is not trusted to be a PNG
    assert resolver.refine(config.UNKNOWN_MIME, 'png') == config.UNKNOWN_MIME


def test_refine_zip_containers(resolver):
    assert resolver.refine('application/zip', 'docx') == (
        'application/vnd.openxmlformats-officedocument.wordprocessingml.document'
    )
    assert resolver.refine('application/zip', 'odt') == 'application/vnd.oasis.opendocument.text'
    assert resolver.refine('application/zip', 'txt') == 'application/zip'


def test_refine_applies_aliases(resolver):
    assert resolver.refine('image/x-ms-bmp', None) == 'image/bmp'
    assert resolver.refine('audio/x-wav', 'wav') == 'audio/wav'


def test_refine_without_extension(resolver):
    assert resolver.refine('text/plain', None) == 'text/plain'
    assert resolver.refine(None, None) is None
    assert resolver.refine(None, '') is None


def test_type_for_extension(resolver):
    assert resolver.type_for_extension('JPG') == 'image/jpeg'
    assert resolver.type_for_extension('psd') == 'image/vnd.adobe.photoshop'
    assert resolver.type_for_extension('nosuchext') is None
    assert resolver.type_for_extension(None) is None


@pytest.mark.parametrize("mime, expected", [
    ('image/png', MediaType.BITMAP),
    ('image/svg+xml', MediaType.DRAWING),
    ('application/pdf', MediaType.OFFICE),
    ('text/csv', MediaType.TEXT),
    ('application/json', MediaType.TEXT),
    ('audio/mpeg', MediaType.AUDIO),
    ('video/mp4', MediaType.VIDEO),
    ('application/zip', MediaType.ARCHIVE),
    ('application/x-msdownload', MediaType.EXECUTABLE),
    ('model/gltf+json', MediaType.MODEL_3D),
    ('application/x-unheard-of', MediaType.UNKNOWN),
    ('unknown/unknown', MediaType.UNKNOWN),
    (None, MediaType.UNKNOWN),
])
def test_classify(resolver, tmp_path, mime, expected):
    assert resolver.classify(tmp_path / "f", mime) == expected


class MockTrack:
    def __init__(self, track_type):
        self.track_type = track_type


def _mock_mediainfo(*track_types):
    class MockMediaInfo:
        def __init__(self, tracks):
            self.tracks = tracks

        @classmethod
        def parse(cls, path):
            return cls([MockTrack(t) for t in track_types])
    return MockMediaInfo


@pytest.mark.parametrize("track_types, expected", [
    (("General", "Video", "Audio"), MediaType.VIDEO),
    (("General", "Audio"), MediaType.AUDIO),
    (("General",), MediaType.MULTIMEDIA),
])
def test_classify_ogg_by_tracks(monkeypatch, resolver, tmp_path, track_types, expected):
    import fsprobe.mime.resolver as resolver_module
    monkeypatch.setattr(resolver_module, "MediaInfo", _mock_mediainfo(*track_types))

    assert resolver.classify(tmp_path / "clip.ogg", 'application/ogg') == expected


def test_classify_ogg_without_mediainfo(monkeypatch, resolver, tmp_path):
    import fsprobe.mime.resolver as resolver_module
    monkeypatch.setattr(resolver_module, "MediaInfo", None)

    assert resolver.classify(tmp_path / "clip.ogg", 'application/ogg') == MediaType.MULTIMEDIA


def test_split_mime():
    assert split_mime('image/png') == ('image', 'png')
    assert split_mime('application/vnd.oasis.opendocument.text') == (
        'application', 'vnd.oasis.opendocument.text'
    )
    assert split_mime('weird') == ('weird', 'unknown')
    assert split_mime(None) == (None, None)
