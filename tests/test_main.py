import json

from fsprobe.main import main, parse_args
from fsprobe.probing.probe import DERIVE


def _lines(capsys):
    return [json.loads(line) for line in capsys.readouterr().out.splitlines()]


def test_parse_args_defaults(tmp_path):
    args = parse_args([str(tmp_path / "a.txt")])
    assert args.ext == DERIVE
    assert args.no_ext is False
    assert args.hash_only is False


def test_main_prints_properties(capsys, sample_png):
    assert main([str(sample_png)]) == 0

    (out,) = _lines(capsys)
    assert out['path'] == str(sample_png)
    assert out['fileExists'] is True
    assert out['mime'] == 'image/png'
    assert out['media_type'] == 'BITMAP'
    assert out['width'] == 32


def test_main_reports_missing_files(capsys, tmp_path, sample_png):
    missing = tmp_path / "missing.jpg"
    assert main([str(sample_png), str(missing)]) == 1

    first, second = _lines(capsys)
    assert first['fileExists'] is True
    assert second['fileExists'] is False
    assert second['sha1'] == ''
    assert second['media_type'] == 'UNKNOWN'


def test_main_hash_only(capsys, tmp_path):
    path = tmp_path / "empty"
    path.write_bytes(b"")

    assert main(["--hash-only", str(path)]) == 0
    assert _lines(capsys) == [{'path': str(path), 'sha1': 'phoiac9h4m842xq45sp7s6u21eteeq1'}]


def test_main_extension_override_and_timestamp(capsys, tmp_path):
    path = tmp_path / "table.dat"
    path.write_text("a,b\n1,2\n", encoding="utf-8")

    assert main(["--ext", "csv", "--timestamp", str(path)]) == 0
    (out,) = _lines(capsys)
    assert out['mime'] == 'text/csv'
    assert len(out['timestamp']) == 14


def test_main_no_ext(capsys, tmp_path):
    path = tmp_path / "table.csv"
    path.write_text("a,b\n1,2\n", encoding="utf-8")

    assert main(["--no-ext", str(path)]) == 0
    (out,) = _lines(capsys)
    assert out['mime'] == 'text/plain'
