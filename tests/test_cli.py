"""Tests for the command line entry point."""

import pytest

from netpbmkit.app.cli import main, parse_args
from netpbmkit.codec.netpbm import decode_raster
from netpbmkit.codec.types import Magic
from tests.conftest import P2_WITH_COMMENTS, P3_SMALL


@pytest.fixture
def pgm_path(tmp_path):
    path = tmp_path / "input.pgm"
    path.write_bytes(P2_WITH_COMMENTS)
    return path


def test_convert_to_file(pgm_path, tmp_path):
    out = tmp_path / "out.pgm"
    assert main([str(pgm_path), "-o", str(out), "--format", "P5", "--invert"]) == 0
    raster = decode_raster(out.read_bytes())
    assert raster.magic is Magic.P5
    assert raster.data == [[255, 127, 0]]


def test_convert_to_stdout(tmp_path, capsysbinary):
    path = tmp_path / "input.ppm"
    path.write_bytes(P3_SMALL)
    assert main([str(path), "--format", "P6"]) == 0
    assert capsysbinary.readouterr().out == b"P6\n2 1\n255\n" + bytes([255, 0, 0, 0, 0, 255])


def test_info(pgm_path, capsys):
    assert main([str(pgm_path), "--info"]) == 0
    assert "P2 greymap 3x1 max=255" in capsys.readouterr().out


def test_list_formats(capsys):
    assert main(["--list-formats"]) == 0
    out = capsys.readouterr().out
    for magic in Magic:
        assert magic.value in out


def test_missing_path(capsys):
    assert main([]) == 2
    assert "Missing input path" in capsys.readouterr().err


def test_failure_exit_code(tmp_path, capsys):
    assert main([str(tmp_path / "missing.pgm")]) == 2
    assert "File not found" in capsys.readouterr().err


def test_malformed_input_exit_code(tmp_path, capsys):
    path = tmp_path / "broken.pgm"
    path.write_bytes(b"P2\n3\n")
    assert main([str(path)]) == 2
    assert "height" in capsys.readouterr().err


def test_parse_resize():
    args = parse_args(["image.pgm", "--resize", "4x3", "--rotate", "2"])
    assert args.resize == (4, 3)
    assert args.rotate == 2


def test_bad_resize_exits():
    with pytest.raises(SystemExit):
        parse_args(["image.pgm", "--resize", "big"])
