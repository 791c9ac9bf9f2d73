"""Tests for the command line decoder."""
import base64
import json
import struct

from bindb.cli import main


def _database() -> bytes:
    return (
        struct.pack("<Bi", 0, 42) + b"\x01"
        + struct.pack("<Bi", 6, 43) + b"Hello World\x00"
    )


def test_decode_file(tmp_path, capsys):
    path = tmp_path / "db.bin"
    path.write_bytes(_database())
    assert main([str(path)]) == 0
    out = json.loads(capsys.readouterr().out)
    assert out == {"42": True, "43": "Hello World"}


def test_decode_b64_file(tmp_path, capsys):
    path = tmp_path / "db.txt"
    path.write_text(base64.b64encode(_database()).decode() + "\n")
    assert main(["--b64", str(path)]) == 0
    out = json.loads(capsys.readouterr().out)
    assert out["43"] == "Hello World"


def test_decode_failure_exit_code(tmp_path, capsys):
    path = tmp_path / "bad.bin"
    path.write_bytes(_database() + b"\x00")
    assert main([str(path)]) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "trailing" in captured.err


def test_strict_booleans_flag(tmp_path, capsys):
    path = tmp_path / "bool.bin"
    path.write_bytes(struct.pack("<Bi", 0, 1) + b"\x02")
    assert main([str(path)]) == 0
    capsys.readouterr()
    assert main(["--strict-booleans", str(path)]) == 1


def test_missing_file(tmp_path, capsys):
    assert main([str(tmp_path / "nope.bin")]) == 1
    assert "cannot read" in capsys.readouterr().err
