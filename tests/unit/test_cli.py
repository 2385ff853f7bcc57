import os
import pathlib
import subprocess
import sys
import tempfile

import pytest

import json_validator as jv

SCRIPT = os.path.join(os.path.dirname(__file__), "..", "..", "json_validator.py")

def _write(tmp_path, text):
    path = tmp_path / "doc.json"
    path.write_text(text, encoding="utf-8")
    return str(path)

def test_cli_valid_file_prints_ok():
    with tempfile.NamedTemporaryFile("w", suffix=".json", delete=False) as f:
        f.write('{"a": "b"}')
        fname = f.name
    try:
        cp = subprocess.run([sys.executable, SCRIPT, fname], capture_output=True, text=True)
        assert cp.returncode == 0
        assert "OK" in cp.stdout
    finally:
        pathlib.Path(fname).unlink(missing_ok=True)

def test_cli_invalid_file_returns_1(tmp_path, capsys):
    fname = _write(tmp_path, '{"a": "b",}')
    assert jv._cli([fname]) == 1
    assert "Invalid JSON" in capsys.readouterr().err

def test_cli_missing_file_is_invalid(tmp_path, capsys):
    missing = str(tmp_path / "nope.json")
    assert jv._cli([missing]) == 1
    err = capsys.readouterr().err
    assert "Error opening file" in err
    assert "Invalid JSON" in err

def test_cli_debug_dumps_tokens(tmp_path, capsys):
    fname = _write(tmp_path, '{"a": [1, 2]}')
    assert jv._cli([fname, "--debug"]) == 0
    assert capsys.readouterr().out.splitlines() == ['{', '"a"', ':', '[1, 2]', '}']

def test_cli_allow_zero_flag(tmp_path):
    fname = _write(tmp_path, '{"n": 0}')
    assert jv._cli([fname]) == 1
    assert jv._cli([fname, "--allow-zero"]) == 0

def test_cli_track_depth_and_max_depth_flags(tmp_path):
    fname = _write(tmp_path, '{"a": {"b": {"c": 1}}}')
    assert jv._cli([fname]) == 1
    assert jv._cli([fname, "--track-depth"]) == 0
    assert jv._cli([fname, "--track-depth", "--max-depth", "1"]) == 1

def test_cli_help_describes_every_flag(capsys):
    with pytest.raises(SystemExit) as ei:
        jv._cli(["--help"])
    assert ei.value.code == 0
    out = " ".join(capsys.readouterr().out.split())
    for flag in ("--debug", "--max-depth", "--allow-zero", "--track-depth"):
        assert flag in out
    assert "nested deeper than this" in out
