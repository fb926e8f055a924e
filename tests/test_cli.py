from __future__ import annotations

import json
from pathlib import Path

import pytest

from statpipe.cli import main, read_values
from statpipe.codec import encode
from statpipe.errors import InputError


def test_run_json_output(capsys):
    code = main(["--log-level", "WARNING", "run", "--json", "5", "3", "8", "1", "9", "7", "15", "22", "19"])
    assert code == 0
    out = json.loads(capsys.readouterr().out)
    assert out["filtered"] == [118, 604, 794, 1012, 4904, 6720]


def test_run_defaults_to_example_input(capsys):
    assert main(["--log-level", "WARNING", "run", "--json"]) == 0
    out = json.loads(capsys.readouterr().out)
    assert out["filtered"] == [118, 604, 794, 1012, 4904, 6720]


def test_run_from_file_and_config(tmp_path: Path, capsys):
    data = tmp_path / "values.txt"
    data.write_text("5, 3, 8\n1 9 7\n15;22;19\n", encoding="utf-8")
    cfg = tmp_path / "config.yaml"
    cfg.write_text("codec:\n  level: 1\n", encoding="utf-8")
    assert main(["--log-level", "WARNING", "run", "--json", "--input", str(data), "--config", str(cfg)]) == 0
    out = json.loads(capsys.readouterr().out)
    assert out["filtered"] == [118, 604, 794, 1012, 4904, 6720]


def test_run_pipeline_error_exit_code():
    assert main(["--log-level", "CRITICAL", "run", "1"]) == 1


def test_decode_command(capsys):
    assert main(["--log-level", "WARNING", "decode", encode("2.5")]) == 0
    assert capsys.readouterr().out.strip() == "2.5"


def test_decode_command_bad_input():
    assert main(["--log-level", "CRITICAL", "decode", "!!"]) == 1


def test_version_and_stages(capsys):
    assert main(["version"]) == 0
    assert "statpipe v" in capsys.readouterr().out
    assert main(["stages"]) == 0
    assert "01 Sort Ascending" in capsys.readouterr().out


def test_read_values(tmp_path: Path):
    p = tmp_path / "v.txt"
    p.write_text(" 1,2 3\n-4 ", encoding="utf-8")
    assert read_values(p) == [1, 2, 3, -4]
    p.write_text("1 two 3", encoding="utf-8")
    with pytest.raises(InputError):
        read_values(p)


def test_run_missing_input_file_exit_code(tmp_path: Path):
    assert main(["--log-level", "CRITICAL", "run", "--input", str(tmp_path / "nope.txt")]) == 1


def test_read_values_unreadable_files(tmp_path: Path):
    with pytest.raises(InputError) as ei:
        read_values(tmp_path / "nope.txt")
    assert ei.value.code == "BAD_INPUT"
    binary = tmp_path / "values.bin"
    binary.write_bytes(b"\xff\xfe\x00")
    with pytest.raises(InputError):
        read_values(binary)
