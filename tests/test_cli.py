"""Tests for the ckv command line interface."""

import json

import pytest

from ckv.cli import main


@pytest.fixture
def config_path(tmp_path):
    path = tmp_path / "app.ckv"
    path.write_text("name=Alice\nnotes=one\n\ttwo\nage=30\n")
    return path


def test_get(config_path, capsys):
    main(["get", str(config_path), "notes"])
    assert capsys.readouterr().out == "one\ntwo\n"


def test_set_in_place(config_path, capsys):
    main(["set", str(config_path), "age", "31"])
    assert config_path.read_text() == "name=Alice\nnotes=one\n\ttwo\nage=31\n"


def test_remove_to_output(config_path, tmp_path, capsys):
    output = tmp_path / "out.ckv"
    main(["remove", str(config_path), "notes", "-o", str(output)])
    assert output.read_text() == "name=Alice\nage=30\n"
    assert "Wrote" in capsys.readouterr().out


def test_dump(config_path, capsys):
    main(["dump", str(config_path)])
    data = json.loads(capsys.readouterr().out)
    assert data == {"name": "Alice", "notes": "one\ntwo", "age": "30"}


def test_check(config_path, capsys):
    main(["check", str(config_path)])
    assert "valid ckv syntax" in capsys.readouterr().out


def test_first_wins_flag(tmp_path, capsys):
    path = tmp_path / "dup.ckv"
    path.write_text("k=1\nk=2\n")
    main(["--first-wins", "get", str(path), "k"])
    assert capsys.readouterr().out == "1\n"


def test_parse_error_reported_with_line(tmp_path, capsys):
    path = tmp_path / "bad.ckv"
    path.write_text("a=1\nb=2\n\tok\n=oops\n")
    with pytest.raises(SystemExit) as exc_info:
        main(["set", str(path), "a", "9"])
    assert exc_info.value.code == 1
    assert capsys.readouterr().err.strip() == f"{path}: line 4: Found '=' without a key"
    assert path.read_text() == "a=1\nb=2\n\tok\n=oops\n"


def test_missing_key_reported(config_path, capsys):
    with pytest.raises(SystemExit):
        main(["remove", str(config_path), "email"])
    assert '"email": key not found' in capsys.readouterr().err


def test_custom_reporter(tmp_path):
    messages = []
    with pytest.raises(SystemExit):
        main(["check", str(tmp_path / "missing.ckv")], report=messages.append)
    assert len(messages) == 1
    assert "Failed to open file" in messages[0]


def test_no_command(capsys):
    with pytest.raises(SystemExit) as exc_info:
        main([])
    assert exc_info.value.code == 1


def test_undecodable_file_reported(tmp_path):
    path = tmp_path / "binary.ckv"
    path.write_bytes(b"a=\xff\xfe\n")
    messages = []
    with pytest.raises(SystemExit):
        main(["get", str(path), "a"], report=messages.append)
    assert messages == [f"{path}: Failed to open file {path}"]


def test_unencodable_value_reported(config_path):
    original = config_path.read_bytes()
    messages = []
    with pytest.raises(SystemExit):
        main(["set", str(config_path), "name", "\udcff"], report=messages.append)
    assert messages == [f"{config_path}: Invalid output stream"]
    assert config_path.read_bytes() == original
    assert [p.name for p in config_path.parent.iterdir()] == ["app.ckv"]
