import io
from unittest import mock

from fizik.cli import main
from fizik.io import render

INPUT = "0\n0\n0\n5 0 10 20 0 0 0 0 0 1\n"


def _write_input(tmp_path):
    path = tmp_path / "input.txt"
    path.write_text(INPUT, encoding="utf-8")
    return path


def test_main_writes_named_output(tmp_path):
    source = _write_input(tmp_path)
    target = tmp_path / "out.txt"
    assert main([str(source), "-o", str(target), "--no-open"]) == 0
    text = target.read_text(encoding="utf-8")
    assert text.endswith("\n\n")
    assert set(text) == {"\u2588", "\n"}


def test_main_reads_path_from_prompt(tmp_path, monkeypatch, capsys):
    source = _write_input(tmp_path)
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr("sys.stdin", io.StringIO(f"{source}\n"))
    assert main(["--no-open"]) == 0
    assert "Enter the input txt path:" in capsys.readouterr().out
    output = tmp_path / "output.txt"
    assert output.read_text(encoding="utf-8") == render([[0] * 508] * 508)


def test_main_missing_file_fails(tmp_path, capsys):
    result = main([str(tmp_path / "missing.txt"), "--no-open"])
    assert result == 1
    assert "Could not open file" in capsys.readouterr().err


def test_main_invalid_input_fails(tmp_path, capsys):
    source = tmp_path / "bad.txt"
    source.write_text("1\n0\n", encoding="utf-8")
    assert main([str(source), "--no-open"]) == 1
    assert "Invalid input" in capsys.readouterr().err


def test_main_empty_prompt_fails(monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO("\n"))
    assert main(["--no-open"]) == 1


def test_main_opens_output(tmp_path):
    source = _write_input(tmp_path)
    target = tmp_path / "out.txt"
    with mock.patch("fizik.cli.sys.platform", "linux"), mock.patch(
        "fizik.cli.subprocess.run"
    ) as run:
        assert main([str(source), "-o", str(target)]) == 0
    run.assert_called_once_with(["xdg-open", str(target)], check=False)