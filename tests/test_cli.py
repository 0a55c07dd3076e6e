import io
import sys

import pytest

from olimpiada.cli import main


def _run(monkeypatch, capsys, argv, data):
    monkeypatch.setattr(sys, "stdin", io.StringIO(data))
    code = main(argv)
    captured = capsys.readouterr()
    return code, captured.out, captured.err


def test_senha_counts_wrong_attempts(monkeypatch, capsys):
    code, out, _ = _run(monkeypatch, capsys, ["senha"], "1 2\n2018\n7\n")
    assert code == 0
    assert out.strip() == "2"


def test_senha_first_attempt(monkeypatch, capsys):
    code, out, _ = _run(monkeypatch, capsys, ["senha"], "2018\n")
    assert code == 0
    assert out.strip() == "0"


def test_senha_without_code_fails(monkeypatch, capsys):
    code, out, err = _run(monkeypatch, capsys, ["senha"], "1 2 3\n")
    assert code == 1
    assert out == ""
    assert "2018" in err


def test_algarismos_lists_all_digits(monkeypatch, capsys):
    code, out, _ = _run(monkeypatch, capsys, ["algarismos"], "2\n1223\n90\n")
    assert code == 0
    lines = out.splitlines()
    assert len(lines) == 10
    assert lines[2] == "2 - 2"
    assert lines[9] == "9 - 1"
    assert sum(int(line.split(" - ")[1]) for line in lines) == 6


def test_algarismos_missing_numbers(monkeypatch, capsys):
    code, _, err = _run(monkeypatch, capsys, ["algarismos"], "3\n12\n")
    assert code == 1
    assert "expected 3" in err


def test_operacoes_multiply(monkeypatch, capsys):
    code, out, _ = _run(monkeypatch, capsys, ["operacoes"], "M\n2 3\n")
    assert code == 0
    assert out.strip() == "6.00"


def test_operacoes_divide(monkeypatch, capsys):
    code, out, _ = _run(monkeypatch, capsys, ["operacoes"], "D\n1 4\n")
    assert code == 0
    assert out.strip() == "0.25"


def test_operacoes_unknown_prints_nothing(monkeypatch, capsys):
    code, out, _ = _run(monkeypatch, capsys, ["operacoes"], "X\n1 2\n")
    assert code == 0
    assert out == ""


def test_operacoes_bad_number(monkeypatch, capsys):
    code, _, err = _run(monkeypatch, capsys, ["operacoes"], "M\na b\n")
    assert code == 1
    assert err.startswith("olimpiada:")


def test_missing_command_exits():
    with pytest.raises(SystemExit) as info:
        main([])
    assert info.value.code == 2