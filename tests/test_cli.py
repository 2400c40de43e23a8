import io

import pytest

from bfcore.cli import main


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    monkeypatch.delenv("BF_TAPE_SIZE", raising=False)
    monkeypatch.delenv("BF_OUTPUT", raising=False)


def test_runs_program_argument(capsysbinary):
    assert main(["+++."]) == 0
    assert capsysbinary.readouterr().out == b"\x03"


def test_stderr_output(capsysbinary):
    assert main(["--stderr", "+" * 72 + "."]) == 0
    captured = capsysbinary.readouterr()
    assert captured.out == b""
    assert captured.err == b"H"


def test_reads_stdin(monkeypatch, capsysbinary):
    monkeypatch.setattr("sys.stdin", io.StringIO("q\n"))
    assert main([",."]) == 0
    assert capsysbinary.readouterr().out == b"q"


def test_missing_program_exits_nonzero(capsys):
    with pytest.raises(SystemExit) as exc:
        main([])
    assert exc.value.code != 0
    assert "program" in capsys.readouterr().err


def test_unbalanced_program(capsys):
    assert main(["+["]) == 1
    assert "no closing bracket" in capsys.readouterr().err


def test_out_of_range(capsys):
    assert main(["<"]) == 1
    assert "outside [0, 30000)" in capsys.readouterr().err


def test_tape_size_option(capsys):
    assert main(["--tape-size", "2", ">>"]) == 1
    assert "outside [0, 2)" in capsys.readouterr().err


def test_tape_size_from_environment(monkeypatch, capsys):
    monkeypatch.setenv("BF_TAPE_SIZE", "3")
    assert main([">>>"]) == 1
    assert "outside [0, 3)" in capsys.readouterr().err


def test_invalid_tape_size(capsys):
    assert main(["--tape-size", "0", "+"]) == 1
    assert "tape_size" in capsys.readouterr().err


def test_check_mode(capsys):
    assert main(["--check", "+[-]<<< comment"]) == 0
    assert "7 instructions" in capsys.readouterr().out


def test_program_from_file(tmp_path, capsysbinary):
    path = tmp_path / "three.bf"
    path.write_text("+++ output it: .\n")
    assert main(["--file", str(path)]) == 0
    assert capsysbinary.readouterr().out == b"\x03"


def test_missing_file(tmp_path, capsys):
    assert main(["--file", str(tmp_path / "nope.bf")]) == 1
    assert "nope.bf" in capsys.readouterr().err


def test_output_option(capsysbinary):
    assert main(["--output", "stderr", "+" * 73 + "."]) == 0
    captured = capsysbinary.readouterr()
    assert captured.out == b""
    assert captured.err == b"I"


def test_output_option_rejects_unknown_stream(capsys):
    with pytest.raises(SystemExit) as exc:
        main(["--output", "printer", "+"])
    assert exc.value.code == 2
    assert "invalid choice" in capsys.readouterr().err


def test_closed_stdin_does_not_crash(monkeypatch, capsysbinary):
    monkeypatch.setattr("sys.stdin", None)
    assert main(["++,."]) == 0
    assert capsysbinary.readouterr().out == b"\x02"
