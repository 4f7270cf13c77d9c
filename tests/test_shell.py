import io
import os
from pathlib import Path

import pytest

from labshell.shell import Shell, calculate, run_calculator, split_arguments


@pytest.fixture
def streams():
    return io.StringIO(), io.StringIO()


@pytest.fixture
def shell(streams, tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    out, err = streams
    return Shell(out=out, err=err, stdin=[], home=str(tmp_path))


def test_split_plain_words():
    assert split_arguments("ls -l /tmp\n") == ["ls", "-l", "/tmp"]


def test_split_on_tabs_and_bell():
    assert split_arguments("a\tb\ac\r\n") == ["a", "b", "c"]


def test_split_strips_double_quotes():
    assert split_arguments('echo "hello world"\n') == ["echo", "hello", "world"]


def test_split_strips_single_quotes_of_one_word():
    assert split_arguments("echo 'word'\n") == ["echo", "word"]


def test_split_blank_line_is_empty():
    assert split_arguments("   \n") == []


def test_calculate_pinned_examples():
    assert calculate(2, "+", 2) == "4"
    assert calculate(7, "/", 2) == "3.5000"


def test_calculate_unknown_operator():
    assert calculate(1, "%", 2) is None


@pytest.mark.parametrize("a,b", [(3, 9), (-4, 7), (0, 5)])
def test_calculate_commutes(a, b):
    assert calculate(a, "+", b) == calculate(b, "+", a)
    assert calculate(a, "*", b) == calculate(b, "*", a)


def test_calculate_subtraction_is_inverse_of_addition():
    total = int(calculate(12, "+", 30))
    assert calculate(total, "-", 30) == "12"


def test_calculate_division_by_zero():
    assert calculate(3, "/", 0) == "inf"


def test_run_calculator_stops_at_exit():
    out = io.StringIO()
    lines = iter(["2 + 2\n", "7 / 2\n", "exit\n", "ignored\n"])
    run_calculator(lines, out)
    assert out.getvalue().splitlines()[-2:] == ["4", "3.5000"]
    assert next(lines) == "ignored\n"


def test_run_calculator_stops_at_end_of_input():
    out = io.StringIO()
    run_calculator(["2 +"], out)
    assert out.getvalue().splitlines()[-1].startswith("'2 + 2'")


def test_mkdir_creates_directory(shell, tmp_path):
    assert shell.run_line("mkdir made\n") is True
    assert (tmp_path / "made").is_dir()


def test_mkdir_existing_reports_error(shell, streams):
    assert shell.run_line("mkdir again\n") is True
    assert shell.run_line("mkdir again\n") is True
    assert streams[1].getvalue().startswith("Mkdir error:")


def test_touch_creates_empty_file(shell, tmp_path):
    assert shell.run_line("touch note.txt\n") is True
    created = tmp_path / "note.txt"
    assert created.is_file()
    assert created.read_bytes() == b""


def test_touch_existing_file_is_refused(shell, streams, tmp_path):
    (tmp_path / "kept.txt").write_text("data")
    assert shell.run_line("touch kept.txt\n") is True
    assert "already exists" in streams[0].getvalue()
    assert (tmp_path / "kept.txt").read_text() == "data"


def test_cd_changes_directory(shell, tmp_path):
    sub = tmp_path / "sub"
    sub.mkdir()
    assert shell.run_line("cd sub\n") is True
    assert Path(os.getcwd()).resolve() == sub.resolve()


def test_cd_tilde_goes_home(shell, tmp_path):
    sub = tmp_path / "deeper"
    sub.mkdir()
    os.chdir(sub)
    assert shell.run_line("cd ~\n") is True
    assert Path(os.getcwd()).resolve() == tmp_path.resolve()


def test_cd_without_argument_explains(shell, streams):
    assert shell.run_line("cd\n") is True
    assert "No arguments to cd" in streams[0].getvalue()


def test_cd_missing_directory_reports_error(shell, streams):
    assert shell.run_line("cd nowhere-at-all\n") is True
    assert streams[1].getvalue().startswith("cd error:")


def test_history_lists_earlier_lines(shell, streams):
    assert shell.run_line("help\n") is True
    streams[0].seek(0)
    streams[0].truncate()
    assert shell.run_line("mkdir x\n") is True
    assert shell.run_line("history 2\n") is True
    assert streams[0].getvalue().splitlines() == ["mkdir x", "help"]


def test_history_without_argument(shell, streams):
    assert shell.run_line("history\n") is True
    assert streams[0].getvalue() == "Execution error: expected an argument.\n"


def test_exit_stops_shell(shell, streams):
    assert shell.run_line("exit\n") is False
    assert streams[0].getvalue() == "Exiting...\n"


def test_blank_line_is_not_recorded(shell):
    assert shell.run_line("\n") is True
    assert len(shell.history) == 0


def test_unknown_program_reports_error(shell, streams):
    assert shell.run_line("definitely-not-a-program-xyz\n") is True
    assert streams[1].getvalue().startswith("Error executing a program:")


def test_prompt_shows_current_directory(shell):
    assert f"[{os.getcwd()}]" in shell.prompt()
    assert "(msh)" in shell.prompt()


def test_run_stops_at_exit(shell):
    assert shell.run(["mkdir a\n", "exit\n", "mkdir b\n"]) == 0
    assert os.path.isdir("a")
    assert not os.path.exists("b")
    assert list(shell.history) == ["mkdir a", "exit"]


def test_run_ends_at_end_of_input(shell):
    assert shell.run(["mkdir only\n"]) == 0
    assert os.path.isdir("only")


def test_calc_reads_from_shell_input(shell, streams):
    assert shell.run(["calc\n", "2 + 2\n", "exit\n", "mkdir after\n"]) == 0
    assert "4\n" in streams[0].getvalue()
    assert os.path.isdir("after")