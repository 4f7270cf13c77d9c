"""A small interactive shell with a handful of built-in commands."""

from __future__ import annotations

import getpass
import math
import os
import re
import subprocess
import sys
from collections.abc import Iterable, Iterator
from typing import TextIO

from labshell.history import History

RED = "\x1b[31m"
GREEN = "\x1b[32m"
WHITE = "\x1b[0m"

DEFAULT_HOME = "/home"

_DELIMITERS = re.compile(r"[ \n\t\r\a]+")
_LEADING_INT = re.compile(r"\s*([+-]?\d+)")
_QUOTES = ("'", '"')

_HELP = (
    "Microshell project.\n"
    "This is a functional linux shell.\n"
    "It can execute programs from PATH, and some of its own programs that are built in.\n\n"
    "Built in functions:\n"
    "cd [path] - changes the directory.\n"
    "touch [path] - creates an empty file in a given path.\n"
    "mkdir [path] - creates an empty directory in a given path.\n"
    "calc - a simple calculator program.\n"
    "mylogin - prints current username.\n"
    "help - prints this message.\n"
    "history [lines] - prints last X lines of history.\n"
    "exit - exits the shell.\n\n"
    "SIGINT signal is also supported (ctrl + c).\n"
)

_CALC_INTRO = (
    "Welcome to SimpleCalc\n"
    "Separate numbers and operators using whitespaces.\n"
    "Type 'exit' to end the program.\n\n"
    "Example syntax:\n"
    "'2 + 2', '5 - 4', '8*2', 7 / 2'\n"
)

_MISSING_ARGUMENT = "Execution error: expected an argument.\n"


def _atoi(text: str) -> int:
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


def split_arguments(line: str) -> list[str]:
    """Split a command line into words.

    When the first argument opens with a quote, that quote and a closing
    quote at the end of the last word are dropped.
    """
    args = [word for word in _DELIMITERS.split(line) if word]
    if len(args) > 1 and args[1].startswith(_QUOTES):
        args[1] = args[1][1:]
        if args[-1].endswith(_QUOTES):
            args[-1] = args[-1][:-1]
    return args


def calculate(a: int, op: str, b: int) -> str | None:
    """Return the calculator's answer to 'a op b', or None for an unknown operator."""
    if op == "+":
        return str(a + b)
    if op == "-":
        return str(a - b)
    if op == "*":
        return str(a * b)
    if op == "/":
        if b == 0:
            value = math.nan if a == 0 else math.copysign(math.inf, a)
        else:
            value = a / b
        return f"{value:.4f}"
    return None


def _tokens(lines: Iterable[str]) -> Iterator[str]:
    for line in lines:
        yield from line.split()


def run_calculator(lines: Iterable[str], out: TextIO) -> None:
    """Answer 'a op b' questions read from lines until 'exit' or the input ends."""
    out.write(_CALC_INTRO)
    tokens = _tokens(lines)
    while True:
        first = next(tokens, None)
        if first is None or first == "exit":
            return
        op = next(tokens, None)
        second = next(tokens, None)
        if op is None or second is None:
            return
        answer = calculate(_atoi(first), op, _atoi(second))
        if answer is not None:
            out.write(answer + "\n")


class Shell:
    """Reads command lines, runs built-ins itself and other programs as children."""

    def __init__(
        self,
        out: TextIO | None = None,
        err: TextIO | None = None,
        stdin: Iterable[str] | None = None,
        home: str = DEFAULT_HOME,
    ) -> None:
        self.out = out if out is not None else sys.stdout
        self.err = err if err is not None else sys.stderr
        self.home = home
        self.history = History()
        self._input: Iterator[str] = iter(stdin if stdin is not None else sys.stdin)
        self._builtins = {
            "cd": self._cd,
            "touch": self._touch,
            "mkdir": self._mkdir,
            "help": self._help,
            "mylogin": self._login,
            "history": self._history,
        }

    def prompt(self) -> str:
        """Return the prompt showing the current directory."""
        try:
            cwd = os.getcwd()
        except OSError:
            cwd = ""
        return f"{RED}[{cwd}]{WHITE}(msh){GREEN}$ {WHITE}"

    def run_line(self, line: str) -> bool:
        """Run one command line; return False when the shell should stop."""
        if not line or line[0] == "\n":
            return True
        self.history.add(line)
        args = split_arguments(line)
        if not args:
            return True
        if args[0] == "exit":
            self.out.write("Exiting...\n")
            return False
        builtin = self._builtins.get(args[0])
        if builtin is not None:
            builtin(args)
        else:
            self._execute(args)
        return True

    def run(self, lines: Iterable[str] | None = None) -> int:
        """Prompt and run lines until exit or end of input; return the exit status."""
        if lines is not None:
            self._input = iter(lines)
        try:
            while True:
                self.out.write(self.prompt())
                self.out.flush()
                line = next(self._input, None)
                if line is None or not self.run_line(line):
                    return 0
        except KeyboardInterrupt:
            self.out.write("\nExiting...\n")
            return 1

    def _cd(self, args: list[str]) -> None:
        if len(args) < 2:
            self.out.write("No arguments to cd, type 'help' for more information. \n")
            return
        target = self.home if args[1].startswith("~") else args[1]
        try:
            os.chdir(target)
        except OSError as exc:
            self.err.write(f"cd error: {exc.strerror}\n")

    def _touch(self, args: list[str]) -> None:
        if len(args) < 2:
            self.out.write(_MISSING_ARGUMENT)
            return
        path = args[1]
        if os.access(path, os.F_OK):
            self.out.write("Touch error: File already exists\n")
            return
        try:
            fd = os.open(path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, 0o666)
        except OSError as exc:
            self.err.write(f"Touch error: {exc.strerror}\n")
            return
        os.close(fd)

    def _mkdir(self, args: list[str]) -> None:
        if len(args) < 2:
            self.out.write(_MISSING_ARGUMENT)
            return
        try:
            os.mkdir(args[1], 0o700)
        except OSError as exc:
            self.err.write(f"Mkdir error: {exc.strerror}\n")

    def _help(self, args: list[str]) -> None:
        self.out.write(GREEN + _HELP + WHITE)

    def _login(self, args: list[str]) -> None:
        try:
            login = os.getlogin()
        except OSError:
            login = getpass.getuser()
        self.out.write(f"{login}\n")

    def _history(self, args: list[str]) -> None:
        if len(args) < 2:
            self.out.write(_MISSING_ARGUMENT)
            return
        for entry in self.history.last(_atoi(args[1])):
            self.out.write(entry + "\n")

    def _execute(self, args: list[str]) -> None:
        if args[0] == "calc":
            run_calculator(self._input, self.out)
            return
        self.out.flush()
        try:
            subprocess.run(args, check=False)
        except OSError as exc:
            self.err.write(f"Error executing a program:: {exc.strerror}\n")
        except KeyboardInterrupt:
            pass


def main(argv: list[str] | None = None) -> int:
    """Start the interactive shell on standard input."""
    sys.stdout.write(GREEN + "Microshell.\n Type 'help' for more info.\n" + WHITE)
    return Shell().run()


if __name__ == "__main__":
    sys.exit(main())