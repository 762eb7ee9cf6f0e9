"""Command execution for the shell: builtins, PATH search and child processes."""

from __future__ import annotations

import os
import signal
import subprocess
import sys
from collections.abc import Callable, Iterable, Mapping
from typing import TextIO

from hsh.environment import Environment
from hsh.errors import write_error
from hsh.text import has_directory, join_path, parse_status, tokenize

COMMAND_SEPARATORS = ";"
WORD_SEPARATORS = "\n \t\r"

STATUS_BAD_USAGE = 2
STATUS_NOT_EXECUTABLE = 126
STATUS_NOT_FOUND = 127
STATUS_INTERRUPTED = 130


class ExitRequest(Exception):
    """Raised by the exit builtin to end the shell with *status*."""

    def __init__(self, status: int) -> None:
        super().__init__(status)
        self.status = status


def _exists(path: str) -> bool:
    try:
        os.stat(path)
    except OSError:
        return False
    return True


def find_executable(command: str, path: str | None) -> str | None:
    """Return the first existing file named *command* in the PATH value *path*."""
    if path is None:
        return None
    for directory in tokenize(path, ":"):
        candidate = join_path(directory, command)
        if _exists(candidate):
            return candidate
    return None


def _stream_target(stream: TextIO) -> int:
    try:
        return stream.fileno()
    except (AttributeError, OSError, ValueError):
        return subprocess.PIPE


class Shell:
    """A shell session: its environment, last status and line counter."""

    def __init__(
        self,
        program: str,
        environ: Environment | Mapping[str, str] | Iterable[str] | None = None,
        stdout: TextIO | None = None,
        stderr: TextIO | None = None,
    ) -> None:
        self.program = program
        if environ is None:
            environ = os.environ
        if isinstance(environ, Environment):
            self.environment = Environment(environ.lines())
        else:
            self.environment = Environment(environ)
        self.stdout = stdout if stdout is not None else sys.stdout
        self.stderr = stderr if stderr is not None else sys.stderr
        self.status = 0
        self.count = 0
        self._builtins: dict[str, Callable[[list[str]], bool]] = {
            "exit": self.builtin_exit,
            "env": self.builtin_env,
            "setenv": self.builtin_setenv,
            "unsetenv": self.builtin_unsetenv,
        }

    def run_line(self, line: str) -> int:
        """Run every ';'-separated command of one input line; return the status.

        Raises ExitRequest when the exit builtin ends the shell.
        """
        self.count += 1
        for command in tokenize(line, COMMAND_SEPARATORS):
            argv = tokenize(command, WORD_SEPARATORS)
            if argv and not self.run_command(argv):
                break
        return self.status

    def run_command(self, argv: list[str]) -> bool:
        """Run one command; return False when the rest of the line is dropped."""
        builtin = self._builtins.get(argv[0])
        if builtin is not None:
            return builtin(argv)
        self.execute(argv)
        return True

    def builtin_exit(self, argv: list[str]) -> bool:
        """Leave the shell with the given status, or the last one."""
        if len(argv) > 1:
            try:
                status = parse_status(argv[1])
            except ValueError:
                self.status = STATUS_BAD_USAGE
                self.error(argv[0], f": Illegal number: {argv[1]}\n")
                return False
            self.status = status
        raise ExitRequest(self.status)

    def builtin_env(self, argv: list[str]) -> bool:
        """Print the environment, one entry per line."""
        for entry in self.environment.lines():
            self.stdout.write(entry + "\n")
        self.stdout.flush()
        self.status = 0
        return True

    def builtin_setenv(self, argv: list[str]) -> bool:
        """Set or replace an environment variable."""
        if len(argv) < 3:
            self.error(argv[0], ": Incorrect number of arguments\n")
            self.status = STATUS_BAD_USAGE
            return True
        self.environment.set(argv[1], argv[2])
        self.status = 0
        return True

    def builtin_unsetenv(self, argv: list[str]) -> bool:
        """Remove an environment variable."""
        if len(argv) < 2:
            self.error(argv[0], ": Incorrect number of arguments\n")
            self.status = STATUS_BAD_USAGE
            return True
        try:
            self.environment.unset(argv[1])
        except KeyError:
            self.error(argv[0], ": No variable to unset")
            return True
        self.status = 0
        return True

    def execute(self, argv: list[str]) -> None:
        """Run an external command, searching PATH when it names no directory."""
        name = argv[0]
        if has_directory(name):
            command: str | None = name if _exists(name) else None
        else:
            command = find_executable(name, self.environment.get("PATH"))
        if command is None:
            self.error(name, ": not found\n")
            self.status = STATUS_NOT_FOUND
            return
        self._run_file(command, argv)

    def _run_file(self, command: str, argv: list[str]) -> None:
        if not os.access(command, os.X_OK):
            self.error(argv[0], ": Permission denied\n")
            self.status = STATUS_NOT_EXECUTABLE
            return
        self.stdout.flush()
        self.stderr.flush()
        out_target = _stream_target(self.stdout)
        err_target = _stream_target(self.stderr)
        try:
            completed = subprocess.run(
                argv,
                executable=command,
                env=self.environment.as_dict(),
                stdout=out_target,
                stderr=err_target,
                check=False,
            )
        except OSError as exc:
            self.error(argv[0], exc)
            self.status = STATUS_NOT_FOUND
            return
        if out_target == subprocess.PIPE and completed.stdout:
            self.stdout.write(completed.stdout.decode(errors="replace"))
            self.stdout.flush()
        if err_target == subprocess.PIPE and completed.stderr:
            self.stderr.write(completed.stderr.decode(errors="replace"))
            self.stderr.flush()
        code = completed.returncode
        if code >= 0:
            self.status = code
        elif -code == signal.SIGINT:
            self.status = STATUS_INTERRUPTED
        else:
            self.status = -code

    def error(self, command: str, message: str | OSError) -> None:
        """Report an error about *command* on the shell's error stream."""
        write_error(self.stderr, self.program, self.count, command, message)