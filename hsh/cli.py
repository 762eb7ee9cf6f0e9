"""Command-line entry point: the read-and-run loop of the shell."""

from __future__ import annotations

import signal
import sys

from hsh.session import ExitRequest, Shell

PROMPT = "$ "


def main(argv: list[str] | None = None) -> int:
    """Run the shell on standard input and return its exit status.

    *argv* is the full argument vector; only its first item, the program
    name used in error messages, is looked at.
    """
    if argv is None:
        argv = sys.argv
    program = argv[0] if argv else "hsh"
    stdin, stdout = sys.stdin, sys.stdout
    interactive = stdin.isatty()
    shell = Shell(program, None, stdout, sys.stderr)

    def on_interrupt(signum, frame) -> None:
        stdout.write("\n" + PROMPT)
        stdout.flush()

    try:
        previous = signal.signal(signal.SIGINT, on_interrupt)
    except ValueError:
        previous = None

    def prompt() -> None:
        if interactive:
            stdout.write(PROMPT)
            stdout.flush()

    try:
        prompt()
        for line in iter(stdin.readline, ""):
            try:
                shell.run_line(line)
            except ExitRequest as request:
                return request.status
            prompt()
        if interactive:
            stdout.write("\n")
            stdout.flush()
        return shell.status
    finally:
        if previous is not None:
            signal.signal(signal.SIGINT, previous)


if __name__ == "__main__":
    sys.exit(main())