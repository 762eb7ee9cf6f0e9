# hsh

A small command shell. It reads lines from standard input and runs each
command on them in turn.

## Install

    pip install .

## Use

Start it interactively:

    hsh

When standard input is a terminal, a `$ ` prompt is printed before each
line, and a newline is printed when input ends. Pressing Ctrl-C at the
prompt prints a fresh prompt instead of ending the shell. When input is
piped in, no prompt is printed:

    printf 'ls -l\nenv\n' | hsh

The shell can also be started with `python -m hsh.cli`.

### Command lines

- Commands on one line may be separated with `;`.
- Arguments are split on spaces, tabs, carriage returns and newlines.
- A command that contains `/` is run as that path. Otherwise each
  directory in the shell's `PATH` is searched, in order, for a file of
  that name.
- External commands run with the shell's own environment, as changed by
  `setenv` and `unsetenv`.

### Builtins

| Command            | Effect                                                  |
|--------------------|---------------------------------------------------------|
| `exit [status]`    | Leave the shell, with the given or the last status      |
| `env`              | Print the shell's environment, one `KEY=value` per line |
| `setenv KEY VALUE` | Create or replace a variable                            |
| `unsetenv KEY`     | Remove a variable                                       |

`exit` takes a status made of decimal digits, no larger than 2147483647.
Anything else is reported as an illegal number: the status becomes `2`,
the rest of that line is skipped and the shell keeps running.

`unsetenv` on a variable that is not set prints an error and leaves the
status unchanged.

### Exit statuses

- `0`: the last command succeeded
- `2`: wrong builtin arguments, or an illegal number given to `exit`
- `126`: the file was found but is not executable
- `127`: the command was not found
- `130`: the child process was ended by Ctrl-C (SIGINT)
- a child ended by another signal leaves that signal's number

Otherwise the status is that of the last command run. When input ends the
shell exits with the last status.

Errors go to standard error in the form:

    hsh: 3: nosuchcmd: not found

giving the program name, the input line number and the command.

## What it does not do

There is no quoting, no variable expansion, no pipes, no redirection, no
background jobs and no `cd` or other builtins beyond the four above.
Words are split only at whitespace and commands only at `;`.

## Using it from Python

    import io
    from hsh.session import ExitRequest, Shell

    out = io.StringIO()
    shell = Shell("hsh", {"PATH": "/bin:/usr/bin"}, out, io.StringIO())
    status = shell.run_line("setenv GREETING hello; env")
    print(out.getvalue())

`Shell.run_line` runs one input line and returns the status. `exit`
raises `ExitRequest`, whose `status` is the status to leave with.
The shell's variables are in `shell.environment`, an
`hsh.environment.Environment` with `get`, `set`, `unset`, `lines` and
`as_dict`. `hsh.session.find_executable(command, path)` returns the first
existing file for a command in a `PATH` value, or `None`.

## Tests

    pip install .[test]
    pytest