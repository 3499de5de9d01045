# phoenix

Building blocks for a small POSIX-style shell, as a Python library.

- `phoenix.builtins` holds the built-in commands `echo`, `env`, `pwd`, `cd`,
  `export`, `unset` and `exit_builtin`. Each takes its argument vector with
  the command name first. An argument may be `None` where an expansion
  produced nothing. Each writes to the `out` and `err` streams you pass in,
  or to stdout and stderr if you pass none, and returns an exit status.
  `run_builtin` runs the built-in named by the first argument. It returns
  `None` if that name is not a built-in.
- `phoenix.environment` provides `Environment`, an ordered store of shell
  variables. A variable can be declared without a value. `env_lines()`
  lists only the variables that have a value. `export_lines()` lists all of
  them as `declare -x KEY="VALUE"`.
- `phoenix.linereader` provides `LineReader`, which reads a file descriptor
  one line at a time in fixed-size chunks (8 bytes by default) and can be
  iterated. It also provides `get_next_line(fd)`, which keeps separate state
  for each descriptor.
- `phoenix.printf` provides `sprintf`, `printf` and `convert_number`.
  `sprintf` and `printf` handle the conversions `%c %s %d %i %u %x %X %p %%`.
- `phoenix.textutils` provides string helpers with C semantics: `atoi`,
  `itoa`, `split`, `strtrim`, `strnstr`, `substr`, `strncmp` and `strrchr`.

## Installation

```
pip install .
```

## Example

```python
import io
from phoenix.environment import Environment
from phoenix.builtins import run_builtin, ShellExit

environment = Environment(["HOME=/tmp", "USER=guest"])
out, err = io.StringIO(), io.StringIO()

status = run_builtin(["export", "GREETING=hello"], environment, 0, True, out, err)
run_builtin(["echo", "-n", environment.get("GREETING")], environment, status, True, out, err)
print(out.getvalue())  # hello

try:
    run_builtin(["exit", "3"], environment, 0, True, out, err)
except ShellExit as stop:
    print(stop.status)  # 3
```

`exit_builtin` raises `ShellExit` rather than ending the interpreter. The
caller decides what to do with the status it carries. If it is given too
many arguments, it returns 1 and does not raise.

`cd` changes the working directory of the Python process itself. It updates
`PWD` and `OLDPWD` only where those variables are already defined.

## What this package does not do

This package is not a complete shell. It has no prompt and no interactive
loop. It does not tokenize or parse command lines, expand variables or
quotes, handle pipes, redirections or here-documents, or run external
programs. It installs no command. You call its functions from your own code.

## Tests

```
pip install ".[test]"
pytest
```