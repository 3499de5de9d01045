"""The shell's built-in commands: echo, cd, pwd, export, unset, env, exit.

Every command takes its argument vector with the command name first.
An argument may be None where an expansion produced nothing.
Commands return their exit status; ``exit`` raises ShellExit instead.
"""

from __future__ import annotations

import errno
import os
import sys
from collections.abc import Sequence
from typing import TextIO

from phoenix.environment import Environment
from phoenix.textutils import split

_PREFIX = "phoenix"
_INT64_MIN = -(1 << 63)
_INT64_MAX = (1 << 63) - 1

Args = Sequence["str | None"]


class ShellExit(Exception):
    """Raised by ``exit`` to ask the shell to terminate with ``status``."""

    def __init__(self, status: int) -> None:
        super().__init__(status)
        self.status = status


def _stream(stream: TextIO | None, default: TextIO) -> TextIO:
    return stream if stream is not None else default


def _arg(args: Args, index: int) -> str | None:
    return args[index] if index < len(args) else None


def _is_digit(char: str) -> bool:
    return "0" <= char <= "9"


def _is_echo_flag(option: str | None) -> bool:
    if not option or option[0] != "-":
        return False
    return option[1:] == "n" * (len(option) - 1)


def echo(args: Args, out: TextIO | None = None) -> int:
    """Print the arguments separated by spaces; ``-n`` drops the newline."""
    out = _stream(out, sys.stdout)
    index = 1
    newline = True
    first = _arg(args, 1)
    if first is not None and first.startswith("-"):
        while _is_echo_flag(_arg(args, index)):
            newline = False
            index += 1
    words = [word if word is not None else "" for word in args[index:]]
    out.write(" ".join(words))
    if newline:
        out.write("\n")
    return 0


def env(environment: Environment, out: TextIO | None = None) -> int:
    """Print every variable that has a value as ``KEY=VALUE``."""
    out = _stream(out, sys.stdout)
    for line in environment.env_lines():
        out.write(line + "\n")
    return 0


def pwd(out: TextIO | None = None, err: TextIO | None = None) -> int:
    """Print the current working directory."""
    out = _stream(out, sys.stdout)
    err = _stream(err, sys.stderr)
    try:
        cwd = os.getcwd()
    except OSError:
        err.write(f"{_PREFIX}: getcwd() error\n")
        return 1
    out.write(cwd + "\n")
    return 0


def _not_set(key: str, err: TextIO) -> int:
    err.write(f"{_PREFIX}: cd: {key} not set\n")
    return 1


def _chdir_error(path: str, error: OSError, err: TextIO) -> None:
    if error.errno == errno.EACCES:
        err.write(f"{_PREFIX}: cd: {path}: Permission denied\n")
    elif error.errno == errno.ENOENT:
        err.write(f"{_PREFIX}: cd: {path}: No such file or directory\n")


def cd(
    args: Args,
    environment: Environment,
    err: TextIO | None = None,
) -> int:
    """Change directory, updating PWD and OLDPWD where they are defined.

    Without an argument the target is HOME; ``-`` goes to OLDPWD.
    """
    err = _stream(err, sys.stderr)
    target = _arg(args, 1)
    if target is None and len(args) > 1:
        return 0
    path: str | None = None
    if target is None:
        path = environment.get("HOME")
        if path is None:
            return _not_set("HOME", err)
    elif target == "-":
        path = environment.get("OLDPWD")
        if path is None:
            return _not_set("OLDPWD", err)
    try:
        old_path: str | None = os.getcwd()
    except OSError:
        old_path = None
    if path is None:
        path = target
    try:
        os.chdir(path)
    except OSError as error:
        _chdir_error(path, error, err)
        return 1
    try:
        new_path = os.getcwd()
    except OSError:
        err.write(f"{_PREFIX}: getcwd\n")
        return 1
    if "PWD" in environment:
        environment.set("PWD", new_path)
    if "OLDPWD" in environment and old_path is not None:
        environment.set("OLDPWD", old_path)
    return 0


def _invalid_identifier(command: str, arg: str | None, out: TextIO) -> int:
    out.write(f"{_PREFIX}: {command}: `{arg or ''}': not a valid identifier\n")
    return 1


def _export_one(var: str, environment: Environment) -> None:
    last_equals = var.rfind("=")
    if last_equals != -1 and last_equals < len(var) - 1:
        pieces = split(var, "=")
        if pieces[0] in environment:
            environment.set(pieces[0], pieces[1])
            return
        key, _, value = var.partition("=")
        environment.set(key, value)
        return
    key, equals, value = var.partition("=")
    if not equals or not value:
        environment.declare(var)
    else:
        environment.set(key, value)


def export(
    args: Args,
    environment: Environment,
    out: TextIO | None = None,
    err: TextIO | None = None,
) -> int:
    """Define or list exported variables.

    Invalid identifiers are reported on ``out`` and make the status 1,
    but the remaining arguments are still processed.
    """
    out = _stream(out, sys.stdout)
    _stream(err, sys.stderr)
    if len(args) <= 1:
        for line in environment.export_lines():
            out.write(line + "\n")
        return 0
    status = 0
    for arg in args[1:]:
        if not arg or _is_digit(arg[0]) or arg[0] in (" ", "="):
            status = _invalid_identifier("export", arg, out)
        else:
            _export_one(arg, environment)
    return status


def unset(
    args: Args,
    environment: Environment,
    out: TextIO | None = None,
) -> int:
    """Remove variables; invalid names are reported on ``out``."""
    out = _stream(out, sys.stdout)
    if len(environment) == 0:
        return 0
    status = 0
    for arg in args[1:]:
        if arg is None or (arg and _is_digit(arg[0])) or "=" in arg:
            status = _invalid_identifier("unset", arg, out)
        else:
            environment.remove(arg)
    return status


def _leading_number(text: str) -> int:
    """Parse a leading signed integer; 0 when absent or out of 64-bit range."""
    sign = 1
    rest = text
    if rest[:1] in ("-", "+"):
        if rest[0] == "-":
            sign = -1
        rest = rest[1:]
    digits = []
    for char in rest:
        if not _is_digit(char):
            break
        digits.append(char)
    if not digits:
        return 0
    value = sign * int("".join(digits))
    if not _INT64_MIN <= value <= _INT64_MAX:
        return 0
    return value


def _is_numeric(text: str) -> bool:
    if text != "0" and text and _leading_number(text) == 0:
        return False
    position = 0
    while position < len(text):
        if text[position] in ("-", "+"):
            position += 1
        if position >= len(text) or not _is_digit(text[position]):
            return False
        position += 1
    return True


def _numeric_required(arg: str, err: TextIO) -> ShellExit:
    err.write(f"exit\n{_PREFIX}: exit: {arg}: numeric argument required\n")
    return ShellExit(255)


def exit_builtin(
    args: Args,
    last_status: int = 0,
    interactive: bool = False,
    out: TextIO | None = None,
    err: TextIO | None = None,
) -> int:
    """Leave the shell by raising ShellExit.

    Returns 1 without exiting when given too many arguments.
    """
    out = _stream(out, sys.stdout)
    err = _stream(err, sys.stderr)
    if len(args) <= 1:
        if interactive:
            out.write("exit\n")
        raise ShellExit(last_status)
    code = args[1]
    if code is None:
        raise _numeric_required("", err)
    if not _is_numeric(code):
        raise _numeric_required(code, err)
    if _arg(args, 2) is not None:
        if interactive:
            err.write("exit\n")
        err.write(f"{_PREFIX}: exit: too many arguments\n")
        return 1
    out.write("exit\n")
    raise ShellExit(_leading_number(code) & 0xFF)


def run_builtin(
    args: Args,
    environment: Environment,
    last_status: int = 0,
    interactive: bool = False,
    out: TextIO | None = None,
    err: TextIO | None = None,
) -> int | None:
    """Run ``args`` if it names a built-in; return None otherwise."""
    if not args:
        return None
    name = args[0]
    if name == "echo":
        return echo(args, out)
    if name == "cd":
        return cd(args, environment, err)
    if name == "pwd":
        return pwd(out, err)
    if name == "export":
        return export(args, environment, out, err)
    if name == "unset":
        return unset(args, environment, out)
    if name == "env":
        return env(environment, out)
    if name == "exit":
        return exit_builtin(args, last_status, interactive, out, err)
    return None