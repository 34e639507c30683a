"""Command dispatcher for the leatherman multi-tool."""

from __future__ import annotations

import os
import platform
import sys
from collections.abc import Callable, Sequence
from importlib import metadata

from leatherman import proj

# Filled in at release time; empty for development builds.
VERSION = ""
WHEN = ""

_DEPENDENCIES = ("lz4", "beautifulsoup4", "requests")

_XYZZY_REPLY = "nothing happens"

Command = Callable[[list[str]], "int | None"]


class UnknownCommandError(LookupError):
    """No command of the requested name exists."""


def version(args: Sequence[str]) -> None:
    """Print the build version and the versions of the libraries in use."""
    runtime = f"{platform.python_implementation()} {platform.python_version()}"
    print(f"Leatherman built from {VERSION} on {WHEN} by with {runtime}")
    for name in _DEPENDENCIES:
        try:
            dep_version = metadata.version(name)
        except metadata.PackageNotFoundError:
            continue
        print(f"{name}@{dep_version}")


def xyzzy(args: Sequence[str]) -> int:
    """Write the traditional reply to standard output and succeed."""
    sys.stdout.write(_XYZZY_REPLY + "\n")
    sys.stdout.flush()
    return 0


def _proj(args: list[str]) -> int:
    return proj.main(args[1:])


COMMANDS: dict[str, Command] = {
    "proj": _proj,
    "version": version,
    "xyzzy": xyzzy,
}


def _help(prog: str) -> None:
    print(f"usage: {prog} <command> [args...]", file=sys.stderr)
    print("commands:", file=sys.stderr)
    for name in sorted(COMMANDS):
        print(f"  {name}", file=sys.stderr)


def dispatch(argv: Sequence[str]) -> tuple[str, Command, list[str]]:
    """Resolve the command for ``argv`` (program name first).

    A program invoked under a command's name runs that command; otherwise the
    first argument names the command.  Returns the command name, its function
    and the arguments it receives, whose first element is the command name.
    Raises UnknownCommandError when nothing matches.
    """
    args = list(argv)
    which = os.path.basename(args[0]) if args else ""
    if which not in COMMANDS and len(args) > 1:
        args = args[1:]
        which = args[0]
    command = COMMANDS.get(which)
    if command is None:
        raise UnknownCommandError(which)
    return which, command, args


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command named by ``argv`` (defaults to ``sys.argv``); returns the exit status."""
    args = list(sys.argv if argv is None else argv)
    try:
        which, command, command_args = dispatch(args)
    except UnknownCommandError:
        _help(os.path.basename(args[0]) if args else "leatherman")
        return 1

    try:
        result = command(command_args)
    except Exception as exc:  # report any command failure the same way
        print(f"{which}: {exc}", file=sys.stderr)
        return 1
    return result or 0


if __name__ == "__main__":
    sys.exit(main())