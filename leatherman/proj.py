"""Create and resume per-project vim sessions, notes and smartcd scripts."""

from __future__ import annotations

import argparse
import datetime
import os
import subprocess
import sys
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path

_USAGE = "usage: proj init | vim | note"


def _sessions_dir(home: Path) -> Path:
    return home / ".vvar" / "sessions"


def _notes_dir(home: Path) -> Path:
    return home / "code" / "notes" / "content" / "posts"


def _smartcd_dir(home: Path) -> Path:
    return home / ".smartcd" / "scripts"


@dataclass
class ManagedPath:
    """A file that project initialisation writes, unless skipped."""

    name: str
    path: Path
    content: str
    force: bool = False
    skip: bool = False

    def exists(self) -> bool:
        """Whether the file exists; errors other than absence are raised."""
        try:
            os.stat(self.path)
        except FileNotFoundError:
            return False
        return True

    def manage(self) -> None:
        """Write the file, creating its directories."""
        self.path.parent.mkdir(mode=0o755, parents=True, exist_ok=True)
        self.path.write_text(self.content, encoding="utf-8")


def smartcd_content(name: str) -> str:
    """The smartcd enter script for project ``name``."""
    return f"autostash PROJ={name}\n"


def note_content(name: str, when: datetime.datetime | None = None) -> str:
    """The header of a new project note."""
    when = datetime.datetime.now() if when is None else when
    stamp = when.strftime("%Y-%m-%dT%H:%M:%S")
    return (
        "{\n"
        f'"title": "{name}",\n'
        f'"reviewed-on": "{stamp}",\n'
        '"tags": [ "project" ],\n'
        "}\n"
    )


def vim_session(workdir: str | os.PathLike[str]) -> str:
    """An empty vim session that starts in ``workdir``."""
    return (
        "let SessionLoad = 1\n"
        "if &cp | set nocp | endif\n"
        "let s:so_save = &so | let s:siso_save = &siso | set so=0 siso=0\n"
        'let v:this_session=expand("<sfile>:p")\n'
        "silent only\n"
        "silent tabonly\n"
        f"cd {os.fspath(workdir)}\n"
        "if expand('%') == '' && !&modified && line('$') <= 1 && getline(1) == ''\n"
        "  let s:wipebuf = bufnr('%')\n"
        "endif\n"
        "set shortmess=aoO\n"
        "argglobal\n"
        "%argdel\n"
        "set splitbelow splitright\n"
        "set nosplitbelow\n"
        "set nosplitright\n"
        "wincmd t\n"
        "set winminheight=0\n"
        "set winheight=1\n"
        "set winminwidth=0\n"
        "set winwidth=1\n"
        "tabnext 1\n"
        "if exists('s:wipebuf') && len(win_findbuf(s:wipebuf)) == 0\n"
        "  silent exe 'bwipe ' . s:wipebuf\n"
        "endif\n"
        "unlet! s:wipebuf\n"
        "set winheight=1 winwidth=20 shortmess=filnxtToOS\n"
        "set winminheight=1 winminwidth=1\n"
        'let s:sx = expand("<sfile>:p:r")."x.vim"\n'
        "if file_readable(s:sx)\n"
        '  exe "source " . fnameescape(s:sx)\n'
        "endif\n"
        "let &so = s:so_save | let &siso = s:siso_save\n"
        "nohlsearch\n"
        "let g:this_session = v:this_session\n"
        "let g:this_obsession = v:this_session\n"
        "let g:this_obsession_status = 2\n"
        "doautoall SessionLoadPost\n"
        "unlet SessionLoad\n"
        '" vim: set ft=vim : \n'
    )


class _Parser(argparse.ArgumentParser):
    def error(self, message: str) -> None:  # type: ignore[override]
        raise ValueError(message)


def _parser(prog: str) -> argparse.ArgumentParser:
    parser = _Parser(prog=prog, add_help=False, allow_abbrev=False)
    for kind, what in (("vim", "vim session"), ("note", "note"), ("smartcd", "smartcd")):
        parser.add_argument(
            f"-skip-{kind}", f"--skip-{kind}", dest=f"skip_{kind}",
            action="store_true", help=f"skips creation of {what}",
        )
        parser.add_argument(
            f"-force-{kind}", f"--force-{kind}", dest=f"force_{kind}",
            action="store_true", help=f"forces creation of {what}",
        )
    parser.add_argument("names", nargs="*")
    return parser


def _combine(problems: list[str]) -> str:
    if len(problems) == 1:
        return problems[0]
    return "Multiple errors:\n" + "\n".join(f" * {problem}" for problem in problems)


def initialize(
    args: Sequence[str],
    home: str | os.PathLike[str] | None = None,
    workdir: str | os.PathLike[str] | None = None,
) -> list[Path]:
    """Create the vim session, note and smartcd script for a new project.

    ``args[0]`` is the command name and the rest are its flags and the one
    project name.  Nothing is written if any file already exists without its
    force flag; a ValueError lists every such file.  Returns the paths written.
    """
    home_dir = Path.home() if home is None else Path(home)
    work = os.getcwd() if workdir is None else os.fspath(workdir)
    prog = args[0] if args else "init"

    opts = _parser(prog).parse_args(list(args[1:]))
    if len(opts.names) != 1:
        raise ValueError(f"{prog} requires at least one argument")
    name = opts.names[0]

    managed = [
        ManagedPath(
            "vim", _sessions_dir(home_dir) / name, vim_session(work),
            force=opts.force_vim, skip=opts.skip_vim,
        ),
        ManagedPath(
            "note", _notes_dir(home_dir) / f"{name}.md", note_content(name),
            force=opts.force_note, skip=opts.skip_note,
        ),
        ManagedPath(
            "smartcd", Path(f"{_smartcd_dir(home_dir)}/{work}/bash_enter"),
            smartcd_content(name), force=opts.force_smartcd, skip=opts.skip_smartcd,
        ),
    ]
    active = [entry for entry in managed if not entry.skip]

    problems = []
    for entry in active:
        try:
            exists = entry.exists()
        except OSError as exc:
            problems.append(f"{entry.name} exist check: {exc}")
            continue
        if exists and not entry.force:
            problems.append(f"file already exists: {entry.path}")
    if problems:
        raise ValueError(_combine(problems))

    for entry in active:
        entry.manage()
    return [entry.path for entry in active]


def _vim(home: Path) -> int:
    project = os.environ.get("PROJ", "")
    if not project:
        raise ValueError("cannot infer session without PROJ set")
    completed = subprocess.run(["vim", "-S", str(_sessions_dir(home) / project)])
    return completed.returncode


def _run(args: list[str]) -> int:
    if not args:
        raise ValueError(_USAGE)
    command = args[0]
    if command == "init":
        initialize(args, Path.home(), os.getcwd())
        return 0
    if command == "vim":
        return _vim(Path.home())
    if command == "note":
        raise ValueError("nyi")
    raise ValueError(f"unknown subcommand {command}")


def main(argv: Sequence[str] | None = None) -> int:
    """Run ``proj init | vim | note``; returns the exit status."""
    args = list(sys.argv[1:] if argv is None else argv)
    try:
        return _run(args)
    except (ValueError, OSError, subprocess.SubprocessError) as exc:
        print(f"proj: {exc}", file=sys.stderr)
        return 1