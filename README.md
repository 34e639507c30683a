# leatherman

A collection of small, independent utilities that share one command-line
entry point, plus a handful of library modules you can import directly.

## Installation

```
pip install .
```

For running the test suite:

```
pip install ".[test]"
pytest
```

## Command line

The `leatherman` command picks a tool by its first argument. When the program
is started under the name of a tool (for example through a link named `proj`),
that tool runs directly.

```
leatherman version          # print the build version and library versions
leatherman xyzzy            # prints "nothing happens"
leatherman proj init NAME   # same as "proj init NAME"
```

If the tool name is not recognised, a list of the available tools is written
to standard error and the command exits with status 1. Errors raised by a tool
are reported on standard error as `<tool>: <message>`, also with status 1.

### proj

`proj` manages per-project scaffolding.

```
proj init myproject
proj vim
```

`proj init NAME` writes three files:

- a vim session at `~/.vvar/sessions/NAME` that changes to the current
  directory,
- a note at `~/code/notes/content/posts/NAME.md` with a JSON header holding
  the title, the time of creation and a `project` tag,
- a smartcd script at `~/.smartcd/scripts/<current directory>/bash_enter`
  containing `autostash PROJ=NAME`.

If any of these files already exists, nothing is written and every conflict is
reported. The flags `-skip-vim`, `-skip-note`, `-skip-smartcd` leave a file
out, and `-force-vim`, `-force-note`, `-force-smartcd` overwrite one; each
may also be written with two dashes.

`proj vim` opens vim on the session named by the `PROJ` environment variable
and fails if `PROJ` is not set. `proj note` is not available and reports
`nyi`.

The same initialisation is available from Python as
`leatherman.proj.initialize(args, home, workdir)`, which returns the paths it
wrote and raises `ValueError` on conflicts; `vim_session`, `note_content` and
`smartcd_content` return the file contents, and `ManagedPath` describes one
file with its `exists()` and `manage()` methods.

## Library modules

- `leatherman.shellquote.quote(args)` quotes a list of strings and joins them
  into one POSIX shell command line. Leading `NAME=value` words are quoted so
  they are not taken as assignments. Strings containing NUL raise
  `NullByteError`.
- `leatherman.netrc.load(path)` and `leatherman.netrc.loads(text)` parse a
  netrc file into a `Netrc`, which offers `machine(name)` and
  `machine_and_login(name, login)` lookups returning a `Login` entry or
  `None`. A `default` entry is found under the name `"default"`.
- `leatherman.mozlz4.decompress(stream)` reads Firefox's mozlz4 / jsonlz4
  format from a binary stream and returns the data; `compress(data, size)`
  writes it. Bad input raises `WrongHeaderError`, `WrongSizeError` or another
  `MozLz4Error` (all subclasses of `ValueError`).
- `leatherman.datefmt.translate_format(fmt)` turns common strftime
  directives such as `%F` and `%T` into the reference-time layout
  (`2006-01-02`, `15:04:05`) used by some date libraries.
- `leatherman.timeutil.jump_to(start, dest)` moves a date or datetime forward
  to the next occurrence of weekday `dest` (Monday is 0, as in `calendar`),
  returning `start` itself if it already falls on that day.
- `leatherman.twilio` checks webhook signatures with `generate_mac` and
  `check_mac` (which raises `ValueError` for a signature that is not base64),
  and collects attached `Media` from a form with `extract_media`.
- `leatherman.sweetmarias` scrapes the green coffee catalogue:
  `all_coffees()` lists product links in random order and `load_coffee(url)`
  returns a `Coffee`; `parse_all_coffees` and `parse_coffee` work on HTML you
  already have. A page that does not answer with status 200 raises
  `requests.HTTPError`.
- `leatherman.now` edits a daily "now" markdown list: `add_item` appends to
  the section for a date (creating it if missing, and not adding an item twice),
  `toggle_now` strikes an item through or back, and `item_digest` gives the MD5
  identifier used to pick an item.

Example:

```python
from leatherman.shellquote import quote

print(quote(["echo", "it's here"]))
```

## What is not included

The package has no notes web server, no SMS-driven notes receiver and no
renderer that turns a notes directory into a static site; `leatherman.now`
only offers the list-editing functions such a server would use. The
`leatherman` command does not update itself.