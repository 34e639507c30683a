import datetime
from pathlib import Path
from unittest import mock

import pytest

from leatherman.proj import (
    ManagedPath,
    initialize,
    main,
    note_content,
    smartcd_content,
    vim_session,
)


def _smartcd_files(home):
    return list((home / ".smartcd" / "scripts").rglob("bash_enter"))


def test_smartcd_content():
    assert smartcd_content("demo") == "autostash PROJ=demo\n"


def test_note_content_header():
    text = note_content("demo", datetime.datetime(2020, 1, 2, 3, 4, 5))
    assert text.startswith('{\n"title": "demo",\n')
    assert '"reviewed-on": "2020-01-02T03:04:05",\n' in text
    assert text.endswith('"tags": [ "project" ],\n}\n')


def test_vim_session_changes_directory():
    text = vim_session("/srv/work")
    assert "\ncd /srv/work\n" in text
    assert text.startswith("let SessionLoad = 1\n")
    assert text.endswith('" vim: set ft=vim : \n')


def test_managed_path_exists_and_manage(tmp_path):
    entry = ManagedPath("note", tmp_path / "a" / "b" / "x.md", "body\n")
    assert entry.exists() is False
    entry.manage()
    assert entry.exists() is True
    assert entry.path.read_text() == "body\n"


def test_initialize_creates_all_files(tmp_path):
    home = tmp_path / "home"
    work = str(tmp_path / "work")
    written = initialize(["init", "demo"], home, work)
    assert len(written) == 3
    assert all(path.is_file() for path in written)
    session = home / ".vvar" / "sessions" / "demo"
    assert session.read_text() == vim_session(work)
    note = home / "code" / "notes" / "content" / "posts" / "demo.md"
    assert '"title": "demo"' in note.read_text()
    (smartcd,) = _smartcd_files(home)
    assert smartcd.read_text() == smartcd_content("demo")


def test_initialize_refuses_existing_files(tmp_path):
    home = tmp_path / "home"
    initialize(["init", "demo"], home, str(tmp_path))
    with pytest.raises(ValueError, match="Multiple errors:\n \\* file already exists: "):
        initialize(["init", "demo"], home, str(tmp_path))


def test_initialize_single_conflict_message(tmp_path):
    home = tmp_path / "home"
    session = home / ".vvar" / "sessions" / "demo"
    session.parent.mkdir(parents=True)
    session.write_text("old")
    with pytest.raises(ValueError) as info:
        initialize(["init", "demo"], home, str(tmp_path))
    assert str(info.value) == f"file already exists: {session}"
    assert session.read_text() == "old"
    assert _smartcd_files(home) == []


def test_initialize_force_overwrites(tmp_path):
    home = tmp_path / "home"
    session = home / ".vvar" / "sessions" / "demo"
    session.parent.mkdir(parents=True)
    session.write_text("old")
    initialize(["init", "-force-vim", "demo"], home, str(tmp_path))
    assert session.read_text() == vim_session(str(tmp_path))


def test_initialize_skip_flags(tmp_path):
    home = tmp_path / "home"
    written = initialize(
        ["init", "--skip-vim", "-skip-smartcd", "demo"], home, str(tmp_path)
    )
    assert written == [home / "code" / "notes" / "content" / "posts" / "demo.md"]
    assert not (home / ".vvar").exists()
    assert _smartcd_files(home) == []


def test_initialize_requires_name(tmp_path):
    with pytest.raises(ValueError, match="init requires at least one argument"):
        initialize(["init"], tmp_path, str(tmp_path))


def test_initialize_rejects_unknown_flag(tmp_path):
    with pytest.raises(ValueError):
        initialize(["init", "--bogus", "demo"], tmp_path, str(tmp_path))


def test_main_usage(capsys):
    assert main([]) == 1
    assert "usage: proj init | vim | note" in capsys.readouterr().err


def test_main_note_not_ready(capsys):
    assert main(["note"]) == 1
    assert "nyi" in capsys.readouterr().err


def test_main_unknown(capsys):
    assert main(["bogus"]) == 1
    assert "unknown subcommand bogus" in capsys.readouterr().err


def test_main_vim_requires_proj(monkeypatch, capsys):
    monkeypatch.delenv("PROJ", raising=False)
    assert main(["vim"]) == 1
    assert "cannot infer session without PROJ set" in capsys.readouterr().err


def test_main_vim_runs_editor(monkeypatch, tmp_path):
    monkeypatch.setenv("HOME", str(tmp_path))
    monkeypatch.setenv("PROJ", "demo")
    with mock.patch("subprocess.run") as run:
        run.return_value.returncode = 0
        assert main(["vim"]) == 0
    run.assert_called_once_with(
        ["vim", "-S", str(Path(tmp_path) / ".vvar" / "sessions" / "demo")]
    )


def test_main_init(monkeypatch, tmp_path):
    home = tmp_path / "home"
    work = tmp_path / "work"
    work.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.chdir(work)
    assert main(["init", "demo"]) == 0
    assert (home / ".vvar" / "sessions" / "demo").is_file()
    assert main(["init", "demo"]) == 1