"""Tests for the bounded action history and the session that owns it."""

from datetime import datetime, timedelta
from pathlib import Path

import pytest

from gitctrl.actions import HISTORY_CAPACITY, ActionEntry, ActionHistory, show_history
from gitctrl.errors import StartupError, ValidationError
from gitctrl.session import Session


def make_clock(start=datetime(2024, 5, 1, 9, 30, 45)):
    ticks = iter(start + timedelta(minutes=i) for i in range(1000))
    return lambda: next(ticks)


def test_entry_has_minute_precision():
    entry = ActionEntry(datetime(2024, 5, 1, 14, 7, 59, 123), "Auto sync")
    assert str(entry) == "[14:07] Auto sync"
    assert entry.timestamp.second == 0


def test_history_never_exceeds_capacity():
    history = ActionHistory(clock=make_clock())
    for i in range(25):
        history.add(f"action {i}")
        assert len(history) <= HISTORY_CAPACITY
    assert len(history) == 10


def test_eleventh_append_evicts_the_first():
    history = ActionHistory(clock=make_clock())
    for i in range(1, 12):
        history.add(f"action {i}")

    descriptions = [e.description for e in history.entries()]
    assert "action 1" not in descriptions
    assert descriptions == [f"action {i}" for i in range(2, 12)]


def test_recent_is_newest_first():
    history = ActionHistory(clock=make_clock())
    history.add("first")
    history.add("second")
    assert [e.description for e in history.recent()] == ["second", "first"]


def test_show_history_empty(capsys):
    show_history(ActionHistory())
    assert "No recent actions" in capsys.readouterr().out


def test_show_history_lists_newest_first(capsys):
    history = ActionHistory(clock=make_clock())
    history.add("Repository initialized")
    history.add("Quick commit: 🐛 Bug fix")

    show_history(history)
    out = capsys.readouterr().out
    assert out.index("1. [09:31] Quick commit") < out.index("2. [09:30] Repository initialized")


def test_changing_directory_resets_history(tmp_path, config):
    session = Session(tmp_path, config=config)
    session.history.add("something")

    target = tmp_path / "other"
    target.mkdir()
    assert session.set_working_directory(str(target)) == target.resolve()
    assert session.working_dir == target.resolve()
    assert len(session.history) == 0


def test_relative_directory_resolves_against_working_dir(tmp_path, config):
    (tmp_path / "child").mkdir()
    session = Session(tmp_path, config=config)
    assert session.set_working_directory("child") == (tmp_path / "child").resolve()


@pytest.mark.parametrize("bad", ["", "does/not/exist"])
def test_invalid_directory_keeps_state(tmp_path, config, bad):
    session = Session(tmp_path, config=config)
    session.history.add("kept")

    with pytest.raises(ValidationError):
        session.set_working_directory(bad)

    assert session.working_dir == tmp_path
    assert len(session.history) == 1


def test_file_is_not_a_directory(tmp_path, config):
    (tmp_path / "file.txt").write_text("x")
    session = Session(tmp_path, config=config)
    with pytest.raises(ValidationError):
        session.set_working_directory("file.txt")


def test_unresolvable_startup_directory_is_fatal(monkeypatch, config):
    def vanished(cls):
        raise FileNotFoundError(2, "No such file or directory")

    monkeypatch.setattr(Path, "cwd", classmethod(vanished))
    with pytest.raises(StartupError):
        Session.from_environment(config)


def test_quick_commits_are_immutable(tmp_path, config):
    session = Session(tmp_path, config["quick_commits"], config=config)
    assert isinstance(session.quick_commits, tuple)
    assert session.quick_commits[0] == "🚀 Quick update"
