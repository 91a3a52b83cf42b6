"""Tests for status display, quick commit, auto sync."""

import re
from datetime import datetime

import pytest

from conftest import commit_file, git

from gitctrl import commit
from gitctrl.commit import auto_commit_message, choose_template
from gitctrl.errors import CommandError

TEMPLATES = ("🚀 Quick update", "🐛 Bug fix", "✨ New feature")


class TestChooseTemplate:

    def test_in_range(self):
        assert choose_template(TEMPLATES, "2") == "🐛 Bug fix"

    def test_out_of_range_falls_back_to_first(self):
        assert choose_template(TEMPLATES, "99") == TEMPLATES[0]
        assert choose_template(TEMPLATES, "0") == TEMPLATES[0]
        assert choose_template(TEMPLATES, "-1") == TEMPLATES[0]

    def test_non_numeric_falls_back_to_first(self):
        assert choose_template(TEMPLATES, "abc") == TEMPLATES[0]
        assert choose_template(TEMPLATES, "") == TEMPLATES[0]

    def test_custom_entry(self):
        assert choose_template(TEMPLATES, "4") is None


def test_auto_commit_message_format():
    assert auto_commit_message(datetime(2024, 1, 2, 3, 4, 5)) == "Auto-commit: 2024-01-02 03:04:05"


def test_quick_commit_nothing_to_commit(fake_session, fake_runner, capsys):
    assert commit.quick_commit(fake_session) is False
    assert "Nothing to commit" in capsys.readouterr().out
    assert fake_runner.subcommands() == ["status"]
    assert len(fake_session.history) == 0


def test_quick_commit_out_of_range_uses_first_template(fake_session, fake_runner, feed_input):
    fake_runner.responses[("status", "--porcelain")] = (0, "?? a.txt\n")
    feed_input("99")

    assert commit.quick_commit(fake_session) is True

    first = fake_session.quick_commits[0]
    assert fake_runner.called_with("add", ".")
    assert fake_runner.called_with("commit", "-m", first)
    assert fake_runner.subcommands().index("add") < fake_runner.subcommands().index("commit")
    assert [e.description for e in fake_session.history] == [f"Quick commit: {first}"]


def test_quick_commit_custom_message(repo_session, git_repo, feed_input):
    (git_repo / "notes.txt").write_text("hello\n")
    custom = str(len(repo_session.quick_commits) + 1)
    feed_input(custom, "Write release notes")

    commit.quick_commit(repo_session)

    assert git(git_repo, "log", "-1", "--pretty=%s").strip() == "Write release notes"
    assert git(git_repo, "status", "--porcelain") == ""


def test_quick_commit_template_real_repository(repo_session, git_repo, feed_input):
    (git_repo / "fix.py").write_text("x = 1\n")
    feed_input("2")

    commit.quick_commit(repo_session)

    assert git(git_repo, "log", "-1", "--pretty=%s").strip() == repo_session.quick_commits[1]


def test_quick_commit_empty_custom_message_becomes_auto_commit(fake_session, fake_runner, feed_input):
    fake_runner.responses[("status", "--porcelain")] = (0, "M  a.txt\n")
    feed_input(str(len(fake_session.quick_commits) + 1), "")

    commit.quick_commit(fake_session)

    commit_args = [args for _, args in fake_runner.calls if args[0] == "commit"][0]
    assert re.match(r"Auto-commit: \d{4}-\d{2}-\d{2} \d{2}:\d{2}:\d{2}$", commit_args[2])


def test_failed_commit_leaves_changes_staged(fake_session, fake_runner, feed_input):
    fake_runner.responses[("status", "--porcelain")] = (0, "?? a.txt\n")
    fake_runner.responses[("commit", "-m", fake_session.quick_commits[0])] = (1, "Author identity unknown")
    feed_input("1")

    with pytest.raises(CommandError) as excinfo:
        commit.quick_commit(fake_session)

    assert "Author identity unknown" in str(excinfo.value)
    # No compensation: nothing un-stages the files
    assert "reset" not in fake_runner.subcommands()
    assert len(fake_session.history) == 0


def test_auto_sync(repo_session, git_repo):
    (git_repo / "a.txt").write_text("a")
    assert commit.auto_sync(repo_session) is True
    assert git(git_repo, "log", "-1", "--pretty=%s").startswith("Auto-commit: ")
    assert [e.description for e in repo_session.history] == ["Auto sync"]

    assert commit.auto_sync(repo_session) is False


def test_smart_status_clean(repo_session, git_repo, capsys):
    commit_file(git_repo, "a.txt", "a", "Initial import")
    commit.smart_status(repo_session)
    out = capsys.readouterr().out
    assert "working tree clean" in out
    assert "Initial import" in out
    assert "1 commits | 1 files | 1 branches" in out


def test_smart_status_with_changes(repo_session, git_repo, capsys):
    commit_file(git_repo, "old.txt", "a", "first")
    (git_repo / "old.txt").unlink()
    git(git_repo, "rm", "-q", "--cached", "old.txt")
    (git_repo / "temp.log").write_text("x")

    commit.smart_status(repo_session)
    out = capsys.readouterr().out
    assert "Deleted (1): old.txt" in out
    assert "Untracked (1): temp.log" in out
    assert "verify" in out.lower()
