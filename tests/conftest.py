"""Shared fixtures: throwaway repositories, a recording runner, scripted input."""

import subprocess
import sys
from pathlib import Path

import pytest

# Allow running the suite from a source checkout without installing
sys.path.insert(0, str(Path(__file__).resolve().parent.parent / "src"))

from gitctrl.config import default_config  # noqa: E402
from gitctrl.session import Session  # noqa: E402


def git(repo: Path, *args: str) -> str:
    """Run git in repo for test setup; fail loudly."""
    result = subprocess.run(
        ["git"] + list(args),
        cwd=repo,
        capture_output=True,
        text=True,
        encoding="utf-8",
        check=True,
    )
    return result.stdout


def commit_file(repo: Path, name: str, content: str, message: str):
    path = repo / name
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content)
    git(repo, "add", name)
    git(repo, "commit", "-q", "-m", message)


class FakeRunner:
    """Records every invocation and answers from a table keyed by args."""

    def __init__(self, responses=None):
        self.calls = []
        self.responses = dict(responses or {})

    def __call__(self, command, args, cwd):
        self.calls.append((command, list(args)))
        returncode, output = self.responses.get(tuple(args), (0, ""))
        return subprocess.CompletedProcess([command] + list(args), returncode, stdout=output)

    def called_with(self, *args) -> bool:
        return any(call_args == list(args) for _, call_args in self.calls)

    def subcommands(self):
        return [call_args[0] for _, call_args in self.calls if call_args]


@pytest.fixture
def config():
    cfg = default_config()
    cfg["clear_screen"] = False
    return cfg


@pytest.fixture
def git_repo(tmp_path):
    """An empty repository on branch main with a local identity."""
    repo = tmp_path / "repo"
    repo.mkdir()
    git(repo, "init", "-q")
    git(repo, "symbolic-ref", "HEAD", "refs/heads/main")
    git(repo, "config", "user.email", "test@test.com")
    git(repo, "config", "user.name", "Test")
    git(repo, "config", "commit.gpgsign", "false")
    return repo


@pytest.fixture
def repo_session(git_repo, config):
    return Session(git_repo, config["quick_commits"], config=config)


@pytest.fixture
def fake_runner():
    return FakeRunner()


@pytest.fixture
def fake_session(tmp_path, fake_runner, config):
    return Session(tmp_path, config["quick_commits"], runner=fake_runner, config=config)


@pytest.fixture
def feed_input(monkeypatch):
    """Script the answers input() returns; running out behaves like Ctrl+D."""
    def _feed(*answers):
        remaining = iter(answers)

        def fake_input(prompt=""):
            try:
                return next(remaining)
            except StopIteration:
                raise EOFError

        monkeypatch.setattr("builtins.input", fake_input)
    return _feed
