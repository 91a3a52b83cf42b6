#!/usr/bin/env python3
"""
session - Per-process context passed to every gitctrl operation.

Holds the working directory, the quick-commit templates, the action history
and the process runner. Nothing here is module-global.
"""

import logging
import subprocess
from enum import Enum
from pathlib import Path
from typing import Any, Dict, Optional, Sequence

from gitctrl.actions import ActionHistory
from gitctrl.config import DEFAULT_QUICK_COMMITS, default_config, get_quick_commits
from gitctrl.errors import StartupError, ValidationError
from gitctrl.runner import Runner, check, run_command

logger = logging.getLogger(__name__)


class RepoState(Enum):
    """Whether the working directory currently holds a repository."""
    NOT_A_REPOSITORY = "not-a-repository"
    REPOSITORY = "repository"


class Session:
    """Mutable state shared by the menu loop and the actions it dispatches."""

    def __init__(self, working_dir: Path,
                 quick_commits: Sequence[str] = DEFAULT_QUICK_COMMITS,
                 runner: Runner = run_command,
                 config: Optional[Dict[str, Any]] = None,
                 history: Optional[ActionHistory] = None):
        self.working_dir = Path(working_dir)
        self.quick_commits = tuple(quick_commits)
        self.runner = runner
        self.config = config if config is not None else default_config()
        self.history = history if history is not None else ActionHistory()

    @classmethod
    def from_environment(cls, config: Dict[str, Any], runner: Runner = run_command) -> "Session":
        """Start in the process working directory; fatal if it is gone."""
        try:
            cwd = Path.cwd()
        except OSError as e:
            raise StartupError(f"Cannot resolve the current directory: {e}") from e
        return cls(cwd, get_quick_commits(config), runner, config)

    @property
    def git_binary(self) -> str:
        return self.config.get("git_binary") or "git"

    def git(self, *args: str) -> subprocess.CompletedProcess:
        """Run git with args in the working directory (never raises)."""
        return self.runner(self.git_binary, list(args), self.working_dir)

    def git_checked(self, *args: str, context: Optional[str] = None) -> subprocess.CompletedProcess:
        """Run git and raise CommandError on a non-zero exit."""
        return check(self.git(*args), context)

    def repo_state(self) -> RepoState:
        # Only the directory itself counts, ancestors are not searched
        if (self.working_dir / ".git").exists():
            return RepoState.REPOSITORY
        return RepoState.NOT_A_REPOSITORY

    def is_repository(self) -> bool:
        return self.repo_state() is RepoState.REPOSITORY

    def set_working_directory(self, new_path: str) -> Path:
        """Switch to another directory and start a fresh action history."""
        if not new_path:
            raise ValidationError("Empty path")

        path = Path(new_path).expanduser()
        if not path.is_absolute():
            path = self.working_dir / path
        path = path.resolve()

        if not path.exists():
            raise ValidationError(f"Directory does not exist: {path}")
        if not path.is_dir():
            raise ValidationError(f"Not a directory: {path}")

        self.working_dir = path
        self.history.clear()
        logger.info(f"Working directory set to {path}")
        return path
