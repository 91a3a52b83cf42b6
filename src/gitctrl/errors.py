#!/usr/bin/env python3
"""
errors - Exception types shared by every gitctrl action.

Recoverable errors (CommandError, ValidationError) abort the current action
only; the menu prints them and carries on. StartupError is fatal.
"""

from typing import List, Optional


class GitCtrlError(Exception):
    """Base class for errors the menu loop knows how to report."""
    pass


class CommandError(GitCtrlError):
    """An external command could not be launched or exited non-zero."""

    def __init__(self, command: List[str], returncode: int, output: str = "",
                 context: Optional[str] = None):
        self.command = list(command)
        self.returncode = returncode
        self.output = output
        self.context = context
        super().__init__(self._build_message())

    def _build_message(self) -> str:
        detail = self.output.strip() or f"exit status {self.returncode}"
        prefix = self.context or " ".join(self.command)
        return f"{prefix}: {detail}"


class ValidationError(GitCtrlError):
    """Required user input was empty or invalid."""
    pass


class StartupError(GitCtrlError):
    """The initial working directory could not be resolved."""
    pass


class UserCancelled(Exception):
    """Raised on Ctrl+C or end of input at any prompt."""
    pass
