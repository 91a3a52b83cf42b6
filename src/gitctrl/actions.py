#!/usr/bin/env python3
"""
actions - Bounded history of the actions performed in this session.

Only the ten most recent entries are kept; the oldest one is evicted first.
"""

import logging
from collections import deque
from datetime import datetime
from typing import Callable, List

from gitctrl.output import bold, dim

logger = logging.getLogger(__name__)

HISTORY_CAPACITY = 10


class ActionEntry:
    """One recorded action: a minute-precision timestamp and a description."""

    __slots__ = ('timestamp', 'description')

    def __init__(self, timestamp: datetime, description: str):
        self.timestamp = timestamp.replace(second=0, microsecond=0)
        self.description = description

    def __str__(self) -> str:
        return f"[{self.timestamp.strftime('%H:%M')}] {self.description}"

    def __repr__(self) -> str:
        return f"ActionEntry({str(self)!r})"


class ActionHistory:
    """Insertion-ordered action log capped at HISTORY_CAPACITY entries."""

    def __init__(self, clock: Callable[[], datetime] = datetime.now):
        self._clock = clock
        self._entries = deque(maxlen=HISTORY_CAPACITY)

    def add(self, description: str) -> ActionEntry:
        entry = ActionEntry(self._clock(), description)
        self._entries.append(entry)
        logger.info(description)
        return entry

    def entries(self) -> List[ActionEntry]:
        """Entries oldest first."""
        return list(self._entries)

    def recent(self) -> List[ActionEntry]:
        """Entries newest first."""
        return list(reversed(self._entries))

    def clear(self):
        self._entries.clear()

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self):
        return iter(self.entries())


def show_history(history: ActionHistory):
    """Print the recorded actions, newest first."""
    if not len(history):
        print("📜 No recent actions")
        return

    print(f"📜 === {bold('ACTION HISTORY')} ===")
    for i, entry in enumerate(history.recent(), 1):
        print(f"{i}. {entry}")
    print(dim(f"\n(last {HISTORY_CAPACITY} actions are kept)"))
