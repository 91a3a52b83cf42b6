#!/usr/bin/env python3
"""
inspector - Read-only repository queries and parsing of their text output.

Everything here runs read-only git commands through the session and turns
the line-oriented output into counts and summaries.
"""

import os
from collections import Counter
from typing import List, Optional, Sequence, Tuple

from gitctrl.session import Session

DEFAULT_BRANCH = "main"
NO_EXTENSION = "sans extension"
TOP_FILE_TYPES = 5


class StatusSummary:
    """Porcelain status lines sorted into added/modified/deleted/untracked."""

    def __init__(self):
        self.added: List[str] = []
        self.modified: List[str] = []
        self.deleted: List[str] = []
        self.untracked: List[str] = []

    @property
    def is_clean(self) -> bool:
        return not (self.added or self.modified or self.deleted or self.untracked)

    @property
    def suggestions(self) -> List[str]:
        tips = []
        if not self.is_clean:
            tips.append("Stage and commit these changes (Quick commit or Auto sync)")
        if self.deleted:
            tips.append("Files were deleted - verify the deletion is intentional")
        return tips

    def as_dict(self) -> dict:
        return {
            'added': list(self.added),
            'modified': list(self.modified),
            'deleted': list(self.deleted),
            'untracked': list(self.untracked),
        }


def is_repository(session: Session) -> bool:
    return session.is_repository()


def count_lines(text: Optional[str]) -> int:
    """Number of non-empty lines; empty output counts as zero."""
    if not text or not text.strip():
        return 0
    return len([line for line in text.splitlines() if line.strip()])


def current_branch(session: Session) -> str:
    """Checked-out branch name, or DEFAULT_BRANCH if git cannot tell."""
    result = session.git("branch", "--show-current")
    if result.returncode != 0:
        return DEFAULT_BRANCH
    return result.stdout.strip()


def commit_count(session: Session) -> int:
    result = session.git("rev-list", "--count", "HEAD")
    if result.returncode != 0:
        return 0
    try:
        return int(result.stdout.strip())
    except ValueError:
        return 0


def tracked_files(session: Session) -> List[str]:
    result = session.git("ls-files")
    if result.returncode != 0:
        return []
    return [line for line in result.stdout.splitlines() if line.strip()]


def repo_stats(session: Session) -> Tuple[int, int, int]:
    """(commits, tracked files, local branches)."""
    commits = commit_count(session)
    files = len(tracked_files(session))

    branches_result = session.git("branch")
    branches = count_lines(branches_result.stdout) if branches_result.returncode == 0 else 0

    return commits, files, branches


def get_status(session: Session) -> str:
    """Raw `status --porcelain` text; raises CommandError on failure."""
    return session.git_checked("status", "--porcelain", context="git status").stdout


def analyze_changes(status_text: str) -> StatusSummary:
    """
    Bucket porcelain status lines by the first status character.

    Lines shorter than 3 characters are skipped; the path starts after the
    two status characters and the separating space.
    """
    summary = StatusSummary()
    buckets = {
        'A': summary.added,
        'M': summary.modified,
        'D': summary.deleted,
        '?': summary.untracked,
    }

    # No strip before splitting: a leading space is a valid status character
    for line in status_text.splitlines():
        line = line.rstrip('\r')
        if len(line) < 3:
            continue
        bucket = buckets.get(line[0])
        if bucket is not None:
            bucket.append(line[3:])

    return summary


def file_type_histogram(paths: Sequence[str]) -> Counter:
    """Count files per extension; files without one go under NO_EXTENSION."""
    counts = Counter()
    for path in paths:
        if not path or not path.strip():
            continue
        ext = os.path.splitext(os.path.basename(path))[1]
        counts[ext or NO_EXTENSION] += 1
    return counts


def analyze_file_types(paths: Sequence[str], limit: int = TOP_FILE_TYPES) -> List[Tuple[str, int]]:
    """Most common extensions, largest count first."""
    return file_type_histogram(paths).most_common(limit)


def parse_branch_lines(text: str) -> List[Tuple[bool, str]]:
    """`branch -v` lines as (is_current, line) with the marker stripped."""
    branches = []
    for line in text.splitlines():
        line = line.strip()
        if not line:
            continue
        is_current = line.startswith('*')
        if is_current:
            line = line[1:].strip()
        branches.append((is_current, line))
    return branches


def list_branches(session: Session) -> List[Tuple[bool, str]]:
    result = session.git("branch", "-v")
    if result.returncode != 0:
        return []
    return parse_branch_lines(result.stdout)


def last_commit(session: Session) -> Optional[str]:
    result = session.git("log", "-1", "--pretty=format:%h - %s (%cr)")
    if result.returncode != 0 or not result.stdout.strip():
        return None
    return result.stdout.strip()


def recent_commit_count(session: Session, since: str = "1.week.ago") -> int:
    result = session.git("log", f"--since={since}", "--oneline")
    if result.returncode != 0:
        return 0
    return count_lines(result.stdout)


def repository_size(session: Session) -> Optional[str]:
    """The size-pack figure from `count-objects -vH`, e.g. '1.21 MiB'."""
    result = session.git("count-objects", "-vH")
    if result.returncode != 0:
        return None
    for line in result.stdout.splitlines():
        if line.startswith("size-pack"):
            _, _, value = line.partition(":")
            return value.strip() or None
    return None
