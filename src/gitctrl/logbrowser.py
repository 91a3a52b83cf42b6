#!/usr/bin/env python3
"""
logbrowser - Interactive commit history.

Shows a decorated graph of recent commits and offers commit inspection with
a colored diff, reset to a commit, branching from a commit and history search.
"""

import logging
from enum import Enum
from typing import List, Optional

from gitctrl.errors import ValidationError
from gitctrl.output import bold, confirm, cyan, green, red, safe_input, yellow
from gitctrl.session import Session

logger = logging.getLogger(__name__)

SEPARATOR_WIDTH = 80

RESET_MODES = {
    "1": "--soft",
    "2": "--mixed",
    "3": "--hard",
}
DEFAULT_RESET_MODE = "--mixed"


class DiffLine(Enum):
    FILE_HEADER = "file-header"
    INDEX = "index"
    FILE_MARKER = "file-marker"
    HUNK = "hunk"
    ADDED = "added"
    REMOVED = "removed"
    BLANK = "blank"
    CONTEXT = "context"


def classify_diff_line(line: str) -> DiffLine:
    """Kind of a unified-diff line, judged by its prefix."""
    if line.startswith("diff --git"):
        return DiffLine.FILE_HEADER
    if line.startswith("index "):
        return DiffLine.INDEX
    # +++/--- must win over the single-character checks below
    if line.startswith("+++") or line.startswith("---"):
        return DiffLine.FILE_MARKER
    if line.startswith("@@"):
        return DiffLine.HUNK
    if line.startswith("+"):
        return DiffLine.ADDED
    if line.startswith("-"):
        return DiffLine.REMOVED
    if line == "":
        return DiffLine.BLANK
    return DiffLine.CONTEXT


DIFF_STYLES = {
    DiffLine.FILE_HEADER: bold,
    DiffLine.INDEX: cyan,
    DiffLine.FILE_MARKER: cyan,
    DiffLine.HUNK: cyan,
    DiffLine.ADDED: green,
    DiffLine.REMOVED: red,
}


def render_diff_line(line: str) -> str:
    style = DIFF_STYLES.get(classify_diff_line(line))
    return style(line) if style else line


def display_colored_diff(diff_text: str):
    for line in diff_text.split("\n"):
        print(render_diff_line(line))


def format_log(lines: List[str]) -> str:
    """Indent log lines and put a separator rule between entries."""
    rule = f"  {cyan('─' * SEPARATOR_WIDTH)}"
    out = []
    for i, line in enumerate(lines):
        out.append(f"  {line}")
        if i < len(lines) - 1:
            out.append(rule)
    return "\n".join(out)


def show_recent_log(session: Session):
    count = session.config.get("recent_count", 10)
    print("📜 Recent history:")
    result = session.git_checked("log", "--oneline", f"-{count}", context="Failed to read history")
    print(result.stdout)


def show_commit_details(session: Session):
    """Commit metadata and stats, then the full colored diff."""
    commit_hash = safe_input(cyan("🔍 Commit hash: "))
    if not commit_hash:
        raise ValidationError("A commit hash is required")

    result = session.git_checked(
        "show", "--stat", "--pretty=format:%h - %s%n%an <%ae>%n%ad%n", commit_hash,
        context=f"Cannot show commit {commit_hash}"
    )
    print(f"📋 {cyan('Commit details')}:")
    print(result.stdout)

    diff_text = commit_diff(session, commit_hash)
    if not diff_text.strip():
        print("No file changes in this commit")
        return

    print(f"\n🔍 {cyan('Full diff')}:")
    display_colored_diff(diff_text)


def commit_diff(session: Session, commit_hash: str) -> str:
    """Diff against the parent; root commits fall back to a parent-less show."""
    result = session.git("diff", f"{commit_hash}^", commit_hash)
    if result.returncode == 0:
        return result.stdout

    logger.debug(f"No parent diff for {commit_hash}, using show")
    result = session.git_checked("show", "--format=", commit_hash,
                                 context="Cannot get the diff")
    return result.stdout


def reset_mode_flag(choice: str) -> str:
    return RESET_MODES.get(choice, DEFAULT_RESET_MODE)


def reset_to_commit(session: Session) -> bool:
    show_recent_log(session)

    print("\n🔄 Reset types:")
    print("1. 🟢 SOFT - keep changes staged")
    print("2. 🟡 MIXED - keep changes, unstaged")
    print("3. 🔴 HARD - discard ALL changes")
    flag = reset_mode_flag(safe_input("\nType (1-3): "))

    target = safe_input("🎯 Commit hash (or HEAD~n): ")
    if not target:
        raise ValidationError("A commit hash is required")

    if flag == "--hard" and not confirm(red(f"⚠️ Discard all changes and reset to {target}?")):
        print("❌ Reset cancelled")
        return False

    session.git_checked("reset", flag, target, context=f"Reset to {target} failed")

    print(green("✅ Reset done!"))
    session.history.add(f"Reset {flag} to {target}")
    return True


def create_branch_from_commit(session: Session) -> bool:
    show_recent_log(session)

    commit_hash = safe_input("\n🎯 Commit hash: ")
    branch_name = safe_input("🌱 Branch name: ")
    if not commit_hash or not branch_name:
        raise ValidationError("Both a commit hash and a branch name are required")

    session.git_checked("checkout", "-b", branch_name, commit_hash,
                        context=f"Failed to create branch '{branch_name}'")

    print(green("✅ Branch created and checked out!"))
    session.history.add(f"Branch {branch_name} from {commit_hash}")
    return True


def _query_output(session: Session, *args: str) -> Optional[str]:
    result = session.git(*args)
    if result.returncode != 0 or not result.stdout.strip():
        return None
    return result.stdout.rstrip()


def search_history(session: Session) -> bool:
    """Look for the term in commit messages and in file paths."""
    query = safe_input("🔍 Search (message/file): ")
    if not query:
        raise ValidationError("A search term is required")

    by_message = _query_output(session, "log", "--oneline", f"--grep={query}", "-i")
    by_path = _query_output(session, "log", "--oneline", "--", f"*{query}*")

    if by_message:
        print("📝 Commits with a matching message:")
        print(by_message)
    if by_path:
        print("📁 Commits touching matching files:")
        print(by_path)

    if not by_message and not by_path:
        print(yellow("❌ No results found"))
        return False
    return True


LOG_ACTIONS = {
    "1": ("👀 Show commit details", show_commit_details),
    "2": ("⏪ Reset to a commit", reset_to_commit),
    "3": ("🌱 Create branch from commit", create_branch_from_commit),
    "4": ("🔍 Search history", search_history),
}


def interactive_log(session: Session):
    print(f"📜 === {bold('INTERACTIVE HISTORY')} ===")

    count = session.config.get("log_count", 15)
    result = session.git_checked("log", "--oneline", f"-{count}", "--graph", "--decorate",
                                 context="Failed to read history")

    print()
    print(format_log(result.stdout.strip().split("\n")))
    print()

    print(f"{cyan('Available actions')}:")
    for key, (label, _) in LOG_ACTIONS.items():
        print(f"{key}. {label}")

    choice = safe_input(cyan(f"\nChoose (1-{len(LOG_ACTIONS)}): "))
    action = LOG_ACTIONS.get(choice)
    if action is not None:
        action[1](session)
