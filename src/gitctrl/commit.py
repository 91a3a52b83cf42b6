#!/usr/bin/env python3
"""
commit - Status overview and fast commit workflows.

Provides:
- Smart status with change analysis and suggestions
- Quick commit from predefined message templates
- Auto sync (stage everything, commit with a timestamped message)
- Repository initialization
"""

from datetime import datetime
from typing import Optional, Sequence

from gitctrl import inspector
from gitctrl.output import bold, cyan, green, safe_input
from gitctrl.session import Session


def auto_commit_message(now: Optional[datetime] = None) -> str:
    now = now or datetime.now()
    return f"Auto-commit: {now.strftime('%Y-%m-%d %H:%M:%S')}"


def choose_template(templates: Sequence[str], choice: str) -> Optional[str]:
    """
    Map a menu answer to a template.

    Returns None when the custom-message entry (len + 1) was picked. Any
    other out-of-range or non-numeric answer falls back to the first template.
    """
    if choice == str(len(templates) + 1):
        return None
    try:
        idx = int(choice)
    except ValueError:
        return templates[0]
    if 1 <= idx <= len(templates):
        return templates[idx - 1]
    return templates[0]


def print_changes(summary: inspector.StatusSummary):
    """Print the change buckets followed by the suggestions."""
    print("📝 Changes detected:")
    if summary.added:
        print(f"  ✅ Added ({len(summary.added)}): {', '.join(summary.added)}")
    if summary.modified:
        print(f"  ✏️ Modified ({len(summary.modified)}): {', '.join(summary.modified)}")
    if summary.deleted:
        print(f"  🗑️ Deleted ({len(summary.deleted)}): {', '.join(summary.deleted)}")
    if summary.untracked:
        print(f"  📂 Untracked ({len(summary.untracked)}): {', '.join(summary.untracked)}")

    tips = summary.suggestions
    if tips:
        print("\n💡 Suggestions:")
        for tip in tips:
            print(f"  → {tip}")


def smart_status(session: Session):
    """Branch, project stats and an analysis of uncommitted changes."""
    print(f"📊 === {bold('SMART STATUS')} ===")

    branch = inspector.current_branch(session)
    commits, files, branches = inspector.repo_stats(session)

    print(f"🌿 Current branch: {branch}")
    print(f"📁 Project: {session.working_dir.name}")
    print(f"📊 {commits} commits | {files} files | {branches} branches\n")

    status = inspector.get_status(session)
    if not status.strip():
        print(green("✅ No changes - working tree clean"))
        last = inspector.last_commit(session)
        if last:
            print(f"📝 Last commit: {last}")
        return

    print_changes(inspector.analyze_changes(status))


def stage_all(session: Session):
    print("📝 Staging all files...")
    session.git_checked("add", ".", context="Failed to stage files")
    print(green("✅ Files staged!"))


def commit_staged(session: Session, message: str) -> str:
    """Commit what is staged; an empty message becomes an auto-commit one."""
    if not message:
        message = auto_commit_message()

    print(f"💾 Committing with message: {message}")
    session.git_checked("commit", "-m", message, context="Commit failed")
    print(green("✅ Commit done!"))
    return message


def quick_commit(session: Session) -> bool:
    """Stage everything and commit with a template or a custom message."""
    status = inspector.get_status(session)
    if not status.strip():
        print("ℹ️ Nothing to commit")
        return False

    templates = session.quick_commits
    print(f"🚀 === {bold('QUICK COMMIT')} ===")
    print("Predefined messages:")
    for i, template in enumerate(templates, 1):
        print(f"{i}. {green(template)}")
    print(f"{len(templates) + 1}. {cyan('💬 Custom message')}")

    choice = safe_input(cyan(f"\nChoose (1-{len(templates) + 1}): "))
    message = choose_template(templates, choice)
    if message is None:
        message = safe_input(cyan("💬 Your message: "))

    stage_all(session)
    # Staged changes are left in place if the commit itself fails
    message = commit_staged(session, message)

    session.history.add(f"Quick commit: {message}")
    return True


def auto_sync(session: Session) -> bool:
    """Stage and commit everything with a timestamped message."""
    print("🔄 Auto sync...")

    status = inspector.get_status(session)
    if not status.strip():
        print("ℹ️ No changes detected")
        return False

    stage_all(session)
    commit_staged(session, "")

    print(green("🎉 Local sync complete!"))
    session.history.add("Auto sync")
    return True


def init_repository(session: Session) -> bool:
    print("🔧 Initializing git repository...")
    session.git_checked("init", context="Initialization failed")
    print(green("✅ Git repository initialized!"))
    session.history.add("Repository initialized")
    return True
