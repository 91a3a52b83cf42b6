#!/usr/bin/env python3
"""
branch - Branch management for gitctrl.

Provides intuitive branch operations including:
- Create feature/ and bugfix/ branches from a free-text description
- Switch branches
- Delete branches (with an optional force step for unmerged ones)
- Merge a branch into the current one
"""

import logging
from typing import List, Tuple

from gitctrl import inspector
from gitctrl.errors import CommandError, ValidationError
from gitctrl.output import bold, confirm, cyan, green, red, safe_input, yellow
from gitctrl.session import Session

logger = logging.getLogger(__name__)

FEATURE_PREFIX = "feature/"
BUGFIX_PREFIX = "bugfix/"


def branch_slug(prefix: str, description: str) -> str:
    """'Login Page' -> 'feature/login-page'."""
    return prefix + description.lower().replace(" ", "-")


def show_branches(branches: List[Tuple[bool, str]]):
    """Print parsed `branch -v` lines, the active branch in green."""
    print(f"{cyan('Existing branches')}:")
    for is_current, line in branches:
        if is_current:
            print(green(f"* {line}"))
        else:
            print(f"  {line}")


def _create_prefixed_branch(session: Session, prefix: str, prompt: str, label: str) -> str:
    description = safe_input(prompt)
    if not description:
        raise ValidationError("A name is required")

    branch_name = branch_slug(prefix, description)
    session.git_checked("checkout", "-b", branch_name,
                        context=f"Failed to create branch '{branch_name}'")

    print(green(f"✅ Branch '{branch_name}' created and checked out!"))
    session.history.add(f"{label}: {branch_name}")
    return branch_name


def create_feature_branch(session: Session) -> str:
    return _create_prefixed_branch(session, FEATURE_PREFIX, "✨ Feature name: ", "Branch created")


def create_bugfix_branch(session: Session) -> str:
    return _create_prefixed_branch(session, BUGFIX_PREFIX, "🐛 Bug description: ", "Bugfix branch created")


def switch_branch(session: Session, branch_name: str = "") -> str:
    """Check out branch_name, prompting for it when not given."""
    if not branch_name:
        branch_name = safe_input("🔄 Branch name: ")
    if not branch_name:
        raise ValidationError("A branch name is required")

    print(f"🔄 Switching to branch: {branch_name}")
    session.git_checked("checkout", branch_name, context="Failed to switch branch")

    print(green("✅ Branch switched!"))
    session.history.add(f"Switched to: {branch_name}")
    return branch_name


def delete_branch(session: Session) -> bool:
    """
    Delete a local branch.

    The checked-out branch is refused before git is called. A normal delete
    needs a 'y'; if git refuses because the branch is unmerged, one more 'y'
    escalates to a force delete.
    """
    branch_name = safe_input("🗑️ Branch to delete: ")
    if not branch_name:
        raise ValidationError("A branch name is required")

    current = inspector.current_branch(session)
    if branch_name == current:
        print(red("❌ Cannot delete the current branch"))
        return False

    if not confirm(yellow(f"⚠️ Really delete '{branch_name}'?")):
        print("❌ Deletion cancelled")
        return False

    result = session.git("branch", "-d", branch_name)
    if result.returncode != 0:
        logger.info(f"Normal delete of {branch_name} refused: {result.stdout.strip()}")
        if confirm(yellow("⚠️ Branch is not fully merged. Force delete?")):
            result = session.git("branch", "-D", branch_name)

    if result.returncode != 0:
        raise CommandError(result.args, result.returncode, result.stdout,
                           f"Failed to delete branch '{branch_name}'")

    print(green(f"✅ Branch '{branch_name}' deleted!"))
    session.history.add(f"Branch deleted: {branch_name}")
    return True


def merge_branch(session: Session) -> bool:
    """Merge a branch into the current one; conflicts are left to the user."""
    current = inspector.current_branch(session)
    print(f"🔀 Merging into the current branch ({current})")

    branch_name = safe_input("Branch to merge: ")
    if not branch_name:
        raise ValidationError("A branch name is required")

    result = session.git("merge", branch_name)
    if result.returncode != 0:
        print(red("❌ Conflict detected! Resolve manually, then commit."))
        raise CommandError(result.args, result.returncode, result.stdout,
                           f"Merge of '{branch_name}' failed")

    print(green(f"✅ Branch '{branch_name}' merged into '{current}'!"))
    session.history.add(f"Merge: {branch_name} → {current}")
    return True


BRANCH_ACTIONS = {
    "1": ("🌱 Create feature branch", create_feature_branch),
    "2": ("🐛 Create bugfix branch", create_bugfix_branch),
    "3": ("🔄 Switch branch", switch_branch),
    "4": ("🗑️ Delete a branch", delete_branch),
    "5": ("🔀 Merge a branch", merge_branch),
}


def show_branch_menu(session: Session):
    """Interactive menu for branch operations."""
    print(f"🌿 === {bold('BRANCH MANAGEMENT')} ===")

    result = session.git_checked("branch", "-v", context="Failed to list branches")
    branches = inspector.parse_branch_lines(result.stdout)
    if branches:
        show_branches(branches)
    else:
        print(yellow("No branches yet (make a first commit)"))

    print(f"\n{cyan('Available actions')}:")
    for key, (label, _) in BRANCH_ACTIONS.items():
        print(f"{key}. {label}")

    choice = safe_input(cyan(f"\nChoose (1-{len(BRANCH_ACTIONS)}): "))
    action = BRANCH_ACTIONS.get(choice)
    if action is None:
        print(red("❌ Invalid choice"))
        return
    action[1](session)
