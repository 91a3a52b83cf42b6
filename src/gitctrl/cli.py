#!/usr/bin/env python3
"""
gitctrl - Interactive Git assistant

Main entry point: asks for a working directory, then loops over a numbered
menu whose entries depend on whether that directory is a git repository.
"""

import logging
import sys
from typing import Callable, Dict, List, Optional

from gitctrl import __version__, branch, commit, insights, inspector, logbrowser
from gitctrl.actions import show_history
from gitctrl.config import EDITABLE_SETTINGS, load_config, save_config, set_config_value, show_config
from gitctrl.errors import GitCtrlError, StartupError, UserCancelled
from gitctrl.logger import setup_logging
from gitctrl.output import bold, clear_screen, confirm, cyan, green, pause, red, safe_input, strip_ansi
from gitctrl.session import RepoState, Session

logger = logging.getLogger(__name__)

EXIT_CHOICE = "0"

BANNER = r"""
   ___ ___ _____ ___ _____ ___ _
  / __|_ _|_   _/ __|_   _| _ \ |
 | (_ || |  | || (__  | | |   / |__
  \___|___| |_| \___| |_| |_|_\____|"""


class MenuEntry:
    """One numbered menu line and the action it runs."""

    def __init__(self, key: str, label: str, section: str, action: Callable[[Session], object]):
        self.key = key
        self.label = label
        self.section = section
        self.action = action


def change_directory(session: Session):
    new_path = safe_input("📁 New directory: ")
    path = session.set_working_directory(new_path)
    print(green(f"✅ Working directory: {path}"))


def show_actions(session: Session):
    show_history(session.history)


def configure(session: Session):
    """Show the settings and optionally change one, saving the config file."""
    show_config(session.config)

    key = safe_input(f"Setting to change ({', '.join(EDITABLE_SETTINGS)}; Enter to keep): ")
    if not key:
        return

    value = set_config_value(session.config, key, safe_input(f"New value for {key}: "))
    save_config(session.config)
    session.history.add(f"Config: {key} = {value}")
    print(green(f"✅ {key} set to {value}"))


MENUS: Dict[RepoState, List[MenuEntry]] = {
    RepoState.NOT_A_REPOSITORY: [
        MenuEntry("1", "🔧 Initialize a git repository here", "AVAILABLE ACTIONS", commit.init_repository),
        MenuEntry("2", "📁 Change directory", "AVAILABLE ACTIONS", change_directory),
    ],
    RepoState.REPOSITORY: [
        MenuEntry("1", "⚡ Quick commit (predefined messages)", "QUICK ACTIONS", commit.quick_commit),
        MenuEntry("2", "📊 Smart status", "QUICK ACTIONS", commit.smart_status),
        MenuEntry("3", "🔄 Auto sync (stage + commit everything)", "QUICK ACTIONS", commit.auto_sync),
        MenuEntry("4", "🌿 Branch management", "ADVANCED", branch.show_branch_menu),
        MenuEntry("5", "📜 Interactive history", "ADVANCED", logbrowser.interactive_log),
        MenuEntry("6", "📈 Project insights", "ADVANCED", insights.project_insights),
        MenuEntry("7", "🕘 Recent actions", "ADVANCED", show_actions),
        MenuEntry("8", "📁 Change directory", "NAVIGATION", change_directory),
        MenuEntry("9", "🔧 Initialize git", "NAVIGATION", commit.init_repository),
        MenuEntry("10", "⚙️ Configuration", "NAVIGATION", configure),
    ],
}


def find_entry(state: RepoState, choice: str) -> Optional[MenuEntry]:
    for entry in MENUS[state]:
        if entry.key == choice:
            return entry
    return None


def show_header(session: Session, state: RepoState):
    print(cyan(BANNER))
    print(f"\n🚀 === {bold('GIT ASSISTANT')} ===")
    print(f"📁 Directory: {cyan(str(session.working_dir))}")

    if state is RepoState.REPOSITORY:
        current = inspector.current_branch(session)
        commits = inspector.commit_count(session)
        line = f"🌿 Branch: {green(current)} | 📊 {commits} commits"
        status = session.git("status", "--porcelain")
        if status.returncode == 0 and status.stdout.strip():
            line += " | " + red("⚠️ Uncommitted changes")
        print(line)
    else:
        print(red("⚠️ Not a git repository"))


def show_menu(session: Session, state: RepoState):
    """Render the header and the entries for the given repository state."""
    show_header(session, state)

    section = None
    for entry in MENUS[state]:
        if entry.section != section:
            section = entry.section
            print(f"\n=== {cyan(section)} ===")
        print(f"{entry.key}. {entry.label}")

    print(f"\n{EXIT_CHOICE}. ❌ Quit")


def run_action(session: Session, entry: MenuEntry):
    """Run one menu action; recoverable errors are reported, not raised."""
    try:
        entry.action(session)
    except GitCtrlError as e:
        logger.error(strip_ansi(f"{entry.label.split(' ', 1)[-1]}: {e}"))
        print(red(f"❌ Error: {e}"))
    except UserCancelled:
        print("\nCancelled.")


def dispatch(session: Session, state: RepoState, choice: str) -> bool:
    """Run the entry for choice; False if the choice is not on the menu."""
    entry = find_entry(state, choice)
    if entry is None:
        print(red("❌ Invalid option!"))
        return False
    run_action(session, entry)
    return True


def select_working_directory(session: Session) -> bool:
    """Startup prompt for the working directory; False means quit."""
    print(f"\n📁 === {cyan('WORKING DIRECTORY')} ===")
    print(f"Current directory: {cyan(str(session.working_dir))}")

    new_path = safe_input(cyan("Enter the working directory path (Enter to keep): "))
    if not new_path:
        return True

    try:
        path = session.set_working_directory(new_path)
    except GitCtrlError as e:
        print(red(f"❌ Error: {e}"))
        return confirm("Continue with the current directory?")

    print(green(f"✅ Working directory: {path}"))
    return True


def run(session: Session):
    """Menu loop; returns when the user quits."""
    while True:
        state = session.repo_state()
        if session.config.get("clear_screen", True):
            clear_screen()
        show_menu(session, state)

        try:
            choice = safe_input(cyan("\n💫 Choose an action: "))
        except UserCancelled:
            break

        if choice == EXIT_CHOICE:
            break

        dispatch(session, state, choice)

        try:
            pause()
        except UserCancelled:
            break

    print("👋 Goodbye!")


def main():
    """Main entry point for the gitctrl CLI."""
    config = load_config()
    setup_logging(config.get("log_dir"))

    try:
        session = Session.from_environment(config)
    except StartupError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    logger.info(f"gitctrl {__version__} started in {session.working_dir}")
    print(bold("🎯 Git assistant started!"))

    try:
        keep_going = select_working_directory(session)
    except UserCancelled:
        keep_going = False

    if not keep_going:
        print("👋 Goodbye!")
        return

    run(session)


if __name__ == "__main__":
    main()
