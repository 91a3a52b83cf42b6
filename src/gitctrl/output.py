#!/usr/bin/env python3
"""
output - Terminal styling and prompt helpers.

Errors are red, confirmations green, prompts cyan and headers bold.
"""

import os
import re
import sys

from gitctrl.errors import UserCancelled


# ANSI color codes
class Colors:
    RESET = '\033[0m'
    BOLD = '\033[1m'
    DIM = '\033[2m'

    RED = '\033[31m'
    GREEN = '\033[32m'
    YELLOW = '\033[33m'
    CYAN = '\033[36m'


ANSI_ESCAPE = re.compile(r'\x1b\[[0-9;]*[A-Za-z]')


def colorize(color: str, text: str) -> str:
    """Wrap text in a color code followed by a reset."""
    return f"{color}{text}{Colors.RESET}"


def red(text: str) -> str:
    return colorize(Colors.RED, text)


def green(text: str) -> str:
    return colorize(Colors.GREEN, text)


def cyan(text: str) -> str:
    return colorize(Colors.CYAN, text)


def bold(text: str) -> str:
    return colorize(Colors.BOLD, text)


def dim(text: str) -> str:
    return colorize(Colors.DIM, text)


def yellow(text: str) -> str:
    return colorize(Colors.YELLOW, text)


def strip_ansi(text: str) -> str:
    """Remove ANSI escape codes from text."""
    return ANSI_ESCAPE.sub('', text)


def safe_input(prompt: str = "") -> str:
    """
    Read one stripped line of input.

    Raises UserCancelled on Ctrl+C or end of input instead of letting
    KeyboardInterrupt propagate up as a traceback.
    """
    try:
        return input(prompt).strip()
    except (KeyboardInterrupt, EOFError):
        raise UserCancelled()


def confirm(prompt: str) -> bool:
    """Ask a (y/N) question; only a single 'y' (any case) confirms."""
    return safe_input(f"{prompt} (y/N): ").lower() == 'y'


def pause():
    """Block until the user acknowledges with Enter."""
    print(f"\n{dim('Press Enter to continue...')}")
    safe_input()


def clear_screen():
    """Clear the terminal (no-op when stdout is not a tty)."""
    if not sys.stdout.isatty():
        return
    if os.name == 'nt':
        os.system('cls')
    else:
        sys.stdout.write('\033[2J\033[H')
        sys.stdout.flush()
