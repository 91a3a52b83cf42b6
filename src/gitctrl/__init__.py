"""
gitctrl - Interactive Git assistant for the terminal.

Tools included:
- commit: Smart status, quick commit from templates, auto sync
- branch: Create, switch, delete and merge branches
- logbrowser: Browse history, inspect diffs, reset, search
- insights: Project statistics and file-type breakdown
"""

__version__ = "0.1.0"
__author__ = "gitctrl contributors"
__all__ = ["commit", "branch", "logbrowser", "insights", "inspector", "config"]
