#!/usr/bin/env python3
"""
config - Configuration management for gitctrl.

Handles user preferences like the git binary, quick-commit templates and how
much history the log views show.
"""

import json
from pathlib import Path
from typing import Dict, Any, List

from gitctrl.errors import ValidationError


DEFAULT_QUICK_COMMITS = [
    "🚀 Quick update",
    "🐛 Bug fix",
    "✨ New feature",
    "📝 Documentation",
    "♻️ Refactoring",
    "🎨 UI improvements",
    "⚡ Performance",
    "🔧 Configuration",
]


# Settings that can be changed from the menu, with their value type
EDITABLE_SETTINGS = {
    "git_binary": str,
    "log_count": int,
    "recent_count": int,
    "recent_activity_since": str,
    "clear_screen": bool,
}


def get_config_dir() -> Path:
    """Get the gitctrl configuration directory."""
    return Path.home() / ".gitctrl"


def get_config_file() -> Path:
    """Get the path to the configuration file."""
    return get_config_dir() / "config.json"


def default_config() -> Dict[str, Any]:
    return {
        "git_binary": "git",
        "quick_commits": list(DEFAULT_QUICK_COMMITS),
        "log_count": 15,
        "recent_count": 10,
        "recent_activity_since": "1.week.ago",
        "clear_screen": True,
        "log_dir": None,
    }


def load_config() -> Dict[str, Any]:
    """Load configuration from file, falling back to defaults."""
    config = default_config()
    config_file = get_config_file()

    if not config_file.exists():
        return config

    try:
        with open(config_file, 'r', encoding='utf-8') as f:
            stored = json.load(f)
    except (OSError, ValueError) as e:
        print(f"ℹ Ignoring unreadable config {config_file}: {e}")
        return config

    if isinstance(stored, dict):
        config.update({k: v for k, v in stored.items() if k in config})

    return sanitize_config(config)


def sanitize_config(config: Dict[str, Any]) -> Dict[str, Any]:
    """Replace values of the wrong type with their defaults."""
    defaults = default_config()

    for key in ("git_binary", "recent_activity_since"):
        value = config.get(key)
        if not isinstance(value, str) or not value.strip():
            config[key] = defaults[key]

    for key in ("log_count", "recent_count"):
        value = config.get(key)
        # bool is an int subclass but never a valid count
        if isinstance(value, bool) or not isinstance(value, int) or value < 1:
            config[key] = defaults[key]

    if not isinstance(config.get("clear_screen"), bool):
        config["clear_screen"] = defaults["clear_screen"]

    log_dir = config.get("log_dir")
    if log_dir is not None and (not isinstance(log_dir, str) or not log_dir.strip()):
        config["log_dir"] = None

    # An empty or malformed template list would break quick commit
    templates = config.get("quick_commits")
    if not isinstance(templates, list) or not templates:
        config["quick_commits"] = list(DEFAULT_QUICK_COMMITS)
    else:
        config["quick_commits"] = [str(t) for t in templates]

    return config


def save_config(config: Dict[str, Any]):
    """Save configuration to file."""
    config_file = get_config_file()

    try:
        config_file.parent.mkdir(parents=True, exist_ok=True)
        with open(config_file, 'w', encoding='utf-8') as f:
            json.dump(config, f, indent=2, ensure_ascii=False)
    except OSError as e:
        print(f"Error saving configuration: {e}")


def set_config_value(config: Dict[str, Any], key: str, raw: str) -> Any:
    """Parse raw for one of EDITABLE_SETTINGS and store it in config."""
    if key not in EDITABLE_SETTINGS:
        raise ValidationError(f"Unknown setting: {key}")

    kind = EDITABLE_SETTINGS[key]
    raw = raw.strip()
    if kind is int:
        try:
            value = int(raw)
        except ValueError:
            raise ValidationError(f"{key} must be a whole number")
        if value < 1:
            raise ValidationError(f"{key} must be at least 1")
    elif kind is bool:
        if raw.lower() not in ("true", "false", "yes", "no", "y", "n", "1", "0"):
            raise ValidationError(f"{key} must be true or false")
        value = raw.lower() in ("true", "yes", "y", "1")
    else:
        if not raw:
            raise ValidationError(f"{key} cannot be empty")
        value = raw

    config[key] = value
    return value


def get_quick_commits(config: Dict[str, Any]) -> List[str]:
    return list(config.get("quick_commits") or DEFAULT_QUICK_COMMITS)


def show_config(config: Dict[str, Any]):
    """Display current configuration."""
    print("\n" + "=" * 60)
    print("GITCTRL CONFIGURATION")
    print("=" * 60)
    print(f"Config file: {get_config_file()}")
    print()
    print("Settings:")
    print(f"  git_binary:             {config.get('git_binary', 'git')}")
    print(f"  log_count:              {config.get('log_count', 15)}")
    print(f"  recent_count:           {config.get('recent_count', 10)}")
    print(f"  recent_activity_since:  {config.get('recent_activity_since', '1.week.ago')}")
    print(f"  clear_screen:           {config.get('clear_screen', True)}")
    print(f"  log_dir:                {config.get('log_dir') or '(auto)'}")
    print()
    print("  Quick commit templates:")
    for template in get_quick_commits(config):
        print(f"    - {template}")
    print()
    print(f"Templates and log_dir are read at startup; edit {get_config_file()} to change them.")
    print()
