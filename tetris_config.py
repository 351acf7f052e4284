
"""Tunables plus the persisted theme flag"""
import json
import os

CONFIG = {
    "CELL_SIZE": 30,
    "TICK_MS": 500,
    "GAME_OVER_PROMPT_MS": 100,
    "FPS": 60,
    "SEED": None,
    "THEME_FILE": os.path.join("~", ".tetris", "theme.json"),
}

THEMES = ("dark", "light")


def _theme_path(path=None):
    return os.path.expanduser(path or CONFIG["THEME_FILE"])


def load_theme(path=None) -> str:
    """Return the saved theme, "dark" when nothing usable is stored."""
    try:
        with open(_theme_path(path), "r", encoding="utf-8") as f:
            theme = json.load(f).get("theme")
    except (OSError, ValueError, AttributeError):
        return "dark"
    return theme if theme in THEMES else "dark"


def save_theme(theme: str, path=None) -> bool:
    """Store the theme flag; False when the file cannot be written."""
    if theme not in THEMES:
        raise ValueError(f"unknown theme {theme!r}")
    p = _theme_path(path)
    try:
        os.makedirs(os.path.dirname(p) or ".", exist_ok=True)
        with open(p, "w", encoding="utf-8") as f:
            json.dump({"theme": theme}, f)
    except OSError:
        return False
    return True


def toggle_theme(theme: str) -> str:
    return "light" if theme == "dark" else "dark"
