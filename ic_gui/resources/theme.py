"""Theme management for the GUI."""

from __future__ import annotations

import os
from typing import Final

from PySide6.QtWidgets import QApplication

# role -> (foreground, background) per theme
THEMES: Final[dict[str, dict[str, tuple[str, str]]]] = {
    "light": {
        "status-warning": ("#8a5a00", "#fff4d6"),
        "status-info": ("#1d4ed8", "#e0ebff"),
        "status-success": ("#15803d", "#dcfce7"),
        "status-error": ("#b91c1c", "#fee2e2"),
        "status-accent": ("#7e22ce", "#f3e8ff"),
        "muted": ("#6b7280", "transparent"),
    },
    "dark": {
        "status-warning": ("#fbbf24", "#3b2f12"),
        "status-info": ("#93c5fd", "#172a4a"),
        "status-success": ("#86efac", "#123522"),
        "status-error": ("#fca5a5", "#45191a"),
        "status-accent": ("#d8b4fe", "#2e1a45"),
        "muted": ("#9ca3af", "transparent"),
    },
}

_DEFAULT_THEME: Final[str] = "light"
_BADGE_RADIUS: Final[int] = 8
_BADGE_PADDING_X: Final[int] = 8


def list_themes() -> list[str]:
    """Return available theme names."""
    return list(THEMES.keys())


def get_preferred_theme() -> str:
    """Resolve the theme from IC_GUI_THEME, falling back to the default."""
    env_value = os.environ.get("IC_GUI_THEME")
    if env_value in THEMES:
        return env_value
    return _DEFAULT_THEME


def build_stylesheet(name: str) -> str:
    """Return the stylesheet for status roles and destructive actions."""
    palette = THEMES[name]
    parts = [
        'QLabel[role="title"] { font-size: 18px; font-weight: 600; }',
    ]
    for role, (fg, bg) in palette.items():
        parts.append(
            f'QLabel[role="{role}"] {{ color: {fg}; background: {bg}; '
            f"border-radius: {_BADGE_RADIUS}px; padding: 1px {_BADGE_PADDING_X}px; }}"
        )
    error_fg = palette["status-error"][0]
    parts.append(f'QLabel[variant="outline"] {{ border: 1px solid {palette["muted"][0]}; }}')
    parts.append(f'QLabel[variant="destructive"] {{ color: {error_fg}; }}')
    parts.append(f'QToolButton[role="muted"] {{ color: {palette["muted"][0]}; }}')
    return "\n".join(parts)


def apply_theme(app: QApplication, name: str | None = None) -> str:
    """Apply a theme. Returns the applied theme name."""
    selected = name or get_preferred_theme()
    if selected not in THEMES:
        selected = _DEFAULT_THEME
    app.setStyleSheet(build_stylesheet(selected))
    return selected


__all__ = [
    "THEMES",
    "list_themes",
    "get_preferred_theme",
    "build_stylesheet",
    "apply_theme",
]
