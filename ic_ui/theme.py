from __future__ import annotations

RICH_ACCENT = "blue"
RICH_ACCENT_BOLD = f"bold {RICH_ACCENT}"
RICH_BORDER_STYLE = RICH_ACCENT

# Status badge roles -> rich styles.
RICH_ROLE_STYLES: dict[str, str] = {
    "status-warning": "yellow",
    "status-info": "blue",
    "status-success": "green",
    "status-error": "red",
    "status-accent": "magenta",
    "muted": "dim",
}

PRESENTER_TEMPLATES: dict[str, str] = {
    "info": "[blue]ℹ[/blue] {message}",
    "warning": "[yellow]⚠ {message}[/yellow]",
    "error": "[red]✖ {message}[/red]",
}

EMPTY_TABLE_TEXT = "No results."


def role_text(role: str, text: str) -> str:
    style = RICH_ROLE_STYLES.get(role)
    if not style:
        return text
    return f"[{style}]{text}[/{style}]"


def presenter_message(level: str, message: str) -> str:
    template = PRESENTER_TEMPLATES.get(level, "{message}")
    return template.format(message=message)
