"""
Command-line interface for inventory-console.

Loads a dataset file and prints one page of it through the table engine.
"""

from __future__ import annotations

from pathlib import Path
from typing import List, Optional

import typer
from rich.console import Console

from ic_app.api import load_dataset
from ic_common.errors import ICError
from ic_common.logging import configure_logging
from ic_table.global_search import GlobalSearchDispatcher
from ic_table.models import SortDirection, SortEntry
from ic_table.table_state import TableStateController
from ic_ui import theme
from ic_ui.render import build_page_model
from ic_ui.table_layout import build_rich_table

RANGE_SEPARATOR = ".."

app = typer.Typer(help="Browse inventory datasets from the terminal.", no_args_is_help=True)
console = Console()


def parse_filter_option(raw: str) -> tuple[str, object]:
    """Split ``COL=VALUE``; ``FROM..TO`` values become a (from, to) pair."""
    column_id, sep, value = raw.partition("=")
    if not sep or not column_id.strip():
        raise typer.BadParameter(f"Expected COL=VALUE, got '{raw}'")
    if RANGE_SEPARATOR in value:
        start, _, end = value.partition(RANGE_SEPARATOR)
        return column_id.strip(), (start or None, end or None)
    return column_id.strip(), value


def apply_browse_options(
    table: TableStateController,
    *,
    filters: list[str],
    sort: str | None,
    descending: bool,
    hide: list[str],
    page_size: int | None,
    page: int,
) -> None:
    updates = dict(parse_filter_option(raw) for raw in filters)
    if updates:
        table.update_column_filters(updates)
    if sort:
        direction = SortDirection.DESC if descending else SortDirection.ASC
        table.set_sorting([SortEntry(sort, direction)])
    if hide:
        table.set_column_visibility({column_id: False for column_id in hide})
    if page_size is not None:
        table.set_page_size(page_size)
    table.set_page_index(page)


@app.callback(invoke_without_command=True)
def entry(
    ctx: typer.Context,
    debug: bool = typer.Option(False, "--debug", help="Enable debug logging."),
) -> None:
    """Global entry point configuring logging."""
    configure_logging(debug=debug, force=True)
    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit()


@app.command("browse")
def browse(
    dataset: Path = typer.Argument(..., help="YAML or JSON dataset file."),
    search: Optional[str] = typer.Option(
        None, "--search", "-s", help="Global search query (date, number, email or text)."
    ),
    filters: List[str] = typer.Option(
        [], "--filter", "-f", help="Column filter COL=VALUE (COL=FROM..TO for date ranges)."
    ),
    sort: Optional[str] = typer.Option(None, "--sort", help="Column to sort by."),
    descending: bool = typer.Option(False, "--desc", help="Sort descending."),
    hide: List[str] = typer.Option([], "--hide", help="Column to hide."),
    page: int = typer.Option(1, "--page", "-p", help="Page number (1-based)."),
    page_size: Optional[int] = typer.Option(None, "--page-size", help="Rows per page."),
) -> None:
    """Print one page of a dataset after search, filters and sorting."""
    try:
        loaded = load_dataset(dataset)
        table = loaded.build_table()
        if search:
            GlobalSearchDispatcher(table, loaded.search).dispatch(search)
        apply_browse_options(
            table,
            filters=filters,
            sort=sort,
            descending=descending,
            hide=hide,
            page_size=page_size,
            page=page - 1,
        )
    except ICError as exc:
        console.print(theme.presenter_message("error", str(exc)))
        raise typer.Exit(1)

    model = build_page_model(
        table,
        title=dataset.stem,
        status_column=loaded.status_column,
        status_renderer=loaded.status_renderer,
    )
    console.print(
        build_rich_table(
            model,
            console=console,
            border_style=theme.RICH_BORDER_STYLE,
            header_style=theme.RICH_ACCENT_BOLD,
            title_style=theme.RICH_ACCENT_BOLD,
        )
    )


def main() -> None:
    app()


if __name__ == "__main__":
    main()
