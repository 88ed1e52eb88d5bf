"""Command 'history' of fokus"""

import typer
from rich.table import Table

from fokus.config import get_config_manager
from fokus.models.focus.history import FocusHistory
from fokus.services.history_service import HistoryService
from fokus.utils.ui.console import get_console

app = typer.Typer()
console = get_console()


@app.command()
def history(
    limit: int = typer.Option(
        30, "--limit", "-n", min=1, help="Number of days to show"
    ),
) -> None:
    """Show minutes focused per day, most recent first."""
    manager = get_config_manager()
    focus_history = FocusHistory(HistoryService(manager.history_file).load())

    rows = focus_history.rows()[:limit]
    if not rows:
        console.print("[yellow]No focus history yet[/yellow]")
        return

    table = Table(title=f"Focus History ({len(rows)} days)", show_header=True)
    table.add_column("Date", style="cyan")
    table.add_column("Minutes", justify="right")
    for key, minutes in rows:
        table.add_row(key, str(minutes))

    console.print(table)
