"""Command 'version' of fokus"""

import typer

from fokus import __version__
from fokus.utils.ui.console import get_console

app = typer.Typer()
console = get_console(highlight=False)


@app.command()
def version() -> None:
    """Show version information"""
    console.print(__version__)
