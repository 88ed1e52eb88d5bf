"""Main entry point for fokus."""

from typing import Optional

import typer

from fokus.commands import focus_command, history_command, version_command
from fokus.config import TIMER_MINUTES_MAX, TIMER_MINUTES_MIN

app = typer.Typer(
    name="fokus",
    help="A minimalist terminal focus timer and stopwatch with daily logging",
    invoke_without_command=True,
)

app.command("history")(history_command.history)
app.command("version")(version_command.version)


@app.callback(invoke_without_command=True)
def run(
    ctx: typer.Context,
    duration: Optional[int] = typer.Option(
        None,
        "--duration",
        "-d",
        min=TIMER_MINUTES_MIN,
        max=TIMER_MINUTES_MAX,
        help="Timer duration in minutes for this session",
    ),
) -> None:
    """Open the focus screen when no subcommand is given."""
    if ctx.invoked_subcommand is None:
        focus_command.run_focus(duration=duration)


def main():
    """Main entry point."""
    app()


if __name__ == "__main__":
    main()
