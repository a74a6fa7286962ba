#!/usr/bin/env python3
"""
Journal review script.

Shows recorded entries, the emotion and thought-type charts,
and the psycho-education notes.
"""

import sys
from pathlib import Path
from typing import Optional

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent.parent))

import typer
from dotenv import load_dotenv
from rich.console import Console

from thoughtdiary.core.config import Config
from thoughtdiary.core.utils import configure_logging
from thoughtdiary.journal.session import open_session
from thoughtdiary.review.education import print_education
from thoughtdiary.review.summary import (
    build_entry_list,
    build_stats_panel,
    export_journal_summary,
    print_journal_summary,
)

app = typer.Typer(help="Journal review")
console = Console()


def _open():
    load_dotenv()
    config = Config.from_env()
    configure_logging(config.log_level)

    session = open_session(config)
    if session.store.last_error:
        console.print("[yellow]Jurnalul salvat nu a putut fi citit; se afișează o listă goală.[/yellow]\n")
    return session


@app.command()
def entries(
    limit: Optional[int] = typer.Option(None, "--limit", "-n", min=1, help="Show only the newest N entries"),
):
    """
    List journal entries, newest first.
    """
    session = _open()
    snapshot = session.store.snapshot()

    console.print("\n[bold]Înregistrări din jurnal[/bold] [dim]- cele mai noi apar primele[/dim]\n")
    console.print(build_entry_list(snapshot, session.config.timezone, limit))


@app.command()
def stats():
    """
    Show emotion frequency and rational vs irrational thoughts.
    """
    session = _open()
    console.print(build_stats_panel(session.store.snapshot()))


@app.command()
def summary(
    export: bool = typer.Option(False, "--export", "-e", help="Export to file"),
):
    """
    Plain-text summary with one suggested focus.
    """
    session = _open()
    snapshot = session.store.snapshot()

    if export:
        filepath = export_journal_summary(snapshot, session.config)
        console.print(f"[green]Summary exported to {filepath}[/green]")
    else:
        print_journal_summary(snapshot, console)


@app.command()
def learn():
    """
    What automatic thoughts and cognitive distortions are.
    """
    print_education(console)


@app.command()
def info():
    """Show current settings."""
    load_dotenv()
    config = Config.from_env()

    typer.echo(config.get_summary())


if __name__ == "__main__":
    app()
