#!/usr/bin/env python3
"""
Export data to CSV.

Exports journal entries to CSV format for external analysis.
"""

import sys
from pathlib import Path

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent.parent))

import typer
from dotenv import load_dotenv
from rich.console import Console

from thoughtdiary.core.config import Config
from thoughtdiary.core.utils import configure_logging
from thoughtdiary.journal.session import open_session
from thoughtdiary.review.export import export_session_csv

app = typer.Typer(help="Export data to CSV")
console = Console()


@app.command()
def entries(
    output: str = typer.Option(None, "--output", "-o", help="Output file path"),
):
    """
    Export all journal entries to CSV, newest first.
    """
    load_dotenv()
    config = Config.from_env()
    configure_logging(config.log_level)

    session = open_session(config)
    snapshot = session.store.snapshot()

    filepath = export_session_csv(snapshot, config, output)

    console.print(f"[green]Exported {len(snapshot)} entries to {filepath}[/green]")


if __name__ == "__main__":
    app()
