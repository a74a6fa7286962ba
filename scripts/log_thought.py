#!/usr/bin/env python3
"""
Log an automatic thought.

Walks through situation, emotion, intensity, thought,
thought type and distortion, then saves the entry.
"""

import sys
from pathlib import Path

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent.parent))

import typer
from dotenv import load_dotenv
from rich.console import Console
from rich.prompt import Confirm, IntPrompt, Prompt

from thoughtdiary.core.config import Config
from thoughtdiary.core.models import EMOTIONS, Distortion, ThoughtType
from thoughtdiary.core.utils import configure_logging
from thoughtdiary.journal.form import ValidationFailure
from thoughtdiary.journal.session import open_session
from thoughtdiary.review.summary import build_entry_panel

app = typer.Typer(help="Log an automatic thought")
console = Console()

CLEAR_CONFIRMATION = "Ești sigur că vrei să ștergi toate înregistrările din jurnal?"


def _load_config() -> Config:
    load_dotenv()
    config = Config.from_env()
    configure_logging(config.log_level)
    return config


def _choose(title: str, options, allow_empty: bool = True) -> str:
    """Numbered choice; returns the selected option or "" when skipped."""
    console.print(f"\n[bold]{title}[/bold]")
    for i, option in enumerate(options, start=1):
        console.print(f"  {i}. {option}")

    choices = [str(i) for i in range(1, len(options) + 1)]
    if allow_empty:
        console.print("  0. (sari peste)")
        picked = Prompt.ask("Alege", choices=["0"] + choices, default="0", console=console)
    else:
        picked = Prompt.ask("Alege", choices=choices, console=console)

    if picked == "0":
        return ""
    return options[int(picked) - 1]


@app.command()
def main(
    emotion: str = typer.Option(None, "--emotion", "-e", help="Main emotion"),
    thought: str = typer.Option(None, "--thought", "-t", help="Automatic thought"),
    situation: str = typer.Option(None, "--situation", "-s", help="Situation / context"),
    intensity: int = typer.Option(None, "--intensity", "-i", help="Emotion intensity 0-100"),
    thought_type: str = typer.Option(None, "--type", help="rational / irrational"),
    distortion: str = typer.Option(None, "--distortion", "-d", help="Cognitive distortion label"),
):
    """
    Record a new journal entry.

    Prompts for every field not given as an option.
    """
    config = _load_config()
    session = open_session(config)
    form = session.form

    if session.store.last_error:
        console.print("[yellow]Jurnalul salvat nu a putut fi citit; pornim cu o listă goală.[/yellow]")

    console.print("\n[bold]Jurnalul gândurilor automate[/bold]")
    console.print("[dim]Situație → Emoție → Gând automat → Tip de gând → Distorsiune[/dim]\n")

    form.situation = situation if situation is not None else Prompt.ask(
        "Situație / context (opțional)", default="", show_default=False, console=console
    )
    form.emotion = emotion if emotion is not None else _choose(
        "Emoția principală*", list(EMOTIONS), allow_empty=False
    )
    form.intensity = intensity if intensity is not None else IntPrompt.ask(
        "Intensitatea emoției (0–100)", default=form.default_intensity, console=console
    )
    form.thought = thought if thought is not None else Prompt.ask(
        "Gând automat* (ce ți-a trecut prin minte)", default="", show_default=False, console=console
    )

    if thought_type is not None:
        form.thought_type = thought_type
    else:
        labels = {ThoughtType.RATIONAL.label: ThoughtType.RATIONAL, ThoughtType.IRRATIONAL.label: ThoughtType.IRRATIONAL}
        picked = _choose("Cum ai clasifica acest gând?", list(labels))
        form.thought_type = labels.get(picked, "")

    form.distortion = distortion if distortion is not None else _choose(
        "Distorsiune cognitivă (opțional)", [d.value for d in Distortion.choices()]
    )

    result = form.submit()

    if isinstance(result, ValidationFailure):
        console.print("\n[red]Emoția și gândul automat sunt obligatorii. Nu am salvat nimic.[/red]")
        raise typer.Exit(1)

    console.print()
    console.print(build_entry_panel(result, config.timezone))

    if session.store.last_error:
        console.print("[yellow]Înregistrarea nu a putut fi salvată pe disc; rămâne doar în sesiunea curentă.[/yellow]")
    else:
        console.print(f"\n[green]Înregistrarea #{result.id} a fost salvată ({len(session.store)} în total).[/green]\n")


@app.command()
def clear(
    yes: bool = typer.Option(False, "--yes", "-y", help="Skip confirmation"),
):
    """
    Delete every journal entry.
    """
    config = _load_config()
    session = open_session(config)

    total = len(session.store)
    if total == 0:
        console.print("[yellow]Jurnalul este deja gol.[/yellow]")
        raise typer.Exit(0)

    if not yes and not Confirm.ask(CLEAR_CONFIRMATION, console=console, default=False):
        console.print("[dim]Nimic nu a fost șters.[/dim]")
        raise typer.Exit(0)

    session.store.clear()

    if session.store.last_error:
        console.print("[red]Lista a fost golită, dar modificarea nu a putut fi salvată pe disc.[/red]")
        raise typer.Exit(1)

    console.print(f"\n[green]Au fost șterse {total} înregistrări.[/green]\n")


if __name__ == "__main__":
    app()
