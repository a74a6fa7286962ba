"""
Journal review module.

Renders the entry list, the emotion frequency chart and the
rational-vs-irrational ratio from a store snapshot.
"""

import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional, Sequence

from rich.console import Console, Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from thoughtdiary.core.config import Config
from thoughtdiary.core.models import JournalEntry, ThoughtType
from thoughtdiary.core.utils import format_bar, format_entry_date, format_percentage
from thoughtdiary.journal.aggregator import (
    distortion_histogram,
    emotion_histogram,
    thought_type_counts,
)

logger = logging.getLogger(__name__)

EMPTY_JOURNAL_MESSAGE = (
    "Nu ai încă nicio înregistrare. Începe cu o situație recentă, alege "
    "emoția, notează gândul automat și vezi ce tip de gând este."
)
EMPTY_EMOTION_CHART_MESSAGE = "Adaugă cel puțin o înregistrare pentru a vedea graficul."
EMPTY_RATIO_CHART_MESSAGE = "Nu există suficiente date pentru grafic."
FOCUS_HEADING = "DE LUCRAT ÎN CONTINUARE:"

_THOUGHT_TYPE_STYLES = {
    ThoughtType.RATIONAL: "green",
    ThoughtType.IRRATIONAL: "red",
    ThoughtType.UNCLASSIFIED: "dim",
}


def build_entry_panel(entry: JournalEntry, tz_name: Optional[str] = None) -> Panel:
    """One entry as a card: emotion badge, date, then the recorded fields."""
    body = Text()

    if entry.situation:
        body.append("Situație / context\n", style="bold dim")
        body.append(f"{entry.situation}\n\n")

    body.append("Gând automat\n", style="bold dim")
    body.append(f"{entry.thought}\n\n")

    body.append("Tip de gând\n", style="bold dim")
    body.append(f"{entry.thought_type.label}\n\n", style=_THOUGHT_TYPE_STYLES[entry.thought_type])

    body.append("Distorsiune cognitivă\n", style="bold dim")
    body.append(entry.distortion.label)

    return Panel(
        body,
        title=f"{entry.emotion} ({entry.intensity}%)",
        title_align="left",
        subtitle=format_entry_date(entry.created_at, tz_name),
        subtitle_align="right",
        border_style="cyan",
    )


def build_entry_list(
    entries: Sequence[JournalEntry],
    tz_name: Optional[str] = None,
    limit: Optional[int] = None,
):
    """Newest-first list of entry cards, or the empty-journal hint."""
    if not entries:
        return Panel(Text(EMPTY_JOURNAL_MESSAGE, style="dim"), border_style="dim")

    shown = entries if limit is None else entries[:limit]
    return Group(*(build_entry_panel(entry, tz_name) for entry in shown))


def build_emotion_chart(entries: Sequence[JournalEntry]):
    """Emotion frequency as a bar table."""
    histogram = emotion_histogram(entries)
    if not histogram:
        return Text(EMPTY_EMOTION_CHART_MESSAGE, style="dim")

    max_count = max(count for _, count in histogram)

    table = Table(title="Frecvența emoțiilor", title_justify="left", show_header=False, box=None)
    table.add_column("Emoție", style="bold")
    table.add_column("Bară", style="green")
    table.add_column("Număr", justify="right")

    for emotion, count in histogram:
        table.add_row(emotion, format_bar(count, max_count), str(count))

    return table


def build_ratio_chart(entries: Sequence[JournalEntry]):
    """Rational vs irrational thoughts as a two-row bar table."""
    if not entries:
        return Text(EMPTY_RATIO_CHART_MESSAGE, style="dim")

    counts = thought_type_counts(entries)
    rows = counts.chart_rows()
    max_count = max(count for _, count in rows)

    table = Table(
        title="Gânduri raționale vs gânduri iraționale",
        title_justify="left",
        show_header=False,
        box=None,
    )
    table.add_column("Tip", style="bold")
    table.add_column("Bară")
    table.add_column("Număr", justify="right")
    table.add_column("Pondere", justify="right", style="dim")

    for (label, count), style in zip(rows, ("cyan", "red")):
        table.add_row(
            label,
            Text(format_bar(count, max_count), style=style),
            str(count),
            format_percentage(count, counts.classified_total),
        )

    return table


def build_stats_panel(entries: Sequence[JournalEntry]) -> Panel:
    """Both charts plus the entry total."""
    total = len(entries)
    footer = Text(
        f"Total înregistrări: {total}\n"
        "Poți folosi aceste date împreună cu terapeutul tău sau pentru "
        "auto-reflecție, pentru a observa tiparele de gândire.",
        style="dim",
    )

    return Panel(
        Group(build_emotion_chart(entries), Text(""), build_ratio_chart(entries), Text(""), footer),
        title="Harta emoțiilor și a gândurilor",
        title_align="left",
        border_style="green",
    )


def format_journal_summary(entries: Sequence[JournalEntry]) -> str:
    """
    Format journal aggregates as plain text.
    """
    lines = [
        "ThoughtDiary - Rezumatul jurnalului",
        "",
    ]

    if not entries:
        lines.extend([
            "Nu există încă nicio înregistrare.",
            "",
            "Începe cu o situație recentă:",
            "- Ce emoție a apărut?",
            "- Ce ți-a trecut prin minte?",
            "- A fost gândul rațional sau irațional?",
        ])
        return "\n".join(lines)

    lines.extend([
        f"Înregistrări: {len(entries)}",
        "",
    ])

    avg_intensity = sum(e.intensity for e in entries) / len(entries)
    lines.extend([
        "Emoții:",
        *(f"{emotion}: {count}" for emotion, count in emotion_histogram(entries)),
        f"Intensitate medie: {avg_intensity:.0f}%",
        "",
    ])

    counts = thought_type_counts(entries)
    unclassified = len(entries) - counts.classified_total
    lines.extend([
        "Gânduri:",
        f"Raționale: {counts.rational_count}",
        f"Iraționale: {counts.irrational_count}",
        f"Neîncadrate: {unclassified}",
        "",
    ])

    distortions = distortion_histogram(entries)
    if distortions:
        lines.append("Distorsiuni:")
        lines.extend(f"{label}: {count}" for label, count in distortions)
        lines.append("")

        most_common, _ = max(distortions, key=lambda row: row[1])
        lines.append(FOCUS_HEADING)
        lines.append(f"-> Caută o alternativă echilibrată de fiecare dată când observi: {most_common}")
        lines.append("")
    elif counts.irrational_count > counts.rational_count:
        lines.append(FOCUS_HEADING)
        lines.append("-> Numește distorsiunea din spatele fiecărui gând irațional")
        lines.append("")
    elif unclassified > counts.classified_total:
        lines.append(FOCUS_HEADING)
        lines.append("-> Încadrează fiecare gând ca rațional sau irațional")
        lines.append("")

    return "\n".join(lines)


def print_journal_summary(entries: Sequence[JournalEntry], console: Optional[Console] = None) -> None:
    """
    Print the plain-text summary.
    """
    (console or Console()).print(format_journal_summary(entries), highlight=False)


def export_journal_summary(
    entries: Sequence[JournalEntry],
    config: Config,
    filepath: Optional[str] = None,
) -> str:
    """
    Export the summary to a text file.

    Returns file path.
    """
    if not filepath:
        stamp = datetime.now(timezone.utc).strftime("%Y%m%d")
        filepath = str(Path(config.export_dir) / f"journal_summary_{stamp}.txt")

    Path(filepath).parent.mkdir(parents=True, exist_ok=True)

    with open(filepath, "w", encoding="utf-8") as f:
        f.write(format_journal_summary(entries))

    logger.info(f"Journal summary exported to {filepath}")
    return filepath
