"""
Psycho-education text.

Static explanation of automatic thoughts, rational vs irrational
thinking and common cognitive distortions.
"""

from typing import Optional

from rich.console import Console, Group
from rich.panel import Panel
from rich.text import Text

TITLE = "Ce este un gând automat? Ce sunt distorsiunile cognitive?"

INTRO = (
    "Gândurile automate sunt propoziții scurte, rapide, care apar aproape "
    "instant în minte atunci când trăim o situație. De multe ori nici nu ne "
    "dăm seama că „am gândit ceva”, simțim direct emoția (furie, frică, "
    "tristețe). În CBT și REBT învățăm să încetinim acest proces și să "
    "surprindem gândul care a declanșat emoția."
)

RATIONAL_VS_IRRATIONAL = (
    "Unele gânduri sunt raționale – realiste, flexibile – și duc la emoții "
    "sănătoase, adaptative (frustrare, regret, îngrijorare moderată). Alte "
    "gânduri sunt iraționale – rigide, de tip „trebuie”, „nu suport”, „este "
    "groaznic” – și duc la emoții nesănătoase, dezadaptative (furie extremă, "
    "disperare, panică)."
)

RATIONAL_EXAMPLES = (
    "„Nu îmi place ce s-a întâmplat, dar pot suporta.”",
    "„Ar fi fost mai bine să iasă altfel, dar pot învăța din asta.”",
    "„Mi-e teamă să nu greșesc, dar este normal să mai și greșesc.”",
    "„Aș prefera să fiu apreciat, dar nu toată lumea mă va plăcea.”",
)

IRRATIONAL_EXAMPLES = (
    "„Este groaznic, nu ar trebui să fie așa niciodată!”",
    "„Nu suport să greșesc, ar însemna că sunt un ratat.”",
    "„Dacă mă critică, înseamnă că nu valorez nimic.”",
    "„Dacă mă părăsește, viața mea nu mai are sens.”",
)

DISTORTION_EXAMPLES = (
    ("Catastrofare", "exagerezi gravitatea („Este un dezastru total dacă nu reușesc.”)."),
    ("Gândire alb-negru", "vezi lucrurile doar în extreme („Ori sunt perfect, ori sunt un eșec.”)."),
    ("Citirea gândurilor", "ești sigur că știi ce gândesc ceilalți („Sigur crede că sunt prost.”)."),
    (
        "„Trebuie” rigide",
        "reguli dure pentru tine sau pentru alții („Oamenii nu ar trebui să facă niciodată greșeli.”).",
    ),
)

CLOSING = (
    "Jurnalul pe care îl folosești acum te ajută să observi treptat ce tipuri "
    "de distorsiuni apar cel mai des la tine. Pasul următor în terapie este să "
    "exersezi gânduri alternative, mai echilibrate."
)


def _bullets(items, style: str) -> Text:
    text = Text()
    for item in items:
        text.append("• ", style=style)
        text.append(f"{item}\n")
    return text


def build_education_panel() -> Panel:
    """The full psycho-education section as one panel."""
    distortions = Text()
    for name, description in DISTORTION_EXAMPLES:
        distortions.append("• ")
        distortions.append(f"{name}: ", style="bold")
        distortions.append(f"{description}\n")

    return Panel(
        Group(
            Text(INTRO),
            Text(""),
            Text(RATIONAL_VS_IRRATIONAL),
            Text(""),
            Text("Exemple de gânduri raționale (emoții sănătoase)", style="bold green"),
            _bullets(RATIONAL_EXAMPLES, "green"),
            Text("Exemple de gânduri iraționale (emoții nesănătoase)", style="bold red"),
            _bullets(IRRATIONAL_EXAMPLES, "red"),
            Text("Distorsiuni cognitive – câteva exemple", style="bold cyan"),
            distortions,
            Text(CLOSING, style="dim"),
        ),
        title=TITLE,
        title_align="left",
        border_style="cyan",
    )


def print_education(console: Optional[Console] = None) -> None:
    (console or Console()).print(build_education_panel())
