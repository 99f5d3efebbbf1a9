"""
Display and rendering helpers for the award console.

Handles the ranked list, the optional table view, and prompts.
"""

from rich.console import Console
from rich.table import Table
from rich.box import ROUNDED
from rich.markup import escape

from ..state.schema import Award, MAX_QUALITY
from ..simulation.runner import DaySnapshot


# Shared console instance
console = Console()
# Errors go to stderr so they never mix with rankings or JSON lines
error_console = Console(stderr=True)

THEME = {
    "primary": "steel_blue",
    "secondary": "grey70",
    "warning": "dark_goldenrod",
    "danger": "dark_red",
    "accent": "cyan",
}

BANNER_TEXT = "Updating award metrics...!"
CONTINUE_PROMPT = "Keep Going? Press q to stop program."


def format_award_line(rank: int, award: Award) -> str:
    """One ranked line, e.g. "1. Name: Blue Star | Quality: 28 | Expires In: 9"."""
    return (
        f"{rank}. Name: {award.name} | Quality: {award.quality} "
        f"| Expires In: {award.expires_in}"
    )


def show_banner() -> None:
    console.print(BANNER_TEXT, markup=False, highlight=False, emoji=False)


def show_continue_prompt() -> None:
    console.print()
    console.print(CONTINUE_PROMPT, markup=False, highlight=False, emoji=False)


def show_error(message: str) -> None:
    error_console.print(
        f"[{THEME['danger']}]{escape(message)}[/]", highlight=False, soft_wrap=True
    )


def render_rankings(awards: list[Award], clear: bool = True) -> None:
    """
    Print the ranked award list, one line per award.

    Markup and highlighting are off so the line format is printed verbatim.
    """
    if clear:
        console.clear()
    for i, award in enumerate(awards, 1):
        console.print(format_award_line(i, award), markup=False, highlight=False, emoji=False)


def _quality_style(quality: int) -> str:
    if quality > MAX_QUALITY:
        return THEME["accent"]
    if quality == 0:
        return THEME["danger"]
    if quality < 10:
        return THEME["warning"]
    return THEME["secondary"]


def build_rankings_table(snapshot: DaySnapshot) -> Table:
    """Build a table view of a day's ranking."""
    table = Table(
        title=f"Day {snapshot.day}",
        box=ROUNDED,
        border_style=THEME["primary"],
    )
    table.add_column("Rank", justify="right")
    table.add_column("Name")
    table.add_column("Quality", justify="right")
    table.add_column("Expires In", justify="right")

    for row in snapshot.rankings:
        style = _quality_style(row.quality)
        table.add_row(
            str(row.rank),
            row.name,
            f"[{style}]{row.quality}[/]",
            str(row.expires_in),
        )
    return table


def render_table(snapshot: DaySnapshot, clear: bool = True) -> None:
    if clear:
        console.clear()
    console.print(build_rankings_table(snapshot))
