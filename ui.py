from rich.align import Align
from rich.console import Console, Group
from rich.panel import Panel
from rich.text import Text

from config import BORDER_STYLE, TILE_STYLES

# Shared Console so every part of the game writes through the same output
console = Console()

DEATH_MESSAGES = {
    "wall": "You hit the wall!",
    "self": "You ran into yourself!",
}


def _border(width):
    return "  " + "--" * width


def render_lines(snapshot):
    """Yield the frame line by line: border, one line per row, border."""
    yield _border(snapshot.width)
    for row in snapshot.rows:
        yield "| " + "".join(tile.ascii_rep for tile in row) + " |"
    yield _border(snapshot.width)


def render_ascii(snapshot, stream):
    """
    Plain-text form of the frame for any text stream (a log file, a pipe).
    The live game draws the styled twin from board() instead.
    """
    for line in render_lines(snapshot):
        stream.write(line + "\n")
    stream.flush()


def board(snapshot):
    """Same frame as render_ascii, as a rich Text coloured by tile kind."""
    text = Text(no_wrap=True)
    text.append(_border(snapshot.width) + "\n", style=BORDER_STYLE)
    for row in snapshot.rows:
        text.append("| ", style=BORDER_STYLE)
        for tile in row:
            text.append(tile.ascii_rep, style=TILE_STYLES[tile.kind.value])
        text.append(" |\n", style=BORDER_STYLE)
    text.append(_border(snapshot.width), style=BORDER_STYLE)
    return text


def status_line(snapshot):
    return Text.from_markup(f"🐍 [bold green]Snake[/]  [dim]Length:[/] [bold cyan]{snapshot.length}[/]  [dim][W/A/S/D] Move[/]")


def frame(snapshot):
    return Group(status_line(snapshot), board(snapshot))


def end_message(snapshot):
    if snapshot.won:
        return "You win! The board is full."
    return "You died! " + DEATH_MESSAGES.get(snapshot.death_reason, "")


def game_over_panel(snapshot):
    colour = "green" if snapshot.won else "red"
    return Panel(
        Align.center(f"[bold {colour}]{end_message(snapshot).strip()}[/]\nLength: {snapshot.length}"),
        title="🐍 Snake",
        border_style=colour,
    )
