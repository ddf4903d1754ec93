"""Rich terminal frontend — the picture drawn as coloured tiles.

Uses the ``rich`` library for styled output.  Each tile is painted with the
colour of its piece of the built-in picture and labelled with its number.
Includes a built-in menu for size selection.
"""

from __future__ import annotations

import random
import sys
from pathlib import Path

import rich.box
from rich.align import Align
from rich.console import Console, Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from picture_puzzle.backend.engine.gameplay import GamePlay
from picture_puzzle.backend.engine.gamestate import GameState
from picture_puzzle.backend.models.board import EMPTY, Board, Direction
from picture_puzzle.frontend.cli.input_handler import get_key, get_key_timeout
from picture_puzzle.frontend.tiles import format_time, tile_colour

console = Console()

MIN_SIZE, MAX_SIZE = 2, 8

_DIRECTIONS = {
    "up": Direction.UP,
    "down": Direction.DOWN,
    "left": Direction.LEFT,
    "right": Direction.RIGHT,
}

_CONFETTI_GLYPHS = "*+o.~^"
_CONFETTI_COLOURS = ("#7b3f00", "#a0522d", "#deb887", "bright_yellow", "magenta")


# -- celebration --------------------------------------------------------------


class _Confetti:
    """Win listener that builds the confetti banner once per victory."""

    def __init__(self, rng: random.Random) -> None:
        self._rng = rng
        self.banner: Text | None = None

    def __call__(self, state: GameState) -> None:
        self.banner = self._burst(width=44, rows=3)

    def clear(self) -> None:
        self.banner = None

    def _burst(self, width: int, rows: int) -> Text:
        text = Text()
        for r in range(rows):
            for _ in range(width):
                if self._rng.random() < 0.45:
                    text.append(
                        self._rng.choice(_CONFETTI_GLYPHS),
                        style=f"bold {self._rng.choice(_CONFETTI_COLOURS)}",
                    )
                else:
                    text.append(" ")
            if r < rows - 1:
                text.append("\n")
        return text


# -- board rendering ----------------------------------------------------------


def _render_board(board: Board) -> Table:
    """Return a Rich Table representing the puzzle grid."""
    width = len(str(len(board) - 1))
    table = Table(
        show_header=False,
        show_edge=True,
        pad_edge=True,
        box=rich.box.HEAVY,
        border_style="#86664a",
        padding=(0, 1),
    )
    for _ in range(board.size):
        table.add_column(width=width + 2, justify="center")

    for r, row in enumerate(board.rows()):
        cells: list[Text] = []
        for c, val in enumerate(row):
            if val is EMPTY:
                cells.append(Text("·", style="dim"))
                continue
            red, green, blue = tile_colour(val, board.size)
            fg = "black" if (red * 299 + green * 587 + blue * 114) > 140_000 else "white"
            style = f"bold {fg} on rgb({red},{green},{blue})"
            if board.is_tile_correct(board.index_of(r, c)):
                style += " underline"
            cells.append(Text(f" {val + 1:>{width}} ", style=style))
        table.add_row(*cells)

    return table


def _render_preview(size: int) -> Text:
    """Small swatch of the solved picture."""
    preview = Text()
    for r in range(size):
        for c in range(size):
            tile = r * size + c
            if tile == size * size - 1:
                preview.append("  ")
                continue
            red, green, blue = tile_colour(tile, size)
            preview.append("  ", style=f"on rgb({red},{green},{blue})")
        if r < size - 1:
            preview.append("\n")
    return preview


def _stats(game: GamePlay) -> Text:
    stats = Text()
    stats.append("  Moves: ", style="dim")
    stats.append(str(game.state.moves), style="bold yellow")
    stats.append("    Time: ", style="dim")
    stats.append(format_time(game.state.elapsed_seconds), style="bold yellow")
    return stats


# -- menu screen --------------------------------------------------------------


def _draw_menu(sel_size: int) -> None:
    """Draw the main menu."""
    console.clear()

    sizes = Text()
    for s in range(MIN_SIZE, MAX_SIZE + 1):
        if s > MIN_SIZE:
            sizes.append("  ")
        if s == sel_size:
            sizes.append(f" {s}×{s} ", style="bold black on #deb887")
        else:
            sizes.append(f" {s}×{s} ", style="dim")

    nav = Text("  ← →  change size", style="dim")

    opts = Text()
    opts.append("  Enter", style="bold cyan")
    opts.append("  Play    ")
    opts.append("Q", style="dim bold")
    opts.append("  Quit", style="dim")

    body = Group(
        Text(""),
        Align.center(_render_preview(sel_size)),
        Text(""),
        Align.center(sizes),
        Align.center(nav),
        Text(""),
        Align.center(opts),
        Text(""),
    )

    panel = Panel(
        body,
        title="[bold]P I C T U R E   P U Z Z L E[/bold]",
        border_style="#ad8761",
        padding=(1, 4),
    )

    console.print()
    console.print(Align.center(panel))


# -- game screen --------------------------------------------------------------


def _draw_game(game: GamePlay, confetti: _Confetti) -> None:
    """Draw the game screen; adds the victory section once the puzzle is won."""
    console.clear()

    size = game.size
    parts = [
        Align.center(_render_preview(size)),
        Text(""),
        Align.center(_render_board(game.state.board)),
    ]

    won = game.is_won
    if won:
        if confetti.banner is not None:
            parts.append(Align.center(confetti.banner))
        parts.append(Align.center(Text("★ Puzzle Completed! ★", style="bold green")))

    panel = Panel(
        Group(*parts),
        title=f"[bold]Picture Puzzle  {size}×{size}[/bold]",
        border_style="bold green" if won else "#ad8761",
        padding=(1, 2),
    )

    controls = Text()
    if not won:
        controls.append("  ↑↓←→", style="bold cyan")
        controls.append(" / ", style="dim")
        controls.append("WASD", style="bold cyan")
        controls.append("  move   ", style="dim")
    controls.append("R", style="bold cyan")
    controls.append("  restart   ", style="dim")
    controls.append("Q", style="bold cyan")
    controls.append("  back", style="dim")

    console.print()
    console.print(Align.center(panel))
    # Save the cursor right before the stats line so _update_time() can
    # come back and overwrite only that line.
    sys.stdout.write("\033[s")
    sys.stdout.flush()
    console.print(Align.center(_stats(game)))
    console.print(Align.center(controls))


def _update_time(game: GamePlay) -> None:
    """Overwrite just the stats line using the saved cursor position."""
    _DIM = "\033[2m"
    _YB = "\033[33;1m"
    _RS = "\033[0m"

    clock = format_time(game.state.elapsed_seconds)
    stats_raw = (
        f"{_DIM}Moves: {_RS}{_YB}{game.state.moves}{_RS}"
        f"    {_DIM}Time: {_RS}{_YB}{clock}{_RS}"
    )

    # Centre the visible text to match what Rich would produce.
    visible_len = len(f"Moves: {game.state.moves}    Time: {clock}")
    pad = max(0, (console.width - visible_len) // 2)

    sys.stdout.write(f"\033[u\033[K{' ' * pad}{stats_raw}")
    sys.stdout.flush()


# -- game loop ----------------------------------------------------------------


def _wait_for_key(game: GamePlay) -> str:
    """Block for a key, repainting the clock whenever a second passes."""
    while True:
        key = get_key_timeout(game.seconds_until_tick())
        if game.poll_clock():
            _update_time(game)
        if key is not None:
            return key


def _play_game(size: int, rng: random.Random) -> None:
    game = GamePlay(size, rng=rng)
    confetti = _Confetti(rng)
    game.add_win_listener(confetti)

    while True:
        _draw_game(game, confetti)
        key = _wait_for_key(game)

        if key in _DIRECTIONS:
            game.move(_DIRECTIONS[key])
        elif key == "restart":
            confetti.clear()
            game.restart()
        elif key == "quit":
            return


# -- menu loop ----------------------------------------------------------------


def _menu_loop(sel_size: int, rng: random.Random) -> None:
    while True:
        _draw_menu(sel_size)
        key = get_key()

        if key == "quit":
            console.clear()
            console.print(Align.center(Text("\nGoodbye!\n", style="bold cyan")))
            return
        elif key == "left":
            sel_size = max(MIN_SIZE, sel_size - 1)
        elif key == "right":
            sel_size = min(MAX_SIZE, sel_size + 1)
        elif key == "enter":
            _play_game(sel_size, rng)


# -- public entry point -------------------------------------------------------


def run(size: int = 4, seed: int | None = None, image: Path | None = None) -> None:
    """Launch the Rich CLI with interactive menu.

    *image* is accepted for a uniform frontend signature; the terminal always
    shows the built-in picture.
    """
    _menu_loop(min(MAX_SIZE, max(MIN_SIZE, size)), random.Random(seed))
