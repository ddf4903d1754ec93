"""Picture Puzzle command line.

Usage::

    picture-puzzle                      # interactive menu
    picture-puzzle -f rich -s 3         # Rich terminal, 3×3
    picture-puzzle -f pygame -i cat.png # Pygame GUI with your own picture
"""

from __future__ import annotations

import importlib
import logging
from enum import StrEnum
from pathlib import Path
from typing import Optional

import typer
from rich.logging import RichHandler

ROOT = Path(__file__).resolve().parent  # python/picture_puzzle/
ASSETS_DIR = ROOT / "assets"
DEFAULT_IMAGE = ASSETS_DIR / "puzzle-image.png"


# -- frontend registry -------------------------------------------------------


class Frontend(StrEnum):
    rich = "rich"
    pygame = "pygame"


_RUNNERS = {
    Frontend.rich: "picture_puzzle.frontend.cli.rich.app",
    Frontend.pygame: "picture_puzzle.frontend.gui.pygame.app",
}


# -- helpers ------------------------------------------------------------------


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(rich_tracebacks=True, show_path=False)],
        force=True,
    )


def _default_image() -> Optional[Path]:
    return DEFAULT_IMAGE if DEFAULT_IMAGE.is_file() else None


def _launch(frontend: Frontend, size: int, seed: Optional[int], image: Optional[Path]) -> None:
    mod = importlib.import_module(_RUNNERS[frontend])
    mod.run(size=size, seed=seed, image=image)


def _menu_loop(size: int, seed: Optional[int], image: Optional[Path]) -> None:
    while True:
        print()
        print("  ====================================")
        print("      P I C T U R E   P U Z Z L E    ")
        print("  ====================================")
        print()
        print("  1.  Play  (Rich Terminal)")
        print("  2.  Play  (Pygame GUI)")
        print("  0.  Quit")
        print()

        choice = input("  Select: ").strip()

        if choice == "0":
            print("\n  Goodbye!\n")
            return
        if choice == "1":
            _launch(Frontend.rich, size, seed, image)
        elif choice == "2":
            _launch(Frontend.pygame, size, seed, image)
        else:
            print("  Unknown option.")


# -- CLI entry point ----------------------------------------------------------

app = typer.Typer(add_completion=False)


@app.command()
def main(
    frontend: Optional[Frontend] = typer.Option(
        None, "-f", "--frontend",
        help="Frontend to launch. Omit for interactive menu.",
    ),
    size: int = typer.Option(
        4, "-s", "--size",
        min=2, max=8,
        help="Grid size (2-8).",
    ),
    seed: Optional[int] = typer.Option(
        None, "--seed",
        help="Seed the shuffle for a reproducible game.",
    ),
    image: Optional[Path] = typer.Option(
        None, "-i", "--image",
        exists=True, dir_okay=False, readable=True,
        help="Picture to cut into tiles (Pygame frontend).",
    ),
    verbose: bool = typer.Option(
        False, "-v", "--verbose",
        help="Log game events at debug level.",
    ),
) -> None:
    """Picture Puzzle."""
    _configure_logging(verbose)
    image = image if image is not None else _default_image()

    if frontend is None:
        _menu_loop(size, seed, image)
        return

    _launch(frontend, size, seed, image)
