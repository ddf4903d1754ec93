"""Pygame GUI frontend — fully self-contained.

Includes a size menu, the picture board with a preview thumbnail, timer,
restart button and the confetti celebration.  No terminal interaction
required.
"""

from __future__ import annotations

import enum
import logging
import math
import random
from pathlib import Path

import pygame

from picture_puzzle.backend.engine.gameplay import GamePlay
from picture_puzzle.backend.engine.gamestate import GameState
from picture_puzzle.backend.models.board import EMPTY, Direction
from picture_puzzle.frontend.tiles import (
    crop_rect,
    format_time,
    picture_colour,
    validate_index,
)

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Palette (warm browns of the default picture frame)
# ---------------------------------------------------------------------------
COL_BG_TOP = (134, 102, 74)
COL_BG_BOTTOM = (173, 135, 97)
COL_BOARD = (60, 44, 32)
COL_BTN = (51, 51, 51)
COL_BTN_HOVER = (80, 80, 80)
COL_TEXT = (255, 255, 255)
COL_SUBTEXT = (236, 224, 210)
COL_SHADOW = (40, 28, 18)
COL_ACCENT = (222, 184, 135)
COL_WIN = (255, 236, 170)

CONFETTI_COLOURS = ((123, 63, 0), (160, 82, 45), (222, 184, 135))

# ---------------------------------------------------------------------------
# Layout
# ---------------------------------------------------------------------------
WIN_W, WIN_H = 520, 720
TILE_GAP = 2
BOARD_TOP = 180
BOARD_PX = 440  # board width/height in px, gaps included
PREVIEW_PX = 110
FPS = 30


# ---------------------------------------------------------------------------
# Screen enum
# ---------------------------------------------------------------------------
class _Screen(enum.Enum):
    MENU = "menu"
    PLAYING = "playing"


# ---------------------------------------------------------------------------
# Simple clickable button
# ---------------------------------------------------------------------------
class _Btn:
    __slots__ = ("rect", "text", "font", "bg", "hover", "fg", "_hot")

    def __init__(
        self,
        rect: tuple[int, int, int, int],
        text: str,
        font: pygame.font.Font,
        *,
        bg: tuple = COL_BTN,
        hover: tuple = COL_BTN_HOVER,
        fg: tuple = COL_TEXT,
    ) -> None:
        self.rect = pygame.Rect(rect)
        self.text = text
        self.font = font
        self.bg = bg
        self.hover = hover
        self.fg = fg
        self._hot = False

    def draw(self, surf: pygame.Surface) -> None:
        pygame.draw.rect(
            surf, self.hover if self._hot else self.bg, self.rect, border_radius=6
        )
        lbl = self.font.render(self.text, True, self.fg)
        surf.blit(lbl, lbl.get_rect(center=self.rect.center))

    def motion(self, pos: tuple[int, int]) -> None:
        self._hot = self.rect.collidepoint(pos)

    def hit(self, pos: tuple[int, int]) -> bool:
        return self.rect.collidepoint(pos)


def _blit_center(surf: pygame.Surface, rendered: pygame.Surface, y: int) -> None:
    surf.blit(rendered, ((WIN_W - rendered.get_width()) // 2, y))


# ---------------------------------------------------------------------------
# Pictures
# ---------------------------------------------------------------------------
def _fallback_picture(px: int) -> pygame.Surface:
    """Render the built-in picture; drawn small, then smoothed up to *px*."""
    res = 64
    small = pygame.Surface((res, res))
    for y in range(res):
        for x in range(res):
            small.set_at((x, y), picture_colour(x / (res - 1), y / (res - 1)))
    return pygame.transform.smoothscale(small, (px, px))


def _load_picture(image: Path | None, px: int) -> pygame.Surface:
    """Load *image* scaled to a *px* square, or the built-in picture."""
    if image is not None:
        try:
            loaded = pygame.image.load(str(image)).convert()
        except (pygame.error, FileNotFoundError) as exc:
            logger.warning("could not load picture %s (%s); using built-in", image, exc)
        else:
            return pygame.transform.smoothscale(loaded, (px, px))
    return _fallback_picture(px)


# ---------------------------------------------------------------------------
# Confetti
# ---------------------------------------------------------------------------
class _Confetti:
    """Particle burst fired by the win listener, once per victory."""

    COUNT = 200
    SPREAD_DEG = 100
    GRAVITY = 0.25

    def __init__(self, rng: random.Random) -> None:
        self._rng = rng
        self.particles: list[dict] = []

    def __call__(self, state: GameState) -> None:
        ox, oy = WIN_W / 2, WIN_H * 0.6
        half = math.radians(self.SPREAD_DEG / 2)
        for _ in range(self.COUNT):
            angle = -math.pi / 2 + self._rng.uniform(-half, half)
            speed = self._rng.uniform(6.0, 14.0)
            life = self._rng.randint(50, 90)
            self.particles.append(
                {
                    "pos": [ox, oy],
                    "vel": [math.cos(angle) * speed, math.sin(angle) * speed],
                    "life": life,
                    "max_life": life,
                    "size": self._rng.randint(4, 8),
                    "color": self._rng.choice(CONFETTI_COLOURS),
                }
            )

    def clear(self) -> None:
        self.particles = []

    def update(self) -> None:
        self.particles = [p for p in self.particles if p["life"] > 0]
        for p in self.particles:
            p["vel"][0] *= 0.97
            p["vel"][1] = p["vel"][1] * 0.97 + self.GRAVITY
            p["pos"][0] += p["vel"][0]
            p["pos"][1] += p["vel"][1]
            p["life"] -= 1

    def draw(self, surf: pygame.Surface) -> None:
        for p in self.particles:
            size = max(1, int(p["size"] * p["life"] / p["max_life"]))
            pygame.draw.rect(
                surf, p["color"], pygame.Rect(int(p["pos"][0]), int(p["pos"][1]), size, size)
            )


# ---------------------------------------------------------------------------
# Main application
# ---------------------------------------------------------------------------
class PygameApp:
    _SIZES: list[tuple[str, int]] = [
        ("2×2", 2),
        ("3×3", 3),
        ("4×4", 4),
        ("5×5", 5),
    ]

    def __init__(self, default_size: int, seed: int | None, image: Path | None) -> None:
        sizes = [s for _, s in self._SIZES]
        self._sel_size = default_size if default_size in sizes else 3
        self._rng = random.Random(seed)

        pygame.init()
        self._surf = pygame.display.set_mode((WIN_W, WIN_H))
        pygame.display.set_caption("Picture Puzzle")
        self._clock = pygame.time.Clock()

        self._f_big = pygame.font.SysFont("Helvetica", 36, bold=True)
        self._f_title = pygame.font.SysFont("Helvetica", 22, bold=True)
        self._f_body = pygame.font.SysFont("Helvetica", 18)
        self._f_btn = pygame.font.SysFont("Helvetica", 16, bold=True)
        self._f_small = pygame.font.SysFont("Helvetica", 13)

        self._background = self._gradient()
        self._picture = _load_picture(image, BOARD_PX)
        self._preview = pygame.transform.smoothscale(
            self._picture, (PREVIEW_PX, PREVIEW_PX)
        )
        self._tile_images: dict[int, pygame.Surface] = {}

        self._screen = _Screen.MENU
        self._game: GamePlay | None = None
        self._confetti = _Confetti(self._rng)

        self._build_menu_btns()
        self._build_game_btns()

    # ── setup ───────────────────────────────────────────────────────────────

    @staticmethod
    def _gradient() -> pygame.Surface:
        bg = pygame.Surface((WIN_W, WIN_H))
        for y in range(WIN_H):
            t = y / (WIN_H - 1)
            colour = tuple(
                int(a + (b - a) * t) for a, b in zip(COL_BG_TOP, COL_BG_BOTTOM)
            )
            pygame.draw.line(bg, colour, (0, y), (WIN_W, y))
        return bg

    def _build_menu_btns(self) -> None:
        bw, bh, gap = 96, 46, 10
        total_w = len(self._SIZES) * bw + (len(self._SIZES) - 1) * gap
        sx = (WIN_W - total_w) // 2

        self._size_btns: dict[int, _Btn] = {}
        for i, (label, s) in enumerate(self._SIZES):
            self._size_btns[s] = _Btn((sx + i * (bw + gap), 420, bw, bh), label, self._f_btn)

        bw_lg = 220
        self._play_btn = _Btn(
            ((WIN_W - bw_lg) // 2, 500, bw_lg, 50), "P L A Y", self._f_btn,
            bg=COL_ACCENT, hover=(240, 210, 170), fg=COL_BOARD,
        )
        self._quit_btn = _Btn(
            ((WIN_W - bw_lg) // 2, 564, bw_lg, 42), "Q U I T", self._f_btn
        )
        self._menu_all = [*self._size_btns.values(), self._play_btn, self._quit_btn]

    def _build_game_btns(self) -> None:
        self._restart_btn = _Btn((WIN_W - 120, 130, 100, 36), "Restart", self._f_btn)
        self._menu_btn = _Btn((20, 130, 100, 36), "Menu", self._f_btn)
        self._game_btns = [self._restart_btn, self._menu_btn]

    # ── board geometry ──────────────────────────────────────────────────────

    def _tile_layout(self) -> tuple[int, int, int, int]:
        """Return (tile_px, origin_x, origin_y, total_px) for the current game."""
        sz = self._game.size  # type: ignore[union-attr]
        tile_px = (BOARD_PX - (sz + 1) * TILE_GAP) // sz
        total = sz * tile_px + (sz + 1) * TILE_GAP
        return tile_px, (WIN_W - total) // 2 + TILE_GAP, BOARD_TOP + TILE_GAP, total

    def _tile_rect(self, index: int, tpx: int, ox: int, oy: int) -> pygame.Rect:
        r, c = divmod(index, self._game.size)  # type: ignore[union-attr]
        return pygame.Rect(ox + c * (tpx + TILE_GAP), oy + r * (tpx + TILE_GAP), tpx, tpx)

    def _index_at(self, pos: tuple[int, int]) -> int | None:
        tpx, ox, oy, _ = self._tile_layout()
        for index in range(len(self._game.state.board)):  # type: ignore[union-attr]
            if self._tile_rect(index, tpx, ox, oy).collidepoint(pos):
                return index
        return None

    def _prepare_tile_images(self) -> None:
        """Slice the picture into one surface per tile."""
        sz = self._game.size  # type: ignore[union-attr]
        tpx, _, _, _ = self._tile_layout()
        picture = pygame.transform.smoothscale(self._picture, (sz * tpx, sz * tpx))
        self._tile_images = {
            tile: picture.subsurface(pygame.Rect(crop_rect(tile, sz, tpx))).copy()
            for tile in range(sz * sz - 1)
        }

    # ── drawing ─────────────────────────────────────────────────────────────

    def _draw_menu(self) -> None:
        self._surf.blit(self._background, (0, 0))
        _blit_center(self._surf, self._f_big.render("PICTURE  PUZZLE", True, COL_TEXT), 70)

        big_preview = pygame.transform.smoothscale(self._picture, (220, 220))
        _blit_center(self._surf, big_preview, 150)
        _blit_center(
            self._surf, self._f_body.render("Choose a grid", True, COL_SUBTEXT), 388
        )

        for s, btn in self._size_btns.items():
            btn.bg = COL_ACCENT if s == self._sel_size else COL_BTN
            btn.fg = COL_BOARD if s == self._sel_size else COL_TEXT
            btn.draw(self._surf)
        self._play_btn.draw(self._surf)
        self._quit_btn.draw(self._surf)

    def _draw_game(self) -> None:
        self._surf.blit(self._background, (0, 0))
        game = self._game
        assert game is not None
        board = game.state.board
        tpx, ox, oy, total = self._tile_layout()

        # preview + clock row
        _blit_center(self._surf, self._preview, 12)
        _blit_center(
            self._surf,
            self._f_title.render(
                f"Time  {format_time(game.state.elapsed_seconds)}    Moves  {game.state.moves}",
                True,
                COL_TEXT,
            ),
            134,
        )
        for btn in self._game_btns:
            btn.draw(self._surf)

        pygame.draw.rect(
            self._surf,
            COL_BOARD,
            pygame.Rect(ox - TILE_GAP, oy - TILE_GAP, total, total),
            border_radius=10,
        )
        for index, tile in enumerate(board.cells):
            if tile is EMPTY:
                continue
            rect = self._tile_rect(index, tpx, ox, oy)
            self._surf.blit(self._tile_images[tile], rect.topleft)

        if game.is_won:
            self._draw_victory()
        else:
            _blit_center(
                self._surf,
                self._f_small.render(
                    "Click a tile by the gap    Arrows/WASD  move    R  restart    Esc  menu",
                    True,
                    COL_SUBTEXT,
                ),
                WIN_H - 40,
            )

        self._confetti.draw(self._surf)

    def _draw_victory(self) -> None:
        y = BOARD_TOP + BOARD_PX + 20
        banner = pygame.Surface((WIN_W - 60, 70), pygame.SRCALPHA)
        banner.fill((*COL_SHADOW, 190))
        _blit_center(self._surf, banner, y)
        _blit_center(
            self._surf, self._f_title.render("Puzzle Completed!", True, COL_WIN), y + 10
        )
        _blit_center(
            self._surf,
            self._f_small.render("Press R or Restart to play again", True, COL_SUBTEXT),
            y + 44,
        )

    # ── event handling ──────────────────────────────────────────────────────

    def _ev_menu(self, ev: pygame.event.Event) -> bool:
        if ev.type == pygame.MOUSEMOTION:
            for b in self._menu_all:
                b.motion(ev.pos)
        elif ev.type == pygame.MOUSEBUTTONDOWN and ev.button == 1:
            for s, b in self._size_btns.items():
                if b.hit(ev.pos):
                    self._sel_size = s
                    return True
            if self._play_btn.hit(ev.pos):
                self._start_game()
            elif self._quit_btn.hit(ev.pos):
                return False
        elif ev.type == pygame.KEYDOWN:
            if ev.key == pygame.K_RETURN:
                self._start_game()
            elif ev.key in (pygame.K_q, pygame.K_ESCAPE):
                return False
        return True

    def _ev_game(self, ev: pygame.event.Event) -> bool:
        game = self._game
        assert game is not None
        if ev.type == pygame.MOUSEMOTION:
            for btn in self._game_btns:
                btn.motion(ev.pos)
        elif ev.type == pygame.MOUSEBUTTONDOWN and ev.button == 1:
            if self._restart_btn.hit(ev.pos):
                self._restart()
            elif self._menu_btn.hit(ev.pos):
                self._screen = _Screen.MENU
            else:
                index = self._index_at(ev.pos)
                if index is not None:
                    game.move_tile(validate_index(game.state.board, index))
        elif ev.type == pygame.KEYDOWN:
            _dirs = {
                pygame.K_UP: Direction.UP,
                pygame.K_w: Direction.UP,
                pygame.K_DOWN: Direction.DOWN,
                pygame.K_s: Direction.DOWN,
                pygame.K_LEFT: Direction.LEFT,
                pygame.K_a: Direction.LEFT,
                pygame.K_RIGHT: Direction.RIGHT,
                pygame.K_d: Direction.RIGHT,
            }
            if ev.key in _dirs:
                game.move(_dirs[ev.key])
            elif ev.key == pygame.K_r:
                self._restart()
            elif ev.key in (pygame.K_m, pygame.K_ESCAPE):
                self._screen = _Screen.MENU
        return True

    # ── game state ──────────────────────────────────────────────────────────

    def _start_game(self) -> None:
        self._game = GamePlay(self._sel_size, rng=self._rng)
        self._game.add_win_listener(self._confetti)
        self._confetti.clear()
        self._prepare_tile_images()
        self._screen = _Screen.PLAYING

    def _restart(self) -> None:
        assert self._game is not None
        self._confetti.clear()
        self._game.restart()

    # ── main loop ───────────────────────────────────────────────────────────

    def run_loop(self) -> None:
        _dispatch = {
            _Screen.MENU: self._ev_menu,
            _Screen.PLAYING: self._ev_game,
        }
        _draw = {
            _Screen.MENU: self._draw_menu,
            _Screen.PLAYING: self._draw_game,
        }

        running = True
        while running:
            for ev in pygame.event.get():
                if ev.type == pygame.QUIT:
                    running = False
                    break
                handler = _dispatch.get(self._screen)
                if handler and not handler(ev):
                    running = False
                    break

            if self._screen == _Screen.PLAYING and self._game is not None:
                self._game.poll_clock()
                self._confetti.update()

            _draw[self._screen]()
            pygame.display.flip()
            self._clock.tick(FPS)

        pygame.quit()


# ---------------------------------------------------------------------------
# Public entry point
# ---------------------------------------------------------------------------
def run(size: int = 3, seed: int | None = None, image: Path | None = None) -> None:
    """Launch the Pygame GUI (opens directly to the menu)."""
    app = PygameApp(size, seed, image)
    app.run_loop()
