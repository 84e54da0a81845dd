"""
Rendering for the pygame front end.

Reads the engine state once per frame and never writes to it.

- Cell sprites are pre-rendered per kind (plus one for locked cells) and blitted.
- Static background (grid, hold/next frames) is built once per Dims.
- The locked-cell layer is cached and rebuilt only when the Field object changes.
- HUD text surfaces are re-rendered only when score/lines change.
"""
from __future__ import annotations
import pygame
from dataclasses import dataclass
from typing import Dict, Optional, Tuple
from tetris_board import Field
from tetris_game import GameState
from tetris_layout import Dims
from tetris_piece import Piece, Shape, shape_of

# Colors per tetromino type
COLORS: Dict[str, Tuple[int,int,int]] = {
    "I": (6,182,212),
    "O": (234,179,8),
    "T": (168,85,247),
    "S": (34,197,94),
    "Z": (239,68,68),
    "J": (59,130,246),
    "L": (249,115,22),
}
LOCKED = (209,213,219)
TEXT = (200,210,240)
DIM_TEXT = (165,175,215)
PREVIEW_CELLS = 4

@dataclass
class HudCache:
    score: int = -1
    lines: int = -1
    score_s: Optional[pygame.Surface] = None
    lines_s: Optional[pygame.Surface] = None

class RenderAssets:
    """Holds all pre-rendered assets for fast blitting."""
    def __init__(self, dims: Dims, cols: int, rows: int, font: pygame.font.Font, big_font: pygame.font.Font):
        self.dims = dims
        self.cols, self.rows = cols, rows
        self.font = font
        self.big_font = big_font
        self.pv_cell = max(12, int(dims.cell*0.75))
        self.hold_y = dims.board_y + 32
        self.next_y = dims.board_y + 140
        self._make_static()
        self._make_cells()
        self.hud = HudCache()
        self.board_surface = pygame.Surface((dims.board_w, dims.board_h), pygame.SRCALPHA)
        self._board_field: Optional[Field] = None

    # ---------- Static background ----------
    def _preview_frame(self, x: int, y: int):
        size = self.pv_cell*PREVIEW_CELLS
        frame = pygame.Rect(x-6, y-6, size+12, size+12)
        pygame.draw.rect(self.bg, (15,18,40), frame)
        pygame.draw.rect(self.bg, (55,65,110), frame, 1)

    def _make_static(self):
        d = self.dims
        self.bg = pygame.Surface((d.total_w, d.total_h))
        self.bg.fill((31,41,55))
        pygame.draw.rect(self.bg, (17,24,39), (d.board_x, d.board_y, d.board_w, d.board_h))
        grid_col = (75,85,99)
        for x in range(self.cols+1):
            X = d.board_x + x*d.cell
            pygame.draw.line(self.bg, grid_col, (X, d.board_y), (X, d.board_y + d.board_h))
        for y in range(self.rows+1):
            Y = d.board_y + y*d.cell
            pygame.draw.line(self.bg, grid_col, (d.board_x, Y), (d.board_x + d.board_w, Y))
        self.bg.blit(self.font.render("HOLD", True, TEXT), (d.hold_x + 6, d.board_y))
        self._preview_frame(d.hold_x + 12, self.hold_y)
        self.bg.blit(self.font.render("NEXT", True, TEXT), (d.panel_x + 6, self.next_y - 32))
        for i in range(2):
            self._preview_frame(d.panel_x + 12, self.next_y + i*(self.pv_cell*PREVIEW_CELLS + 24))
        y = d.board_y + d.board_h - 8*20
        for line in ("←/→ A/D  Move", "↓ S  Soft drop", "↑ W  Hard drop",
                     "J  Rot left", "K  Rot right", "Space  Hold", "P  Pause", "R  Restart"):
            self.bg.blit(self.font.render(line, True, DIM_TEXT), (d.hold_x + 6, y)); y += 20

    # ---------- Cell sprites ----------
    def _make_cells(self):
        c = self.dims.cell
        self.cell_surf: Dict[str, pygame.Surface] = {}
        self.pv_surf: Dict[str, pygame.Surface] = {}
        for t, col in COLORS.items():
            s = pygame.Surface((c-2, c-2)); s.fill(col)
            self.cell_surf[t] = s
            p = pygame.Surface((self.pv_cell-2, self.pv_cell-2)); p.fill(col)
            self.pv_surf[t] = p
        self.locked_surf = pygame.Surface((c-2, c-2))
        self.locked_surf.fill(LOCKED)

    # ---------- Locked cells ----------
    def _rebuild_board_surface(self, field: Field):
        self.board_surface.fill((0,0,0,0))
        c = self.dims.cell
        for y in range(field.rows):
            for x in range(field.cols):
                if field.filled(x, y):
                    self.board_surface.blit(self.locked_surf, (x*c + 1, y*c + 1))
        self._board_field = field

    def _draw_piece(self, screen: pygame.Surface, piece: Piece):
        d = self.dims
        for bx, by in piece.cells():
            if 0 <= by < self.rows and 0 <= bx < self.cols:
                screen.blit(self.cell_surf[piece.t], (d.board_x + bx*d.cell + 1, d.board_y + by*d.cell + 1))

    def _draw_preview(self, screen: pygame.Surface, t: Optional[str], x: int, y: int, shape: Optional[Shape] = None):
        if t is None: return
        for r, row in enumerate(shape or shape_of(t)):
            for c, v in enumerate(row):
                if v:
                    screen.blit(self.pv_surf[t], (x + c*self.pv_cell + 1, y + r*self.pv_cell + 1))

    # ---------- HUD ----------
    def _draw_hud(self, screen: pygame.Surface, score: int, lines: int):
        d = self.dims
        f = self.font
        if score != self.hud.score:
            self.hud.score = score
            self.hud.score_s = f.render(f"Score: {score}", True, TEXT)
        if lines != self.hud.lines:
            self.hud.lines = lines
            self.hud.lines_s = f.render(f"Lines: {lines}", True, TEXT)
        screen.blit(self.hud.score_s, (d.panel_x + 6, d.board_y))
        screen.blit(self.hud.lines_s, (d.panel_x + 6, d.board_y + 24))

    def _banner(self, screen: pygame.Surface, text: str, col: Tuple[int,int,int]):
        d = self.dims
        msg = self.big_font.render(text, True, col)
        screen.blit(msg, msg.get_rect(center=(d.board_x + d.board_w//2, d.board_y + d.board_h//2)))

    def draw(self, screen: pygame.Surface, state: GameState):
        d = self.dims
        if state.field is not self._board_field:
            self._rebuild_board_surface(state.field)
        screen.blit(self.bg, (0,0))
        screen.blit(self.board_surface, (d.board_x, d.board_y))
        if state.current is not None:
            self._draw_piece(screen, state.current)
        if state.hold is not None:
            self._draw_preview(screen, state.hold.t, d.hold_x + 12, self.hold_y, state.hold.shape)
        for i, t in enumerate(state.queue[:2]):
            self._draw_preview(screen, t, d.panel_x + 12, self.next_y + i*(self.pv_cell*PREVIEW_CELLS + 24))
        self._draw_hud(screen, state.score, state.lines)
        if state.game_over:
            self._banner(screen, "GAME OVER (R to Restart)", (248,113,113))
        elif state.paused:
            self._banner(screen, "PAUSED", (250,204,21))
