"""
Rendering helpers for the pygame shell.

- Static background (grid + panel frame) is pre-rendered once per Dims.
- Cell sprites are pre-rendered per piece kind; merged cells share one sprite
  since the board keeps no piece identity.
- The locked-cell surface is rebuilt only when the board contents change.
- HUD text surfaces are cached and re-rendered only when values change.
"""
from __future__ import annotations
import pygame
from dataclasses import dataclass
from typing import Dict, Optional, Tuple
from tetris_board import Cell
from tetris_engine import Snapshot
from tetris_layout import Dims
from tetris_piece import shape_key

# Colors of the falling piece per kind
COLORS: Dict[str, Tuple[int, int, int]] = {
    "I": (102, 224, 255),
    "J": (106, 119, 255),
    "L": (255, 158, 94),
    "O": (255, 224, 102),
    "S": (94, 224, 142),
    "T": (200, 119, 255),
    "Z": (255, 102, 119),
}
LOCKED = (150, 158, 190)
TEXT = (200, 210, 240)
DIM_TEXT = (165, 175, 215)


@dataclass
class HudCache:
    score: int = -1
    level: int = -1
    lines: int = -1
    next_kind: str = ""
    score_s: Optional[pygame.Surface] = None
    level_s: Optional[pygame.Surface] = None
    lines_s: Optional[pygame.Surface] = None
    preview: Optional[pygame.Surface] = None
    controls: Optional[list] = None


class RenderAssets:
    """Holds pre-rendered assets and draws a Snapshot."""
    def __init__(self, dims: Dims, font: pygame.font.Font, big_font: pygame.font.Font):
        self.dims = dims
        self.font = font
        self.big_font = big_font
        self._make_static()
        self._make_cells()
        self.hud = HudCache()
        self.title = font.render("Tetris", True, (197, 202, 233))
        self.board_surface = pygame.Surface((dims.board_w, dims.board_h), pygame.SRCALPHA)
        self._board_key = None

    # ---------- Static background (grid + panel) ----------
    def _make_static(self):
        d = self.dims
        self.bg = pygame.Surface((d.total_w, d.total_h))
        self.bg.fill((10, 13, 34))
        grid_col = (40, 50, 90)
        for x in range(d.cols + 1):
            X = d.board_x + x * d.cell
            pygame.draw.line(self.bg, grid_col, (X, d.board_y), (X, d.board_y + d.board_h))
        for y in range(d.rows + 1):
            Y = d.board_y + y * d.cell
            pygame.draw.line(self.bg, grid_col, (d.board_x, Y), (d.board_x + d.board_w, Y))
        panel_rect = pygame.Rect(d.panel_x, d.panel_y, d.panel_w, d.total_h - 2 * d.margin)
        pygame.draw.rect(self.bg, (21, 25, 53), panel_rect)
        pygame.draw.rect(self.bg, (50, 60, 100), panel_rect, 1)
        self.pv_cell = max(14, int(d.cell * 0.75))
        self.pv_x = d.panel_x + 12
        self.pv_y = d.panel_y + 150
        frame = pygame.Rect(self.pv_x - 6, self.pv_y - 6, self.pv_cell * 4 + 12, self.pv_cell * 4 + 12)
        pygame.draw.rect(self.bg, (15, 18, 40), frame)
        pygame.draw.rect(self.bg, (55, 65, 110), frame, 1)

    # ---------- Cell sprites (solid + ghost outline) ----------
    def _make_cells(self):
        c = self.dims.cell
        self.cell_surf: Dict[str, pygame.Surface] = {}
        self.ghost_surf: Dict[str, pygame.Surface] = {}
        for kind, col in COLORS.items():
            s = pygame.Surface((c - 2, c - 2))
            s.fill(col)
            self.cell_surf[kind] = s
            g = pygame.Surface((c - 8, c - 8), pygame.SRCALPHA)
            pygame.draw.rect(g, col, (0, 0, c - 8, c - 8), 2)
            self.ghost_surf[kind] = g
        self.locked_surf = pygame.Surface((c - 2, c - 2))
        self.locked_surf.fill(LOCKED)

    # ---------- Board surface cache ----------
    def rebuild_board_surface(self, board):
        self.board_surface.fill((0, 0, 0, 0))
        c = self.dims.cell
        for y, row in enumerate(board):
            for x, cell in enumerate(row):
                if cell is Cell.FILLED:
                    self.board_surface.blit(self.locked_surf, (x * c + 1, y * c + 1))
        self._board_key = board

    def _cell_pos(self, bx: int, by: int, inset: int) -> Tuple[int, int]:
        return (self.dims.board_x + bx * self.dims.cell + inset,
                self.dims.board_y + by * self.dims.cell + inset)

    # ---------- Full frame ----------
    def draw(self, screen: pygame.Surface, snap: Snapshot):
        if snap.board != self._board_key:
            self.rebuild_board_surface(snap.board)
        screen.blit(self.bg, (0, 0))
        screen.blit(self.board_surface, (self.dims.board_x, self.dims.board_y))
        if not snap.game_over:
            for x, y in snap.ghost:
                if y >= 0:
                    screen.blit(self.ghost_surf[snap.active_kind], self._cell_pos(x, y, 4))
            for x, y in snap.visible_active():
                screen.blit(self.cell_surf[snap.active_kind], self._cell_pos(x, y, 1))
        self.draw_panel_hud(screen, snap)
        if snap.game_over:
            self._banner(screen, "GAME OVER", "Enter / R to restart")
        elif not snap.playing:
            self._banner(screen, "PAUSED", "Any key to play")

    def _banner(self, screen: pygame.Surface, title: str, hint: str):
        d = self.dims
        cx, cy = d.board_x + d.board_w // 2, d.board_y + d.board_h // 2
        shade = pygame.Surface((d.board_w, 90), pygame.SRCALPHA)
        shade.fill((20, 25, 40, 220))
        screen.blit(shade, (d.board_x, cy - 45))
        msg = self.big_font.render(title, True, (255, 220, 220))
        screen.blit(msg, msg.get_rect(center=(cx, cy - 12)))
        sub = self.font.render(hint, True, TEXT)
        screen.blit(sub, sub.get_rect(center=(cx, cy + 22)))

    # ---------- HUD / Panel ----------
    def draw_panel_hud(self, screen: pygame.Surface, snap: Snapshot):
        d = self.dims
        f = self.font
        if snap.score != self.hud.score:
            self.hud.score = snap.score
            self.hud.score_s = f.render(f"Score: {snap.score}", True, TEXT)
        if snap.level != self.hud.level:
            self.hud.level = snap.level
            self.hud.level_s = f.render(f"Level: {snap.level}", True, TEXT)
        if snap.lines != self.hud.lines:
            self.hud.lines = snap.lines
            self.hud.lines_s = f.render(f"Lines: {snap.lines}", True, TEXT)
        if snap.next_kind != self.hud.next_kind:
            self.hud.next_kind = snap.next_kind
            self.hud.preview = self._render_preview(snap.next_kind, snap.next)
        screen.blit(self.title, (d.panel_x + 12, d.panel_y + 12))
        screen.blit(self.hud.score_s, (d.panel_x + 12, d.panel_y + 44))
        screen.blit(self.hud.level_s, (d.panel_x + 12, d.panel_y + 68))
        screen.blit(self.hud.lines_s, (d.panel_x + 12, d.panel_y + 92))
        screen.blit(f.render("Next:", True, TEXT), (d.panel_x + 12, d.panel_y + 126))
        screen.blit(self.hud.preview, (self.pv_x, self.pv_y))
        if not self.hud.controls:
            self.hud.controls = [
                f.render("Controls:", True, TEXT),
                f.render("←/→ A/D J/L  Move", True, DIM_TEXT),
                f.render("↓ S K  Soft drop", True, DIM_TEXT),
                f.render("↑ W I  Rotate", True, DIM_TEXT),
                f.render("Space/Enter  Hard drop", True, DIM_TEXT),
                f.render("P Pause • R Restart", True, DIM_TEXT),
            ]
        y = d.panel_y + 260
        for surf in self.hud.controls:
            screen.blit(surf, (d.panel_x + 12, y)); y += 20

    def _render_preview(self, kind: str, coords) -> pygame.Surface:
        s = pygame.Surface((self.pv_cell * 4, self.pv_cell * 4), pygame.SRCALPHA)
        cells = shape_key(coords)
        w = max(x for x, _ in cells) + 1
        h = max(y for _, y in cells) + 1
        offx, offy = (4 - w) // 2, (4 - h) // 2
        block = pygame.Surface((self.pv_cell - 2, self.pv_cell - 2))
        block.fill(COLORS[kind])
        for x, y in cells:
            s.blit(block, ((x + offx) * self.pv_cell + 1, (y + offy) * self.pv_cell + 1))
        return s
