"""Draws a session snapshot. Never reads or mutates the session itself."""

from __future__ import annotations

import pygame

from .config import (
    ASSET_MANIFEST,
    COL_BG_BOTTOM,
    COL_BG_TOP,
    OVERLAY_SHADE,
    SCORE_INNER,
    SCORE_MIDDLE,
    SCORE_OUTER,
    TEXT_COLOR,
    TEXT_DIM,
)
from .session import Snapshot
from .state import GameState
from .utils import gradient_surface

_SCALE_CACHE_LIMIT = 128


class Renderer:
    def __init__(self, sprites: dict[str, pygame.Surface]) -> None:
        missing = sorted(set(ASSET_MANIFEST) - set(sprites))
        if missing:
            raise KeyError(f"renderer needs sprites: {', '.join(missing)}")
        if pygame.display.get_surface() is not None:
            sprites = {name: s.convert_alpha() for name, s in sprites.items()}
        self.sprites = sprites
        self.font_big = pygame.font.SysFont(None, 64)
        self.font_small = pygame.font.SysFont(None, 28)
        self._bg: pygame.Surface | None = None
        self._scaled: dict[tuple[str, int, int, bool], pygame.Surface] = {}

    def _background(self, w: int, h: int) -> pygame.Surface:
        if self._bg is None or self._bg.get_size() != (w, h):
            self._bg = gradient_surface(w, h, COL_BG_TOP, COL_BG_BOTTOM)
        return self._bg

    def _sprite(self, name: str, w: int, h: int, flip: bool = False) -> pygame.Surface:
        key = (name, w, h, flip)
        surf = self._scaled.get(key)
        if surf is None:
            if len(self._scaled) >= _SCALE_CACHE_LIMIT:
                self._scaled.clear()
            # Nearest-neighbour keeps the pixel-art look
            surf = pygame.transform.scale(self.sprites[name], (w, h))
            if flip:
                surf = pygame.transform.flip(surf, False, True)
            self._scaled[key] = surf
        return surf

    def _draw_pillar_part(self, surf: pygame.Surface, rect: pygame.Rect, flip: bool) -> None:
        if rect.width <= 0 or rect.height <= 0:
            return
        surf.blit(self._sprite("pillar", rect.width, rect.height, flip), rect.topleft)

    def draw_pillars(self, surf: pygame.Surface, snap: Snapshot) -> None:
        w = int(snap.pillar_width)
        half = snap.gap_height / 2
        for p in snap.pillars:
            gap_top = int(p.gap_center - half)
            gap_bottom = int(p.gap_center + half)
            top = pygame.Rect(int(p.x), 0, w, gap_top)
            bottom = pygame.Rect(int(p.x), gap_bottom, w, snap.field_height - gap_bottom)
            self._draw_pillar_part(surf, top, flip=False)
            self._draw_pillar_part(surf, bottom, flip=True)

    def draw_dragon(self, surf: pygame.Surface, snap: Snapshot) -> None:
        d = snap.dragon
        name = "dragon_up" if d.frame == 1 else "dragon_down"
        surf.blit(self._sprite(name, int(d.width), int(d.height)), (int(d.x), int(d.y)))

    def _lava_text(self, surf: pygame.Surface, text: str, center_x: int, top: int) -> None:
        # Three stacked layers, each nudged up by 2px
        for i, color in enumerate((SCORE_OUTER, SCORE_MIDDLE, SCORE_INNER)):
            img = self.font_big.render(text, True, color)
            surf.blit(img, img.get_rect(midtop=(center_x, top - 2 * i)))

    def _shade(self, surf: pygame.Surface) -> None:
        veil = pygame.Surface(surf.get_size(), pygame.SRCALPHA)
        veil.fill(OVERLAY_SHADE)
        surf.blit(veil, (0, 0))

    def _centered(self, surf: pygame.Surface, font: pygame.font.Font, text: str, color, dy: int) -> None:
        w, h = surf.get_size()
        img = font.render(text, True, color)
        surf.blit(img, img.get_rect(center=(w // 2, h // 2 + dy)))

    def draw_ui(self, surf: pygame.Surface, snap: Snapshot, paused: bool = False) -> None:
        cx = surf.get_width() // 2
        if snap.state is GameState.START:
            self._shade(surf)
            self._centered(surf, self.font_big, "Dragon Flight", TEXT_COLOR, -40)
            self._centered(surf, self.font_small, "Press Enter to begin • Space to flap", TEXT_DIM, 20)
            return

        self._lava_text(surf, f"Score: {snap.score}", cx, 24)

        if snap.state is GameState.GAME_OVER:
            self._shade(surf)
            self._centered(surf, self.font_big, "Game Over", TEXT_COLOR, -60)
            self._lava_text(surf, f"Final Score: {snap.score}", cx, surf.get_height() // 2 - 20)
            self._centered(surf, self.font_small, f"Best: {snap.best}", TEXT_DIM, 50)
            self._centered(surf, self.font_small, "Press Enter or R to play again", TEXT_DIM, 84)
        elif paused:
            self._shade(surf)
            self._centered(surf, self.font_big, "Paused", TEXT_COLOR, 0)

    def draw(self, surf: pygame.Surface, snap: Snapshot, paused: bool = False) -> None:
        surf.blit(self._background(*surf.get_size()), (0, 0))
        if snap.state is not GameState.START:
            self.draw_pillars(surf, snap)
            self.draw_dragon(surf, snap)
        self.draw_ui(surf, snap, paused)
