"""Background gradient helpers used by the renderer."""

from __future__ import annotations

import numpy as np
import pygame


def gradient_array(w: int, h: int, top: tuple[int, int, int], bottom: tuple[int, int, int]) -> np.ndarray:
    """Vertical top-to-bottom gradient as a (w, h, 3) uint8 array for surfarray."""
    t = np.linspace(0.0, 1.0, max(1, h), dtype=np.float32)[:, None]
    rows = np.asarray(top, dtype=np.float32) * (1.0 - t) + np.asarray(bottom, dtype=np.float32) * t
    column = np.clip(rows, 0, 255).astype(np.uint8)
    return np.broadcast_to(column[None, :, :], (max(1, w), max(1, h), 3)).copy()


def gradient_surface(w: int, h: int, top: tuple[int, int, int], bottom: tuple[int, int, int]) -> pygame.Surface:
    return pygame.surfarray.make_surface(gradient_array(w, h, top, bottom))
