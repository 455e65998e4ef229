"""Numeric, colour and surface helper functions used across the game."""

from __future__ import annotations

import numpy as np
import pygame


def clamp(value: float, lo: float, hi: float) -> float:
    """Clamp a numeric value into the inclusive range [lo, hi]."""
    return max(lo, min(hi, value))


def scale_color(color: tuple[int, int, int], factor: float) -> tuple[int, int, int]:
    """Scale an RGB color by factor, clamped to [0,255]."""
    r, g, b = color
    return (
        int(clamp(r * factor, 0, 255)),
        int(clamp(g * factor, 0, 255)),
        int(clamp(b * factor, 0, 255)),
    )


def vertical_gradient(
    w: int,
    h: int,
    top: tuple[int, int, int],
    bottom: tuple[int, int, int],
) -> np.ndarray:
    """Build a (w, h, 3) uint8 array blending top into bottom row by row.

    The axis order matches pygame.surfarray (x first).
    """
    t = np.linspace(0.0, 1.0, h, dtype=np.float32)[:, None]
    top_arr = np.asarray(top, dtype=np.float32)[None, :]
    bottom_arr = np.asarray(bottom, dtype=np.float32)[None, :]
    rows = top_arr * (1.0 - t) + bottom_arr * t  # (h, 3)
    c = np.clip(rows, 0, 255).astype(np.uint8)
    return np.broadcast_to(c[None, :, :], (w, h, 3)).copy()


def gradient_surface(
    w: int,
    h: int,
    top: tuple[int, int, int],
    bottom: tuple[int, int, int],
) -> pygame.Surface:
    """Precompute a vertical gradient as a surface for fast blitting."""
    return pygame.surfarray.make_surface(vertical_gradient(w, h, top, bottom))


def wrap_text(text: str, font: pygame.font.Font, max_width: int) -> list[str]:
    """Greedy word wrap so every line renders no wider than max_width."""
    lines: list[str] = []
    current = ""
    for word in text.split():
        candidate = f"{current} {word}" if current else word
        if current and font.size(candidate)[0] > max_width:
            lines.append(current)
            current = word
        else:
            current = candidate
    if current:
        lines.append(current)
    return lines
