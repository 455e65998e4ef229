"""Difficulty curve: score in, speed/spawn-rate multiplier out."""

from __future__ import annotations

from .config import DIFFICULTY_SCORE_STEP, MIN_SPAWN_INTERVAL_MS, SPAWN_INTERVAL_MS


def difficulty(score: int) -> float:
    """Multiplier starting at 1.0 and growing linearly with score."""
    return 1.0 + score / DIFFICULTY_SCORE_STEP


def spawn_interval(multiplier: float) -> float:
    """Milliseconds between spawns, floored so high difficulty cannot flood the screen."""
    return max(MIN_SPAWN_INTERVAL_MS, SPAWN_INTERVAL_MS / multiplier)
