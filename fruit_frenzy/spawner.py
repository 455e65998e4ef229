"""Timing-driven fruit creation."""

from __future__ import annotations

import logging
import random

from .config import BASE_SPEED, CATCHER_MAX_X, CATCHER_MIN_X, SPAWN_Y, SPEED_JITTER
from .difficulty import spawn_interval
from .entities import FRUIT_TYPES, FallingFruit

logger = logging.getLogger(__name__)


class Spawner:
    """Decides when a new fruit drops and what it looks like.

    ``rng`` defaults to the ``random`` module so ``random.seed`` keeps tests
    reproducible; pass a ``random.Random`` to isolate a session.
    """

    def __init__(self, rng: random.Random | None = None) -> None:
        self.rng = rng if rng is not None else random

    def due(self, now_ms: float, last_spawn_ms: float, multiplier: float) -> bool:
        return now_ms - last_spawn_ms > spawn_interval(multiplier)

    def create(self, multiplier: float) -> FallingFruit:
        kind = self.rng.choice(FRUIT_TYPES)
        x = self.rng.uniform(CATCHER_MIN_X, CATCHER_MAX_X)
        # Speed is fixed at spawn; later difficulty changes leave it alone
        speed = kind.base_speed * BASE_SPEED * multiplier + self.rng.random() * SPEED_JITTER
        fruit = FallingFruit(x=x, y=SPAWN_Y, kind=kind, points=kind.points, speed=speed)
        logger.debug("Spawned %s #%d at x=%.2f speed=%.2f", kind.glyph, fruit.id, x, speed)
        return fruit

    def maybe_spawn(self, now_ms: float, last_spawn_ms: float, multiplier: float) -> FallingFruit | None:
        """Return at most one new fruit if the spawn interval has elapsed."""
        if not self.due(now_ms, last_spawn_ms, multiplier):
            return None
        return self.create(multiplier)
