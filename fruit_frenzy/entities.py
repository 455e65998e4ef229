"""Game entities and rendering helpers.

Contains the fruit type table, falling fruits, the player-controlled catcher,
the per-session score record, and the glyph drawing used by the host.
"""

from __future__ import annotations

import itertools
import math
import threading
from dataclasses import dataclass, field
from enum import Enum

import pygame

from .config import (
    BASKET_WEAVE,
    CATCHER_MAX_X,
    CATCHER_MIN_X,
    CATCHER_START_X,
    FRUIT_RADIUS,
    FRUIT_TABLE,
    HEART_COLOR,
    INITIAL_LIVES,
    LEAF_COLOR,
)
from .utils import clamp, scale_color

_fruit_ids = itertools.count(1)


class GameStatus(Enum):
    IDLE = "IDLE"
    PLAYING = "PLAYING"
    GAME_OVER = "GAME_OVER"


@dataclass(frozen=True)
class FruitType:
    glyph: str
    points: int
    base_speed: float
    color: tuple[int, int, int]


FRUIT_TYPES: tuple[FruitType, ...] = tuple(FruitType(*row) for row in FRUIT_TABLE)


@dataclass(eq=False)
class FallingFruit:
    """A single falling object. x is normalized, y is in pixels."""

    x: float
    y: float
    kind: FruitType
    points: int
    speed: float
    id: int = field(default_factory=lambda: next(_fruit_ids))
    resolved: bool = False

    def resolve(self) -> None:
        assert not self.resolved, f"fruit {self.id} resolved twice"
        self.resolved = True


class Catcher:
    """Horizontal position of the basket, normalized and clamped.

    Input may arrive from a different thread than the tick, so reads and
    writes go through a lock.
    """

    def __init__(self, x: float = CATCHER_START_X) -> None:
        self._lock = threading.Lock()
        self._x = clamp(x, CATCHER_MIN_X, CATCHER_MAX_X)

    @property
    def x(self) -> float:
        with self._lock:
            return self._x

    def move_to(self, x: float) -> float:
        with self._lock:
            self._x = clamp(x, CATCHER_MIN_X, CATCHER_MAX_X)
            return self._x

    def nudge(self, dx: float) -> float:
        with self._lock:
            self._x = clamp(self._x + dx, CATCHER_MIN_X, CATCHER_MAX_X)
            return self._x

    def recenter(self) -> None:
        self.move_to(CATCHER_START_X)


@dataclass
class SessionState:
    score: int = 0
    lives: int = INITIAL_LIVES
    caught: int = 0
    missed: int = 0
    last_spawn_ms: float = 0.0
    fruits: list[FallingFruit] = field(default_factory=list)
    status: GameStatus = GameStatus.IDLE


@dataclass(frozen=True)
class ScoreSummary:
    score: int
    caught: int
    missed: int


@dataclass(frozen=True)
class Sprite:
    """One draw instruction: a glyph centred at pixel coordinates."""

    kind: str  # "fruit" or "catcher"
    glyph: str
    x: float
    y: float
    color: tuple[int, int, int]


def draw_fruit(surf: pygame.Surface, sprite: Sprite) -> None:
    cx, cy = int(sprite.x), int(sprite.y)
    r = FRUIT_RADIUS
    if sprite.glyph == "banana":
        rect = pygame.Rect(cx - r, cy - r // 2, r * 2, r)
        pygame.draw.ellipse(surf, sprite.color, rect)
        pygame.draw.ellipse(surf, scale_color(sprite.color, 0.7), rect, 2)
        return
    if sprite.glyph == "grapes":
        # Small cluster of berries
        for ox, oy in ((-6, -6), (6, -6), (0, 0), (-6, 6), (6, 6), (0, 11)):
            pygame.draw.circle(surf, sprite.color, (cx + ox, cy + oy), 6)
        pygame.draw.line(surf, LEAF_COLOR, (cx, cy - 12), (cx + 3, cy - 18), 2)
        return
    if sprite.glyph == "watermelon":
        pygame.draw.circle(surf, sprite.color, (cx, cy), r + 2)
        pygame.draw.circle(surf, scale_color(sprite.color, 0.6), (cx, cy), r + 2, 3)
        return
    pygame.draw.circle(surf, sprite.color, (cx, cy), r)
    pygame.draw.circle(surf, scale_color(sprite.color, 1.3), (cx - r // 3, cy - r // 3), r // 4)
    pygame.draw.ellipse(surf, LEAF_COLOR, pygame.Rect(cx, cy - r - 5, 10, 6))


def draw_catcher(surf: pygame.Surface, sprite: Sprite, wobble: float = 0.0) -> None:
    """Draw the basket with its bottom edge centred on (sprite.x, sprite.y)."""
    w, h = 84, 44
    s = pygame.Surface((w, h + 12), pygame.SRCALPHA)
    body = [(0, 12), (w, 12), (w - 12, h + 11), (12, h + 11)]
    pygame.draw.polygon(s, sprite.color, body)
    for i in range(1, 4):
        y = 12 + i * (h // 4)
        pygame.draw.line(s, BASKET_WEAVE, (i * 3, y), (w - i * 3, y), 2)
    pygame.draw.arc(s, BASKET_WEAVE, pygame.Rect(14, 0, w - 28, 28), 0, math.pi, 3)
    rot = pygame.transform.rotate(s, -math.degrees(wobble))
    r = rot.get_rect(midbottom=(int(sprite.x), int(sprite.y)))
    surf.blit(rot, r.topleft)


def draw_heart(surf: pygame.Surface, x: int, y: int, size: int = 12) -> None:
    pygame.draw.circle(surf, HEART_COLOR, (x - size // 2, y), size // 2 + 1)
    pygame.draw.circle(surf, HEART_COLOR, (x + size // 2, y), size // 2 + 1)
    pygame.draw.polygon(surf, HEART_COLOR, [(x - size, y + 1), (x + size, y + 1), (x, y + size + 2)])

