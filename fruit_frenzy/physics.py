"""Per-frame fruit motion and catch/miss classification."""

from __future__ import annotations

from dataclasses import dataclass, field

from .config import (
    CATCH_BAND_ABOVE,
    CATCH_BAND_BELOW,
    CATCHER_BASELINE_OFFSET,
    HIT_RADIUS,
    MISS_MARGIN,
)
from .entities import FallingFruit


@dataclass
class StepOutcome:
    caught: list[FallingFruit] = field(default_factory=list)
    missed: list[FallingFruit] = field(default_factory=list)
    out_of_lives: bool = False


def catcher_baseline(height: float) -> float:
    return height - CATCHER_BASELINE_OFFSET


def is_caught(fruit: FallingFruit, catcher_x: float, width: float, height: float) -> bool:
    """True if the fruit sits in the band above the basket and close enough horizontally."""
    basket_y = catcher_baseline(height)
    if not (basket_y - CATCH_BAND_ABOVE < fruit.y < basket_y + CATCH_BAND_BELOW):
        return False
    return abs(fruit.x * width - catcher_x * width) < HIT_RADIUS


def is_missed(fruit: FallingFruit, height: float) -> bool:
    return fruit.y > height + MISS_MARGIN


def step(
    fruits: list[FallingFruit],
    catcher_x: float,
    width: float,
    height: float,
    lives: int,
) -> StepOutcome:
    """Advance every fruit one frame and resolve catches and misses.

    Resolved fruits are removed from ``fruits`` in place. Once the misses
    this frame use up ``lives`` the step stops; fruits after that point are
    neither moved nor evaluated.
    """
    outcome = StepOutcome()
    survivors: list[FallingFruit] = []
    for i, fruit in enumerate(fruits):
        fruit.y += fruit.speed

        if is_caught(fruit, catcher_x, width, height):
            fruit.resolve()
            outcome.caught.append(fruit)
            continue

        if is_missed(fruit, height):
            fruit.resolve()
            outcome.missed.append(fruit)
            if lives - len(outcome.missed) <= 0:
                outcome.out_of_lives = True
                survivors.extend(fruits[i + 1 :])
                break
            continue

        survivors.append(fruit)

    fruits[:] = survivors
    return outcome
