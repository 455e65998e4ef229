"""Session state machine and the per-frame simulation tick.

The session knows nothing about windows or frame timing: the host calls
``tick(now_ms)`` roughly once per display frame while the status is
PLAYING and stops calling it afterwards.
"""

from __future__ import annotations

import itertools
import logging
import random
from dataclasses import dataclass, field
from typing import Callable

from .config import (
    BASKET_COLOR,
    CATCHER_DRAW_OFFSET,
    INITIAL_LIVES,
    WINDOW_HEIGHT,
    WINDOW_WIDTH,
)
from .difficulty import difficulty
from .entities import Catcher, FallingFruit, GameStatus, ScoreSummary, SessionState, Sprite
from .physics import step
from .spawner import Spawner

logger = logging.getLogger(__name__)

_session_ids = itertools.count(1)


@dataclass
class TickResult:
    spawned: FallingFruit | None = None
    caught: list[FallingFruit] = field(default_factory=list)
    missed: list[FallingFruit] = field(default_factory=list)
    summary: ScoreSummary | None = None


class Session:
    """Owns SessionState and the catcher; the only writer of score and lives."""

    def __init__(
        self,
        width: int = WINDOW_WIDTH,
        height: int = WINDOW_HEIGHT,
        rng: random.Random | None = None,
        on_score: Callable[[int], None] | None = None,
        on_lives: Callable[[int], None] | None = None,
        on_game_over: Callable[[ScoreSummary], None] | None = None,
    ) -> None:
        self.width = width
        self.height = height
        self.spawner = Spawner(rng)
        self.catcher = Catcher()
        self.on_score = on_score
        self.on_lives = on_lives
        self.on_game_over = on_game_over
        self.state = SessionState()
        self.summary: ScoreSummary | None = None
        self.session_id = 0
        self._points_caught = 0

    @property
    def status(self) -> GameStatus:
        return self.state.status

    @property
    def playing(self) -> bool:
        return self.state.status is GameStatus.PLAYING

    def _reset(self, status: GameStatus) -> None:
        self.state = SessionState(status=status)
        self.summary = None
        self._points_caught = 0
        self.catcher.recenter()
        if self.on_score:
            self.on_score(0)
        if self.on_lives:
            self.on_lives(INITIAL_LIVES)

    def start(self) -> bool:
        """Enter PLAYING from IDLE or GAME_OVER with a fresh state.

        Returns False (and changes nothing) when already playing.
        """
        if self.playing:
            return False
        self._reset(GameStatus.PLAYING)
        self.session_id = next(_session_ids)
        logger.info("Session %d started", self.session_id)
        return True

    def restart(self) -> bool:
        if self.status is not GameStatus.GAME_OVER:
            return False
        return self.start()

    def stop(self) -> None:
        """External teardown: back to IDLE with defaults held."""
        if self.status is not GameStatus.IDLE:
            logger.info("Session %d stopped", self.session_id)
        self._reset(GameStatus.IDLE)

    def resize(self, width: int, height: int) -> None:
        self.width = width
        self.height = height

    def tick(self, now_ms: float) -> TickResult:
        """Run one simulation step: spawn, move, resolve, check termination."""
        result = TickResult()
        if not self.playing:
            return result
        state = self.state
        catcher_x = self.catcher.x
        multiplier = difficulty(state.score)

        fruit = self.spawner.maybe_spawn(now_ms, state.last_spawn_ms, multiplier)
        if fruit is not None:
            state.fruits.append(fruit)
            state.last_spawn_ms = now_ms
            result.spawned = fruit

        outcome = step(state.fruits, catcher_x, self.width, self.height, state.lives)

        for caught in outcome.caught:
            state.score += caught.points
            state.caught += 1
            self._points_caught += caught.points
            result.caught.append(caught)
            if self.on_score:
                self.on_score(state.score)

        for missed in outcome.missed:
            state.lives = max(0, state.lives - 1)
            state.missed += 1
            result.missed.append(missed)
            if self.on_lives:
                self.on_lives(state.lives)

        assert state.score == self._points_caught
        assert state.lives == max(0, INITIAL_LIVES - state.missed)

        if outcome.out_of_lives:
            result.summary = self._end()
        return result

    def _end(self) -> ScoreSummary:
        state = self.state
        state.status = GameStatus.GAME_OVER
        self.summary = ScoreSummary(score=state.score, caught=state.caught, missed=state.missed)
        logger.info(
            "Session %d over: score=%d caught=%d missed=%d",
            self.session_id,
            state.score,
            state.caught,
            state.missed,
        )
        if self.on_game_over:
            self.on_game_over(self.summary)
        return self.summary

    def scene(self) -> list[Sprite]:
        """Draw instructions for the current frame, fruits first."""
        sprites = [
            Sprite("fruit", f.kind.glyph, f.x * self.width, f.y, f.kind.color)
            for f in self.state.fruits
        ]
        sprites.append(
            Sprite(
                "catcher",
                "basket",
                self.catcher.x * self.width,
                self.height - CATCHER_DRAW_OFFSET,
                BASKET_COLOR,
            )
        )
        return sprites
