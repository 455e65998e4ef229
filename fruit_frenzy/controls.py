"""Pointer, touch and keyboard input mapped onto the catcher position."""

from __future__ import annotations

import pygame

from .config import CATCHER_KEY_STEP
from .session import Session

LEFT_KEYS = (pygame.K_LEFT, pygame.K_a)
RIGHT_KEYS = (pygame.K_RIGHT, pygame.K_d)


class InputAdapter:
    """Writes the latest horizontal input into the session's catcher.

    Every method returns the new normalized x, or None when the input was
    ignored because the session is not playing. Last write wins; nothing is
    queued.
    """

    def __init__(self, session: Session) -> None:
        self.session = session

    def pointer(self, client_x: float, viewport_left: float, viewport_width: float) -> float | None:
        if not self.session.playing or viewport_width <= 0:
            return None
        return self.session.catcher.move_to((client_x - viewport_left) / viewport_width)

    def touch(self, norm_x: float) -> float | None:
        """Finger events already arrive normalized to the window width."""
        if not self.session.playing:
            return None
        return self.session.catcher.move_to(norm_x)

    def step(self, direction: int) -> float | None:
        """Move one key step left (direction < 0) or right (direction > 0)."""
        if not self.session.playing or direction == 0:
            return None
        dx = CATCHER_KEY_STEP if direction > 0 else -CATCHER_KEY_STEP
        return self.session.catcher.nudge(dx)

    def handle_event(self, event: pygame.event.Event, viewport: pygame.Rect) -> float | None:
        if event.type == pygame.MOUSEMOTION:
            return self.pointer(event.pos[0], viewport.left, viewport.width)
        if event.type in (pygame.FINGERMOTION, pygame.FINGERDOWN):
            return self.touch(event.x)
        if event.type == pygame.KEYDOWN:
            if event.key in LEFT_KEYS:
                return self.step(-1)
            if event.key in RIGHT_KEYS:
                return self.step(1)
        return None
