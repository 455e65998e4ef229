"""Game loop host, overlays and rendering composition for Fruit Frenzy."""

from __future__ import annotations

import logging
import math
import sys

import pygame

from .commentary import Commentator, CommentaryService
from .config import (
    COL_PANEL,
    COL_SHADE,
    COL_SKY_BOTTOM,
    COL_SKY_TOP,
    COL_TEXT,
    COL_TEXT_MUTED,
    FPS,
    HEART_COLOR,
    INITIAL_LIVES,
    KEY_REPEAT_DELAY_MS,
    KEY_REPEAT_INTERVAL_MS,
    WINDOW_HEIGHT,
    WINDOW_WIDTH,
    WOBBLE_AMPLITUDE,
    WOBBLE_PERIOD_MS,
)
from .controls import InputAdapter
from .entities import GameStatus, ScoreSummary, draw_catcher, draw_fruit, draw_heart
from .logging_config import setup_logging
from .scheduler import FrameScheduler
from .session import Session
from .utils import gradient_surface, wrap_text

logger = logging.getLogger(__name__)


class Game:
    """Top-level game controller: owns the window, routes input, drives ticks, draws."""

    def __init__(self, commentary: CommentaryService | None = None) -> None:
        pygame.init()
        self.screen = pygame.display.set_mode((WINDOW_WIDTH, WINDOW_HEIGHT), pygame.RESIZABLE)
        pygame.display.set_caption("Fruit Frenzy")
        # Held arrow keys keep stepping the basket
        pygame.key.set_repeat(KEY_REPEAT_DELAY_MS, KEY_REPEAT_INTERVAL_MS)
        self.clock = pygame.time.Clock()
        self.font_big = pygame.font.SysFont(None, 72)
        self.font_mid = pygame.font.SysFont(None, 40)
        self.font_small = pygame.font.SysFont(None, 26)
        self.bg_gradient = gradient_surface(WINDOW_WIDTH, WINDOW_HEIGHT, COL_SKY_TOP, COL_SKY_BOTTOM)

        self.session = Session(
            WINDOW_WIDTH,
            WINDOW_HEIGHT,
            on_score=self._on_score,
            on_lives=self._on_lives,
            on_game_over=self._on_game_over,
        )
        self.controls = InputAdapter(self.session)
        self.scheduler = FrameScheduler()
        if commentary is None:
            commentary = CommentaryService.from_env()
        self.commentator = Commentator(commentary)

        self.score = 0
        self.lives = INITIAL_LIVES
        self.commentary_text: str | None = None
        self.now_ms = 0.0

    # Host-side mirrors of the session counters, updated as fruits resolve
    def _on_score(self, score: int) -> None:
        self.score = score

    def _on_lives(self, lives: int) -> None:
        self.lives = lives

    def _on_game_over(self, summary: ScoreSummary) -> None:
        self.scheduler.cancel()
        self.commentator.request(summary, self.session.session_id)

    def _frame(self, now_ms: float) -> None:
        self.session.tick(now_ms)
        if self.session.playing:
            self.scheduler.request(self._frame)

    def start(self) -> None:
        """Start from the title screen or restart after game over."""
        if not self.session.start():
            return
        self.commentator.discard()
        self.commentary_text = None
        self.scheduler.cancel()
        self.scheduler.request(self._frame)

    def stop(self) -> None:
        self.scheduler.cancel()
        self.commentator.discard()
        self.commentary_text = None
        self.session.stop()

    def update(self, now_ms: float) -> None:
        self.now_ms = now_ms
        self.scheduler.pump(now_ms)
        if self.session.status is GameStatus.GAME_OVER and self.commentary_text is None:
            self.commentary_text = self.commentator.poll(self.session.session_id)

    def resize(self, width: int, height: int) -> None:
        logger.debug("Viewport resized to %dx%d", width, height)
        self.screen = pygame.display.set_mode((width, height), pygame.RESIZABLE)
        self.bg_gradient = gradient_surface(width, height, COL_SKY_TOP, COL_SKY_BOTTOM)
        self.session.resize(width, height)

    def handle_input(self, event: pygame.event.Event) -> None:
        if event.type == pygame.KEYDOWN:
            if event.key in (pygame.K_SPACE, pygame.K_RETURN):
                self.start()
                return
            if event.key == pygame.K_ESCAPE:
                pygame.event.post(pygame.event.Event(pygame.QUIT))
                return
        elif event.type == pygame.MOUSEBUTTONDOWN:
            if event.button == 1 and not self.session.playing:
                self.start()
                return
        elif event.type == pygame.VIDEORESIZE:
            self.resize(event.w, event.h)
            return
        self.controls.handle_event(event, self.screen.get_rect())

    def draw(self) -> None:
        self.screen.blit(self.bg_gradient, (0, 0))
        wobble = math.sin(self.now_ms / WOBBLE_PERIOD_MS) * WOBBLE_AMPLITUDE
        for sprite in self.session.scene():
            if sprite.kind == "fruit":
                draw_fruit(self.screen, sprite)
            else:
                draw_catcher(self.screen, sprite, wobble)
        self._draw_hud(self.screen)
        if self.session.status is GameStatus.IDLE:
            self._draw_title(self.screen)
        elif self.session.status is GameStatus.GAME_OVER:
            self._draw_game_over(self.screen)
        pygame.display.flip()

    def _draw_hud(self, surf: pygame.Surface) -> None:
        label = self.font_small.render("SCORE", True, COL_TEXT)
        value = self.font_big.render(str(self.score), True, COL_TEXT)
        surf.blit(label, (20, 16))
        surf.blit(value, (20, 36))
        # Never draw a negative number of hearts
        w = surf.get_width()
        for i in range(max(0, self.lives)):
            draw_heart(surf, w - 30 - i * 34, 28)

        help_text = self.font_small.render("Arrow keys or mouse to move  -  Esc to quit", True, COL_TEXT_MUTED)
        surf.blit(help_text, help_text.get_rect(midbottom=(w // 2, surf.get_height() - 6)))

    def _panel(self, surf: pygame.Surface, width: int, height: int) -> pygame.Rect:
        shade = pygame.Surface(surf.get_size(), pygame.SRCALPHA)
        shade.fill((*COL_SHADE, 110))
        surf.blit(shade, (0, 0))
        rect = pygame.Rect(0, 0, width, height)
        rect.center = surf.get_rect().center
        pygame.draw.rect(surf, COL_PANEL, rect, border_radius=24)
        return rect

    def _draw_title(self, surf: pygame.Surface) -> None:
        rect = self._panel(surf, 540, 260)
        title = self.font_big.render("Fruit Frenzy", True, (249, 115, 22))
        sub = self.font_small.render("Catch the falling fruit! Don't let them hit the ground.", True, COL_TEXT_MUTED)
        start = self.font_mid.render("Press Space or Click to start", True, (16, 185, 129))
        surf.blit(title, title.get_rect(center=(rect.centerx, rect.top + 70)))
        surf.blit(sub, sub.get_rect(center=(rect.centerx, rect.top + 130)))
        surf.blit(start, start.get_rect(center=(rect.centerx, rect.top + 195)))

    def _draw_game_over(self, surf: pygame.Surface) -> None:
        summary = self.session.summary
        if summary is None:
            return
        rect = self._panel(surf, 460, 400)
        title = self.font_mid.render("Game Over!", True, HEART_COLOR)
        score = self.font_big.render(str(summary.score), True, COL_TEXT)
        stats = self.font_small.render(f"Caught: {summary.caught}    Missed: {summary.missed}", True, COL_TEXT_MUTED)
        surf.blit(title, title.get_rect(center=(rect.centerx, rect.top + 40)))
        surf.blit(score, score.get_rect(center=(rect.centerx, rect.top + 100)))
        surf.blit(stats, stats.get_rect(center=(rect.centerx, rect.top + 150)))

        heading = self.font_small.render("AI PERFORMANCE REVIEW", True, (129, 140, 248))
        surf.blit(heading, heading.get_rect(center=(rect.centerx, rect.top + 190)))
        if self.commentary_text is None:
            # Three bouncing dots while the request is in flight
            for i in range(3):
                dy = int(math.sin(self.now_ms / 150.0 - i) * 4)
                pygame.draw.circle(surf, (129, 140, 248), (rect.centerx - 16 + i * 16, rect.top + 240 + dy), 4)
        else:
            y = rect.top + 220
            for line in wrap_text(f'"{self.commentary_text}"', self.font_small, rect.width - 40):
                text = self.font_small.render(line, True, (49, 46, 129))
                surf.blit(text, text.get_rect(midtop=(rect.centerx, y)))
                y += 24

        again = self.font_mid.render("Press Space to play again", True, (6, 182, 212))
        surf.blit(again, again.get_rect(center=(rect.centerx, rect.bottom - 35)))

    def run(self) -> None:
        while True:
            self.clock.tick(FPS)
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    logger.info("Quit requested")
                    self.commentator.shutdown()
                    pygame.quit()
                    sys.exit(0)
                self.handle_input(event)

            self.update(float(pygame.time.get_ticks()))
            self.draw()


def main() -> None:
    setup_logging()
    Game().run()
