import os
import threading

import pygame

os.environ.setdefault("SDL_AUDIODRIVER", "dummy")
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")

from fruit_frenzy.commentary import BASIC_FALLBACK, UNAVAILABLE_FALLBACK, CommentaryService
from fruit_frenzy.config import KEY_REPEAT_DELAY_MS, KEY_REPEAT_INTERVAL_MS
from fruit_frenzy.entities import FRUIT_TYPES, FallingFruit, GameStatus, ScoreSummary
from fruit_frenzy.game import Game

APPLE = FRUIT_TYPES[0]


def key(k: int) -> pygame.event.Event:
    return pygame.event.Event(pygame.KEYDOWN, key=k)


def lose_all_lives(g: Game) -> None:
    """Drop three uncatchable fruits right at the miss line and run one frame."""
    for _ in range(3):
        g.session.state.fruits.append(FallingFruit(0.9, 615.0, APPLE, APPLE.points, 10.0))
    g.update(0.0)


def wait_for_commentary(g: Game) -> None:
    g.commentator.pending.future.result(timeout=5)
    g.update(0.0)


def test_game_init() -> None:
    """Test Game initialization: title screen, defaults, nothing scheduled."""
    g = Game(commentary=CommentaryService(None))
    assert g.session.status is GameStatus.IDLE
    assert g.score == 0
    assert g.lives == 3
    assert not g.scheduler.active
    assert g.bg_gradient.get_size() == g.screen.get_size()
    g.draw()


def test_start_schedules_ticks() -> None:
    g = Game(commentary=CommentaryService(None))
    g.handle_input(key(pygame.K_SPACE))
    assert g.session.playing
    assert g.scheduler.active
    g.update(2000.0)
    assert g.scheduler.active
    assert len(g.session.state.fruits) == 1
    g.draw()


def test_movement_only_while_playing() -> None:
    g = Game(commentary=CommentaryService(None))
    g.handle_input(key(pygame.K_LEFT))
    assert g.session.catcher.x == 0.5
    g.start()
    g.handle_input(key(pygame.K_LEFT))
    assert abs(g.session.catcher.x - 0.45) < 1e-9
    g.handle_input(pygame.event.Event(pygame.MOUSEMOTION, pos=(g.screen.get_width(), 0)))
    assert g.session.catcher.x == 0.95


def test_catch_updates_hud() -> None:
    g = Game(commentary=CommentaryService(None))
    g.start()
    g.session.state.fruits.append(FallingFruit(0.5, 515.0, APPLE, APPLE.points, 10.0))
    g.update(0.0)
    assert g.score == 10
    assert g.lives == 3


def test_game_over_cancels_ticks_and_fetches_commentary() -> None:
    g = Game(commentary=CommentaryService(None))
    g.start()
    lose_all_lives(g)
    assert g.session.status is GameStatus.GAME_OVER
    assert not g.scheduler.active
    assert g.lives == 0
    assert g.session.summary == ScoreSummary(0, 0, 3)
    wait_for_commentary(g)
    assert g.commentary_text == BASIC_FALLBACK
    g.draw()


def test_service_failure_shows_unavailable_text(fake_client) -> None:
    g = Game(commentary=CommentaryService(fake_client(error=OSError("unreachable"))))
    g.start()
    g.session.state.fruits.append(FallingFruit(0.5, 515.0, APPLE, APPLE.points, 10.0))
    g.update(0.0)
    lose_all_lives(g)
    wait_for_commentary(g)
    assert g.commentary_text == UNAVAILABLE_FALLBACK
    assert g.session.summary == ScoreSummary(10, 1, 3)
    assert g.session.status is GameStatus.GAME_OVER


class GatedService(CommentaryService):
    def __init__(self) -> None:
        super().__init__(None)
        self.release = threading.Event()

    def generate(self, score: int, caught: int, missed: int) -> str:
        self.release.wait(timeout=5)
        return "stale"


def test_restart_discards_late_commentary() -> None:
    service = GatedService()
    g = Game(commentary=service)
    g.start()
    lose_all_lives(g)
    late = g.commentator.pending
    g.handle_input(key(pygame.K_SPACE))  # restart before the reply lands
    assert g.session.playing
    assert g.commentator.pending is None
    service.release.set()
    if not late.future.cancelled():
        late.future.result(timeout=5)
    g.update(0.0)
    assert g.commentary_text is None
    assert g.score == 0 and g.lives == 3


def test_click_restarts_only_when_not_playing() -> None:
    g = Game(commentary=CommentaryService(None))
    g.handle_input(pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=1, pos=(10, 10)))
    assert g.session.playing
    first_id = g.session.session_id
    g.handle_input(pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=1, pos=(10, 10)))
    assert g.session.session_id == first_id


def test_stop_returns_to_title() -> None:
    g = Game(commentary=CommentaryService(None))
    g.start()
    g.update(2000.0)
    g.stop()
    assert g.session.status is GameStatus.IDLE
    assert not g.scheduler.active
    assert g.session.state.fruits == []
    g.draw()


def test_resize_follows_window() -> None:
    g = Game(commentary=CommentaryService(None))
    g.handle_input(pygame.event.Event(pygame.VIDEORESIZE, w=640, h=480, size=(640, 480)))
    assert (g.session.width, g.session.height) == (640, 480)
    assert g.bg_gradient.get_size() == (640, 480)


def test_held_arrow_keys_repeat() -> None:
    Game(commentary=CommentaryService(None))
    assert pygame.key.get_repeat() == (KEY_REPEAT_DELAY_MS, KEY_REPEAT_INTERVAL_MS)
    assert pygame.key.get_repeat() != (0, 0)
