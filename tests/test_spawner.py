import random

from fruit_frenzy.config import BASE_SPEED, CATCHER_MAX_X, CATCHER_MIN_X, SPAWN_Y, SPEED_JITTER
from fruit_frenzy.entities import FRUIT_TYPES
from fruit_frenzy.spawner import Spawner


def test_spawn_waits_for_interval() -> None:
    sp = Spawner(random.Random(1))
    assert sp.maybe_spawn(1000.0, 0.0, 1.0) is None  # strictly greater than the interval
    assert sp.maybe_spawn(1000.5, 0.0, 1.0) is not None


def test_spawn_interval_shrinks_with_difficulty() -> None:
    sp = Spawner(random.Random(2))
    assert sp.maybe_spawn(499.0, 0.0, 2.0) is None
    assert sp.maybe_spawn(501.0, 0.0, 2.0) is not None
    # floor at 400ms no matter how hard it gets
    assert sp.maybe_spawn(399.0, 0.0, 10.0) is None
    assert sp.maybe_spawn(401.0, 0.0, 10.0) is not None


def test_spawned_fruit_shape() -> None:
    sp = Spawner(random.Random(3))
    for _ in range(200):
        fruit = sp.create(1.0)
        assert CATCHER_MIN_X <= fruit.x <= CATCHER_MAX_X
        assert fruit.y == SPAWN_Y
        assert fruit.kind in FRUIT_TYPES
        assert fruit.points == fruit.kind.points
        base = fruit.kind.base_speed * BASE_SPEED
        assert base <= fruit.speed < base + SPEED_JITTER
        assert not fruit.resolved


def test_doubled_difficulty_doubles_base_speed() -> None:
    sp = Spawner(random.Random(4))
    for _ in range(100):
        fruit = sp.create(2.0)
        base = fruit.kind.base_speed * BASE_SPEED * 2.0
        assert base <= fruit.speed < base + SPEED_JITTER


def test_types_chosen_uniformly_enough() -> None:
    random.seed(5)
    sp = Spawner()
    seen = {sp.create(1.0).kind.glyph for _ in range(500)}
    assert seen == {t.glyph for t in FRUIT_TYPES}
