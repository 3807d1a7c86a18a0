from tetris_clock import GravityClock
from tetris_engine import Game
from tetris_rng import SequenceRandom


class _FakeGame:
    def __init__(self, speed: int = 300) -> None:
        self.speed = speed
        self.playing = True
        self.game_over = False
        self.ticks = 0

    def tick(self) -> bool:
        self.ticks += 1
        return True


def test_ticks_once_per_speed_interval():
    game = _FakeGame(300)
    clock = GravityClock()
    assert not clock.update(100, game)
    assert not clock.update(100, game)
    assert clock.update(100, game)
    assert game.ticks == 1
    assert not clock.update(299, game)
    assert clock.update(1, game)
    assert game.ticks == 2


def test_at_most_one_step_per_update():
    game = _FakeGame(50)
    clock = GravityClock()
    assert clock.update(1000, game)
    assert game.ticks == 1
    assert clock.elapsed_ms == 0.0


def test_paused_time_does_not_count():
    game = _FakeGame(300)
    clock = GravityClock()
    clock.update(250, game)
    game.playing = False
    assert not clock.update(1000, game)
    game.playing = True
    assert not clock.update(100, game)
    assert game.ticks == 0


def test_no_ticks_after_game_over():
    game = _FakeGame(10)
    game.game_over = True
    clock = GravityClock()
    for _ in range(5):
        assert not clock.update(100, game)
    assert game.ticks == 0


def test_follows_engine_speed():
    game = Game(20, 10, rng=SequenceRandom(["I"]))
    game.pause_toggle()
    clock = GravityClock()
    start = game.current
    clock.update(game.speed - 1, game)
    assert game.current == start
    clock.update(1, game)
    assert game.current == start.moved(0, 1)
