"""Gravity timer driving Game.tick"""


class GravityClock:
    """Calls ``game.tick()`` at most once per ``game.speed`` ms of live play.

    Time spent paused or after game over does not count.
    """

    def __init__(self):
        self.elapsed_ms = 0.0

    def reset(self):
        self.elapsed_ms = 0.0

    def update(self, dt_ms: float, game) -> bool:
        if not game.playing or game.game_over:
            self.elapsed_ms = 0.0
            return False
        self.elapsed_ms += dt_ms
        if self.elapsed_ms < game.speed:
            return False
        self.elapsed_ms = 0.0
        game.tick()
        return True
