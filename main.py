import logging
import sys

import pygame

from tetris_clock import GravityClock
from tetris_config import CONFIG
from tetris_engine import Game
from tetris_input import ShiftRepeat, command_for_key
from tetris_layout import compute_dims
from tetris_render import RenderAssets
from tetris_rng import LCGRandom

log = logging.getLogger(__name__)


def recreate_window(dims, flags=pygame.DOUBLEBUF):
    try:
        return pygame.display.set_mode((dims.total_w, dims.total_h), flags, vsync=1)
    except TypeError:
        return pygame.display.set_mode((dims.total_w, dims.total_h), flags)


def main():
    logging.basicConfig(level=CONFIG["LOG_LEVEL"],
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    pygame.init()
    pygame.event.set_allowed([pygame.QUIT, pygame.KEYDOWN, pygame.KEYUP])

    rng = LCGRandom(CONFIG["SEED"])
    game = Game(CONFIG["ROWS"], CONFIG["COLS"], rng=rng)
    log.info("new game %dx%d seed=%d rotation=%s", game.board.rows, game.board.cols,
             rng.seed, CONFIG["ROTATION"])

    dims = compute_dims(game.board.rows, game.board.cols)
    screen = recreate_window(dims)
    pygame.display.set_caption("Tetris")
    font = pygame.font.SysFont(None, 22)
    big_font = pygame.font.SysFont(None, 42)
    render = RenderAssets(dims, font, big_font)
    clock = pygame.time.Clock()

    gravity = GravityClock()
    shift = ShiftRepeat()

    while True:
        dt = clock.tick(60)

        for e in pygame.event.get():
            if e.type == pygame.QUIT:
                pygame.quit(); sys.exit()
            if e.type == pygame.KEYDOWN:
                command = command_for_key(pygame.key.name(e.key), game.game_over)
                if command is None:
                    continue
                game.apply(command)
                shift.press(command)
            if e.type == pygame.KEYUP:
                command = command_for_key(pygame.key.name(e.key))
                if command is not None:
                    shift.release(command)

        if game.active:
            repeat = shift.update(dt)
            if repeat:
                game.apply(repeat)
        else:
            shift.reset()

        gravity.update(dt, game)

        render.draw(screen, game.snapshot())
        pygame.display.flip()


if __name__ == '__main__':
    main()
