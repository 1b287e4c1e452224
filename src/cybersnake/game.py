from __future__ import annotations

import argparse
import random

import pygame

from . import config
from .controls import handle_event
from .engine import GameEngine
from .render import draw_state, make_layout, shutdown
from .state import Phase
from .timer import TickTimer


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(prog="cybersnake", add_help=True)
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed for food placement (default: random).",
    )
    parser.add_argument(
        "--cell-size",
        type=int,
        choices=(10, 20, 30),
        default=config.CELL_SIZE,
        help="Pixel size of one grid cell.",
    )
    args = parser.parse_args(argv)

    engine = GameEngine(rng=random.Random(args.seed))
    layout = make_layout(engine.grid_size, args.cell_size)
    timer = TickTimer()

    pygame.init()
    screen = pygame.display.set_mode((layout.width, layout.height))
    pygame.display.set_caption(config.TITLE)
    clock = pygame.time.Clock()

    running = True
    try:
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif handle_event(engine, event, layout):
                    continue
                elif event.type == pygame.KEYDOWN and event.key == pygame.K_q:
                    running = False

            if engine.is_running:
                timer.start()
            else:
                timer.stop()

            for _ in range(timer.advance(clock.get_time())):
                engine.tick()

            draw_state(screen, engine.snapshot(), layout)
            clock.tick(config.FPS)
    finally:
        timer.stop()
        shutdown()
        pygame.quit()

    if engine.phase is Phase.GAME_OVER:
        print("Game Over! Score:", engine.score)
    else:
        print("Score:", engine.score)
