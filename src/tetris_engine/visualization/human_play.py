from __future__ import annotations

import argparse
import logging
import random
from dataclasses import dataclass
from typing import Dict, Optional

import pygame

from tetris_engine.game import Action, Game
from .input import KeyRepeat
from .renderer import Renderer

logger = logging.getLogger(__name__)


KEY_TO_ACTION: Dict[int, Action] = {
    pygame.K_LEFT: Action.LEFT,
    pygame.K_RIGHT: Action.RIGHT,
    pygame.K_DOWN: Action.DOWN,
    pygame.K_UP: Action.ROTATE_RIGHT,
    pygame.K_z: Action.ROTATE_LEFT,
    pygame.K_LSHIFT: Action.HOLD,
    pygame.K_RSHIFT: Action.HOLD,
    pygame.K_SPACE: Action.PUSH,
    pygame.K_p: Action.PAUSE,
}


@dataclass
class PlayConfig:
    width: int = 10
    height: int = 20
    seed: Optional[int] = None
    cell_size: int = 30
    margin: int = 20
    fps: int = 60
    frames_per_tick: int = 20
    repeat_delay: int = 15
    repeat_interval: int = 2

    def __post_init__(self) -> None:
        self.frames_per_tick = max(1, int(self.frames_per_tick))
        self.fps = max(1, int(self.fps))


def run(config: Optional[PlayConfig] = None) -> None:
    config = config or PlayConfig()
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    pygame.init()
    try:
        clock = pygame.time.Clock()
        game = Game(config.width, config.height, rng=random.Random(config.seed))
        renderer = Renderer(cell_size=config.cell_size, margin=config.margin)
        repeat = KeyRepeat(config.repeat_delay, config.repeat_interval)

        screen = pygame.display.set_mode(renderer.window_size(game))
        pygame.display.set_caption("Tetris")
        logger.info("starting %dx%d game", config.width, config.height)

        frame = 0
        was_over = False
        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN:
                    if event.key == pygame.K_ESCAPE:
                        running = False
                        continue
                    action = KEY_TO_ACTION.get(event.key)
                    if action is not None:
                        game.action(action)
                        repeat.press(action)
                elif event.type == pygame.KEYUP:
                    action = KEY_TO_ACTION.get(event.key)
                    if action is not None:
                        repeat.release(action)

            repeated = repeat.tick()
            if repeated is not None:
                game.action(repeated)

            frame += 1
            if frame % config.frames_per_tick == 0:
                game.update()

            if game.is_over and not was_over:
                logger.info("game over, %d line(s) cleared", game.lines_cleared)
            was_over = game.is_over

            renderer.draw(screen, game)
            clock.tick(config.fps)
    finally:
        pygame.quit()


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description="Play the falling-block game with pygame")
    p.add_argument("--width", type=int, default=10)
    p.add_argument("--height", type=int, default=20)
    p.add_argument("--seed", type=int, default=None)
    p.add_argument("--cell-size", type=int, default=30)
    p.add_argument("--frames-per-tick", type=int, default=20)
    return p


def main() -> None:
    args = build_parser().parse_args()
    run(PlayConfig(width=args.width, height=args.height, seed=args.seed,
                   cell_size=args.cell_size, frames_per_tick=args.frames_per_tick))


if __name__ == "__main__":  # pragma: no cover
    main()
