from __future__ import annotations

import argparse
import logging
from typing import Dict, Optional, Sequence

import pygame

from tetris_engine.game import Command, GameConfig, GameSession
from .renderer import Renderer


KEY_TO_COMMAND: Dict[int, Command] = {
    pygame.K_LEFT: Command.MOVE_LEFT,
    pygame.K_RIGHT: Command.MOVE_RIGHT,
    pygame.K_DOWN: Command.SOFT_DROP,
    pygame.K_UP: Command.ROTATE,
    pygame.K_RETURN: Command.RESTART,
    pygame.K_KP_ENTER: Command.RESTART,
}


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description="Play the falling-block game in a pygame window.")
    p.add_argument("--scoring", choices=["flat", "weighted"], default="flat")
    p.add_argument("--seed", type=int, default=None)
    p.add_argument("--interval", type=int, default=None, help="initial tick interval in ms")
    p.add_argument("--cell-size", type=int, default=30)
    p.add_argument("--log-level", default="WARNING")
    return p


def run(argv: Optional[Sequence[str]] = None) -> None:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=args.log_level.upper(), format="%(asctime)s %(name)s %(levelname)s %(message)s")

    config = GameConfig(scoring=args.scoring, random_seed=args.seed, initial_interval=args.interval)
    game = GameSession(config)

    pygame.init()
    try:
        clock = pygame.time.Clock()
        renderer = Renderer(cell_size=args.cell_size)
        screen = pygame.display.set_mode(renderer.window_size(config.width, config.height))
        pygame.display.set_caption("Tetris")

        last_tick = pygame.time.get_ticks()
        snap = game.snapshot()

        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN:
                    if event.key == pygame.K_ESCAPE:
                        running = False
                    else:
                        command = KEY_TO_COMMAND.get(event.key)
                        if command is not None and game.command(command):
                            if command == Command.RESTART:
                                last_tick = pygame.time.get_ticks()
                            snap = game.snapshot()

            # Gravity, paced by the session
            now = pygame.time.get_ticks()
            if not snap.game_over and now - last_tick >= snap.interval:
                game.tick()
                last_tick = now
                snap = game.snapshot()

            renderer.draw(screen, snap)
            clock.tick(60)
    finally:
        pygame.quit()

    print(f"Final score: {snap.score}  level: {snap.level}  lines: {snap.lines}")


if __name__ == "__main__":  # pragma: no cover
    run()
