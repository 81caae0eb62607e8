from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import Callable, Dict, Optional, Sequence

import pygame

from retro_tetris.audio import ToneAudio
from retro_tetris.game import GameConfig, GameState, TetrisGame
from retro_tetris.storage import JsonFileStorage
from .renderer import Renderer


logger = logging.getLogger(__name__)


KEY_TO_COMMAND: Dict[int, Callable[[TetrisGame], object]] = {
    pygame.K_LEFT: lambda g: g.move(-1, 0),
    pygame.K_RIGHT: lambda g: g.move(1, 0),
    pygame.K_DOWN: lambda g: g.move(0, 1),
    pygame.K_UP: lambda g: g.rotate(),
    pygame.K_SPACE: lambda g: g.hard_drop(),
    pygame.K_ESCAPE: lambda g: g.toggle_pause(),
    pygame.K_m: lambda g: g.toggle_sound(),
    pygame.K_s: lambda g: g.press_start(),
}


def handle_key(game: TetrisGame, key: int) -> bool:
    """Apply one key press. Returns False when the player asked to quit."""
    if key == pygame.K_q:
        return False
    if key in (pygame.K_RETURN, pygame.K_KP_ENTER):
        if game.state in (GameState.MENU, GameState.GAME_OVER):
            game.start()
        return True
    command = KEY_TO_COMMAND.get(key)
    if command is not None:
        command(game)
    return True


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description="Game Boy style falling-block puzzle")
    p.add_argument("--seed", type=int, default=None)
    p.add_argument("--save-file", type=Path, default=None,
                   help="JSON file for high score and settings (default: ~/.retro_tetris.json)")
    p.add_argument("--mute", action="store_true", help="start with sound disabled")
    p.add_argument("--cell-size", type=int, default=24)
    p.add_argument("--log-level", default="INFO")
    return p


def build_game(args: argparse.Namespace) -> TetrisGame:
    storage = JsonFileStorage(args.save_file)
    game = TetrisGame(GameConfig(random_seed=args.seed), audio=ToneAudio(), storage=storage)
    if args.mute:
        # --mute applies to this run only; the stored setting is left alone.
        game.set_sound_enabled(False, persist=False)
    return game


def run(argv: Optional[Sequence[str]] = None) -> None:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=args.log_level.upper(),
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    pygame.init()
    try:
        game = build_game(args)
        renderer = Renderer(cell_size=args.cell_size)
        screen = pygame.display.set_mode(renderer.window_size(game.grid.width, game.grid.height))
        pygame.display.set_caption("Retro Tetris")
        font = pygame.font.SysFont("monospace", 16, bold=True)
        logger.info("high score %d, save file %s", game.high_score, game.storage.path)

        clock = pygame.time.Clock()
        running = True
        while running:
            delta_ms = clock.tick(60)
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN:
                    running = handle_key(game, event.key) and running

            game.update(delta_ms)
            renderer.draw(screen, game.snapshot(), font)
            pygame.display.flip()
    finally:
        pygame.quit()


if __name__ == "__main__":  # pragma: no cover
    run()
