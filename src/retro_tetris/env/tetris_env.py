from __future__ import annotations

from typing import Any, Dict, Optional, Tuple

import numpy as np
import gymnasium as gym
from gymnasium import spaces

from retro_tetris.game import (
    Action,
    DifficultyRules,
    GameConfig,
    GameState,
    NullAudio,
    MemoryStorage,
    TetrisGame,
    TetrominoType,
)


class TetrisEnv(gym.Env):
    """Headless driver: one discrete action and one frame of gravity per step.

    Observation is the board with the falling piece overlaid as negative
    type values; reward is the score gained during the step.
    """

    metadata = {"render_modes": ["rgb_array"], "render_fps": 60}

    def __init__(self, config: Optional[GameConfig] = None, rules: Optional[DifficultyRules] = None,
                 render_mode: Optional[str] = None, frame_ms: float = 1000.0 / 60.0,
                 max_episode_steps: int = 10000) -> None:
        super().__init__()
        self.config = config or GameConfig()
        self.rules = rules or DifficultyRules()
        self.render_mode = render_mode
        self.frame_ms = float(frame_ms)
        self.max_episode_steps = int(max_episode_steps)
        self.game = self._make_game(self.config.random_seed)
        self._steps = 0

        n_kinds = len(TetrominoType)
        self.observation_space = spaces.Box(
            low=-n_kinds, high=n_kinds, shape=(self.config.height, self.config.width), dtype=np.int8
        )
        self.action_space = spaces.Discrete(len(Action))

    def _make_game(self, seed: Optional[int]) -> TetrisGame:
        config = GameConfig(
            width=self.config.width,
            height=self.config.height,
            spawn_x=self.config.spawn_x,
            spawn_y=self.config.spawn_y,
            random_seed=seed,
        )
        return TetrisGame(config, self.rules, audio=NullAudio(), storage=MemoryStorage())

    def _get_info(self) -> Dict[str, Any]:
        return {
            "score": self.game.score,
            "lines": self.game.lines,
            "level": self.game.level,
            "steps": self._steps,
        }

    def reset(self, *, seed: Optional[int] = None, options: Optional[dict] = None) -> Tuple[np.ndarray, Dict[str, Any]]:
        super().reset(seed=seed)
        if seed is None:
            seed = int(self.np_random.integers(0, 2**31 - 1))
        self.game = self._make_game(seed)
        self.game.start()
        self._steps = 0
        return self.game.get_state(), self._get_info()

    def step(self, action: int):
        before = self.game.score
        action = Action(int(action))
        # Pausing would stall the episode, so PAUSE is treated as a no-op here.
        if action != Action.PAUSE:
            self.game.apply(action)
        self.game.update(self.frame_ms)
        self._steps += 1

        terminated = self.game.state is GameState.GAME_OVER
        truncated = not terminated and self._steps >= self.max_episode_steps
        reward = float(self.game.score - before)
        return self.game.get_state(), reward, terminated, truncated, self._get_info()

    def render(self) -> Optional[np.ndarray]:
        if self.render_mode == "rgb_array":
            grid = self.game.get_state()
            cell = 12
            h, w = grid.shape
            img = np.zeros((h * cell, w * cell, 3), dtype=np.uint8)
            for y in range(h):
                for x in range(w):
                    if grid[y, x] > 0:
                        color = (155, 188, 15)
                    elif grid[y, x] < 0:
                        color = (139, 172, 15)
                    else:
                        color = (15, 56, 15)
                    img[y * cell : (y + 1) * cell, x * cell : (x + 1) * cell, :] = color
            return img
        return None

    def close(self) -> None:
        pass
