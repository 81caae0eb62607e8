"""Gymnasium environment for Retro Tetris."""

from __future__ import annotations

from gymnasium.envs.registration import register

from .tetris_env import TetrisEnv

register(
    id="RetroTetris-v0",
    entry_point="retro_tetris.env.tetris_env:TetrisEnv",
)

__all__ = ["TetrisEnv"]
