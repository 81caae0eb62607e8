from __future__ import annotations

from typing import Dict

from retro_tetris.game import GameSnapshot, GameState


def format_hud(snapshot: GameSnapshot) -> Dict[str, str]:
    return {
        "score": f"{snapshot.score:06d}",
        "level": f"{snapshot.level:02d}",
        "lines": f"{snapshot.lines:03d}",
        "high_score": f"{snapshot.high_score:06d}",
    }


def overlay_message(state: GameState) -> str:
    if state is GameState.MENU:
        return "PRESS START"
    if state is GameState.PAUSED:
        return "PAUSED"
    if state is GameState.GAME_OVER:
        return "GAME OVER\nPRESS START"
    return ""
