from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Any, Callable, Dict, Optional, Tuple

import numpy as np

from .grid import GameGrid
from .pieces import Piece, Shape, TetrominoType
from .ports import AudioPort, MemoryStorage, NullAudio, SoundEvent, StoragePort
from .rules import DifficultyRules


logger = logging.getLogger(__name__)


class GameState(str, Enum):
    MENU = "menu"
    PLAYING = "playing"
    PAUSED = "paused"
    GAME_OVER = "game_over"


class Action(IntEnum):
    NONE = 0
    LEFT = 1
    RIGHT = 2
    ROTATE = 3
    SOFT_DROP = 4
    HARD_DROP = 5
    PAUSE = 6


@dataclass
class GameConfig:
    width: int = 10
    height: int = 20
    spawn_x: int = 3
    spawn_y: int = -1
    random_seed: Optional[int] = None

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"board must be at least 1x1, got {self.width}x{self.height}")


PieceSource = Callable[[], TetrominoType]


def uniform_piece_source(rng: random.Random) -> PieceSource:
    """Independent uniform draws over the 7 types, no bag and no history."""
    kinds = list(TetrominoType)

    def draw() -> TetrominoType:
        return rng.choice(kinds)

    return draw


@dataclass(frozen=True)
class GameSnapshot:
    """Read-only view of one frame for renderers and HUDs."""

    state: GameState
    board: np.ndarray
    current_cells: Tuple[Tuple[int, int], ...]
    current_kind: Optional[TetrominoType]
    current_color: Optional[Tuple[int, int, int]]
    next_kind: Optional[TetrominoType]
    next_shape: Optional[Shape]
    score: int
    level: int
    lines: int
    high_score: int
    drop_interval_ms: float


class TetrisGame:
    """Falling-block game session: board, pieces, gravity and state machine.

    Drive it with `update(delta_ms)` once per frame and the command methods
    from the input layer, all on the same thread. Commands outside PLAYING
    are silent no-ops. Audio and storage failures are logged and ignored.
    """

    def __init__(
        self,
        config: Optional[GameConfig] = None,
        rules: Optional[DifficultyRules] = None,
        audio: Optional[AudioPort] = None,
        storage: Optional[StoragePort] = None,
        piece_source: Optional[PieceSource] = None,
    ) -> None:
        self.config = config or GameConfig()
        self.rules = rules or DifficultyRules()
        self.audio = audio if audio is not None else NullAudio()
        self.storage = storage if storage is not None else MemoryStorage()
        self.rng = random.Random(self.config.random_seed)
        self.piece_source = piece_source or uniform_piece_source(self.rng)

        self.state = GameState.MENU
        self.grid = GameGrid(self.config.width, self.config.height)
        self.score = 0
        self.level = 1
        self.lines = 0
        self.current_piece: Optional[Piece] = None
        self.next_piece: Optional[Piece] = None
        self.drop_time = 0.0

        settings = self._load_settings()
        self.audio.enabled = bool(settings.get("soundEnabled", True))
        self.high_score = self._load_high_score()

    # ----- state machine -----

    def start(self) -> None:
        if self.state not in (GameState.MENU, GameState.GAME_OVER):
            return
        self.grid = GameGrid(self.config.width, self.config.height)
        self.score = 0
        self.level = 1
        self.lines = 0
        self.current_piece = self._new_piece()
        self.next_piece = self._new_piece()
        self.drop_time = 0.0
        self.state = GameState.PLAYING
        logger.info("game started (%dx%d)", self.grid.width, self.grid.height)

    def pause(self) -> None:
        if self.state is GameState.PLAYING:
            self.state = GameState.PAUSED
            logger.info("paused")

    def resume(self) -> None:
        if self.state is GameState.PAUSED:
            self.state = GameState.PLAYING
            logger.info("resumed")

    def toggle_pause(self) -> None:
        if self.state is GameState.PLAYING:
            self.pause()
        elif self.state is GameState.PAUSED:
            self.resume()

    def press_start(self) -> None:
        if self.state in (GameState.MENU, GameState.GAME_OVER):
            self.start()
        else:
            self.toggle_pause()

    # ----- frame update -----

    def drop_interval_ms(self) -> float:
        return self.rules.drop_interval_ms(self.level)

    def update(self, delta_ms: float) -> None:
        if self.state is not GameState.PLAYING or self.current_piece is None:
            return
        self.drop_time += delta_ms
        if self.drop_time >= self.drop_interval_ms():
            if not self.move(0, 1):
                self.lock_and_advance()
            self.drop_time = 0.0

    def lock_and_advance(self) -> None:
        piece = self.current_piece
        if piece is None:
            return
        cells = piece.cells()
        if any(y < 0 for _, y in cells) or not self.grid.is_valid_placement(cells):
            self._game_over()
            return

        self.grid.lock(cells, int(piece.kind))
        cleared = self.grid.clear_full_lines()
        if cleared > 0:
            self._play(SoundEvent.CLEAR)
            self.lines += cleared
            self.score += self.rules.score_delta(cleared, self.level)
            self.level = max(self.level, self.rules.level_for_lines(self.lines))
            logger.debug("cleared %d line(s): score=%d level=%d", cleared, self.score, self.level)

        self.current_piece = self.next_piece
        self.next_piece = self._new_piece()
        self.drop_time = 0.0

    # ----- commands -----

    def move(self, dx: int, dy: int) -> bool:
        if self.state is not GameState.PLAYING or self.current_piece is None:
            return False
        if not self.grid.is_valid_placement(self.current_piece.cells(dx, dy)):
            return False
        self.current_piece.move(dx, dy)
        if dx != 0:
            self._play(SoundEvent.MOVE)
        return True

    def soft_drop(self) -> bool:
        return self.move(0, 1)

    def rotate(self) -> bool:
        if self.state is not GameState.PLAYING or self.current_piece is None:
            return False
        candidate = self.current_piece.rotated_shape()
        # No wall kicks: the rotated shape must fit where the piece already is.
        if not self.grid.is_valid_placement(self.current_piece.cells(shape=candidate)):
            return False
        self.current_piece.apply_rotation(candidate)
        self._play(SoundEvent.ROTATE)
        return True

    def hard_drop(self) -> None:
        if self.state is not GameState.PLAYING or self.current_piece is None:
            return
        while self.move(0, 1):
            pass
        self._play(SoundEvent.DROP)
        self.lock_and_advance()

    def apply(self, action: Action) -> None:
        if action == Action.LEFT:
            self.move(-1, 0)
        elif action == Action.RIGHT:
            self.move(1, 0)
        elif action == Action.ROTATE:
            self.rotate()
        elif action == Action.SOFT_DROP:
            self.soft_drop()
        elif action == Action.HARD_DROP:
            self.hard_drop()
        elif action == Action.PAUSE:
            self.toggle_pause()
        elif action == Action.NONE:
            pass

    # ----- settings -----

    @property
    def sound_enabled(self) -> bool:
        return bool(self.audio.enabled)

    def set_sound_enabled(self, enabled: bool, persist: bool = True) -> None:
        self.audio.enabled = bool(enabled)
        if not persist:
            return
        settings = self._load_settings()
        settings["soundEnabled"] = self.audio.enabled
        try:
            self.storage.set_settings(settings)
        except Exception:
            logger.warning("could not save settings", exc_info=True)

    def toggle_sound(self) -> bool:
        self.set_sound_enabled(not self.audio.enabled)
        return self.audio.enabled

    # ----- read-only views -----

    def snapshot(self) -> GameSnapshot:
        current = self.current_piece
        nxt = self.next_piece
        return GameSnapshot(
            state=self.state,
            board=self.grid.clone_state(),
            current_cells=tuple(current.cells()) if current is not None else (),
            current_kind=current.kind if current is not None else None,
            current_color=current.color if current is not None else None,
            next_kind=nxt.kind if nxt is not None else None,
            next_shape=nxt.shape.copy() if nxt is not None else None,
            score=self.score,
            level=self.level,
            lines=self.lines,
            high_score=self.high_score,
            drop_interval_ms=self.drop_interval_ms(),
        )

    def get_state(self) -> np.ndarray:
        # Overlay current piece on a copy of the grid for observation
        state = self.grid.clone_state()
        if self.current_piece is not None:
            for x, y in self.current_piece.cells():
                if self.grid.is_inside(x, y):
                    # Use negative to indicate falling piece overlay
                    state[y, x] = -int(self.current_piece.kind)
        return state

    # ----- internals -----

    def _new_piece(self) -> Piece:
        return Piece.spawn(self.piece_source(), self.config.spawn_x, self.config.spawn_y)

    def _game_over(self) -> None:
        self.state = GameState.GAME_OVER
        self.current_piece = None
        self.next_piece = None
        self._play(SoundEvent.GAME_OVER)
        stored = self._load_high_score()
        if self.score > stored:
            try:
                self.storage.set_high_score(self.score)
            except Exception:
                logger.warning("could not save high score", exc_info=True)
        self.high_score = max(self.score, stored, self.high_score)
        logger.info("game over: score=%d lines=%d level=%d", self.score, self.lines, self.level)

    def _play(self, event: SoundEvent) -> None:
        try:
            self.audio.play(event)
        except Exception:
            logger.warning("audio failed for %s", event.value, exc_info=True)

    def _load_settings(self) -> Dict[str, Any]:
        try:
            return dict(self.storage.get_settings())
        except Exception:
            logger.warning("could not load settings", exc_info=True)
            return {"soundEnabled": True}

    def _load_high_score(self) -> int:
        try:
            return int(self.storage.get_high_score())
        except Exception:
            logger.warning("could not load high score", exc_info=True)
            return 0
