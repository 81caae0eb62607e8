"""Game module for Retro Tetris.

Exports the core game engine and supporting classes:
- GameGrid: Board representation, placement checks and line clearing
- Piece: Tetromino piece with clockwise rotation
- TetrominoType: Enum of available piece types
- DifficultyRules: Speed curve, level progression and scoring
- TetrisGame: Frame-driven game loop and state machine
- SoundEvent, AudioPort, StoragePort: Collaborator interfaces
"""

from .grid import GameGrid
from .pieces import Piece, TetrominoType, BASE_SHAPES, rotate_cw
from .rules import DifficultyRules
from .ports import (
    AudioPort,
    MemoryStorage,
    NullAudio,
    RecordingAudio,
    SoundEvent,
    StoragePort,
)
from .core import (
    Action,
    GameConfig,
    GameSnapshot,
    GameState,
    TetrisGame,
    uniform_piece_source,
)

__all__ = [
    "GameGrid",
    "Piece",
    "TetrominoType",
    "BASE_SHAPES",
    "rotate_cw",
    "DifficultyRules",
    "AudioPort",
    "MemoryStorage",
    "NullAudio",
    "RecordingAudio",
    "SoundEvent",
    "StoragePort",
    "Action",
    "GameConfig",
    "GameSnapshot",
    "GameState",
    "TetrisGame",
    "uniform_piece_source",
]
