from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class DifficultyRules:
    """Speed curve, level progression and line-clear scoring.

    Scoring is linear in the number of lines cleared at once and scaled by
    the level; there is no bonus table for multi-line clears.
    """

    initial_speed_ms: float = 1000.0
    speed_factor: float = 0.9
    lines_per_level: int = 10
    line_score: int = 100

    def __post_init__(self) -> None:
        if self.initial_speed_ms <= 0:
            raise ValueError(f"initial_speed_ms must be positive, got {self.initial_speed_ms}")
        if not 0 < self.speed_factor <= 1:
            raise ValueError(f"speed_factor must be in (0, 1], got {self.speed_factor}")
        if self.lines_per_level <= 0:
            raise ValueError(f"lines_per_level must be positive, got {self.lines_per_level}")

    def drop_interval_ms(self, level: int) -> float:
        return self.initial_speed_ms * self.speed_factor ** (level - 1)

    def level_for_lines(self, total_lines: int) -> int:
        return total_lines // self.lines_per_level + 1

    def score_delta(self, lines: int, level: int) -> int:
        if lines <= 0:
            return 0
        return lines * self.line_score * level
