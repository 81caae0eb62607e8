from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, Optional

from retro_tetris.game.ports import DEFAULT_SETTINGS, StoragePort


logger = logging.getLogger(__name__)

HIGH_SCORE_KEY = "tetris_high_score"
SETTINGS_KEY = "tetris_settings"


def default_save_path(app_name: str = "retro_tetris") -> Path:
    return Path.home() / f".{app_name}.json"


class JsonFileStorage(StoragePort):
    """High score and settings kept as two keys of one JSON document.

    A missing, unreadable or corrupt file behaves like an empty one. Write
    failures are logged and dropped so the game keeps running.
    """

    def __init__(self, path: Optional[Path] = None) -> None:
        self.path = Path(path) if path is not None else default_save_path()

    def _read(self) -> Dict[str, Any]:
        try:
            if self.path.exists():
                data = json.loads(self.path.read_text(encoding="utf-8"))
                if isinstance(data, dict):
                    return data
                logger.warning("ignoring %s: top level is not an object", self.path)
        except (OSError, ValueError) as e:
            logger.warning("could not read %s: %s", self.path, e)
        return {}

    def _write(self, key: str, value: Any) -> None:
        data = self._read()
        data[key] = value
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(json.dumps(data, indent=2), encoding="utf-8")
        except OSError as e:
            logger.warning("could not write %s: %s", self.path, e)

    def get_high_score(self) -> int:
        try:
            return max(0, int(self._read().get(HIGH_SCORE_KEY, 0)))
        except (TypeError, ValueError, OverflowError):
            return 0

    def set_high_score(self, score: int) -> None:
        self._write(HIGH_SCORE_KEY, int(score))

    def get_settings(self) -> Dict[str, Any]:
        stored = self._read().get(SETTINGS_KEY)
        if not isinstance(stored, dict):
            return dict(DEFAULT_SETTINGS)
        return stored

    def set_settings(self, settings: Dict[str, Any]) -> None:
        self._write(SETTINGS_KEY, dict(settings))
