"""Persistent high score and settings."""

from .json_store import JsonFileStorage, default_save_path

__all__ = ["JsonFileStorage", "default_save_path"]
