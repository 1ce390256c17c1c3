"""Persistence constants shared by the repository and settings."""

from pathlib import Path

DEFAULT_STATE_PATH: Path = Path.home() / ".solid_quiz" / "app_state.json"
SNAPSHOT_VERSION: int = 1
DEFAULT_OPTIONS: tuple[str, ...] = ("A", "B", "C", "D")
