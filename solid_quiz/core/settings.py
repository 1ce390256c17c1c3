"""Runtime settings read from the environment."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
import os
from pathlib import Path

from solid_quiz.constants.network_constants import DEFAULT_HOST, DEFAULT_PORT
from solid_quiz.constants.storage_constants import DEFAULT_STATE_PATH


@dataclass(slots=True)
class AppSettings:
    """Host, port, file locations and log level for one process."""

    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT
    state_path: Path = DEFAULT_STATE_PATH
    catalog_path: Path | None = None  # None means the built-in catalog
    log_level: str = "INFO"

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "AppSettings":
        env = os.environ if environ is None else environ
        settings = cls()

        host = env.get("SOLID_QUIZ_HOST", "").strip()
        if host:
            settings.host = host

        raw_port = env.get("SOLID_QUIZ_PORT", "").strip()
        if raw_port:
            settings.port = _parse_port(raw_port)

        state_path = env.get("SOLID_QUIZ_STATE_PATH", "").strip()
        if state_path:
            settings.state_path = Path(state_path).expanduser()

        catalog_path = env.get("SOLID_QUIZ_CATALOG_PATH", "").strip()
        if catalog_path:
            settings.catalog_path = Path(catalog_path).expanduser()

        log_level = env.get("SOLID_QUIZ_LOG_LEVEL", "").strip()
        if log_level:
            settings.log_level = log_level.upper()

        return settings


def _parse_port(raw_port: str) -> int:
    try:
        port = int(raw_port)
    except ValueError as exc:
        raise ValueError(f"SOLID_QUIZ_PORT must be an integer, got {raw_port!r}.") from exc
    if not 0 < port < 65536:
        raise ValueError(f"SOLID_QUIZ_PORT must be between 1 and 65535, got {port}.")
    return port
