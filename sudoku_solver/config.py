"""Runtime settings resolved from environment variables."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional

DEFAULT_LOG_LEVEL = "WARNING"
DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 8080


@dataclass(frozen=True)
class Settings:
    log_level: str = DEFAULT_LOG_LEVEL
    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT


def load_settings(environ: Optional[Mapping[str, str]] = None) -> Settings:
    env = os.environ if environ is None else environ
    raw_port = env.get("SUDOKU_PORT", str(DEFAULT_PORT))
    try:
        port = int(raw_port)
    except ValueError:
        raise ValueError(f"SUDOKU_PORT must be an integer, got {raw_port!r}") from None
    return Settings(
        log_level=env.get("SUDOKU_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper(),
        host=env.get("SUDOKU_HOST", DEFAULT_HOST),
        port=port,
    )
