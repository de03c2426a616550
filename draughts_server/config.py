"""Service settings, read from the environment and overridable from the CLI."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional

DEFAULT_PORT = 3000


@dataclass(frozen=True)
class ServerConfig:
    host: str = "0.0.0.0"
    port: int = DEFAULT_PORT
    rooms_path: Optional[Path] = None  # None keeps rooms in memory only
    board_size: int = 8
    log_level: str = "info"
    reload: bool = False

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "ServerConfig":
        env = os.environ if environ is None else environ
        rooms_path = env.get("DRAUGHTS_ROOMS_PATH") or None
        try:
            port = int(env.get("PORT", DEFAULT_PORT))
            board_size = int(env.get("DRAUGHTS_BOARD_SIZE", 8))
        except ValueError as exc:
            raise ValueError(f"Invalid numeric setting in environment: {exc}") from exc
        return cls(
            host=env.get("HOST", cls.host),
            port=port,
            rooms_path=Path(rooms_path) if rooms_path else None,
            board_size=board_size,
            log_level=env.get("DRAUGHTS_LOG_LEVEL", cls.log_level).lower(),
        )

    def to_env(self) -> dict[str, str]:
        env = {
            "HOST": self.host,
            "PORT": str(self.port),
            "DRAUGHTS_BOARD_SIZE": str(self.board_size),
            "DRAUGHTS_LOG_LEVEL": self.log_level,
        }
        if self.rooms_path is not None:
            env["DRAUGHTS_ROOMS_PATH"] = str(self.rooms_path)
        return env
