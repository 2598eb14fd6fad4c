import logging
import os
from dataclasses import dataclass
from pathlib import Path

LOG_FORMATS: tuple[str, ...] = ("json", "text")


@dataclass(frozen=True)
class Config:
    data_dir: Path
    log_format: str = "json"
    log_level: int = logging.INFO

    @classmethod
    def from_env(cls) -> "Config":
        data_dir = os.environ.get("SPLITLOG_DATA_DIR") or "~/.splitlog"

        log_format = os.environ.get("SPLITLOG_LOG_FORMAT", "json").strip().lower()
        if log_format not in LOG_FORMATS:
            raise RuntimeError(f"SPLITLOG_LOG_FORMAT must be one of {LOG_FORMATS}, got {log_format!r}")

        level_name = os.environ.get("SPLITLOG_LOG_LEVEL", "INFO").strip().upper()
        log_level = logging.getLevelName(level_name)
        if not isinstance(log_level, int):
            raise RuntimeError(f"SPLITLOG_LOG_LEVEL is not a valid level: {level_name!r}")

        return cls(
            data_dir=Path(data_dir).expanduser(),
            log_format=log_format,
            log_level=log_level,
        )
