"""
Student Roster TUI - Configuration

Settings come from the environment (a local .env file is loaded first).
"""

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv


DEFAULT_API_URL = "http://192.168.80.11:8080"
DEFAULT_TITLE = "Colegio"
DEFAULT_LOG_FILE = ".state/roster.log"

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


@dataclass(frozen=True)
class Settings:
    api_url: str = DEFAULT_API_URL
    title: str = DEFAULT_TITLE
    log_level: int = logging.INFO
    log_file: str = DEFAULT_LOG_FILE

    @classmethod
    def from_env(cls, load_env_file: bool = True) -> "Settings":
        if load_env_file:
            load_dotenv()

        level_name = os.getenv("ROSTER_LOG_LEVEL", "INFO").strip().upper()
        level = getattr(logging, level_name, None)
        if not isinstance(level, int):
            level = logging.INFO

        return cls(
            api_url=os.getenv("ROSTER_API_URL", DEFAULT_API_URL).strip().rstrip("/"),
            title=os.getenv("ROSTER_TITLE", DEFAULT_TITLE),
            log_level=level,
            log_file=os.getenv("ROSTER_LOG_FILE", DEFAULT_LOG_FILE),
        )


def configure_logging(settings: Settings) -> None:
    """
    Send log records to a file.

    The terminal belongs to the TUI, so nothing is written to stdout/stderr.
    """
    log_path = Path(settings.log_file)
    log_path.parent.mkdir(parents=True, exist_ok=True)

    handler = logging.FileHandler(log_path, encoding="utf-8")
    handler.setFormatter(logging.Formatter(LOG_FORMAT))

    root = logging.getLogger()
    root.setLevel(settings.log_level)
    root.addHandler(handler)

    # requests/urllib3 are chatty at DEBUG
    logging.getLogger("urllib3").setLevel(logging.WARNING)
