"""Settings loaded from environment variables (+ optional .env).

Variables:
- HARPER_DATA_FILE: task file (default data/harper.txt)
- HARPER_LOG_DIR: directory for harper.log (default .local/harper)
- HARPER_LOG_LEVEL: console log level (default WARNING)
"""

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

ENV_PREFIX = "HARPER"

load_dotenv(override=False)


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None or v.strip() == "" else v.strip()


def _env_path(name: str, default: Path) -> Path:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return Path(raw).expanduser()


@dataclass(frozen=True)
class Settings:
    data_file: Path
    log_dir: Path
    log_level: str

    @staticmethod
    def from_env() -> "Settings":
        return Settings(
            data_file=_env_path(_k("DATA_FILE"), Path("data/harper.txt")),
            log_dir=_env_path(_k("LOG_DIR"), Path(".local/harper")),
            log_level=_env(_k("LOG_LEVEL"), "WARNING").upper(),
        )


def get_settings() -> Settings:
    # Read fresh each time so tests can change the environment
    return Settings.from_env()
