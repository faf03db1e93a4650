# settings.py
#
# Description:
# Settings loaded from environment variables, with an optional .env file in
# the working directory. Real environment variables win over .env entries.
#

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import find_dotenv, load_dotenv

ENV_PREFIX = "TUIDO"
DEFAULT_DB_FILE = "./tasks.json"
DEFAULT_STATUS_TIMEOUT = 2.0


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


def _first_env(*names: str, default: Optional[str] = None) -> Optional[str]:
    for n in names:
        v = os.getenv(n)
        if v is not None and v.strip() != "":
            return v
    return default


def _env_level(name: str, default: str) -> str:
    raw = (_first_env(name, default=default) or default).strip().upper()
    return raw if isinstance(logging.getLevelName(raw), int) else default


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        value = float(raw)
    except ValueError:
        return default
    return value if value > 0 else default


@dataclass(frozen=True)
class Settings:
    db_file: Path
    status_timeout: float
    log_level: str
    log_file: Optional[Path]

    @staticmethod
    def from_env(dotenv: bool = True) -> "Settings":
        if dotenv:
            load_dotenv(find_dotenv(usecwd=True), override=False)

        # DB_FILE is the name older installs used.
        db_file = Path(_first_env(_k("DB_FILE"), "DB_FILE", default=DEFAULT_DB_FILE)).expanduser()
        log_file = _first_env(_k("LOG_FILE"))

        return Settings(
            db_file=db_file,
            status_timeout=_env_float(_k("STATUS_TIMEOUT"), DEFAULT_STATUS_TIMEOUT),
            log_level=_env_level(_k("LOG_LEVEL"), "INFO"),
            log_file=Path(log_file).expanduser() if log_file else None,
        )
