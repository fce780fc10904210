from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from .utils import parse_flag

DEFAULT_DATA_DIR = Path(__file__).with_name("data")
DEFAULT_PASS_THRESHOLD = 60
DEFAULT_LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


def _env_bool(name: str, default: bool) -> bool:
    val = os.getenv(name)
    if val is None or not val.strip():
        return default
    flag = parse_flag(val)
    return default if flag is None else flag


def _env_int(name: str, default: Optional[int] = None) -> Optional[int]:
    val = os.getenv(name)
    return int(val) if val and val.strip() else default


@dataclass
class Settings:
    """Runtime settings, read from the environment when instantiated."""

    data_dir: Path = field(
        default_factory=lambda: Path(os.getenv("LESSONS_DATA_DIR") or DEFAULT_DATA_DIR)
    )
    lessons_cache_max_age: int = field(
        default_factory=lambda: int(os.getenv("LESSONS_CACHE_MAX_AGE", "3600"))
    )
    quiz_cache_max_age: int = field(
        default_factory=lambda: int(os.getenv("QUIZ_CACHE_MAX_AGE", "300"))
    )
    shuffle: bool = field(default_factory=lambda: _env_bool("QUIZ_SHUFFLE", True))
    seed: Optional[int] = field(default_factory=lambda: _env_int("QUIZ_SEED"))
    log_level: str = field(default_factory=lambda: os.getenv("LOG_LEVEL", "INFO").upper())
    log_format: str = field(
        default_factory=lambda: os.getenv("LOG_FORMAT") or DEFAULT_LOG_FORMAT
    )
    api_url: str = field(
        default_factory=lambda: os.getenv("LESSONS_API_URL", "http://127.0.0.1:8000")
    )
    pass_threshold: int = field(
        default_factory=lambda: _env_int("PASS_THRESHOLD", DEFAULT_PASS_THRESHOLD)
    )


def get_settings() -> Settings:
    return Settings()
