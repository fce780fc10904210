from __future__ import annotations

import logging

from .config import Settings, get_settings


def setup_logger(name: str = "lesson_quiz", settings: Settings | None = None) -> logging.Logger:
    """
    Configure the `lesson_quiz` logger tree from settings (`LOG_LEVEL`, `LOG_FORMAT`).

    Calling it again only updates the level and format of the handler it installed.
    """
    settings = settings or get_settings()
    logger = logging.getLogger(name)
    logger.setLevel(settings.log_level)

    handler = next((h for h in logger.handlers if getattr(h, "_lesson_quiz", False)), None)
    if handler is None:
        handler = logging.StreamHandler()
        handler._lesson_quiz = True  # type: ignore[attr-defined]
        logger.addHandler(handler)
    handler.setLevel(settings.log_level)
    handler.setFormatter(logging.Formatter(settings.log_format))
    return logger
