from __future__ import annotations

import logging
from typing import List

from .client import LessonSource
from .errors import LessonClientError
from .models import Lesson, LessonMetadata

logger = logging.getLogger(__name__)


class LessonBrowser:
    """
    Holds the lesson list and the currently selected lesson.

    Load failures never propagate: they end up in `error` (lesson list)
    or `lesson_error` (selected lesson) so the UI can offer a retry.
    """

    def __init__(self, source: LessonSource) -> None:
        self.source = source
        self.lessons: List[LessonMetadata] = []
        self.is_loading = False
        self.error: str | None = None
        self.selected_lesson: Lesson | None = None
        self.is_loading_lesson = False
        self.lesson_error: str | None = None

    def fetch_lessons(self) -> None:
        self.is_loading = True
        self.error = None
        try:
            self.lessons = self.source.get_lessons_metadata()
        except LessonClientError as exc:
            logger.error("Error fetching lessons: %s", exc)
            self.error = str(exc)
        finally:
            self.is_loading = False

    def refetch_lessons(self) -> None:
        self.fetch_lessons()

    def select_lesson(self, lesson_id: int) -> Lesson | None:
        self.is_loading_lesson = True
        self.lesson_error = None
        try:
            self.selected_lesson = self.source.get_lesson_by_id(lesson_id)
        except LessonClientError as exc:
            logger.error("Error fetching lesson %s: %s", lesson_id, exc)
            self.lesson_error = str(exc)
        finally:
            self.is_loading_lesson = False
        return self.selected_lesson if self.lesson_error is None else None

    def clear_selected_lesson(self) -> None:
        self.selected_lesson = None
        self.lesson_error = None
