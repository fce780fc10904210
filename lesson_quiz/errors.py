from __future__ import annotations


class LessonDataError(Exception):
    """Base class for problems with the static lesson data."""


class LessonNotFoundError(LessonDataError):
    def __init__(self, lesson_id: int) -> None:
        super().__init__(f"Lesson {lesson_id} not found")
        self.lesson_id = lesson_id


class InvalidLessonDataError(LessonDataError):
    pass


class LessonClientError(Exception):
    """Raised by the HTTP client with a message fit to show the learner."""
