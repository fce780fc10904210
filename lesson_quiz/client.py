from __future__ import annotations

import logging
import random
from dataclasses import replace
from typing import List, Optional, Protocol

import httpx

from .errors import LessonClientError, LessonDataError
from .models import Lesson, LessonMetadata, LessonsIndex, Question
from .repository import LessonRepository
from .utils import shuffle_items

logger = logging.getLogger(__name__)


class LessonSource(Protocol):
    def get_lessons_metadata(self) -> List[LessonMetadata]: ...

    def get_lesson_by_id(self, lesson_id: int) -> Lesson: ...


class LessonClient:
    """
    Fetch lessons from the quiz HTTP service.

    Every failure (transport error, non-2xx status, malformed body) is raised
    as `LessonClientError` carrying a message that can be shown to the learner.
    An existing `httpx.Client` (e.g. FastAPI's `TestClient`) can be injected.
    """

    def __init__(
        self,
        base_url: str = "http://127.0.0.1:8000",
        http_client: Optional[httpx.Client] = None,
        timeout: float = 10.0,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self._http = http_client or httpx.Client(timeout=timeout)
        self._owns_http = http_client is None

    def close(self) -> None:
        if self._owns_http:
            self._http.close()

    def __enter__(self) -> "LessonClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def _get_json(self, path: str, params: dict | None = None):
        response = self._http.get(f"{self.base_url}{path}", params=params)
        response.raise_for_status()
        return response.json()

    def get_lessons_metadata(self) -> List[LessonMetadata]:
        try:
            data = self._get_json("/api/lessons")
            return list(LessonsIndex.from_dict(data).lessons)
        except (httpx.HTTPError, KeyError, TypeError, ValueError) as exc:
            logger.error("Error fetching lessons metadata: %s", exc)
            raise LessonClientError("Error al cargar la lista de lecciones") from exc

    def get_lesson_by_id(self, lesson_id: int, shuffle: bool | None = None) -> Lesson:
        params: dict = {"lessonId": lesson_id}
        if shuffle is not None:
            params["shuffle"] = str(shuffle).lower()
        try:
            data = self._get_json("/api/quiz", params=params)
            return Lesson.from_dict(data)
        except (httpx.HTTPError, KeyError, TypeError, ValueError) as exc:
            logger.error("Error fetching lesson %s: %s", lesson_id, exc)
            raise LessonClientError(f"Error al cargar la lección {lesson_id}") from exc

    def lesson_exists(self, lesson_id: int) -> bool:
        try:
            lessons = self.get_lessons_metadata()
        except LessonClientError:
            return False
        return any(lesson.id == lesson_id for lesson in lessons)

    def get_questions_by_lesson_id(self, lesson_id: int) -> List[Question]:
        return list(self.get_lesson_by_id(lesson_id).questions)


class LocalLessonSource:
    """Same interface as `LessonClient`, reading the static files directly."""

    def __init__(
        self,
        repository: LessonRepository,
        shuffle: bool = False,
        rng: Optional[random.Random] = None,
    ) -> None:
        self.repository = repository
        self.shuffle = shuffle
        self._rng = rng or random.Random()

    def get_lessons_metadata(self) -> List[LessonMetadata]:
        try:
            return list(self.repository.get_lessons_index().lessons)
        except (OSError, ValueError, LessonDataError) as exc:
            logger.error("Error reading lessons index: %s", exc)
            raise LessonClientError("Error al cargar la lista de lecciones") from exc

    def get_lesson_by_id(self, lesson_id: int) -> Lesson:
        try:
            lesson = self.repository.get_lesson(lesson_id)
        except (OSError, ValueError, LessonDataError) as exc:
            logger.error("Error reading lesson %s: %s", lesson_id, exc)
            raise LessonClientError(f"Error al cargar la lección {lesson_id}") from exc
        if self.shuffle:
            lesson = replace(lesson, questions=tuple(shuffle_items(lesson.questions, self._rng)))
        return lesson
