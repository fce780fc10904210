from __future__ import annotations

import json
import logging
import re
from pathlib import Path
from typing import Any, Dict, List

from .config import DEFAULT_DATA_DIR
from .errors import InvalidLessonDataError, LessonNotFoundError
from .models import Lesson, LessonsIndex, Question
from .validation import validate_questions

logger = logging.getLogger(__name__)

INDEX_FILENAME = "lessons-index.json"
_LESSON_FILE_RE = re.compile(r"^lesson(\d+)\.json$")


class LessonRepository:
    """
    Read-only access to the static lesson files.

    A data directory holds:
    - `lessons-index.json`: `{"lessons": [LessonMetadata, ...]}`
    - `lesson<N>.json`: one lesson with its questions, keyed by `N`

    Usage:

    ```python
    repo = LessonRepository()
    index = repo.get_lessons_index()
    lesson = repo.get_lesson(1)
    ```

    Files are parsed once per repository instance. Lessons are validated on
    every access so a broken file is reported each time it is requested.
    """

    def __init__(self, data_dir: Path | str | None = None) -> None:
        self.data_dir = Path(data_dir) if data_dir is not None else DEFAULT_DATA_DIR
        self._raw_index: Any = None
        self._raw_lessons: Dict[int, Any] | None = None

    def _read_json(self, path: Path) -> Any:
        with open(path, "r", encoding="utf-8") as f:
            return json.load(f)

    def _lesson_files(self) -> Dict[int, Path]:
        files: Dict[int, Path] = {}
        for path in self.data_dir.glob("lesson*.json"):
            match = _LESSON_FILE_RE.match(path.name)
            if match:
                files[int(match.group(1))] = path
        return dict(sorted(files.items()))

    def _load_lessons(self) -> Dict[int, Any]:
        if self._raw_lessons is None:
            self._raw_lessons = {
                lesson_id: self._read_json(path)
                for lesson_id, path in self._lesson_files().items()
            }
        return self._raw_lessons

    def lesson_ids(self) -> List[int]:
        return list(self._load_lessons())

    def get_lessons_index(self) -> LessonsIndex:
        if self._raw_index is None:
            self._raw_index = self._read_json(self.data_dir / INDEX_FILENAME)

        raw = self._raw_index
        if not isinstance(raw, dict) or not isinstance(raw.get("lessons"), list):
            logger.error("Invalid lessons index data structure in %s", self.data_dir)
            raise InvalidLessonDataError("Invalid lessons data structure")
        try:
            return LessonsIndex.from_dict(raw)
        except (KeyError, TypeError, ValueError) as exc:
            logger.error("Invalid lesson metadata in index: %s", exc)
            raise InvalidLessonDataError("Invalid lessons data structure") from exc

    def get_lesson(self, lesson_id: int) -> Lesson:
        raw = self._load_lessons().get(lesson_id)
        if raw is None:
            raise LessonNotFoundError(lesson_id)

        if not isinstance(raw, dict) or not isinstance(raw.get("questions"), list):
            logger.error("Invalid lesson data structure for lesson %s", lesson_id)
            raise InvalidLessonDataError("Invalid lesson data structure")

        if not validate_questions(raw["questions"]):
            logger.error("Invalid questions data structure in lesson %s", lesson_id)
            raise InvalidLessonDataError("Invalid questions data structure")

        try:
            return Lesson.from_dict(raw)
        except (KeyError, TypeError, ValueError) as exc:
            logger.error("Invalid lesson data structure for lesson %s: %s", lesson_id, exc)
            raise InvalidLessonDataError("Invalid lesson data structure") from exc

    def get_all_questions(self) -> List[Question]:
        """All questions of all lessons, in lesson order."""
        raw_questions: List[Any] = []
        for raw in self._load_lessons().values():
            questions = raw.get("questions") if isinstance(raw, dict) else None
            raw_questions.extend(questions if isinstance(questions, list) else [None])

        if not validate_questions(raw_questions):
            logger.error("Invalid questions data structure detected")
            raise InvalidLessonDataError("Invalid questions data structure")

        return [Question.from_dict(q) for q in raw_questions]
