from __future__ import annotations

import logging
import random
import re
from dataclasses import replace
from typing import List, Optional, Union

from fastapi import FastAPI, Query, Response
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from lesson_quiz import (
    LessonDataError,
    LessonNotFoundError,
    LessonRepository,
    Settings,
    get_settings,
    setup_logger,
    shuffle_items,
)
from lesson_quiz.models import Lesson, LessonMetadata, Question
from lesson_quiz.utils import parse_flag

logger = logging.getLogger("lesson_quiz.service")

_LEADING_INT_RE = re.compile(r"^\s*([+-]?\d+)")


class QuestionResponse(BaseModel):
    id: int
    type: str
    question: str
    answer: Union[bool, str]
    options: Optional[List[str]] = None
    synonyms: Optional[List[str]] = None
    explanation: Optional[str] = None


class LessonResponse(BaseModel):
    id: int
    title: str
    description: str
    level: str
    questions: List[QuestionResponse]


class LessonMetadataResponse(BaseModel):
    id: int
    title: str
    description: str
    level: str
    questionsCount: int
    difficulty: str
    tags: List[str]


class LessonsIndexResponse(BaseModel):
    lessons: List[LessonMetadataResponse]


def _question_response(q: Question) -> QuestionResponse:
    return QuestionResponse(**q.to_dict())


def _lesson_response(lesson: Lesson) -> LessonResponse:
    return LessonResponse(
        id=lesson.id,
        title=lesson.title,
        description=lesson.description,
        level=lesson.level,
        questions=[_question_response(q) for q in lesson.questions],
    )


def _metadata_response(m: LessonMetadata) -> LessonMetadataResponse:
    return LessonMetadataResponse(**m.to_dict())


def parse_lesson_id(raw: str) -> int | None:
    """Read a leading integer from `raw` ("2", " 2", "2abc" -> 2); None if there is none."""
    match = _LEADING_INT_RE.match(raw)
    if match is None:
        return None
    return int(match.group(1))


def _error(message: str, status_code: int) -> JSONResponse:
    return JSONResponse({"error": message}, status_code=status_code)


def create_app(
    repository: LessonRepository | None = None,
    settings: Settings | None = None,
) -> FastAPI:
    settings = settings or get_settings()
    repository = repository or LessonRepository(settings.data_dir)
    rng = random.Random(settings.seed)
    setup_logger("lesson_quiz", settings)

    app = FastAPI(title="English Practice Quiz Service")

    @app.get(
        "/api/lessons",
        response_model=LessonsIndexResponse,
        response_model_exclude_none=True,
    )
    def get_lessons(response: Response):
        try:
            index = repository.get_lessons_index()
        except LessonDataError as exc:
            return _error(str(exc), 500)
        except Exception as exc:
            logger.exception("Error in lessons API")
            return _error(str(exc) or "Error desconocido al cargar las lecciones", 500)

        response.headers["Cache-Control"] = f"public, max-age={settings.lessons_cache_max_age}"
        return LessonsIndexResponse(lessons=[_metadata_response(m) for m in index.lessons])

    @app.get(
        "/api/quiz",
        response_model=Union[LessonResponse, List[QuestionResponse]],
        response_model_exclude_none=True,
    )
    def get_quiz(
        response: Response,
        lesson_id: Optional[str] = Query(default=None, alias="lessonId"),
        shuffle: Optional[str] = None,
    ):
        try:
            if shuffle is None:
                do_shuffle = settings.shuffle
            else:
                flag = parse_flag(shuffle)
                if flag is None:
                    return _error("Invalid shuffle value. Use true or false.", 400)
                do_shuffle = flag

            # no lesson: every question of every lesson
            if not lesson_id:
                questions = repository.get_all_questions()
                if do_shuffle:
                    questions = shuffle_items(questions, rng)
                response.headers["Cache-Control"] = f"public, max-age={settings.quiz_cache_max_age}"
                return [_question_response(q) for q in questions]

            parsed = parse_lesson_id(lesson_id)
            if parsed is None or parsed < 1:
                return _error("Invalid lesson ID. Must be a positive number.", 400)

            lesson = repository.get_lesson(parsed)
            if do_shuffle:
                lesson = replace(lesson, questions=tuple(shuffle_items(lesson.questions, rng)))
        except LessonNotFoundError as exc:
            return _error(str(exc), 404)
        except LessonDataError as exc:
            return _error(str(exc), 500)
        except Exception as exc:
            logger.exception("Error in quiz API")
            return _error(str(exc) or "Error desconocido al procesar las preguntas", 500)

        response.headers["Cache-Control"] = f"public, max-age={settings.quiz_cache_max_age}"
        return _lesson_response(lesson)

    @app.get("/health")
    def health() -> dict:
        return {"status": "ok"}

    return app


app = create_app()


def main() -> None:
    import uvicorn

    uvicorn.run(app, host="127.0.0.1", port=8000)


if __name__ == "__main__":
    main()
