from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import Any, Dict, List

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from lesson_quiz import LessonRepository, Question, QuestionType  # noqa: E402


@pytest.fixture
def sample_questions() -> List[Question]:
    return [
        Question(
            id=1,
            type=QuestionType.MULTIPLE_CHOICE,
            question="What is the capital of France?",
            options=("London", "Berlin", "Paris", "Madrid"),
            answer="Paris",
        ),
        Question(
            id=2,
            type=QuestionType.TRUE_FALSE,
            question="The Earth is flat.",
            answer=False,
        ),
        Question(
            id=3,
            type=QuestionType.FILL_IN_THE_BLANK,
            question="Complete: Hello, my name ___ John.",
            answer="is",
            synonyms=("Is",),
        ),
    ]


@pytest.fixture
def lessons_payload() -> Dict[str, Any]:
    """Raw JSON content of a small two-lesson data directory."""
    return {
        "index": {
            "lessons": [
                {
                    "id": 1,
                    "title": "Greetings",
                    "description": "Say hello",
                    "level": "A2",
                    "questionsCount": 3,
                    "difficulty": "beginner",
                    "tags": ["conversation", "basics"],
                },
                {
                    "id": 2,
                    "title": "Past simple",
                    "description": "Irregular verbs",
                    "level": "A2",
                    "questionsCount": 2,
                    "difficulty": "intermediate",
                    "tags": ["grammar", "verbs", "tenses", "past"],
                },
            ]
        },
        "lessons": {
            1: {
                "id": 1,
                "title": "Greetings",
                "description": "Say hello",
                "level": "A2",
                "questions": [
                    {
                        "id": 1,
                        "type": "multiple-choice",
                        "question": "How do you answer 'How are you?'",
                        "options": ["I'm fine", "I'm 20"],
                        "answer": "I'm fine",
                    },
                    {
                        "id": 2,
                        "type": "translation",
                        "question": "Traduce: hola",
                        "answer": "hello",
                        "synonyms": ["hi"],
                        "explanation": "Hi es más informal.",
                    },
                    {
                        "id": 3,
                        "type": "true-false",
                        "question": "'Bye' means 'adiós'.",
                        "answer": True,
                    },
                ],
            },
            2: {
                "id": 2,
                "title": "Past simple",
                "description": "Irregular verbs",
                "level": "A2",
                "questions": [
                    {
                        "id": 1,
                        "type": "fill-in-the-blank",
                        "question": "Yesterday I ___ (go) home.",
                        "answer": "went",
                    },
                    {
                        "id": 2,
                        "type": "true-false",
                        "question": "'Buyed' is correct.",
                        "answer": False,
                    },
                ],
            },
        },
    }


def write_data_dir(path: Path, payload: Dict[str, Any]) -> Path:
    path.mkdir(parents=True, exist_ok=True)
    (path / "lessons-index.json").write_text(
        json.dumps(payload["index"]), encoding="utf-8"
    )
    for lesson_id, lesson in payload["lessons"].items():
        (path / f"lesson{lesson_id}.json").write_text(json.dumps(lesson), encoding="utf-8")
    return path


@pytest.fixture
def data_dir(tmp_path, lessons_payload) -> Path:
    return write_data_dir(tmp_path / "data", lessons_payload)


@pytest.fixture
def repository(data_dir) -> LessonRepository:
    return LessonRepository(data_dir)
