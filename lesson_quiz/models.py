from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, Mapping, Union


class QuestionType(str, Enum):
    MULTIPLE_CHOICE = "multiple-choice"
    TRANSLATION = "translation"
    TRUE_FALSE = "true-false"
    FILL_IN_THE_BLANK = "fill-in-the-blank"


class Difficulty(str, Enum):
    BEGINNER = "beginner"
    INTERMEDIATE = "intermediate"
    ADVANCED = "advanced"


AnswerType = Union[str, bool]

FREE_TEXT_TYPES = (QuestionType.TRANSLATION, QuestionType.FILL_IN_THE_BLANK)


@dataclass(frozen=True)
class Question:
    """
    Represents a single quiz item.

    - `id`: numeric identifier, unique inside its lesson
    - `type`: one of the four question types
    - `question`: the prompt to show to the learner
    - `options`: choices for multiple-choice questions
    - `answer`: expected answer; a bool for true/false questions
    - `synonyms`: other accepted answers for free-text questions
    - `explanation`: shown after a wrong free-text answer
    """

    id: int
    type: QuestionType
    question: str
    answer: AnswerType
    options: tuple[str, ...] | None = None
    synonyms: tuple[str, ...] | None = None
    explanation: str | None = None

    @property
    def accepted_answers(self) -> list[str]:
        if isinstance(self.answer, bool):
            return []
        return [self.answer, *(self.synonyms or ())]

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Question":
        options = data.get("options")
        synonyms = data.get("synonyms")
        return cls(
            id=data["id"],
            type=QuestionType(data["type"]),
            question=data["question"],
            answer=data["answer"],
            options=tuple(options) if options is not None else None,
            synonyms=tuple(synonyms) if synonyms is not None else None,
            explanation=data.get("explanation"),
        )

    def to_dict(self) -> dict:
        out: dict[str, Any] = {
            "id": self.id,
            "type": self.type.value,
            "question": self.question,
            "answer": self.answer,
        }
        if self.options is not None:
            out["options"] = list(self.options)
        if self.synonyms is not None:
            out["synonyms"] = list(self.synonyms)
        if self.explanation is not None:
            out["explanation"] = self.explanation
        return out


@dataclass(frozen=True)
class Lesson:
    id: int
    title: str
    description: str
    level: str
    questions: tuple[Question, ...] = ()

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Lesson":
        return cls(
            id=data["id"],
            title=data["title"],
            description=data["description"],
            level=data["level"],
            questions=tuple(Question.from_dict(q) for q in data.get("questions", [])),
        )

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "title": self.title,
            "description": self.description,
            "level": self.level,
            "questions": [q.to_dict() for q in self.questions],
        }


@dataclass(frozen=True)
class LessonMetadata:
    """Lightweight summary of a lesson, as listed in the lessons index."""

    id: int
    title: str
    description: str
    level: str
    questions_count: int
    difficulty: Difficulty
    tags: tuple[str, ...] = ()

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "LessonMetadata":
        return cls(
            id=data["id"],
            title=data["title"],
            description=data["description"],
            level=data["level"],
            questions_count=data["questionsCount"],
            difficulty=Difficulty(data["difficulty"]),
            tags=tuple(data.get("tags", [])),
        )

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "title": self.title,
            "description": self.description,
            "level": self.level,
            "questionsCount": self.questions_count,
            "difficulty": self.difficulty.value,
            "tags": list(self.tags),
        }


@dataclass(frozen=True)
class LessonsIndex:
    lessons: tuple[LessonMetadata, ...] = ()

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "LessonsIndex":
        return cls(lessons=tuple(LessonMetadata.from_dict(m) for m in data["lessons"]))

    def to_dict(self) -> dict:
        return {"lessons": [m.to_dict() for m in self.lessons]}


@dataclass(frozen=True)
class QuizState:
    """Snapshot of a running quiz; `QuizSession` replaces it on every change."""

    questions: tuple[Question, ...] = ()
    current_question_index: int = 0
    user_answer: str = ""
    score: int = 0
    is_completed: bool = False
    feedback: str | None = None
    is_correct: bool = False


@dataclass(frozen=True)
class AnswerValidationResult:
    is_valid: bool
    is_correct: bool
    feedback: str


@dataclass(frozen=True)
class QuizResult:
    score: int
    total_questions: int
    percentage: int
    passed: bool
    completed_at: datetime = field(default_factory=datetime.now)


@dataclass(frozen=True)
class QuizStatistics:
    correct_answers: int
    total_questions: int
    accuracy: int
    time_spent: float | None = None  # seconds
