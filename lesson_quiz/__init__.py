

from .models import (
    AnswerValidationResult,
    Difficulty,
    Lesson,
    LessonMetadata,
    LessonsIndex,
    Question,
    QuestionType,
    QuizResult,
    QuizState,
    QuizStatistics,
)
from .errors import (
    InvalidLessonDataError,
    LessonClientError,
    LessonDataError,
    LessonNotFoundError,
)
from .config import Settings, get_settings
from .logging_config import setup_logger
from .utils import shuffle_items
from .validation import validate_question, validate_questions
from .answers import validate_answer
from .repository import LessonRepository
from .session import QuizPhase, QuizSession
from .client import LessonClient, LocalLessonSource
from .browser import LessonBrowser

__all__ = [
    "AnswerValidationResult",
    "Difficulty",
    "Lesson",
    "LessonMetadata",
    "LessonsIndex",
    "Question",
    "QuestionType",
    "QuizResult",
    "QuizState",
    "QuizStatistics",
    "InvalidLessonDataError",
    "LessonClientError",
    "LessonDataError",
    "LessonNotFoundError",
    "Settings",
    "get_settings",
    "setup_logger",
    "shuffle_items",
    "validate_question",
    "validate_questions",
    "validate_answer",
    "LessonRepository",
    "QuizPhase",
    "QuizSession",
    "LessonClient",
    "LocalLessonSource",
    "LessonBrowser",
]
