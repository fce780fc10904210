from __future__ import annotations

import logging
import time
from dataclasses import replace
from enum import Enum
from typing import Callable, Iterable, Optional

from .answers import validate_answer
from .config import DEFAULT_PASS_THRESHOLD
from .models import Question, QuizResult, QuizState, QuizStatistics
from .utils import format_percentage

logger = logging.getLogger(__name__)

OnComplete = Callable[[int, int], None]


class QuizPhase(str, Enum):
    LOADING = "loading"
    ACTIVE = "active"
    FEEDBACK = "feedback"
    COMPLETED = "completed"


_TRANSITIONS: dict[QuizPhase, set[QuizPhase]] = {
    QuizPhase.LOADING: {QuizPhase.ACTIVE},
    QuizPhase.ACTIVE: {QuizPhase.ACTIVE, QuizPhase.FEEDBACK, QuizPhase.COMPLETED},
    QuizPhase.FEEDBACK: {QuizPhase.ACTIVE, QuizPhase.COMPLETED},
    QuizPhase.COMPLETED: {QuizPhase.ACTIVE},
}


class QuizStateError(RuntimeError):
    pass


def next_phase(current: QuizPhase, target: QuizPhase) -> QuizPhase:
    if target not in _TRANSITIONS[current]:
        raise QuizStateError(f"Cannot move quiz from {current.value} to {target.value}")
    return target


class QuizSession:
    """
    Drives one pass through a list of questions.

    Flow: loading -> active -> feedback -> (active ... ) -> completed.

    - `set_user_answer` stores the learner's current text; ignored once the answer was checked
    - `submit_answer` checks it and updates the score (once per question)
    - `next_question` advances, or completes the quiz on the last question
    - `reset` starts over with the same questions

    `on_complete(score, total)` is called once each time the quiz is completed.
    A session created without questions stays in the loading phase until
    `load` is called.
    """

    def __init__(
        self,
        questions: Optional[Iterable[Question]] = None,
        on_complete: Optional[OnComplete] = None,
        pass_threshold: int = DEFAULT_PASS_THRESHOLD,
    ) -> None:
        self.on_complete = on_complete
        self.pass_threshold = pass_threshold
        self.error: str | None = None
        self.is_loading = False
        self._phase = QuizPhase.LOADING
        self._state = QuizState()
        self._started_at = time.monotonic()
        self._completed_at: float | None = None
        if questions is not None:
            self.load(questions)

    @property
    def state(self) -> QuizState:
        return self._state

    @property
    def phase(self) -> QuizPhase:
        return self._phase

    @property
    def current_question(self) -> Question | None:
        idx = self._state.current_question_index
        if 0 <= idx < len(self._state.questions):
            return self._state.questions[idx]
        return None

    @property
    def is_answer_valid(self) -> bool:
        return len(self._state.user_answer.strip()) > 0

    @property
    def can_submit(self) -> bool:
        return (
            self.is_answer_valid
            and self._state.feedback is None
            and not self._state.is_completed
        )

    @property
    def is_last_question(self) -> bool:
        return self._state.current_question_index >= len(self._state.questions) - 1

    @property
    def progress(self) -> float:
        """Position of the current question as a percentage of the quiz."""
        total = len(self._state.questions)
        if total == 0:
            return 0.0
        return (self._state.current_question_index + 1) / total * 100

    def _move_to(self, target: QuizPhase) -> None:
        self._phase = next_phase(self._phase, target)

    def load(self, questions: Iterable[Question]) -> None:
        """Replace the question list and start from the first question."""
        self._phase = QuizPhase.LOADING
        self._state = QuizState(questions=tuple(questions))
        self.error = None
        self._started_at = time.monotonic()
        self._completed_at = None
        self._move_to(QuizPhase.ACTIVE)

    def set_user_answer(self, answer: str) -> None:
        # the score is only counted once per question
        if self._phase != QuizPhase.ACTIVE:
            return
        self._state = replace(self._state, user_answer=answer)

    def submit_answer(self) -> None:
        question = self.current_question
        if question is None or not self.can_submit:
            return

        self.is_loading = True
        try:
            validation = validate_answer(question, self._state.user_answer)
            self._state = replace(
                self._state,
                feedback=validation.feedback,
                is_correct=validation.is_correct,
                score=self._state.score + 1 if validation.is_correct else self._state.score,
            )
            self._move_to(QuizPhase.FEEDBACK)
        except (ValueError, TypeError, AttributeError) as exc:
            logger.error("Could not check answer for question %s: %s", question.id, exc)
            self.error = str(exc)
        finally:
            self.is_loading = False

    def next_question(self) -> None:
        if self._phase in (QuizPhase.LOADING, QuizPhase.COMPLETED):
            return
        if self.is_last_question:
            self.complete()
            return
        self._state = replace(
            self._state,
            current_question_index=self._state.current_question_index + 1,
            user_answer="",
            feedback=None,
            is_correct=False,
        )
        self._move_to(QuizPhase.ACTIVE)

    def complete(self) -> None:
        if self._phase in (QuizPhase.LOADING, QuizPhase.COMPLETED):
            return
        self._move_to(QuizPhase.COMPLETED)
        self._state = replace(self._state, is_completed=True)
        self._completed_at = time.monotonic()
        logger.info(
            "Quiz completed: %s/%s", self._state.score, len(self._state.questions)
        )
        if self.on_complete is not None:
            self.on_complete(self._state.score, len(self._state.questions))

    def reset(self) -> None:
        if self._phase == QuizPhase.LOADING:
            return
        self.load(self._state.questions)

    def result(self) -> QuizResult:
        total = len(self._state.questions)
        percentage = format_percentage(self._state.score, total)
        return QuizResult(
            score=self._state.score,
            total_questions=total,
            percentage=percentage,
            passed=percentage >= self.pass_threshold,
        )

    def statistics(self) -> QuizStatistics:
        end = self._completed_at if self._completed_at is not None else time.monotonic()
        total = len(self._state.questions)
        return QuizStatistics(
            correct_answers=self._state.score,
            total_questions=total,
            accuracy=format_percentage(self._state.score, total),
            time_spent=end - self._started_at,
        )
