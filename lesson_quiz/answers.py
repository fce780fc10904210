from __future__ import annotations

from .models import AnswerValidationResult, Question, QuestionType

CORRECT_FEEDBACK = "¡Correcto! 🎉"
EMPTY_ANSWER_FEEDBACK = "Por favor, proporciona una respuesta."


def _normalize(text: str) -> str:
    return text.strip().lower()


def _bool_label(value: bool) -> str:
    return "Verdadero" if value else "Falso"


def validate_answer(question: Question, user_answer: str) -> AnswerValidationResult:
    """
    Check a learner's answer against a question.

    - true/false: the answer text "true" (any case) means True, anything else False
    - multiple-choice: case- and surrounding-whitespace-insensitive match
    - translation / fill-in-the-blank: same match against the answer or any synonym
    """
    if not user_answer.strip():
        return AnswerValidationResult(
            is_valid=False,
            is_correct=False,
            feedback=EMPTY_ANSWER_FEEDBACK,
        )

    if question.type == QuestionType.TRUE_FALSE:
        expected = (
            question.answer
            if isinstance(question.answer, bool)
            else _normalize(question.answer) == "true"
        )
        is_correct = (user_answer.lower() == "true") == expected
        feedback = (
            CORRECT_FEEDBACK
            if is_correct
            else f"Incorrecto. La respuesta correcta es: {_bool_label(expected)}"
        )

    elif question.type == QuestionType.MULTIPLE_CHOICE:
        expected_text = str(question.answer)
        is_correct = _normalize(user_answer) == _normalize(expected_text)
        feedback = (
            CORRECT_FEEDBACK
            if is_correct
            else f"Incorrecto. La respuesta correcta es: {expected_text}"
        )

    elif question.type in (QuestionType.TRANSLATION, QuestionType.FILL_IN_THE_BLANK):
        given = _normalize(user_answer)
        is_correct = any(_normalize(valid) == given for valid in question.accepted_answers)
        feedback = (
            CORRECT_FEEDBACK
            if is_correct
            else f"Incorrecto. Una respuesta correcta es: {question.answer}"
        )
        if question.explanation and not is_correct:
            feedback += f" {question.explanation}"

    else:
        raise ValueError(f"Tipo de pregunta no soportado: {question.type}")

    return AnswerValidationResult(is_valid=True, is_correct=is_correct, feedback=feedback)
