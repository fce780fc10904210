from __future__ import annotations

from lesson_quiz import Difficulty, LessonMetadata, Question, QuestionType, QuizResult
from lesson_quiz.views import (
    difficulty_label,
    interpret_input,
    render_feedback,
    render_lesson_menu,
    render_progress_bar,
    render_question,
    render_result,
    result_message,
)


def _meta(**overrides) -> LessonMetadata:
    values = dict(
        id=1,
        title="Basic Conversations",
        description="Saludos",
        level="A2",
        questions_count=8,
        difficulty=Difficulty.BEGINNER,
        tags=("conversation", "basics"),
    )
    values.update(overrides)
    return LessonMetadata(**values)


def test_difficulty_labels() -> None:
    assert difficulty_label(Difficulty.BEGINNER) == "Básico"
    assert difficulty_label("intermediate") == "Intermedio"
    assert difficulty_label(Difficulty.ADVANCED) == "Avanzado"
    assert difficulty_label("expert") == "Desconocido"


def test_lesson_menu() -> None:
    text = render_lesson_menu([_meta(), _meta(id=2, title="Grammar", tags=("a", "b", "c", "d", "e"))])
    assert "[1] Basic Conversations  (Básico)" in text
    assert "8 preguntas" in text
    assert "#a #b #c +2" in text
    assert "#d" not in text


def test_lesson_menu_states() -> None:
    assert render_lesson_menu([], is_loading=True) == "Cargando lecciones..."
    assert render_lesson_menu([]) == "No hay lecciones disponibles."


def test_progress_bar() -> None:
    text = render_progress_bar(1, 4)
    assert text.startswith("Pregunta 1 de 4  25%")
    assert text.count("#") == 8  # round(30 * 0.25)


def test_render_multiple_choice_and_interpret() -> None:
    q = Question(
        id=1,
        type=QuestionType.MULTIPLE_CHOICE,
        question="Pick one",
        options=("went", "gone"),
        answer="went",
    )
    text = render_question(q)
    assert "1) went" in text
    assert "2) gone" in text
    assert interpret_input(q, "2") == "gone"
    assert interpret_input(q, "9") == "9"
    assert interpret_input(q, "went") == "went"


def test_interpret_true_false() -> None:
    q = Question(id=2, type=QuestionType.TRUE_FALSE, question="?", answer=True)
    assert "v) Verdadero" in render_question(q)
    assert interpret_input(q, "v") == "true"
    assert interpret_input(q, "F") == "false"
    assert interpret_input(q, "true") == "true"


def test_feedback() -> None:
    assert render_feedback("¡Correcto! 🎉", True) == "✓ ¡Correcto! 🎉"
    assert render_feedback("Incorrecto.", False).startswith("✗")


def test_result_tiers() -> None:
    assert result_message(80) == "¡Excelente trabajo!"
    assert result_message(60) == "¡Buen intento!"
    assert result_message(59) == "Sigue practicando"


def test_render_result() -> None:
    text = render_result(QuizResult(score=3, total_questions=4, percentage=75, passed=True))
    assert "¡Cuestionario Completado!" in text
    assert "¡Buen intento!" in text
    assert "3 de 4 respuestas correctas" in text
    assert "Respuestas incorrectas: 1" in text
