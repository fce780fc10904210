from __future__ import annotations

"""
Text rendering for the terminal quiz.

Every function here is pure: it takes data and returns the string to print.
"""

from typing import Sequence

from .models import Difficulty, LessonMetadata, Question, QuestionType, QuizResult
from .utils import clamp, format_percentage

DIFFICULTY_LABELS = {
    Difficulty.BEGINNER: "Básico",
    Difficulty.INTERMEDIATE: "Intermedio",
    Difficulty.ADVANCED: "Avanzado",
}

MAX_TAGS_SHOWN = 3
BAR_WIDTH = 30

TRUE_FALSE_CHOICES = {"v": "true", "f": "false"}


def difficulty_label(difficulty: Difficulty | str) -> str:
    try:
        return DIFFICULTY_LABELS[Difficulty(difficulty)]
    except ValueError:
        return "Desconocido"


def _format_tags(tags: Sequence[str]) -> str:
    shown = [f"#{t}" for t in tags[:MAX_TAGS_SHOWN]]
    if len(tags) > MAX_TAGS_SHOWN:
        shown.append(f"+{len(tags) - MAX_TAGS_SHOWN}")
    return " ".join(shown)


def render_lesson_menu(lessons: Sequence[LessonMetadata], is_loading: bool = False) -> str:
    if is_loading:
        return "Cargando lecciones..."
    if not lessons:
        return "No hay lecciones disponibles."

    lines = ["English A2 Practice", "Mejora tu inglés con ejercicios interactivos", ""]
    for lesson in lessons:
        lines.append(f"[{lesson.id}] {lesson.title}  ({difficulty_label(lesson.difficulty)})")
        lines.append(f"    {lesson.description}")
        lines.append(f"    Nivel {lesson.level} · {lesson.questions_count} preguntas")
        if lesson.tags:
            lines.append(f"    {_format_tags(lesson.tags)}")
    return "\n".join(lines)


def _bar(percentage: float, width: int = BAR_WIDTH) -> str:
    filled = int(round(clamp(percentage, 0, 100) / 100 * width))
    return "[" + "#" * filled + "-" * (width - filled) + "]"


def render_progress_bar(current: int, total: int) -> str:
    percentage = format_percentage(current, total)
    return f"Pregunta {current} de {total}  {percentage}%\n{_bar(percentage)}"


def render_question(question: Question) -> str:
    lines = [question.question, ""]
    if question.type == QuestionType.MULTIPLE_CHOICE:
        for i, option in enumerate(question.options or (), start=1):
            lines.append(f"  {i}) {option}")
        lines.append("")
        lines.append("Elige el número de tu respuesta.")
    elif question.type == QuestionType.TRUE_FALSE:
        lines.append("  v) Verdadero")
        lines.append("  f) Falso")
    elif question.type == QuestionType.TRANSLATION:
        lines.append("Escribe tu traducción (Enter para enviar):")
    else:
        lines.append("Completa la oración (Enter para enviar):")
    return "\n".join(lines)


def interpret_input(question: Question, raw: str) -> str:
    """Map what the learner typed to the answer text the checker expects."""
    text = raw.strip()
    if question.type == QuestionType.MULTIPLE_CHOICE and text.isdigit():
        options = question.options or ()
        idx = int(text) - 1
        if 0 <= idx < len(options):
            return options[idx]
    if question.type == QuestionType.TRUE_FALSE:
        return TRUE_FALSE_CHOICES.get(text.lower(), text)
    return raw


def render_feedback(message: str, is_correct: bool) -> str:
    mark = "✓" if is_correct else "✗"
    return f"{mark} {message}"


def result_message(percentage: int) -> str:
    if percentage >= 80:
        return "¡Excelente trabajo!"
    if percentage >= 60:
        return "¡Buen intento!"
    return "Sigue practicando"


def render_result(result: QuizResult) -> str:
    wrong = result.total_questions - result.score
    return "\n".join(
        [
            "¡Cuestionario Completado!",
            result_message(result.percentage),
            "",
            f"{result.percentage}%",
            f"{result.score} de {result.total_questions} respuestas correctas",
            f"Respuestas incorrectas: {wrong}",
            f"Tu puntuación {result.score}/{result.total_questions}",
            _bar(result.percentage),
        ]
    )


def render_error(title: str, message: str) -> str:
    return f"⚠ {title}\n{message}"
