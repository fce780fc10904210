from __future__ import annotations

"""
Play the English practice quiz in a terminal.

The lessons come from the quiz HTTP service (`service.py`), or straight from
the static JSON files with `--local` (or `--data-dir`).

Usage:
    python play_quiz.py                      # service at LESSONS_API_URL
    python play_quiz.py --api-url http://localhost:8000
    python play_quiz.py --local --lesson 2
    python play_quiz.py --data-dir path/to/lessons
"""

import argparse
import logging
import random
from typing import Callable, Optional

from lesson_quiz import (
    LessonBrowser,
    LessonClient,
    LessonRepository,
    LocalLessonSource,
    QuizSession,
    get_settings,
    setup_logger,
)
from lesson_quiz.config import DEFAULT_PASS_THRESHOLD
from lesson_quiz.client import LessonSource
from lesson_quiz.models import Lesson
from lesson_quiz.session import QuizPhase
from lesson_quiz.views import (
    interpret_input,
    render_error,
    render_feedback,
    render_lesson_menu,
    render_progress_bar,
    render_question,
    render_result,
)

Reader = Callable[[str], str]
Writer = Callable[[str], None]

logger = logging.getLogger("lesson_quiz.play")


def play_lesson(
    lesson: Lesson,
    read: Reader = input,
    write: Writer = print,
    pass_threshold: int = DEFAULT_PASS_THRESHOLD,
) -> QuizSession:
    """Run one lesson until the learner leaves it; returns the last session."""
    logger.debug("Starting lesson %s (%s questions)", lesson.id, len(lesson.questions))
    session = QuizSession(lesson.questions, pass_threshold=pass_threshold)

    while True:
        write("")
        write(f"== {lesson.title} ==")

        while session.phase != QuizPhase.COMPLETED:
            question = session.current_question
            if question is None:
                session.complete()
                break

            write(render_progress_bar(session.state.current_question_index + 1, len(session.state.questions)))
            write(render_question(question))

            while not session.can_submit:
                raw = read("> ")
                session.set_user_answer(interpret_input(question, raw))
                if not session.is_answer_valid:
                    write("Selecciona una respuesta para continuar")

            session.submit_answer()
            if session.error:
                write(render_error("Error en el quiz", session.error))
                if read("¿Reintentar? (s/n) ").strip().lower() == "s":
                    session.reset()
                    continue
                return session

            write(render_feedback(session.state.feedback or "", session.state.is_correct))
            read("Enter para continuar ")
            session.next_question()

        write("")
        write(render_result(session.result()))
        choice = read("¿Intentar de nuevo? (s/n) ").strip().lower()
        if choice != "s":
            return session
        session.reset()


def choose_lesson(browser: LessonBrowser, read: Reader = input, write: Writer = print) -> Optional[Lesson]:
    """Show the lesson menu and load the picked lesson; None when the learner quits."""
    while True:
        if browser.error:
            write(render_error("Error al cargar las lecciones", browser.error))
            if read("¿Intentar de nuevo? (s/n) ").strip().lower() != "s":
                return None
            browser.refetch_lessons()
            continue

        write(render_lesson_menu(browser.lessons, is_loading=browser.is_loading))
        raw = read("Elige una lección (q para salir): ").strip().lower()
        if raw in {"q", "quit", "salir"}:
            return None
        if not raw.isdigit():
            write("Escribe el número de la lección.")
            continue

        lesson = browser.select_lesson(int(raw))
        if lesson is not None:
            return lesson
        write(render_error("Error al cargar la lección", browser.lesson_error or ""))
        browser.clear_selected_lesson()


def build_source(args: argparse.Namespace) -> LessonSource:
    settings = get_settings()
    if args.local or args.data_dir:
        return LocalLessonSource(
            LessonRepository(args.data_dir or settings.data_dir),
            shuffle=settings.shuffle,
            rng=random.Random(settings.seed),
        )
    return LessonClient(args.api_url or settings.api_url)


def main(argv: Optional[list[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="English A2 practice quiz")
    parser.add_argument("--api-url", default=None, help="Base URL of the quiz service")
    parser.add_argument("--local", action="store_true", help="Read lessons from the static files")
    parser.add_argument("--data-dir", default=None, help="Lesson data directory (implies --local)")
    parser.add_argument("--lesson", type=int, default=None, help="Start this lesson directly")
    args = parser.parse_args(argv)

    settings = get_settings()
    setup_logger("lesson_quiz", settings)

    source = build_source(args)
    browser = LessonBrowser(source)
    browser.fetch_lessons()

    try:
        if args.lesson is not None:
            lesson = browser.select_lesson(args.lesson)
            if lesson is None:
                print(render_error("Error al cargar la lección", browser.lesson_error or ""))
                return 1
            play_lesson(lesson, pass_threshold=settings.pass_threshold)
            return 0

        while True:
            lesson = choose_lesson(browser)
            if lesson is None:
                return 0
            play_lesson(lesson, pass_threshold=settings.pass_threshold)
            browser.clear_selected_lesson()
    except (KeyboardInterrupt, EOFError):
        print()
        return 0
    finally:
        if isinstance(source, LessonClient):
            source.close()


if __name__ == "__main__":
    raise SystemExit(main())
