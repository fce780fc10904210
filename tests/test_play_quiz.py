from __future__ import annotations

import argparse
from typing import Iterable, List

from lesson_quiz import Lesson, LessonBrowser, LocalLessonSource, QuizPhase
from play_quiz import build_source, choose_lesson, main, play_lesson


class Script:
    """Feeds canned answers to the quiz loop and records everything it prints."""

    def __init__(self, answers: Iterable[str]) -> None:
        self.answers = list(answers)
        self.output: List[str] = []

    def read(self, prompt: str) -> str:
        return self.answers.pop(0)

    def write(self, text: str) -> None:
        self.output.append(text)

    @property
    def text(self) -> str:
        return "\n".join(self.output)


def test_play_lesson_perfect_score(sample_questions) -> None:
    lesson = Lesson(id=1, title="Demo", description="", level="A2", questions=tuple(sample_questions))
    # option 3 is Paris; "f" is false; blank first then "is"; Enter after each feedback; no retry
    script = Script(["3", "", "f", "", "", "is", "", "n"])
    session = play_lesson(lesson, read=script.read, write=script.write)

    assert session.phase == QuizPhase.COMPLETED
    assert session.state.score == 3
    assert "Selecciona una respuesta para continuar" in script.text
    assert "Pregunta 1 de 3" in script.text
    assert "¡Excelente trabajo!" in script.text
    assert script.answers == []


def test_play_lesson_restart(sample_questions) -> None:
    lesson = Lesson(id=1, title="Demo", description="", level="A2", questions=tuple(sample_questions[:1]))
    script = Script(["London", "", "s", "Paris", "", "n"])
    session = play_lesson(lesson, read=script.read, write=script.write)

    assert session.state.score == 1
    assert "Sigue practicando" in script.text
    assert "Incorrecto. La respuesta correcta es: Paris" in script.text


def test_choose_lesson(repository) -> None:
    browser = LessonBrowser(LocalLessonSource(repository))
    browser.fetch_lessons()
    script = Script(["abc", "9", "2"])
    lesson = choose_lesson(browser, read=script.read, write=script.write)

    assert lesson is not None and lesson.id == 2
    assert "Escribe el número de la lección." in script.text
    assert "Error al cargar la lección 9" in script.text


def test_choose_lesson_quit(repository) -> None:
    browser = LessonBrowser(LocalLessonSource(repository))
    browser.fetch_lessons()
    assert choose_lesson(browser, read=Script(["q"]).read, write=lambda _: None) is None


def test_main_unknown_lesson(data_dir, capsys) -> None:
    code = main(["--local", "--data-dir", str(data_dir), "--lesson", "9"])
    assert code == 1
    assert "Error al cargar la lección 9" in capsys.readouterr().out


def test_data_dir_reads_local_files(data_dir) -> None:
    args = argparse.Namespace(api_url=None, local=False, data_dir=str(data_dir), lesson=None)
    source = build_source(args)
    assert isinstance(source, LocalLessonSource)
    assert [m.id for m in source.get_lessons_metadata()] == [1, 2]


def test_main_data_dir_without_local_flag(data_dir, capsys) -> None:
    code = main(["--data-dir", str(data_dir), "--lesson", "9"])
    assert code == 1
    assert "Error al cargar la lección 9" in capsys.readouterr().out
