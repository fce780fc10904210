from __future__ import annotations

import pytest

from lesson_quiz.validation import validate_question, validate_questions


def _valid() -> dict:
    return {"id": 1, "type": "translation", "question": "Traduce: casa", "answer": "house"}


def test_minimal_question_is_valid() -> None:
    assert validate_question(_valid())


def test_boolean_answer_is_valid() -> None:
    q = dict(_valid(), type="true-false", answer=False)
    assert validate_question(q)


@pytest.mark.parametrize("value", [None, "question", 3, ["id"]])
def test_non_mapping_is_rejected(value) -> None:
    assert not validate_question(value)


@pytest.mark.parametrize(
    "field,value",
    [
        ("id", "1"),
        ("id", True),
        ("question", None),
        ("type", 5),
        ("type", "essay"),
        ("answer", 42),
        ("answer", None),
    ],
)
def test_bad_required_field_is_rejected(field, value) -> None:
    q = dict(_valid(), **{field: value})
    assert not validate_question(q)


def test_missing_required_field_is_rejected() -> None:
    q = _valid()
    del q["answer"]
    assert not validate_question(q)


@pytest.mark.parametrize(
    "field,value",
    [
        ("options", "a,b"),
        ("synonyms", "home"),
        ("explanation", ["x"]),
        ("options", None),
        ("synonyms", [1]),
        ("options", ["a", 2]),
        ("synonyms", ["home", None]),
    ],
)
def test_bad_optional_field_is_rejected(field, value) -> None:
    q = dict(_valid(), **{field: value})
    assert not validate_question(q)


def test_optional_fields_accepted_when_well_formed() -> None:
    q = dict(_valid(), options=["house", "home"], synonyms=["home"], explanation="...")
    assert validate_question(q)


def test_validate_questions() -> None:
    assert validate_questions([])
    assert validate_questions([_valid(), dict(_valid(), id=2)])
    assert not validate_questions([_valid(), {"id": 2}])
    assert not validate_questions({"questions": []})
