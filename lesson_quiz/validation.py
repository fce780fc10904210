from __future__ import annotations

from typing import Any, Mapping

from .models import QuestionType

_VALID_TYPES = {t.value for t in QuestionType}


def _is_int(value: Any) -> bool:
    # bool is a subclass of int, but `true` is not a valid id
    return isinstance(value, int) and not isinstance(value, bool)


def _is_str_list(value: Any) -> bool:
    return isinstance(value, list) and all(isinstance(item, str) for item in value)


def validate_question(data: Any) -> bool:
    """Check that a raw JSON object has the shape of a question."""
    if not isinstance(data, Mapping):
        return False

    if (
        not _is_int(data.get("id"))
        or not isinstance(data.get("question"), str)
        or not isinstance(data.get("type"), str)
        or not isinstance(data.get("answer"), (str, bool))
    ):
        return False

    if data["type"] not in _VALID_TYPES:
        return False

    for key in ("options", "synonyms"):
        if key in data and not _is_str_list(data[key]):
            return False
    if "explanation" in data and not isinstance(data["explanation"], str):
        return False

    return True


def validate_questions(data: Any) -> bool:
    if not isinstance(data, list):
        return False
    return all(validate_question(item) for item in data)
