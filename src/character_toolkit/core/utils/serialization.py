"""
Serialization Utilities

JSON in and out of the engine for API collaborators.

Answers arrive as a list of {"questionId", "selectedOptionId"} objects
(snake_case keys accepted too). Results leave as plain dicts built from
each model's to_dict(); enum members become their string values.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Iterable, List, Union

from ..models.questions import Answer
from ..models.results import AnswerValidation, CharacterResult, PartialCharacterResult


# ─────────────────────────────────────────────────────────────────────────────
# Answers
# ─────────────────────────────────────────────────────────────────────────────

def answers_from_payload(payload: Iterable[dict[str, Any]]) -> List[Answer]:
    """
    Decode a list of answer objects, preserving order.

    Order matters: later answers for the same question win when scored.

    Raises:
        ValueError: If an entry is not an object or lacks an id
    """
    answers = []
    for i, entry in enumerate(payload):
        if not isinstance(entry, dict):
            raise ValueError(f"Answer {i} must be an object, got {type(entry).__name__}")
        answers.append(Answer.from_dict(entry))
    return answers


def answers_to_payload(answers: Iterable[Answer]) -> List[dict[str, str]]:
    return [a.to_dict() for a in answers]


def load_answers_json(path: Path) -> List[Answer]:
    """
    Load answers from a JSON file.

    The file holds either a list of answers or {"answers": [...]}.

    Raises:
        ValueError: If the structure is not recognized
    """
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)
    if isinstance(data, dict):
        data = data.get("answers")
    if not isinstance(data, list):
        raise ValueError(f"Expected a list of answers in {path}")
    return answers_from_payload(data)


def save_answers_json(answers: Iterable[Answer], path: Path) -> None:
    with open(path, "w", encoding="utf-8") as f:
        json.dump({"answers": answers_to_payload(answers)}, f, indent=2)


# ─────────────────────────────────────────────────────────────────────────────
# Results
# ─────────────────────────────────────────────────────────────────────────────

def character_result_to_json(
    result: Union[CharacterResult, PartialCharacterResult, AnswerValidation],
    *,
    indent: int | None = 2,
) -> str:
    """Serialize a result (full, partial or validation report) to a JSON string."""
    return json.dumps(result.to_dict(), indent=indent)
