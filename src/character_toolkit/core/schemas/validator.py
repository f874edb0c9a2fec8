"""
Schema Validation Utilities

Validates the two static data files the engine consumes: the question
bank and the branch x alignment class table.

Basic checks always run and cover every shape constraint the scorers
rely on. ``strict=True`` additionally validates against the bundled JSON
Schema documents. Any violation fails fast with ValidationError; the
static data is configuration, not user input.
"""

from __future__ import annotations

import json
from collections import Counter
from pathlib import Path
from typing import Any

import jsonschema

from ..models.questions import MAX_OPTIONS, MIN_OPTIONS
from ..models.traits import (
    ALIGNMENT_ORDER,
    ATTRIBUTE_ORDER,
    RACE_ORDER,
    QuestionCategory,
)


# Schema version constants
QUESTION_BANK_SCHEMA_VERSION = 1
CLASS_TABLE_SCHEMA_VERSION = 1

# Expected battery shape
QUESTIONS_PER_ATTRIBUTE = 5
ALIGNMENT_QUESTION_COUNT = 6
RACE_QUESTION_COUNT = 6

_AXES = ("lawful", "chaotic", "good", "evil")
_ATTRIBUTE_CODES = {a.code for a in ATTRIBUTE_ORDER}
_RACE_TAGS = {r.value for r in RACE_ORDER}


# Load schemas lazily
_SCHEMAS: dict[str, dict] = {}


def _load_schema(name: str) -> dict:
    """Load a schema from the schemas directory."""
    if name not in _SCHEMAS:
        schema_path = Path(__file__).parent / f"{name}.schema.json"
        if not schema_path.exists():
            raise FileNotFoundError(f"Schema not found: {schema_path}")
        with open(schema_path, "r", encoding="utf-8") as f:
            _SCHEMAS[name] = json.load(f)
    return _SCHEMAS[name]


class ValidationError(Exception):
    """Raised when static data fails validation."""

    def __init__(self, message: str, path: str = "", errors: list[str] | None = None):
        super().__init__(message)
        self.path = path
        self.errors = errors or []


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _run_json_schema(data: dict[str, Any], schema_name: str) -> None:
    schema = _load_schema(schema_name)
    try:
        jsonschema.validate(data, schema)
    except jsonschema.ValidationError as e:
        raise ValidationError(
            f"Schema validation failed: {e.message}",
            path=".".join(str(p) for p in e.absolute_path),
            errors=[e.message],
        )


# ─────────────────────────────────────────────────────────────────────────────
# Question Bank
# ─────────────────────────────────────────────────────────────────────────────

def validate_question_bank(
    data: dict[str, Any],
    *,
    strict: bool = False,
    require_full_battery: bool = True,
    max_option_score: int = 4,
) -> None:
    """
    Validate question bank data.

    Args:
        data: Parsed question bank JSON
        strict: If True, also validate against the JSON Schema
        require_full_battery: Enforce 5 questions per attribute,
            6 alignment and 6 race questions
        max_option_score: Upper bound for attribute option scores

    Raises:
        ValidationError: If data is invalid
    """
    required = ["schema_version", "questions"]
    missing = [f for f in required if f not in data]
    if missing:
        raise ValidationError(
            f"Missing required fields: {missing}",
            path="",
            errors=[f"Missing field: {f}" for f in missing],
        )

    version = data.get("schema_version")
    if version != QUESTION_BANK_SCHEMA_VERSION:
        raise ValidationError(
            f"Unsupported question bank schema version: {version} "
            f"(expected {QUESTION_BANK_SCHEMA_VERSION})",
            path="schema_version",
        )

    questions = data["questions"]
    if not isinstance(questions, list):
        raise ValidationError("questions must be a list", path="questions")

    seen: set[str] = set()
    for i, question in enumerate(questions):
        path = f"questions[{i}]"
        _validate_question(question, path, max_option_score)
        if question["id"] in seen:
            raise ValidationError(
                f"Duplicate question id: {question['id']!r}",
                path=f"{path}.id",
            )
        seen.add(question["id"])

    if require_full_battery:
        _validate_battery_shape(questions)

    if strict:
        _run_json_schema(data, "question_bank")


def _validate_question(data: Any, path: str, max_option_score: int) -> None:
    """Validate a single question record."""
    if not isinstance(data, dict):
        raise ValidationError("question must be an object", path=path)

    required = ["id", "category", "options"]
    missing = [f for f in required if f not in data]
    if missing:
        raise ValidationError(
            f"Question missing required fields: {missing}",
            path=path,
            errors=[f"Missing field: {f}" for f in missing],
        )

    if not isinstance(data["id"], str) or not data["id"]:
        raise ValidationError(f"Invalid question id: {data['id']!r}", path=f"{path}.id")

    category = data["category"]
    if category not in {c.value for c in QuestionCategory}:
        raise ValidationError(f"Invalid category: {category!r}", path=f"{path}.category")

    attribute = data.get("attribute")
    if category == QuestionCategory.ATTRIBUTE.value:
        if attribute not in _ATTRIBUTE_CODES:
            raise ValidationError(
                f"Invalid attribute code: {attribute!r}",
                path=f"{path}.attribute",
            )
    elif attribute is not None:
        raise ValidationError(
            f"{category} questions must not carry an attribute",
            path=f"{path}.attribute",
        )

    options = data["options"]
    if not isinstance(options, list) or not (MIN_OPTIONS <= len(options) <= MAX_OPTIONS):
        raise ValidationError(
            f"Question {data['id']!r} must have {MIN_OPTIONS}-{MAX_OPTIONS} options",
            path=f"{path}.options",
        )

    option_ids = [o.get("id") if isinstance(o, dict) else None for o in options]
    duplicates = [oid for oid, n in Counter(option_ids).items() if n > 1]
    if duplicates:
        raise ValidationError(
            f"Duplicate option ids in {data['id']!r}: {duplicates}",
            path=f"{path}.options",
        )

    for j, option in enumerate(options):
        _validate_option(option, category, f"{path}.options[{j}]", max_option_score)


def _validate_option(data: Any, category: str, path: str, max_option_score: int) -> None:
    """Validate the weights of one option against its question category."""
    if not isinstance(data, dict):
        raise ValidationError("option must be an object", path=path)
    if not isinstance(data.get("id"), str) or not data["id"]:
        raise ValidationError(f"Invalid option id: {data.get('id')!r}", path=f"{path}.id")

    has_axes = any(axis in data for axis in _AXES)

    if category == QuestionCategory.ATTRIBUTE.value:
        score = data.get("score")
        if not _is_int(score) or not (0 <= score <= max_option_score):
            raise ValidationError(
                f"Invalid score: {score!r} (must be integer 0-{max_option_score})",
                path=f"{path}.score",
            )
        if has_axes or "race" in data:
            raise ValidationError(
                "attribute options carry only a score",
                path=path,
            )

    elif category == QuestionCategory.ALIGNMENT.value:
        for axis in _AXES:
            value = data.get(axis, 0)
            if not _is_int(value) or value < 0:
                raise ValidationError(
                    f"Invalid {axis} weight: {value!r} (must be non-negative integer)",
                    path=f"{path}.{axis}",
                )
        if "score" in data or "race" in data:
            raise ValidationError(
                "alignment options carry only axis weights",
                path=path,
            )

    else:
        race = data.get("race")
        if race not in _RACE_TAGS:
            raise ValidationError(f"Invalid race tag: {race!r}", path=f"{path}.race")
        if has_axes or "score" in data:
            raise ValidationError("race options carry only a race tag", path=path)

    tags = data.get("tags", [])
    if not isinstance(tags, list) or not all(isinstance(t, str) for t in tags):
        raise ValidationError("tags must be a list of strings", path=f"{path}.tags")


def _validate_battery_shape(questions: list[dict[str, Any]]) -> None:
    """Check the 6x5 attribute / 6 alignment / 6 race partition."""
    per_attribute = Counter(
        q.get("attribute") for q in questions
        if q["category"] == QuestionCategory.ATTRIBUTE.value
    )
    problems = [
        f"{code}: {per_attribute.get(code, 0)} questions (expected {QUESTIONS_PER_ATTRIBUTE})"
        for code in sorted(_ATTRIBUTE_CODES)
        if per_attribute.get(code, 0) != QUESTIONS_PER_ATTRIBUTE
    ]
    categories = Counter(q["category"] for q in questions)
    if categories.get(QuestionCategory.ALIGNMENT.value, 0) != ALIGNMENT_QUESTION_COUNT:
        problems.append(
            f"alignment: {categories.get('alignment', 0)} questions "
            f"(expected {ALIGNMENT_QUESTION_COUNT})"
        )
    if categories.get(QuestionCategory.RACE.value, 0) != RACE_QUESTION_COUNT:
        problems.append(
            f"race: {categories.get('race', 0)} questions (expected {RACE_QUESTION_COUNT})"
        )
    if problems:
        raise ValidationError(
            f"Question bank does not match the expected battery: {problems}",
            path="questions",
            errors=problems,
        )


# ─────────────────────────────────────────────────────────────────────────────
# Class Table
# ─────────────────────────────────────────────────────────────────────────────

def validate_class_table(data: dict[str, Any], *, strict: bool = False) -> None:
    """
    Validate the structure of class table data.

    Only the structure is checked here (known keys, string class ids).
    Completeness over every branch x alignment pair is enforced when the
    ClassTable is built, so a table can never exist half-filled.

    Args:
        data: Parsed class table JSON
        strict: If True, also validate against the JSON Schema

    Raises:
        ValidationError: If data is invalid
    """
    required = ["schema_version", "attribute_to_branch", "classes"]
    missing = [f for f in required if f not in data]
    if missing:
        raise ValidationError(
            f"Missing required fields: {missing}",
            errors=[f"Missing field: {f}" for f in missing],
        )

    version = data.get("schema_version")
    if version != CLASS_TABLE_SCHEMA_VERSION:
        raise ValidationError(
            f"Unsupported class table schema version: {version} "
            f"(expected {CLASS_TABLE_SCHEMA_VERSION})",
            path="schema_version",
        )

    mapping = data["attribute_to_branch"]
    if not isinstance(mapping, dict):
        raise ValidationError("attribute_to_branch must be a dict", path="attribute_to_branch")
    known_attributes = {a.value for a in ATTRIBUTE_ORDER}
    for attribute, branch in mapping.items():
        if attribute not in known_attributes:
            raise ValidationError(
                f"Unknown attribute: {attribute!r}",
                path=f"attribute_to_branch.{attribute}",
            )
        if not isinstance(branch, str):
            raise ValidationError(
                f"Branch must be a string: {branch!r}",
                path=f"attribute_to_branch.{attribute}",
            )

    classes = data["classes"]
    if not isinstance(classes, dict):
        raise ValidationError("classes must be a dict", path="classes")
    known_alignments = {a.value for a in ALIGNMENT_ORDER}
    for branch, row in classes.items():
        if not isinstance(row, dict):
            raise ValidationError(f"Row for {branch!r} must be a dict", path=f"classes.{branch}")
        for alignment, class_id in row.items():
            if alignment not in known_alignments:
                raise ValidationError(
                    f"Unknown alignment: {alignment!r}",
                    path=f"classes.{branch}.{alignment}",
                )
            if not isinstance(class_id, str) or not class_id:
                raise ValidationError(
                    f"Class id must be a non-empty string: {class_id!r}",
                    path=f"classes.{branch}.{alignment}",
                )

    if strict:
        _run_json_schema(data, "class_table")
