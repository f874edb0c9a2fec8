"""
Module: bank.loader

Purpose:
    Load the versioned static data (question bank and class table) from
    JSON with full validation. The bundled defaults are constructed once
    per process and shared read-only afterwards.

Key Functions:
    - load_question_bank(): Parse + validate + build a QuestionBank
    - load_class_table(): Parse + validate + build a ClassTable
    - default_question_bank(): Cached bundled bank
    - default_class_table(): Cached bundled table

Key Classes:
    - LoaderError: Exception for unreadable or unparseable data files

Dependencies:
    - json, pathlib, functools (std)
    - character_toolkit.core.schemas.validator

Used By:
    - scoring.* (defaults)
    - scripts/score_answers.py
"""

from __future__ import annotations

import json
import logging
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, Optional

from character_toolkit.core.models import Question
from character_toolkit.core.schemas.validator import (
    validate_class_table,
    validate_question_bank,
)

from .class_table import ClassTable
from .question_bank import QuestionBank

logger = logging.getLogger(__name__)

DATA_DIR = Path(__file__).resolve().parent / "data"
QUESTION_BANK_PATH = DATA_DIR / "question_bank.json"
CLASS_TABLE_PATH = DATA_DIR / "class_table.json"


class LoaderError(Exception):
    """Error reading static data from disk."""
    pass


def _read_json(path: Path) -> Dict[str, Any]:
    if not path.exists():
        raise LoaderError(f"Data file does not exist: {path}")
    try:
        with open(path, "r", encoding="utf-8") as f:
            payload = json.load(f)
    except json.JSONDecodeError as e:
        raise LoaderError(f"Invalid JSON in {path}: {e}") from e
    if not isinstance(payload, dict):
        raise LoaderError(f"Expected a JSON object in {path}")
    return payload


# ─────────────────────────────────────────────────────────────────────────────
# Question Bank
# ─────────────────────────────────────────────────────────────────────────────

def question_bank_from_dict(
    data: Dict[str, Any],
    *,
    strict: bool = False,
    require_full_battery: bool = True,
    max_option_score: int = 4,
) -> QuestionBank:
    """
    Validate question bank data and build the QuestionBank.

    Args:
        data: Parsed question bank JSON
        strict: Also validate against the JSON Schema
        require_full_battery: Enforce the 30/6/6 question partition
        max_option_score: Upper bound for attribute option scores

    Returns:
        QuestionBank with questions in file order; the bank carries
        max_option_score so scoring normalizes against the same bound

    Raises:
        ValidationError: If data is invalid
    """
    validate_question_bank(
        data,
        strict=strict,
        require_full_battery=require_full_battery,
        max_option_score=max_option_score,
    )
    questions = tuple(Question.from_dict(q) for q in data["questions"])
    return QuestionBank(
        questions=questions,
        version=data.get("bank_version", ""),
        max_option_score=max_option_score,
    )


def load_question_bank(
    path: Optional[Path] = None,
    *,
    strict: bool = False,
    require_full_battery: bool = True,
    max_option_score: int = 4,
) -> QuestionBank:
    """
    Load a question bank from JSON.

    Args:
        path: JSON file, defaults to the bundled question_bank.json
        strict: Also validate against the JSON Schema
        require_full_battery: Enforce the 30/6/6 question partition
        max_option_score: Upper bound for attribute option scores

    Returns:
        Validated QuestionBank

    Raises:
        LoaderError: If the file is missing or not valid JSON
        ValidationError: If the data violates the bank constraints

    Example:
        >>> bank = load_question_bank()
        >>> len(bank)
        42
    """
    path = path or QUESTION_BANK_PATH
    bank = question_bank_from_dict(
        _read_json(path),
        strict=strict,
        require_full_battery=require_full_battery,
        max_option_score=max_option_score,
    )
    logger.info(f"Loaded question bank {bank.version or '(unversioned)'} with {len(bank)} questions from {path.name}")
    return bank


# ─────────────────────────────────────────────────────────────────────────────
# Class Table
# ─────────────────────────────────────────────────────────────────────────────

def load_class_table(path: Optional[Path] = None, *, strict: bool = False) -> ClassTable:
    """
    Load the branch x alignment class table from JSON.

    Raises:
        LoaderError: If the file is missing or not valid JSON
        ValidationError: If the structure is invalid
        ClassTableError: If any branch x alignment pair is missing
    """
    path = path or CLASS_TABLE_PATH
    data = _read_json(path)
    validate_class_table(data, strict=strict)
    table = ClassTable.from_dict(data)
    logger.info(f"Loaded class table {table.version or '(unversioned)'} from {path.name}")
    return table


# ─────────────────────────────────────────────────────────────────────────────
# Construct-once defaults
# ─────────────────────────────────────────────────────────────────────────────

@lru_cache(maxsize=None)
def default_question_bank() -> QuestionBank:
    """Bundled question bank, loaded and validated on first use."""
    return load_question_bank(strict=True)


@lru_cache(maxsize=None)
def default_class_table() -> ClassTable:
    """Bundled class table, loaded and checked for completeness on first use."""
    return load_class_table(strict=True)
