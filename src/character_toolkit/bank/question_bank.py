"""
Module: bank.question_bank

Purpose:
    Immutable catalog of questions partitioned into the attribute,
    alignment and race sets. Built once, read by every scoring call.

Key Classes:
    - QuestionBank: Indexed, read-only view over a tuple of Questions

Dependencies:
    - character_toolkit.core.models

Used By:
    - bank.loader
    - scoring.*
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import cached_property
from typing import Dict, Iterator, Optional, Tuple

from character_toolkit.core.models import (
    ATTRIBUTE_ORDER,
    AttributeName,
    Question,
    QuestionCategory,
)


@dataclass(frozen=True)
class QuestionBank:
    """
    Static question bank (immutable).

    Attributes:
        questions: All questions in bank order
        version: Version string of the bank data
        max_option_score: Highest score an attribute option may carry;
            sets the normalization denominator per answered question

    Invariants:
        - question ids are unique
        - max_option_score > 0
        - no attribute option scores above max_option_score

    Example:
        >>> bank = default_question_bank()
        >>> len(bank)
        42
        >>> [q.id for q in bank.attribute_questions(AttributeName.STRENGTH)][:2]
        ['STR-1', 'STR-2']
    """

    questions: Tuple[Question, ...]
    version: str = ""
    max_option_score: int = 4

    def __post_init__(self) -> None:
        ids = [q.id for q in self.questions]
        if len(set(ids)) != len(ids):
            raise ValueError("Question ids must be unique within a bank")
        if self.max_option_score <= 0:
            raise ValueError(f"max_option_score must be positive: {self.max_option_score}")
        over = [
            f"{q.id}/{o.id}"
            for q in self.questions
            for o in q.options
            if o.score is not None and o.score > self.max_option_score
        ]
        if over:
            raise ValueError(
                f"Option scores above max_option_score={self.max_option_score}: {over}"
            )

    # ─────────────────────────────────────────────────────────────────────────
    # Indexes (built once per bank)
    # ─────────────────────────────────────────────────────────────────────────

    @cached_property
    def _by_id(self) -> Dict[str, Question]:
        return {q.id: q for q in self.questions}

    @cached_property
    def _by_attribute(self) -> Dict[AttributeName, Tuple[Question, ...]]:
        return {
            attribute: tuple(q for q in self.questions if q.attribute is attribute)
            for attribute in ATTRIBUTE_ORDER
        }

    @cached_property
    def alignment_questions(self) -> Tuple[Question, ...]:
        return self.by_category(QuestionCategory.ALIGNMENT)

    @cached_property
    def race_questions(self) -> Tuple[Question, ...]:
        return self.by_category(QuestionCategory.RACE)

    @cached_property
    def question_ids(self) -> Tuple[str, ...]:
        return tuple(q.id for q in self.questions)

    # ─────────────────────────────────────────────────────────────────────────
    # Queries
    # ─────────────────────────────────────────────────────────────────────────

    def by_category(self, category: QuestionCategory) -> Tuple[Question, ...]:
        return tuple(q for q in self.questions if q.category is category)

    def attribute_questions(self, attribute: AttributeName) -> Tuple[Question, ...]:
        """Questions scoring one attribute, bank order."""
        return self._by_attribute[attribute]

    def get_question(self, question_id: str) -> Optional[Question]:
        """Find a question by id, None when the bank has no such question."""
        return self._by_id.get(question_id)

    def __len__(self) -> int:
        return len(self.questions)

    def __iter__(self) -> Iterator[Question]:
        return iter(self.questions)

    def __contains__(self, question_id: object) -> bool:
        return question_id in self._by_id

    def __repr__(self) -> str:
        return (
            f"QuestionBank(version={self.version!r}, questions={len(self.questions)}, "
            f"max_option_score={self.max_option_score})"
        )
