"""
Module: scoring.attributes

Purpose:
    Attribute Scorer. Sums option scores per attribute over the answered
    questions and normalizes against the answered-question maximum, so
    unanswered questions shrink the denominator instead of counting as 0.

Key Functions:
    - score_attributes(): Six AttributeResults, canonical order
    - rank_attributes(): Attributes by raw score, canonical tie-break
    - simple_scores(): Raw scores only

Algorithm:
    raw        = sum(option.score for answered questions)
    max        = answered * bank.max_option_score
    normalized = round_half_up(raw / max * 100), 0 when nothing answered
"""

from __future__ import annotations

from typing import Dict, List, Mapping, Optional, Sequence, Tuple

from character_toolkit.bank import QuestionBank, default_question_bank
from character_toolkit.core.models import (
    ATTRIBUTE_ORDER,
    AttributeName,
    AttributeResult,
    Question,
)

from .answers import AnswerMap, Answers, fold_answers, selected_option


def normalize_score(raw: int, max_possible: int) -> int:
    """
    Percentage of the maximum, rounded half up, 0 when max_possible is 0.

    Integer arithmetic keeps x.5 cases exact (e.g. 1 of 8 -> 13).
    """
    if max_possible <= 0:
        return 0
    return (200 * raw + max_possible) // (2 * max_possible)


def score_attribute(
    questions: Sequence[Question],
    answer_map: AnswerMap,
    max_option_score: int,
) -> AttributeResult:
    """Score a single attribute from its questions."""
    raw = 0
    answered = 0
    for question in questions:
        option = selected_option(question, answer_map)
        if option is None:
            continue
        raw += option.score or 0
        answered += 1
    max_possible = answered * max_option_score
    return AttributeResult(
        raw=raw,
        normalized=normalize_score(raw, max_possible),
        questions_answered=answered,
        max_possible=max_possible,
    )


def score_attributes(
    answers: Answers,
    *,
    bank: Optional[QuestionBank] = None,
) -> Dict[AttributeName, AttributeResult]:
    """
    Score all six attributes independently.

    Args:
        answers: Answers in caller order (or an already folded mapping)
        bank: Question bank, defaults to the bundled bank; its
            max_option_score is the per-question maximum

    Returns:
        Dict with exactly one entry per attribute, canonical order

    Example:
        >>> results = score_attributes([Answer("STR-3", "D")])
        >>> results[AttributeName.STRENGTH].normalized
        100
    """
    if bank is None:
        bank = default_question_bank()
    answer_map = fold_answers(answers)
    return {
        attribute: score_attribute(
            bank.attribute_questions(attribute), answer_map, bank.max_option_score
        )
        for attribute in ATTRIBUTE_ORDER
    }


def rank_attributes(
    attributes: Mapping[AttributeName, AttributeResult],
) -> List[Tuple[AttributeName, AttributeResult]]:
    """
    Order attributes by raw score, highest first.

    Equal raw scores keep ATTRIBUTE_ORDER, so ranking is deterministic.
    """
    return sorted(
        ((a, attributes[a]) for a in ATTRIBUTE_ORDER if a in attributes),
        key=lambda item: (-item[1].raw, ATTRIBUTE_ORDER.index(item[0])),
    )


def simple_scores(attributes: Mapping[AttributeName, AttributeResult]) -> Dict[AttributeName, int]:
    """Raw score per attribute."""
    return {a: attributes[a].raw for a in ATTRIBUTE_ORDER if a in attributes}
