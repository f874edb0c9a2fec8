"""
Module: scoring.alignment

Purpose:
    Alignment Classifier. Sums the four axis weights over the answered
    alignment questions and places the net order and moral axes on the
    3 x 3 grid using a fixed threshold.

Key Functions:
    - classify_alignment(): AlignmentResult for an answer set
    - alignment_from_axes(): Grid cell for a pair of net axis scores

Algorithm:
    order = lawful - chaotic, moral = good - evil
    axis >= threshold -> Lawful / Good
    axis <= -threshold -> Chaotic / Evil
    otherwise Neutral; Neutral/Neutral is True Neutral
"""

from __future__ import annotations

from typing import Optional

from character_toolkit.bank import QuestionBank, default_question_bank
from character_toolkit.core.models import Alignment, AlignmentResult

from .answers import Answers, fold_answers, selected_option
from .config import DEFAULT_SCORING_CONFIG, ScoringConfig

_ORDER_LETTERS = {1: "L", 0: "N", -1: "C"}
_MORAL_LETTERS = {1: "G", 0: "N", -1: "E"}


def alignment_from_axes(
    order_axis: int,
    moral_axis: int,
    config: ScoringConfig = DEFAULT_SCORING_CONFIG,
) -> Alignment:
    """
    Map net axis scores to one of the nine alignments.

    Example:
        >>> alignment_from_axes(3, 0)
        <Alignment.LAWFUL_NEUTRAL: 'LN'>
        >>> alignment_from_axes(-3, -3)
        <Alignment.CHAOTIC_EVIL: 'CE'>
    """
    return Alignment.from_positions(
        _ORDER_LETTERS[config.classify_axis(order_axis)],
        _MORAL_LETTERS[config.classify_axis(moral_axis)],
    )


def classify_alignment(
    answers: Answers,
    *,
    bank: Optional[QuestionBank] = None,
    config: Optional[ScoringConfig] = None,
) -> AlignmentResult:
    """
    Classify alignment from the alignment questions.

    An option may weigh on both axes at once. With no valid alignment
    answers every total is 0 and the result is True Neutral.

    Args:
        answers: Answers in caller order (or an already folded mapping)
        bank: Question bank, defaults to the bundled bank
        config: Scoring configuration, defaults to DEFAULT_SCORING_CONFIG

    Returns:
        AlignmentResult with raw axis totals and the grid cell
    """
    if bank is None:
        bank = default_question_bank()
    if config is None:
        config = DEFAULT_SCORING_CONFIG
    answer_map = fold_answers(answers)

    lawful = chaotic = good = evil = 0
    for question in bank.alignment_questions:
        option = selected_option(question, answer_map)
        if option is None:
            continue
        lawful += option.lawful
        chaotic += option.chaotic
        good += option.good
        evil += option.evil

    return AlignmentResult(
        lawful_score=lawful,
        chaotic_score=chaotic,
        good_score=good,
        evil_score=evil,
        alignment=alignment_from_axes(lawful - chaotic, good - evil, config),
    )
