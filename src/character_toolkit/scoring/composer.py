"""
Module: scoring.composer

Purpose:
    Character Result Composer. Runs the scorers in a fixed order and
    assembles the result records. Also provides the partial-results mode
    for incomplete answer sets and the advisory answer validation.

Key Functions:
    - resolve_character(): Full pipeline, always yields a class
    - partial_character(): Same pipeline, sections only when supported
    - validate_answers(): Missing questions and invalid selections

Algorithm:
    1. Fold answers once (last answer per question wins)
    2. Attributes, alignment and race independently
    3. Class from attribute ranking + alignment
    Nothing is cached between calls; every call recomputes from scratch.
"""

from __future__ import annotations

import logging
from typing import List, Optional

from character_toolkit.bank import (
    ClassTable,
    QuestionBank,
    default_class_table,
    default_question_bank,
)
from character_toolkit.core.models import (
    AnswerValidation,
    CharacterResult,
    PartialCharacterResult,
)

from .alignment import classify_alignment
from .answers import AnswerMap, Answers, fold_answers, selected_option
from .attributes import rank_attributes, score_attributes
from .classes import resolve_class
from .config import DEFAULT_SCORING_CONFIG, ScoringConfig
from .race import vote_race

logger = logging.getLogger(__name__)


def resolve_character(
    answers: Answers,
    *,
    bank: Optional[QuestionBank] = None,
    table: Optional[ClassTable] = None,
    config: Optional[ScoringConfig] = None,
) -> CharacterResult:
    """
    Compute the complete character profile.

    Meant for a fully answered battery, but never refuses: missing or
    malformed answers degrade to the documented defaults.

    Args:
        answers: Answers in caller order
        bank: Question bank, defaults to the bundled bank
        table: Class table, defaults to the bundled table
        config: Scoring configuration, defaults to DEFAULT_SCORING_CONFIG

    Returns:
        CharacterResult with one of the table's class ids

    Example:
        >>> result = resolve_character(answers)
        >>> result.character_class in default_class_table().class_ids
        True
    """
    if bank is None:
        bank = default_question_bank()
    if table is None:
        table = default_class_table()
    if config is None:
        config = DEFAULT_SCORING_CONFIG
    answer_map = fold_answers(answers)

    attributes = score_attributes(answer_map, bank=bank)
    alignment = classify_alignment(answer_map, bank=bank, config=config)
    race = vote_race(answer_map, bank=bank)
    resolution = resolve_class(attributes, alignment, table=table)

    return CharacterResult(
        attributes=attributes,
        alignment=alignment,
        race=race,
        character_class=resolution.character_class,
        branch=resolution.branch,
        primary_attribute=resolution.primary_attribute,
        secondary_attribute=resolution.secondary_attribute,
    )


def partial_character(
    answers: Answers,
    *,
    bank: Optional[QuestionBank] = None,
    table: Optional[ClassTable] = None,
    config: Optional[ScoringConfig] = None,
) -> PartialCharacterResult:
    """
    Compute an in-progress profile from an incomplete answer set.

    - attributes: always present (unanswered attributes score 0)
    - alignment / race: present once any question of that set has a
      valid selection (unknown option ids count as unanswered)
    - class: present once the primary attribute has at least
      config.partial_class_min_answers answers and alignment is present

    Args:
        answers: Answers in caller order
        bank: Question bank, defaults to the bundled bank
        table: Class table, defaults to the bundled table
        config: Scoring configuration, defaults to DEFAULT_SCORING_CONFIG

    Returns:
        PartialCharacterResult
    """
    if bank is None:
        bank = default_question_bank()
    if table is None:
        table = default_class_table()
    if config is None:
        config = DEFAULT_SCORING_CONFIG
    answer_map = fold_answers(answers)

    attributes = score_attributes(answer_map, bank=bank)

    alignment = None
    if _touches(answer_map, bank.alignment_questions):
        alignment = classify_alignment(answer_map, bank=bank, config=config)

    race = None
    if _touches(answer_map, bank.race_questions):
        race = vote_race(answer_map, bank=bank)

    answered = sum(1 for q in bank if selected_option(q, answer_map) is not None)
    fields = dict(
        attributes=attributes,
        alignment=alignment,
        race=race,
        answered_count=answered,
        total_questions=len(bank),
    )

    primary, primary_result = rank_attributes(attributes)[0]
    if alignment is None:
        logger.debug("Partial result: no alignment answers yet, class withheld")
    elif primary_result.questions_answered < config.partial_class_min_answers:
        logger.debug(
            f"Partial result: {primary.value} has {primary_result.questions_answered} "
            f"answers (< {config.partial_class_min_answers}), class withheld"
        )
    else:
        resolution = resolve_class(attributes, alignment, table=table)
        fields.update(
            character_class=resolution.character_class,
            branch=resolution.branch,
            primary_attribute=resolution.primary_attribute,
            secondary_attribute=resolution.secondary_attribute,
        )

    return PartialCharacterResult(**fields)


def validate_answers(
    answers: Answers,
    *,
    bank: Optional[QuestionBank] = None,
) -> AnswerValidation:
    """
    Report which questions are unanswered and which answers are invalid.

    Advisory only: callers use it to decide whether to allow submission,
    the scoring functions never depend on it. Answers for question ids
    outside the bank are ignored.

    Args:
        answers: Answers in caller order
        bank: Question bank, defaults to the bundled bank

    Returns:
        AnswerValidation with ids in bank order
    """
    if bank is None:
        bank = default_question_bank()
    answer_map = fold_answers(answers)

    missing: List[str] = []
    invalid: List[str] = []
    for question in bank:
        option_id = answer_map.get(question.id)
        if option_id is None:
            missing.append(question.id)
        elif question.get_option(option_id) is None:
            invalid.append(question.id)

    unknown = [qid for qid in answer_map if qid not in bank]
    if unknown:
        logger.debug(f"Ignoring answers for unknown questions: {unknown}")

    return AnswerValidation(missing_questions=tuple(missing), invalid_answers=tuple(invalid))


def _touches(answer_map: AnswerMap, questions) -> bool:
    """True when any of the questions has a valid selection."""
    return any(selected_option(q, answer_map) is not None for q in questions)
