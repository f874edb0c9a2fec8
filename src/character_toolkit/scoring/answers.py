"""
Module: scoring.answers

Purpose:
    Turn the caller's ordered answer collection into a mapping from
    question id to selected option id, and resolve selections against
    the question bank.

Key Functions:
    - fold_answers(): Last answer for a question id wins
    - selected_option(): Option chosen for a question, or None
"""

from __future__ import annotations

import logging
from collections import abc
from typing import Dict, Iterable, Mapping, Optional, Union

from character_toolkit.core.models import Answer, Question, QuestionOption

logger = logging.getLogger(__name__)

AnswerMap = Mapping[str, str]
Answers = Union[Iterable[Answer], AnswerMap]


def fold_answers(answers: Answers) -> Dict[str, str]:
    """
    Fold answers in iteration order into {question_id: option_id}.

    A later answer for the same question id overwrites an earlier one.
    An already-folded mapping is copied as is.

    Example:
        >>> fold_answers([Answer("STR-1", "A"), Answer("STR-1", "C")])
        {'STR-1': 'C'}
    """
    if isinstance(answers, abc.Mapping):
        return dict(answers)
    folded: Dict[str, str] = {}
    for answer in answers:
        if answer.question_id in folded:
            logger.debug(f"Duplicate answer for {answer.question_id}, keeping the later one")
        folded[answer.question_id] = answer.selected_option_id
    return folded


def selected_option(question: Question, answer_map: AnswerMap) -> Optional[QuestionOption]:
    """
    Option selected for a question.

    Returns:
        The option, or None when the question is unanswered or the
        selected option id does not exist on the question
    """
    option_id = answer_map.get(question.id)
    if option_id is None:
        return None
    option = question.get_option(option_id)
    if option is None:
        logger.debug(f"Ignoring unknown option {option_id!r} for {question.id}")
    return option
