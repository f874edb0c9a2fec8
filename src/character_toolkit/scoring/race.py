"""
Module: scoring.race

Purpose:
    Race Voter. One vote per answered race question for the race carried
    by the selected option; plurality wins, RACE_ORDER breaks ties.

Key Functions:
    - vote_race(): RaceResult for an answer set
    - tally_winner(): Winner and confidence for a finished tally
"""

from __future__ import annotations

import logging
from typing import Dict, Mapping, Optional, Tuple

from character_toolkit.bank import QuestionBank, default_question_bank
from character_toolkit.core.models import RACE_ORDER, Race, RaceResult

from .answers import Answers, fold_answers, selected_option

logger = logging.getLogger(__name__)


def tally_winner(votes: Mapping[Race, int]) -> Tuple[Race, float]:
    """
    Pick the plurality winner and the confidence of the win.

    Confidence is (winner - runner-up) / total votes, 0.0 with no votes.
    With no votes at all the first race in RACE_ORDER wins.

    Example:
        >>> tally_winner({Race.ELF: 3, Race.ORC: 3})
        (<Race.ELF: 'elf'>, 0.0)
    """
    ranked = sorted(RACE_ORDER, key=lambda r: (-votes.get(r, 0), RACE_ORDER.index(r)))
    winner, runner_up = ranked[0], ranked[1]
    total = sum(votes.get(r, 0) for r in RACE_ORDER)
    if total == 0:
        return winner, 0.0
    margin = votes.get(winner, 0) - votes.get(runner_up, 0)
    return winner, margin / total


def vote_race(
    answers: Answers,
    *,
    bank: Optional[QuestionBank] = None,
) -> RaceResult:
    """
    Tally race votes and pick the winner.

    Args:
        answers: Answers in caller order (or an already folded mapping)
        bank: Question bank, defaults to the bundled bank

    Returns:
        RaceResult with the full tally (every race present)
    """
    if bank is None:
        bank = default_question_bank()
    answer_map = fold_answers(answers)

    votes: Dict[Race, int] = {race: 0 for race in RACE_ORDER}
    for question in bank.race_questions:
        option = selected_option(question, answer_map)
        if option is None:
            continue
        if option.race is None:
            logger.debug(f"Option {option.id} of {question.id} has no race tag, no vote")
            continue
        votes[option.race] += 1

    race, confidence = tally_winner(votes)
    return RaceResult(race=race, votes=votes, confidence=confidence)
