"""
Module: scoring

Purpose:
    Deterministic personality-to-character classification. Every function
    is pure over (answers, question bank, class table, config) and safe to
    call from any number of threads.

Key Functions:
    - score_attributes(): Six attribute results
    - classify_alignment(): Nine-point alignment
    - vote_race(): Plurality race with confidence
    - resolve_class(): Branch + class from attributes and alignment
    - resolve_character(): Full pipeline
    - partial_character(): Pipeline for incomplete answer sets
    - validate_answers(): Advisory completeness report

Key Classes:
    - ScoringConfig: Thresholds (alignment margin, partial class minimum)
"""

from .config import ScoringConfig, DEFAULT_SCORING_CONFIG
from .answers import fold_answers
from .attributes import score_attributes, rank_attributes, simple_scores, normalize_score
from .alignment import classify_alignment, alignment_from_axes
from .race import vote_race, tally_winner
from .classes import resolve_class, ClassResolution
from .composer import resolve_character, partial_character, validate_answers

__all__ = [
    "ScoringConfig",
    "DEFAULT_SCORING_CONFIG",
    "fold_answers",
    "score_attributes",
    "rank_attributes",
    "simple_scores",
    "normalize_score",
    "classify_alignment",
    "alignment_from_axes",
    "vote_race",
    "tally_winner",
    "resolve_class",
    "ClassResolution",
    "resolve_character",
    "partial_character",
    "validate_answers",
]
