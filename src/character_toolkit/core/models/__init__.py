"""
Core Models Package

Immutable data models shared by the loader and the scoring pipeline.

All question and result models are frozen dataclasses, so the static
question bank and every computed result can be shared between threads
without coordination. Mappings inside results are exposed read-only.
"""

from .traits import (
    AttributeName,
    Alignment,
    Race,
    Branch,
    QuestionCategory,
    ATTRIBUTE_ORDER,
    RACE_ORDER,
    BRANCH_ORDER,
    ALIGNMENT_ORDER,
)
from .questions import Question, QuestionOption, Answer
from .results import (
    AttributeResult,
    AlignmentResult,
    RaceResult,
    CharacterResult,
    PartialCharacterResult,
    AnswerValidation,
)

__all__ = [
    "AttributeName",
    "Alignment",
    "Race",
    "Branch",
    "QuestionCategory",
    "ATTRIBUTE_ORDER",
    "RACE_ORDER",
    "BRANCH_ORDER",
    "ALIGNMENT_ORDER",
    "Question",
    "QuestionOption",
    "Answer",
    "AttributeResult",
    "AlignmentResult",
    "RaceResult",
    "CharacterResult",
    "PartialCharacterResult",
    "AnswerValidation",
]
