"""
Character Toolkit Core Package

Shared data models, static-data validation and serialization.
These models are the single source of truth for the loader and the
scoring pipeline.

1. **Immutable Data Models**
   - Frozen dataclasses; results are rebuilt, never updated in place

2. **Calculated Values (Never Stored)**
   - Net alignment axes and race vote totals are derived properties

3. **Validated Static Data**
   - Question bank and class table fail fast on load
"""

from .models import (
    AttributeName,
    Alignment,
    Race,
    Branch,
    QuestionCategory,
    Question,
    QuestionOption,
    Answer,
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
