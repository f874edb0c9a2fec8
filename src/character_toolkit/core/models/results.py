"""
Module: results

Purpose:
    Result records produced by the scoring pipeline. Created fresh on
    every call, never mutated, never persisted by the engine.

Key Classes:
    - AttributeResult: Raw/normalized score for one attribute
    - AlignmentResult: Four axis totals plus the derived Alignment
    - RaceResult: Vote tally, winner and confidence
    - CharacterResult: Full pipeline output
    - PartialCharacterResult: In-progress view with optional sections
    - AnswerValidation: Advisory completeness report

Dependencies:
    - dataclasses (std)
    - types (std)
    - .traits

Used By:
    - scoring.*
    - core.utils.serialization
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional, Tuple

from .traits import (
    RACE_ORDER,
    Alignment,
    AttributeName,
    Branch,
    Race,
)


def _read_only(mapping: Mapping) -> Mapping:
    return MappingProxyType(dict(mapping))


@dataclass(frozen=True, slots=True)
class AttributeResult:
    """
    Score for a single attribute.

    Attributes:
        raw: Sum of selected option scores
        normalized: round(raw / max_possible * 100), 0 when nothing answered
        questions_answered: Questions of this attribute with a valid answer
        max_possible: questions_answered * max option score

    Invariants:
        - 0 <= normalized <= 100
        - 0 <= raw <= max_possible
    """

    raw: int
    normalized: int
    questions_answered: int
    max_possible: int

    def __post_init__(self) -> None:
        if not (0 <= self.normalized <= 100):
            raise ValueError(f"normalized must be 0-100: {self.normalized}")
        if not (0 <= self.raw <= self.max_possible):
            raise ValueError(f"raw {self.raw} outside 0-{self.max_possible}")

    @classmethod
    def empty(cls) -> AttributeResult:
        return cls(raw=0, normalized=0, questions_answered=0, max_possible=0)

    def to_dict(self) -> Dict[str, int]:
        return {
            "raw": self.raw,
            "normalized": self.normalized,
            "questions_answered": self.questions_answered,
            "max_possible": self.max_possible,
        }


@dataclass(frozen=True, slots=True)
class AlignmentResult:
    """
    Alignment axis totals and classification.

    The net axes are calculated, never stored:
    order_axis = lawful - chaotic, moral_axis = good - evil.
    """

    lawful_score: int
    chaotic_score: int
    good_score: int
    evil_score: int
    alignment: Alignment

    @property
    def order_axis(self) -> int:
        return self.lawful_score - self.chaotic_score

    @property
    def moral_axis(self) -> int:
        return self.good_score - self.evil_score

    def to_dict(self) -> Dict[str, Any]:
        return {
            "lawful_score": self.lawful_score,
            "chaotic_score": self.chaotic_score,
            "good_score": self.good_score,
            "evil_score": self.evil_score,
            "alignment": self.alignment.value,
        }


@dataclass(frozen=True)
class RaceResult:
    """
    Outcome of the race vote.

    Attributes:
        race: Winning race (canonical order breaks ties)
        votes: Read-only tally with an entry for every race, canonical order
        confidence: (winner - runner-up) / total votes, 0 when no votes
    """

    race: Race
    votes: Mapping[Race, int]
    confidence: float

    def __post_init__(self) -> None:
        if not (0.0 <= self.confidence <= 1.0):
            raise ValueError(f"confidence must be 0-1: {self.confidence}")
        object.__setattr__(
            self, "votes", _read_only({r: self.votes.get(r, 0) for r in RACE_ORDER})
        )

    @property
    def total_votes(self) -> int:
        return sum(self.votes.values())

    def to_dict(self) -> Dict[str, Any]:
        return {
            "race": self.race.value,
            "votes": {r.value: n for r, n in self.votes.items()},
            "confidence": self.confidence,
        }


@dataclass(frozen=True)
class CharacterResult:
    """
    Complete character profile.

    Attributes:
        attributes: Read-only mapping with all six attributes, canonical order
        alignment: Alignment axes and classification
        race: Race vote outcome
        character_class: Class id from the class table
        branch: Branch of the primary attribute
        primary_attribute: Highest raw score (canonical tie-break)
        secondary_attribute: Second highest raw score
    """

    attributes: Mapping[AttributeName, AttributeResult]
    alignment: AlignmentResult
    race: RaceResult
    character_class: str
    branch: Branch
    primary_attribute: AttributeName
    secondary_attribute: AttributeName

    def __post_init__(self) -> None:
        object.__setattr__(self, "attributes", _read_only(self.attributes))

    def to_dict(self) -> Dict[str, Any]:
        return {
            "attributes": {a.value: r.to_dict() for a, r in self.attributes.items()},
            "alignment": self.alignment.to_dict(),
            "race": self.race.to_dict(),
            "character_class": self.character_class,
            "branch": self.branch.value,
            "primary_attribute": self.primary_attribute.value,
            "secondary_attribute": self.secondary_attribute.value,
        }

    def __repr__(self) -> str:
        return (
            f"CharacterResult({self.race.race.value} {self.character_class}, "
            f"{self.alignment.alignment.value}, primary={self.primary_attribute.value})"
        )


@dataclass(frozen=True)
class PartialCharacterResult:
    """
    In-progress character profile.

    Attributes are always present (zeroed when unanswered). Alignment and
    race are None until at least one of their questions has a valid
    selection.
    The class fields are None until the primary attribute has enough
    answers and an alignment exists.

    Attributes:
        attributes: All six attribute results
        alignment: Alignment result or None
        race: Race result or None
        character_class: Class id or None
        branch: Branch or None
        primary_attribute: Set together with character_class
        secondary_attribute: Set together with character_class
        answered_count: Known questions answered with a valid option
        total_questions: Questions in the bank
    """

    attributes: Mapping[AttributeName, AttributeResult]
    alignment: Optional[AlignmentResult] = None
    race: Optional[RaceResult] = None
    character_class: Optional[str] = None
    branch: Optional[Branch] = None
    primary_attribute: Optional[AttributeName] = None
    secondary_attribute: Optional[AttributeName] = None
    answered_count: int = 0
    total_questions: int = 0

    def __post_init__(self) -> None:
        object.__setattr__(self, "attributes", _read_only(self.attributes))

    @property
    def has_class(self) -> bool:
        return self.character_class is not None

    @property
    def is_complete(self) -> bool:
        return self.total_questions > 0 and self.answered_count >= self.total_questions

    @property
    def progress(self) -> float:
        """Fraction of the bank answered, 0.0-1.0."""
        if self.total_questions == 0:
            return 0.0
        return self.answered_count / self.total_questions

    def to_dict(self) -> Dict[str, Any]:
        """Serialize, omitting sections that have not been computed."""
        d: Dict[str, Any] = {
            "attributes": {a.value: r.to_dict() for a, r in self.attributes.items()},
            "answered_count": self.answered_count,
            "total_questions": self.total_questions,
        }
        if self.alignment is not None:
            d["alignment"] = self.alignment.to_dict()
        if self.race is not None:
            d["race"] = self.race.to_dict()
        if self.character_class is not None:
            d["character_class"] = self.character_class
            d["branch"] = self.branch.value
            d["primary_attribute"] = self.primary_attribute.value
            d["secondary_attribute"] = self.secondary_attribute.value
        return d


@dataclass(frozen=True)
class AnswerValidation:
    """
    Advisory report on an answer set; never blocks scoring.

    Attributes:
        missing_questions: Bank question ids with no answer, bank order
        invalid_answers: Question ids whose selected option does not exist
    """

    missing_questions: Tuple[str, ...] = field(default_factory=tuple)
    invalid_answers: Tuple[str, ...] = field(default_factory=tuple)

    @property
    def valid(self) -> bool:
        return not self.missing_questions and not self.invalid_answers

    def to_dict(self) -> Dict[str, Any]:
        return {
            "valid": self.valid,
            "missing_questions": list(self.missing_questions),
            "invalid_answers": list(self.invalid_answers),
        }

