"""
Module: questions

Purpose:
    Provides the Question, QuestionOption and Answer dataclasses - the
    static question bank records and the caller-supplied answer pairs.
    All immutable; construction validates the per-record shape constraints.

Key Functions:
    - Question.get_option(option_id): Find an option by id
    - Question.to_dict() / Question.from_dict(): Serialization
    - Answer.from_dict(): Accepts camelCase or snake_case payloads

Dependencies:
    - dataclasses (std)
    - functools (std)
    - .traits

Used By:
    - bank.loader
    - scoring.*
    - core.utils.serialization
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import cached_property
from typing import Any, Dict, Optional, Tuple

from .traits import AttributeName, QuestionCategory, Race


MIN_OPTIONS = 2
MAX_OPTIONS = 6


@dataclass(frozen=True, slots=True)
class QuestionOption:
    """
    One selectable option with the weights relevant to its question.

    Attributes:
        id: Option id, unique within its question (e.g. "A")
        score: Attribute score (attribute questions only)
        lawful: Order axis weight towards Lawful (alignment questions)
        chaotic: Order axis weight towards Chaotic (alignment questions)
        good: Moral axis weight towards Good (alignment questions)
        evil: Moral axis weight towards Evil (alignment questions)
        race: Race tag (race questions only)
        tags: Free-form descriptive tags, not used for scoring

    Invariants:
        - all axis weights >= 0
        - score, when set, >= 0 (upper bound enforced by the bank validator)
    """

    id: str
    score: Optional[int] = None
    lawful: int = 0
    chaotic: int = 0
    good: int = 0
    evil: int = 0
    race: Optional[Race] = None
    tags: Tuple[str, ...] = ()

    def __post_init__(self) -> None:
        """Validate weights on construction."""
        if not self.id:
            raise ValueError("Option id cannot be empty")
        if self.score is not None and self.score < 0:
            raise ValueError(f"Option {self.id!r} score cannot be negative: {self.score}")
        for axis in ("lawful", "chaotic", "good", "evil"):
            if getattr(self, axis) < 0:
                raise ValueError(f"Option {self.id!r} {axis} weight cannot be negative")

    def to_dict(self) -> Dict[str, Any]:
        d: Dict[str, Any] = {"id": self.id}
        if self.score is not None:
            d["score"] = self.score
        for axis in ("lawful", "chaotic", "good", "evil"):
            value = getattr(self, axis)
            if value:
                d[axis] = value
        if self.race is not None:
            d["race"] = self.race.value
        if self.tags:
            d["tags"] = list(self.tags)
        return d

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> QuestionOption:
        race = data.get("race")
        return cls(
            id=data["id"],
            score=data.get("score"),
            lawful=data.get("lawful", 0),
            chaotic=data.get("chaotic", 0),
            good=data.get("good", 0),
            evil=data.get("evil", 0),
            race=Race(race) if race is not None else None,
            tags=tuple(data.get("tags", [])),
        )


@dataclass(frozen=True)
class Question:
    """
    Static question record (immutable).

    Attributes:
        id: Unique question id like "STR-1" or "ALIGN-4"
        category: Which question set the question belongs to
        options: Ordered options (2-6)
        attribute: Attribute scored by this question (attribute category only)
        title: Short display title

    Invariants:
        - 2 <= len(options) <= 6
        - option ids unique within the question
        - attribute is set if and only if category is ATTRIBUTE

    Example:
        >>> q = Question(
        ...     id="STR-1",
        ...     category=QuestionCategory.ATTRIBUTE,
        ...     attribute=AttributeName.STRENGTH,
        ...     options=(QuestionOption("A", score=1), QuestionOption("B", score=3)),
        ... )
        >>> q.get_option("B").score
        3
        >>> q.get_option("Z") is None
        True
    """

    id: str
    category: QuestionCategory
    options: Tuple[QuestionOption, ...]
    attribute: Optional[AttributeName] = None
    title: str = ""

    def __post_init__(self) -> None:
        """Validate question on construction."""
        if not self.id:
            raise ValueError("Question id cannot be empty")
        if not (MIN_OPTIONS <= len(self.options) <= MAX_OPTIONS):
            raise ValueError(
                f"Question {self.id!r} must have {MIN_OPTIONS}-{MAX_OPTIONS} options, "
                f"got {len(self.options)}"
            )
        ids = [o.id for o in self.options]
        if len(set(ids)) != len(ids):
            raise ValueError(f"Question {self.id!r} has duplicate option ids: {ids}")
        if self.category is QuestionCategory.ATTRIBUTE and self.attribute is None:
            raise ValueError(f"Attribute question {self.id!r} needs an attribute")
        if self.category is not QuestionCategory.ATTRIBUTE and self.attribute is not None:
            raise ValueError(f"Only attribute questions carry an attribute: {self.id!r}")

    # ─────────────────────────────────────────────────────────────────────────
    # Lookup
    # ─────────────────────────────────────────────────────────────────────────

    @cached_property
    def _options_by_id(self) -> Dict[str, QuestionOption]:
        return {o.id: o for o in self.options}

    @property
    def option_ids(self) -> Tuple[str, ...]:
        return tuple(o.id for o in self.options)

    def get_option(self, option_id: str) -> Optional[QuestionOption]:
        """
        Find an option by id.

        Args:
            option_id: Option id like "C"

        Returns:
            Matching QuestionOption or None if the question has no such option
        """
        return self._options_by_id.get(option_id)

    # ─────────────────────────────────────────────────────────────────────────
    # Serialization
    # ─────────────────────────────────────────────────────────────────────────

    def to_dict(self) -> Dict[str, Any]:
        d: Dict[str, Any] = {
            "id": self.id,
            "category": self.category.value,
            "options": [o.to_dict() for o in self.options],
        }
        if self.attribute is not None:
            d["attribute"] = self.attribute.code
        if self.title:
            d["title"] = self.title
        return d

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> Question:
        """
        Build a Question from its question bank record.

        The attribute is stored as its three-letter code in bank data.
        """
        attribute = data.get("attribute")
        return cls(
            id=data["id"],
            category=QuestionCategory(data["category"]),
            options=tuple(QuestionOption.from_dict(o) for o in data["options"]),
            attribute=AttributeName.from_code(attribute) if attribute else None,
            title=data.get("title", ""),
        )

    def __repr__(self) -> str:
        """Concise representation for debugging."""
        return f"Question({self.id!r}, {self.category.value}, options={len(self.options)})"


@dataclass(frozen=True, slots=True)
class Answer:
    """
    A single (question id, selected option id) pair supplied by the caller.

    No validation against the bank happens here: unknown ids are tolerated
    and ignored by the scorers.
    """

    question_id: str
    selected_option_id: str

    def to_dict(self) -> Dict[str, str]:
        return {
            "question_id": self.question_id,
            "selected_option_id": self.selected_option_id,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> Answer:
        """
        Decode an answer payload.

        Accepts both the API's camelCase keys (questionId / selectedOptionId)
        and snake_case keys.

        Raises:
            ValueError: If either id is missing
        """
        question_id = data.get("question_id", data.get("questionId"))
        option_id = data.get("selected_option_id", data.get("selectedOptionId"))
        if question_id is None or option_id is None:
            raise ValueError(f"Answer payload needs question and option ids: {data!r}")
        return cls(question_id=str(question_id), selected_option_id=str(option_id))
