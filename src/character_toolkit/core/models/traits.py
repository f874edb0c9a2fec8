"""
Module: traits

Purpose:
    Enumerations for every closed vocabulary the engine works with:
    attributes, alignments, races, class branches and question categories.
    Also holds the canonical orderings used as tie-breaks.

Key Classes:
    - AttributeName: The six scored attributes
    - Alignment: The nine cells of the order x moral grid
    - Race: The six archetype tags voted on by race questions
    - Branch: Class families, one per attribute
    - QuestionCategory: attribute / alignment / race

Key Constants:
    - ATTRIBUTE_ORDER: Tie-break order for primary/secondary ranking
    - RACE_ORDER: Tie-break order for the race vote
    - ALIGNMENT_ORDER: Display order of the 3x3 grid (row major)

Used By:
    - core.models.questions
    - core.models.results
    - bank.loader
    - scoring.*
"""

from __future__ import annotations

from enum import Enum
from typing import Tuple


class QuestionCategory(str, Enum):
    """Which of the three disjoint question sets a question belongs to."""
    ATTRIBUTE = "attribute"
    ALIGNMENT = "alignment"
    RACE = "race"

    def __str__(self) -> str:
        return self.value


class AttributeName(str, Enum):
    """
    The six attributes scored by the attribute battery.

    Declaration order is the canonical tie-break order (see ATTRIBUTE_ORDER).
    Question data refers to attributes by their three-letter code.

    Example:
        >>> AttributeName.from_code("DEX")
        <AttributeName.DEXTERITY: 'dexterity'>
        >>> AttributeName.WISDOM.code
        'WIS'
    """
    STRENGTH = "strength"
    CONSTITUTION = "constitution"
    DEXTERITY = "dexterity"
    INTELLIGENCE = "intelligence"
    WISDOM = "wisdom"
    CHARISMA = "charisma"

    def __str__(self) -> str:
        return self.value

    @property
    def code(self) -> str:
        """Three-letter code used in question data ("STR", "CON", ...)."""
        return _ATTRIBUTE_CODES[self]

    @classmethod
    def from_code(cls, code: str) -> AttributeName:
        """
        Look up an attribute by its three-letter code.

        Args:
            code: Code like "STR" (case-insensitive)

        Returns:
            Matching AttributeName

        Raises:
            ValueError: If the code is not one of the six attribute codes
        """
        normalized = code.strip().upper() if isinstance(code, str) else code
        for attribute, attribute_code in _ATTRIBUTE_CODES.items():
            if attribute_code == normalized:
                return attribute
        raise ValueError(f"Unknown attribute code: {code!r}")


_ATTRIBUTE_CODES = {
    AttributeName.STRENGTH: "STR",
    AttributeName.CONSTITUTION: "CON",
    AttributeName.DEXTERITY: "DEX",
    AttributeName.INTELLIGENCE: "INT",
    AttributeName.WISDOM: "WIS",
    AttributeName.CHARISMA: "CHA",
}


class Race(str, Enum):
    """Archetype tags carried by race question options."""
    HUMAN = "human"
    ELF = "elf"
    DWARF = "dwarf"
    HALFLING = "halfling"
    ORC = "orc"
    DRAGONBORN = "dragonborn"

    def __str__(self) -> str:
        return self.value

    @property
    def display_name(self) -> str:
        return self.value.capitalize()


class Branch(str, Enum):
    """Class families; each attribute maps to exactly one branch."""
    MARTIAL = "martial"
    STALWART = "stalwart"
    SHADOW = "shadow"
    ARCANE = "arcane"
    DIVINE = "divine"
    SOCIAL = "social"

    def __str__(self) -> str:
        return self.value


class Alignment(str, Enum):
    """
    Nine-point alignment grid (order axis x moral axis).

    Values are the two-letter codes used in the class table. The centre
    cell is "TN" (True Neutral) rather than "NN".

    Example:
        >>> Alignment.from_positions("L", "N")
        <Alignment.LAWFUL_NEUTRAL: 'LN'>
        >>> Alignment.TRUE_NEUTRAL.display_name
        'True Neutral'
    """
    LAWFUL_GOOD = "LG"
    NEUTRAL_GOOD = "NG"
    CHAOTIC_GOOD = "CG"
    LAWFUL_NEUTRAL = "LN"
    TRUE_NEUTRAL = "TN"
    CHAOTIC_NEUTRAL = "CN"
    LAWFUL_EVIL = "LE"
    NEUTRAL_EVIL = "NE"
    CHAOTIC_EVIL = "CE"

    def __str__(self) -> str:
        return self.value

    @property
    def display_name(self) -> str:
        """Human readable name like "Chaotic Good"."""
        if self is Alignment.TRUE_NEUTRAL:
            return "True Neutral"
        return self.name.replace("_", " ").title()

    @property
    def order_position(self) -> str:
        """Order axis letter: L, N or C."""
        return "N" if self is Alignment.TRUE_NEUTRAL else self.value[0]

    @property
    def moral_position(self) -> str:
        """Moral axis letter: G, N or E."""
        return "N" if self is Alignment.TRUE_NEUTRAL else self.value[1]

    @classmethod
    def from_positions(cls, order: str, moral: str) -> Alignment:
        """
        Combine an order letter (L/N/C) and a moral letter (G/N/E).

        Raises:
            ValueError: If either letter is not a valid grid position
        """
        if order not in ("L", "N", "C") or moral not in ("G", "N", "E"):
            raise ValueError(f"Invalid alignment positions: {order!r}, {moral!r}")
        if order == "N" and moral == "N":
            return cls.TRUE_NEUTRAL
        return cls(order + moral)


ATTRIBUTE_ORDER: Tuple[AttributeName, ...] = tuple(AttributeName)
RACE_ORDER: Tuple[Race, ...] = tuple(Race)
BRANCH_ORDER: Tuple[Branch, ...] = tuple(Branch)
ALIGNMENT_ORDER: Tuple[Alignment, ...] = tuple(Alignment)
