"""
Module: common.labels

Purpose:
    Presentation helpers shared by result views: attribute tier labels,
    class display names and the combined "Race Class" title.

Key Functions:
    - attribute_label(): Tier name for a normalized score
    - class_display_name(): "wild_mage" -> "Wild Mage"
    - format_display_title(): "Elf Wizard"
    - attribute_bar_width(): Score clamped to a 0-100 bar percentage
    - alignment_emoji(): Icon shown next to the alignment name
"""

from __future__ import annotations

from typing import Dict, Optional, Tuple

from character_toolkit.core.models import Alignment, Race


# (minimum normalized score, label), highest first
ATTRIBUTE_TIERS: Tuple[Tuple[int, str], ...] = (
    (90, "Legendary"),
    (75, "Exceptional"),
    (60, "Strong"),
    (40, "Moderate"),
    (25, "Developing"),
)
LOWEST_TIER = "Minimal"

ALIGNMENT_EMOJI: Dict[Alignment, str] = {
    Alignment.LAWFUL_GOOD: "\N{SCALES}\uFE0F",
    Alignment.NEUTRAL_GOOD: "\N{GREEN HEART}",
    Alignment.CHAOTIC_GOOD: "\N{BUTTERFLY}",
    Alignment.LAWFUL_NEUTRAL: "\N{SCROLL}",
    Alignment.TRUE_NEUTRAL: "\N{YIN YANG}\uFE0F",
    Alignment.CHAOTIC_NEUTRAL: "\N{GAME DIE}",
    Alignment.LAWFUL_EVIL: "\N{PERFORMING ARTS}",
    Alignment.NEUTRAL_EVIL: "\N{SNAKE}",
    Alignment.CHAOTIC_EVIL: "\N{FIRE}",
}


def attribute_label(normalized: int) -> str:
    """
    Tier label for a 0-100 attribute score.

    Example:
        >>> attribute_label(75)
        'Exceptional'
        >>> attribute_label(10)
        'Minimal'
    """
    for minimum, label in ATTRIBUTE_TIERS:
        if normalized >= minimum:
            return label
    return LOWEST_TIER


def attribute_bar_width(normalized: int) -> int:
    """Bar fill percentage for a score, clamped to 0-100."""
    return min(100, max(0, normalized))


def alignment_emoji(alignment: Alignment) -> str:
    return ALIGNMENT_EMOJI[alignment]


def class_display_name(class_id: str) -> str:
    return class_id.replace("_", " ").title()


def format_display_title(race: Race, class_id: Optional[str]) -> str:
    """
    Combined title shown on results, e.g. "Dwarf Sentinel".

    Without a class (partial results) only the race is shown.
    """
    if not class_id:
        return race.display_name
    return f"{race.display_name} {class_display_name(class_id)}"
