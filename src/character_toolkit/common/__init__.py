"""Common helpers shared across the toolkit."""

from __future__ import annotations

from .labels import (
    attribute_label,
    attribute_bar_width,
    alignment_emoji,
    class_display_name,
    format_display_title,
    ALIGNMENT_EMOJI,
    ATTRIBUTE_TIERS,
    LOWEST_TIER,
)

__all__ = [
    "attribute_label",
    "attribute_bar_width",
    "alignment_emoji",
    "class_display_name",
    "format_display_title",
    "ALIGNMENT_EMOJI",
    "ATTRIBUTE_TIERS",
    "LOWEST_TIER",
]
