"""
Module: scoring.config

Purpose:
    Configuration dataclass for the scoring pipeline. Immutable
    configuration with validation on construction.

Key Classes:
    - ScoringConfig: Thresholds used by the scorers and the composer

Dependencies:
    - dataclasses (std)

Used By:
    - scoring.alignment
    - scoring.composer
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ScoringConfig:
    """
    Configuration for the scoring pipeline (immutable).

    Attributes:
        alignment_threshold: Net axis margin needed to leave Neutral
            (order >= t is Lawful, <= -t Chaotic; same for Good/Evil)
        partial_class_min_answers: Answers the primary attribute needs
            before partial results report a class

    Invariants:
        - alignment_threshold > 0
        - partial_class_min_answers >= 0

    Example:
        >>> config = ScoringConfig(alignment_threshold=4)
        >>> config.classify_axis(3)
        0
    """

    alignment_threshold: int = 3
    partial_class_min_answers: int = 3

    def __post_init__(self) -> None:
        """Validate configuration on construction."""
        if self.alignment_threshold <= 0:
            raise ValueError(f"alignment_threshold must be positive: {self.alignment_threshold}")
        if self.partial_class_min_answers < 0:
            raise ValueError(
                f"partial_class_min_answers must be non-negative: {self.partial_class_min_answers}"
            )

    def classify_axis(self, value: int) -> int:
        """
        Place a net axis score on the three-point scale.

        Returns:
            1 at or above the threshold, -1 at or below its negation, else 0
        """
        if value >= self.alignment_threshold:
            return 1
        if value <= -self.alignment_threshold:
            return -1
        return 0


DEFAULT_SCORING_CONFIG = ScoringConfig()
