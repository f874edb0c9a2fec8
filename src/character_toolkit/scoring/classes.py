"""
Module: scoring.classes

Purpose:
    Class Resolver. Ranks attributes by raw score, maps the primary
    attribute to its branch and looks the class up in the class table.
    A pure lookup: the table guarantees every pair resolves.

Key Functions:
    - resolve_class(): ClassResolution for attribute + alignment results

Key Classes:
    - ClassResolution: branch, class id, primary and secondary attribute
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping, Optional

from character_toolkit.bank import ClassTable, default_class_table
from character_toolkit.core.models import (
    AlignmentResult,
    AttributeName,
    AttributeResult,
    Branch,
)

from .attributes import rank_attributes


@dataclass(frozen=True, slots=True)
class ClassResolution:
    """Outcome of class resolution."""

    branch: Branch
    character_class: str
    primary_attribute: AttributeName
    secondary_attribute: AttributeName


def resolve_class(
    attributes: Mapping[AttributeName, AttributeResult],
    alignment: AlignmentResult,
    *,
    table: Optional[ClassTable] = None,
) -> ClassResolution:
    """
    Resolve branch and class.

    Only the primary attribute decides the branch; the secondary is
    reported for display. Ties rank by ATTRIBUTE_ORDER.

    Args:
        attributes: All six attribute results
        alignment: Alignment result
        table: Class table, defaults to the bundled table

    Returns:
        ClassResolution

    Raises:
        ValueError: If fewer than two attributes are supplied
    """
    if table is None:
        table = default_class_table()
    ranked = rank_attributes(attributes)
    if len(ranked) < 2:
        raise ValueError(f"Need at least two attributes to rank, got {len(ranked)}")
    primary, secondary = ranked[0][0], ranked[1][0]
    branch = table.branch_for(primary)
    return ClassResolution(
        branch=branch,
        character_class=table.lookup(branch, alignment.alignment),
        primary_attribute=primary,
        secondary_attribute=secondary,
    )
