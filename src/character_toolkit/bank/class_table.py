"""
Module: bank.class_table

Purpose:
    The static Branch -> Alignment -> class lookup and the total
    AttributeName -> Branch mapping. Completeness over all 6 x 9 pairs is
    checked on construction, so lookups never need a fallback.

Key Classes:
    - ClassTable: Read-only two-level mapping
    - ClassTableError: Raised for an incomplete or inconsistent table

Used By:
    - bank.loader
    - scoring.classes
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Dict, Mapping, Tuple

from character_toolkit.core.models import (
    ALIGNMENT_ORDER,
    ATTRIBUTE_ORDER,
    BRANCH_ORDER,
    Alignment,
    AttributeName,
    Branch,
)

logger = logging.getLogger(__name__)


class ClassTableError(RuntimeError):
    """Raised when the class table does not cover every branch x alignment pair."""


@dataclass(frozen=True)
class ClassTable:
    """
    Branch x Alignment -> class id lookup (immutable).

    Attributes:
        attribute_to_branch: Total mapping over the six attributes
        classes: Branch -> Alignment -> class id
        version: Version string of the table data

    Invariants:
        - every attribute maps to a branch, and no two attributes share one
        - every (branch, alignment) pair resolves to a class id
        - the 54 class ids are distinct
    """

    attribute_to_branch: Mapping[AttributeName, Branch]
    classes: Mapping[Branch, Mapping[Alignment, str]]
    version: str = ""

    def __post_init__(self) -> None:
        """Check exhaustiveness, then freeze the mappings."""
        missing_attributes = [a.value for a in ATTRIBUTE_ORDER if a not in self.attribute_to_branch]
        if missing_attributes:
            raise ClassTableError(f"Attributes without a branch: {missing_attributes}")

        branches = list(self.attribute_to_branch.values())
        if len(set(branches)) != len(branches):
            raise ClassTableError(
                f"Each attribute needs its own branch, got {[b.value for b in branches]}"
            )

        missing_pairs = [
            f"{branch.value}/{alignment.value}"
            for branch in BRANCH_ORDER
            for alignment in ALIGNMENT_ORDER
            if not self.classes.get(branch, {}).get(alignment)
        ]
        if missing_pairs:
            raise ClassTableError(f"Class table is missing entries: {missing_pairs}")

        class_ids = [
            self.classes[branch][alignment]
            for branch in BRANCH_ORDER
            for alignment in ALIGNMENT_ORDER
        ]
        duplicates = sorted({c for c in class_ids if class_ids.count(c) > 1})
        if duplicates:
            raise ClassTableError(f"Class ids must be distinct, duplicated: {duplicates}")

        object.__setattr__(
            self,
            "attribute_to_branch",
            MappingProxyType({a: self.attribute_to_branch[a] for a in ATTRIBUTE_ORDER}),
        )
        object.__setattr__(
            self,
            "classes",
            MappingProxyType({
                branch: MappingProxyType({
                    alignment: self.classes[branch][alignment] for alignment in ALIGNMENT_ORDER
                })
                for branch in BRANCH_ORDER
            }),
        )

    # ─────────────────────────────────────────────────────────────────────────
    # Lookup
    # ─────────────────────────────────────────────────────────────────────────

    def branch_for(self, attribute: AttributeName) -> Branch:
        return self.attribute_to_branch[attribute]

    def lookup(self, branch: Branch, alignment: Alignment) -> str:
        """Class id for a (branch, alignment) pair; always defined."""
        return self.classes[branch][alignment]

    @property
    def class_ids(self) -> Tuple[str, ...]:
        """All 54 class ids, branch then alignment order."""
        return tuple(
            self.classes[branch][alignment]
            for branch in BRANCH_ORDER
            for alignment in ALIGNMENT_ORDER
        )

    # ─────────────────────────────────────────────────────────────────────────
    # Serialization
    # ─────────────────────────────────────────────────────────────────────────

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> ClassTable:
        """
        Build a table from parsed class table JSON.

        Raises:
            ClassTableError: If the table is incomplete
            ValueError: If a branch or alignment key is unknown
        """
        table = cls(
            attribute_to_branch={
                AttributeName(attribute): Branch(branch)
                for attribute, branch in data["attribute_to_branch"].items()
            },
            classes={
                Branch(branch): {Alignment(a): class_id for a, class_id in row.items()}
                for branch, row in data["classes"].items()
            },
            version=data.get("table_version", ""),
        )
        logger.debug(f"Class table {table.version or '(unversioned)'} covers {len(table.class_ids)} classes")
        return table

    def to_dict(self) -> Dict[str, Any]:
        return {
            "table_version": self.version,
            "attribute_to_branch": {a.value: b.value for a, b in self.attribute_to_branch.items()},
            "classes": {
                b.value: {al.value: c for al, c in row.items()}
                for b, row in self.classes.items()
            },
        }

    def __repr__(self) -> str:
        return f"ClassTable(version={self.version!r}, classes={len(self.class_ids)})"
