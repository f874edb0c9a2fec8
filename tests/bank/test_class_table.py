"""
Tests for the branch x alignment class table.
"""

import pytest

from character_toolkit.bank import ClassTable, ClassTableError
from character_toolkit.core.models import (
    ALIGNMENT_ORDER,
    BRANCH_ORDER,
    Alignment,
    AttributeName,
    Branch,
)


class TestClassTable:
    """Tests for the bundled table."""

    def test_lookup_when_every_pair_then_distinct_class(self, table):
        """All 54 pairs resolve to distinct, non-empty class ids."""
        seen = set()
        for branch in BRANCH_ORDER:
            for alignment in ALIGNMENT_ORDER:
                class_id = table.lookup(branch, alignment)
                assert class_id
                seen.add(class_id)
        assert len(seen) == 54

    @pytest.mark.parametrize(
        "attribute,branch",
        [
            (AttributeName.STRENGTH, Branch.MARTIAL),
            (AttributeName.CONSTITUTION, Branch.STALWART),
            (AttributeName.DEXTERITY, Branch.SHADOW),
            (AttributeName.INTELLIGENCE, Branch.ARCANE),
            (AttributeName.WISDOM, Branch.DIVINE),
            (AttributeName.CHARISMA, Branch.SOCIAL),
        ],
    )
    def test_branch_for_when_attribute_then_fixed_branch(self, table, attribute, branch):
        """Each attribute maps to its own branch."""
        assert table.branch_for(attribute) is branch

    def test_lookup_when_known_pairs_then_expected_classes(self, table):
        """Spot-check well-known cells."""
        assert table.lookup(Branch.MARTIAL, Alignment.LAWFUL_GOOD) == "paladin"
        assert table.lookup(Branch.ARCANE, Alignment.LAWFUL_NEUTRAL) == "wizard"
        assert table.lookup(Branch.SHADOW, Alignment.CHAOTIC_EVIL) == "assassin"

    def test_mappings_when_assigned_then_read_only(self, table):
        """The table cannot be modified after construction."""
        with pytest.raises(TypeError):
            table.classes[Branch.MARTIAL][Alignment.LAWFUL_GOOD] = "other"  # type: ignore

    def test_to_dict_when_rebuilt_then_equal(self, table):
        """A table serialized and rebuilt resolves identically."""
        data = table.to_dict()
        rebuilt = ClassTable.from_dict(data)
        assert rebuilt.class_ids == table.class_ids


class TestClassTableConstruction:
    """Tests for completeness checks on construction."""

    def test_from_dict_when_pair_missing_then_raises_error(self, class_table_data):
        """Missing pairs are reported by name."""
        del class_table_data["classes"]["arcane"]["TN"]
        with pytest.raises(ClassTableError, match="arcane/TN"):
            ClassTable.from_dict(class_table_data)

    def test_from_dict_when_attribute_unmapped_then_raises_error(self, class_table_data):
        """Every attribute needs a branch."""
        del class_table_data["attribute_to_branch"]["wisdom"]
        with pytest.raises(ClassTableError, match="wisdom"):
            ClassTable.from_dict(class_table_data)

    def test_from_dict_when_branch_shared_then_raises_error(self, class_table_data):
        """Two attributes cannot share a branch."""
        class_table_data["attribute_to_branch"]["wisdom"] = "arcane"
        with pytest.raises(ClassTableError, match="own branch"):
            ClassTable.from_dict(class_table_data)

    def test_from_dict_when_class_id_repeated_then_raises_error(self, class_table_data):
        """Class ids must be distinct across the table."""
        class_table_data["classes"]["divine"]["LG"] = "paladin"
        with pytest.raises(ClassTableError, match="paladin"):
            ClassTable.from_dict(class_table_data)
