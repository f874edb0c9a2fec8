"""
Tests for the character result composer.

Covers the full pipeline, partial-results mode and advisory validation.
"""

from character_toolkit.bank import question_bank_from_dict
from character_toolkit.core.models import (
    Alignment,
    Answer,
    AttributeName,
    Branch,
    Race,
)
from character_toolkit.scoring import (
    ScoringConfig,
    partial_character,
    resolve_character,
    validate_answers,
)


class TestResolveCharacter:
    """Tests for resolve_character."""

    def test_resolve_when_full_answers_then_elf_paladin(self, bank, table, full_answers):
        """The full fixture resolves to an Elf Paladin."""
        result = resolve_character(full_answers, bank=bank, table=table)
        assert result.race.race is Race.ELF
        assert result.alignment.alignment is Alignment.LAWFUL_GOOD
        assert result.branch is Branch.MARTIAL
        assert result.character_class == "paladin"
        assert result.attributes[AttributeName.STRENGTH].normalized == 90
        assert repr(result) == "CharacterResult(elf paladin, LG, primary=strength)"

    def test_resolve_when_no_answers_then_human_fighter(self, bank, table):
        """An empty answer set still yields a defined result."""
        result = resolve_character([], bank=bank, table=table)
        assert result.race.race is Race.HUMAN
        assert result.race.confidence == 0.0
        assert result.alignment.alignment is Alignment.TRUE_NEUTRAL
        assert result.character_class == "fighter"
        assert all(r.normalized == 0 for r in result.attributes.values())

    def test_resolve_when_defaults_then_bundled_data_used(self, full_answers):
        """Bank and table default to the bundled data."""
        assert resolve_character(full_answers).character_class == "paladin"

    def test_resolve_when_chaotic_evil_then_reaver(self, bank, table, full_answers, chaotic_evil_answers):
        """Later alignment answers override earlier ones."""
        result = resolve_character(full_answers + chaotic_evil_answers, bank=bank, table=table)
        assert result.alignment.alignment is Alignment.CHAOTIC_EVIL
        assert result.character_class == "reaver"

    def test_resolve_when_mapping_given_then_same_result(self, bank, table, full_answers):
        """A pre-folded mapping scores like the answer list."""
        mapping = {a.question_id: a.selected_option_id for a in full_answers}
        assert (
            resolve_character(mapping, bank=bank, table=table).to_dict()
            == resolve_character(full_answers, bank=bank, table=table).to_dict()
        )


class TestPartialCharacter:
    """Tests for partial_character."""

    def test_partial_when_no_answers_then_only_attributes(self, bank, table):
        """Without answers only the zeroed attributes are present."""
        result = partial_character([], bank=bank, table=table)
        assert len(result.attributes) == 6
        assert result.alignment is None
        assert result.race is None
        assert not result.has_class
        assert (result.answered_count, result.total_questions) == (0, 42)

    def test_partial_when_primary_has_two_answers_then_class_withheld(self, bank, table):
        """Two answers on the primary attribute are not enough for a class."""
        answers = [Answer("STR-3", "D"), Answer("STR-4", "C"), Answer("ALIGN-1", "A")]
        result = partial_character(answers, bank=bank, table=table)
        assert result.alignment.alignment is Alignment.LAWFUL_NEUTRAL
        assert result.race is None
        assert result.character_class is None

    def test_partial_when_primary_has_three_answers_then_class_reported(self, bank, table):
        """Three answers on the primary attribute plus alignment yield a class."""
        answers = [
            Answer("STR-3", "D"), Answer("STR-4", "C"), Answer("STR-5", "D"),
            Answer("ALIGN-1", "A"),
        ]
        result = partial_character(answers, bank=bank, table=table)
        assert result.character_class == "soldier"
        assert result.branch is Branch.MARTIAL
        assert result.answered_count == 4

    def test_partial_when_no_alignment_then_class_withheld(self, bank, table):
        """A class needs an alignment even with enough attribute answers."""
        answers = [Answer(f"CON-{i}", "D") for i in range(1, 6)]
        result = partial_character(answers, bank=bank, table=table)
        assert result.alignment is None
        assert not result.has_class

    def test_partial_when_other_attribute_has_answers_then_primary_decides(self, bank, table):
        """Only the primary attribute's answer count matters."""
        answers = [
            Answer("STR-3", "D"), Answer("STR-4", "C"),
            Answer("WIS-2", "C"), Answer("WIS-3", "C"), Answer("WIS-4", "C"),
            Answer("ALIGN-1", "C"),
        ]
        result = partial_character(answers, bank=bank, table=table)
        assert result.character_class is None

    def test_partial_when_constitution_primary_then_stalwart_class(self, bank, table):
        """The partial class follows the primary attribute's branch."""
        answers = [
            Answer("CON-1", "D"), Answer("CON-2", "A"), Answer("CON-3", "B"),
            Answer("ALIGN-1", "C"),
        ]
        result = partial_character(answers, bank=bank, table=table)
        assert result.primary_attribute is AttributeName.CONSTITUTION
        assert result.character_class == "brawler"

    def test_partial_when_only_race_answered_then_race_present(self, bank, table):
        """Race appears as soon as one race question is answered."""
        result = partial_character([Answer("RACE-4", "D")], bank=bank, table=table)
        assert result.race.race is Race.HALFLING
        assert result.alignment is None

    def test_partial_when_invalid_alignment_option_then_alignment_absent(self, bank, table):
        """An unknown option counts as unanswered, so alignment stays absent."""
        result = partial_character([Answer("ALIGN-2", "Z")], bank=bank, table=table)
        assert result.alignment is None
        assert result.answered_count == 0

    def test_partial_when_only_invalid_alignment_then_class_withheld(self, bank, table):
        """A class needs at least one valid alignment answer."""
        answers = [Answer(f"STR-{i}", "D") for i in range(1, 4)] + [Answer("ALIGN-2", "Z")]
        result = partial_character(answers, bank=bank, table=table)
        assert result.attributes[AttributeName.STRENGTH].questions_answered == 3
        assert result.alignment is None
        assert not result.has_class

    def test_partial_when_invalid_race_option_then_race_absent(self, bank, table):
        """Race answers with unknown options do not make the race section present."""
        result = partial_character([Answer("RACE-1", "Z")], bank=bank, table=table)
        assert result.race is None

    def test_partial_when_bank_max_raised_then_scores_normalized(self, table, question_bank_data):
        """Scoring follows the bank's maximum, so higher option scores stay within 0-100."""
        strength_3 = next(q for q in question_bank_data["questions"] if q["id"] == "STR-3")
        strength_3["options"][3]["score"] = 8
        bank = question_bank_from_dict(question_bank_data, max_option_score=8)
        result = partial_character([Answer("STR-3", "D")], bank=bank, table=table)
        strength = result.attributes[AttributeName.STRENGTH]
        assert (strength.raw, strength.max_possible, strength.normalized) == (8, 8, 100)

    def test_partial_when_min_answers_lowered_then_class_earlier(self, bank, table):
        """partial_class_min_answers controls when the class appears."""
        config = ScoringConfig(partial_class_min_answers=1)
        answers = [Answer("INT-1", "A"), Answer("ALIGN-4", "A")]
        result = partial_character(answers, bank=bank, table=table, config=config)
        assert result.alignment.alignment is Alignment.NEUTRAL_GOOD
        assert result.character_class == "sage"

    def test_partial_when_all_answered_then_matches_full(self, bank, table, full_answers):
        """A complete answer set gives the full result's sections."""
        partial = partial_character(full_answers, bank=bank, table=table)
        full = resolve_character(full_answers, bank=bank, table=table)
        assert partial.is_complete
        assert partial.character_class == full.character_class
        assert partial.race == full.race
        assert partial.alignment == full.alignment


class TestValidateAnswers:
    """Tests for validate_answers."""

    def test_validate_when_no_answers_then_all_missing(self, bank):
        """Every question is missing, bank order."""
        report = validate_answers([], bank=bank)
        assert report.missing_questions == bank.question_ids
        assert not report.valid

    def test_validate_when_full_answers_then_valid(self, bank, full_answers):
        """A complete, well-formed set is valid."""
        assert validate_answers(full_answers, bank=bank).valid

    def test_validate_when_unknown_option_then_reported_invalid(self, bank, full_answers):
        """Unknown option ids are reported as invalid, not missing."""
        report = validate_answers(full_answers + [Answer("DEX-2", "Q")], bank=bank)
        assert report.invalid_answers == ("DEX-2",)
        assert report.missing_questions == ()

    def test_validate_when_unknown_question_then_ignored(self, bank, full_answers):
        """Answers to questions outside the bank do not affect validity."""
        assert validate_answers(full_answers + [Answer("LUCK-1", "A")], bank=bank).valid
