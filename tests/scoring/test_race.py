"""
Tests for the race voter.
"""

import pytest

from character_toolkit.core.models import RACE_ORDER, Answer, Race
from character_toolkit.scoring import tally_winner, vote_race


class TestTallyWinner:
    """Tests for tally_winner."""

    def test_tally_when_no_votes_then_first_race_zero_confidence(self):
        """With no votes the first race wins with confidence 0."""
        assert tally_winner({}) == (Race.HUMAN, 0.0)

    def test_tally_when_tie_then_earlier_race_wins(self):
        """Ties resolve to the race earlier in canonical order."""
        assert tally_winner({Race.ORC: 3, Race.ELF: 3}) == (Race.ELF, 0.0)

    def test_tally_when_unanimous_then_full_confidence(self):
        """A single race with every vote has confidence 1."""
        assert tally_winner({Race.DRAGONBORN: 1}) == (Race.DRAGONBORN, 1.0)


class TestVoteRace:
    """Tests for vote_race over the bundled bank."""

    def test_vote_when_no_answers_then_human(self, bank):
        """No race answers defaults to the first race."""
        result = vote_race([], bank=bank)
        assert result.race is Race.HUMAN
        assert result.confidence == 0.0
        assert result.total_votes == 0

    def test_vote_when_3_3_tie_then_elf_over_orc(self, bank):
        """A 3-3 elf/orc split goes to elf."""
        answers = [Answer(f"RACE-{i}", "E") for i in range(1, 4)]
        answers += [Answer(f"RACE-{i}", "B") for i in range(4, 7)]
        result = vote_race(answers, bank=bank)
        assert result.race is Race.ELF
        assert result.votes[Race.ORC] == 3
        assert result.confidence == 0.0

    def test_vote_when_full_answers_then_margin_confidence(self, bank, full_answers):
        """Confidence is (winner - runner-up) / total."""
        result = vote_race(full_answers, bank=bank)
        assert result.race is Race.ELF
        assert result.votes[Race.DWARF] == 2
        assert result.confidence == pytest.approx(2 / 6)

    def test_vote_when_all_one_race_then_confidence_one(self, bank):
        """A unanimous vote has confidence 1."""
        answers = [Answer(f"RACE-{i}", "F") for i in range(1, 7)]
        result = vote_race(answers, bank=bank)
        assert result.race is Race.DRAGONBORN
        assert result.confidence == 1.0

    def test_vote_when_invalid_option_then_no_vote(self, bank):
        """Unknown option ids cast no vote."""
        result = vote_race([Answer("RACE-1", "G"), Answer("RACE-2", "D")], bank=bank)
        assert result.race is Race.HALFLING
        assert result.total_votes == 1

    def test_vote_when_any_answers_then_every_race_listed(self, bank):
        """The tally always lists all six races."""
        result = vote_race([Answer("RACE-1", "C")], bank=bank)
        assert tuple(result.votes) == RACE_ORDER
