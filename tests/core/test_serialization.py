"""
Unit Tests for Serialization Utilities

Tests for answer payload decoding and result JSON output.
"""

import json

import pytest

from character_toolkit.core.models import Answer
from character_toolkit.core.utils import (
    answers_from_payload,
    character_result_to_json,
    load_answers_json,
    save_answers_json,
)
from character_toolkit.scoring import partial_character, resolve_character


class TestAnswerPayloads:
    """Tests for answer decoding."""

    def test_answers_from_payload_when_mixed_keys_then_preserves_order(self):
        """Decoding keeps caller order, which decides last-wins folding."""
        answers = answers_from_payload([
            {"questionId": "STR-1", "selectedOptionId": "A"},
            {"question_id": "STR-1", "selected_option_id": "B"},
        ])
        assert answers == [Answer("STR-1", "A"), Answer("STR-1", "B")]

    def test_answers_from_payload_when_entry_not_object_then_raises_error(self):
        """Non-object entries should raise ValueError."""
        with pytest.raises(ValueError, match="must be an object"):
            answers_from_payload(["STR-1"])

    def test_load_answers_json_when_wrapped_then_reads_list(self, tmp_path):
        """{"answers": [...]} files are accepted."""
        path = tmp_path / "answers.json"
        path.write_text(json.dumps({"answers": [{"questionId": "CHA-1", "selectedOptionId": "A"}]}))
        assert load_answers_json(path) == [Answer("CHA-1", "A")]

    def test_load_answers_json_when_not_a_list_then_raises_error(self, tmp_path):
        """Unrecognized structures should raise ValueError."""
        path = tmp_path / "answers.json"
        path.write_text(json.dumps({"questions": []}))
        with pytest.raises(ValueError, match="Expected a list of answers"):
            load_answers_json(path)

    def test_save_answers_json_when_reloaded_then_same_answers(self, tmp_path, full_answers):
        """Saved answers load back unchanged."""
        path = tmp_path / "answers.json"
        save_answers_json(full_answers, path)
        assert load_answers_json(path) == full_answers


class TestResultJson:
    """Tests for result serialization."""

    def test_character_result_to_json_when_full_then_string_values(self, full_answers):
        """Enum members serialize as their string values."""
        data = json.loads(character_result_to_json(resolve_character(full_answers)))
        assert data["character_class"] == "paladin"
        assert data["branch"] == "martial"
        assert data["alignment"]["alignment"] == "LG"
        assert data["race"]["race"] == "elf"
        assert list(data["attributes"]) == [
            "strength", "constitution", "dexterity", "intelligence", "wisdom", "charisma",
        ]

    def test_character_result_to_json_when_partial_then_sections_omitted(self):
        """Partial results omit sections that were not computed."""
        data = json.loads(character_result_to_json(partial_character([Answer("STR-1", "B")])))
        assert "alignment" not in data
        assert "character_class" not in data
        assert data["answered_count"] == 1
