import json
import sys
from pathlib import Path

import pytest

# Add src to sys.path so we can import character_toolkit
SRC_PATH = Path(__file__).resolve().parent.parent / "src"
if SRC_PATH.as_posix() not in sys.path:
    sys.path.insert(0, SRC_PATH.as_posix())

from character_toolkit.bank import default_class_table, default_question_bank  # noqa: E402
from character_toolkit.bank.loader import CLASS_TABLE_PATH, QUESTION_BANK_PATH  # noqa: E402
from character_toolkit.core.models import Answer  # noqa: E402


def make_answers(*pairs):
    """Build Answers from ("STR-1", "A") pairs."""
    return [Answer(question_id, option_id) for question_id, option_id in pairs]


# Common test fixtures
@pytest.fixture
def bank():
    """The bundled question bank."""
    return default_question_bank()


@pytest.fixture
def table():
    """The bundled class table."""
    return default_class_table()


@pytest.fixture
def question_bank_data():
    """Fresh, mutable copy of the bundled question bank JSON."""
    with open(QUESTION_BANK_PATH, "r", encoding="utf-8") as f:
        return json.load(f)


@pytest.fixture
def class_table_data():
    """Fresh, mutable copy of the bundled class table JSON."""
    with open(CLASS_TABLE_PATH, "r", encoding="utf-8") as f:
        return json.load(f)


@pytest.fixture
def full_answers():
    """
    A complete 42-answer set.

    STR 18 (90), CON 4 (20), DEX 9 (45), INT 0, WIS 17 (85), CHA 8 (40);
    lawful 10 / good 9 -> LG; elf 4, dwarf 2 -> Elf Paladin.
    """
    pairs = [
        ("STR-1", "B"), ("STR-2", "B"), ("STR-3", "D"), ("STR-4", "C"), ("STR-5", "D"),
    ]
    pairs += [(f"CON-{i}", "D") for i in range(1, 6)]
    pairs += [(f"DEX-{i}", "A") for i in range(1, 6)]
    pairs += [(f"INT-{i}", "D") for i in range(1, 6)]
    pairs += [(f"WIS-{i}", "A") for i in range(1, 6)]
    pairs += [(f"CHA-{i}", "C") for i in range(1, 6)]
    pairs += [(f"ALIGN-{i}", "A") for i in range(1, 7)]
    pairs += [(f"RACE-{i}", "B") for i in range(1, 5)]
    pairs += [("RACE-5", "C"), ("RACE-6", "C")]
    return make_answers(*pairs)


@pytest.fixture
def chaotic_evil_answers():
    """Alignment answers totalling chaotic 15 / evil 12."""
    return make_answers(
        ("ALIGN-1", "D"), ("ALIGN-2", "C"), ("ALIGN-3", "D"),
        ("ALIGN-4", "D"), ("ALIGN-5", "D"), ("ALIGN-6", "D"),
    )
