#!/usr/bin/env python3
"""Score a saved answer set and print the character profile.

Reads a JSON file holding a list of {"questionId", "selectedOptionId"}
objects (or {"answers": [...]}) and prints the result as JSON, followed
by a short human-readable summary on stderr.

Usage:
    python scripts/score_answers.py answers.json [--partial] [--validate]
"""

import argparse
import logging
import sys
from pathlib import Path

# Add src to path so we can import character_toolkit
project_root = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(project_root / "src"))

from character_toolkit.bank import ClassTableError, LoaderError, load_class_table, load_question_bank
from character_toolkit.common import alignment_emoji, attribute_label, format_display_title
from character_toolkit.core.schemas import ValidationError
from character_toolkit.core.utils import character_result_to_json, load_answers_json
from character_toolkit.scoring import partial_character, resolve_character, validate_answers

logger = logging.getLogger("score_answers")


def print_summary(result) -> None:
    """Human-readable summary on stderr."""
    if result.race is not None:
        title = format_display_title(result.race.race, result.character_class)
        print(f"\n{title}", file=sys.stderr)
    if result.alignment is not None:
        alignment = result.alignment.alignment
        print(f"  Alignment: {alignment_emoji(alignment)} {alignment.display_name}", file=sys.stderr)
    for attribute, score in result.attributes.items():
        print(
            f"  {attribute.code}: {score.normalized:>3} ({attribute_label(score.normalized)})",
            file=sys.stderr,
        )


def main() -> int:
    parser = argparse.ArgumentParser(description="Score a questionnaire answer set")
    parser.add_argument("answers", type=Path, help="JSON file with the answers")
    parser.add_argument("--partial", action="store_true", help="Score an incomplete answer set")
    parser.add_argument("--validate", action="store_true", help="Only report missing and invalid answers")
    parser.add_argument("--question-bank", type=Path, help="Alternative question bank JSON")
    parser.add_argument("--class-table", type=Path, help="Alternative class table JSON")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        answers = load_answers_json(args.answers)
        bank = load_question_bank(args.question_bank, strict=True)
        table = load_class_table(args.class_table, strict=True)
    except (OSError, ValueError, LoaderError, ValidationError, ClassTableError) as e:
        logger.error(f"Could not load input: {e}")
        return 1

    if args.validate:
        report = validate_answers(answers, bank=bank)
        print(character_result_to_json(report))
        return 0 if report.valid else 2

    if args.partial:
        result = partial_character(answers, bank=bank, table=table)
    else:
        result = resolve_character(answers, bank=bank, table=table)

    print(character_result_to_json(result))
    print_summary(result)
    return 0


if __name__ == "__main__":
    sys.exit(main())
