"""
Utils Package

Serialization helpers for answers and results.
"""

from .serialization import (
    answers_from_payload,
    answers_to_payload,
    load_answers_json,
    save_answers_json,
    character_result_to_json,
)

__all__ = [
    "answers_from_payload",
    "answers_to_payload",
    "load_answers_json",
    "save_answers_json",
    "character_result_to_json",
]
