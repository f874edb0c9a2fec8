"""
Schemas Package

Validation of the static question bank and class table data.
"""

from .validator import (
    validate_question_bank,
    validate_class_table,
    ValidationError,
    QUESTION_BANK_SCHEMA_VERSION,
    CLASS_TABLE_SCHEMA_VERSION,
)

__all__ = [
    "validate_question_bank",
    "validate_class_table",
    "ValidationError",
    "QUESTION_BANK_SCHEMA_VERSION",
    "CLASS_TABLE_SCHEMA_VERSION",
]
