"""
Module: bank

Purpose:
    Static, versioned data consumed by the scoring engine: the question
    bank (42 questions) and the branch x alignment class table (54 classes).
    Both are validated on load and never mutated afterwards.

Key Functions:
    - load_question_bank(), default_question_bank()
    - load_class_table(), default_class_table()

Key Classes:
    - QuestionBank, ClassTable
    - LoaderError, ClassTableError
"""

from .question_bank import QuestionBank
from .class_table import ClassTable, ClassTableError
from .loader import (
    load_question_bank,
    load_class_table,
    question_bank_from_dict,
    default_question_bank,
    default_class_table,
    LoaderError,
)

__all__ = [
    "QuestionBank",
    "ClassTable",
    "ClassTableError",
    "load_question_bank",
    "load_class_table",
    "question_bank_from_dict",
    "default_question_bank",
    "default_class_table",
    "LoaderError",
]
