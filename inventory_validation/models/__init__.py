"""
Validation Models Module

Defines result types, validator options and input classification.
"""

from .validation_result import (
    ValidationResult,
    PasswordRequirements,
    PasswordValidationResult,
    FormValidationResult,
    create_pass_result,
    create_failure_result,
    create_form_result,
)
from .options import NumberOptions, TextOptions, DateOptions, MAX_SAFE_INTEGER
from .input_kind import InputKind, classify_input, is_empty_input

__all__ = [
    "ValidationResult",
    "PasswordRequirements",
    "PasswordValidationResult",
    "FormValidationResult",
    "create_pass_result",
    "create_failure_result",
    "create_form_result",
    "NumberOptions",
    "TextOptions",
    "DateOptions",
    "MAX_SAFE_INTEGER",
    "InputKind",
    "classify_input",
    "is_empty_input",
]
