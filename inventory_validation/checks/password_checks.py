"""
Password Validation Checks

Unlike the other validators, password validation reports every unmet
requirement, not just the first, so the UI can render per-rule feedback.
"""

import re
from typing import Any

from ..models.input_kind import InputKind, classify_input
from ..models.validation_result import PasswordRequirements, PasswordValidationResult

PASSWORD_MIN_LENGTH = 8

_UPPER_CASE = re.compile(r'[A-Z]')
_LOWER_CASE = re.compile(r'[a-z]')
_DIGIT = re.compile(r'[0-9]')
_SYMBOL = re.compile(r'[!@#$%^&*(),.?":{}|<>]')


def check_password_requirements(password: str) -> PasswordRequirements:
    """Evaluate each password rule independently."""
    return PasswordRequirements(
        min_length=len(password) >= PASSWORD_MIN_LENGTH,
        has_upper_case=_UPPER_CASE.search(password) is not None,
        has_lower_case=_LOWER_CASE.search(password) is not None,
        has_numbers=_DIGIT.search(password) is not None,
        has_symbols=_SYMBOL.search(password) is not None,
    )


def validate_password(password: Any) -> PasswordValidationResult:
    """
    Validate a password against all strength requirements.

    Args:
        password: Raw input (anything other than a non-empty string is missing)

    Returns:
        PasswordValidationResult with per-rule requirements attached

    Example:
        >>> validate_password("abc").message
        'Password must contain: at least 8 characters, uppercase letter, number, special character'
    """
    if classify_input(password) != InputKind.STRING:
        return PasswordValidationResult(
            is_valid=False,
            message="Password is required",
            requirements=PasswordRequirements(),
        )

    requirements = check_password_requirements(password)

    if requirements.all_met:
        return PasswordValidationResult(is_valid=True, message="", requirements=requirements)

    return PasswordValidationResult(
        is_valid=False,
        message=f"Password must contain: {', '.join(requirements.failed_labels())}",
        requirements=requirements,
    )
