"""
Text Validation Checks

Validates string fields against format and content constraints:
- Email addresses
- Product names
- Free text (descriptions, notes)
- Barcodes
"""

import re
from typing import Any, Mapping, Optional, Union

from ..models.input_kind import InputKind, classify_input, is_empty_input
from ..models.options import TextOptions
from ..models.validation_result import (
    ValidationResult,
    create_failure_result,
    create_pass_result,
)

EMAIL_MAX_LENGTH = 254
PRODUCT_NAME_MAX_LENGTH = 100
BARCODE_MIN_LENGTH = 6
BARCODE_MAX_LENGTH = 50

# Not RFC 5322
EMAIL_PATTERN = re.compile(r'[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}')

# Script tags, javascript: URLs and inline event handlers
MALICIOUS_CONTENT_PATTERN = re.compile(r'<script|javascript:|on\w+=', re.IGNORECASE | re.ASCII)

BARCODE_PATTERN = re.compile(r'[A-Za-z0-9]+')


def contains_malicious_content(text: str) -> bool:
    """Check text for script tags, javascript: URLs or event handlers."""
    return MALICIOUS_CONTENT_PATTERN.search(text) is not None


def validate_email(email: Any) -> ValidationResult:
    """
    Validate an email address.

    Args:
        email: Raw input (anything other than a non-empty string is missing)

    Returns:
        ValidationResult
    """
    if classify_input(email) != InputKind.STRING:
        return create_failure_result("Email is required")

    trimmed = email.strip()

    if not trimmed:
        return create_failure_result("Email is required")

    if len(trimmed) > EMAIL_MAX_LENGTH:
        return create_failure_result("Email address is too long")

    if not EMAIL_PATTERN.fullmatch(trimmed):
        return create_failure_result("Please enter a valid email address")

    # Common mistakes the pattern lets through
    if '..' in trimmed or trimmed.startswith('.') or trimmed.endswith('.'):
        return create_failure_result("Invalid email format")

    return create_pass_result()


def validate_product_name(product_name: Any) -> ValidationResult:
    """Validate an inventory product name."""
    if classify_input(product_name) != InputKind.STRING:
        return create_failure_result("Product name is required")

    trimmed = product_name.strip()

    if not trimmed:
        return create_failure_result("Product name is required")

    if len(trimmed) > PRODUCT_NAME_MAX_LENGTH:
        return create_failure_result(
            f"Product name must be {PRODUCT_NAME_MAX_LENGTH} characters or less")

    if contains_malicious_content(trimmed):
        return create_failure_result("Product name contains invalid characters")

    return create_pass_result()


def _as_text(value: Any) -> Optional[str]:
    """Text form of a raw input, or None when there is nothing to check."""
    if is_empty_input(value):
        return None
    if classify_input(value) == InputKind.STRING:
        return value
    return str(value)


def validate_text(
    text: Any,
    options: Union[TextOptions, Mapping[str, Any], None] = None
) -> ValidationResult:
    """
    Validate free text such as descriptions and notes.

    Args:
        text: Raw input
        options: TextOptions (or a mapping of its fields); defaults apply
            when omitted

    Returns:
        ValidationResult

    Example:
        >>> validate_text("x" * 300, TextOptions(max_length=250, label="Notes")).message
        'Notes must be 250 characters or less'
    """
    options = TextOptions.coerce(options)
    value = _as_text(text)

    if value is None or not value.strip():
        if options.required:
            return create_failure_result(f"{options.label} is required")
        return create_pass_result()

    if len(value) > options.max_length:
        return create_failure_result(
            f"{options.label} must be {options.max_length} characters or less")

    if contains_malicious_content(value):
        return create_failure_result(f"{options.label} contains invalid characters")

    return create_pass_result()


def validate_barcode(barcode: Any) -> ValidationResult:
    """Validate a scanned or typed barcode (alphanumeric, 6-50 characters)."""
    if classify_input(barcode) != InputKind.STRING:
        return create_failure_result("Barcode is required")

    trimmed = barcode.strip()

    if not trimmed:
        return create_failure_result("Barcode is required")

    if not BARCODE_PATTERN.fullmatch(trimmed):
        return create_failure_result("Barcode must contain only letters and numbers")

    if len(trimmed) < BARCODE_MIN_LENGTH or len(trimmed) > BARCODE_MAX_LENGTH:
        return create_failure_result(
            f"Barcode must be between {BARCODE_MIN_LENGTH} and {BARCODE_MAX_LENGTH} characters")

    return create_pass_result()
