"""
Value Validation Checks

Validates and parses typed values entered as text:
- Numbers (quantities, prices, stock levels) with range constraints
- Dates (expiry dates, order dates), optionally future-only

Both validators return the parsed value on success.
"""

import math
import re
from datetime import datetime, timezone
from typing import Any, Mapping, Optional, Union

from ..models.input_kind import InputKind, classify_input, is_empty_input
from ..models.options import DateOptions, NumberOptions
from ..models.validation_result import (
    ValidationResult,
    create_failure_result,
    create_pass_result,
)

# Longest numeric prefix, as accepted by JavaScript's parseFloat
_FLOAT_PREFIX_PATTERN = re.compile(
    r'[+-]?(?:Infinity|(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?)'
)

# Optional sign and digits only
_INTEGER_PATTERN = re.compile(r'\s*[+-]?[0-9]+\s*')

# Fallback formats when ISO 8601 parsing fails
_DATE_FORMATS = [
    '%Y-%m-%dT%H:%M:%S',
    '%Y-%m-%d %H:%M:%S',
    '%Y-%m-%d',
]


def parse_float(value: Any) -> Optional[float]:
    """
    Parse a raw input as a float.

    Strings are parsed by their leading numeric prefix, so ``"12 boxes"``
    parses as 12.0 and ``"Infinity"`` as infinity. Returns None when no
    number can be read.

    Examples:
        >>> parse_float("  3.5ml")
        3.5
        >>> parse_float("abc") is None
        True
    """
    kind = classify_input(value)

    if kind == InputKind.NUMBER:
        try:
            number = float(value)
        except OverflowError:
            number = math.inf if value > 0 else -math.inf
        return None if math.isnan(number) else number

    if kind != InputKind.STRING:
        return None

    match = _FLOAT_PREFIX_PATTERN.match(value.lstrip())
    if match is None:
        return None

    text = match.group(0)
    if text.lstrip('+-') == 'Infinity':
        return -math.inf if text.startswith('-') else math.inf
    return float(text)


def format_number(number: float) -> str:
    """Render a number for messages (``5`` not ``5.0``)."""
    if isinstance(number, float):
        if math.isinf(number):
            return '-Infinity' if number < 0 else 'Infinity'
        if number.is_integer():
            return str(int(number))
    return str(number)


def _is_whole_number(value: Any, number: float) -> bool:
    """Whether a raw input spells a whole number, with no fraction or trailing text."""
    if math.isinf(number) or not number.is_integer():
        return False
    if classify_input(value) == InputKind.STRING:
        return _INTEGER_PATTERN.fullmatch(value) is not None
    return True


def validate_number(
    value: Any,
    options: Union[NumberOptions, Mapping[str, Any], None] = None
) -> ValidationResult:
    """
    Validate a numeric field and parse it.

    Args:
        value: Raw input (string from a text field, or a number)
        options: NumberOptions (or a mapping of its fields)

    Returns:
        ValidationResult carrying the parsed float on success (an int when
        options.integer is set)

    Example:
        >>> validate_number("5", NumberOptions(min_value=1, max_value=10)).value
        5.0
    """
    options = NumberOptions.coerce(options)

    if classify_input(value) == InputKind.ABSENT:
        if options.required:
            return create_failure_result(f"{options.label} is required")
        return create_pass_result()

    number = parse_float(value)

    if number is None:
        return create_failure_result(f"{options.label} must be a valid number")

    if number < options.min_value:
        return create_failure_result(
            f"{options.label} must be at least {format_number(options.min_value)}")

    if number > options.max_value:
        return create_failure_result(
            f"{options.label} must be no more than {format_number(options.max_value)}")

    if options.integer:
        if not _is_whole_number(value, number):
            return create_failure_result(f"{options.label} must be a whole number")
        return create_pass_result(int(number))

    return create_pass_result(number)


def _parse_date_string(value: str) -> datetime:
    """
    Parse a date string.

    Supports:
    - ISO8601 with timezone
    - ISO8601 without timezone (assumes UTC)
    - '%Y-%m-%d %H:%M:%S' and '%Y-%m-%d'

    Raises:
        ValueError if parsing fails
    """
    value = value.strip()
    try:
        if value.endswith('Z'):
            value = value[:-1] + '+00:00'
        return datetime.fromisoformat(value)
    except ValueError:
        for fmt in _DATE_FORMATS:
            try:
                return datetime.strptime(value, fmt)
            except ValueError:
                continue

        raise ValueError(f"Cannot parse date: {value}")


def parse_date(value: Any) -> Optional[datetime]:
    """
    Parse a raw input as a timezone-aware datetime.

    Accepts datetime/date objects, epoch milliseconds and date strings.
    Naive values are treated as UTC. Returns None when unparseable.
    """
    kind = classify_input(value)

    try:
        if kind == InputKind.DATE:
            if isinstance(value, datetime):
                parsed = value
            else:
                parsed = datetime(value.year, value.month, value.day)
        elif kind == InputKind.NUMBER:
            if math.isnan(value) or math.isinf(value):
                return None
            parsed = datetime.fromtimestamp(value / 1000, tz=timezone.utc)
        elif kind == InputKind.STRING:
            parsed = _parse_date_string(value)
        else:
            return None
    except (ValueError, OverflowError, OSError):
        return None

    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def validate_date(
    value: Any,
    options: Union[DateOptions, Mapping[str, Any], None] = None,
    now: Optional[datetime] = None
) -> ValidationResult:
    """
    Validate a date field and parse it.

    Args:
        value: Raw input (date string, datetime/date, or epoch milliseconds)
        options: DateOptions (or a mapping of its fields)
        now: Reference time for future_only (defaults to the current UTC time)

    Returns:
        ValidationResult carrying an aware datetime on success
    """
    options = DateOptions.coerce(options)

    if is_empty_input(value):
        if options.required:
            return create_failure_result(f"{options.label} is required")
        return create_pass_result()

    parsed = parse_date(value)

    if parsed is None:
        return create_failure_result(f"Please enter a valid {options.label.lower()}")

    if options.future_only:
        if now is None:
            now = datetime.now(timezone.utc)
        elif now.tzinfo is None:
            now = now.replace(tzinfo=timezone.utc)

        if parsed <= now:
            return create_failure_result(f"{options.label} must be in the future")

    return create_pass_result(parsed)
