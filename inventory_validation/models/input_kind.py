"""
Input Classification

Raw form input arrives as whatever the caller holds: strings from text
fields, numbers from steppers, dates from pickers, or nothing at all.
Validators classify the input once and branch on the kind.
"""

from datetime import date, datetime
from enum import Enum
from typing import Any


class InputKind(Enum):
    """Shape of a raw input value."""
    ABSENT = "absent"        # None or the empty string
    STRING = "string"
    NUMBER = "number"        # int or float, never bool
    BOOLEAN = "boolean"
    DATE = "date"            # datetime.date or datetime.datetime
    SEQUENCE = "sequence"    # list or tuple
    MAPPING = "mapping"      # dict
    OTHER = "other"


def classify_input(value: Any) -> InputKind:
    """
    Classify a raw input value.

    Examples:
        >>> classify_input(None)
        <InputKind.ABSENT: 'absent'>
        >>> classify_input("")
        <InputKind.ABSENT: 'absent'>
        >>> classify_input("  ")
        <InputKind.STRING: 'string'>
        >>> classify_input(True)
        <InputKind.BOOLEAN: 'boolean'>
    """
    if value is None:
        return InputKind.ABSENT
    if isinstance(value, str):
        return InputKind.ABSENT if value == "" else InputKind.STRING
    # bool is a subclass of int, so it must be tested first
    if isinstance(value, bool):
        return InputKind.BOOLEAN
    if isinstance(value, (int, float)):
        return InputKind.NUMBER
    if isinstance(value, (datetime, date)):
        return InputKind.DATE
    if isinstance(value, (list, tuple)):
        return InputKind.SEQUENCE
    if isinstance(value, dict):
        return InputKind.MAPPING
    return InputKind.OTHER


def is_empty_input(value: Any) -> bool:
    """
    Check whether a raw input counts as "nothing entered".

    Besides absent values, False, 0 and NaN are empty; blank strings are
    not (text validators trim those themselves).

    Examples:
        >>> is_empty_input(0)
        True
        >>> is_empty_input("0")
        False
    """
    kind = classify_input(value)
    if kind == InputKind.ABSENT:
        return True
    if kind == InputKind.BOOLEAN:
        return value is False
    if kind == InputKind.NUMBER:
        return value == 0 or value != value
    return False
