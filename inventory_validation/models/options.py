"""
Validator Options

Configuration structs for the configurable validators. Each struct can be
built directly or from a mapping (as loaded from a YAML rules file).
"""

from dataclasses import dataclass, fields
from typing import Any, Mapping, Optional, Type, TypeVar, Union

# Largest integer exactly representable as a double
MAX_SAFE_INTEGER = 2 ** 53 - 1

T = TypeVar("T", bound="_OptionsBase")

_TYPE_NAMES = {float: "a number", int: "an integer", bool: "a boolean", str: "a string"}


def _matches_type(value: Any, expected: type) -> bool:
    # bool is a subclass of int, so it never counts as a number
    if expected is bool:
        return isinstance(value, bool)
    if isinstance(value, bool):
        return False
    if expected is float:
        return isinstance(value, (int, float))
    return isinstance(value, expected)


class _OptionsBase:
    """Shared construction helpers for option dataclasses."""

    @classmethod
    def from_dict(cls: Type[T], data: Optional[Mapping[str, Any]]) -> T:
        """
        Build options from a mapping.

        Raises:
            ValueError: If the mapping contains unknown option names or
                values of the wrong type
        """
        data = dict(data or {})
        option_types = {f.name: f.type for f in fields(cls)}
        unknown = sorted(set(data) - set(option_types))
        if unknown:
            raise ValueError(
                f"Unknown option(s) for {cls.__name__}: {', '.join(unknown)}")

        for name, value in data.items():
            if not _matches_type(value, option_types[name]):
                raise ValueError(
                    f"Option '{name}' for {cls.__name__} must be {_TYPE_NAMES[option_types[name]]}, "
                    f"got {type(value).__name__}")

        return cls(**data)

    @classmethod
    def coerce(cls: Type[T], options: Union[T, Mapping[str, Any], None]) -> T:
        """Accept an options instance, a mapping, or None (defaults)."""
        if isinstance(options, cls):
            return options
        return cls.from_dict(options)


@dataclass(frozen=True)
class NumberOptions(_OptionsBase):
    """Options for numeric fields (quantities, prices, stock levels)."""
    min_value: float = 0
    max_value: float = MAX_SAFE_INTEGER
    required: bool = True
    label: str = "Value"
    # Whole numbers only (counts of items)
    integer: bool = False


@dataclass(frozen=True)
class TextOptions(_OptionsBase):
    """Options for free-text fields (descriptions, notes)."""
    max_length: int = 1000
    required: bool = False
    label: str = "Text"


@dataclass(frozen=True)
class DateOptions(_OptionsBase):
    """Options for date fields (expiry dates, order dates)."""
    required: bool = True
    label: str = "Date"
    future_only: bool = False


