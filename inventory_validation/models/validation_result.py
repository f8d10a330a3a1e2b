"""
Validation Result Data Models

Defines the value types returned by every validator.

Design Philosophy:
- Immutable (dataclasses with frozen=True)
- Structured failures instead of exceptions
- Serializable (can be converted to dicts for UI or API responses)
"""

from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Any, Dict, List, Optional


@dataclass(frozen=True)
class ValidationResult:
    """
    Outcome of a single field validator.

    Attributes:
        is_valid: Whether the value satisfied every rule
        message: Human-readable failure message (empty on success)
        value: Parsed value, set only by parsing validators on success
    """
    is_valid: bool
    message: str = ""
    value: Optional[Any] = None

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        data = {
            'is_valid': self.is_valid,
            'message': self.message,
        }
        if self.value is not None:
            data['value'] = self._serialize_value(self.value)
        return data

    @staticmethod
    def _serialize_value(value: Any) -> Any:
        if isinstance(value, (datetime, date)):
            return value.isoformat()
        return value

    def __bool__(self) -> bool:
        return self.is_valid

    def __str__(self) -> str:
        if self.is_valid:
            return "[VALID]"
        return f"[INVALID] {self.message}"


@dataclass(frozen=True)
class PasswordRequirements:
    """Per-rule password feedback, always attached to password results."""
    min_length: bool = False
    has_upper_case: bool = False
    has_lower_case: bool = False
    has_numbers: bool = False
    has_symbols: bool = False

    # Order matters: failure messages list unmet rules in this order
    LABELS = (
        ('min_length', 'at least 8 characters'),
        ('has_upper_case', 'uppercase letter'),
        ('has_lower_case', 'lowercase letter'),
        ('has_numbers', 'number'),
        ('has_symbols', 'special character'),
    )

    @property
    def all_met(self) -> bool:
        return all(getattr(self, name) for name, _ in self.LABELS)

    def failed_labels(self) -> List[str]:
        """Names of every unmet requirement."""
        return [label for name, label in self.LABELS if not getattr(self, name)]

    def to_dict(self) -> Dict[str, bool]:
        return {name: getattr(self, name) for name, _ in self.LABELS}


@dataclass(frozen=True)
class PasswordValidationResult(ValidationResult):
    requirements: PasswordRequirements = field(default_factory=PasswordRequirements)

    def to_dict(self) -> Dict[str, Any]:
        data = super().to_dict()
        data['requirements'] = self.requirements.to_dict()
        return data


@dataclass(frozen=True)
class FormValidationResult:
    """
    Aggregated result of validating a whole form.

    Attributes:
        is_valid: True iff no field produced an error
        errors: Field name -> first failure message for that field
    """
    is_valid: bool
    errors: Dict[str, str] = field(default_factory=dict)

    @property
    def failed_fields(self) -> List[str]:
        return list(self.errors)

    def error_for(self, field_name: str) -> Optional[str]:
        return self.errors.get(field_name)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'is_valid': self.is_valid,
            'errors': dict(self.errors),
        }

    def __str__(self) -> str:
        summary = f"FormValidationResult(is_valid={self.is_valid})"
        for field_name, message in self.errors.items():
            summary += f"\n    - {field_name}: {message}"
        return summary


# Helper functions for creating validation results

def create_pass_result(value: Optional[Any] = None) -> ValidationResult:
    """Create a passing result, optionally carrying a parsed value."""
    return ValidationResult(is_valid=True, message="", value=value)


def create_failure_result(message: str) -> ValidationResult:
    """Create a failing result with a user-facing message."""
    return ValidationResult(is_valid=False, message=message)


def create_form_result(errors: Dict[str, str]) -> FormValidationResult:
    """Create a form result (validity auto-determined from errors)."""
    return FormValidationResult(is_valid=not errors, errors=dict(errors))
