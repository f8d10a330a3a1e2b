"""
Inventory Validation Package

Input validation and sanitization for inventory forms: stock items,
checkouts, stock transfers, shopping lists and account registration.

Main Components:
- checks: Field validators and sanitizers
- engine: Form validation orchestration
- models: Result types and validator options
- metrics: Prometheus-compatible metrics
- rules: YAML form rule sets

Quick Start:
    from inventory_validation import validate_email, validate_form_data

    if not validate_email(email).is_valid:
        ...

    result = validate_form_data("checkout", {"quantity": "3", "available_quantity": 10})
"""

from .checks import (
    sanitize_input,
    sanitize_object_data,
    validate_email,
    validate_password,
    validate_product_name,
    validate_number,
    validate_text,
    validate_barcode,
    validate_date,
)
from .engine import FormValidationEngine, validate_form
from .form_validator import FormValidator, get_validator, validate_form_data
from .models import (
    ValidationResult,
    PasswordRequirements,
    PasswordValidationResult,
    FormValidationResult,
    NumberOptions,
    TextOptions,
    DateOptions,
    InputKind,
    classify_input,
)
from .metrics import get_metrics
from .logging_config import configure_logging

__version__ = "1.0.0"

__all__ = [
    "sanitize_input",
    "sanitize_object_data",
    "validate_email",
    "validate_password",
    "validate_product_name",
    "validate_number",
    "validate_text",
    "validate_barcode",
    "validate_date",
    "validate_form",
    "FormValidationEngine",
    "FormValidator",
    "get_validator",
    "validate_form_data",
    "ValidationResult",
    "PasswordRequirements",
    "PasswordValidationResult",
    "FormValidationResult",
    "NumberOptions",
    "TextOptions",
    "DateOptions",
    "InputKind",
    "classify_input",
    "get_metrics",
    "configure_logging",
]
