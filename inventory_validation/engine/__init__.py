"""
Validation Engine Package

Form-level orchestration of the field checks.
"""

from .validator import (
    FormValidationEngine,
    FormRuleSet,
    build_field_validator,
    create_form_validation_engine,
    validate_form,
    DEFAULT_RULES_PATH,
)

__all__ = [
    "FormValidationEngine",
    "FormRuleSet",
    "build_field_validator",
    "create_form_validation_engine",
    "validate_form",
    "DEFAULT_RULES_PATH",
]
