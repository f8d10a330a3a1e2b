"""
Validation Checks Package

Contains all validation check implementations:
- sanitization: HTML escaping and script stripping
- text_checks: Email, product name, free text and barcode validation
- password_checks: Password strength validation
- value_checks: Number and date parsing/validation
- consistency_checks: Cross-field validation
"""

from .sanitization import sanitize_input, sanitize_object_data
from .text_checks import (
    validate_email,
    validate_product_name,
    validate_text,
    validate_barcode,
    contains_malicious_content,
)
from .password_checks import validate_password, check_password_requirements
from .value_checks import validate_number, validate_date, parse_float, parse_date
from .consistency_checks import ConsistencyChecker, matches_field, not_greater_than_field

__all__ = [
    'sanitize_input',
    'sanitize_object_data',
    'validate_email',
    'validate_product_name',
    'validate_text',
    'validate_barcode',
    'contains_malicious_content',
    'validate_password',
    'check_password_requirements',
    'validate_number',
    'validate_date',
    'parse_float',
    'parse_date',
    'ConsistencyChecker',
    'matches_field',
    'not_greater_than_field',
]
