"""
Consistency Validation Checks

Validates relationships between fields of the same form:
- matches: two fields must hold the same value (password confirmation)
- not_greater_than: a numeric field must not exceed another
  (transfer quantity vs. available stock)
"""

from typing import Any, Dict, List, Mapping, Optional

from .value_checks import format_number, parse_float


def matches_field(form_data: Mapping[str, Any], field: str, other: str) -> bool:
    """Check that two fields hold the same value."""
    return form_data.get(field) == form_data.get(other)


def not_greater_than_field(form_data: Mapping[str, Any], field: str, other: str) -> bool:
    """
    Check that a numeric field does not exceed another.

    Passes when either side is not a number; range and required checks
    belong to the field validators.
    """
    value = parse_float(form_data.get(field))
    limit = parse_float(form_data.get(other))
    if value is None or limit is None:
        return True
    return value <= limit


class ConsistencyChecker:
    """
    Applies cross-field rules to a whole form.

    Rules run after the field validators and only for fields that do not
    have an error yet, so the first message a user sees for a field is
    always the field-level one.

    Usage:
        checker = ConsistencyChecker([
            {'check': 'matches', 'field': 'confirm_password', 'other': 'password',
             'error_message': 'Passwords do not match'},
        ])
        errors = checker.validate(form_data, existing_errors)
    """

    CHECKS = {
        'matches': matches_field,
        'not_greater_than': not_greater_than_field,
    }

    def __init__(self, rules: Optional[List[Dict[str, Any]]] = None):
        """
        Initialize with consistency rules.

        Args:
            rules: List of rule dicts with 'check', 'field', 'other' and an
                optional 'error_message'

        Raises:
            ValueError: If a rule is malformed or names an unknown check
        """
        self.rules = list(rules or [])
        for rule in self.rules:
            self._check_rule(rule)

    def _check_rule(self, rule: Dict[str, Any]) -> None:
        check = rule.get('check')
        if check not in self.CHECKS:
            raise ValueError(
                f"Unknown consistency check '{check}'; expected one of {sorted(self.CHECKS)}")
        for key in ('field', 'other'):
            if not rule.get(key):
                raise ValueError(f"Consistency check '{check}' requires '{key}'")

    def validate(
        self,
        form_data: Mapping[str, Any],
        errors: Optional[Mapping[str, str]] = None
    ) -> Dict[str, str]:
        """
        Run every rule against the form.

        Args:
            form_data: Raw form values
            errors: Field errors already found; those fields are skipped

        Returns:
            New field errors (field -> message)
        """
        existing = dict(errors or {})
        new_errors: Dict[str, str] = {}

        for rule in self.rules:
            field = rule['field']
            if field in existing or field in new_errors:
                continue

            check_fn = self.CHECKS[rule['check']]
            if not check_fn(form_data, field, rule['other']):
                new_errors[field] = self._message_for(rule, form_data)

        return new_errors

    @staticmethod
    def _message_for(rule: Dict[str, Any], form_data: Mapping[str, Any]) -> str:
        if rule.get('error_message'):
            return rule['error_message']

        if rule['check'] == 'matches':
            return f"{rule['field']} must match {rule['other']}"

        limit = parse_float(form_data.get(rule['other']))
        return f"{rule['field']} must be no more than {format_number(limit)}"
