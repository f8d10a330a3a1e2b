"""
Form Validation Engine

The core orchestrator that:
1. Loads form rule sets from YAML
2. Builds field validators from rule definitions
3. Runs field validators in order (first failure per field wins)
4. Runs cross-field consistency checks
5. Aggregates per-field errors

This is the main entry point for form validation.
"""

import logging
from functools import partial
from pathlib import Path
from typing import Any, Callable, Dict, List, Mapping, Optional, Sequence

import yaml

from ..checks import (
    ConsistencyChecker,
    validate_barcode,
    validate_date,
    validate_email,
    validate_number,
    validate_password,
    validate_product_name,
    validate_text,
)
from ..models.input_kind import InputKind, classify_input
from ..models.options import DateOptions, NumberOptions, TextOptions
from ..models.validation_result import FormValidationResult, ValidationResult, create_form_result

logger = logging.getLogger(__name__)

FieldValidator = Callable[[Any], ValidationResult]
ValidationRuleSet = Mapping[str, Sequence[FieldValidator]]

DEFAULT_RULES_PATH = Path(__file__).parent.parent / "rules" / "inventory_forms.yaml"

# Validators taking no options
_SIMPLE_CHECKS: Dict[str, FieldValidator] = {
    "email": validate_email,
    "password": validate_password,
    "product_name": validate_product_name,
    "barcode": validate_barcode,
}

# Validators configured by an options struct
_CONFIGURABLE_CHECKS = {
    "number": (validate_number, NumberOptions),
    "text": (validate_text, TextOptions),
    "date": (validate_date, DateOptions),
}


def validate_form(form_data: Mapping[str, Any], rules: ValidationRuleSet) -> FormValidationResult:
    """
    Validate a form field by field.

    Every field named in ``rules`` is checked. For each field the validators
    run in order and the first failure's message is recorded; later
    validators for that field are skipped. Missing fields are validated as
    None.

    Args:
        form_data: Field name -> raw value
        rules: Field name -> ordered validators

    Returns:
        FormValidationResult

    Example:
        >>> validate_form({"email": ""}, {"email": [validate_email]}).errors
        {'email': 'Email is required'}
    """
    errors: Dict[str, str] = {}

    for field_name, validators in rules.items():
        value = form_data.get(field_name)
        for validator in validators:
            result = validator(value)
            if not result.is_valid:
                errors[field_name] = result.message
                break

    return create_form_result(errors)


def build_field_validator(rule: Mapping[str, Any]) -> FieldValidator:
    """
    Build a field validator from a rule definition.

    Args:
        rule: Dict with a 'check' name plus options for configurable checks,
            e.g. {'check': 'number', 'min_value': 1, 'label': 'Quantity'}

    Returns:
        Single-argument validator

    Raises:
        ValueError: If the check is unknown or has invalid options
    """
    rule = dict(rule)
    check = rule.pop("check", None)

    if check in _SIMPLE_CHECKS:
        if rule:
            raise ValueError(f"Check '{check}' takes no options, got: {', '.join(sorted(rule))}")
        return _SIMPLE_CHECKS[check]

    if check in _CONFIGURABLE_CHECKS:
        validator_fn, options_cls = _CONFIGURABLE_CHECKS[check]
        return partial(validator_fn, options=options_cls.from_dict(rule))

    known = sorted(list(_SIMPLE_CHECKS) + list(_CONFIGURABLE_CHECKS))
    raise ValueError(f"Unknown check '{check}'; expected one of {known}")


def _is_blank(value: Any) -> bool:
    kind = classify_input(value)
    return kind == InputKind.ABSENT or (kind == InputKind.STRING and not value.strip())


class FormRuleSet:
    """Compiled rules for a single form."""

    def __init__(self, name: str, definition: Mapping[str, Any]):
        self.name = name
        field_rules = definition.get("fields") or {}
        if not isinstance(field_rules, Mapping):
            raise ValueError(f"Form '{name}': 'fields' must be a mapping")

        self.fields: Dict[str, List[FieldValidator]] = {}
        # Fields skipped entirely when left blank
        self.optional_fields = set()

        for field_name, field_def in field_rules.items():
            # A field is either a list of checks or {optional: bool, checks: [...]}
            if isinstance(field_def, Mapping):
                field_checks = field_def.get("checks") or []
                if field_def.get("optional", False):
                    self.optional_fields.add(field_name)
            else:
                field_checks = field_def or []

            try:
                self.fields[field_name] = [build_field_validator(r) for r in field_checks]
            except ValueError as e:
                raise ValueError(f"Form '{name}', field '{field_name}': {e}") from e

        try:
            self.consistency_checker = ConsistencyChecker(definition.get("consistency") or [])
        except ValueError as e:
            raise ValueError(f"Form '{name}': {e}") from e

    def _active_rules(self, form_data: Mapping[str, Any]) -> Dict[str, List[FieldValidator]]:
        return {
            field_name: validators
            for field_name, validators in self.fields.items()
            if not (field_name in self.optional_fields and _is_blank(form_data.get(field_name)))
        }

    def validate(self, form_data: Mapping[str, Any]) -> FormValidationResult:
        result = validate_form(form_data, self._active_rules(form_data))
        consistency_errors = self.consistency_checker.validate(form_data, result.errors)
        if not consistency_errors:
            return result
        return create_form_result({**result.errors, **consistency_errors})

    def __repr__(self) -> str:
        return f"FormRuleSet(name={self.name}, fields={list(self.fields)})"


class FormValidationEngine:
    """
    Main form validation orchestrator.

    Responsibilities:
    - Load and compile form rule sets
    - Validate forms by name
    - Track validation statistics

    Usage:
        engine = FormValidationEngine(rules_path='rules/inventory_forms.yaml')
        result = engine.validate('item_detail', form_data)

        if not result.is_valid:
            show_errors(result.errors)
    """

    def __init__(
        self,
        rules_path: Optional[str] = None,
        rules_dict: Optional[Dict[str, Any]] = None,
    ):
        """
        Initialize form validation engine.

        Args:
            rules_path: Path to YAML rules file
            rules_dict: Rules as dictionary (alternative to file)
        """
        if rules_path:
            self.rules = self._load_rules_from_file(rules_path)
        elif rules_dict:
            self.rules = rules_dict
        else:
            raise ValueError("Must provide either rules_path or rules_dict")

        self.rules_version = str(self.rules.get("version", "unknown"))
        self.forms = self._compile_forms(self.rules.get("forms") or {})

        logger.info(f"Loaded {len(self.forms)} form rule sets (rules version {self.rules_version})")

        self.stats = {"total_validated": 0, "passed": 0, "failed": 0, "total_errors": 0}

    def _load_rules_from_file(self, rules_path: str) -> Dict[str, Any]:
        """Load form rules from YAML file."""
        path = Path(rules_path)

        if not path.exists():
            raise FileNotFoundError(f"Rules file not found: {rules_path}")

        with open(path, "r", encoding="utf-8") as f:
            rules = yaml.safe_load(f)

        if not isinstance(rules, dict):
            raise ValueError(f"Rules file must contain a mapping: {rules_path}")

        return rules

    @staticmethod
    def _compile_forms(forms: Mapping[str, Any]) -> Dict[str, FormRuleSet]:
        if not isinstance(forms, Mapping):
            raise ValueError("'forms' must be a mapping of form name to definition")
        return {name: FormRuleSet(name, definition or {}) for name, definition in forms.items()}

    @property
    def form_names(self) -> List[str]:
        return sorted(self.forms)

    def get_form(self, form_name: str) -> FormRuleSet:
        """
        Look up a compiled form rule set.

        Raises:
            KeyError: If the form is not defined
        """
        try:
            return self.forms[form_name]
        except KeyError:
            raise KeyError(f"Unknown form '{form_name}'; defined forms: {self.form_names}") from None

    def validate(self, form_name: str, form_data: Mapping[str, Any]) -> FormValidationResult:
        """
        Validate form data against a named rule set.

        Args:
            form_name: Name of the form in the rules
            form_data: Field name -> raw value

        Returns:
            FormValidationResult
        """
        result = self.get_form(form_name).validate(form_data)
        self._update_stats(result)

        if not result.is_valid:
            logger.debug(f"Form '{form_name}' failed validation on fields: {result.failed_fields}")

        return result

    def _update_stats(self, result: FormValidationResult) -> None:
        """Update engine statistics."""
        self.stats["total_validated"] += 1

        if result.is_valid:
            self.stats["passed"] += 1
        else:
            self.stats["failed"] += 1

        self.stats["total_errors"] += len(result.errors)

    def get_statistics(self) -> Dict[str, Any]:
        """
        Get validation statistics.

        Returns:
            Dictionary with validation stats
        """
        total = self.stats["total_validated"]

        return {
            **self.stats,
            "pass_rate": self.stats["passed"] / total if total > 0 else 0,
            "fail_rate": self.stats["failed"] / total if total > 0 else 0,
            "avg_errors_per_form": (self.stats["total_errors"] / total if total > 0 else 0),
        }

    def reset_statistics(self) -> None:
        """Reset validation statistics."""
        self.stats = {"total_validated": 0, "passed": 0, "failed": 0, "total_errors": 0}

    def __repr__(self) -> str:
        return f"FormValidationEngine(rules_version={self.rules_version}, forms={self.form_names})"


# Factory function for easy engine creation


def create_form_validation_engine(rules_path: Optional[str] = None) -> FormValidationEngine:
    """
    Create a form validation engine.

    Args:
        rules_path: Rules YAML path (defaults to the packaged rules file)

    Returns:
        Configured FormValidationEngine instance
    """
    return FormValidationEngine(rules_path=str(rules_path or DEFAULT_RULES_PATH))
