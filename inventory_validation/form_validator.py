"""
Inventory Form Validation Module

Main entry point for validating and cleaning form submissions.

This module orchestrates:
1. Loading form rules
2. Validating forms
3. Sanitizing submitted values
4. Recording metrics

Usage:
    from inventory_validation import validate_form_data

    result = validate_form_data("item_detail", form_data)
    if result.is_valid:
        # Save the item
        pass
"""

import logging
import time
from typing import Any, Dict, Mapping, Optional, Tuple

from .checks import sanitize_object_data
from .config import load_settings
from .engine import FormValidationEngine
from .metrics import get_metrics
from .models import FormValidationResult

logger = logging.getLogger(__name__)


class FormValidator:
    """
    High-level API for form validation.

    Integrates engine, sanitization and metrics.
    """

    def __init__(
        self,
        rules_path: Optional[str] = None,
        enable_metrics: Optional[bool] = None
    ):
        """
        Initialize form validator.

        Args:
            rules_path: Path to form rules YAML (defaults to settings)
            enable_metrics: Whether to collect metrics (defaults to settings)
        """
        settings = load_settings()

        self.engine = FormValidationEngine(rules_path=rules_path or settings.rules_path)

        self.enable_metrics = settings.enable_metrics if enable_metrics is None else enable_metrics
        self.metrics = get_metrics() if self.enable_metrics else None

    def validate(self, form_name: str, form_data: Mapping[str, Any]) -> FormValidationResult:
        """
        Validate a form submission.

        Args:
            form_name: Name of the form in the rules
            form_data: Field name -> raw value

        Returns:
            FormValidationResult
        """
        start_time = time.perf_counter()
        result = self.engine.validate(form_name, form_data)
        duration = time.perf_counter() - start_time

        if self.enable_metrics and self.metrics:
            self.metrics.record_form_validation(form_name, result, duration)

        return result

    @staticmethod
    def clean(form_data: Mapping[str, Any]) -> Dict[str, Any]:
        """Sanitize every string in a form submission."""
        return sanitize_object_data(dict(form_data))

    def validate_and_clean(
        self,
        form_name: str,
        form_data: Mapping[str, Any]
    ) -> Tuple[FormValidationResult, Dict[str, Any]]:
        """
        Validate the raw submission, then sanitize it for storage.

        Validation runs on the raw values so that malicious content is
        reported to the user rather than silently escaped.

        Returns:
            (FormValidationResult, sanitized form data)
        """
        result = self.validate(form_name, form_data)
        return result, self.clean(form_data)

    @property
    def form_names(self):
        return self.engine.form_names


# Convenience functions for direct usage

_default_validator: Optional[FormValidator] = None


def get_validator() -> FormValidator:
    """Get default validator instance (singleton)."""
    global _default_validator
    if _default_validator is None:
        _default_validator = FormValidator()
    return _default_validator


def validate_form_data(form_name: str, form_data: Mapping[str, Any]) -> FormValidationResult:
    """
    Validate a form submission using the default validator.

    Args:
        form_name: Name of the form in the rules
        form_data: Field name -> raw value

    Returns:
        FormValidationResult
    """
    return get_validator().validate(form_name, form_data)
