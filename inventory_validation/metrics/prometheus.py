"""
Prometheus Metrics for Form Validation

Exposes form validation metrics in Prometheus format for monitoring.

Metrics Exposed:
- inventory_validation_total: Total forms validated
- inventory_validation_passed: Forms that passed validation
- inventory_validation_failed: Forms that failed validation
- inventory_validation_field_errors: Errors by form and field
- inventory_validation_duration_seconds: Validation processing time
"""

import time
from collections import defaultdict
from typing import Any, Dict, Optional, Tuple

from ..models.validation_result import FormValidationResult


class ValidationMetrics:
    """
    Collects and formats form validation metrics.

    Usage:
        metrics = ValidationMetrics()
        metrics.record_form_validation('checkout', result, duration_seconds=0.0004)
        print(metrics.export_text())
    """

    def __init__(self):
        """Initialize metrics collectors."""
        self.total_validations = 0
        self.passed_validations = 0
        self.failed_validations = 0

        # Validations by form
        self.validations_by_form: Dict[str, int] = defaultdict(int)

        # Errors by (form, field)
        self.errors_by_field: Dict[Tuple[str, str], int] = defaultdict(int)

        # Processing time histogram (buckets in seconds)
        self.duration_buckets = [0.0001, 0.0005, 0.001, 0.005, 0.01, 0.05, 0.1]
        self.duration_counts = defaultdict(int)
        self.duration_sum = 0.0
        self.duration_count = 0

        self.start_time = time.time()

    def record_form_validation(
        self,
        form_name: str,
        result: FormValidationResult,
        duration_seconds: Optional[float] = None
    ) -> None:
        """
        Record a form validation result and update metrics.

        Args:
            form_name: Name of the validated form
            result: FormValidationResult to record
            duration_seconds: How long validation took
        """
        self.total_validations += 1
        self.validations_by_form[form_name] += 1

        if result.is_valid:
            self.passed_validations += 1
        else:
            self.failed_validations += 1

        for field_name in result.errors:
            self.errors_by_field[(form_name, field_name)] += 1

        if duration_seconds is not None:
            self.duration_sum += duration_seconds
            self.duration_count += 1

            # Smallest fitting bucket only; export_text accumulates
            for bucket in sorted(self.duration_buckets):
                if duration_seconds <= bucket:
                    self.duration_counts[bucket] += 1
                    break

    def export_text(self) -> str:
        """
        Export metrics in Prometheus text format.

        Returns:
            Metrics formatted as Prometheus text exposition format
        """
        lines = []

        lines.append("# HELP inventory_validation_total Total number of forms validated")
        lines.append("# TYPE inventory_validation_total counter")
        lines.append(f"inventory_validation_total {self.total_validations}")
        lines.append("")

        lines.append("# HELP inventory_validation_passed Forms that passed validation")
        lines.append("# TYPE inventory_validation_passed counter")
        lines.append(f"inventory_validation_passed {self.passed_validations}")
        lines.append("")

        lines.append("# HELP inventory_validation_failed Forms that failed validation")
        lines.append("# TYPE inventory_validation_failed counter")
        lines.append(f"inventory_validation_failed {self.failed_validations}")
        lines.append("")

        lines.append("# HELP inventory_validation_forms Validations by form")
        lines.append("# TYPE inventory_validation_forms counter")
        for form_name, count in sorted(self.validations_by_form.items()):
            lines.append(f'inventory_validation_forms{{form="{form_name}"}} {count}')
        lines.append("")

        lines.append("# HELP inventory_validation_field_errors Validation errors by form and field")
        lines.append("# TYPE inventory_validation_field_errors counter")
        for (form_name, field_name), count in sorted(self.errors_by_field.items()):
            lines.append(
                f'inventory_validation_field_errors{{form="{form_name}",field="{field_name}"}} {count}')
        lines.append("")

        lines.append(
            "# HELP inventory_validation_duration_seconds Validation processing time distribution")
        lines.append("# TYPE inventory_validation_duration_seconds histogram")
        cumulative = 0
        for bucket in sorted(self.duration_buckets):
            cumulative += self.duration_counts[bucket]
            lines.append(f'inventory_validation_duration_seconds_bucket{{le="{bucket}"}} {cumulative}')
        lines.append(f'inventory_validation_duration_seconds_bucket{{le="+Inf"}} {self.duration_count}')
        lines.append(f"inventory_validation_duration_seconds_sum {self.duration_sum:.6f}")
        lines.append(f"inventory_validation_duration_seconds_count {self.duration_count}")
        lines.append("")

        return "\n".join(lines)

    def export_json(self) -> Dict[str, Any]:
        """
        Export metrics as JSON (for logging/debugging).

        Returns:
            Metrics as dictionary
        """
        total = self.total_validations
        avg_duration = (self.duration_sum / self.duration_count) if self.duration_count > 0 else 0

        return {
            'total_validations': total,
            'passed_validations': self.passed_validations,
            'failed_validations': self.failed_validations,
            'pass_rate': self.passed_validations / total if total > 0 else 0,
            'fail_rate': self.failed_validations / total if total > 0 else 0,
            'avg_processing_time_seconds': avg_duration,
            'validations_by_form': dict(self.validations_by_form),
            'errors_by_field': {
                f"{form_name}.{field_name}": count
                for (form_name, field_name), count in self.errors_by_field.items()
            },
            'uptime_seconds': time.time() - self.start_time
        }

    def reset(self) -> None:
        """Reset all metrics (useful for testing)."""
        self.total_validations = 0
        self.passed_validations = 0
        self.failed_validations = 0
        self.validations_by_form.clear()
        self.errors_by_field.clear()
        self.duration_counts.clear()
        self.duration_sum = 0.0
        self.duration_count = 0
        self.start_time = time.time()


# Global metrics instance (singleton pattern)
_global_metrics: Optional[ValidationMetrics] = None


def get_metrics() -> ValidationMetrics:
    """Get global metrics instance (singleton)."""
    global _global_metrics
    if _global_metrics is None:
        _global_metrics = ValidationMetrics()
    return _global_metrics


def reset_metrics() -> None:
    """Reset global metrics instance."""
    global _global_metrics
    if _global_metrics:
        _global_metrics.reset()
