"""
Metrics Package

Handles observability of form validation outcomes.
"""

from .prometheus import ValidationMetrics, get_metrics, reset_metrics

__all__ = [
    'ValidationMetrics',
    'get_metrics',
    'reset_metrics',
]
