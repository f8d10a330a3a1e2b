import unittest
from inventory_validation.metrics import ValidationMetrics, get_metrics, reset_metrics
from inventory_validation.models import FormValidationResult


class TestValidationMetrics(unittest.TestCase):
    def setUp(self):
        self.metrics = ValidationMetrics()
        self.passed = FormValidationResult(is_valid=True)
        self.failed = FormValidationResult(is_valid=False, errors={'quantity': 'Quantity is required'})

    def test_counts(self):
        self.metrics.record_form_validation('checkout', self.passed, 0.0002)
        self.metrics.record_form_validation('checkout', self.failed, 0.002)
        self.metrics.record_form_validation('item_detail', self.failed)

        self.assertEqual(self.metrics.total_validations, 3)
        self.assertEqual(self.metrics.passed_validations, 1)
        self.assertEqual(self.metrics.failed_validations, 2)
        self.assertEqual(self.metrics.errors_by_field[('checkout', 'quantity')], 1)
        self.assertEqual(self.metrics.duration_count, 2)

    def test_export_text(self):
        self.metrics.record_form_validation('checkout', self.failed, 0.0002)

        text = self.metrics.export_text()

        self.assertIn('inventory_validation_total 1', text)
        self.assertIn('inventory_validation_failed 1', text)
        self.assertIn('inventory_validation_field_errors{form="checkout",field="quantity"} 1', text)
        self.assertIn('inventory_validation_duration_seconds_bucket{le="0.0005"} 1', text)
        self.assertIn('inventory_validation_duration_seconds_bucket{le="0.0001"} 0', text)
        self.assertIn('inventory_validation_duration_seconds_count 1', text)

    def test_export_json_rates(self):
        self.metrics.record_form_validation('checkout', self.passed)
        self.metrics.record_form_validation('checkout', self.failed)

        stats = self.metrics.export_json()

        self.assertEqual(stats['pass_rate'], 0.5)
        self.assertEqual(stats['validations_by_form'], {'checkout': 2})
        self.assertEqual(stats['avg_processing_time_seconds'], 0)

    def test_reset(self):
        self.metrics.record_form_validation('checkout', self.failed, 0.01)
        self.metrics.reset()

        self.assertEqual(self.metrics.total_validations, 0)
        self.assertEqual(dict(self.metrics.errors_by_field), {})
        self.assertEqual(self.metrics.duration_sum, 0.0)

    def test_global_instance(self):
        metrics = get_metrics()
        self.assertIs(metrics, get_metrics())

        metrics.record_form_validation('login', self.passed)
        reset_metrics()
        self.assertEqual(get_metrics().total_validations, 0)


if __name__ == '__main__':
    unittest.main()
