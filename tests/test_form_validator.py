import unittest
from unittest.mock import patch

import inventory_validation.form_validator as form_validator_module
from inventory_validation.form_validator import FormValidator, get_validator, validate_form_data
from inventory_validation.metrics import ValidationMetrics


class TestFormValidator(unittest.TestCase):
    def setUp(self):
        self.metrics = ValidationMetrics()
        with patch.object(form_validator_module, 'get_metrics', return_value=self.metrics):
            self.validator = FormValidator(enable_metrics=True)

    def test_validate_records_metrics(self):
        self.validator.validate('checkout', {'quantity': '2', 'available_quantity': 5})
        self.validator.validate('checkout', {'quantity': '', 'available_quantity': 5})

        stats = self.metrics.export_json()
        self.assertEqual(stats['total_validations'], 2)
        self.assertEqual(stats['passed_validations'], 1)
        self.assertEqual(stats['errors_by_field'], {'checkout.quantity': 1})
        self.assertEqual(self.metrics.duration_count, 2)

    def test_metrics_disabled(self):
        validator = FormValidator(enable_metrics=False)
        self.assertIsNone(validator.metrics)
        self.assertTrue(validator.validate('forgot_password', {'email': 'a@b.co'}).is_valid)

    def test_validate_and_clean(self):
        result, cleaned = self.validator.validate_and_clean('shopping_list_item', {
            'product_name': 'Bibs & towels',
            'quantity': '10',
            'cost': '4.99',
            'notes': ' "blue" ',
        })

        self.assertTrue(result.is_valid, result.errors)
        self.assertEqual(cleaned, {
            'product_name': 'Bibs &amp; towels',
            'quantity': '10',
            'cost': '4.99',
            'notes': '&quot;blue&quot;',
        })

    def test_malicious_content_reported_not_hidden(self):
        result, cleaned = self.validator.validate_and_clean('shopping_list_item', {
            'product_name': 'Gloves',
            'notes': '<script>steal()</script>',
        })

        self.assertEqual(result.errors, {'notes': 'Notes contains invalid characters'})
        self.assertEqual(cleaned['notes'], '&lt;script&gt;steal()&lt;/script&gt;')

    def test_rules_path_from_environment(self):
        with patch.dict('os.environ', {'INVENTORY_VALIDATION_RULES': '/nonexistent/forms.yaml'}):
            with self.assertRaises(FileNotFoundError):
                FormValidator(enable_metrics=False)


class TestConvenienceFunctions(unittest.TestCase):
    def setUp(self):
        form_validator_module._default_validator = None

    def tearDown(self):
        form_validator_module._default_validator = None

    def test_singleton(self):
        self.assertIs(get_validator(), get_validator())

    def test_validate_form_data(self):
        result = validate_form_data('login', {'email': 'nurse@clinic.com', 'password': ''})
        self.assertEqual(result.errors, {'password': 'Password is required'})


if __name__ == '__main__':
    unittest.main()
