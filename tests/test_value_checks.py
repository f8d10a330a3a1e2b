import math
import unittest
from datetime import date, datetime, timedelta, timezone

from inventory_validation.checks.value_checks import (
    parse_date,
    parse_float,
    validate_date,
    validate_number,
)
from inventory_validation.models import DateOptions, NumberOptions


class TestParseFloat(unittest.TestCase):
    def test_leading_numeric_prefix(self):
        self.assertEqual(parse_float('12 boxes'), 12.0)
        self.assertEqual(parse_float('  3.5ml'), 3.5)
        self.assertEqual(parse_float('.5'), 0.5)
        self.assertEqual(parse_float('-2e3'), -2000.0)
        self.assertEqual(parse_float('1e'), 1.0)

    def test_infinity(self):
        self.assertEqual(parse_float('Infinity'), math.inf)
        self.assertEqual(parse_float('-Infinity'), -math.inf)

    def test_unparseable(self):
        for value in ['abc', '', '-', '.', 'NaN', None, True, [1], float('nan')]:
            self.assertIsNone(parse_float(value), value)

    def test_numbers(self):
        self.assertEqual(parse_float(7), 7.0)
        self.assertEqual(parse_float(2.25), 2.25)


class TestValidateNumber(unittest.TestCase):
    def test_in_range(self):
        result = validate_number('5', NumberOptions(min_value=1, max_value=10))
        self.assertTrue(result.is_valid)
        self.assertEqual(result.value, 5)

    def test_below_min(self):
        result = validate_number('0', {'min_value': 1, 'max_value': 10, 'label': 'Quantity'})
        self.assertFalse(result.is_valid)
        self.assertEqual(result.message, 'Quantity must be at least 1')

    def test_above_max(self):
        result = validate_number(11, NumberOptions(min_value=1, max_value=10.5))
        self.assertEqual(result.message, 'Value must be no more than 10.5')

    def test_optional_empty(self):
        for value in ['', None]:
            result = validate_number(value, NumberOptions(required=False))
            self.assertTrue(result.is_valid)
            self.assertIsNone(result.value)

    def test_required_empty(self):
        result = validate_number('', NumberOptions(label='Cost'))
        self.assertEqual(result.message, 'Cost is required')

    def test_invalid_number(self):
        for value in ['abc', '   ', True, {'qty': 1}]:
            result = validate_number(value, NumberOptions(label='Cost'))
            self.assertEqual(result.message, 'Cost must be a valid number', value)

    def test_defaults(self):
        self.assertTrue(validate_number('0').is_valid)
        self.assertEqual(validate_number('-1').message, 'Value must be at least 0')
        self.assertEqual(validate_number('Infinity').message, 'Value must be no more than 9007199254740991')

    def test_value_serialized(self):
        self.assertEqual(validate_number('2.5').to_dict(), {'is_valid': True, 'message': '', 'value': 2.5})

    def test_integer_accepts_whole_numbers(self):
        options = NumberOptions(min_value=1, integer=True, label='Quantity')
        for value, expected in [('3', 3), (' +12 ', 12), (4, 4), (5.0, 5)]:
            result = validate_number(value, options)
            self.assertTrue(result.is_valid, value)
            self.assertEqual(result.value, expected)
            self.assertIsInstance(result.value, int)

    def test_integer_rejects_fractions_and_trailing_text(self):
        options = NumberOptions(min_value=1, integer=True, label='Quantity')
        for value in ['2.5', '3 boxes', '1e2', 2.5]:
            result = validate_number(value, options)
            self.assertEqual(result.message, 'Quantity must be a whole number', value)
        self.assertEqual(validate_number('abc', options).message, 'Quantity must be a valid number')
        self.assertEqual(validate_number('0', options).message, 'Quantity must be at least 1')


class TestValidateDate(unittest.TestCase):
    NOW = datetime(2026, 3, 1, 12, 0, tzinfo=timezone.utc)

    def test_iso_strings(self):
        result = validate_date('2026-05-01T09:30:00Z')
        self.assertTrue(result.is_valid)
        self.assertEqual(result.value, datetime(2026, 5, 1, 9, 30, tzinfo=timezone.utc))

        self.assertEqual(
            validate_date('2026-05-01').value,
            datetime(2026, 5, 1, tzinfo=timezone.utc)
        )

    def test_date_and_datetime_objects(self):
        self.assertEqual(validate_date(date(2026, 1, 2)).value, datetime(2026, 1, 2, tzinfo=timezone.utc))
        aware = datetime(2026, 1, 2, 8, tzinfo=timezone(timedelta(hours=1)))
        self.assertEqual(validate_date(aware).value, aware)

    def test_epoch_milliseconds(self):
        self.assertEqual(validate_date(86400000).value, datetime(1970, 1, 2, tzinfo=timezone.utc))

    def test_falsy_non_strings_are_missing(self):
        for value in [0, 0.0, False, float('nan')]:
            self.assertEqual(validate_date(value).message, 'Date is required', value)
            result = validate_date(value, DateOptions(required=False))
            self.assertTrue(result.is_valid, value)
            self.assertIsNone(result.value)

    def test_unparseable(self):
        for value in ['not a date', '2026-13-01', '   ', True]:
            result = validate_date(value, DateOptions(label='Expiry Date'))
            self.assertEqual(result.message, 'Please enter a valid expiry date', value)

    def test_required_and_optional(self):
        self.assertEqual(validate_date(None).message, 'Date is required')
        self.assertTrue(validate_date('', DateOptions(required=False)).is_valid)

    def test_future_only(self):
        options = DateOptions(future_only=True, label='Expiry date')

        self.assertTrue(validate_date('2026-03-02', options, now=self.NOW).is_valid)
        self.assertEqual(
            validate_date('2026-02-28', options, now=self.NOW).message,
            'Expiry date must be in the future'
        )

    def test_future_only_rejects_now(self):
        options = DateOptions(future_only=True)
        self.assertFalse(validate_date(self.NOW, options, now=self.NOW).is_valid)

    def test_future_only_default_clock(self):
        tomorrow = datetime.now(timezone.utc) + timedelta(days=1)
        self.assertTrue(validate_date(tomorrow.isoformat(), {'future_only': True}).is_valid)

    def test_parse_date_naive_is_utc(self):
        self.assertEqual(parse_date('2026-01-01 10:00:00').tzinfo, timezone.utc)


if __name__ == '__main__':
    unittest.main()
