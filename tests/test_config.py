import json
import logging
import unittest
from unittest.mock import patch

from inventory_validation.config import Settings, load_settings
from inventory_validation.engine import DEFAULT_RULES_PATH
from inventory_validation.logging_config import configure_logging


class TestLoadSettings(unittest.TestCase):
    @patch('inventory_validation.config.load_dotenv')
    def test_defaults(self, mock_load_dotenv):
        with patch.dict('os.environ', {}, clear=True):
            settings = load_settings()

        mock_load_dotenv.assert_called_once_with(None)
        self.assertEqual(settings, Settings(rules_path=str(DEFAULT_RULES_PATH)))

    @patch('inventory_validation.config.load_dotenv')
    def test_environment_overrides(self, mock_load_dotenv):
        env = {
            'INVENTORY_VALIDATION_RULES': '/etc/inventory/forms.yaml',
            'INVENTORY_VALIDATION_LOG_LEVEL': 'debug',
            'INVENTORY_VALIDATION_JSON_LOGS': 'false',
            'INVENTORY_VALIDATION_METRICS': 'no',
        }
        with patch.dict('os.environ', env, clear=True):
            settings = load_settings()

        self.assertEqual(settings.rules_path, '/etc/inventory/forms.yaml')
        self.assertEqual(settings.log_level, 'DEBUG')
        self.assertFalse(settings.json_logs)
        self.assertFalse(settings.enable_metrics)


class TestConfigureLogging(unittest.TestCase):
    def tearDown(self):
        package_logger = logging.getLogger('inventory_validation')
        for handler in list(package_logger.handlers):
            package_logger.removeHandler(handler)
        package_logger.setLevel(logging.NOTSET)

    def test_json_handler(self):
        handler = configure_logging(Settings(rules_path='x', log_level='DEBUG'))
        package_logger = logging.getLogger('inventory_validation')

        self.assertEqual(package_logger.handlers, [handler])
        self.assertEqual(package_logger.level, logging.DEBUG)

        record = logging.LogRecord('inventory_validation.engine', logging.INFO, __file__, 1,
                                   'Loaded rules', None, None)
        payload = json.loads(handler.format(record))
        self.assertEqual(payload['message'], 'Loaded rules')
        self.assertEqual(payload['levelname'], 'INFO')

    def test_text_handler_replaces_previous(self):
        configure_logging(Settings(rules_path='x'))
        handler = configure_logging(Settings(rules_path='x', json_logs=False))

        self.assertEqual(logging.getLogger('inventory_validation').handlers, [handler])
        self.assertIn('%(levelname)s', handler.formatter._fmt)

    def test_engine_logs_rule_loading(self):
        from inventory_validation.engine import create_form_validation_engine

        with self.assertLogs('inventory_validation.engine', level='INFO') as log:
            create_form_validation_engine()
        self.assertIn('form rule sets', log.output[0])


if __name__ == '__main__':
    unittest.main()
