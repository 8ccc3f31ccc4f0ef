import os
import unittest

from tests import get_tests_input_path, get_tests_output_path
from yonum.config import load_config
from yonum.config.shared_configs import CurrencyConfig, YorubaNumberConfig
from yonum.text.yoruba.formatter import YorubaNumberConverter


class ConfigTest(unittest.TestCase):
    def test_defaults(self):
        config = YorubaNumberConfig()
        config.check_values()
        self.assertEqual(config.mode, "cardinal")
        self.assertEqual(config.negative_prefix, "òdì")
        self.assertEqual(config.currency.main_unit_singular, "náírà")
        self.assertIsNone(config.currency.separator)

    def test_load_json_with_comments(self):
        config = load_config(os.path.join(get_tests_input_path(), "test_config.json"))
        self.assertEqual(config.mode, "currency")
        self.assertEqual(config.currency.main_unit_singular, "dọ́là")
        self.assertEqual(config.decimal_separator, "period")
        converter = YorubaNumberConverter(config)
        self.assertEqual(converter.convert("3.05"), "ẹẹ́ta dọ́là pẹ̀lú àrún sẹ́ǹtì")

    def test_load_yaml(self):
        config = load_config(os.path.join(get_tests_input_path(), "test_config.yaml"))
        self.assertEqual(config.mode, "year")
        self.assertEqual(config.decimal_separator, "comma")
        self.assertEqual(config.too_large, "raise")
        self.assertEqual(YorubaNumberConverter(config).convert(-44), "ogójì ó lé mẹ́rin BC")

    def test_save_and_load(self):
        config = YorubaNumberConfig(mode="currency", round=True, currency=CurrencyConfig(separator="pẹ̀lú"))
        config_path = os.path.join(get_tests_output_path(), "saved_config.json")
        config.save_json(config_path)
        loaded = load_config(config_path)
        self.assertEqual(loaded.to_dict(), config.to_dict())

    def test_unknown_extension(self):
        with self.assertRaises(TypeError):
            load_config(os.path.join(get_tests_input_path(), "test_config.txt"))

    def test_check_values(self):
        with self.assertRaises(AssertionError):
            YorubaNumberConfig(decimal_separator="dot").check_values()
        with self.assertRaises(AssertionError):
            YorubaNumberConfig(max_digits=0).check_values()
        with self.assertRaises(AssertionError):
            YorubaNumberConfig(currency=CurrencyConfig(main_unit_singular=None)).check_values()
