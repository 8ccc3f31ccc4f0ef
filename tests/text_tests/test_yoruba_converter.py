import unittest
from decimal import Decimal

from yonum.config.shared_configs import CurrencyConfig, YorubaNumberConfig
from yonum.text.yoruba.context import NumeralContext
from yonum.text.yoruba.formatter import YorubaNumberConverter, number_to_words
from yonum.text.yoruba.numerals import spell_integer


class CardinalTest(unittest.TestCase):
    def setUp(self):
        self.converter = YorubaNumberConverter()
        self.test_values = [
            (0, "odo"),
            ("0.00", "odo"),
            (15, "ẹẹ́ẹ̀ẹ́dógún"),
            (456, "irinwó ó lé mẹ́rìndínlọ́gọ́ta"),
            (1000000, "mílíọ̀nù kan"),
            ("3.00", "ẹẹ́ta"),
            (1.5, "ọ̀kan aàmì márùn-ún"),
            ("0.25", "odo aàmì méjì márùn-ún"),
            ("3.10", "ẹẹ́ta aàmì kan"),
            (Decimal("2.05"), "eéjì aàmì odo márùn-ún"),
            (-1, "òdì ọ̀kan"),
            (-2, "òdì eéjì"),
            ("-44", "òdì ogójì ó lé mẹ́rin"),
            ("-0.5", "òdì odo aàmì márùn-ún"),
            (" +1_000 ", "ẹgbẹ̀rún"),
        ]

    def test_convert(self):
        for value, gt in self.test_values:
            self.assertEqual(self.converter.convert(value), gt, msg=f"value = {value!r}")

    def test_one_standalone(self):
        self.assertEqual(self.converter.convert(1), "ookan")

    def test_comma_separator(self):
        converter = YorubaNumberConverter(YorubaNumberConfig(decimal_separator="comma"))
        self.assertEqual(converter.convert("2.5"), "eéjì kọ́mà márùn-ún")

    def test_negative_prefix(self):
        converter = YorubaNumberConverter(YorubaNumberConfig(negative_prefix="àìní"))
        self.assertEqual(converter.convert(-3), "àìní ẹẹ́ta")

    def test_shortcut(self):
        self.assertEqual(number_to_words(21), "ọ̀kànlélógún")
        self.assertEqual(number_to_words(2024, YorubaNumberConfig(mode="year")), "ẹgbàá ó lé mẹ́rìnlélógún")


class YearTest(unittest.TestCase):
    def setUp(self):
        self.converter = YorubaNumberConverter(YorubaNumberConfig(mode="year"))

    def test_year(self):
        self.assertEqual(self.converter.convert(1), "ọ̀kan")
        self.assertEqual(self.converter.convert(-1), "ọ̀kan BC")
        self.assertEqual(self.converter.convert(-44), "ogójì ó lé mẹ́rin BC")
        self.assertEqual(self.converter.convert(1990.7), "ẹgbẹ̀rún ó lé ẹgbẹ̀rún ó dín mẹ́wàá")
        self.assertEqual(self.converter.convert("-0.5"), "odo")

    def test_year_overrides(self):
        self.assertEqual(self.converter.convert(2024), "ẹgbàá ó lé mẹ́rìnlélógún")
        self.assertEqual(self.converter.convert(1900), "ẹgbẹ̀rún kan ó lé ọgọ́rùn-ún mẹ́sàn-án")
        self.assertEqual(self.converter.convert(-1900), "ẹgbẹ̀rún kan ó lé ọgọ́rùn-ún mẹ́sàn-án BC")

    def test_year_overrides_differ_from_rules(self):
        context = NumeralContext.NEGATIVE_YEAR_OR_DECIMAL
        self.assertEqual(spell_integer(2024, context), "eéjì ẹgbẹ̀rún, mẹ́rìnlélógún")
        self.assertEqual(spell_integer(1900, context), "ẹgbẹ̀rún ó lé ẹgbẹ̀rún ó dín ọgọ́rùn-ún")
        self.assertNotEqual(self.converter.convert(2024), spell_integer(2024, context))
        self.assertNotEqual(self.converter.convert(1900), spell_integer(1900, context))


class CurrencyTest(unittest.TestCase):
    def setUp(self):
        self.converter = YorubaNumberConverter(YorubaNumberConfig(mode="currency"))
        self.test_values = [
            (0, "odo náírà"),
            (1, "náírà kan"),
            ("1.00", "náírà kan"),
            (2, "náírà méjì"),
            (3, "ẹẹ́ta náírà"),
            ("10.50", "ẹ̀wá náírà àti àádọ́ta kọ́bọ̀"),
            ("5.01", "àrún náírà àti kọ́bọ̀ kan"),
            ("5.02", "àrún náírà àti kọ́bọ̀ méjì"),
            ("12.505", "éjìlá náírà àti àádọ́ta kọ́bọ̀"),
            ("0.75", "odo náírà àti ọgọ́rin ó dín márùn-ún kọ́bọ̀"),
        ]

    def test_currency(self):
        for value, gt in self.test_values:
            self.assertEqual(self.converter.convert(value), gt, msg=f"value = {value!r}")

    def test_negative_amount(self):
        # negative amounts are read as plain numbers without the units
        self.assertEqual(self.converter.convert(-3), "òdì ẹẹ́ta")
        self.assertEqual(self.converter.convert("-1.50"), "òdì ọ̀kan aàmì márùn-ún")
        self.assertEqual(self.converter.convert(-2), "òdì eéjì")
        self.assertEqual(self.converter.convert(-1), "òdì ọ̀kan")

    def test_unit_phrase_uses_modifier_forms(self):
        self.assertEqual(self.converter.convert("2.01"), "náírà méjì àti kọ́bọ̀ kan")

    def test_round(self):
        converter = YorubaNumberConverter(YorubaNumberConfig(mode="currency", round=True))
        self.assertEqual(converter.convert("12.505"), "éjìlá náírà àti àádọ́ta ó lé kan kọ́bọ̀")
        self.assertEqual(converter.convert("0.999"), "náírà kan")

    def test_custom_units(self):
        currency = CurrencyConfig(
            main_unit_singular="dollar",
            main_unit_plural="dollars",
            sub_unit_singular="cent",
            sub_unit_plural="cents",
            separator="pẹ̀lú",
        )
        converter = YorubaNumberConverter(YorubaNumberConfig(mode="currency", currency=currency))
        self.assertEqual(converter.convert("3.05"), "ẹẹ́ta dollars pẹ̀lú àrún cents")
        self.assertEqual(converter.convert("1.01"), "dollar kan pẹ̀lú cent kan")
        self.assertEqual(converter.convert(0), "odo dollars")

    def test_without_sub_unit(self):
        currency = CurrencyConfig(sub_unit_singular=None)
        converter = YorubaNumberConverter(YorubaNumberConfig(mode="currency", currency=currency))
        self.assertEqual(converter.convert("4.75"), "ẹẹ́rin náírà")


class ErrorTest(unittest.TestCase):
    def setUp(self):
        self.converter = YorubaNumberConverter()

    def test_invalid_input(self):
        for value in ("abc", "", None, True, [1], float("nan"), "NaN"):
            self.assertEqual(self.converter.convert(value), "Kìí ṣe Nọ́mbà", msg=f"value = {value!r}")
        self.assertEqual(self.converter.convert("abc", fallback_on_error="?"), "?")

    def test_custom_fallback(self):
        converter = YorubaNumberConverter(YorubaNumberConfig(fallback_on_error="àṣìṣe"))
        self.assertEqual(converter.convert("1.2.3"), "àṣìṣe")

    def test_infinity(self):
        self.assertEqual(self.converter.convert(float("inf")), "Àìlópin")
        self.assertEqual(self.converter.convert(float("-inf")), "Òdì Àìlópin")
        self.assertEqual(self.converter.convert("Infinity", fallback_on_error="?"), "Àìlópin")

    def test_too_large(self):
        self.assertEqual(self.converter.convert(10**27), "ookan sẹpitílíọ̀nù [Too Large]")
        converter = YorubaNumberConverter(YorubaNumberConfig(too_large="raise"))
        self.assertEqual(converter.convert(10**27), "Kìí ṣe Nọ́mbà")
        self.assertEqual(converter.convert(10**24), "sẹpitílíọ̀nù kan")

    def test_max_digits(self):
        converter = YorubaNumberConverter(YorubaNumberConfig(max_digits=5))
        self.assertEqual(converter.convert(12345), "éjìlá ẹgbẹ̀rún, igba ó lé ọgọ́rùn-ún ó lé márùndínláàádọ́ta")
        self.assertEqual(converter.convert(123456), "Kìí ṣe Nọ́mbà")

    def test_max_fraction_digits(self):
        converter = YorubaNumberConverter(YorubaNumberConfig(max_digits=5))
        self.assertEqual(converter.convert("0.12345"), "odo aàmì kan méjì mẹ́ta mẹ́rin márùn-ún")
        self.assertEqual(converter.convert("0.123456"), "Kìí ṣe Nọ́mbà")
        self.assertEqual(converter.convert("1e-200000"), "Kìí ṣe Nọ́mbà")
        self.assertEqual(self.converter.convert("1e-2000"), "Kìí ṣe Nọ́mbà")
        currency = YorubaNumberConverter(YorubaNumberConfig(mode="currency", max_digits=5))
        self.assertEqual(currency.convert("1e-200000"), "Kìí ṣe Nọ́mbà")

    def test_invalid_config(self):
        with self.assertRaises(AssertionError):
            YorubaNumberConverter(YorubaNumberConfig(mode="ordinal"))
        with self.assertRaises(AssertionError):
            YorubaNumberConverter(YorubaNumberConfig(too_large="ignore"))
