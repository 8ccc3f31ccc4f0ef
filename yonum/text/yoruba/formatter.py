import logging
from decimal import ROUND_HALF_UP, Decimal, localcontext

from yonum.config.shared_configs import YorubaNumberConfig
from yonum.text.yoruba.context import NumeralContext, resolve_context
from yonum.text.yoruba.lexicon import (
    COMMA,
    CURRENCY_SEPARATOR,
    DECIMAL_DIGITS,
    INFINITY,
    NEGATIVE_INFINITY,
    POINT,
    YEAR_OVERRIDES,
    YEAR_SUFFIX_BC,
    ZERO,
)
from yonum.text.yoruba.normalize import (
    InvalidNumberError,
    NonFiniteNumberError,
    Number,
    fraction_digit_count,
    integer_digit_count,
    normalize_number,
    split_decimal,
)
from yonum.text.yoruba.numerals import NumeralSpeller, UnsupportedMagnitudeError

logger = logging.getLogger(__name__)

_CENTS = Decimal("0.01")


class YorubaNumberConverter:
    """Convert numbers to Yoruba words.

    Accepts ``int``, ``float``, ``Decimal`` and numeric strings and spells them as
    a cardinal number, a calendar year or an amount of money, following
    ``config.mode``. Inputs that are not numbers give ``config.fallback_on_error``.

    Args:
        config (YorubaNumberConfig): conversion options. Defaults to ``YorubaNumberConfig()``.

    Example:
        >>> converter = YorubaNumberConverter()
        >>> converter.convert(15)
        'ẹẹ́ẹ̀ẹ́dógún'
        >>> converter.convert("-1")
        'òdì ọ̀kan'
        >>> YorubaNumberConverter(YorubaNumberConfig(mode="currency")).convert(1)
        'náírà kan'
    """

    def __init__(self, config: YorubaNumberConfig = None):
        self.config = config if config is not None else YorubaNumberConfig()
        self.config.check_values()
        self.speller = NumeralSpeller(too_large=self.config.too_large)

    def convert(self, value: Number, fallback_on_error: str = None) -> str:
        """Spell ``value`` in Yoruba.

        Args:
            value (Number): number to spell.
            fallback_on_error (str): returned instead of ``config.fallback_on_error`` when ``value``
                cannot be converted. Defaults to None.

        Returns:
            str: Yoruba words.
        """
        fallback = fallback_on_error if fallback_on_error is not None else self.config.fallback_on_error
        try:
            number = normalize_number(value)
        except NonFiniteNumberError as e:
            return NEGATIVE_INFINITY if e.negative else INFINITY
        except InvalidNumberError as e:
            logger.debug("%s", e)
            return fallback

        if integer_digit_count(number) > self.config.max_digits:
            logger.warning(" [!] Input has more than %d integer digits.", self.config.max_digits)
            return fallback
        if fraction_digit_count(number) > self.config.max_digits:
            logger.warning(" [!] Input has more than %d fractional digits.", self.config.max_digits)
            return fallback

        try:
            return self._convert(number).strip()
        except UnsupportedMagnitudeError as e:
            logger.warning("%s", e)
            return fallback

    def _convert(self, number: Decimal) -> str:
        c = self.config
        if number.is_zero():
            if c.mode == "currency":
                return f"{ZERO} {c.currency.main_unit_plural or c.currency.main_unit_singular}"
            return ZERO

        negative = number < 0
        abs_value = -number if negative else number
        integer, fraction = split_decimal(abs_value)
        has_fraction = any(d != "0" for d in fraction)
        logger.debug(" > mode: %s, negative: %s, fraction: %s", c.mode, negative, has_fraction)

        if c.mode == "year":
            year = -integer if negative else integer
            return self._year(year)
        # negative amounts are read as plain numbers, without the currency units
        if c.mode == "currency" and not negative:
            return self._currency(abs_value)
        context = resolve_context(negative=negative, has_fraction=has_fraction)
        text = self._standard(integer, fraction, context)
        if negative:
            text = f"{c.negative_prefix} {text}"
        return text

    def _year(self, year: int) -> str:
        negative = year < 0
        abs_year = -year if negative else year
        text = YEAR_OVERRIDES.get(abs_year)
        if text is None:
            text = self.speller.spell_integer(abs_year, resolve_context(negative=negative, year=True))
        if negative:
            text = f"{text} {YEAR_SUFFIX_BC}"
        return text

    def _currency(self, abs_value: Decimal) -> str:
        currency = self.config.currency
        if self.config.round:
            with localcontext() as ctx:
                ctx.prec = integer_digit_count(abs_value) + 4
                abs_value = abs_value.quantize(_CENTS, rounding=ROUND_HALF_UP)
        main_value, fraction = split_decimal(abs_value)
        sub_value = int((fraction + "00")[:2])

        main_name = currency.main_unit_singular if main_value == 1 else currency.main_unit_plural
        text = self._unit_phrase(main_value, main_name or currency.main_unit_singular)

        if sub_value > 0 and currency.sub_unit_singular is not None:
            sub_name = currency.sub_unit_singular if sub_value == 1 else currency.sub_unit_plural
            sub_text = self._unit_phrase(sub_value, sub_name or currency.sub_unit_singular)
            separator = currency.separator if currency.separator is not None else CURRENCY_SEPARATOR
            text = f"{text} {separator} {sub_text}"
        return text

    def _unit_phrase(self, amount: int, unit: str) -> str:
        words = self.speller.spell_integer(amount, resolve_context(modifies_noun=True))
        # one and two follow the unit they count
        if amount in (1, 2):
            return f"{unit} {words}"
        return f"{words} {unit}"

    def _standard(self, integer: int, fraction: str, context: NumeralContext) -> str:
        fraction = fraction.rstrip("0")
        if not fraction:
            return self.speller.spell_integer(integer, context)

        text = ZERO if integer == 0 else self.speller.spell_integer(integer, context)
        separator = COMMA if self.config.decimal_separator == "comma" else POINT
        digits = " ".join(DECIMAL_DIGITS[int(d)] for d in fraction)
        return f"{text} {separator} {digits}"


def number_to_words(value: Number, config: YorubaNumberConfig = None, fallback_on_error: str = None) -> str:
    """Shortcut for ``YorubaNumberConverter(config).convert(value, fallback_on_error)``."""
    return YorubaNumberConverter(config).convert(value, fallback_on_error=fallback_on_error)
