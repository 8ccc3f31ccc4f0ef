from dataclasses import asdict, dataclass, field

from coqpit import Coqpit, check_argument

from yonum.text.yoruba.lexicon import DEFAULT_FALLBACK, DEFAULT_NEGATIVE_PREFIX


@dataclass
class CurrencyConfig(Coqpit):
    """Names of a currency used by the ``currency`` mode.

    Args:
        main_unit_singular (str):
            Main unit used for an amount of one. Defaults to `"náírà"`.

        main_unit_plural (str):
            Main unit for any other amount. Falls back to `main_unit_singular` when None. Defaults to None.

        sub_unit_singular (str):
            Sub-unit used for an amount of one. The sub-unit part is dropped when None. Defaults to `"kọ́bọ̀"`.

        sub_unit_plural (str):
            Sub-unit for any other amount. Falls back to `sub_unit_singular` when None. Defaults to None.

        separator (str):
            Word between the main and the sub-unit phrases. Uses `"àti"` when None. Defaults to None.
    """

    main_unit_singular: str = "náírà"
    main_unit_plural: str = None
    sub_unit_singular: str = "kọ́bọ̀"
    sub_unit_plural: str = None
    separator: str = None

    def check_values(self):
        c = asdict(self)
        check_argument("main_unit_singular", c, restricted=True, allow_none=False)


@dataclass
class YorubaNumberConfig(Coqpit):
    """Options of ``yonum.text.yoruba.formatter.YorubaNumberConverter``.

    Args:
        mode (str):
            One of `cardinal`, `year` or `currency`. Defaults to `cardinal`.

        negative_prefix (str):
            Word put in front of negative numbers outside the `year` mode. Defaults to `"òdì"`.

        decimal_separator (str):
            Decimal separator word: `period` and `point` read "aàmì", `comma` reads "kọ́mà". Defaults to `period`.

        round (bool):
            Round currency amounts to two decimals before splitting them. Defaults to False.

        currency (CurrencyConfig):
            Currency names for the `currency` mode. Defaults to naira and kọ́bọ̀.

        fallback_on_error (str):
            Returned when the input is not a number. Defaults to `"Kìí ṣe Nọ́mbà"`.

        too_large (str):
            `mark` spells numbers beyond the largest scale word with a `[Too Large]` marker, `raise` rejects them
            and the converter returns `fallback_on_error`. Defaults to `mark`.

        max_digits (int):
            Largest accepted number of digits in the integer part. Larger inputs are rejected. Defaults to 1000.
    """

    mode: str = "cardinal"
    negative_prefix: str = DEFAULT_NEGATIVE_PREFIX
    decimal_separator: str = "period"
    round: bool = False
    currency: CurrencyConfig = field(default_factory=CurrencyConfig)
    fallback_on_error: str = DEFAULT_FALLBACK
    too_large: str = "mark"
    max_digits: int = 1000

    def check_values(self):
        """Check config fields"""
        c = asdict(self)
        check_argument("mode", c, restricted=True, enum_list=["cardinal", "year", "currency"])
        check_argument("decimal_separator", c, restricted=True, enum_list=["period", "point", "comma"])
        check_argument("too_large", c, restricted=True, enum_list=["mark", "raise"])
        check_argument("max_digits", c, restricted=True, min_val=1, max_val=4000)
        check_argument("negative_prefix", c, restricted=True, allow_none=False)
        self.currency.check_values()
