from decimal import Decimal, InvalidOperation
from typing import Union

Number = Union[int, float, Decimal, str]


class InvalidNumberError(ValueError):
    """Raised when a value cannot be read as a number."""


class NonFiniteNumberError(ValueError):
    """Raised for positive or negative infinity."""

    def __init__(self, negative: bool):
        super().__init__(" [!] Number is not finite.")
        self.negative = negative


def normalize_number(value: Number) -> Decimal:
    """Read ``value`` as an exact ``Decimal``.

    Floats are read through their shortest ``repr`` so ``1.1`` stays ``1.1``.
    Strings may carry surrounding whitespace, a leading ``+`` and ``_`` digit
    separators.

    Raises:
        InvalidNumberError: the value is not a number or is NaN.
        NonFiniteNumberError: the value is infinite.
    """
    if isinstance(value, bool) or value is None:
        raise InvalidNumberError(f" [!] {value!r} is not a number.")
    if isinstance(value, Decimal):
        number = value
    elif isinstance(value, int):
        number = Decimal(value)
    elif isinstance(value, float):
        number = Decimal(repr(value))
    elif isinstance(value, str):
        try:
            number = Decimal(value.strip())
        except InvalidOperation as e:
            raise InvalidNumberError(f" [!] {value!r} is not a number.") from e
    else:
        raise InvalidNumberError(f" [!] Unsupported input type {type(value).__name__}.")

    if number.is_nan():
        raise InvalidNumberError(" [!] NaN is not a number.")
    if number.is_infinite():
        raise NonFiniteNumberError(negative=number.is_signed())
    return number


def split_decimal(value: Decimal):
    """Split a finite non-negative ``Decimal`` into its integer part and fraction digits.

    The split is done on the plain string form, so it stays exact whatever the
    precision of the active decimal context.

    Returns:
        Tuple[int, str]: integer part and the fractional digits ("" for integers).
    """
    text = format(value, "f")
    integer, _, fraction = text.partition(".")
    return int(integer or "0"), fraction


def integer_digit_count(value: Decimal) -> int:
    """Number of digits of the integer part of a finite ``Decimal``."""
    if value.is_zero():
        return 1
    return max(value.adjusted() + 1, 1)


def fraction_digit_count(value: Decimal) -> int:
    """Number of digits after the decimal point of a finite ``Decimal``, trailing zeros included."""
    return max(-value.as_tuple().exponent, 0)
