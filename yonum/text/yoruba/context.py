from enum import Enum


class NumeralContext(Enum):
    """Usage context of a number. It only changes how 1 and 2 are spelled."""

    STANDALONE = 0
    MODIFIER = 1
    NEGATIVE_YEAR_OR_DECIMAL = 2


def resolve_context(
    negative: bool = False, year: bool = False, has_fraction: bool = False, modifies_noun: bool = False
) -> NumeralContext:
    """Pick the context of one conversion call.

    Args:
        negative (bool): the value is below zero.
        year (bool): the value is formatted as a calendar year.
        has_fraction (bool): the value has a non-zero fractional part.
        modifies_noun (bool): the value qualifies a currency unit or a scale word.

    Returns:
        NumeralContext: the context to thread through the numeral engines.
    """
    if negative or year or has_fraction:
        return NumeralContext.NEGATIVE_YEAR_OR_DECIMAL
    if modifies_noun:
        return NumeralContext.MODIFIER
    return NumeralContext.STANDALONE
