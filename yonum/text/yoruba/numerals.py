import logging
from typing import Callable, Optional, Tuple

from yonum.text.yoruba.context import NumeralContext
from yonum.text.yoruba.lexicon import (
    COMPOUND_ADDITIONS,
    COMPOUND_SUBTRACTIONS,
    EXACT_HUNDRED_SUMS,
    HUNDRED_BASES,
    MINUS,
    MODIFIER_UNITS,
    PLUS,
    SCALE_WORDS,
    SPECIAL_ONE,
    STANDALONE_UNITS,
    TOO_LARGE_MARKER,
    WORD_999_CHUNK,
    ZERO,
)

logger = logging.getLogger(__name__)

TOO_LARGE_POLICIES = ["mark", "raise"]


class UnsupportedMagnitudeError(ValueError):
    """Raised when a number is beyond the scale vocabulary and marking is disabled."""


class NumeralSpeller:
    """Spell non-negative integers in Yoruba.

    Numbers below 1000 are decomposed on the vigesimal bases with additive
    (``ó lé``) and subtractive (``ó dín``) compounds. Larger numbers are split in
    groups of three digits and joined with the scale words.

    Exact lexicon entries always win over the generated compounds. The band
    engine is an ordered chain of resolvers; each one returns ``None`` to hand
    the number over to the next.

    Args:
        too_large (str): what to do with the part of a number above the largest scale word.
            ``"mark"`` spells it followed by ``[Too Large]``, ``"raise"`` raises
            ``UnsupportedMagnitudeError``. Defaults to ``"mark"``.

    Example:
        >>> speller = NumeralSpeller()
        >>> speller.spell_integer(456)
        'irinwó ó lé mẹ́rìndínlọ́gọ́ta'
        >>> speller.spell_integer(1000000)
        'mílíọ̀nù kan'
    """

    def __init__(self, too_large: str = "mark"):
        if too_large not in TOO_LARGE_POLICIES:
            raise ValueError(f" [!] Unknown `too_large` policy {too_large}. Use one of {TOO_LARGE_POLICIES}.")
        self.too_large = too_large
        self._band_resolvers: Tuple[Callable[[int], Optional[str]], ...] = (
            self._resolve_exact,
            self._resolve_tens,
            self._resolve_hundreds,
        )

    @staticmethod
    def _spell_small(n: int, context: NumeralContext) -> str:
        if n == 1:
            if context == NumeralContext.MODIFIER:
                return MODIFIER_UNITS[1]
            if context == NumeralContext.NEGATIVE_YEAR_OR_DECIMAL:
                return SPECIAL_ONE
            return STANDALONE_UNITS[1]
        # 2 has no special negative / year / decimal form
        if context == NumeralContext.MODIFIER:
            return MODIFIER_UNITS[2]
        return STANDALONE_UNITS[2]

    @staticmethod
    def _resolve_exact(n: int) -> Optional[str]:
        for table in (STANDALONE_UNITS, COMPOUND_ADDITIONS, COMPOUND_SUBTRACTIONS):
            if n in table:
                return table[n]
        return None

    @staticmethod
    def _resolve_tens(n: int) -> Optional[str]:
        if not 20 < n < 100:
            return None
        base = (n // 10) * 10
        unit = n % 10
        if 1 <= unit <= 4:
            if n in COMPOUND_ADDITIONS:
                return COMPOUND_ADDITIONS[n]
            return f"{STANDALONE_UNITS[base]} {PLUS} {MODIFIER_UNITS[unit]}"
        if unit >= 5:
            next_base = base + 10
            diff = next_base - n
            if next_base in STANDALONE_UNITS and 1 <= diff <= 5:
                if n in COMPOUND_SUBTRACTIONS:
                    return COMPOUND_SUBTRACTIONS[n]
                return f"{STANDALONE_UNITS[next_base]} {MINUS} {MODIFIER_UNITS[diff]}"
        return None

    def _resolve_hundreds(self, n: int) -> Optional[str]:
        if not 100 < n < 1000:
            return None
        base = next(b for b in HUNDRED_BASES if b <= n)
        remainder = n - base
        if remainder == 0 or n in EXACT_HUNDRED_SUMS:
            return EXACT_HUNDRED_SUMS.get(n, STANDALONE_UNITS[base])

        # n in the top ten of its hundred counts down from the next hundred
        next_hundred = ((n + 99) // 100) * 100
        diff = next_hundred - n
        if 0 < diff <= 10 and next_hundred <= 1000 and diff in MODIFIER_UNITS:
            next_text = self.spell_integer(next_hundred, NumeralContext.STANDALONE)
            return f"{next_text} {MINUS} {MODIFIER_UNITS[diff]}"

        remainder_text = self.spell_band(remainder, NumeralContext.STANDALONE)
        return f"{STANDALONE_UNITS[base]} {PLUS} {remainder_text}"

    def spell_band(self, n: int, context: NumeralContext = NumeralContext.STANDALONE) -> str:
        """Spell a number in the 0..999 band.

        Args:
            n (int): number to spell, 0 <= n <= 999.
            context (NumeralContext): decides the form of 1 and 2.

        Returns:
            str: Yoruba phrase.
        """
        if not 0 <= n < 1000:
            raise ValueError(f" [!] {n} is out of the 0..999 band.")
        if n == 0:
            return ZERO
        if n in (1, 2):
            return self._spell_small(n, context)
        for resolver in self._band_resolvers:
            text = resolver(n)
            if text is not None:
                return text
        logger.error(" [!] No numeral rule matched %d, falling back to digits.", n)
        return str(n)

    def spell_large(self, n: int) -> str:
        """Spell a number >= 1000 with scale words.

        Args:
            n (int): number to spell.

        Raises:
            UnsupportedMagnitudeError: ``n`` is beyond the scale vocabulary and ``too_large`` is ``"raise"``.

        Returns:
            str: Yoruba phrase, groups joined by ``", "``.
        """
        if n < 1000:
            raise ValueError(f" [!] {n} is below 1000, use `spell_band`.")

        thousand = SCALE_WORDS[1]
        if 1000 < n < 2000:
            remainder = n - 1000
            context = NumeralContext.MODIFIER if remainder == 1 else NumeralContext.STANDALONE
            return f"{thousand} {PLUS} {self.spell_integer(remainder, context)}"

        power = self._exact_power_index(n)
        if 0 < power < len(SCALE_WORDS):
            if power == 1:
                return thousand
            return f"{SCALE_WORDS[power]} {MODIFIER_UNITS[1]}"

        parts = []
        remaining = n
        index = (len(str(n)) - 1) // 3
        if index >= len(SCALE_WORDS):
            highest = len(SCALE_WORDS) - 1
            if self.too_large == "raise":
                raise UnsupportedMagnitudeError(
                    f" [!] {n} is larger than the largest scale word `{SCALE_WORDS[highest]}` can express."
                )
            limit = 1000 ** (highest + 1)
            excess = self.spell_integer(remaining // limit, NumeralContext.STANDALONE)
            logger.warning(" > Number has %d digit groups, marking the excess as too large.", index + 1)
            parts.append(f"{excess} {SCALE_WORDS[highest]} {TOO_LARGE_MARKER}")
            remaining %= limit
            index = highest

        while index >= 0:
            group = (remaining // 1000**index) % 1000
            if group > 0:
                parts.append(self._spell_group(group, index))
            index -= 1
        return ", ".join(parts)

    def _spell_group(self, group: int, index: int) -> str:
        if group == 999:
            text = WORD_999_CHUNK
        else:
            text = self.spell_integer(group, NumeralContext.STANDALONE)
        if index == 0:
            return text
        scale = SCALE_WORDS[index]
        if group == 1:
            return scale if index == 1 else f"{scale} {MODIFIER_UNITS[1]}"
        return f"{text} {scale}"

    @staticmethod
    def _exact_power_index(n: int) -> int:
        """Return i when n == 1000**i, else 0."""
        index = 0
        while n >= 1000 and n % 1000 == 0:
            n //= 1000
            index += 1
        return index if n == 1 else 0

    def spell_integer(self, n: int, context: NumeralContext = NumeralContext.STANDALONE) -> str:
        """Spell any non-negative integer.

        Exact lexicon entries are checked for every magnitude before the band or
        scale engines run, so e.g. 2000 is ``ẹgbàá`` rather than a generated form.
        """
        if n < 0:
            raise ValueError(f" [!] Integer must be non-negative: {n}")
        if n == 0:
            return ZERO
        if n in (1, 2):
            return self._spell_small(n, context)
        text = self._resolve_exact(n)
        if text is not None:
            return text
        if n >= 1000:
            return self.spell_large(n)
        return self.spell_band(n, context)


_default_speller = NumeralSpeller()


def spell_band(n: int, context: NumeralContext = NumeralContext.STANDALONE) -> str:
    return _default_speller.spell_band(n, context)


def spell_large(n: int) -> str:
    return _default_speller.spell_large(n)


def spell_integer(n: int, context: NumeralContext = NumeralContext.STANDALONE) -> str:
    return _default_speller.spell_integer(n, context)
