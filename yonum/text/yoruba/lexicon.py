"""Yoruba numeral vocabulary.

Every table is wrapped in a read-only mapping so the numeral engines can share
them across threads without copying.
"""
from types import MappingProxyType

ZERO = "odo"
POINT = "aàmì"
COMMA = "kọ́mà"
CURRENCY_SEPARATOR = "àti"
PLUS = "ó lé"
MINUS = "ó dín"
YEAR_SUFFIX_BC = "BC"
TOO_LARGE_MARKER = "[Too Large]"
INFINITY = "Àìlópin"
NEGATIVE_INFINITY = "Òdì Àìlópin"
DEFAULT_FALLBACK = "Kìí ṣe Nọ́mbà"
DEFAULT_NEGATIVE_PREFIX = "òdì"

# "one less than a thousand", only used for a 999 group inside a larger number
WORD_999_CHUNK = "ọ̀kándínlẹ́gbẹ̀rún"

# "one" after a minus sign, in a year or next to a decimal part
SPECIAL_ONE = "ọ̀kan"

_standalone_units = {
    0: ZERO,
    1: "ookan",
    2: "eéjì",
    3: "ẹẹ́ta",
    4: "ẹẹ́rin",
    5: "àrún",
    6: "ẹẹ́fà",
    7: "eéje",
    8: "ẹẹ́jọ",
    9: "ẹẹ́sàn-án",
    10: "ẹ̀wá",
    11: "ọ̀kanlá",
    12: "éjìlá",
    13: "ẹẹ́tàlá",
    14: "ẹẹ́rinlá",
    15: "ẹẹ́ẹ̀ẹ́dógún",  # 20 - 5
    16: "ẹẹ́rìndínlógún",  # 20 - 4
    17: "ẹẹ́tàdínlógún",  # 20 - 3
    18: "éjìdínlógún",  # 20 - 2
    19: "ọ̀kàndínlógún",  # 20 - 1
    20: "ogun",
    30: "ọgbọ̀n",
    40: "ogójì",  # 2 x 20
    50: "àádọ́ta",  # 3 x 20 - 10
    60: "ọgọ́ta",  # 3 x 20
    70: "àádọ́rin",  # 4 x 20 - 10
    80: "ọgọ́rin",  # 4 x 20
    90: "àádọ́rùn-ún",  # 5 x 20 - 10
    100: "ọgọ́rùn-ún",  # 5 x 20
    200: "igba",
    300: "ọ̀ọ́dúnrún",
    400: "irinwó",
    600: "ẹgbẹ̀ta",
    800: "ẹgbẹ̀rin",
    1000: "ẹgbẹ̀rún",
    2000: "ẹgbàá",
    10000: "ẹgbàárùn-ún",  # 5 x 2000
    20000: "ọ̀kẹ́",
    100000: "ẹgbàáàádọ́ta",  # 50 x 2000
    # attested phrasings kept verbatim
    456: "irinwó ó lé mẹ́rìndínlọ́gọ́ta",  # 400 + (60 - 4)
    789: "ẹgbẹ̀rin ó dín mọ́kànlá",  # 800 - 11
    123456: "ọ̀kẹ́ mẹ́fà ẹgbẹ̀dógún irinwó ó lé mẹ́rìndínlọ́gọ́ta",
}

_modifier_units = {
    1: "kan",
    2: "méjì",
    3: "mẹ́ta",
    4: "mẹ́rin",
    5: "márùn-ún",
    6: "mẹ́fà",
    7: "méje",
    8: "mẹ́jọ",
    9: "mẹ́sàn-án",
    10: "mẹ́wàá",
}

_hundred = _standalone_units[100]

_compound_additions = {
    21: "ọ̀kànlélógún",
    22: "éjìlélógún",
    23: "mẹ́tàlélógún",
    24: "mẹ́rìnlélógún",
    31: "ọ̀kànlélọ́gbọ̀n",
    32: "éjìlélọ́gbọ̀n",
    33: "mẹ́tàlélọ́gbọ̀n",
    34: "mẹ́rìnlélọ́gbọ̀n",
    101: f"{_hundred} {PLUS} {_modifier_units[1]}",
    102: f"{_hundred} {PLUS} {_modifier_units[2]}",
    103: f"{_hundred} {PLUS} {_modifier_units[3]}",
    104: f"{_hundred} {PLUS} {_modifier_units[4]}",
    111: f"{_hundred} {PLUS} mọ́kànlá",
    112: f"{_hundred} {PLUS} {_standalone_units[12]}",
    113: f"{_hundred} {PLUS} {_standalone_units[13]}",
    114: f"{_hundred} {PLUS} {_standalone_units[14]}",
    123: f"{_hundred} {PLUS} mẹ́tàlélógún",
}

_compound_subtractions = {
    15: _standalone_units[15],
    16: _standalone_units[16],
    17: _standalone_units[17],
    18: _standalone_units[18],
    19: _standalone_units[19],
    25: "márùndínlọ́gbọ̀n",
    26: "mẹ́rìndínlọ́gbọ̀n",
    27: "mẹ́tàdínlọ́gbọ̀n",
    28: "méjìdínlọ́gbọ̀n",
    29: "ọ̀kàndínlọ́gbọ̀n",
    35: "márùndínlógójì",
    36: "mẹ́rìndínlógójì",
    37: "mẹ́tàdínlógójì",
    38: "méjìdínlógójì",
    39: "ọ̀kàndínlógójì",
    45: "márùndínláàádọ́ta",
    46: "mẹ́rìndínláàádọ́ta",
    47: "mẹ́tàdínláàádọ́ta",
    48: "méjìdínláàádọ́ta",
    49: "ọ̀kàndínláàádọ́ta",
    55: "márùndínlọ́gọ́ta",
    95: "márùndínlọ́gọ́rùn-ún",
    96: "mẹ́rìndínlọ́gọ́rùn-ún",
    97: "mẹ́tàdínlọ́gọ́rùn-ún",
    98: "méjìdínlọ́gọ́rùn-ún",
    99: "ọ́kàndínlọ́gọ́rùn-ún",
    # these two shadow the generated hundreds forms, see tests
    900: f"{_standalone_units[1000]} {MINUS} {_hundred}",
    999: f"{_standalone_units[1000]} {MINUS} {_modifier_units[1]}",
}

STANDALONE_UNITS = MappingProxyType(_standalone_units)
MODIFIER_UNITS = MappingProxyType(_modifier_units)
COMPOUND_ADDITIONS = MappingProxyType(_compound_additions)
COMPOUND_SUBTRACTIONS = MappingProxyType(_compound_subtractions)
DECIMAL_DIGITS = MappingProxyType({0: ZERO, **_modifier_units})

# index i names the group of 1000**i, loanwords from million upwards
SCALE_WORDS = (
    "",
    "ẹgbẹ̀rún",
    "mílíọ̀nù",
    "bílíọ̀nù",
    "tirílíọ̀nù",
    "kuadirílíọ̀nù",
    "kuintílíọ̀nù",
    "sẹkisitílíọ̀nù",
    "sẹpitílíọ̀nù",
)

# Hundred bases tried from the largest down when decomposing 101..999.
HUNDRED_BASES = (800, 600, 400, 200, 100)

# r == 0 hundreds that are spelled as a sum of two irregular bases
EXACT_HUNDRED_SUMS = MappingProxyType(
    {
        500: f"{_standalone_units[400]} {PLUS} {_hundred}",
        700: f"{_standalone_units[600]} {PLUS} {_hundred}",
        900: f"{_standalone_units[800]} {PLUS} {_hundred}",
    }
)

# Hand-fixed year phrasings, keyed by absolute year.
YEAR_OVERRIDES = MappingProxyType(
    {
        1900: f"{_standalone_units[1000]} {_modifier_units[1]} {PLUS} {_hundred} {_modifier_units[9]}",
        2024: f"{_standalone_units[2000]} {PLUS} {_compound_additions[24]}",
    }
)
