"""Expand numbers found in Yoruba text into words."""

import re

from yonum.config.shared_configs import YorubaNumberConfig
from yonum.text.yoruba.formatter import YorubaNumberConverter

_cardinal = YorubaNumberConverter()
_currency = YorubaNumberConverter(YorubaNumberConfig(mode="currency"))

_comma_number_re = re.compile(r"([0-9][0-9\,]+[0-9])")
_currency_re = re.compile(r"₦([0-9\,\.]*[0-9]+)")
# a hyphen between two numbers is a range, not a minus sign
_range_re = re.compile(r"(?<=[0-9])-(?=[0-9₦])")
_decimal_number_re = re.compile(r"((?:(?<![\w\u0300-\u036f])-)?[0-9]+\.[0-9]+)")
_number_re = re.compile(r"(?:(?<![\w\u0300-\u036f])-)?[0-9]+")


def _remove_commas(m):
    return m.group(1).replace(",", "")


def _expand_currency(m: "re.Match") -> str:
    value = m.group(1).replace(",", "")
    if value.count(".") > 1:
        return f"{value} {_currency.config.currency.main_unit_singular}"  # Unexpected format
    return _currency.convert(value)


def _expand_decimal(m: "re.Match") -> str:
    return _cardinal.convert(m.group(1))


def _expand_number(m: "re.Match") -> str:
    return _cardinal.convert(m.group(0))


def normalize_numbers(text):
    text = re.sub(_comma_number_re, _remove_commas, text)
    text = re.sub(_range_re, " - ", text)
    text = re.sub(_currency_re, _expand_currency, text)
    text = re.sub(_decimal_number_re, _expand_decimal, text)
    text = re.sub(_number_re, _expand_number, text)
    return text
