import re

from .number_norm import normalize_numbers

# Regular expression matching whitespace:
_whitespace_re = re.compile(r"\s+")


def expand_numbers(text):
    return normalize_numbers(text)


def lowercase(text):
    return text.lower()


def collapse_whitespace(text):
    return re.sub(_whitespace_re, " ", text).strip()


def remove_aux_symbols(text):
    text = re.sub(r"[\<\>\(\)\[\]\"]+", "", text)
    return text


def replace_symbols(text):
    # hyphens are part of Yoruba numerals (ẹẹ́sàn-án), keep them
    text = text.replace(";", ",")
    text = text.replace(":", ",")
    text = text.replace("&", " àti ")
    return text


def basic_cleaners(text):
    """Basic pipeline that lowercases and collapses whitespace without transliteration."""
    text = lowercase(text)
    text = collapse_whitespace(text)
    return text


def yoruba_cleaners(text):
    """Pipeline for Yoruba text, including number and currency expansion."""
    text = lowercase(text)
    text = expand_numbers(text)
    text = replace_symbols(text)
    text = remove_aux_symbols(text)
    text = collapse_whitespace(text)
    return text
