"""
Stripping utilities for Pinyin text.

Provides lightweight functions that remove tone digits or tone marks from
Pinyin, useful for search indexing or for comparing transcriptions that
disagree on tones.

Scalar input (a number, a single character) is converted to a string first.
Other values are returned as they are; none of these functions raise.
"""

from __future__ import annotations

import re
from numbers import Number

__all__ = ["strip_digits", "strip_diacritics", "umlaut", "to_plain"]

_DIGIT_PATTERN = re.compile(r"\d")

# Ordered (plain, toned) substitutions; ü is a letter of its own and is kept
_DIACRITIC_REPLACEMENTS = [
    ("a", re.compile("[āáǎà]")),
    ("e", re.compile("[ēéěè]")),
    ("i", re.compile("[īíǐì]")),
    ("o", re.compile("[ōóǒò]")),
    ("u", re.compile("[ūúǔù]")),
    ("ü", re.compile("[ǖǘǚǜ]")),
    ("m", re.compile("ḿ")),
    ("A", re.compile("[ĀÁǍÀ]")),
    ("E", re.compile("[ĒÉĚÈ]")),
    ("I", re.compile("[ĪÍǏÌ]")),
    ("O", re.compile("[ŌÓǑÒ]")),
    ("U", re.compile("[ŪÚǓÙ]")),
    ("Ü", re.compile("[ǕǗǙǛ]")),
    ("M", re.compile("Ḿ")),
    # Combining tone marks (decomposed input, toned m)
    ("", re.compile("[\u0304\u0301\u030c\u0300]")),
]

_UMLAUT_MAP = str.maketrans("vV", "üÜ")


def _as_text(value):
    """Return scalars as strings, None for anything else."""
    if isinstance(value, str):
        return value
    if isinstance(value, Number):
        return str(value)
    return None


def strip_digits(value):
    """
    Remove every decimal digit from Pinyin text.

    Note that numbers which are not tone markers are removed too:
    "ni3 you3 2 ge4" becomes "ni you  ge".

    Example:
        >>> strip_digits("ni3hao3, ni3 shi4 shei2?")
        'nihao, ni shi shei?'
    """
    text = _as_text(value)
    if text is None:
        return value
    return _DIGIT_PATTERN.sub("", text)


def strip_diacritics(value):
    """
    Remove tone marks from Pinyin text, preserving case and ü.

    Handles both precomposed characters (ǎ → a) and combining marks
    (a + U+030C → a).

    Example:
        >>> strip_diacritics("nǐhǎo, nǐ shì shéi?")
        'nihao, ni shi shei?'
        >>> strip_diacritics("lǜsè")
        'lüse'
    """
    text = _as_text(value)
    if text is None:
        return value
    for plain, pattern in _DIACRITIC_REPLACEMENTS:
        text = pattern.sub(plain, text)
    return text


def umlaut(value):
    """
    Replace the ASCII stand-in v/V with ü/Ü.

    Example:
        >>> umlaut("lv4 nV3")
        'lü4 nÜ3'
    """
    text = _as_text(value)
    if text is None:
        return value
    return text.translate(_UMLAUT_MAP)


def to_plain(value):
    """Strip both tone digits and tone marks."""
    return strip_diacritics(strip_digits(value))
