"""
sino-pinyin: Hanyu Pinyin tone conversion.

Converts Pinyin between tone digits and tone marks, and strips either
down to plain letters.

Basic usage:
    >>> from sino_pinyin import digits_to_diacritics, diacritics_to_digits
    >>> digits_to_diacritics("ni3hao3, ni3 shi4 shei2?")
    'nǐhǎo, nǐ shì shéi?'
    >>> diacritics_to_digits("nǐhǎo, nǐ shì shéi?")
    'ni3hao3, ni3 shi4 shei2?'

Stripping:
    >>> from sino_pinyin import strip_digits, strip_diacritics
    >>> strip_digits("ni3hao3")
    'nihao'
    >>> strip_diacritics("nǐhǎo")
    'nihao'
"""

from sino_pinyin.tones import (
    Change,
    ConversionResult,
    MalformedToneError,
    PinyinError,
    ToneCodec,
    ToneRangeError,
    char_to_tone,
    diacritics_to_digits,
    diacritics_to_digits_detailed,
    digit_to_diacritic,
    digits_to_diacritics,
    digits_to_diacritics_detailed,
    placement_index,
)
from sino_pinyin._strip import strip_diacritics, strip_digits, to_plain, umlaut

__version__ = "1.0.0"
__all__ = [
    "ToneCodec",
    "ConversionResult",
    "Change",
    "PinyinError",
    "MalformedToneError",
    "ToneRangeError",
    "placement_index",
    "digit_to_diacritic",
    "digits_to_diacritics",
    "digits_to_diacritics_detailed",
    "diacritics_to_digits",
    "diacritics_to_digits_detailed",
    "char_to_tone",
    "strip_digits",
    "strip_diacritics",
    "umlaut",
    "to_plain",
]

_SPACY_COMPONENTS = (
    "PinyinConverterComponent",
    "ToneMarksComponent",
    "ToneDigitsComponent",
)


# Lazy import for spaCy components (only when spacy is installed)
def __getattr__(name: str):
    if name in _SPACY_COMPONENTS:
        try:
            from sino_pinyin import spacy as _spacy_components
        except ImportError:
            raise ImportError(
                "spaCy integration requires spacy. "
                "Install with: pip install sino-pinyin[spacy]"
            )
        return getattr(_spacy_components, name)
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
