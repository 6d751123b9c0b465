"""
Tone codec submodule.

Re-exports the codec class, its result records and error types, and the
module-level conversion functions.
"""

from sino_pinyin.tones._codec import (
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
]
