"""
Rule-based tone codec for Hanyu Pinyin.

Converts between the digit form, where each syllable ends in a tone number
(ni3hao3), and the diacritic form, where the tone is a mark on one vowel
(nǐhǎo). The mark goes where standard orthography puts it: on a or e if
present, on the o of ou, otherwise on the vowel before a final nasal or on
the last letter.

Example:
    >>> from sino_pinyin.tones import digits_to_diacritics
    >>> digits_to_diacritics("ni3hao3, ni3 shi4 shei2?")
    'nǐhǎo, nǐ shì shéi?'

    >>> from sino_pinyin.tones import diacritics_to_digits
    >>> diacritics_to_digits("nǐhǎo, nǐ shì shéi?")
    'ni3hao3, ni3 shi4 shei2?'
"""

from __future__ import annotations

import logging
import re
import unicodedata
from dataclasses import dataclass, field
from typing import Mapping, Optional

from sino_pinyin._data import (
    DIACRITICS,
    FINALS,
    IRREGULAR_M,
    SKELETON,
    SYLLABLE_PATTERN,
    TONE_CLASSES,
    build_skeleton,
    build_tone_classes,
)
from sino_pinyin._strip import umlaut

__all__ = [
    "PinyinError",
    "MalformedToneError",
    "ToneRangeError",
    "Change",
    "ConversionResult",
    "ToneCodec",
    "placement_index",
    "digit_to_diacritic",
    "digits_to_diacritics",
    "digits_to_diacritics_detailed",
    "diacritics_to_digits",
    "diacritics_to_digits_detailed",
    "char_to_tone",
]

log = logging.getLogger(__name__)

# =============================================================================
# Errors
# =============================================================================


class PinyinError(ValueError):
    """Base class for malformed Pinyin passed to a single-syllable call."""


class MalformedToneError(PinyinError):
    """A syllable lacks a trailing tone digit or a letter to mark."""


class ToneRangeError(PinyinError):
    """A tone digit outside 0-5."""


# =============================================================================
# Data Classes
# =============================================================================


@dataclass
class Change:
    """Record of a single rewritten syllable."""

    position: int
    output_position: int
    original: str
    converted: str
    tone: int


@dataclass
class ConversionResult:
    """Detailed result from a whole-string conversion."""

    original: str
    converted: str
    changes: list[Change] = field(default_factory=list)


# =============================================================================
# Helpers
# =============================================================================

# Letters followed by one tone digit; trailing text without a digit is left over
_DIGIT_SEGMENT = re.compile(r"([^0-9]*)([0-9])")

_TONE_DIGITS = "0123456789"

_MAX_FINAL = 4


def _strip_tone_digits(syllable: str) -> str:
    return "".join(c for c in syllable if c not in _TONE_DIGITS)


# =============================================================================
# Main Codec Class
# =============================================================================


class ToneCodec:
    """
    Convert Pinyin between tone digits and tone marks.

    The lookup tables default to the bundled ones; pass replacements to
    work with a different inventory of marks, finals or syllables.

    Example:
        >>> codec = ToneCodec()
        >>> codec.digit_to_diacritic("long3")
        'lǒng'
    """

    def __init__(
        self,
        diacritics: Optional[Mapping[str, tuple[str, ...]]] = None,
        finals: Optional[frozenset[str]] = None,
        syllable_pattern: Optional[re.Pattern[str]] = None,
    ) -> None:
        if diacritics is None:
            self.diacritics = DIACRITICS
            self.skeleton = SKELETON
            self.tone_classes = TONE_CLASSES
        else:
            self.diacritics = diacritics
            self.skeleton = build_skeleton(diacritics)
            self.tone_classes = build_tone_classes(diacritics)
        self.finals = FINALS if finals is None else finals
        self.syllable_pattern = (
            SYLLABLE_PATTERN if syllable_pattern is None else syllable_pattern
        )

    # -------------------------------------------------------------------------
    # Placement
    # -------------------------------------------------------------------------

    def placement_index(self, syllable: str) -> Optional[int]:
        """
        Return the index of the letter that carries the tone mark.

        Tone digits are ignored wherever they sit, but the index always
        refers to the string passed in. Returns None when there are no letters.

        Example:
            >>> ToneCodec().placement_index("lang4")
            1
        """
        # Offsets of the letters in the original string
        positions = [i for i, c in enumerate(syllable) if c not in _TONE_DIGITS]
        index = self._letter_index(_strip_tone_digits(syllable).lower())
        if index is None:
            return None
        return positions[index]

    def _letter_index(self, lower: str) -> Optional[int]:
        if not lower:
            return None
        for vowel in ("a", "e"):
            if vowel in lower:
                return lower.index(vowel)
        if "ou" in lower:
            return lower.index("ou")
        if "n" in lower:
            index = lower.rindex("n") - 1
            if index >= 0:
                return index
        return len(lower) - 1

    # -------------------------------------------------------------------------
    # Digits → diacritics
    # -------------------------------------------------------------------------

    def digit_to_diacritic(self, syllable: Optional[str]) -> Optional[str]:
        """
        Convert one syllable ending in a tone digit to its marked form.

        Args:
            syllable: Letters followed by exactly one digit 0-5

        Returns:
            The syllable with the digit dropped and one letter marked.
            Empty or None input is returned as is.

        Raises:
            TypeError: syllable is not a string
            MalformedToneError: no trailing digit, or nothing to mark
            ToneRangeError: the digit is 6-9

        Example:
            >>> ToneCodec().digit_to_diacritic("er2")
            'ér'
        """
        if syllable is None or syllable == "":
            return syllable
        if not isinstance(syllable, str):
            raise TypeError(
                f"Expected a syllable string, got {type(syllable).__name__}"
            )

        letters, digit = syllable[:-1], syllable[-1]
        if digit not in _TONE_DIGITS:
            raise MalformedToneError(f"No tone digit at the end of '{syllable}'")
        tone = int(digit)
        if tone > 5:
            raise ToneRangeError(f"Tone {tone} out of range 0-5 in '{syllable}'")

        if letters.lower() == "m":
            return IRREGULAR_M[tone + (6 if letters.isupper() else 0)]

        index = self.placement_index(letters)
        if index is None:
            raise MalformedToneError(f"No letters before the tone in '{syllable}'")
        forms = self.diacritics.get(letters[index])
        if forms is None:
            raise MalformedToneError(
                f"'{letters[index]}' in '{syllable}' cannot carry a tone mark"
            )
        return letters[:index] + forms[tone] + letters[index + 1 :]

    def _find_final(self, body: str) -> Optional[str]:
        """Return the longest suffix of body that is a known final."""
        for size in range(min(_MAX_FINAL, len(body)), 0, -1):
            candidate = body[-size:]
            if candidate.lower() in self.finals:
                return candidate
        return None

    def _convert_segment(self, body: str, digit: str) -> tuple[str, Optional[str]]:
        """
        Convert one "<text><digit>" segment.

        Returns the rewritten segment and the final that was converted, or
        the segment unchanged and None.
        """
        final = self._find_final(body)
        if final is None:
            return body + digit, None

        head = body[: len(body) - len(final)]
        if final.lower() == "r":
            if digit in "05":
                return body, final
            log.debug("Leaving toned rhotic '%s%s' unchanged", final, digit)
            return body + digit, None

        try:
            marked = self.digit_to_diacritic(final + digit)
        except PinyinError as exc:
            log.debug("Leaving '%s%s' unchanged: %s", body, digit, exc)
            return body + digit, None
        return head + marked, final

    def digits_to_diacritics_detailed(self, text, v_as_umlaut: bool = False):
        """
        Convert tone digits to tone marks, recording every rewrite.

        Args:
            text: Pinyin with tone digits
            v_as_umlaut: Read v/V as ü/Ü before converting

        Returns:
            ConversionResult with original, converted text and changes.
            Non-string values are returned unchanged.
        """
        if not isinstance(text, str):
            return text
        source = text
        if v_as_umlaut:
            text = umlaut(text)

        parts = []
        changes = []
        shift = 0
        end = 0
        for match in _DIGIT_SEGMENT.finditer(text):
            body, digit = match.group(1), match.group(2)
            segment, final = self._convert_segment(body, digit)
            parts.append(segment)
            if final is not None:
                start = match.end() - len(final) - 1
                original = text[start : match.end()]
                # The text before the final is copied through unchanged
                converted = segment[start - match.start() :]
                changes.append(
                    Change(
                        position=start,
                        output_position=start + shift,
                        original=original,
                        converted=converted,
                        tone=int(digit),
                    )
                )
            shift += len(segment) - (match.end() - match.start())
            end = match.end()
        parts.append(text[end:])

        return ConversionResult(original=source, converted="".join(parts), changes=changes)

    def digits_to_diacritics(self, text, v_as_umlaut: bool = False):
        """
        Convert every toned syllable in text from digits to marks.

        Non-string values are returned unchanged. Segments that cannot be
        converted (no known final, tone out of range) are kept verbatim.

        Example:
            >>> ToneCodec().digits_to_diacritics("Zhong1guo2")
            'Zhōngguó'
        """
        if not isinstance(text, str):
            return text
        return self.digits_to_diacritics_detailed(text, v_as_umlaut).converted

    # -------------------------------------------------------------------------
    # Diacritics → digits
    # -------------------------------------------------------------------------

    def _tone_offsets(self, syllable: str) -> list[tuple[int, int]]:
        """Return (offset, tone) for every toned character in syllable."""
        found = []
        for offset, char in enumerate(syllable):
            tone = self.char_to_tone(char)
            if tone:
                found.append((offset, tone))
        return found

    def diacritics_to_digits_detailed(self, text):
        """
        Convert tone marks to tone digits, recording every rewrite.

        Syllables are found in a mark-free copy of the text, which has the
        same length, so every match span is also valid in the original.
        A match carrying two marks (xīān read as xian) is cut before the
        second one and the rest is scanned again. The output is rebuilt
        left to right from the untouched input.

        Non-string values are returned unchanged.
        """
        if not isinstance(text, str):
            return text
        skeleton = text.translate(self.skeleton)

        parts = []
        changes = []
        shift = 0
        cursor = 0
        pos = 0
        while True:
            match = self.syllable_pattern.search(skeleton, pos)
            if match is None:
                break
            start, end = match.span()
            marks = self._tone_offsets(text[start:end])
            if len(marks) > 1:
                cut = marks[1][0]
                if unicodedata.combining(text[start + cut]) and cut - 1 > marks[0][0]:
                    # Keep the base letter with its own mark
                    cut -= 1
                end = start + cut
            pos = end
            if not marks:
                continue

            syllable = text[start:end]
            offset, tone = marks[0]
            mark = syllable[offset]
            plain = "" if unicodedata.combining(mark) else skeleton[start + offset]
            converted = syllable[:offset] + plain + syllable[offset + 1 :] + str(tone)

            parts.append(text[cursor:start])
            parts.append(converted)
            changes.append(
                Change(
                    position=start,
                    output_position=start + shift,
                    original=syllable,
                    converted=converted,
                    tone=tone,
                )
            )
            shift += len(converted) - len(syllable)
            cursor = end
        parts.append(text[cursor:])

        return ConversionResult(original=text, converted="".join(parts), changes=changes)

    def diacritics_to_digits(self, text):
        """
        Convert every marked syllable in text from marks to digits.

        Non-string values are returned unchanged. Syllables without a tone
        mark (neutral tone) are left as they are.

        Example:
            >>> ToneCodec().diacritics_to_digits("Zhōngguó")
            'Zhong1guo2'
        """
        if not isinstance(text, str):
            return text
        return self.diacritics_to_digits_detailed(text).converted

    # -------------------------------------------------------------------------
    # Tone detection
    # -------------------------------------------------------------------------

    def char_to_tone(self, char) -> Optional[int]:
        """
        Return the tone (1-4) carried by a character, or 0 if unmarked.

        Returns None for anything that is not a single-character string.

        Example:
            >>> ToneCodec().char_to_tone("ǎ")
            3
        """
        if not isinstance(char, str) or len(char) != 1:
            return None
        for tone in (1, 2, 3, 4):
            if char in self.tone_classes[tone]:
                return tone
        return 0


# =============================================================================
# Module-level Convenience Functions
# =============================================================================

# Singleton instance for convenience functions
_default_codec: Optional[ToneCodec] = None


def _codec() -> ToneCodec:
    global _default_codec
    if _default_codec is None:
        _default_codec = ToneCodec()
    return _default_codec


def placement_index(syllable: str) -> Optional[int]:
    """
    Return the index of the letter that carries the tone mark.

    Example:
        >>> placement_index("quan")
        2
    """
    return _codec().placement_index(syllable)


def digit_to_diacritic(syllable: Optional[str]) -> Optional[str]:
    """
    Convert one syllable ending in a tone digit to its marked form.

    Example:
        >>> digit_to_diacritic("long3")
        'lǒng'
    """
    return _codec().digit_to_diacritic(syllable)


def digits_to_diacritics(text, v_as_umlaut: bool = False):
    """
    Convert Pinyin with tone digits to Pinyin with tone marks.

    Args:
        text: Pinyin with tone digits; non-strings are returned unchanged
        v_as_umlaut: Read v/V as ü/Ü before converting

    Example:
        >>> digits_to_diacritics("lv4", v_as_umlaut=True)
        'lǜ'
    """
    return _codec().digits_to_diacritics(text, v_as_umlaut)


def digits_to_diacritics_detailed(text, v_as_umlaut: bool = False):
    """Convert tone digits to marks and report each rewritten syllable."""
    return _codec().digits_to_diacritics_detailed(text, v_as_umlaut)


def diacritics_to_digits(text):
    """
    Convert Pinyin with tone marks to Pinyin with tone digits.

    Example:
        >>> diacritics_to_digits("nǐhǎo")
        'ni3hao3'
    """
    return _codec().diacritics_to_digits(text)


def diacritics_to_digits_detailed(text):
    """Convert tone marks to digits and report each rewritten syllable."""
    return _codec().diacritics_to_digits_detailed(text)


def char_to_tone(char) -> Optional[int]:
    """
    Return the tone carried by a single character.

    Example:
        >>> char_to_tone("à")
        4
        >>> char_to_tone("a")
        0
    """
    return _codec().char_to_tone(char)
