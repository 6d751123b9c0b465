"""
spaCy integration for sino-pinyin.

Provides pipeline components for converting Pinyin between tone digits
and tone marks.

Example:
    >>> import spacy
    >>> nlp = spacy.blank("xx")
    >>> nlp.add_pipe("pinyin_tone_marks")
    >>> doc = nlp("ni3hao3")
    >>> doc._.tone_marked
    'nǐhǎo'
"""

from typing import Optional

from spacy.language import Language
from spacy.tokens import Doc, Token

from sino_pinyin._strip import to_plain
from sino_pinyin.tones._codec import ToneCodec

__all__ = [
    "PinyinConverterComponent",
    "ToneMarksComponent",
    "ToneDigitsComponent",
    "create_pinyin_converter",
    "create_tone_marks",
    "create_tone_digits",
]

_TARGETS = ("diacritics", "digits", "plain")


# =============================================================================
# Unified Pinyin Converter Component
# =============================================================================


@Language.factory(
    "pinyin_converter",
    default_config={"target": "diacritics", "v_as_umlaut": False},
    assigns=["doc._.pinyin", "token._.pinyin"],
)
def create_pinyin_converter(
    nlp: Language,
    name: str,
    target: str = "diacritics",
    v_as_umlaut: bool = False,
) -> "PinyinConverterComponent":
    """Create a Pinyin converter pipeline component.

    The target form is chosen via config: tone marks, tone digits, or
    plain letters.
    """
    return PinyinConverterComponent(nlp, name, target=target, v_as_umlaut=v_as_umlaut)


class PinyinConverterComponent:
    """Unified spaCy pipeline component for Pinyin tone conversion.

    Extensions:
        - Doc._.pinyin: Full converted text.
        - Token._.pinyin: Converted token text.
    """

    def __init__(
        self,
        nlp: Language,
        name: str,
        *,
        target: str = "diacritics",
        v_as_umlaut: bool = False,
    ) -> None:
        self.name = name
        self.target = target
        self.v_as_umlaut = v_as_umlaut

        if target not in _TARGETS:
            raise ValueError(
                f"Unknown target: {target}. Expected one of {', '.join(_TARGETS)}."
            )

        self._codec = ToneCodec()

        if not Doc.has_extension("pinyin"):
            Doc.set_extension("pinyin", default=None)
        if not Token.has_extension("pinyin"):
            Token.set_extension("pinyin", default=None)

    def _convert(self, text: str) -> str:
        if self.target == "diacritics":
            return self._codec.digits_to_diacritics(text, self.v_as_umlaut)
        if self.target == "digits":
            return self._codec.diacritics_to_digits(text)
        return to_plain(text)

    def __call__(self, doc: Doc) -> Doc:
        doc._.pinyin = self._convert(doc.text)

        for token in doc:
            token._.pinyin = self._convert(token.text)

        return doc

    def to_disk(self, path: str, *, exclude: tuple[str, ...] = ()) -> None:
        pass

    def from_disk(
        self, path: str, *, exclude: tuple[str, ...] = ()
    ) -> "PinyinConverterComponent":
        return self

    def to_bytes(self, *, exclude: tuple[str, ...] = ()) -> bytes:
        return b""

    def from_bytes(
        self, data: bytes, *, exclude: tuple[str, ...] = ()
    ) -> "PinyinConverterComponent":
        return self


# =============================================================================
# Tone Marks Component
# =============================================================================


@Language.factory(
    "pinyin_tone_marks",
    default_config={"v_as_umlaut": False},
    assigns=["doc._.tone_marked", "token._.tone_marked"],
)
def create_tone_marks(
    nlp: Language,
    name: str,
    v_as_umlaut: bool = False,
) -> "ToneMarksComponent":
    """Create a digits-to-marks pipeline component."""
    return ToneMarksComponent(nlp, name, v_as_umlaut=v_as_umlaut)


class ToneMarksComponent:
    """
    spaCy pipeline component converting tone digits to tone marks.

    Extensions:
        - Doc._.tone_marked: Full converted text.
        - Token._.tone_marked: Converted token text.
    """

    def __init__(
        self,
        nlp: Language,
        name: str,
        *,
        v_as_umlaut: bool = False,
    ) -> None:
        self.name = name
        self.v_as_umlaut = v_as_umlaut
        self._codec = ToneCodec()

        if not Doc.has_extension("tone_marked"):
            Doc.set_extension("tone_marked", default=None)
        if not Token.has_extension("tone_marked"):
            Token.set_extension("tone_marked", default=None)

    def __call__(self, doc: Doc) -> Doc:
        doc._.tone_marked = self._codec.digits_to_diacritics(doc.text, self.v_as_umlaut)

        for token in doc:
            token._.tone_marked = self._codec.digits_to_diacritics(
                token.text, self.v_as_umlaut
            )

        return doc

    def to_disk(self, path: str, *, exclude: tuple[str, ...] = ()) -> None:
        pass

    def from_disk(
        self, path: str, *, exclude: tuple[str, ...] = ()
    ) -> "ToneMarksComponent":
        return self

    def to_bytes(self, *, exclude: tuple[str, ...] = ()) -> bytes:
        return b""

    def from_bytes(
        self, data: bytes, *, exclude: tuple[str, ...] = ()
    ) -> "ToneMarksComponent":
        return self


# =============================================================================
# Tone Digits Component
# =============================================================================


@Language.factory(
    "pinyin_tone_digits",
    assigns=["doc._.tone_numbered", "token._.tone_numbered"],
)
def create_tone_digits(nlp: Language, name: str) -> "ToneDigitsComponent":
    """Create a marks-to-digits pipeline component."""
    return ToneDigitsComponent(nlp, name)


class ToneDigitsComponent:
    """
    spaCy pipeline component converting tone marks to tone digits.

    Extensions:
        - Doc._.tone_numbered: Full converted text.
        - Token._.tone_numbered: Converted token text.
    """

    def __init__(self, nlp: Language, name: str) -> None:
        self.name = name
        self._codec = ToneCodec()

        if not Doc.has_extension("tone_numbered"):
            Doc.set_extension("tone_numbered", default=None)
        if not Token.has_extension("tone_numbered"):
            Token.set_extension("tone_numbered", default=None)

    def __call__(self, doc: Doc) -> Doc:
        doc._.tone_numbered = self._codec.diacritics_to_digits(doc.text)

        for token in doc:
            token._.tone_numbered = self._codec.diacritics_to_digits(token.text)

        return doc

    def to_disk(self, path: str, *, exclude: tuple[str, ...] = ()) -> None:
        pass

    def from_disk(
        self, path: str, *, exclude: tuple[str, ...] = ()
    ) -> "ToneDigitsComponent":
        return self

    def to_bytes(self, *, exclude: tuple[str, ...] = ()) -> bytes:
        return b""

    def from_bytes(
        self, data: bytes, *, exclude: tuple[str, ...] = ()
    ) -> "ToneDigitsComponent":
        return self


# =============================================================================
# Utility Functions
# =============================================================================


def get_converter_pipe(nlp: Language) -> Optional[PinyinConverterComponent]:
    """Get the Pinyin converter component from a pipeline."""
    if "pinyin_converter" in nlp.pipe_names:
        return nlp.get_pipe("pinyin_converter")
    return None
