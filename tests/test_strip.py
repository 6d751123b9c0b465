"""Tests for stripping utilities (strip_digits, strip_diacritics, umlaut)."""

import pytest

from sino_pinyin import strip_diacritics, strip_digits, to_plain, umlaut


# =============================================================================
# strip_digits
# =============================================================================


class TestStripDigits:
    def test_sentence(self):
        assert strip_digits("ni3hao3, ni3 shi4 shei2?") == "nihao, ni shi shei?"

    def test_removes_non_tone_numbers_too(self):
        assert strip_digits("ni3 you3 2 ge4") == "ni you  ge"

    def test_idempotent(self):
        once = strip_digits("Zhong1guo2 ren2")
        assert strip_digits(once) == once

    def test_number_input(self):
        assert strip_digits(42) == ""
        assert strip_digits(4.5) == "."

    def test_single_character(self):
        assert strip_digits("a") == "a"

    def test_empty(self):
        assert strip_digits("") == ""

    @pytest.mark.parametrize("value", [None, ["ni3"], {"ni3": 1}])
    def test_non_scalar_identity(self, value):
        assert strip_digits(value) is value


# =============================================================================
# strip_diacritics
# =============================================================================


class TestStripDiacritics:
    def test_sentence(self):
        assert strip_diacritics("nǐhǎo, nǐ shì shéi?") == "nihao, ni shi shei?"

    def test_every_tone(self):
        assert strip_diacritics("āáǎà ēéěè īíǐì ōóǒò ūúǔù") == "aaaa eeee iiii oooo uuuu"

    def test_uppercase(self):
        assert strip_diacritics("ĀÁǍÀ ŌÓǑÒ") == "AAAA OOOO"

    def test_umlaut_kept(self):
        assert strip_diacritics("lǜsè") == "lüse"
        assert strip_diacritics("ǕǗǙǛ") == "ÜÜÜÜ"

    def test_irregular_m(self):
        assert strip_diacritics("ḿ Ḿ") == "m M"
        assert strip_diacritics("m\u0300") == "m"

    def test_combining_marks(self):
        assert strip_diacritics("ha\u030co") == "hao"

    def test_idempotent(self):
        once = strip_diacritics("Zhōngguó rén")
        assert strip_diacritics(once) == once

    def test_number_input(self):
        assert strip_diacritics(3) == "3"

    def test_no_marks_passthrough(self):
        assert strip_diacritics("nihao") == "nihao"
        assert strip_diacritics("") == ""

    def test_non_scalar_identity(self):
        value = ["nǐ"]
        assert strip_diacritics(value) is value


# =============================================================================
# umlaut
# =============================================================================


class TestUmlaut:
    def test_lowercase(self):
        assert umlaut("lv4") == "lü4"

    def test_uppercase(self):
        assert umlaut("NV3") == "NÜ3"

    def test_every_occurrence(self):
        assert umlaut("lvse lvxing") == "lüse lüxing"

    def test_no_v(self):
        assert umlaut("nihao") == "nihao"

    def test_number_input(self):
        assert umlaut(5) == "5"

    def test_non_scalar_identity(self):
        assert umlaut(None) is None


# =============================================================================
# to_plain
# =============================================================================


class TestToPlain:
    def test_digits(self):
        assert to_plain("ni3hao3") == "nihao"

    def test_marks(self):
        assert to_plain("nǐhǎo") == "nihao"
