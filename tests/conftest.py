"""Shared fixtures for sino-pinyin tests."""

import pytest

from sino_pinyin.tones import ToneCodec


@pytest.fixture
def codec() -> ToneCodec:
    """Return a fresh codec instance."""
    return ToneCodec()


@pytest.fixture
def sentence_digits() -> str:
    return "ni3hao3, ni3 shi4 shei2?"


@pytest.fixture
def sentence_marks() -> str:
    return "nǐhǎo, nǐ shì shéi?"
