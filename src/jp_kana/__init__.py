"""Japanese Kana Package

A Python package for classifying Japanese characters and converting text
between hiragana, katakana and romaji.
"""

__version__ = "0.1.0"

from .core import (
    CharInfo,
    CharKind,
    KanaError,
    TableConstructionError,
    Transliteration,
    describe_text,
    get_kind,
    is_hiragana,
    is_japanese_mark,
    is_japanese_punctuation,
    is_kana,
    is_kanji,
    is_katakana,
    is_letter,
    is_word_mark,
    to_hiragana,
    to_katakana,
    to_romaji,
)

__all__ = [
    "CharInfo",
    "CharKind",
    "KanaError",
    "TableConstructionError",
    "Transliteration",
    "describe_text",
    "get_kind",
    "is_hiragana",
    "is_japanese_mark",
    "is_japanese_punctuation",
    "is_kana",
    "is_kanji",
    "is_katakana",
    "is_letter",
    "is_word_mark",
    "to_hiragana",
    "to_katakana",
    "to_romaji",
]
