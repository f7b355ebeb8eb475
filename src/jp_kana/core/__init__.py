"""Core kana classification and conversion functionality."""

from .convert import to_hiragana, to_katakana, to_romaji
from .exceptions import KanaError, TableConstructionError
from .kind import CharKind, get_kind
from .models import CharInfo, Transliteration, describe_text
from .ranges import (
    is_hiragana,
    is_japanese_mark,
    is_japanese_punctuation,
    is_kana,
    is_kanji,
    is_katakana,
    is_letter,
    is_word_mark,
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
