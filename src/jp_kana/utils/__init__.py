"""Utility modules for jp-kana."""

from .japanese_text import (
    JapaneseTextConverter,
    convert_to_hiragana,
    convert_to_katakana,
    convert_to_romaji,
    generate_text_variants,
    get_converter,
    is_likely_romaji,
)

__all__ = [
    "JapaneseTextConverter",
    "convert_to_hiragana",
    "convert_to_katakana",
    "convert_to_romaji",
    "generate_text_variants",
    "get_converter",
    "is_likely_romaji",
]
