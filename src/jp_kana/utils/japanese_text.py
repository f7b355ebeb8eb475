"""Japanese text processing utilities."""

import re
import threading

import jaconv

from ..core.convert import to_hiragana, to_katakana, to_romaji
from ..core.kind import CharKind, get_kind

_SEARCH_NOISE = re.compile(r"[\s\-・･]")

_JAPANESE_KINDS = frozenset(
    {
        CharKind.HIRAGANA,
        CharKind.KATAKANA,
        CharKind.KATAKANA_HALF_WIDTH,
        CharKind.KANJI,
        CharKind.BAR_LINE,
    }
)


class JapaneseTextConverter:
    """Handles conversion between Japanese text formats."""

    def normalize_width(self, text: str) -> str:
        """Convert halfwidth katakana to fullwidth, leaving ASCII untouched."""
        return jaconv.h2z(text, kana=True, ascii=False, digit=False)

    def to_hiragana(self, text: str) -> str:
        """Convert text to hiragana."""
        return to_hiragana(self.normalize_width(text))

    def to_katakana(self, text: str) -> str:
        """Convert text to katakana."""
        return to_katakana(self.normalize_width(text))

    def to_romaji(self, text: str) -> str:
        """Convert text to romaji."""
        return to_romaji(self.normalize_width(text))

    def normalize_for_search(self, text: str) -> str:
        """Normalize text for fuzzy search.

        Widths are unified and whitespace, hyphens and interpuncts are
        dropped. The prolonged sound mark is kept as part of the word.
        """
        text = self.normalize_width(text)
        return _SEARCH_NOISE.sub("", text).strip()

    def generate_all_variants(self, text: str) -> dict[str, str]:
        """Generate all text variants for a word."""
        normalized = self.normalize_for_search(text)

        variants = {
            "original": text,
            "normalized": normalized,
            "hiragana": to_hiragana(normalized),
            "katakana": to_katakana(normalized),
            "romaji": to_romaji(normalized),
        }

        return variants


# Thread-safe singleton implementation
_converter: JapaneseTextConverter | None = None
_converter_lock = threading.Lock()


def get_converter() -> JapaneseTextConverter:
    """Get a thread-safe singleton instance of the Japanese text converter."""
    global _converter
    if _converter is None:
        with _converter_lock:
            if _converter is None:  # Double-check locking pattern
                _converter = JapaneseTextConverter()
    return _converter


def convert_to_hiragana(text: str) -> str:
    """Convert text to hiragana."""
    return get_converter().to_hiragana(text)


def convert_to_katakana(text: str) -> str:
    """Convert text to katakana."""
    return get_converter().to_katakana(text)


def convert_to_romaji(text: str) -> str:
    """Convert text to romaji."""
    return get_converter().to_romaji(text)


def generate_text_variants(text: str) -> dict[str, str]:
    """Generate all text variants for a word."""
    return get_converter().generate_all_variants(text)


def is_likely_romaji(text: str) -> bool:
    """Check if text is likely romaji (Latin characters).

    Args:
        text: Input text to check

    Returns:
        True if text appears to be romaji, False otherwise
    """
    if not text:
        return False

    # Spaces, digits and punctuation say nothing either way
    kinds = []
    for char in text:
        kind = get_kind(char)
        if char.isspace() or char.isdigit() or kind is CharKind.PUNCTUATION_ASCII:
            continue
        kinds.append(kind)

    if not kinds:
        return False

    latin_chars = sum(1 for kind in kinds if kind is CharKind.ROMAJI)
    japanese_chars = sum(1 for kind in kinds if kind in _JAPANESE_KINDS)

    # If more than 70% of characters are Latin, likely romaji
    if latin_chars / len(kinds) > 0.7:
        return True

    # If there are Latin characters but no Japanese characters, likely romaji
    if latin_chars > 0 and japanese_chars == 0:
        return True

    return False
