"""Classification of characters into Japanese script categories."""

from enum import Enum

from .ranges import (
    ASCII_PUNCTUATION,
    HIRAGANA,
    JAPANESE_MARK,
    JAPANESE_PUNCTUATION,
    JAPANESE_SYMBOL,
    KANJI,
    KATAKANA,
    KATAKANA_HALF,
    PROLONGED_MARK,
    ROMAJI,
    ROMAN_DIGIT,
    ROMAN_LETTER,
    ROMAN_PUNCTUATION,
    CharClass,
)


class CharKind(str, Enum):
    """Kind of a single character. Exactly one applies to any character."""

    # Neither Japanese nor romaji
    NONE = "None"
    # Full-width hiragana; unlike is_hiragana this never includes ー
    HIRAGANA = "Hiragana"
    # Full-width katakana; unlike is_katakana this never includes ー
    KATAKANA = "Katakana"
    KATAKANA_HALF_WIDTH = "KatakanaHalfWidth"
    KANJI = "Kanji"
    # Prolonged sound marks ー (U+30FC) and ｰ (U+FF70)
    BAR_LINE = "BarLine"
    # Characters that split words and phrases, e.g. 、。・「」 and U+3000
    JAPANESE_PUNCTUATION = "JapanesePunctuation"
    # Repetition and iteration marks, e.g. 々ヽヾゝゞ〱
    JAPANESE_MARK = "JapaneseMark"
    JAPANESE_SYMBOL = "JapaneseSymbol"
    # Full-width ０ to ９
    ROMAN_DIGIT = "RomanDigit"
    # Full-width Ａ-Ｚ and ａ-ｚ
    ROMAN_LETTER = "RomanLetter"
    # Full-width roman punctuation, e.g. ：；＜＝＞
    ROMAN_PUNCTUATION = "RomanPunctuation"
    # ASCII punctuation, including space
    PUNCTUATION_ASCII = "PunctuationASCII"
    # A-Z, a-z, 0-9 and the long vowel forms âā etc.
    ROMAJI = "Romaji"

    def __str__(self) -> str:
        return self.value


# First match wins. Order matters where sets overlap in raw Unicode terms.
KIND_PRIORITY: tuple[tuple[CharClass, CharKind], ...] = (
    (PROLONGED_MARK, CharKind.BAR_LINE),
    (HIRAGANA, CharKind.HIRAGANA),
    (KATAKANA, CharKind.KATAKANA),
    (KATAKANA_HALF, CharKind.KATAKANA_HALF_WIDTH),
    (ROMAJI, CharKind.ROMAJI),
    (KANJI, CharKind.KANJI),
    (ASCII_PUNCTUATION, CharKind.PUNCTUATION_ASCII),
    (ROMAN_DIGIT, CharKind.ROMAN_DIGIT),
    (ROMAN_LETTER, CharKind.ROMAN_LETTER),
    (ROMAN_PUNCTUATION, CharKind.ROMAN_PUNCTUATION),
    (JAPANESE_PUNCTUATION, CharKind.JAPANESE_PUNCTUATION),
    (JAPANESE_MARK, CharKind.JAPANESE_MARK),
    (JAPANESE_SYMBOL, CharKind.JAPANESE_SYMBOL),
)


def get_kind(char: str) -> CharKind:
    """Return the kind of a single character.

    Args:
        char: A string of exactly one character

    Returns:
        The first matching CharKind, or CharKind.NONE
    """
    for char_class, kind in KIND_PRIORITY:
        if char in char_class:
            return kind
    return CharKind.NONE
