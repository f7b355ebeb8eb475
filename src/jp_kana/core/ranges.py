"""Unicode ranges and character sets for Japanese text.

Each set is an immutable :class:`CharClass` made of inclusive code point
ranges plus a few literal characters that sit outside the contiguous
blocks (for example the digraphs ゟ and ヿ).

References:
    - http://www.rikai.com/library/kanjitables/kanji_codes.unicode.shtml
    - https://en.wikipedia.org/wiki/List_of_Japanese_typographic_symbols
"""

from dataclasses import dataclass, field

from .constants import (
    HALF_KATAKANA_END,
    HALF_KATAKANA_START,
    HIRAGANA_END,
    HIRAGANA_START,
    KATAKANA_END,
    KATAKANA_START,
    KATAKANA_TO_HIRAGANA_END,
    KATAKANA_TO_HIRAGANA_OFFSET,
    SMALL_KATAKANA_END,
    SMALL_KATAKANA_START,
)


@dataclass(frozen=True)
class CodepointRange:
    """Inclusive range of Unicode code points."""

    name: str
    start: int
    end: int

    def __contains__(self, code: int) -> bool:
        return self.start <= code <= self.end

    def __str__(self) -> str:
        return f"{self.name} (U+{self.start:04X}..U+{self.end:04X})"


@dataclass(frozen=True)
class CharClass:
    """A named set of characters: code point ranges plus literal extras."""

    name: str
    ranges: tuple[CodepointRange, ...] = ()
    chars: frozenset[str] = field(default_factory=frozenset)

    def __contains__(self, char: str) -> bool:
        code = ord(char)
        if char in self.chars:
            return True
        return any(code in r for r in self.ranges)


# U+30FC "ー" and U+FF70 "ｰ"
PROLONGED_MARK = CharClass("Prolonged sound mark", chars=frozenset("ーｰ"))

HIRAGANA = CharClass(
    "Hiragana",
    ranges=(CodepointRange("Hiragana block", HIRAGANA_START, HIRAGANA_END),),
    # U+309F Hiragana Digraph Yori, U+1B001 Hiragana Letter Archaic Ye
    chars=frozenset("ゟ\U0001B001"),
)

KATAKANA = CharClass(
    "Katakana",
    ranges=(
        CodepointRange("Katakana block", KATAKANA_START, KATAKANA_END),
        CodepointRange(
            "Katakana phonetic extensions", SMALL_KATAKANA_START, SMALL_KATAKANA_END
        ),
    ),
    # U+30FF Katakana Digraph Koto
    chars=frozenset("ヿ"),
)

# U+FF70 (halfwidth prolonged sound mark) is left to PROLONGED_MARK
KATAKANA_HALF = CharClass(
    "Halfwidth Katakana",
    ranges=(
        CodepointRange("Halfwidth Katakana (wo to small tu)", HALF_KATAKANA_START, 0xFF6F),
        CodepointRange("Halfwidth Katakana (a to n)", 0xFF71, HALF_KATAKANA_END),
    ),
)

ROMAJI = CharClass(
    "Romaji",
    ranges=(
        CodepointRange("Latin capital letters", ord("A"), ord("Z")),
        CodepointRange("Latin small letters", ord("a"), ord("z")),
        CodepointRange("ASCII digits", ord("0"), ord("9")),
    ),
    chars=frozenset("âêîôûÂÊÎÔÛāēīōūĀĒĪŌŪ"),
)

# Includes kanji from all languages, not only Japanese.
KANJI = CharClass(
    "Kanji",
    ranges=(
        CodepointRange("CJK Unified Ideographs", 0x4E00, 0x9FAF),
        CodepointRange("CJK Unified Ideographs Extension A", 0x3400, 0x4DB5),
        CodepointRange("CJK Unified Ideographs Extension B", 0x20000, 0x2A6D6),
        CodepointRange("CJK Unified Ideographs Extension C", 0x2A700, 0x2B734),
        CodepointRange("CJK Unified Ideographs Extension D", 0x2B740, 0x2B81D),
        CodepointRange("CJK Unified Ideographs Extension E", 0x2B820, 0x2CEAF),
        CodepointRange("CJK Unified Ideographs Extension F", 0x2CEB0, 0x2EBEF),
    ),
)

ASCII_PUNCTUATION = CharClass(
    "ASCII punctuation", chars=frozenset(" `~!@#$%^&*()-_=+[]{};:<>,./?'\"|\\")
)

ROMAN_DIGIT = CharClass(
    "Fullwidth digits", ranges=(CodepointRange("Fullwidth digits", 0xFF10, 0xFF19),)
)

ROMAN_LETTER = CharClass(
    "Fullwidth Latin letters",
    ranges=(
        CodepointRange("Fullwidth Latin capital letters", 0xFF21, 0xFF3A),
        CodepointRange("Fullwidth Latin small letters", 0xFF41, 0xFF5A),
    ),
)

ROMAN_PUNCTUATION = CharClass(
    "Fullwidth punctuation",
    ranges=(
        CodepointRange("Fullwidth ！ to ／", 0xFF01, 0xFF0F),
        CodepointRange("Fullwidth ： to ＠", 0xFF1A, 0xFF20),
        CodepointRange("Fullwidth ［ to ｀", 0xFF3B, 0xFF40),
        CodepointRange("Fullwidth ｛ to ～", 0xFF5B, 0xFF5E),
    ),
)

# Includes U+3000 Ideographic Space
JAPANESE_PUNCTUATION = CharClass(
    "Japanese punctuation",
    ranges=(CodepointRange("Halfwidth CJK punctuation", 0xFF5F, 0xFF65),),
    chars=frozenset("　、。〃〈〉《》「」『』【】〔〕〖〗〘〙〚〛〜〝〞〟〰〽゠・"),
)

# Marks have a direct effect on transliteration, symbols do not.
JAPANESE_MARK = CharClass(
    "Japanese marks", chars=frozenset("々〆〱〲〳〴〵〻〼゛゜ゝゞヽヾ")
)

JAPANESE_SYMBOL = CharClass(
    "Japanese symbols",
    ranges=(
        CodepointRange("Fullwidth signs", 0xFFE0, 0xFFEE),
        CodepointRange("Enclosed CJK letters and months", 0x3200, 0x32FE),
        CodepointRange("CJK compatibility", 0x3300, 0x33FF),
        CodepointRange("CJK radicals supplement", 0x2E80, 0x2EF3),
        CodepointRange("Kangxi radicals", 0x2F00, 0x2FD5),
    ),
    chars=frozenset("〄〇〒〓〠〶〷〾〿"),
)


def is_hiragana(char: str) -> bool:
    """Return True if the character is a Hiragana letter.

    Combining marks and iteration marks of the Hiragana block
    (U+3099..U+309E) are not letters and return False.
    """
    return char in HIRAGANA


def is_katakana(char: str) -> bool:
    """Return True if the character is a full or halfwidth Katakana letter."""
    return char in KATAKANA or char in KATAKANA_HALF


def is_kanji(char: str) -> bool:
    """Return True if the character is a Kanji (CJK ideograph)."""
    return char in KANJI


def is_kana(char: str) -> bool:
    """Return True for Hiragana, Katakana or the prolonged sound mark."""
    return (
        char in PROLONGED_MARK
        or char in HIRAGANA
        or char in KATAKANA
        or char in KATAKANA_HALF
    )


def is_letter(char: str) -> bool:
    """Return True for kana, kanji or the prolonged sound mark."""
    return is_kana(char) or is_kanji(char)


def is_japanese_mark(char: str) -> bool:
    """Return True for Japanese word marks, including the prolonged sound mark."""
    return char in PROLONGED_MARK or char in JAPANESE_MARK


def is_word_mark(char: str) -> bool:
    """Return True for marks that belong inside a word (see is_japanese_mark)."""
    return is_japanese_mark(char)


def is_japanese_punctuation(char: str) -> bool:
    """Return True for Japanese-style punctuation, including ideographic space."""
    return char in JAPANESE_PUNCTUATION


def is_romaji_consonant(char: str, include_y: bool = True) -> bool:
    """Return True if the character is an ASCII consonant letter."""
    if char == "y" or char == "Y":
        return include_y
    return len(char) == 1 and char.isascii() and char.isalpha() and char not in "aeiouAEIOU"


def katakana_to_hiragana(char: str) -> str:
    """Shift a Katakana character to Hiragana when a direct mapping exists."""
    code = ord(char)
    if KATAKANA_START <= code <= KATAKANA_TO_HIRAGANA_END:
        return chr(code - KATAKANA_TO_HIRAGANA_OFFSET)
    return char


def hiragana_to_katakana(char: str) -> str:
    """Shift a Hiragana character to Katakana. Other characters pass through."""
    code = ord(char)
    if (
        KATAKANA_START - KATAKANA_TO_HIRAGANA_OFFSET
        <= code
        <= KATAKANA_TO_HIRAGANA_END - KATAKANA_TO_HIRAGANA_OFFSET
    ):
        return chr(code + KATAKANA_TO_HIRAGANA_OFFSET)
    if char == "ゝ":
        return "ヽ"
    if char == "ゞ":
        return "ヾ"
    return char
