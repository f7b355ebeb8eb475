"""Conversion between hiragana, katakana and romaji.

All three conversions scan the input once from left to right and, at
each position, prefer the longest table key that matches. Characters
that cannot be converted are passed through unchanged, so none of the
functions ever fails for string input.
"""

from collections.abc import Mapping

from .constants import (
    HIRAGANA_END,
    HIRAGANA_START,
    ITERATION_MARKS,
    KATAKANA_START,
    KATAKANA_TO_HIRAGANA_END,
    KATAKANA_TO_HIRAGANA_OFFSET,
    SMALL_TSU,
    SMALL_TSU_REPR,
    VOICED_ITERATION_MARKS,
)
from .ranges import hiragana_to_katakana, is_romaji_consonant
from .tables import get_tables

VOICED_ROMAJI: dict[str, str] = {
    "ka": "ga",
    "ki": "gi",
    "ku": "gu",
    "ke": "ge",
    "ko": "go",
    "sa": "za",
    "shi": "ji",
    "su": "zu",
    "se": "ze",
    "so": "zo",
    "ta": "da",
    "chi": "di",
    "tsu": "du",
    "te": "de",
    "to": "do",
    "ha": "ba",
    "hi": "bi",
    "fu": "bu",
    "he": "be",
    "ho": "bo",
}

# The syllable an iteration mark repeats after a digraph
_DIGRAPH_TAILS = {"koto": "to", "yori": "ri"}


def romaji_to_voiced(syllable: str) -> str | None:
    """Return the voiced form of a romaji syllable, if it has one."""
    return VOICED_ROMAJI.get(syllable)


def _longest_match(
    table: Mapping[str, str], text: str, pos: int, max_chunk: int
) -> tuple[str, str] | None:
    """Find the longest key of ``table`` starting at ``pos``."""
    for length in range(min(max_chunk, len(text) - pos), 0, -1):
        key = text[pos : pos + length]
        value = table.get(key)
        if value is not None:
            return key, value
    return None


def _is_double_consonant(text: str, pos: int) -> bool:
    """Check for a doubled ASCII consonant such as the "kk" in "kakka".

    The n is excluded since "nn" is handled by the table.
    """
    if pos + 1 >= len(text):
        return False
    char = text[pos]
    return (
        char == text[pos + 1]
        and char.isascii()
        and char not in "nN"
        and is_romaji_consonant(char, include_y=True)
    )


def _allows_lookahead(char: str) -> bool:
    # Multi-character romaji keys start with a latin letter or ":"
    return char == ":" or ("a" <= char <= "z") or ("A" <= char <= "Z")


def to_hiragana(text: str) -> str:
    """Convert romaji and katakana in the text to hiragana.

    Unknown characters pass through unchanged.

    Args:
        text: Input text

    Returns:
        Text with romaji and katakana replaced by hiragana
    """
    tables = get_tables()
    out: list[str] = []
    pos = 0
    while pos < len(text):
        char = text[pos]
        code = ord(char)

        if KATAKANA_START <= code <= KATAKANA_TO_HIRAGANA_END:
            # Katakana maps to hiragana by a plain code point offset
            out.append(chr(code - KATAKANA_TO_HIRAGANA_OFFSET))
            pos += 1
        elif HIRAGANA_START <= code <= HIRAGANA_END:
            out.append(char)
            pos += 1
        elif _is_double_consonant(text, pos):
            # Consume only the first letter, the second starts the syllable
            out.append("っ")
            pos += 1
        else:
            max_chunk = tables.to_hiragana_max_chunk if _allows_lookahead(char) else 1
            match = _longest_match(tables.to_hiragana, text, pos, max_chunk)
            if match is None:
                out.append(char)
                pos += 1
            else:
                key, kana = match
                out.append(kana)
                pos += len(key)

    return "".join(out)


def to_katakana(text: str) -> str:
    """Convert romaji and hiragana in the text to katakana.

    Unknown characters pass through unchanged.
    """
    return "".join(hiragana_to_katakana(c) for c in to_hiragana(text))


class _RomajiWriter:
    """Output buffer for to_romaji.

    Tracks a pending small tsu, which doubles the consonant of the next
    syllable, and the last syllable written, which iteration marks repeat.
    """

    def __init__(self) -> None:
        self.parts: list[str] = []
        self.tsu_pending = False
        self.last_syllable: str | None = None

    def small_tsu(self) -> None:
        if self.tsu_pending:
            # Two in a row, the first one cannot double anything
            self.parts.append(SMALL_TSU_REPR)
        self.tsu_pending = True

    def syllable(self, romaji: str, repeatable: str | None) -> None:
        if self.tsu_pending:
            first = romaji[:1]
            if first and first not in "nN" and is_romaji_consonant(first):
                self.parts.append(first)
            else:
                self.parts.append(SMALL_TSU_REPR)
            self.tsu_pending = False
        self.parts.append(romaji)
        self.last_syllable = repeatable

    def passthrough(self, char: str) -> None:
        self.flush()
        self.parts.append(char)
        self.last_syllable = None

    def flush(self) -> None:
        if self.tsu_pending:
            self.parts.append(SMALL_TSU_REPR)
            self.tsu_pending = False

    def getvalue(self) -> str:
        return "".join(self.parts)


def _repeatable_syllable(romaji: str) -> str | None:
    """Return the part of a romaji match that an iteration mark repeats."""
    romaji = _DIGRAPH_TAILS.get(romaji, romaji)
    if romaji.startswith("n'"):
        romaji = romaji[2:]
    if romaji and romaji.isalpha():
        return romaji
    return None


def to_romaji(text: str) -> str:
    """Convert hiragana and katakana in the text to romaji.

    Japanese punctuation is converted to ASCII variants (the interpunct
    becomes "/"). A small tsu doubles the following consonant and is
    written as an apostrophe when it cannot. Iteration marks repeat the
    previous syllable, voiced for ゞ and ヾ when a voiced form exists.

    Args:
        text: Input text

    Returns:
        Text with kana replaced by romaji
    """
    tables = get_tables()
    writer = _RomajiWriter()
    pos = 0
    while pos < len(text):
        char = text[pos]

        if char in SMALL_TSU:
            writer.small_tsu()
            pos += 1
            continue

        if char in ITERATION_MARKS or char in VOICED_ITERATION_MARKS:
            repeated = writer.last_syllable
            if repeated is None:
                # Nothing to repeat, the mark itself is kept
                writer.passthrough(char)
            else:
                if char in VOICED_ITERATION_MARKS:
                    repeated = romaji_to_voiced(repeated) or repeated
                writer.syllable(repeated, repeated)
            pos += 1
            continue

        if char in tables.to_romaji_chars:
            match = _longest_match(
                tables.to_romaji, text, pos, tables.to_romaji_max_chunk
            )
            if match is not None:
                key, romaji = match
                writer.syllable(romaji, _repeatable_syllable(romaji))
                pos += len(key)
                continue

        writer.passthrough(char)
        pos += 1

    writer.flush()
    return writer.getvalue()
