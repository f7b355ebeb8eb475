"""Data models for conversion and classification results."""

from pydantic import BaseModel, Field

from .convert import to_hiragana, to_katakana, to_romaji
from .kind import CharKind, get_kind


class Transliteration(BaseModel):
    """A text together with its three kana/romaji renderings."""

    text: str = Field(..., description="Original input text")
    hiragana: str = Field(..., description="Text converted to hiragana")
    katakana: str = Field(..., description="Text converted to katakana")
    romaji: str = Field(..., description="Text converted to romaji")

    @classmethod
    def from_text(cls, text: str) -> "Transliteration":
        """Run all three conversions over the text."""
        return cls(
            text=text,
            hiragana=to_hiragana(text),
            katakana=to_katakana(text),
            romaji=to_romaji(text),
        )

    def __str__(self) -> str:
        return f"{self.text} → {self.hiragana} / {self.katakana} / {self.romaji}"


class CharInfo(BaseModel):
    """Classification of a single character."""

    char: str = Field(..., min_length=1, max_length=1, description="The character")
    codepoint: str = Field(..., description="Code point as U+XXXX")
    kind: CharKind = Field(..., description="Character kind")

    @classmethod
    def from_char(cls, char: str) -> "CharInfo":
        return cls(char=char, codepoint=f"U+{ord(char):04X}", kind=get_kind(char))

    def __str__(self) -> str:
        return f"{self.char} ({self.codepoint}): {self.kind}"


def describe_text(text: str) -> list[CharInfo]:
    """Classify every character of the text."""
    return [CharInfo.from_char(char) for char in text]
