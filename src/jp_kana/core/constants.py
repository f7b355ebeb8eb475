"""Unicode code points and offsets for Japanese characters."""

# Hiragana Letter Small A (ぁ)
HIRAGANA_START = 0x3041

# Hiragana Letter Small Ke (ゖ)
HIRAGANA_END = 0x3096

# Katakana Letter Small A (ァ)
KATAKANA_START = 0x30A1

# Katakana Letter Vo (ヺ)
KATAKANA_END = 0x30FA

# Katakana Letter Small Ku (ㇰ) to Small Ro (ㇿ)
SMALL_KATAKANA_START = 0x31F0
SMALL_KATAKANA_END = 0x31FF

# Halfwidth Katakana Letter Wo (ｦ) to Letter N (ﾝ)
HALF_KATAKANA_START = 0xFF66
HALF_KATAKANA_END = 0xFF9D

# Last Katakana that maps to Hiragana by a plain offset (ヶ)
KATAKANA_TO_HIRAGANA_END = 0x30F6

# Subtract from a Katakana code point to get the Hiragana one. Only valid
# between KATAKANA_START and KATAKANA_TO_HIRAGANA_END.
KATAKANA_TO_HIRAGANA_OFFSET = KATAKANA_START - HIRAGANA_START

SMALL_TSU = frozenset("っッ")

# Iteration marks: unvoiced and voiced
ITERATION_MARKS = frozenset("ゝヽ")
VOICED_ITERATION_MARKS = frozenset("ゞヾ")

# Written for a small tsu that cannot double the following consonant
SMALL_TSU_REPR = "'"
