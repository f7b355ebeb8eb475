"""Unit tests for character kind classification."""

import pytest

from jp_kana.core.kind import KIND_PRIORITY, CharKind, get_kind

BAR_LINE = "ーｰ"
HIRAGANA = (
    "ぁあぃいぅうぇえぉおかがきぎくぐけげこごさざしじすずせぜそぞ"
    "ただちぢっつづてでとどなにぬねのはばぱひびぴふぶぷへべぺほぼぽ"
    "まみむめもゃやゅゆょよらりるれろゎわゐゑをんゔゕゖゟ"
)
KATAKANA = (
    "ァアィイゥウェエォオカガキギクグケゲコゴサザシジスズセゼソゾ"
    "タダチヂッツヅテデトドナニヌネノハバパヒビピフブプヘベペホボポ"
    "マミムメモャヤュユョヨラリルレロヮワヰヱヲンヴヵヶヷヸヹヺヿ"
    "ㇰㇱㇲㇳㇴㇵㇶㇷㇸㇹㇺㇻㇼㇽㇾㇿ"
)
KATAKANA_HALF = "ｱｲｳｴｵｶｷｸｹｺｻｼｽｾｿﾀﾁﾂﾃﾄﾅﾆﾇﾈﾉﾊﾋﾌﾍﾎﾏﾐﾑﾒﾓﾔﾕﾖﾗﾘﾙﾚﾛﾜﾝｦｧｨｩｪｫｬｭｮｯ"
ROMAJI = (
    "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
    "abcdefghijklmnopqrstuvwxyz"
    "0123456789"
    "āīūēōâîûêôĀĪŪĒŌÂÎÛÊÔ"
)
ROMAN_DIGITS = "０１２３４５６７８９"
ROMAN_LETTERS = (
    "ＡＢＣＤＥＦＧＨＩＪＫＬＭＮＯＰＱＲＳＴＵＶＷＸＹＺ"
    "ａｂｃｄｅｆｇｈｉｊｋｌｍｎｏｐｑｒｓｔｕｖｗｘｙｚ"
)
ROMAN_PUNCTUATION = "！＂＃＄％＆＇（）＊＋，－．／：；＜＝＞？＠［＼］＾＿｀｛｜｝～"
JAPANESE_PUNCTUATION = (
    "゠・　、。〃〈〉《》「」『』【】〔〕〖〗〘〙〚〛〜〝〞〟〰〽｟｠｡｢｣､･"
)
JAPANESE_MARK = "゛゜ゝゞヽヾ々〆〱〲〳〴〵〻〼"
JAPANESE_SYMBOL = (
    "〄〇〒〠〶〷〾〿〓￠￮"
    "㈠㈡㈢㈩㉃㊀㊉㊣㋀㋗㋾"
    "㌀㌔㍻㍼㎏㏿"
    # Kanji radicals
    "⺀⺁⺧⻳⼀⼈⽔⾦⿕"
)
PUNCTUATION_ASCII = " !\"#$%&'()*+,-./:;<=>?@[\\]^_`{|}~"
NONE = "〡〢〣〤〥〦〧〨〩〸〹〺ãç😀\u0301"


@pytest.mark.parametrize(
    "chars, expected",
    [
        (BAR_LINE, CharKind.BAR_LINE),
        (HIRAGANA, CharKind.HIRAGANA),
        (KATAKANA, CharKind.KATAKANA),
        (KATAKANA_HALF, CharKind.KATAKANA_HALF_WIDTH),
        (ROMAJI, CharKind.ROMAJI),
        (ROMAN_DIGITS, CharKind.ROMAN_DIGIT),
        (ROMAN_LETTERS, CharKind.ROMAN_LETTER),
        (ROMAN_PUNCTUATION, CharKind.ROMAN_PUNCTUATION),
        (JAPANESE_PUNCTUATION, CharKind.JAPANESE_PUNCTUATION),
        (JAPANESE_MARK, CharKind.JAPANESE_MARK),
        (JAPANESE_SYMBOL, CharKind.JAPANESE_SYMBOL),
        (PUNCTUATION_ASCII, CharKind.PUNCTUATION_ASCII),
        (NONE, CharKind.NONE),
    ],
)
def test_get_kind(chars, expected):
    """Every character of a group resolves to the group's kind."""
    for char in chars:
        kind = get_kind(char)
        assert kind == expected, (
            f"expected kind of {char!r} (U+{ord(char):04X}) to be {expected}, got {kind}"
        )


class TestGetKind:
    """Test get_kind edge cases."""

    def test_kanji(self, kanji_samples):
        """Kanji from all blocks resolve to Kanji."""
        for char in kanji_samples:
            assert get_kind(char) == CharKind.KANJI

    def test_prolonged_mark_is_bar_line(self):
        """The prolonged sound mark is a BarLine even though it is kana."""
        assert get_kind("ー") == CharKind.BAR_LINE
        assert get_kind("ｰ") == CharKind.BAR_LINE

    def test_digraphs(self):
        """Archaic digraphs outside the contiguous blocks keep their script."""
        assert get_kind("ゟ") == CharKind.HIRAGANA
        assert get_kind("ヿ") == CharKind.KATAKANA

    def test_rejects_strings(self):
        """Only single characters can be classified."""
        with pytest.raises(TypeError):
            get_kind("ab")


class TestCharKind:
    """Test CharKind enumeration."""

    def test_values(self):
        """Values use the canonical category names."""
        assert CharKind.NONE.value == "None"
        assert CharKind.KATAKANA_HALF_WIDTH.value == "KatakanaHalfWidth"
        assert CharKind.PUNCTUATION_ASCII.value == "PunctuationASCII"
        assert str(CharKind.BAR_LINE) == "BarLine"
        assert len(CharKind) == 14

    def test_priority_order(self):
        """The prolonged mark is checked first and symbols last."""
        kinds = [kind for _, kind in KIND_PRIORITY]
        assert kinds[0] == CharKind.BAR_LINE
        assert kinds[-1] == CharKind.JAPANESE_SYMBOL
        assert CharKind.NONE not in kinds
        assert kinds.index(CharKind.ROMAJI) < kinds.index(CharKind.KANJI)
