"""Test configuration and fixtures."""

import pytest


@pytest.fixture
def kanji_samples():
    """Kanji from the base block and every extension."""
    return (
        "漢字日本語文字言語言葉"
        "一丁丂七丄丅丆万丈三上下丌不与丏"
        "捰捱捲捳捴捵捶捷捸捹捺捻捼捽捾捿"
        "䁰䁱䁲䁳䁴䁵䁶䁷䁸䁹䁺䁻䁼䁽䁾䁿"
        # Extension A
        "㐀䰼䰽䰾䩍䩎䩏䰿䶵"
        # Extension B
        "𠀀𠂹𠂺𠂻𠂼𠂽𠳜𠳝𠳞𪏲𪏴𪏵𪏶𩺔𩺕𩺗𩺘𪛖"
        # Extension C
        "𪜀𫙑𫙒𫙓𫑘𫑙𫑚𫑝𫜴"
        # Extension D
        "𫝀𫞁𫞂𫞃𫞄𫟅𫟇𫟉𫠝"
        # Extension E
        "\U0002B820\U0002CEAF𫢸𫢹𫭼𫭽𫮃𫮄𫰜𫰛𫸩𬀩𬀪𬃊"
        # Extension F
        "\U0002CEB0\U0002EBEF"
    )


@pytest.fixture
def kana_to_romaji_rows():
    """(katakana, hiragana, romaji) rows for single kana."""
    return [
        ("ァ", "ぁ", "a"),
        ("ア", "あ", "a"),
        ("ィ", "ぃ", "i"),
        ("イ", "い", "i"),
        ("ゥ", "ぅ", "u"),
        ("ウ", "う", "u"),
        ("ェ", "ぇ", "e"),
        ("エ", "え", "e"),
        ("ォ", "ぉ", "o"),
        ("オ", "お", "o"),
        ("カ", "か", "ka"),
        ("ガ", "が", "ga"),
        ("キ", "き", "ki"),
        ("ギ", "ぎ", "gi"),
        ("ク", "く", "ku"),
        ("グ", "ぐ", "gu"),
        ("ケ", "け", "ke"),
        ("ゲ", "げ", "ge"),
        ("コ", "こ", "ko"),
        ("ゴ", "ご", "go"),
        ("サ", "さ", "sa"),
        ("ザ", "ざ", "za"),
        ("シ", "し", "shi"),
        ("ジ", "じ", "ji"),
        ("ス", "す", "su"),
        ("ズ", "ず", "zu"),
        ("セ", "せ", "se"),
        ("ゼ", "ぜ", "ze"),
        ("ソ", "そ", "so"),
        ("ゾ", "ぞ", "zo"),
        ("タ", "た", "ta"),
        ("ダ", "だ", "da"),
        ("チ", "ち", "chi"),
        ("ヂ", "ぢ", "di"),
        ("ッ", "っ", "'"),
        ("ツ", "つ", "tsu"),
        ("ヅ", "づ", "du"),
        ("テ", "て", "te"),
        ("デ", "で", "de"),
        ("ト", "と", "to"),
        ("ド", "ど", "do"),
        ("ナ", "な", "na"),
        ("ニ", "に", "ni"),
        ("ヌ", "ぬ", "nu"),
        ("ネ", "ね", "ne"),
        ("ノ", "の", "no"),
        ("ハ", "は", "ha"),
        ("バ", "ば", "ba"),
        ("パ", "ぱ", "pa"),
        ("ヒ", "ひ", "hi"),
        ("ビ", "び", "bi"),
        ("ピ", "ぴ", "pi"),
        ("フ", "ふ", "fu"),
        ("ブ", "ぶ", "bu"),
        ("プ", "ぷ", "pu"),
        ("ヘ", "へ", "he"),
        ("ベ", "べ", "be"),
        ("ペ", "ぺ", "pe"),
        ("ホ", "ほ", "ho"),
        ("ボ", "ぼ", "bo"),
        ("ポ", "ぽ", "po"),
        ("マ", "ま", "ma"),
        ("ミ", "み", "mi"),
        ("ム", "む", "mu"),
        ("メ", "め", "me"),
        ("モ", "も", "mo"),
        ("ャ", "ゃ", "ya"),
        ("ヤ", "や", "ya"),
        ("ュ", "ゅ", "yu"),
        ("ユ", "ゆ", "yu"),
        ("ョ", "ょ", "yo"),
        ("ヨ", "よ", "yo"),
        ("ラ", "ら", "ra"),
        ("リ", "り", "ri"),
        ("ル", "る", "ru"),
        ("レ", "れ", "re"),
        ("ロ", "ろ", "ro"),
        ("ヮ", "ゎ", "wa"),
        ("ワ", "わ", "wa"),
        ("ヰ", "ゐ", "wi"),
        ("ヱ", "ゑ", "we"),
        ("ヲ", "を", "wo"),
        ("ン", "ん", "n"),
        ("ヴ", "ゔ", "vu"),
        ("ヵ", "ゕ", "ka"),
        # Small ke is pronounced ka
        ("ヶ", "ゖ", "ka"),
    ]
