"""Lookup tables for kana conversion.

Two tables are built lazily on first use and shared read-only by every
conversion afterwards:

- romaji to hiragana, with upper/lower case variants of every key;
- hiragana and katakana to romaji, with the katakana keys derived from
  the hiragana ones, plus fullwidth latin letters and digits.

The syllabary follows wana-kana (https://github.com/WaniKani/WanaKana)
with changes noted inline.
"""

import itertools
import logging
import threading
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from types import MappingProxyType

from .exceptions import TableConstructionError
from .ranges import hiragana_to_katakana

logger = logging.getLogger(__name__)

# Multi-character keys in this table either start with a latin letter or
# with ":". The scanner in convert.py relies on that to skip lookahead.
ROMAJI_TO_HIRAGANA: tuple[tuple[str, str], ...] = (
    (".", "。"),
    (",", "、"),
    (": ", "："),  # changed from wana-kana
    (":", "："),  # changed from wana-kana
    ("/", "・"),
    ("!", "！"),
    ("?", "？"),
    ("~", "〜"),
    ("-", "ー"),
    ("‘", "「"),
    ("’", "」"),
    ("“", "『"),
    ("”", "』"),
    ("[", "［"),
    ("]", "］"),
    ("(", "（"),
    (")", "）"),
    ("{", "｛"),
    ("}", "｝"),
    ("a", "あ"),
    ("i", "い"),
    ("u", "う"),
    ("e", "え"),
    ("o", "お"),
    ("yi", "い"),
    ("wu", "う"),
    ("whu", "う"),
    ("xa", "ぁ"),
    ("xi", "ぃ"),
    ("xu", "ぅ"),
    ("xe", "ぇ"),
    ("xo", "ぉ"),
    ("xyi", "ぃ"),
    ("xye", "ぇ"),
    ("ye", "いぇ"),
    ("wha", "うぁ"),
    ("whi", "うぃ"),
    ("whe", "うぇ"),
    ("who", "うぉ"),
    ("wi", "うぃ"),
    ("we", "うぇ"),
    ("va", "ゔぁ"),
    ("vi", "ゔぃ"),
    ("vu", "ゔ"),
    ("ve", "ゔぇ"),
    ("vo", "ゔぉ"),
    ("vya", "ゔゃ"),
    ("vyi", "ゔぃ"),
    ("vyu", "ゔゅ"),
    ("vye", "ゔぇ"),
    ("vyo", "ゔょ"),
    ("ka", "か"),
    ("ki", "き"),
    ("ku", "く"),
    ("ke", "け"),
    ("ko", "こ"),
    ("lka", "ヵ"),
    ("lke", "ヶ"),
    ("xka", "ヵ"),
    ("xke", "ヶ"),
    ("kya", "きゃ"),
    ("kyi", "きぃ"),
    ("kyu", "きゅ"),
    ("kye", "きぇ"),
    ("kyo", "きょ"),
    ("ca", "か"),
    ("ci", "き"),
    ("cu", "く"),
    ("ce", "け"),
    ("co", "こ"),
    ("lca", "ヵ"),
    ("lce", "ヶ"),
    ("xca", "ヵ"),
    ("xce", "ヶ"),
    ("qya", "くゃ"),
    ("qyu", "くゅ"),
    ("qyo", "くょ"),
    ("qwa", "くぁ"),
    ("qwi", "くぃ"),
    ("qwu", "くぅ"),
    ("qwe", "くぇ"),
    ("qwo", "くぉ"),
    ("qa", "くぁ"),
    ("qi", "くぃ"),
    ("qe", "くぇ"),
    ("qo", "くぉ"),
    ("kwa", "くぁ"),
    ("qyi", "くぃ"),
    ("qye", "くぇ"),
    ("ga", "が"),
    ("gi", "ぎ"),
    ("gu", "ぐ"),
    ("ge", "げ"),
    ("go", "ご"),
    ("gya", "ぎゃ"),
    ("gyi", "ぎぃ"),
    ("gyu", "ぎゅ"),
    ("gye", "ぎぇ"),
    ("gyo", "ぎょ"),
    ("gwa", "ぐぁ"),
    ("gwi", "ぐぃ"),
    ("gwu", "ぐぅ"),
    ("gwe", "ぐぇ"),
    ("gwo", "ぐぉ"),
    ("sa", "さ"),
    ("si", "し"),
    ("shi", "し"),
    ("su", "す"),
    ("se", "せ"),
    ("so", "そ"),
    ("za", "ざ"),
    ("zi", "じ"),
    ("zu", "ず"),
    ("ze", "ぜ"),
    ("zo", "ぞ"),
    ("ji", "じ"),
    ("sya", "しゃ"),
    ("syi", "しぃ"),
    ("syu", "しゅ"),
    ("sye", "しぇ"),
    ("syo", "しょ"),
    ("sha", "しゃ"),
    ("shu", "しゅ"),
    ("she", "しぇ"),
    ("sho", "しょ"),
    ("shya", "しゃ"),
    ("shyu", "しゅ"),
    ("shye", "しぇ"),
    ("shyo", "しょ"),
    ("swa", "すぁ"),
    ("swi", "すぃ"),
    ("swu", "すぅ"),
    ("swe", "すぇ"),
    ("swo", "すぉ"),
    ("zya", "じゃ"),
    ("zyi", "じぃ"),
    ("zyu", "じゅ"),
    ("zye", "じぇ"),
    ("zyo", "じょ"),
    ("ja", "じゃ"),
    ("ju", "じゅ"),
    ("je", "じぇ"),
    ("jo", "じょ"),
    ("jya", "じゃ"),
    ("jyi", "じぃ"),
    ("jyu", "じゅ"),
    ("jye", "じぇ"),
    ("jyo", "じょ"),
    ("ta", "た"),
    ("ti", "ち"),
    ("tu", "つ"),
    ("te", "て"),
    ("to", "と"),
    ("chi", "ち"),
    ("tsu", "つ"),
    ("ltu", "っ"),
    ("xtu", "っ"),
    ("tya", "ちゃ"),
    ("tyi", "ちぃ"),
    ("tyu", "ちゅ"),
    ("tye", "ちぇ"),
    ("tyo", "ちょ"),
    ("cha", "ちゃ"),
    ("chu", "ちゅ"),
    ("che", "ちぇ"),
    ("cho", "ちょ"),
    ("cya", "ちゃ"),
    ("cyi", "ちぃ"),
    ("cyu", "ちゅ"),
    ("cye", "ちぇ"),
    ("cyo", "ちょ"),
    ("chya", "ちゃ"),
    ("chyu", "ちゅ"),
    ("chye", "ちぇ"),
    ("chyo", "ちょ"),
    ("tsa", "つぁ"),
    ("tsi", "つぃ"),
    ("tse", "つぇ"),
    ("tso", "つぉ"),
    ("tha", "てゃ"),
    ("thi", "てぃ"),
    ("thu", "てゅ"),
    ("the", "てぇ"),
    ("tho", "てょ"),
    ("twa", "とぁ"),
    ("twi", "とぃ"),
    ("twu", "とぅ"),
    ("twe", "とぇ"),
    ("two", "とぉ"),
    ("da", "だ"),
    ("di", "ぢ"),
    ("du", "づ"),
    ("de", "で"),
    ("do", "ど"),
    ("dya", "ぢゃ"),
    ("dyi", "ぢぃ"),
    ("dyu", "ぢゅ"),
    ("dye", "ぢぇ"),
    ("dyo", "ぢょ"),
    ("dha", "でゃ"),
    ("dhi", "でぃ"),
    ("dhu", "でゅ"),
    ("dhe", "でぇ"),
    ("dho", "でょ"),
    ("dwa", "どぁ"),
    ("dwi", "どぃ"),
    ("dwu", "どぅ"),
    ("dwe", "どぇ"),
    ("dwo", "どぉ"),
    ("na", "な"),
    ("ni", "に"),
    ("nu", "ぬ"),
    ("ne", "ね"),
    ("no", "の"),
    ("nya", "にゃ"),
    ("nyi", "にぃ"),
    ("nyu", "にゅ"),
    ("nye", "にぇ"),
    ("nyo", "にょ"),
    ("ha", "は"),
    ("hi", "ひ"),
    ("hu", "ふ"),
    ("he", "へ"),
    ("ho", "ほ"),
    ("fu", "ふ"),
    ("hya", "ひゃ"),
    ("hyi", "ひぃ"),
    ("hyu", "ひゅ"),
    ("hye", "ひぇ"),
    ("hyo", "ひょ"),
    ("fya", "ふゃ"),
    ("fyu", "ふゅ"),
    ("fyo", "ふょ"),
    ("fwa", "ふぁ"),
    ("fwi", "ふぃ"),
    ("fwu", "ふぅ"),
    ("fwe", "ふぇ"),
    ("fwo", "ふぉ"),
    ("fa", "ふぁ"),
    ("fi", "ふぃ"),
    ("fe", "ふぇ"),
    ("fo", "ふぉ"),
    ("fyi", "ふぃ"),
    ("fye", "ふぇ"),
    ("ba", "ば"),
    ("bi", "び"),
    ("bu", "ぶ"),
    ("be", "べ"),
    ("bo", "ぼ"),
    ("bya", "びゃ"),
    ("byi", "びぃ"),
    ("byu", "びゅ"),
    ("bye", "びぇ"),
    ("byo", "びょ"),
    ("pa", "ぱ"),
    ("pi", "ぴ"),
    ("pu", "ぷ"),
    ("pe", "ぺ"),
    ("po", "ぽ"),
    ("pya", "ぴゃ"),
    ("pyi", "ぴぃ"),
    ("pyu", "ぴゅ"),
    ("pye", "ぴぇ"),
    ("pyo", "ぴょ"),
    ("ma", "ま"),
    ("mi", "み"),
    ("mu", "む"),
    ("me", "め"),
    ("mo", "も"),
    ("mya", "みゃ"),
    ("myi", "みぃ"),
    ("myu", "みゅ"),
    ("mye", "みぇ"),
    ("myo", "みょ"),
    ("ya", "や"),
    ("yu", "ゆ"),
    ("yo", "よ"),
    ("xya", "ゃ"),
    ("xyu", "ゅ"),
    ("xyo", "ょ"),
    ("ra", "ら"),
    ("ri", "り"),
    ("ru", "る"),
    ("re", "れ"),
    ("ro", "ろ"),
    ("rya", "りゃ"),
    ("ryi", "りぃ"),
    ("ryu", "りゅ"),
    ("rye", "りぇ"),
    ("ryo", "りょ"),
    ("la", "ら"),
    ("li", "り"),
    ("lu", "る"),
    ("le", "れ"),
    ("lo", "ろ"),
    ("lya", "りゃ"),
    ("lyi", "りぃ"),
    ("lyu", "りゅ"),
    ("lye", "りぇ"),
    ("lyo", "りょ"),
    ("wa", "わ"),
    ("wo", "を"),
    ("lwe", "ゎ"),
    ("xwa", "ゎ"),
    # Katakana without a direct hiragana code point
    ("ヷ", "ゔぁ"),
    ("ヸ", "ゔぃ"),
    ("ヹ", "ゔぇ"),
    ("ヺ", "ゔぉ"),
    ("ヿ", "こと"),  # U+30FF Katakana Digraph Koto
    ("ゟ", "より"),  # U+309F Hiragana Digraph Yori
    # No IME mode, so "nn" is not ん
    ("n", "ん"),
    ("n'", "ん"),
    ("n ", "ん "),  # keeps the space
    ("xn", "ん"),
    ("ltsu", "っ"),
    # Hepburn long vowels. Written with ー since the vowel may be doubled
    # or prolonged and there is no way to tell.
    ("ā", "あー"),
    ("ī", "いー"),
    ("ū", "うー"),
    ("ē", "えー"),
    ("ō", "おー"),
    ("â", "あー"),
    ("î", "いー"),
    ("û", "うー"),
    ("ê", "えー"),
    ("ô", "おー"),
    # Inverse of the ambiguous ん pairs in KANA_TO_ROMAJI
    ("n'a", "んあ"),
    ("n'i", "んい"),
    ("n'u", "んう"),
    ("n'e", "んえ"),
    ("n'o", "んお"),
    ("n'ya", "んや"),
    ("n'yu", "んゆ"),
    ("n'yo", "んよ"),
    ("nwha", "んうぁ"),
    ("nwho", "んうぉ"),
    ("nwi", "んうぃ"),
    ("nwe", "んうぇ"),
    ("n'ye", "んいぇ"),
)

KANA_TO_ROMAJI: tuple[tuple[str, str], ...] = (
    ("　", " "),  # U+3000 Ideographic Space
    ("！", "!"),
    ("？", "?"),
    ("。", "."),
    ("：", ": "),  # changed from wana-kana
    ("・", "/"),
    ("、", ","),
    ("〜", "~"),
    ("ー", "-"),
    ("「", "‘"),
    ("」", "’"),
    ("『", "“"),
    ("』", "”"),
    ("［", "["),
    ("］", "]"),
    ("（", "("),
    ("）", ")"),
    ("｛", "{"),
    ("｝", "}"),
    # Double hyphen
    ("＝", "-"),
    ("゠", "-"),
    ("あ", "a"),
    ("い", "i"),
    ("う", "u"),
    ("え", "e"),
    ("お", "o"),
    ("ゔぁ", "va"),
    ("ゔぃ", "vi"),
    ("ゔ", "vu"),
    ("ゔぇ", "ve"),
    ("ゔぉ", "vo"),
    ("か", "ka"),
    ("き", "ki"),
    ("きゃ", "kya"),
    ("きぃ", "kyi"),
    ("きゅ", "kyu"),
    ("く", "ku"),
    ("け", "ke"),
    ("こ", "ko"),
    ("が", "ga"),
    ("ぎ", "gi"),
    ("ぐ", "gu"),
    ("げ", "ge"),
    ("ご", "go"),
    ("ぎゃ", "gya"),
    ("ぎぃ", "gyi"),
    ("ぎゅ", "gyu"),
    ("ぎぇ", "gye"),
    ("ぎょ", "gyo"),
    ("さ", "sa"),
    ("す", "su"),
    ("せ", "se"),
    ("そ", "so"),
    ("ざ", "za"),
    ("ず", "zu"),
    ("ぜ", "ze"),
    ("ぞ", "zo"),
    ("し", "shi"),
    ("しゃ", "sha"),
    ("しゅ", "shu"),
    ("しょ", "sho"),
    ("じ", "ji"),
    ("じゃ", "ja"),
    ("じゅ", "ju"),
    ("じょ", "jo"),
    ("た", "ta"),
    ("ち", "chi"),
    ("ちゃ", "cha"),
    ("ちゅ", "chu"),
    ("ちょ", "cho"),
    ("つ", "tsu"),
    ("て", "te"),
    ("と", "to"),
    ("だ", "da"),
    ("ぢ", "di"),
    ("づ", "du"),
    ("で", "de"),
    ("ど", "do"),
    ("な", "na"),
    ("に", "ni"),
    ("にゃ", "nya"),
    ("にゅ", "nyu"),
    ("にょ", "nyo"),
    ("ぬ", "nu"),
    ("ね", "ne"),
    ("の", "no"),
    ("は", "ha"),
    ("ひ", "hi"),
    ("ふ", "fu"),
    ("へ", "he"),
    ("ほ", "ho"),
    ("ひゃ", "hya"),
    ("ひゅ", "hyu"),
    ("ひょ", "hyo"),
    ("ふぁ", "fa"),
    ("ふぃ", "fi"),
    ("ふぇ", "fe"),
    ("ふぉ", "fo"),
    ("ば", "ba"),
    ("び", "bi"),
    ("ぶ", "bu"),
    ("べ", "be"),
    ("ぼ", "bo"),
    ("びゃ", "bya"),
    ("びゅ", "byu"),
    ("びょ", "byo"),
    ("ぱ", "pa"),
    ("ぴ", "pi"),
    ("ぷ", "pu"),
    ("ぺ", "pe"),
    ("ぽ", "po"),
    ("ぴゃ", "pya"),
    ("ぴゅ", "pyu"),
    ("ぴょ", "pyo"),
    ("ま", "ma"),
    ("み", "mi"),
    ("む", "mu"),
    ("め", "me"),
    ("も", "mo"),
    ("みゃ", "mya"),
    ("みゅ", "myu"),
    ("みょ", "myo"),
    ("や", "ya"),
    ("ゆ", "yu"),
    ("よ", "yo"),
    ("ら", "ra"),
    ("り", "ri"),
    ("る", "ru"),
    ("れ", "re"),
    ("ろ", "ro"),
    ("りゃ", "rya"),
    ("りゅ", "ryu"),
    ("りょ", "ryo"),
    ("わ", "wa"),
    ("を", "wo"),
    ("ん", "n"),
    # Archaic
    ("ゐ", "wi"),
    ("ゑ", "we"),
    ("ヷ", "va"),
    ("ヸ", "vi"),
    ("ヹ", "ve"),
    ("ヺ", "vo"),
    ("ヿ", "koto"),  # U+30FF Katakana Digraph Koto
    ("ゟ", "yori"),  # U+309F Hiragana Digraph Yori
    ("〼", "masu"),  # U+303C Masu Mark
    # Uncommon combinations
    ("きぇ", "kye"),
    ("きょ", "kyo"),
    ("じぃ", "jyi"),
    ("じぇ", "jye"),
    ("ちぃ", "cyi"),
    ("ちぇ", "che"),
    ("ひぃ", "hyi"),
    ("ひぇ", "hye"),
    ("びぃ", "byi"),
    ("びぇ", "bye"),
    ("ぴぃ", "pyi"),
    ("ぴぇ", "pye"),
    ("みぇ", "mye"),
    ("みぃ", "myi"),
    ("りぃ", "ryi"),
    ("りぇ", "rye"),
    ("にぃ", "nyi"),
    ("にぇ", "nye"),
    ("しぃ", "syi"),
    ("しぇ", "she"),
    ("いぇ", "ye"),
    ("うぁ", "wha"),
    ("うぉ", "who"),
    ("うぃ", "wi"),
    ("うぇ", "we"),
    ("ゔゃ", "vya"),
    ("ゔゅ", "vyu"),
    ("ゔょ", "vyo"),
    ("すぁ", "swa"),
    ("すぃ", "swi"),
    ("すぅ", "swu"),
    ("すぇ", "swe"),
    ("すぉ", "swo"),
    ("くゃ", "qya"),
    ("くゅ", "qyu"),
    ("くょ", "qyo"),
    ("くぁ", "qwa"),
    ("くぃ", "qwi"),
    ("くぅ", "qwu"),
    ("くぇ", "qwe"),
    ("くぉ", "qwo"),
    ("ぐぁ", "gwa"),
    ("ぐぃ", "gwi"),
    ("ぐぅ", "gwu"),
    ("ぐぇ", "gwe"),
    ("ぐぉ", "gwo"),
    ("つぁ", "tsa"),
    ("つぃ", "tsi"),
    ("つぇ", "tse"),
    ("つぉ", "tso"),
    ("てゃ", "tha"),
    ("てぃ", "thi"),
    ("てゅ", "thu"),
    ("てぇ", "the"),
    ("てょ", "tho"),
    ("とぁ", "twa"),
    ("とぃ", "twi"),
    ("とぅ", "twu"),
    ("とぇ", "twe"),
    ("とぉ", "two"),
    ("ぢゃ", "dya"),
    ("ぢぃ", "dyi"),
    ("ぢゅ", "dyu"),
    ("ぢぇ", "dye"),
    ("ぢょ", "dyo"),
    ("でゃ", "dha"),
    ("でぃ", "dhi"),
    ("でゅ", "dhu"),
    ("でぇ", "dhe"),
    ("でょ", "dho"),
    ("どぁ", "dwa"),
    ("どぃ", "dwi"),
    ("どぅ", "dwu"),
    ("どぇ", "dwe"),
    ("どぉ", "dwo"),
    ("ふぅ", "fwu"),
    ("ふゃ", "fya"),
    ("ふゅ", "fyu"),
    ("ふょ", "fyo"),
    # Small characters, normally not transliterated alone
    ("ぁ", "a"),
    ("ぃ", "i"),
    ("ぇ", "e"),
    ("ぅ", "u"),
    ("ぉ", "o"),
    ("ゃ", "ya"),
    ("ゅ", "yu"),
    ("ょ", "yo"),
    ("っ", "~tsu"),  # handled by the scanner; fallback only
    ("ゕ", "ka"),
    ("ゖ", "ka"),
    ("ゎ", "wa"),
    # Ambiguous consonant vowel pairs
    ("んあ", "n'a"),
    ("んい", "n'i"),
    ("んう", "n'u"),
    ("んえ", "n'e"),
    ("んお", "n'o"),
    ("んや", "n'ya"),
    ("んゆ", "n'yu"),
    ("んよ", "n'yo"),
    ("んうぁ", "nwha"),
    ("んうぉ", "nwho"),
    ("んうぃ", "nwi"),
    ("んうぇ", "nwe"),
    ("んいぇ", "n'ye"),
    # Inverse of the long vowels in ROMAJI_TO_HIRAGANA
    ("あー", "ā"),
    ("いー", "ī"),
    ("うー", "ū"),
    ("えー", "ē"),
    ("おー", "ō"),
)

# Merged into the kana table as-is, with no derived variants.
FULLWIDTH_TO_ROMAJI: tuple[tuple[str, str], ...] = tuple(
    (chr(code), chr(code - 0xFEE0))
    for code in itertools.chain(
        range(ord("Ａ"), ord("Ｚ") + 1),
        range(ord("ａ"), ord("ｚ") + 1),
        range(ord("０"), ord("９") + 1),
    )
)


def case_variants(key: str) -> Iterator[str]:
    """Yield every upper/lower case combination of a key.

    Only positions where the upper case character differs are expanded, so
    a key with three letters yields up to 2**3 variants.

    Raises:
        TableConstructionError: If upper casing changes the character count
    """
    upper = key.upper()
    if len(upper) != len(key) or not key:
        raise TableConstructionError(
            f"Cannot generate case variants for {key!r}: upper case is {upper!r}"
        )
    choices = [(lc,) if lc == uc else (lc, uc) for lc, uc in zip(key, upper)]
    for combo in itertools.product(*choices):
        yield "".join(combo)


class _TableBuilder:
    """Accumulates entries for a single table and checks for conflicts."""

    def __init__(self, name: str) -> None:
        self.name = name
        self._entries: dict[str, str] = {}

    def insert(self, key: str, value: str) -> None:
        """Insert one entry. Re-inserting the same pair is a no-op."""
        existing = self._entries.get(key)
        if existing is None:
            self._entries[key] = value
        elif existing != value:
            raise TableConstructionError(
                f"{self.name}: key {key!r} maps to both {existing!r} and {value!r}"
            )

    def insert_all(self, key: str, value: str) -> None:
        """Insert an entry together with its katakana and case variants."""
        self.insert(key, value)

        katakana = "".join(hiragana_to_katakana(c) for c in key)
        if katakana != key:
            self.insert(katakana, value)

        upper = key.upper()
        if upper != key:
            if len(upper) == 1:
                self.insert(upper, value)
            else:
                for variant in case_variants(key):
                    self.insert(variant, value)

    def extend(self, pairs: Iterable[tuple[str, str]], derive: bool = True) -> None:
        for key, value in pairs:
            if derive:
                self.insert_all(key, value)
            else:
                self.insert(key, value)

    def build(self) -> MappingProxyType[str, str]:
        return MappingProxyType(dict(self._entries))


def _max_key_length(table: MappingProxyType[str, str]) -> int:
    return max((len(key) for key in table), default=0)


@dataclass(frozen=True)
class ConversionTables:
    """Immutable lookup tables shared by all conversions."""

    to_hiragana: MappingProxyType[str, str]
    # Longest key in to_hiragana, i.e. the lookahead bound
    to_hiragana_max_chunk: int
    to_romaji: MappingProxyType[str, str]
    # First character of every to_romaji key, a quick pre-filter
    to_romaji_chars: frozenset[str]
    to_romaji_max_chunk: int


def build_tables() -> ConversionTables:
    """Build both conversion tables from the raw syllabaries.

    Raises:
        TableConstructionError: If the raw data is inconsistent
    """
    hiragana_builder = _TableBuilder("romaji-to-hiragana")
    hiragana_builder.extend(ROMAJI_TO_HIRAGANA)
    to_hiragana = hiragana_builder.build()

    romaji_builder = _TableBuilder("kana-to-romaji")
    romaji_builder.extend(KANA_TO_ROMAJI)
    romaji_builder.extend(FULLWIDTH_TO_ROMAJI, derive=False)
    to_romaji = romaji_builder.build()

    tables = ConversionTables(
        to_hiragana=to_hiragana,
        to_hiragana_max_chunk=_max_key_length(to_hiragana),
        to_romaji=to_romaji,
        to_romaji_chars=frozenset(key[0] for key in to_romaji),
        to_romaji_max_chunk=_max_key_length(to_romaji),
    )
    logger.debug(
        f"Built romaji-to-hiragana table with {len(to_hiragana)} keys "
        f"(max chunk {tables.to_hiragana_max_chunk})"
    )
    logger.debug(
        f"Built kana-to-romaji table with {len(to_romaji)} keys "
        f"(max chunk {tables.to_romaji_max_chunk})"
    )
    return tables


# Thread-safe lazy singleton
_tables: ConversionTables | None = None
_tables_lock = threading.Lock()


def get_tables() -> ConversionTables:
    """Get the shared conversion tables, building them on first access."""
    global _tables
    if _tables is None:
        with _tables_lock:
            if _tables is None:  # Double-check locking pattern
                _tables = build_tables()
    return _tables
