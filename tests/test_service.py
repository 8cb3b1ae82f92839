import re

from tweetfreq.analysis.segmenter import JiebaSegmenter, Segment, is_word_like
from tweetfreq.analysis.service import Analyser
from tweetfreq.config import AnalysisConfig, SymbolTable
from tweetfreq.context import build_context


WORD_RE = re.compile(r"\w+|\s+|[^\w\s]")


class _RegexSegmenter:
    def segment(self, text: str) -> list[Segment]:
        return [Segment(m.group(0), is_word_like(m.group(0))) for m in WORD_RE.finditer(text)]


def _analyser(
    terms: list[str] | None = None,
    aliases: dict[str, str] | None = None,
    ignore: set[str] | None = None,
    hanzi_percentage: float = 0.5,
) -> Analyser:
    config = AnalysisConfig(
        replaces={"&amp;": "&"},
        aliases=aliases or {},
        terms=terms or [],
        hanzi_percentage=hanzi_percentage,
        ignore_all_hanzi=False,
        ignore_all_hiragana=False,
        ignore_list_path="unused",
    )
    context = build_context(
        config,
        SymbolTable(fiat_signs=["$"]),
        segmenter=_RegexSegmenter(),
        to_simplified=lambda text: text,
        ignore_words=frozenset(ignore or ()),
    )
    return Analyser(context=context)


def test_terms_and_aliases() -> None:
    analyser = _analyser(terms=["stop loss"], aliases={"btc": "bitcoin"})
    result = analyser.analyse("BTC stop loss now")
    assert not result.is_chinese
    assert result.words == ["bitcoin", "stop loss", "now"]


def test_hashtag_and_noise() -> None:
    result = _analyser(ignore={"the"}).analyse("#BTC to the moon")
    assert result.words == ["#btc", "moon"]


def test_no_filter_keeps_everything() -> None:
    result = _analyser(ignore={"the"}).analyse("#BTC to the moon", no_filter=True)
    assert result.words == ["#btc", "to", "the", "moon"]


def test_alias_token_dedup() -> None:
    result = _analyser(aliases={"btc": "bitcoin"}).analyse("btc bitcoin BTC moon moon")
    assert result.words == ["bitcoin", "moon"]


def test_hyphen_compound_and_amounts() -> None:
    result = _analyser(ignore={"for"}).analyse("state-of-the-art wallet for $5m, 1,000 users")
    assert result.words == ["state-of-the-art", "wallet", "users"]


def test_chinese_post() -> None:
    result = _analyser(hanzi_percentage=0.3).analyse("比特币 突破 新高 moon")
    assert result.is_chinese
    assert result.words == ["moon"]
    assert _analyser(hanzi_percentage=0.3).analyse("比特币 突破 新高 moon", no_filter=True).words == [
        "比特币",
        "突破",
        "新高",
        "moon",
    ]


def test_empty_and_punctuation_only() -> None:
    analyser = _analyser()
    for raw in ["", "   ", "!!! ??? 123"]:
        result = analyser.analyse(raw)
        assert not result.is_chinese
        assert result.words == []


def test_deterministic() -> None:
    analyser = _analyser(terms=["stop loss"], aliases={"btc": "bitcoin"})
    raw = "BTC's stop loss hit &amp; #ETH dumps https://t.co/xyz"
    assert analyser.analyse(raw) == analyser.analyse(raw)


def test_result_to_dict() -> None:
    result = _analyser().analyse("moon")
    assert result.to_dict() == {"is_chinese": False, "words": ["moon"]}


def test_handle_with_underscore_through_jieba() -> None:
    config = AnalysisConfig(
        replaces={},
        aliases={},
        terms=[],
        hanzi_percentage=0.5,
        ignore_all_hanzi=False,
        ignore_all_hiragana=False,
        ignore_list_path="unused",
    )
    context = build_context(
        config,
        SymbolTable(fiat_signs=["$"]),
        segmenter=JiebaSegmenter(),
        to_simplified=lambda text: text,
        ignore_words=frozenset(),
    )
    words = Analyser(context=context).analyse("@Elon_Musk pumps doge").words
    assert "@elon_musk" in words
    assert "musk" not in words
