from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from tweetfreq.analysis.filters import WordFilter, build_word_filter, load_ignore_list
from tweetfreq.analysis.segmenter import Segmenter
from tweetfreq.analysis.tokenizer import TermTable, build_term_table
from tweetfreq.config import AnalysisConfig, SymbolTable
from tweetfreq.normalize.text import Normalizer, build_normalizer


@dataclass(frozen=True, slots=True)
class AnalysisContext:
    normalizer: Normalizer
    segmenter: Segmenter
    terms: TermTable
    aliases: dict[str, str]
    hanzi_percentage: float
    word_filter: WordFilter


def build_context(
    config: AnalysisConfig,
    symbols: SymbolTable,
    segmenter: Segmenter,
    to_simplified: Callable[[str], str],
    ignore_words: frozenset[str] | None = None,
) -> AnalysisContext:
    if ignore_words is None:
        ignore_words = load_ignore_list(config.ignore_list_path)
    return AnalysisContext(
        normalizer=build_normalizer(config.replaces, config.aliases, to_simplified),
        segmenter=segmenter,
        terms=build_term_table(config.terms, segmenter),
        aliases=dict(config.aliases),
        hanzi_percentage=config.hanzi_percentage,
        word_filter=build_word_filter(
            ignore_words,
            symbols.fiat_signs,
            ignore_all_hanzi=config.ignore_all_hanzi,
            ignore_all_hiragana=config.ignore_all_hiragana,
        ),
    )
