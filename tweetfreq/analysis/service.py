from __future__ import annotations

import logging
from dataclasses import asdict, dataclass

from tweetfreq.analysis.canonical import canonicalize
from tweetfreq.analysis.language import is_chinese
from tweetfreq.analysis.tokenizer import tokenize
from tweetfreq.context import AnalysisContext


logger = logging.getLogger(__name__)


@dataclass(slots=True)
class AnalysisResult:
    is_chinese: bool
    words: list[str]

    def to_dict(self) -> dict[str, object]:
        return asdict(self)


@dataclass(slots=True)
class Analyser:
    context: AnalysisContext

    def analyse(self, raw: str, no_filter: bool = False) -> AnalysisResult:
        ctx = self.context
        normalized = ctx.normalizer.normalize(raw)
        segments = ctx.segmenter.segment(normalized)
        words = tokenize(segments, ctx.terms)
        chinese = is_chinese(words, ctx.hanzi_percentage)
        unique_words = canonicalize(words, ctx.aliases)
        logger.debug(
            "analysed segments=%s words=%s unique=%s is_chinese=%s",
            len(segments),
            len(words),
            len(unique_words),
            chinese,
        )
        if no_filter:
            return AnalysisResult(is_chinese=chinese, words=unique_words)
        return AnalysisResult(is_chinese=chinese, words=ctx.word_filter.apply(unique_words))
