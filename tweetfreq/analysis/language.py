from __future__ import annotations

import math

from tweetfreq.analysis.patterns import has_hanzi


def is_chinese(words: list[str], hanzi_percentage: float) -> bool:
    hanzi_words = sum(1 for word in words if has_hanzi(word))
    return hanzi_words > math.floor(len(words) * hanzi_percentage)
