from __future__ import annotations

import logging
import re
from collections.abc import Callable, Iterable
from dataclasses import dataclass, field
from pathlib import Path

import inflection

from tweetfreq.analysis.patterns import (
    ALL_ASCII_RE,
    AMOUNT_SUFFIX_RE,
    NON_LETTER_RE,
    compile_alternation,
    has_hanzi,
    has_kana,
    is_numeric,
)
from tweetfreq.config import ConfigError


logger = logging.getLogger(__name__)

MIN_LATIN_LENGTH = 3
MIN_LETTER_RATIO = 0.6

WordPredicate = Callable[[str], bool]


def word_variants(word: str) -> list[str]:
    return [
        word,
        inflection.pluralize(word),
        word + "ing",
        word[:-1] + "ing",
        word + "d",
        word + "ed",
    ]


def expand_ignore_words(words: Iterable[str]) -> frozenset[str]:
    """Expand each stripped line into its variants.

    Blank lines are expanded too, so a file ending in a newline also ignores
    the bare suffixes ``ing``, ``d`` and ``ed``.
    """
    expanded: set[str] = set()
    for word in words:
        expanded.update(word_variants(word.strip()))
    return frozenset(expanded)


def load_ignore_list(path: str) -> frozenset[str]:
    try:
        lines = Path(path).read_text(encoding="utf-8").split("\n")
    except OSError as exc:
        raise ConfigError(f"cannot read ignore list at {path}: {exc}") from exc
    ignore = expand_ignore_words(lines)
    logger.info("ignore list loaded path=%s base=%s expanded=%s", path, len(lines), len(ignore))
    return ignore


@dataclass(frozen=True, slots=True)
class WordFilter:
    ignore_words: frozenset[str]
    sign_re: re.Pattern[str] | None = None
    ignore_all_hanzi: bool = False
    ignore_all_hiragana: bool = False
    predicates: tuple[WordPredicate, ...] = field(init=False)

    def __post_init__(self) -> None:
        checks: list[WordPredicate] = []
        if self.ignore_all_hanzi:
            checks.append(lambda w: not has_hanzi(w))
        if self.ignore_all_hiragana:
            checks.append(lambda w: not has_kana(w))
        checks.extend(
            [
                self.is_not_amount,
                self.is_long_enough,
                lambda w: ALL_ASCII_RE.match(w) is not None,
                self.is_mostly_letters,
                lambda w: w not in self.ignore_words,
            ]
        )
        object.__setattr__(self, "predicates", tuple(checks))

    def is_not_amount(self, word: str) -> bool:
        """Reject bare amounts such as ``1,000``, ``1.2k`` or ``$5m``."""
        stripped = self.sign_re.sub("", word) if self.sign_re is not None else word
        return not is_numeric(AMOUNT_SUFFIX_RE.sub("", stripped))

    @staticmethod
    def is_long_enough(word: str) -> bool:
        # short CJK and kana words carry meaning, short latin ones mostly don't
        if has_hanzi(word) or has_kana(word):
            return True
        return len(word) >= MIN_LATIN_LENGTH

    @staticmethod
    def is_mostly_letters(word: str) -> bool:
        return len(NON_LETTER_RE.sub("", word)) > len(word) * MIN_LETTER_RATIO

    def keep(self, word: str) -> bool:
        return all(check(word) for check in self.predicates)

    def apply(self, words: Iterable[str]) -> list[str]:
        return [word for word in words if self.keep(word)]


def build_word_filter(
    ignore_words: frozenset[str],
    fiat_signs: list[str],
    ignore_all_hanzi: bool = False,
    ignore_all_hiragana: bool = False,
) -> WordFilter:
    return WordFilter(
        ignore_words=ignore_words,
        sign_re=compile_alternation(fiat_signs),
        ignore_all_hanzi=ignore_all_hanzi,
        ignore_all_hiragana=ignore_all_hiragana,
    )
