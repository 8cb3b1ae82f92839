from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from tweetfreq.analysis.patterns import is_numeric
from tweetfreq.analysis.segmenter import Segment, Segmenter


TAGS = frozenset({"@", "#", "$"})


@dataclass(frozen=True, slots=True)
class TermTable:
    """Configured multi-word terms, pre-segmented and grouped by segment count.

    Each group keeps configuration order, which decides ties between terms of
    the same length.
    """

    by_length: dict[int, tuple[tuple[str, ...], ...]]
    max_length: int

    def match(self, texts: Sequence[str]) -> tuple[str, ...] | None:
        candidates = self.by_length.get(len(texts), ())
        window = tuple(texts)
        for term in candidates:
            if term == window:
                return term
        return None


def build_term_table(terms: list[str], segmenter: Segmenter) -> TermTable:
    grouped: dict[int, list[tuple[str, ...]]] = {}
    for term in terms:
        pieces = tuple(seg.text for seg in segmenter.segment(term.lower()))
        if not pieces:
            continue
        grouped.setdefault(len(pieces), []).append(pieces)
    return TermTable(
        by_length={length: tuple(items) for length, items in grouped.items()},
        max_length=max(grouped, default=0),
    )


def _match_term(segments: Sequence[Segment], i: int, terms: TermTable) -> tuple[str, int] | None:
    for j in range(terms.max_length - 1, 0, -1):
        window = segments[i : i + j + 1]
        if len(window) != j + 1:
            continue
        term = terms.match([seg.text for seg in window])
        if term is not None:
            return "".join(term), j + 1
    return None


def _text_at(segments: Sequence[Segment], i: int) -> str | None:
    return segments[i].text if i < len(segments) else None


def _word_like_at(segments: Sequence[Segment], i: int) -> bool:
    return i < len(segments) and segments[i].is_word_like


def tokenize(segments: Sequence[Segment], terms: TermTable) -> list[str]:
    words: list[str] = []
    i = 0
    while i < len(segments):
        matched = _match_term(segments, i, terms)
        if matched is not None:
            text, consumed = matched
            words.append(text)
            i += consumed
            continue

        current = segments[i]

        # handle, hashtag, cashtag
        if (
            current.text in TAGS
            and _word_like_at(segments, i + 1)
            and not is_numeric(segments[i + 1].text)
        ):
            words.append(current.text + segments[i + 1].text)
            i += 2
            continue

        # compound words joined with hyphens
        if current.is_word_like and _text_at(segments, i + 1) == "-":
            group = [current.text]
            while _text_at(segments, i + 1) == "-" and _word_like_at(segments, i + 2):
                group.append(segments[i + 2].text)
                i += 2
            words.append("-".join(group))
            i += 1
            continue

        if current.is_word_like and not is_numeric(current.text):
            words.append(current.text)
        i += 1
    return words
