from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Protocol

import jieba


@dataclass(frozen=True, slots=True)
class Segment:
    text: str
    is_word_like: bool


class Segmenter(Protocol):
    def segment(self, text: str) -> list[Segment]: ...


def is_word_like(text: str) -> bool:
    return any(ch.isalnum() for ch in text)


def _ascii_alnum(ch: str) -> bool:
    return ch.isascii() and ch.isalnum()


def _ascii_alpha(ch: str) -> bool:
    return ch.isascii() and ch.isalpha()


def _joins(left: str, joiner: str, right: str) -> bool:
    if not left or not right:
        return False
    if joiner == "_":
        return _ascii_alnum(left[-1]) and _ascii_alnum(right[0])
    if joiner == "'":
        return _ascii_alpha(left[-1]) and _ascii_alpha(right[0])
    return False


def merge_pieces(pieces: Iterable[str]) -> list[str]:
    """Glue ``elon`` ``_`` ``musk`` and ``don`` ``'`` ``t`` back into one word.

    jieba splits on underscores and apostrophes, while handles and
    contractions are single words for tagging purposes.
    """
    items = [piece for piece in pieces if piece]
    merged: list[str] = []
    i = 0
    while i < len(items):
        piece = items[i]
        if merged and i + 1 < len(items) and _joins(merged[-1], piece, items[i + 1]):
            merged[-1] += piece + items[i + 1]
            i += 2
            continue
        merged.append(piece)
        i += 1
    return merged


@dataclass(slots=True)
class JiebaSegmenter:
    """Word segmentation backed by jieba's accurate mode.

    jieba keeps whitespace and punctuation as their own pieces, so joining the
    segment texts gives back the input unchanged.
    """

    hmm: bool = True

    def segment(self, text: str) -> list[Segment]:
        if not text:
            return []
        pieces = merge_pieces(jieba.cut(text, HMM=self.hmm))
        return [Segment(text=piece, is_word_like=is_word_like(piece)) for piece in pieces]


def default_segmenter() -> JiebaSegmenter:
    jieba.initialize()
    return JiebaSegmenter()
