from __future__ import annotations

import re

import regex


# Han ideographs plus U+3006/U+3007, with an optional variation selector.
HAN_RE = regex.compile(r"[\p{Unified_Ideograph}\u3006\u3007][\ufe00-\ufe0f\U000e0100-\U000e01ef]?")

# Kana, CJK punctuation, full-width forms and a handful of CJK symbols.
KANA_RE = re.compile(
    r"[\u3000-\u303f]|[\u3040-\u309f]|[\u30a0-\u30ff]|[\uff00-\uffef]|[\u4e00-\u9faf]"
    r"|[\u2605-\u2606]|[\u2190-\u2195]|\u203b"
)

ALL_ASCII_RE = re.compile(r"^[\x00-\x7f]+$")

TCO_URL_RE = re.compile(r"https?://t.co/[a-zA-Z0-9.-]*")

POSSESSIVE_RE = re.compile(r"(\w)'s", re.ASCII)

AMOUNT_SUFFIX_RE = re.compile(r"[kmbt,-]")

NON_LETTER_RE = re.compile(r"[^a-z]")

_DECIMAL_RE = re.compile(r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")
_RADIX_RE = re.compile(r"0(?:[xX][0-9a-fA-F]+|[oO][0-7]+|[bB][01]+)")
_NUMBER_WHITESPACE = " \t\n\r\v\f\u00a0\ufeff\u2028\u2029"


def is_numeric(text: str) -> bool:
    # Mirrors JavaScript Number(): a blank string parses as 0.
    stripped = text.strip(_NUMBER_WHITESPACE)
    if not stripped:
        return True
    return bool(_DECIMAL_RE.fullmatch(stripped) or _RADIX_RE.fullmatch(stripped))


def has_hanzi(text: str) -> bool:
    return HAN_RE.search(text) is not None


def has_kana(text: str) -> bool:
    return KANA_RE.search(text) is not None


def compile_alternation(keys: list[str], word_bounded: bool = False) -> re.Pattern[str] | None:
    """Compile literal keys into one alternation, longest key first.

    Returns None for an empty key list so callers can skip the substitution
    instead of matching the empty string everywhere. Word boundaries are
    ASCII-only: a CJK character never counts as part of a word.
    """
    if not keys:
        return None
    ordered = sorted(keys, key=len, reverse=True)
    body = "|".join(re.escape(key) for key in ordered)
    if word_bounded:
        return re.compile(rf"\b(?:{body})\b", re.ASCII)
    return re.compile(body)
