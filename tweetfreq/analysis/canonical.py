from __future__ import annotations

from collections.abc import Iterable, Mapping


def canonicalize(words: Iterable[str], aliases: Mapping[str, str]) -> list[str]:
    return list(dict.fromkeys(aliases.get(word, word) for word in words))
