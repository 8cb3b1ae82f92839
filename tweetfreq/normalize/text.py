from __future__ import annotations

import re
from collections.abc import Callable
from dataclasses import dataclass

from opencc import OpenCC

from tweetfreq.analysis.patterns import POSSESSIVE_RE, TCO_URL_RE, compile_alternation


@dataclass(frozen=True, slots=True)
class Normalizer:
    replaces: dict[str, str]
    aliases: dict[str, str]
    replaces_re: re.Pattern[str] | None
    aliases_re: re.Pattern[str] | None
    to_simplified: Callable[[str], str]

    def normalize(self, raw: str) -> str:
        text = TCO_URL_RE.sub("", raw.lower())
        if self.replaces_re is not None:
            text = self.replaces_re.sub(lambda m: self.replaces[m.group(0)], text)
        if self.aliases_re is not None:
            text = self.aliases_re.sub(lambda m: self.aliases[m.group(0)], text)
        # rough but good enough for most contractions
        text = POSSESSIVE_RE.sub(r"\1 is", text)
        return self.to_simplified(text)


def opencc_converter(conversion: str = "hk2s") -> Callable[[str], str]:
    return OpenCC(conversion).convert


def build_normalizer(
    replaces: dict[str, str],
    aliases: dict[str, str],
    to_simplified: Callable[[str], str],
) -> Normalizer:
    return Normalizer(
        replaces=dict(replaces),
        aliases=dict(aliases),
        replaces_re=compile_alternation(list(replaces)),
        aliases_re=compile_alternation(list(aliases), word_bounded=True),
        to_simplified=to_simplified,
    )
