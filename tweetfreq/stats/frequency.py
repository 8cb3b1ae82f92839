from __future__ import annotations

from collections.abc import Iterable
from dataclasses import asdict, dataclass, field

from tweetfreq.analysis.service import Analyser


@dataclass(slots=True)
class Tweet:
    tweet_id: str
    user_id: str
    created_at: int
    full_text: str


@dataclass(slots=True)
class Dataset:
    english_tweets: list[Tweet] = field(default_factory=list)
    chinese_tweets: list[Tweet] = field(default_factory=list)
    english_freq: dict[str, int] = field(default_factory=dict)
    chinese_freq: dict[str, int] = field(default_factory=dict)

    def to_dict(self) -> dict[str, object]:
        return {
            "english_tweets": [asdict(t) for t in self.english_tweets],
            "chinese_tweets": [asdict(t) for t in self.chinese_tweets],
            "english_freq": self.english_freq,
            "chinese_freq": self.chinese_freq,
        }


def freq_table(words: Iterable[str]) -> dict[str, int]:
    table: dict[str, int] = {}
    for word in words:
        table[word] = table.get(word, 0) + 1
    return table


def top_words(table: dict[str, int], limit: int) -> list[tuple[str, int]]:
    # sorted() is stable, so equal counts keep first-seen order
    return sorted(table.items(), key=lambda item: item[1], reverse=True)[:limit]


def build_dataset(tweets: Iterable[Tweet], analyser: Analyser) -> Dataset:
    dataset = Dataset()
    english_words: list[str] = []
    chinese_words: list[str] = []
    for tweet in tweets:
        result = analyser.analyse(tweet.full_text)
        if result.is_chinese:
            dataset.chinese_tweets.append(tweet)
            chinese_words.extend(result.words)
        else:
            dataset.english_tweets.append(tweet)
            english_words.extend(result.words)
    dataset.english_freq = freq_table(english_words)
    dataset.chinese_freq = freq_table(chinese_words)
    return dataset
