from tweetfreq.analysis.service import AnalysisResult
from tweetfreq.stats.frequency import Tweet, build_dataset, freq_table, top_words


class _StubAnalyser:
    def __init__(self, results: dict[str, AnalysisResult]) -> None:
        self.results = results

    def analyse(self, raw: str, no_filter: bool = False) -> AnalysisResult:
        return self.results[raw]


def _tweet(tweet_id: str, text: str) -> Tweet:
    return Tweet(tweet_id=tweet_id, user_id="u1", created_at=1000, full_text=text)


def test_freq_table() -> None:
    assert freq_table(["moon", "btc", "moon"]) == {"moon": 2, "btc": 1}
    assert freq_table([]) == {}


def test_top_words_keeps_first_seen_on_ties() -> None:
    table = {"btc": 1, "moon": 3, "eth": 1}
    assert top_words(table, 2) == [("moon", 3), ("btc", 1)]


def test_build_dataset_splits_by_language() -> None:
    analyser = _StubAnalyser(
        {
            "a": AnalysisResult(is_chinese=False, words=["moon", "bitcoin"]),
            "b": AnalysisResult(is_chinese=True, words=["moon"]),
            "c": AnalysisResult(is_chinese=False, words=["moon"]),
        }
    )
    tweets = [_tweet("1", "a"), _tweet("2", "b"), _tweet("3", "c")]
    dataset = build_dataset(tweets, analyser)
    assert [t.tweet_id for t in dataset.english_tweets] == ["1", "3"]
    assert [t.tweet_id for t in dataset.chinese_tweets] == ["2"]
    assert dataset.english_freq == {"moon": 2, "bitcoin": 1}
    assert dataset.chinese_freq == {"moon": 1}
    data = dataset.to_dict()
    assert data["chinese_tweets"] == [
        {"tweet_id": "2", "user_id": "u1", "created_at": 1000, "full_text": "b"}
    ]
