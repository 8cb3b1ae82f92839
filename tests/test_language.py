from tweetfreq.analysis.language import is_chinese


def test_empty_is_not_chinese() -> None:
    assert not is_chinese([], 0.5)


def test_threshold_is_strict() -> None:
    assert not is_chinese(["比特币", "以太坊", "moon", "doge"], 0.5)
    assert is_chinese(["比特币", "以太坊", "狗狗币", "doge"], 0.5)


def test_mixed_token_counts_as_hanzi() -> None:
    assert is_chinese(["btc涨了"], 0.3)
