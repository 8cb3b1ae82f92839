from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from tweetfreq.stats.frequency import Tweet


@dataclass(slots=True)
class ImportStats:
    total: int = 0
    skipped: int = 0
    imported: int = 0


def _to_tweet(item: Any) -> Tweet | None:
    if not isinstance(item, dict):
        return None
    text = item.get("full_text")
    if text is None:
        text = item.get("text")
    if not isinstance(text, str) or not text.strip():
        return None
    tweet_id = item.get("tweet_id", item.get("id"))
    if tweet_id is None:
        return None
    created_at = item.get("created_at", 0)
    try:
        created_at = int(created_at)
    except (TypeError, ValueError):
        created_at = 0
    return Tweet(
        tweet_id=str(tweet_id),
        user_id=str(item.get("user_id", "")),
        created_at=created_at,
        full_text=text,
    )


def load_tweets(json_path: str) -> tuple[list[Tweet], ImportStats]:
    data = json.loads(Path(json_path).read_text(encoding="utf-8"))
    items = data.get("tweets", []) if isinstance(data, dict) else data
    if not isinstance(items, list):
        items = []
    stats = ImportStats(total=len(items))
    tweets: list[Tweet] = []
    for item in items:
        tweet = _to_tweet(item)
        if tweet is None:
            stats.skipped += 1
            continue
        tweets.append(tweet)
        stats.imported += 1
    return tweets, stats
