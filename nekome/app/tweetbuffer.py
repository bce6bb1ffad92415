"""Accumulated tweets of a page, selection and stream reload timing."""

from __future__ import annotations

import math
import threading
from datetime import datetime, timezone
from typing import Any, Mapping, Optional, Sequence

RELOAD_INTERVAL_MIN = 5
RELOAD_INTERVAL_DEFAULT = 10

_MISSING = object()


def _attr(obj: Any, *names: str, default: Any = None) -> Any:
    if obj is None:
        return default
    for name in names:
        if isinstance(obj, Mapping):
            if name in obj:
                return obj[name]
        else:
            value = getattr(obj, name, _MISSING)
            if value is not _MISSING:
                return value
    return default


def _references(tweet) -> list:
    return list(_attr(tweet, "referenced_tweets", default=()) or ())


def _reference_type(ref) -> str:
    kind = _attr(ref, "type")
    if kind is None:
        kind = _attr(_attr(ref, "reference"), "type", default="")
    return kind


def _reference_tweet(ref):
    return _attr(ref, "tweet_dictionary", "tweet", "dictionary")


class TweetBuffer:
    """Newest-first list of tweets with an optional pinned tweet."""

    def __init__(self, max_size: int) -> None:
        self.max_size = max_size
        self.pinned = None
        self.rate_limit = None
        self._contents: list = []
        self._lock = threading.Lock()

    @property
    def contents(self) -> list:
        """The accumulated tweets, newest first."""
        return list(self._contents)

    def register(self, tweets: Sequence) -> int:
        """Prepend ``tweets``, dropping the oldest beyond the maximum; return how many were added."""
        tweets = list(tweets)
        with self._lock:
            keep = len(self._contents)
            overflow = keep + len(tweets) - self.max_size
            if overflow > 0:
                keep = max(keep - overflow, 0)
            self._contents = tweets + self._contents[:keep]
        return len(tweets)

    def register_pinned(self, tweet) -> None:
        """Set the pinned tweet shown before all others."""
        self.pinned = tweet

    def update_rate_limit(self, rate_limit) -> None:
        """Remember ``rate_limit`` unless it is ``None``."""
        if rate_limit is not None:
            self.rate_limit = rate_limit

    def since_id(self) -> str:
        """ID of the newest tweet, or an empty string."""
        if not self._contents:
            return ""
        return self._contents[0].tweet.id

    def count(self) -> int:
        """Number of displayed tweets, the pinned one included."""
        return len(self._contents) + (1 if self.pinned is not None else 0)

    def selected(self, index: int):
        """Return the tweet at display ``index`` (retweets resolved), or ``None`` for -1."""
        if index == -1:
            return None
        if index < 0:
            raise IndexError(f"tweet index out of range: {index}")
        if self.pinned is None:
            tweet = self._contents[index]
        elif index == 0:
            tweet = self.pinned
        else:
            tweet = self._contents[index - 1]

        for ref in _references(tweet):
            if _reference_type(ref) == "retweeted":
                tweet = _reference_tweet(_references(tweet)[0])
        return tweet


def wrap_index(index: int, count: int) -> int:
    """Wrap a cursor position around the ends of ``count`` items."""
    if index < 0:
        return count - 1
    if index >= count:
        return 0
    return index


def count_new_tweets(tweets: Sequence, since_id: str) -> int:
    """Number of leading tweets that come before the one with ``since_id``."""
    for count, tweet in enumerate(tweets):
        if tweet.tweet.id == since_id:
            return count
    return len(tweets)


def calc_reload_interval(rate_limit, now: Optional[datetime] = None) -> int:
    """Seconds between stream reloads that spread the remaining calls until reset."""
    if rate_limit is None:
        raise ValueError("failed to obtain rate limit")
    reset: datetime = rate_limit.reset
    if now is None:
        now = datetime.now(timezone.utc) if reset.tzinfo is not None else datetime.now()
    remaining_sec = (reset - now).total_seconds()
    remaining = rate_limit.remaining

    if remaining_sec <= 0 or remaining <= 0:
        return RELOAD_INTERVAL_DEFAULT

    interval = math.floor(remaining_sec / remaining + 0.5)
    if interval < RELOAD_INTERVAL_MIN:
        return RELOAD_INTERVAL_MIN
    return int(interval)