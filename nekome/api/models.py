"""Data objects for users, tweets and responses of the Twitter API."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Mapping, Optional


@dataclass
class Token:
    """An OAuth token and its secret."""

    token: str = ""
    token_secret: str = ""


@dataclass
class User:
    """An authenticated account."""

    user_name: str
    id: str
    token: Token = field(default_factory=Token)


@dataclass
class RateLimit:
    """Rate limit state reported by the API."""

    limit: int
    remaining: int
    reset: datetime

    @classmethod
    def from_headers(cls, headers: Mapping[str, str]) -> Optional["RateLimit"]:
        """Read the rate limit headers; ``None`` when none are present."""
        lowered = {key.lower(): value for key, value in headers.items()}
        keys = ("x-rate-limit-limit", "x-rate-limit-remaining", "x-rate-limit-reset")
        if not any(key in lowered for key in keys):
            return None

        def number(key: str) -> int:
            try:
                return int(lowered.get(key, 0))
            except (TypeError, ValueError):
                return 0

        return cls(
            limit=number(keys[0]),
            remaining=number(keys[1]),
            reset=datetime.fromtimestamp(number(keys[2]), tz=timezone.utc),
        )


@dataclass
class UserObj:
    """A Twitter user."""

    id: str = ""
    name: str = ""
    user_name: str = ""
    verified: bool = False
    protected: bool = False
    description: str = ""
    location: str = ""
    url: str = ""
    pinned_tweet_id: str = ""
    tweets: int = 0
    following: int = 0
    followers: int = 0

    @classmethod
    def from_json(cls, data: Mapping[str, Any]) -> "UserObj":
        metrics = data.get("public_metrics") or {}
        return cls(
            id=data.get("id", ""),
            name=data.get("name", ""),
            user_name=data.get("username", ""),
            verified=bool(data.get("verified", False)),
            protected=bool(data.get("protected", False)),
            description=data.get("description", ""),
            location=data.get("location", ""),
            url=data.get("url", ""),
            pinned_tweet_id=data.get("pinned_tweet_id", ""),
            tweets=metrics.get("tweet_count", 0),
            following=metrics.get("following_count", 0),
            followers=metrics.get("followers_count", 0),
        )


@dataclass
class PollOption:
    """One choice of a poll."""

    position: int
    label: str
    votes: int


@dataclass
class PollObj:
    """A poll attached to a tweet."""

    id: str = ""
    options: list[PollOption] = field(default_factory=list)
    voting_status: str = ""
    end_datetime: str = ""
    duration_minutes: int = 0

    @classmethod
    def from_json(cls, data: Mapping[str, Any]) -> "PollObj":
        return cls(
            id=data.get("id", ""),
            options=[
                PollOption(o.get("position", 0), o.get("label", ""), o.get("votes", 0))
                for o in data.get("options") or []
            ],
            voting_status=data.get("voting_status", ""),
            end_datetime=data.get("end_datetime", ""),
            duration_minutes=data.get("duration_minutes", 0),
        )


@dataclass
class HashTag:
    """A hashtag entity; ``start`` and ``end`` are character offsets."""

    start: int
    end: int
    tag: str


@dataclass
class Entities:
    """Entities found in a tweet's text."""

    hashtags: list[HashTag] = field(default_factory=list)
    mentions: list[str] = field(default_factory=list)


def _entities_from_json(data: Mapping[str, Any]) -> Entities:
    return Entities(
        hashtags=[
            HashTag(h.get("start", 0), h.get("end", 0), h.get("tag", ""))
            for h in data.get("hashtags") or []
        ],
        mentions=[m.get("username", "") for m in data.get("mentions") or []],
    )


@dataclass
class TweetObj:
    """A single tweet."""

    id: str = ""
    text: str = ""
    author_id: str = ""
    created_at: str = ""
    source: str = ""
    likes: int = 0
    retweets: int = 0
    replies: int = 0
    quotes: int = 0
    entities: Optional[Entities] = None
    referenced_tweets: list[tuple[str, str]] = field(default_factory=list)
    poll_ids: list[str] = field(default_factory=list)

    @classmethod
    def from_json(cls, data: Mapping[str, Any]) -> "TweetObj":
        metrics = data.get("public_metrics") or {}
        entities = data.get("entities")
        return cls(
            id=data.get("id", ""),
            text=data.get("text", ""),
            author_id=data.get("author_id", ""),
            created_at=data.get("created_at", ""),
            source=data.get("source", ""),
            likes=metrics.get("like_count", 0),
            retweets=metrics.get("retweet_count", 0),
            replies=metrics.get("reply_count", 0),
            quotes=metrics.get("quote_count", 0),
            entities=_entities_from_json(entities) if entities is not None else None,
            referenced_tweets=[
                (r.get("type", ""), r.get("id", "")) for r in data.get("referenced_tweets") or []
            ],
            poll_ids=list((data.get("attachments") or {}).get("poll_ids") or []),
        )


@dataclass
class ReferencedTweet:
    """A tweet referenced by another, with the kind of reference."""

    reference_type: str
    tweet: "TweetDictionary"


@dataclass
class TweetDictionary:
    """A tweet together with its author, polls and referenced tweets."""

    tweet: TweetObj
    author: Optional[UserObj] = None
    attachment_polls: list[PollObj] = field(default_factory=list)
    referenced_tweets: list[ReferencedTweet] = field(default_factory=list)


@dataclass
class UserDictionary:
    """A user together with their pinned tweet."""

    user: UserObj
    pinned_tweet: Optional[TweetDictionary] = None


@dataclass
class Image:
    """Image details of an uploaded medium."""

    image_type: str = ""
    w: int = 0
    h: int = 0


@dataclass
class UploadImageResponse:
    """Response of the media upload endpoint."""

    media_id: int = 0
    media_id_string: str = ""
    size: int = 0
    expires_after_secs: int = 0
    image: Image = field(default_factory=Image)

    @classmethod
    def from_json(cls, data: Mapping[str, Any]) -> "UploadImageResponse":
        image = data.get("image") or {}
        return cls(
            media_id=data.get("media_id", 0),
            media_id_string=data.get("media_id_string", ""),
            size=data.get("size", 0),
            expires_after_secs=data.get("expires_after_secs", 0),
            image=Image(image.get("image_type", ""), image.get("w", 0), image.get("h", 0)),
        )


def _as_list(data: Any) -> list:
    if data is None:
        return []
    if isinstance(data, Mapping):
        return [data]
    return list(data)


def _build_dictionary(
    tweet: TweetObj,
    users: Mapping[str, UserObj],
    polls: Mapping[str, PollObj],
    included: Mapping[str, TweetObj],
    seen: frozenset,
) -> TweetDictionary:
    seen = seen | {tweet.id}
    references = [
        ReferencedTweet(kind, _build_dictionary(included[ref_id], users, polls, included, seen))
        for kind, ref_id in tweet.referenced_tweets
        if ref_id in included and ref_id not in seen
    ]
    return TweetDictionary(
        tweet=tweet,
        author=users.get(tweet.author_id),
        attachment_polls=[polls[poll_id] for poll_id in tweet.poll_ids if poll_id in polls],
        referenced_tweets=references,
    )


def build_tweet_dictionaries(raw: Mapping[str, Any]) -> list[TweetDictionary]:
    """Build tweet dictionaries from a raw response; empty when it holds no data."""
    tweets = _as_list(raw.get("data"))
    if not tweets or tweets[0] is None:
        return []
    includes = raw.get("includes") or {}
    users = {u["id"]: UserObj.from_json(u) for u in includes.get("users") or []}
    polls = {p["id"]: PollObj.from_json(p) for p in includes.get("polls") or []}
    included = {t["id"]: TweetObj.from_json(t) for t in includes.get("tweets") or []}
    return [
        _build_dictionary(TweetObj.from_json(t), users, polls, included, frozenset())
        for t in tweets
        if t is not None
    ]


def build_user_dictionaries(raw: Mapping[str, Any]) -> list[UserDictionary]:
    """Build user dictionaries from a raw response; empty when it holds no data."""
    users = _as_list(raw.get("data"))
    if not users or users[0] is None:
        return []
    includes = raw.get("includes") or {}
    included = {t["id"]: TweetObj.from_json(t) for t in includes.get("tweets") or []}
    result = []
    for data in users:
        if data is None:
            continue
        user = UserObj.from_json(data)
        pinned = included.get(user.pinned_tweet_id) if user.pinned_tweet_id else None
        result.append(
            UserDictionary(
                user=user,
                pinned_tweet=TweetDictionary(tweet=pinned, author=user) if pinned else None,
            )
        )
    return result