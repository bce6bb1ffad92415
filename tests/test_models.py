from nekome.api.models import (
    PollObj,
    RateLimit,
    TweetObj,
    UploadImageResponse,
    UserObj,
    build_tweet_dictionaries,
    build_user_dictionaries,
)

USER = {
    "id": "10",
    "name": "Cat",
    "username": "cat",
    "verified": True,
    "protected": False,
    "description": "meow",
    "location": "box",
    "url": "https://example.com",
    "pinned_tweet_id": "500",
    "public_metrics": {"tweet_count": 7, "following_count": 8, "followers_count": 9},
}


def test_user_from_json():
    user = UserObj.from_json(USER)
    assert user.user_name == "cat"
    assert user.name == "Cat"
    assert user.verified is True
    assert (user.tweets, user.following, user.followers) == (7, 8, 9)
    assert user.pinned_tweet_id == "500"


def test_tweet_from_json():
    tweet = TweetObj.from_json(
        {
            "id": "1",
            "text": "#neko hi @cat",
            "author_id": "10",
            "created_at": "2022-01-01T00:00:00.000Z",
            "source": "web",
            "public_metrics": {"like_count": 4, "retweet_count": 5},
            "entities": {
                "hashtags": [{"start": 0, "end": 5, "tag": "neko"}],
                "mentions": [{"start": 9, "end": 13, "username": "cat"}],
            },
            "referenced_tweets": [{"type": "quoted", "id": "2"}],
            "attachments": {"poll_ids": ["p1"]},
        }
    )
    assert (tweet.likes, tweet.retweets) == (4, 5)
    assert tweet.entities.hashtags[0].tag == "neko"
    assert tweet.entities.mentions == ["cat"]
    assert tweet.referenced_tweets == [("quoted", "2")]
    assert tweet.poll_ids == ["p1"]


def test_tweet_without_entities():
    tweet = TweetObj.from_json({"id": "1", "text": "plain"})
    assert tweet.entities is None
    assert tweet.referenced_tweets == []


def test_poll_from_json():
    poll = PollObj.from_json(
        {
            "id": "p1",
            "voting_status": "closed",
            "end_datetime": "2022-01-02T00:00:00.000Z",
            "options": [
                {"position": 1, "label": "yes", "votes": 3},
                {"position": 2, "label": "no", "votes": 1},
            ],
        }
    )
    assert [o.label for o in poll.options] == ["yes", "no"]
    assert sum(o.votes for o in poll.options) == 4
    assert poll.voting_status == "closed"


def test_rate_limit_from_headers():
    limit = RateLimit.from_headers(
        {"X-Rate-Limit-Limit": "180", "X-Rate-Limit-Remaining": "179", "X-Rate-Limit-Reset": "1650000000"}
    )
    assert limit.limit == 180
    assert limit.remaining == 179
    assert limit.reset.timestamp() == 1650000000


def test_rate_limit_missing_headers():
    assert RateLimit.from_headers({"Content-Type": "application/json"}) is None


def test_build_tweet_dictionaries_links_includes():
    raw = {
        "data": [
            {
                "id": "1",
                "text": "RT",
                "author_id": "10",
                "referenced_tweets": [{"type": "retweeted", "id": "2"}],
            },
            {"id": "3", "text": "poll", "author_id": "11", "attachments": {"poll_ids": ["p1"]}},
        ],
        "includes": {
            "users": [USER, {"id": "11", "name": "Dog", "username": "dog"}],
            "tweets": [{"id": "2", "text": "original", "author_id": "11"}],
            "polls": [{"id": "p1", "options": [{"position": 1, "label": "a", "votes": 0}]}],
        },
    }
    tweets = build_tweet_dictionaries(raw)
    assert [t.tweet.id for t in tweets] == ["1", "3"]
    assert tweets[0].author.user_name == "cat"
    ref = tweets[0].referenced_tweets[0]
    assert ref.reference_type == "retweeted"
    assert ref.tweet.tweet.text == "original"
    assert ref.tweet.author.user_name == "dog"
    assert tweets[1].attachment_polls[0].id == "p1"


def test_build_tweet_dictionaries_empty():
    assert build_tweet_dictionaries({}) == []
    assert build_tweet_dictionaries({"data": []}) == []
    assert build_tweet_dictionaries({"data": [None]}) == []


def test_build_tweet_dictionaries_cycle_guard():
    raw = {
        "data": [{"id": "1", "text": "a", "referenced_tweets": [{"type": "quoted", "id": "2"}]}],
        "includes": {
            "tweets": [{"id": "2", "text": "b", "referenced_tweets": [{"type": "quoted", "id": "1"}]}]
        },
    }
    tweets = build_tweet_dictionaries(raw)
    inner = tweets[0].referenced_tweets[0].tweet
    assert inner.tweet.id == "2"
    assert inner.referenced_tweets == []


def test_build_user_dictionaries_with_pinned():
    raw = {
        "data": [USER],
        "includes": {"tweets": [{"id": "500", "text": "pinned!", "author_id": "10"}]},
    }
    users = build_user_dictionaries(raw)
    assert len(users) == 1
    assert users[0].user.user_name == "cat"
    assert users[0].pinned_tweet.tweet.text == "pinned!"
    assert users[0].pinned_tweet.author is users[0].user


def test_build_user_dictionaries_single_object_without_pinned():
    users = build_user_dictionaries({"data": {"id": "11", "name": "Dog", "username": "dog"}})
    assert [u.user.user_name for u in users] == ["dog"]
    assert users[0].pinned_tweet is None
    assert build_user_dictionaries({"data": []}) == []


def test_upload_image_response_from_json():
    response = UploadImageResponse.from_json(
        {
            "media_id": 710511363345354753,
            "media_id_string": "710511363345354753",
            "size": 11065,
            "expires_after_secs": 86400,
            "image": {"image_type": "image/png", "w": 800, "h": 320},
        }
    )
    assert response.media_id_string == "710511363345354753"
    assert str(response.media_id) == response.media_id_string
    assert (response.image.image_type, response.image.w, response.image.h) == ("image/png", 800, 320)