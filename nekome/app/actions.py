"""Actions on a selected tweet or on its author."""

from __future__ import annotations

from enum import Enum

from .util import create_tweet_summary, create_user_summary


class TweetAction(Enum):
    """Operations on a tweet; the value is the label shown to the user."""

    LIKE = "Like"
    UNLIKE = "Unlike"
    RETWEET = "Retweet"
    UNRETWEET = "Unretweet"
    DELETE = "Delete"


class UserAction(Enum):
    """Operations on a user; the value is the label shown to the user."""

    FOLLOW = "Follow"
    UNFOLLOW = "Unfollow"
    BLOCK = "Block"
    UNBLOCK = "Unblock"
    MUTE = "Mute"
    UNMUTE = "Unmute"


_TWEET_METHODS = {
    TweetAction.LIKE: "like",
    TweetAction.UNLIKE: "unlike",
    TweetAction.RETWEET: "retweet",
    TweetAction.UNRETWEET: "unretweet",
    TweetAction.DELETE: "delete_tweet",
}

_USER_METHODS = {
    UserAction.FOLLOW: "follow",
    UserAction.UNFOLLOW: "unfollow",
    UserAction.BLOCK: "block",
    UserAction.UNBLOCK: "unblock",
    UserAction.MUTE: "mute",
    UserAction.UNMUTE: "unmute",
}


def past_tense(label: str) -> str:
    """Return the past tense of an action label, e.g. ``Like`` becomes ``Liked``."""
    if not label.endswith("e"):
        label += "e"
    return label + "d"


def confirmation_title(action: TweetAction | UserAction) -> str:
    """Return the question asked before performing ``action``."""
    target = "tweet" if isinstance(action, TweetAction) else "user"
    return f"Do you want to [red:-:b]{action.value.lower()}[-:-:-] this {target}?"


def perform_tweet_action(api, action: TweetAction, tweet) -> tuple[str, str]:
    """Apply ``action`` to ``tweet``; return the status label and the tweet summary."""
    getattr(api, _TWEET_METHODS[action])(tweet.tweet.id)
    return past_tense(action.value), create_tweet_summary(tweet)


def perform_user_action(api, action: UserAction, tweet) -> tuple[str, str]:
    """Apply ``action`` to the author of ``tweet``; return the status label and the user summary."""
    getattr(api, _USER_METHODS[action])(tweet.author.id)
    return past_tense(action.value), create_user_summary(tweet.author)