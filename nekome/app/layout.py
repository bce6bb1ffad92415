"""Text layouts for tweets, polls and user profiles."""

from __future__ import annotations

import html
import math
import re
from typing import Any, Mapping, Sequence

from .util import convert_date_string, create_metrics_string, display_rows, truncate

_MENTION = re.compile(r"(^|[^\w@#$%&])@(\w+)", re.ASCII)
_MISSING = object()


def _attr(obj: Any, *names: str, default: Any = None) -> Any:
    """Return the first present attribute (or mapping key) of ``obj``."""
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


def create_tweet_tag(index: int) -> str:
    """Return the region tag that marks tweet number ``index``."""
    return f"tweet_{index}"


def highlight_hashtags(text: str, entities: Any, style: str) -> str:
    """Wrap every hashtag of ``entities`` found in ``text`` in ``style`` markup.

    Reported start positions may lie slightly after the real ones, so the
    search begins one past the reported start and walks backwards until the
    whole hashtag is found.
    """
    parts: list[str] = []
    end = 0
    for hashtag in _attr(entities, "hash_tags", "hashtags", default=()) or ():
        needle = f"#{_attr(hashtag, 'tag', default='')}"
        start = int(_attr(hashtag, "start", default=0) or 0) + 1
        while start > end:
            stop = start + len(needle)
            if stop <= len(text) and text[start:stop] == needle:
                break
            start -= 1
        parts.append(text[end:start])
        parts.append(f"[{style}]{needle}[-:-:-]")
        end = start + len(needle)
    if len(text) > end:
        parts.append(text[end:])
    return "".join(parts)


class Layout:
    """Builds styled text for tweets and users from settings and style."""

    def __init__(self, settings, style) -> None:
        self.settings = settings
        self.style = style

    def annotation(self, label: str, author) -> str:
        """Return an annotation line such as ``RT by Name @user``."""
        return (
            f"[{self.style.tweet.annotation}]{label} {author.name} "
            f"[::i]@{author.user_name}[-:-:-]"
        )

    def user_info(self, user, index: int, width: int) -> str:
        """Return the name line of ``user``; ``index >= 0`` adds a selection tag."""
        half = int(width / 2)
        name = truncate(user.name, half)
        user_name = truncate("@" + user.user_name, half)

        if index >= 0:
            name = f'["{create_tweet_tag(index)}"]{name}[""]'

        header = (
            f"[{self.style.user.name}]{name} "
            f"[{self.style.user.user_name}]{user_name}[-:-:-]"
        )
        if _attr(user, "verified", default=False):
            header += f"[{self.style.user.verified}] {self.settings.icon.verified}[-:-:-]"
        if _attr(user, "protected", default=False):
            header += f"[{self.style.user.private}] {self.settings.icon.private}[-:-:-]"
        return header + "\n"

    def poll(self, polls: Sequence, width: int) -> str:
        """Return the first poll drawn as a bar graph, or an empty string."""
        if not polls:
            return ""
        poll = polls[0]
        appearance = self.settings.appearance
        graph_width = float(min(appearance.graph_max_width, width))

        options = list(_attr(poll, "options", default=()) or ())
        all_votes = sum(int(_attr(o, "votes", default=0) or 0) for o in options)

        lines = ["\n"]
        for option in options:
            votes = int(_attr(option, "votes", default=0) or 0)
            lines.append(f"{_attr(option, 'label', default='')}\n")
            share = votes / all_votes if all_votes > 0 else 0.0
            graph = appearance.graph_char * int(math.floor(share * graph_width))
            lines.append(
                f"[{self.style.tweet.poll_graph}]{graph}[-:-:-] "
                f"{share * 100:.1f}% ({votes})\n"
            )

        end_date = convert_date_string(
            _attr(poll, "end_date_time", "end_datetime", default="") or "",
            appearance.date_format,
            appearance.time_format,
        )
        status = _attr(poll, "voting_status", default="")
        lines.append(
            f"[{self.style.tweet.poll_detail}]{status} | {all_votes} votes | "
            f"ends on {end_date}[-:-:-]\n\n"
        )
        return "".join(lines)

    def tweet_detail(self, tweet) -> str:
        """Return the date, client and reaction counts of ``tweet``."""
        metrics_obj = _attr(tweet, "public_metrics")
        likes = int(_attr(metrics_obj, "likes", "like_count", default=0) or 0)
        retweets = int(_attr(metrics_obj, "retweets", "retweet_count", default=0) or 0)

        metrics = ""
        if likes != 0:
            metrics += create_metrics_string(
                self.settings.texts.like, self.style.tweet.like, likes, False
            )
        if retweets != 0:
            metrics += create_metrics_string(
                self.settings.texts.retweet, self.style.tweet.rt, retweets, False
            )
        if metrics:
            metrics = "\n" + metrics

        appearance = self.settings.appearance
        created = convert_date_string(
            _attr(tweet, "created_at", default="") or "",
            appearance.date_format,
            appearance.time_format,
        )
        source = _attr(tweet, "source", default="")
        return f"[{self.style.tweet.detail}]{created} | via {source}[-:-:-]{metrics}"

    def tweet_text(self, tweet) -> str:
        """Return the unescaped tweet text with hashtags and mentions highlighted."""
        text = html.unescape(tweet.text) + "\n"
        text = text.replace("＃", "#").replace("＠", "@")

        entities = _attr(tweet, "entities")
        if entities is None:
            return text

        if _attr(entities, "hash_tags", "hashtags", default=()):
            text = highlight_hashtags(text, entities, self.style.tweet.hash_tag)

        if _attr(entities, "mentions", default=()):
            mention_style = self.style.tweet.mention
            text = _MENTION.sub(
                lambda m: f"{m.group(1)}[{mention_style}]@{m.group(2)}[-:-:-]", text
            )
        return text

    def tweet(self, tweet, index: int, width: int) -> str:
        """Return the whole layout of a tweet dictionary."""
        polls = _attr(tweet, "attachment_polls", "polls", default=()) or ()
        return (
            self.user_info(tweet.author, index, width)
            + self.tweet_text(tweet.tweet)
            + self.poll(polls, width)
            + self.tweet_detail(tweet.tweet)
        )

    def user_bio(self, description: str, width: int) -> tuple[str, int]:
        """Return the one-line, truncated bio and the rows it takes."""
        desc = description.replace("\n", " ")
        desc = truncate(desc, width * self.settings.appearance.user_bio_max_row)
        return desc, display_rows(desc, width)

    def user_detail(self, user) -> str:
        """Return the location and URL line of ``user``."""
        icons = self.settings.icon
        texts = []
        location = _attr(user, "location", default="") or ""
        url = _attr(user, "url", default="") or ""
        if location:
            texts.append(f"{icons.geo} {location}")
        if url:
            texts.append(f"{icons.link} {url}")
        return f"[{self.style.user.detail}]{' | '.join(texts)}[-:-:-]"

    def profile(self, user, width: int) -> tuple[str, int]:
        """Return the profile text of ``user`` and the rows it takes."""
        padding = self.settings.appearance.user_profile_padding_x
        inner = width - padding * 2

        desc, rows = self.user_bio(_attr(user, "description", default="") or "", inner)
        profile = self.user_info(user, -1, inner) + desc + "\n"

        if not (_attr(user, "location", default="") or _attr(user, "url", default="")):
            return profile, rows + 1
        return profile + self.user_detail(user), rows + 2