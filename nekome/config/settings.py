"""Application settings and their defaults."""

from __future__ import annotations

from dataclasses import dataclass, field, fields
from typing import Any, Mapping

from ..api.models import Token


def _default_confirm() -> dict[str, bool]:
    names = (
        "Like", "Unlike", "Retweet", "Unretweet", "Delete", "Follow", "Unfollow",
        "Block", "Unblock", "Mute", "Unmute", "Tweet", "Quit",
    )
    return {name: True for name in names}


@dataclass
class Feature:
    """Behaviour of the application."""

    consumer: Token = field(default_factory=Token)
    main_user: str = ""
    load_tweets_count: int = 25
    tweet_max_accumulation_num: int = 250
    use_tweet_when_ex_editor: bool = False
    is_locale_cjk: bool = True
    confirm: dict[str, bool] = field(default_factory=_default_confirm)
    startup: list[str] = field(default_factory=lambda: ["home", "mention --unfocus"])


@dataclass
class Appearance:
    """Look of the interface."""

    style_file: str = "default.yml"
    date_format: str = "2006/01/02"
    time_format: str = "15:04:05"
    user_bio_max_row: int = 3
    user_profile_padding_x: int = 4
    graph_char: str = "\u2588"
    graph_max_width: int = 30
    tab_separate: str = "|"
    tab_max_width: int = 20


@dataclass
class Texts:
    """Texts shown in the interface."""

    like: str = "Like"
    retweet: str = "RT"
    loading: str = "Loading..."
    no_tweets: str = "No tweets ฅ^-ω-^ฅ"
    tab_home: str = "Home"
    tab_mention: str = "Mention"
    tab_list: str = "List: {name}"
    tab_user: str = "User: @{name}"
    tab_search: str = "Search: {query}"
    tab_docs: str = "Docs: {name}"


@dataclass
class Icons:
    """Icons shown in the interface."""

    geo: str = "📍"
    link: str = "🔗"
    pinned: str = "📌"
    verified: str = "✅"
    private: str = "🔒"


def _key(name: str) -> str:
    return name.replace("_", "")


def _section_to_dict(section) -> dict[str, Any]:
    result: dict[str, Any] = {}
    for f in fields(section):
        value = getattr(section, f.name)
        if isinstance(value, Token):
            value = {"token": value.token, "tokensecret": value.token_secret}
        elif isinstance(value, (dict, list)):
            value = type(value)(value)
        result[_key(f.name)] = value
    return result


def _section_from_dict(cls, data: Any):
    section = cls()
    if not isinstance(data, Mapping):
        return section
    for f in fields(section):
        key = _key(f.name)
        if key not in data or data[key] is None:
            continue
        value = data[key]
        current = getattr(section, f.name)
        if isinstance(current, Token):
            value = Token(
                str(value.get("token", "") or ""), str(value.get("tokensecret", "") or "")
            ) if isinstance(value, Mapping) else current
        elif isinstance(current, dict):
            value = {**current, **{str(k): bool(v) for k, v in dict(value).items()}}
        elif isinstance(current, list):
            value = [str(v) for v in value]
        setattr(section, f.name, value)
    return section


@dataclass
class Settings:
    """All application settings."""

    feature: Feature = field(default_factory=Feature)
    appearance: Appearance = field(default_factory=Appearance)
    texts: Texts = field(default_factory=Texts)
    icon: Icons = field(default_factory=Icons)

    def to_dict(self) -> dict[str, Any]:
        """Return the settings as plain data for the settings file."""
        return {
            "feature": _section_to_dict(self.feature),
            "appearance": _section_to_dict(self.appearance),
            "texts": _section_to_dict(self.texts),
            "icon": _section_to_dict(self.icon),
        }

    @classmethod
    def from_dict(cls, data: Any) -> "Settings":
        """Build settings from plain data; missing values keep their defaults."""
        data = data if isinstance(data, Mapping) else {}
        return cls(
            feature=_section_from_dict(Feature, data.get("feature")),
            appearance=_section_from_dict(Appearance, data.get("appearance")),
            texts=_section_from_dict(Texts, data.get("texts")),
            icon=_section_from_dict(Icons, data.get("icon")),
        )