"""Colour style of the interface."""

from __future__ import annotations

from dataclasses import dataclass, field, fields
from typing import Any, Mapping


def hex_to_color(value: str) -> int:
    """Convert ``#rrggbb`` to an integer colour; invalid input gives 0."""
    text = str(value).replace("#", "", 1)
    try:
        number = int(text, 16)
    except ValueError:
        return 0
    if "_" in text or text.strip() != text:
        return 0
    return max(min(number, 2**31 - 1), -(2**31))


@dataclass
class AppStyle:
    tab: str = "-:-:-"
    separator: str = "gray:-:-"


@dataclass
class StatusBarStyle:
    text: str = "black:-:-"
    bg: str = "#ffffff"


@dataclass
class AutocompleteStyle:
    normal_bg: str = "#3e4359"
    select_bg: str = "#5c6586"


@dataclass
class TweetStyle:
    annotation: str = "blue:-:-"
    detail: str = "gray:-:-"
    like: str = "pink:-:-"
    rt: str = "green:-:-"
    hash_tag: str = "blue:-:-"
    mention: str = "blue:-:-"
    poll_graph: str = "blue:-:-"
    poll_detail: str = "gray:-:-"


@dataclass
class UserStyle:
    name: str = "white:-:b"
    user_name: str = "gray:-:i"
    verified: str = "blue:-:-"
    private: str = "gray:-:-"
    detail: str = "gray:-:-"
    tweets_metrics_text: str = "black:-:-"
    tweets_metrics_bg: str = "#a094c7"
    following_metrics_text: str = "black:-:-"
    following_metrics_bg: str = "#84a0c6"
    followers_metrics_text: str = "black:-:-"
    followers_metrics_bg: str = "#89b8c2"


_SECTIONS = {
    "app": AppStyle,
    "statusbar": StatusBarStyle,
    "autocomplete": AutocompleteStyle,
    "tweet": TweetStyle,
    "user": UserStyle,
}


def _key(name: str) -> str:
    return name.replace("_", "")


@dataclass
class Style:
    """All colour settings."""

    app: AppStyle = field(default_factory=AppStyle)
    status_bar: StatusBarStyle = field(default_factory=StatusBarStyle)
    autocomplete: AutocompleteStyle = field(default_factory=AutocompleteStyle)
    tweet: TweetStyle = field(default_factory=TweetStyle)
    user: UserStyle = field(default_factory=UserStyle)

    def to_dict(self) -> dict[str, Any]:
        """Return the style as plain data for the style file."""
        return {
            _key(f.name): {_key(g.name): getattr(getattr(self, f.name), g.name)
                           for g in fields(getattr(self, f.name))}
            for f in fields(self)
        }

    @classmethod
    def from_dict(cls, data: Any) -> "Style":
        """Build a style from plain data; missing values keep their defaults."""
        data = data if isinstance(data, Mapping) else {}
        style = cls()
        for f in fields(style):
            section = getattr(style, f.name)
            values = data.get(_key(f.name))
            if not isinstance(values, Mapping):
                continue
            for g in fields(section):
                value = values.get(_key(g.name))
                if value is not None:
                    setattr(section, g.name, str(value))
        return style