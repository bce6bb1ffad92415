"""Helpers for formatting, parsing and running an editor."""

from __future__ import annotations

import csv
import hashlib
import html
import math
import re
import shutil
import subprocess
from datetime import date, datetime, timezone
from typing import Callable, Iterable, Optional, Sequence

from wcwidth import wcwidth

_NUMBER = re.compile(r"[+-]?[0-9]+")


def run_editor(editor: str, *args: str) -> None:
    """Run ``editor`` with ``args`` attached to the terminal."""
    if not editor:
        raise ValueError("please specify which editor to use")
    try:
        subprocess.run([editor, *args], check=True)
    except (OSError, subprocess.CalledProcessError) as exc:
        raise RuntimeError(f"failed to open editor ({editor}) : {exc}") from exc


def window_width() -> int:
    """Return the usable terminal width."""
    return shutil.get_terminal_size().columns - 2


def get_md5(s: str) -> str:
    """Return the hex MD5 digest of ``s``."""
    return hashlib.md5(s.encode("utf-8")).hexdigest()


def _width(s: str) -> int:
    return sum(max(wcwidth(ch), 0) for ch in s)


def display_rows(s: str, width: int) -> int:
    """Number of rows ``s`` takes when wrapped at ``width`` columns."""
    return math.ceil(_width(s) / width)


def highlight_id(ids: Optional[Sequence[str]]) -> int:
    """Return the number after ``_`` in the first highlight ID, or -1."""
    if not ids:
        return -1
    _, sep, rest = ids[0].partition("_")
    if not sep or not _NUMBER.fullmatch(rest):
        return -1
    return int(rest)


def find(items: Iterable, predicate: Callable[[object], bool]) -> tuple[int, bool]:
    """Return the index of the first item matching ``predicate`` and whether it was found."""
    for index, item in enumerate(items):
        if predicate(item):
            return index, True
    return -1, False


def truncate(s: str, width: int) -> str:
    """Cut ``s`` to ``width`` columns, ending with an ellipsis when cut."""
    if _width(s) <= width:
        return s
    tail = "…"
    limit = width - _width(tail)
    used = 0
    out = []
    for ch in s:
        w = max(wcwidth(ch), 0)
        if used + w > limit:
            break
        used += w
        out.append(ch)
    return "".join(out) + tail


def trim_end_newline(s: str) -> str:
    """Remove trailing newlines and carriage returns."""
    s = s.rstrip("\n")
    if s.endswith("\r"):
        s = s.rstrip("\r")
    return s


def split_command(s: str) -> list[str]:
    """Split on spaces, keeping double-quoted parts together."""
    for row in csv.reader([s], delimiter=" "):
        return row
    raise ValueError("EOF")


def _local(moment: datetime) -> datetime:
    return moment.astimezone() if moment.tzinfo is not None else moment


def is_same_date(moment: datetime) -> bool:
    """Whether ``moment`` falls on today's local date."""
    return _local(moment).date() == date.today()


_GO_TOKENS = [
    ("January", "%B"), ("Monday", "%A"), ("-0700", "%z"), ("2006", "%Y"),
    ("Jan", "%b"), ("Mon", "%a"), ("MST", "%Z"), ("PM", "%p"),
    ("01", "%m"), ("02", "%d"), ("03", "%I"), ("04", "%M"), ("05", "%S"),
    ("06", "%y"), ("15", "%H"),
]


def go_layout_to_strftime(layout: str) -> str:
    """Convert a reference-time layout such as ``2006/01/02`` to strftime form."""
    out = []
    i = 0
    while i < len(layout):
        for token, directive in _GO_TOKENS:
            if layout.startswith(token, i):
                out.append(directive)
                i += len(token)
                break
        else:
            ch = layout[i]
            out.append("%%" if ch == "%" else ch)
            i += 1
    return "".join(out)


def _parse_rfc3339(text: str) -> datetime:
    try:
        value = text[:-1] + "+00:00" if text.endswith(("Z", "z")) else text
        parsed = datetime.fromisoformat(value)
        if parsed.tzinfo is None:
            raise ValueError(text)
        return parsed
    except ValueError:
        return datetime(1, 1, 1, tzinfo=timezone.utc)


def convert_date_string(created_at: str, date_format: str, time_format: str) -> str:
    """Format a timestamp locally: time only for today, date and time otherwise."""
    moment = _parse_rfc3339(created_at)
    try:
        moment = moment.astimezone()
    except (OverflowError, ValueError):
        pass
    layout = time_format if is_same_date(moment) else f"{date_format} {time_format}"
    return moment.strftime(go_layout_to_strftime(layout))


def create_separator(char: str, width: int, style: str) -> str:
    """Return a styled separator ``width`` characters long."""
    return f"[{style}]{char * width}[-:-:-]"


def create_metrics_string(unit: str, style: str, count: int, reverse: bool) -> str:
    """Return a styled reaction count, pluralising the unit."""
    if count <= 0:
        return ""
    if count > 1:
        unit += "s"
    if reverse:
        return f"[{style}] {count}{unit} [-:-:-]"
    return f"[{style}]{count}{unit}[-:-:-] "


def create_user_summary(user) -> str:
    """Return ``Name @user_name``."""
    return f"{user.name} @{user.user_name}"


def create_tweet_summary(tweet) -> str:
    """Return the author summary followed by the unescaped tweet text."""
    return f"{create_user_summary(tweet.author)} | {html.unescape(tweet.tweet.text)}"


def create_tweet_url(tweet) -> str:
    """Return the web URL of a tweet."""
    return f"https://twitter.com/{tweet.author.user_name}/status/{tweet.tweet.id}"


def create_status_message(label: str, status: str, width: int) -> str:
    """Return a labelled one-line status message cut to ``width``."""
    status = status.replace("\n", " ")
    return truncate(f"[{label}] {status}", width)