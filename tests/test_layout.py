from types import SimpleNamespace as NS

import pytest

from nekome.app.layout import Layout, create_tweet_tag, highlight_hashtags
from nekome.app.util import create_metrics_string, highlight_id
from nekome.config.settings import Settings
from nekome.config.style import Style


@pytest.fixture
def layout():
    return Layout(Settings(), Style())


def make_user(**kw):
    base = dict(id="1", name="Neko", user_name="neko", verified=False, protected=False,
                description="", location="", url="")
    base.update(kw)
    return NS(**base)


def make_tweet(text="hello", entities=None, likes=0, retweets=0):
    return NS(id="10", text=text, entities=entities, source="cli",
              created_at="2018-04-24T00:00:00Z",
              public_metrics=NS(likes=likes, retweets=retweets))


def strip(text, style):
    return text.replace(f"[{style}]", "").replace("[-:-:-]", "")


def test_create_tweet_tag():
    assert create_tweet_tag(3) == "tweet_3"
    assert highlight_id([create_tweet_tag(42)]) == 42


def test_highlight_hashtags_exact_position():
    text = "hello #go world\n"
    entities = NS(hash_tags=[NS(start=6, end=9, tag="go")])
    result = highlight_hashtags(text, entities, "S")
    assert "[S]#go[-:-:-]" in result
    assert strip(result, "S") == text


def test_highlight_hashtags_shifted_position():
    text = "see #cat and #dog\n"
    entities = NS(hash_tags=[NS(start=6, end=9, tag="cat"), NS(start=16, end=19, tag="dog")])
    result = highlight_hashtags(text, entities, "S")
    assert result.count("[S]#") == 2
    assert strip(result, "S") == text


def test_tweet_text_unescapes_and_normalises(layout):
    assert layout.tweet_text(make_tweet("a &amp; b ＃x", None)) == "a & b #x\n"


def test_tweet_text_mentions(layout):
    entities = NS(hash_tags=[], mentions=[NS(start=3, end=7, username="bob")])
    result = layout.tweet_text(make_tweet("hi @bob and me@example.com", entities))
    assert f"[{layout.style.tweet.mention}]@bob[-:-:-]" in result
    assert "me@example.com" in result


def test_user_info_tags_and_icons(layout):
    user = make_user(verified=True, protected=True)
    info = layout.user_info(user, 2, 80)
    assert f'["{create_tweet_tag(2)}"]' in info
    assert layout.settings.icon.verified in info
    assert layout.settings.icon.private in info
    assert info.endswith("\n")
    plain = layout.user_info(make_user(), -1, 80)
    assert "tweet_" not in plain
    assert layout.settings.icon.verified not in plain


def test_poll_empty(layout):
    assert layout.poll([], 80) == ""


def test_poll_respects_width(layout):
    poll = NS(options=[NS(label="yes", votes=7)], voting_status="closed",
              end_date_time="2018-04-24T00:00:00Z")
    text = layout.poll([poll], 5)
    assert text.count(layout.settings.appearance.graph_char) == 5
    assert "7 votes" in text
    assert "(7)" in text
    assert "closed" in text


def test_poll_zero_votes(layout):
    poll = NS(options=[NS(label="a", votes=0), NS(label="b", votes=0)],
              voting_status="open", end_date_time="2018-04-24T00:00:00Z")
    text = layout.poll([poll], 80)
    assert layout.settings.appearance.graph_char not in text
    assert text.count("0.0%") == 2


def test_tweet_detail_without_metrics(layout):
    detail = layout.tweet_detail(make_tweet())
    assert "via cli" in detail
    assert "\n" not in detail


def test_tweet_detail_with_metrics(layout):
    detail = layout.tweet_detail(make_tweet(likes=2, retweets=1))
    texts, style = layout.settings.texts, layout.style.tweet
    assert create_metrics_string(texts.like, style.like, 2, False) in detail
    assert create_metrics_string(texts.retweet, style.rt, 1, False) in detail


def test_tweet_joins_parts(layout):
    d = NS(tweet=make_tweet(), author=make_user(), attachment_polls=[])
    text = layout.tweet(d, 0, 80)
    assert text.startswith(layout.user_info(d.author, 0, 80))
    assert text.endswith(layout.tweet_detail(d.tweet))


def test_user_bio(layout):
    desc, rows = layout.user_bio("a\nb", 10)
    assert desc == "a b"
    assert rows == 1
    long_desc, long_rows = layout.user_bio("x" * 100, 10)
    assert long_desc.endswith("…")
    assert long_rows == layout.settings.appearance.user_bio_max_row


def test_user_detail(layout):
    detail = layout.user_detail(make_user(location="Tokyo", url="https://example.com"))
    icons = layout.settings.icon
    assert f"{icons.geo} Tokyo | {icons.link} https://example.com" in detail


def test_profile_rows(layout):
    width = 40
    inner = width - 2 * layout.settings.appearance.user_profile_padding_x
    user = make_user(description="bio")
    _, bio_rows = layout.user_bio("bio", inner)
    text, rows = layout.profile(user, width)
    assert rows == bio_rows + 1
    detailed = make_user(description="bio", location="Tokyo")
    text2, rows2 = layout.profile(detailed, width)
    assert rows2 == bio_rows + 2
    assert text2.endswith(layout.user_detail(detailed))