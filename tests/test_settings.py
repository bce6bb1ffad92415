from nekome.api.models import Token
from nekome.config.settings import Settings


def test_defaults_from_source():
    s = Settings()
    assert s.feature.load_tweets_count == 25
    assert s.feature.tweet_max_accumulation_num == 250
    assert s.feature.startup == ["home", "mention --unfocus"]
    assert s.appearance.style_file == "default.yml"
    assert s.texts.tab_list == "List: {name}"
    assert s.feature.confirm["Quit"] is True


def test_round_trip():
    s = Settings()
    s.feature.consumer = Token("token", "secret")
    s.feature.main_user = "neko"
    s.appearance.graph_max_width = 10
    s.feature.confirm["Like"] = False
    assert Settings.from_dict(s.to_dict()) == s


def test_partial_data_keeps_defaults():
    s = Settings.from_dict({"feature": {"mainuser": "cat", "confirm": {"Tweet": False}}})
    assert s.feature.main_user == "cat"
    assert s.feature.confirm["Tweet"] is False
    assert s.feature.confirm["Like"] is True
    assert s.texts == Settings().texts


def test_invalid_data_gives_defaults():
    assert Settings.from_dict(None) == Settings()


def test_defaults_are_independent():
    a = Settings()
    a.feature.startup.append("x")
    assert Settings().feature.startup == ["home", "mention --unfocus"]