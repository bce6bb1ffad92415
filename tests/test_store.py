import pytest

from nekome.api.models import Token, User
from nekome.config.settings import Settings
from nekome.config.store import Config, ConfigError, config_dir, config_file_names


def test_load_cred_missing(tmp_path):
    assert Config(tmp_path).load_cred() is False


def test_settings_created_with_defaults(tmp_path):
    c = Config(tmp_path)
    c.load_settings()
    assert (tmp_path / "settings.yml").exists()
    assert c.settings == Settings()


def test_style_created(tmp_path):
    c = Config(tmp_path)
    c.load_settings()
    c.load_style()
    assert "default.yml" in config_file_names(tmp_path)


def test_save_and_load_round_trip(tmp_path):
    c = Config(tmp_path)
    c.cred.write(User("neko", "1", Token("token", "secret")))
    c.settings.feature.main_user = "neko"
    c.save_all()
    d = Config(tmp_path)
    assert d.load_cred() is True
    d.load_settings()
    assert d.cred.get("neko") == c.cred.get("neko")
    assert d.settings == c.settings


def test_bad_yaml(tmp_path):
    (tmp_path / "settings.yml").write_text("feature: [unclosed", encoding="utf-8")
    with pytest.raises(ConfigError, match="failed to unmarshal"):
        Config(tmp_path).load_settings()


def test_config_dir_created(tmp_path, monkeypatch):
    monkeypatch.setenv("HOME", str(tmp_path))
    path = config_dir()
    assert path == tmp_path / ".config" / "nekome"
    assert path.is_dir()