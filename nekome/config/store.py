"""Reading and writing the configuration directory."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Optional, Union

import yaml

from .cred import CredentialStore
from .settings import Settings
from .style import Style

CRED_FILE_NAME = ".cred"
SETTINGS_FILE_NAME = "settings.yml"


class ConfigError(Exception):
    """Raised when configuration files cannot be read or written."""


def config_dir() -> Path:
    """Return ``~/.config/nekome``, creating it when missing."""
    try:
        home = Path.home()
    except (RuntimeError, KeyError) as exc:
        raise ConfigError("failed to get home directory") from exc
    directory = home / ".config" / "nekome"
    if not directory.exists():
        try:
            directory.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise ConfigError(f"failed to create config directory: {exc}") from exc
    return directory


def config_file_names(directory: Optional[Union[str, Path]] = None) -> list[str]:
    """Return the sorted names of entries in the configuration directory."""
    path = Path(directory) if directory is not None else config_dir()
    try:
        return sorted(os.listdir(path))
    except OSError as exc:
        raise ConfigError(str(exc)) from exc


class Config:
    """Credentials, settings and style, backed by files in one directory."""

    def __init__(self, directory: Optional[Union[str, Path]] = None) -> None:
        self.directory = Path(directory) if directory is not None else config_dir()
        self.cred = CredentialStore()
        self.settings = Settings()
        self.style = Style()

    def _exists(self, name: str) -> bool:
        return (self.directory / name).exists()

    def _save(self, name: str, data: Any) -> None:
        try:
            text = yaml.safe_dump(data, allow_unicode=True, sort_keys=False)
        except yaml.YAMLError as exc:
            raise ConfigError(f"failed to marshal ({name}): {exc}") from exc
        path = self.directory / name
        try:
            path.write_text(text, encoding="utf-8")
        except OSError as exc:
            raise ConfigError(f"failed to save ({path}): {exc}") from exc

    def _load(self, name: str) -> Any:
        path = self.directory / name
        try:
            text = path.read_text(encoding="utf-8")
        except OSError as exc:
            raise ConfigError(f"failed to load ({path}): {exc}") from exc
        try:
            return yaml.safe_load(text)
        except yaml.YAMLError as exc:
            raise ConfigError(f"failed to unmarshal ({path}): {exc}") from exc

    def load_cred(self) -> bool:
        """Load credentials; ``False`` when there is no credentials file."""
        if not self._exists(CRED_FILE_NAME):
            return False
        self.cred = CredentialStore.from_list(self._load(CRED_FILE_NAME))
        return True

    def load_settings(self) -> None:
        """Load settings, writing the defaults first when the file is missing."""
        if not self._exists(SETTINGS_FILE_NAME):
            self.save_settings()
        self.settings = Settings.from_dict(self._load(SETTINGS_FILE_NAME))

    def load_style(self) -> None:
        """Load the style file named in the settings, writing defaults when missing."""
        name = self.settings.appearance.style_file
        if not self._exists(name):
            self._save(name, self.style.to_dict())
        self.style = Style.from_dict(self._load(name))

    def save_cred(self) -> None:
        """Write the credentials file."""
        self._save(CRED_FILE_NAME, self.cred.to_list())

    def save_settings(self) -> None:
        """Write the settings file."""
        self._save(SETTINGS_FILE_NAME, self.settings.to_dict())

    def save_all(self) -> None:
        """Write credentials and settings."""
        self.save_cred()
        self.save_settings()