"""Stored account credentials."""

from __future__ import annotations

from dataclasses import replace
from typing import Any, Iterable, Mapping

from ..api.models import Token, User


class CredentialStore:
    """An ordered collection of authenticated accounts."""

    def __init__(self, users: Iterable[User] = ()) -> None:
        self._users: list[User] = list(users)

    def get(self, user_name: str) -> User:
        """Return a copy of the account named ``user_name``."""
        for user in self._users:
            if user.user_name == user_name:
                return replace(user, token=replace(user.token))
        raise LookupError(f"user not found: {user_name}")

    def names(self) -> list[str]:
        """Return all user names in order."""
        return [user.user_name for user in self._users]

    def write(self, user: User) -> None:
        """Add ``user``, replacing an account with the same ID."""
        for i, existing in enumerate(self._users):
            if existing.id == user.id:
                self._users[i] = user
                return
        self._users.append(user)

    def delete(self, user_name: str) -> None:
        """Remove every account named ``user_name``."""
        kept = [u for u in self._users if u.user_name != user_name]
        if len(kept) == len(self._users):
            raise LookupError(f"user not found: {user_name}")
        self._users = kept

    def to_list(self) -> list[dict[str, Any]]:
        """Return the accounts as plain data for the credentials file."""
        return [
            {
                "username": u.user_name,
                "id": u.id,
                "token": {"token": u.token.token, "tokensecret": u.token.token_secret},
            }
            for u in self._users
        ]

    @classmethod
    def from_list(cls, data: Any) -> "CredentialStore":
        """Build a store from plain data."""
        users = []
        for item in data or []:
            if not isinstance(item, Mapping):
                continue
            token = item.get("token") or {}
            users.append(
                User(
                    user_name=str(item.get("username", "") or ""),
                    id=str(item.get("id", "") or ""),
                    token=Token(
                        str(token.get("token", "") or ""),
                        str(token.get("tokensecret", "") or ""),
                    ),
                )
            )
        return cls(users)