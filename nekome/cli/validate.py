"""Positional argument validators for commands."""

from __future__ import annotations

from typing import Callable

from .flags import CliError

Validator = Callable[[object, list], None]


def no_args() -> Validator:
    """Accept no positional arguments."""

    def validate(command, args) -> None:
        if args:
            raise CliError(f"unknown command {args[0]} for {command.name}")

    return validate


def require_args(n: int) -> Validator:
    """Accept exactly ``n`` positional arguments."""

    def validate(command, args) -> None:
        if len(args) != n:
            raise CliError(f"accepts {n} arg(s), received {len(args)}")

    return validate


def range_args(minimum: int, maximum: int) -> Validator:
    """Accept between ``minimum`` and ``maximum`` positional arguments."""

    def validate(command, args) -> None:
        if not minimum <= len(args) <= maximum:
            raise CliError(
                f"accepts between {minimum} and {maximum} arg(s), received {len(args)}"
            )

    return validate