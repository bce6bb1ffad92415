"""A small POSIX-style flag parser with long and short options."""

from __future__ import annotations

import csv
import json
from dataclasses import dataclass, field
from enum import Enum


class CliError(Exception):
    """Raised when a command line cannot be executed."""


class FlagError(CliError):
    """Raised for malformed, unknown or misdefined flags."""


class _Kind(Enum):
    BOOL = ""
    STRING = "string"
    STRING_LIST = "strings"


_BOOL_WORDS = {
    "1": True, "t": True, "T": True, "TRUE": True, "true": True, "True": True,
    "0": False, "f": False, "F": False, "FALSE": False, "false": False, "False": False,
}


def _read_csv(value: str) -> list[str]:
    if value == "":
        return []
    return next(csv.reader([value]))


@dataclass
class _Flag:
    name: str
    shorthand: str
    kind: _Kind
    default: object
    usage: str
    value: object = None
    changed: bool = False

    def display_name(self) -> str:
        if self.shorthand:
            return f"-{self.shorthand}, --{self.name}"
        return f"--{self.name}"

    def set(self, raw: str) -> None:
        if self.kind is _Kind.BOOL:
            if raw not in _BOOL_WORDS:
                raise FlagError(
                    f'invalid argument "{raw}" for "{self.display_name()}" flag: '
                    f'parsing "{raw}": invalid syntax'
                )
            self.value = _BOOL_WORDS[raw]
        elif self.kind is _Kind.STRING:
            self.value = raw
        else:
            items = _read_csv(raw)
            self.value = items if not self.changed else [*self.value, *items]
        self.changed = True

    def split_usage(self) -> tuple[str, str]:
        """Return the value placeholder and the usage text."""
        start = self.usage.find("`")
        if start != -1:
            end = self.usage.find("`", start + 1)
            if end != -1:
                name = self.usage[start + 1:end]
                return name, self.usage[:start] + name + self.usage[end + 1:]
        return self.kind.value, self.usage

    def default_suffix(self) -> str:
        if self.kind is _Kind.BOOL:
            return " (default true)" if self.default else ""
        if self.kind is _Kind.STRING:
            return f" (default {json.dumps(self.default, ensure_ascii=False)})" if self.default else ""
        return f" (default [{','.join(self.default)}])" if self.default else ""


@dataclass
class FlagSet:
    """A named set of flags and the positional arguments left after parsing."""

    name: str
    _flags: dict[str, _Flag] = field(default_factory=dict, init=False, repr=False)
    _shorthands: dict[str, _Flag] = field(default_factory=dict, init=False, repr=False)
    _args: list[str] = field(default_factory=list, init=False, repr=False)

    def __init__(self, name: str) -> None:
        self.name = name
        self._flags = {}
        self._shorthands = {}
        self._args = []

    def _add(self, name: str, shorthand: str, kind: _Kind, default: object, usage: str) -> None:
        if name in self._flags:
            raise FlagError(f"{self.name} flag redefined: {name}")
        if shorthand:
            if len(shorthand) > 1:
                raise FlagError(f"{shorthand!r} shorthand is more than one ASCII character")
            if shorthand in self._shorthands:
                used = self._shorthands[shorthand].name
                raise FlagError(
                    f"unable to redefine {shorthand!r} shorthand in {self.name!r} "
                    f"flagset: it's already used for {used!r} flag"
                )
        value = list(default) if kind is _Kind.STRING_LIST else default
        flag = _Flag(name, shorthand, kind, value, usage, value=value)
        if kind is _Kind.STRING_LIST:
            flag.value = list(value)
        self._flags[name] = flag
        if shorthand:
            self._shorthands[shorthand] = flag

    def add_bool(self, name: str, shorthand: str = "", default: bool = False, usage: str = "") -> None:
        """Define a boolean flag."""
        self._add(name, shorthand, _Kind.BOOL, bool(default), usage)

    def add_string(self, name: str, shorthand: str = "", default: str = "", usage: str = "") -> None:
        """Define a string flag."""
        self._add(name, shorthand, _Kind.STRING, default, usage)

    def add_string_list(self, name: str, shorthand: str = "", default=None, usage: str = "") -> None:
        """Define a comma separated, repeatable string list flag."""
        self._add(name, shorthand, _Kind.STRING_LIST, list(default or []), usage)

    def parse(self, args) -> None:
        """Parse ``args``, setting flags and collecting positional arguments."""
        pending = list(args)
        self._args = []
        while pending:
            current = pending.pop(0)
            if len(current) < 2 or not current.startswith("-"):
                self._args.append(current)
                continue
            if current == "--":
                self._args.extend(pending)
                return
            if current.startswith("--"):
                self._parse_long(current, pending)
            else:
                self._parse_short(current, pending)

    def _parse_long(self, current: str, pending: list[str]) -> None:
        body = current[2:]
        if not body or body[0] in "-=":
            raise FlagError(f"bad flag syntax: {current}")
        name, has_value, value = body.partition("=")
        flag = self._flags.get(name)
        if flag is None:
            raise FlagError(f"unknown flag: --{name}")
        if has_value:
            flag.set(value)
        elif flag.kind is _Kind.BOOL:
            flag.set("true")
        elif pending:
            flag.set(pending.pop(0))
        else:
            raise FlagError(f"flag needs an argument: {current}")

    def _parse_short(self, current: str, pending: list[str]) -> None:
        shorthands = current[1:]
        while shorthands:
            char = shorthands[0]
            flag = self._shorthands.get(char)
            if flag is None:
                raise FlagError(f"unknown shorthand flag: '{char}' in -{shorthands}")
            if len(shorthands) > 2 and shorthands[1] == "=":
                flag.set(shorthands[2:])
                return
            if flag.kind is _Kind.BOOL:
                flag.set("true")
                shorthands = shorthands[1:]
            elif len(shorthands) > 1:
                flag.set(shorthands[1:])
                return
            elif pending:
                flag.set(pending.pop(0))
                return
            else:
                raise FlagError(f"flag needs an argument: '{char}' in -{shorthands}")

    def _lookup(self, name: str) -> _Flag:
        try:
            return self._flags[name]
        except KeyError:
            raise FlagError(f"flag accessed but not defined: {name}") from None

    def get(self, name: str):
        """Return the current value of the flag ``name``."""
        value = self._lookup(name).value
        return list(value) if isinstance(value, list) else value

    def changed(self, name: str) -> bool:
        """Whether the flag ``name`` was set on the command line."""
        flag = self._flags.get(name)
        return flag is not None and flag.changed

    def arg(self, index: int) -> str:
        """Return the positional argument at ``index``, or an empty string."""
        if 0 <= index < len(self._args):
            return self._args[index]
        return ""

    def args(self) -> list[str]:
        """Return the positional arguments."""
        return list(self._args)

    def usages(self) -> str:
        """Return an aligned usage listing of all flags, sorted by name."""
        rows = []
        for flag in sorted(self._flags.values(), key=lambda f: f.name):
            head = f"  -{flag.shorthand}, --{flag.name}" if flag.shorthand else f"      --{flag.name}"
            varname, usage = flag.split_usage()
            if varname:
                head += " " + varname
            rows.append((head, usage + flag.default_suffix()))
        if not rows:
            return ""
        width = max(len(head) for head, _ in rows) + 3
        indent = "\n" + " " * width
        return "".join(f"{head.ljust(width)}{text.replace(chr(10), indent)}\n" for head, text in rows)