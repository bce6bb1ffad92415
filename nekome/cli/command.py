"""Command tree with sub-command lookup, flag parsing and help text."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Iterator, Optional

from .flags import CliError, FlagSet


@dataclass(eq=False)
class Command:
    """A command with optional sub-commands."""

    name: str
    shorthand: str = ""
    short: str = ""
    long: str = ""
    usage_args: str = ""
    example: str = ""
    hidden: bool = False
    validate: Optional[Callable[["Command", list], None]] = None
    set_flag: Optional[Callable[[FlagSet], None]] = None
    run: Optional[Callable[["Command", FlagSet], object]] = None
    help: Optional[Callable[["Command", str], None]] = None
    _children: Optional[dict] = field(default=None, init=False, repr=False)

    def add_command(self, *args: "Command") -> None:
        """Register sub-commands, replacing any of the same name."""
        if self._children is None:
            self._children = {}
        for command in args:
            self._children[command.name] = command

    def visible_children(self) -> list["Command"]:
        """Return the non-hidden sub-commands sorted by name."""
        if not self._children:
            return []
        return sorted(
            (c for c in self._children.values() if not c.hidden), key=lambda c: c.name
        )

    def child_names(self, all_levels: bool) -> list[str]:
        """Return sub-command names, optionally with every nested combination."""
        names = []
        for child in self.visible_children():
            names.append(child.name)
            if all_levels:
                names.extend(_combinations(child.name, child))
        return names

    def new_flag_set(self) -> FlagSet:
        """Create a fresh flag set for this command, including ``--help``."""
        flags = FlagSet(self.name)
        if self.set_flag is not None:
            self.set_flag(flags)
        flags.add_bool("help", "h", False, f"help for {self.name}")
        return flags

    def execute(self, args):
        """Find the target command in ``args``, parse its flags and run it."""
        args = list(args)
        if not args:
            raise CliError("no argument")
        command = self
        if not args[0].startswith("-"):
            found, args = _find(self, args)
            if found is None:
                raise CliError(f"command not found: {args[0]}")
            command = found

        flags = command.new_flag_set()
        flags.parse(args)

        if flags.get("help"):
            self._show_help(command)
            return None
        if command.validate is not None:
            command.validate(command, flags.args())
        if command.run is None:
            self._show_help(command)
            return None
        return command.run(command, flags)

    def help_text(self) -> str:
        """Build the help text for this command."""
        gap = "\n\n"
        desc = (self.long or self.short) + gap

        usage = f"Usage:\n  {self.name} [flags]"
        if self.usage_args:
            usage += " " + self.usage_args
        if self._children is not None:
            usage += " [command]"
        usage += gap

        alias = f"Shorthand:\n  {self.shorthand}{gap}" if self.shorthand else ""
        example = f"Example:\n  {self.example}{gap}" if self.example else ""

        commands = ""
        children = self.visible_children()
        if children:
            width = max(len(c.name) for c in children)
            lines = "".join(
                f"  {c.name}{' ' * (width - len(c.name) + 3)}{c.short}\n" for c in children
            )
            commands = f"Commands:\n{lines}\n"

        flags = f"Flags:\n{self.new_flag_set().usages()}"
        return desc + usage + alias + example + commands + flags

    def _show_help(self, command: "Command") -> None:
        text = command.help_text()
        if self.help is not None:
            self.help(command, text)
        else:
            print(text, end="")


def _combinations(prefix: str, parent: Command) -> Iterator[str]:
    for child in parent.visible_children():
        path = f"{prefix} {child.name}"
        yield path
        if child._children is not None:
            yield from _combinations(path, child)


def _find(command: Command, args: list[str]) -> tuple[Optional[Command], list[str]]:
    if args[0].startswith("-"):
        return command, args
    for child in command.visible_children():
        if args[0] not in (child.name, child.shorthand):
            continue
        if child._children is None or len(args) <= 1:
            return child, args[1:]
        return _find(child, args[1:])
    return None, args