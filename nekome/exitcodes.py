"""Process exit codes and helpers that print a message and terminate."""

from __future__ import annotations

import sys
from enum import IntEnum


class ExitCode(IntEnum):
    """Exit status of the application."""

    OK = 0
    ERR_INIT = 1
    ERR_APP = 2
    ERR_FILE_IO = 3


def exit_with_message(message: str) -> None:
    """Print ``message`` to stdout and exit successfully."""
    print(message)
    sys.exit(int(ExitCode.OK))


def error_exit(message: str, code: ExitCode) -> None:
    """Print ``message`` to stderr and exit with ``code``."""
    print(message, file=sys.stderr)
    sys.exit(int(code))