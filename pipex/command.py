"""Parsing shell-less command strings and locating their executables."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Iterable, Mapping

from pipex.libstr import split

PATH_KEY = "PATH"


class CommandNotFound(LookupError):
    """No executable could be found for a command."""

    def __init__(self, name: str) -> None:
        super().__init__(f"command not found: {name!r}")
        self.name = name


@dataclass(frozen=True)
class Command:
    """A command split into its argument vector."""

    argv: tuple[str, ...]

    @property
    def name(self) -> str:
        """The program name, or an empty string for an empty command."""
        return self.argv[0] if self.argv else ""


def parse_command(text: str) -> Command:
    """Split a command on spaces, ignoring runs of spaces."""
    return Command(tuple(split(text, " ")))


def search_path(environ: Mapping[str, str]) -> list[str]:
    """Return the search directories from the environment's PATH entry.

    Any variable whose name starts with ``PATH`` is taken; if several do,
    the last one wins. Without one the list is empty.
    """
    directories: list[str] = []
    for key, value in environ.items():
        if key.startswith(PATH_KEY):
            directories = split(value, ":")
    return directories


def resolve_executable(name: str, directories: Iterable[str]) -> str:
    """Find the executable to run for ``name``.

    ``name`` itself is used when it is executable as given; otherwise each
    directory is tried in order. Nothing is found without search directories.
    """
    directories = list(directories)
    if name and directories:
        if os.access(name, os.X_OK):
            return name
        for directory in directories:
            candidate = f"{directory}/{name}"
            if os.access(candidate, os.X_OK):
                return candidate
    raise CommandNotFound(name)