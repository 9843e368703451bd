"""Locating the program a command line names."""

from __future__ import annotations

import os
from typing import List, Mapping, Optional, Tuple

from .strings import split_words


class CommandNotFoundError(Exception):
    """Raised when a command cannot be resolved to a program."""

    def __init__(self, command: str) -> None:
        self.command = command
        super().__init__(not_found_message(command))


def is_only_space(text: str) -> bool:
    """True when text holds nothing but space characters (or nothing at all)."""
    return all(ch == " " for ch in text)


def contains(text: str, c: str) -> bool:
    """True when the character c occurs in text."""
    return c in text


def find_in_path(command: str, env: Optional[Mapping[str, str]] = None) -> Optional[str]:
    """Return the first PATH directory entry that names an existing file, or None."""
    env = os.environ if env is None else env
    search = env.get("PATH")
    if search is None:
        return None
    for directory in split_words(search, ":"):
        candidate = f"{directory}/{command}"
        if os.path.exists(candidate):
            return candidate
    return None


def resolve_command(arg: str, env: Optional[Mapping[str, str]] = None) -> Tuple[str, List[str]]:
    """Split arg on spaces and find the program to run.

    Returns the program path and the argument list. When the first word
    contains a slash, the whole argument is taken as the path.
    Raises CommandNotFoundError when nothing is found.
    """
    words = split_words(arg, " ")
    if not words:
        raise CommandNotFoundError(arg)
    if contains(words[0], "/"):
        return arg, words
    path = find_in_path(words[0], env)
    if path is None:
        raise CommandNotFoundError(words[0])
    return path, words


def not_found_message(command: str) -> str:
    """The message reported for a command that cannot be run."""
    return f"Error: {command}: command not found"