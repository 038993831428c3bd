"""Numbered menus and selection parsing shared by all pickers."""

from __future__ import annotations

import re
from collections.abc import Sequence

from .errors import ECSExecError, InputReadError, SelectionOutOfRangeError, SelectionParseError
from .terminal import Terminal

DECIMAL_PATTERN = re.compile(r"[+-]?[0-9]+")


def format_menu_line(index: int, label: str) -> str:
    return f"{index} | {label}"


def render_menu(terminal: Terminal, labels: Sequence[str]) -> None:
    """Print one ``index | label`` line per label, in order."""
    for index, label in enumerate(labels):
        terminal.print_line(format_menu_line(index, label))


def parse_selection(raw: str) -> int:
    """Parse operator input as a base-10 integer."""
    text = raw.strip()
    if not DECIMAL_PATTERN.fullmatch(text):
        raise SelectionParseError(f"selection was not a number: {text!r}")
    return int(text)


def check_selection(index: int, count: int) -> int:
    if index < 0 or index >= count:
        raise SelectionOutOfRangeError(index, count)
    return index


def prompt_for_index(terminal: Terminal, prompt: str, count: int) -> int:
    """Read one line and turn it into a valid index into a menu of ``count`` items."""
    terminal.print_line()
    try:
        raw = terminal.read(prompt)
    except ECSExecError:
        raise
    except Exception as e:
        raise InputReadError(f"failed to get user input: {e}") from e
    return check_selection(parse_selection(raw), count)
