"""Console input/output used by the pickers."""

from __future__ import annotations

from collections.abc import Callable

import questionary
from rich.console import Console

from .errors import InputReadError

LineReader = Callable[[str], str]


def get_questionary_style() -> questionary.Style:
    """Consistent questionary styling across all prompts."""
    return questionary.Style(
        [
            ("qmark", "fg:cyan bold"),
            ("question", "bold"),
            ("answer", "fg:cyan"),
        ]
    )


def read_line(prompt: str) -> str:
    """Read a single line from the operator.

    Ctrl-C is left to propagate as ``KeyboardInterrupt`` so the caller can end
    the run; a closed input stream becomes an ``InputReadError``.
    """
    try:
        answer = questionary.text(prompt, qmark="", style=get_questionary_style()).unsafe_ask()
    except EOFError as e:
        raise InputReadError("failed to get user input: end of input") from e
    return answer or ""


class Terminal:
    """Pairs a rich console for output with a line reader for input."""

    def __init__(self, console: Console | None = None, reader: LineReader | None = None) -> None:
        self.console = console or Console()
        self.reader = reader or read_line

    def print_line(self, text: str = "") -> None:
        self.console.print(text, markup=False, highlight=False, soft_wrap=True)

    def read(self, prompt: str) -> str:
        return self.reader(prompt)
