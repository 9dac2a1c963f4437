"""Operator prompts backed by rich."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from rich.console import Console
from rich.prompt import Confirm, Prompt


@runtime_checkable
class Prompter(Protocol):
    """Protocol for reading operator input."""

    def ask(self, label: str, *, secret: bool = False) -> str:
        """Return the operator's answer; hidden input when ``secret``."""

    def confirm(self, label: str) -> bool:
        """Ask a yes/no question defaulting to no."""


class ConsolePrompter:
    """Prompter reading from the terminal through a rich console."""

    def __init__(self, console: Console) -> None:
        self._console = console

    def ask(self, label: str, *, secret: bool = False) -> str:
        # Closed stdin reads as an empty answer.
        try:
            answer = Prompt.ask(
                label,
                console=self._console,
                password=secret,
                default="",
                show_default=False,
            )
        except EOFError:
            self._console.print()
            return ""
        return answer.strip()

    def confirm(self, label: str) -> bool:
        try:
            return Confirm.ask(label, console=self._console, default=False)
        except EOFError:
            self._console.print()
            return False


class FixedAnswerPrompter:
    """Wrap a prompter, answering confirmations with a preset value."""

    def __init__(self, inner: Prompter, *, confirm_answer: bool) -> None:
        self._inner = inner
        self._confirm_answer = confirm_answer

    def ask(self, label: str, *, secret: bool = False) -> str:
        return self._inner.ask(label, secret=secret)

    def confirm(self, label: str) -> bool:
        return self._confirm_answer


__all__ = ["ConsolePrompter", "FixedAnswerPrompter", "Prompter"]
