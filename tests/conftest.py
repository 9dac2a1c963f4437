"""Shared fixtures and fakes for the dbsecrets tests."""

from __future__ import annotations

import io
from pathlib import Path
from typing import Callable, Iterable

import pytest
from rich.console import Console

from dbsecrets.config import ScriptConfig
from dbsecrets.errors import PreflightError, SecretStoreError


class ScriptedPrompter:
    """Prompter replaying canned answers in order."""

    def __init__(
        self,
        answers: Iterable[str] = (),
        *,
        confirm: bool = False,
        error: BaseException | None = None,
    ) -> None:
        self._answers = list(answers)
        self._confirm = confirm
        self._error = error
        self.asked: list[tuple[str, bool]] = []
        self.confirmations = 0

    def ask(self, label: str, *, secret: bool = False) -> str:
        self.asked.append((label, secret))
        if self._error is not None:
            raise self._error
        if not self._answers:
            raise AssertionError(f"Unexpected prompt: {label}")
        return self._answers.pop(0)

    def confirm(self, label: str) -> bool:
        self.confirmations += 1
        return self._confirm


class RecordingStore:
    """Secret store double that records calls and can fail on demand."""

    def __init__(
        self,
        *,
        fail_on: str | None = None,
        preflight_error: PreflightError | None = None,
    ) -> None:
        self.calls: list[tuple[str, str]] = []
        self.preflight_calls = 0
        self._fail_on = fail_on
        self._preflight_error = preflight_error

    def preflight(self) -> str | None:
        self.preflight_calls += 1
        if self._preflight_error is not None:
            raise self._preflight_error
        return "gh version 2.0.0"

    def set(self, name: str, value: str) -> None:
        if name == self._fail_on:
            raise SecretStoreError(name, "HTTP 403")
        self.calls.append((name, value))

    @property
    def names(self) -> list[str]:
        return [name for name, _ in self.calls]


PrompterFactory = Callable[..., ScriptedPrompter]
StoreFactory = Callable[..., RecordingStore]


@pytest.fixture
def make_prompter() -> PrompterFactory:
    return ScriptedPrompter


@pytest.fixture
def make_store() -> StoreFactory:
    return RecordingStore


@pytest.fixture
def primary_answers() -> list[str]:
    """Answers to the seven primary prompts, in order."""

    return [
        "abc123",
        "us-west-2",
        "pw1",
        "https://abc123.supabase.co",
        "anon-key",
        "service-key",
        "access-token",
    ]


@pytest.fixture
def console() -> Console:
    return Console(file=io.StringIO(), record=True, width=200, color_system=None)


@pytest.fixture
def script_config(tmp_path: Path) -> ScriptConfig:
    return ScriptConfig(
        project_name="Acme Portal",
        company_name="Acme",
        env_file=tmp_path / ".env.local",
    )
