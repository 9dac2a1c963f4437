"""Secret store backends used to publish repository secrets."""

from __future__ import annotations

import logging
import shutil
import subprocess
from typing import Protocol, runtime_checkable

from .errors import CliNotFoundError, NotAuthenticatedError, SecretStoreError

LOG = logging.getLogger(__name__)

GH_INSTALL_URL = "https://cli.github.com/manual/installation"


@runtime_checkable
class SecretStore(Protocol):
    """Protocol implemented by secret store backends."""

    def preflight(self) -> str | None:
        """Check the store is usable; return a banner describing it, if any."""

    def set(self, name: str, value: str) -> None:
        """Create or overwrite the named secret."""


class GitHubCliSecretStore:
    """Secret store that shells out to the GitHub CLI."""

    def __init__(self, *, executable: str = "gh", repo: str | None = None) -> None:
        self._executable = executable
        self._repo = repo

    @property
    def repo(self) -> str | None:
        return self._repo

    def preflight(self) -> str:
        if shutil.which(self._executable) is None:
            raise CliNotFoundError(
                "GitHub CLI not found. Please install it first.",
                GH_INSTALL_URL,
            )
        version = self._run(["--version"], check=False)
        status = self._run(["auth", "status"], check=False)
        if status.returncode != 0:
            raise NotAuthenticatedError(
                "Not authenticated with GitHub.",
                f"{self._executable} auth login",
            )
        return version.stdout.strip().splitlines()[0] if version.stdout.strip() else self._executable

    def set(self, name: str, value: str) -> None:
        args = ["secret", "set", name, "--body", value]
        if self._repo:
            args.extend(["--repo", self._repo])
        try:
            self._run(args, check=True)
        except subprocess.CalledProcessError as exc:
            detail = (exc.stderr or "").strip() or f"exit status {exc.returncode}"
            raise SecretStoreError(name, detail) from exc
        except OSError as exc:
            raise SecretStoreError(name, str(exc)) from exc

    def _run(self, args: list[str], *, check: bool) -> subprocess.CompletedProcess[str]:
        cmd = [self._executable, *args]
        LOG.debug("$ %s", " ".join(_redact(cmd)))
        return subprocess.run(cmd, check=check, text=True, capture_output=True)


class InMemorySecretStore:
    """Stub store that records secrets instead of publishing them."""

    def __init__(self) -> None:
        self._secrets: dict[str, str] = {}

    @property
    def secrets(self) -> dict[str, str]:
        """Copy of the recorded secrets in insertion order."""

        return dict(self._secrets)

    def preflight(self) -> None:
        return None

    def set(self, name: str, value: str) -> None:
        LOG.debug("Recording secret %s (dry run)", name)
        self._secrets[name] = value


def _redact(cmd: list[str]) -> list[str]:
    redacted = list(cmd)
    for index, part in enumerate(redacted[:-1]):
        if part == "--body":
            redacted[index + 1] = "***"
    return redacted


__all__ = [
    "GH_INSTALL_URL",
    "GitHubCliSecretStore",
    "InMemorySecretStore",
    "SecretStore",
]
