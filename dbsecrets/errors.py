"""Exception hierarchy for dbsecrets."""

from __future__ import annotations


class DbSecretsError(RuntimeError):
    """Base class for errors that end a run with a message."""

    exit_code = 1


class ConfigError(DbSecretsError):
    """Raised when the configuration file cannot be read or parsed."""

    exit_code = 2


class PreflightError(DbSecretsError):
    """Raised when a prerequisite for publishing secrets is missing."""

    def __init__(self, message: str, remediation: str) -> None:
        super().__init__(message)
        self.remediation = remediation


class CliNotFoundError(PreflightError):
    """The secret-management CLI is not installed."""


class NotAuthenticatedError(PreflightError):
    """The secret-management CLI is installed but not logged in."""


class MissingCredentialsError(DbSecretsError):
    """Raised when a required primary credential was left empty."""

    def __init__(self, missing: tuple[str, ...]) -> None:
        super().__init__(f"Missing required Supabase information: {', '.join(missing)}")
        self.missing = missing


class SecretStoreError(DbSecretsError):
    """Raised when a secret could not be written to the store."""

    def __init__(self, name: str, detail: str) -> None:
        super().__init__(f"Failed to set secret '{name}': {detail}")
        self.name = name


class VerificationError(DbSecretsError):
    """Raised when a derived connection string cannot be reached."""


__all__ = [
    "CliNotFoundError",
    "ConfigError",
    "DbSecretsError",
    "MissingCredentialsError",
    "NotAuthenticatedError",
    "PreflightError",
    "SecretStoreError",
    "VerificationError",
]
