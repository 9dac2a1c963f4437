"""Run configuration loading helpers."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Mapping

import tomllib

from pydantic import BaseModel, Field, ValidationError, field_validator

from .errors import ConfigError
from .models import DEFAULT_REGION, ENVIRONMENT_SECRETS

CONFIG_FILE = Path("dbsecrets.toml")
SUPPORTED_PROVIDER = "supabase"

ENV_OVERRIDES: Mapping[str, str] = {
    "DATABASE_PROVIDER": "database_provider",
    "PROJECT_NAME": "project_name",
    "COMPANY_NAME": "company_name",
    "GH_REPO": "repo",
}


class ScriptConfig(BaseModel):
    """Shape of the dbsecrets configuration."""

    database_provider: str = SUPPORTED_PROVIDER
    project_name: str = "My Project"
    company_name: str = "My Company"
    default_region: str = DEFAULT_REGION
    env_file: Path = Path(".env.local")
    environments: tuple[str, ...] = Field(default_factory=lambda: tuple(ENVIRONMENT_SECRETS))
    repo: str | None = None
    verify_timeout: float = Field(default=5.0, gt=0)

    @field_validator("environments")
    @classmethod
    def _known_environments(cls, value: tuple[str, ...]) -> tuple[str, ...]:
        unknown = [name for name in value if name not in ENVIRONMENT_SECRETS]
        if unknown:
            raise ValueError(f"unknown environments: {', '.join(unknown)}")
        return value

    @property
    def provider_supported(self) -> bool:
        return self.database_provider == SUPPORTED_PROVIDER

    def with_overrides(self, **updates: object) -> ScriptConfig:
        """Return a copy with non-``None`` updates applied."""

        changes = {key: value for key, value in updates.items() if value is not None}
        return self.model_copy(update=changes)


def load_config(path: Path | None = None, environ: Mapping[str, str] | None = None) -> ScriptConfig:
    """Load configuration from disk and the environment.

    An explicitly requested ``path`` must exist; the default file is optional.
    Environment variables win over file values.
    """

    environ = os.environ if environ is None else environ
    config_path = path or CONFIG_FILE
    try:
        data = _read_config_file(config_path)
    except FileNotFoundError:
        if path is not None:
            raise ConfigError(f"Config file not found: {path}") from None
        data = {}
    except tomllib.TOMLDecodeError as exc:
        raise ConfigError(f"Invalid TOML in {config_path}: {exc}") from exc
    except OSError as exc:
        raise ConfigError(f"Cannot read {config_path}: {exc}") from exc

    for variable, field in ENV_OVERRIDES.items():
        value = environ.get(variable)
        if value is not None:
            data[field] = value

    try:
        return ScriptConfig(**data)
    except ValidationError as exc:
        raise ConfigError(f"Invalid configuration in {config_path}: {exc}") from exc


def _read_config_file(path: Path) -> dict[str, object]:
    with path.open("rb") as handle:
        raw = tomllib.load(handle)
    data: dict[str, object] = {}
    for key in ("database_provider", "project_name", "company_name", "default_region", "repo"):
        value = raw.get(key)
        if isinstance(value, str):
            data[key] = value
    env_file = raw.get("env_file")
    if isinstance(env_file, str):
        data["env_file"] = Path(env_file)
    environments = raw.get("environments")
    if isinstance(environments, list):
        data["environments"] = tuple(str(name) for name in environments)
    timeout = raw.get("verify_timeout")
    if isinstance(timeout, (int, float)) and not isinstance(timeout, bool):
        data["verify_timeout"] = float(timeout)
    return data


__all__ = ["CONFIG_FILE", "SUPPORTED_PROVIDER", "ScriptConfig", "load_config"]
