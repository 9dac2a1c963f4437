"""Shared dataclasses used across the workflow modules."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping

DEFAULT_REGION = "us-east-1"


@dataclass(frozen=True, slots=True)
class CredentialSet:
    """Primary Supabase credentials collected from the operator."""

    project_ref: str
    db_password: str
    url: str
    region: str = ""
    anon_key: str = ""
    service_role_key: str = ""
    access_token: str = ""

    def missing_fields(self) -> tuple[str, ...]:
        """Names of required fields left empty."""

        required = (
            ("project reference", self.project_ref),
            ("database password", self.db_password),
            ("project URL", self.url),
        )
        return tuple(label for label, value in required if not value)

    def resolved_region(self, default: str = DEFAULT_REGION) -> str:
        return self.region or default


@dataclass(frozen=True, slots=True)
class EnvironmentCredentials:
    """Per-environment override of the project reference and password."""

    name: str
    project_ref: str
    db_password: str

    @property
    def complete(self) -> bool:
        return bool(self.project_ref and self.db_password)


@dataclass(frozen=True, slots=True)
class ConnectionStrings:
    """Derived PostgreSQL URLs for one project reference/password pair."""

    session: str
    transaction: str
    direct: str


@dataclass(frozen=True, slots=True)
class EnvironmentSecretNames:
    """Secret names published for one deployment environment."""

    database_url: str
    direct_url: str
    project_ref: str


ENVIRONMENT_SECRETS: Mapping[str, EnvironmentSecretNames] = {
    "staging": EnvironmentSecretNames(
        database_url="STAGING_DATABASE_URL",
        direct_url="STAGING_DIRECT_URL",
        project_ref="STAGING_SUPABASE_PROJECT_REF",
    ),
    "production": EnvironmentSecretNames(
        database_url="PRODUCTION_DATABASE_URL",
        direct_url="PRODUCTION_DIRECT_URL",
        project_ref="PRODUCTION_SUPABASE_PROJECT_REF",
    ),
}


__all__ = [
    "ConnectionStrings",
    "CredentialSet",
    "DEFAULT_REGION",
    "ENVIRONMENT_SECRETS",
    "EnvironmentCredentials",
    "EnvironmentSecretNames",
]
