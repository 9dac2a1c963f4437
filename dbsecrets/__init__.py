"""Publish Supabase credentials as GitHub repository secrets."""

from __future__ import annotations

from .config import ScriptConfig, load_config
from .connection_strings import derive_connection_strings
from .models import ConnectionStrings, CredentialSet, EnvironmentCredentials
from .secret_store import GitHubCliSecretStore, InMemorySecretStore, SecretStore
from .workflow import SecretsWorkflow, WorkflowResult

__version__ = "0.1.0"

__all__ = [
    "ConnectionStrings",
    "CredentialSet",
    "EnvironmentCredentials",
    "GitHubCliSecretStore",
    "InMemorySecretStore",
    "ScriptConfig",
    "SecretStore",
    "SecretsWorkflow",
    "WorkflowResult",
    "derive_connection_strings",
    "load_config",
]
