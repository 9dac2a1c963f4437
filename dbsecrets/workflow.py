"""Interactive workflow publishing Supabase credentials as repository secrets."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable

from rich.console import Console
from rich.markup import escape

from .config import ScriptConfig
from .connection_strings import derive_connection_strings, mask_password
from .envfile import render_local_env, write_local_env
from .errors import MissingCredentialsError, VerificationError
from .models import (
    ENVIRONMENT_SECRETS,
    ConnectionStrings,
    CredentialSet,
    EnvironmentCredentials,
)
from .prompts import Prompter
from .secret_store import SecretStore
from .verify import check_connection

LOG = logging.getLogger(__name__)

Verifier = Callable[..., int]

NEXT_STEPS = (
    "Test your GitHub Actions workflows",
    "Verify database connections in CI/CD",
    "Monitor secret usage and rotate regularly",
)


@dataclass(frozen=True, slots=True)
class WorkflowResult:
    """Outcome of one workflow run."""

    skipped: bool = False
    published: tuple[str, ...] = ()
    environments: tuple[str, ...] = ()
    env_file: Path | None = None


@dataclass(slots=True)
class _RunState:
    published: list[str] = field(default_factory=list)
    environments: list[str] = field(default_factory=list)


class SecretsWorkflow:
    """Collect credentials, publish secrets and write the local env file."""

    def __init__(
        self,
        config: ScriptConfig,
        store: SecretStore,
        prompter: Prompter,
        console: Console,
        *,
        write_env_file: bool = True,
        verify: bool = False,
        verifier: Verifier = check_connection,
    ) -> None:
        self._config = config
        self._store = store
        self._prompter = prompter
        self._console = console
        self._write_env_file = write_env_file
        self._verify = verify
        self._verifier = verifier

    def run(self) -> WorkflowResult:
        """Execute every step in order; errors propagate to the caller."""

        config = self._config
        self._console.print(f"[blue]🔐 Configuring database secrets for {escape(config.project_name)}[/]")
        if not config.provider_supported:
            self._console.print(
                f"[yellow]⚠️  Database provider is not Supabase ({escape(config.database_provider)}). "
                "Skipping secrets configuration.[/]"
            )
            LOG.info("Provider gate closed for %r", config.database_provider)
            return WorkflowResult(skipped=True)

        state = _RunState()
        self.check_prerequisites()
        credentials = self.collect_credentials()
        strings = self.derive(credentials)
        if self._verify:
            self.verify_connection(strings)
        self._publish_primary(credentials, strings, state)
        self._configure_environments(credentials, state)
        env_file = self.create_local_env(credentials) if self._write_env_file else None
        result = WorkflowResult(
            published=tuple(state.published),
            environments=tuple(state.environments),
            env_file=env_file,
        )
        self.display_summary(result)
        return result

    def check_prerequisites(self) -> None:
        self._console.print("[yellow]📋 Checking secret store prerequisites...[/]")
        banner = self._store.preflight()
        if banner:
            self._console.print(f"[green]✅ {escape(banner)}[/]")

    def collect_credentials(self) -> CredentialSet:
        """Prompt for the primary credential set and validate it."""

        console = self._console
        console.print("[blue]🏗️  Configuring Supabase secrets...[/]")
        console.print("[yellow]Please provide the following information from your Supabase project:[/]")
        console.print("[blue]You can find these values in your Supabase project dashboard > Settings > API[/]")
        ask = self._prompter.ask
        credentials = CredentialSet(
            project_ref=ask("Supabase Project Reference ID"),
            region=ask(f"Supabase Region (e.g., {self._config.default_region})"),
            db_password=ask("Supabase Database Password", secret=True),
            url=ask("Supabase Project URL"),
            anon_key=ask("Supabase Anonymous Key"),
            service_role_key=ask("Supabase Service Role Key", secret=True),
            access_token=ask("Supabase Access Token (for CLI)", secret=True),
        )
        missing = credentials.missing_fields()
        if missing:
            raise MissingCredentialsError(missing)
        return credentials

    def derive(self, credentials: CredentialSet) -> ConnectionStrings:
        strings = derive_connection_strings(
            credentials.project_ref,
            credentials.db_password,
            credentials.region,
            default_region=self._config.default_region,
        )
        password = credentials.db_password
        self._console.print("[yellow]📝 Generated connection strings:[/]")
        for label, url in (
            ("Session Mode (Migrations)", strings.session),
            ("Transaction Mode (App)", strings.transaction),
            ("Direct Connection", strings.direct),
        ):
            self._console.print(f"[blue]{label}: {escape(mask_password(url, password))}[/]")
        return strings

    def verify_connection(self, strings: ConnectionStrings) -> None:
        """Advisory reachability check of the direct URL."""

        self._console.print("[yellow]🔌 Verifying database connection...[/]")
        try:
            latency = self._verifier(strings.direct, timeout=self._config.verify_timeout)
        except VerificationError as exc:
            LOG.warning("Connection verification failed: %s", exc)
            self._console.print(f"[yellow]⚠️  Could not verify connection: {escape(str(exc))}[/]")
            return
        self._console.print(f"[green]✅ Database reachable ({latency}ms)[/]")

    def _publish_primary(self, credentials: CredentialSet, strings: ConnectionStrings, state: _RunState) -> None:
        self._console.print("[yellow]🚀 Setting GitHub secrets...[/]")
        region = credentials.resolved_region(self._config.default_region)
        secrets = [
            ("SUPABASE_PROJECT_REF", credentials.project_ref),
            ("SUPABASE_REGION", region),
            ("SUPABASE_DB_PASSWORD", credentials.db_password),
            ("SUPABASE_PROJECT_ID", credentials.project_ref),
            ("DATABASE_URL", strings.transaction),
            ("DIRECT_URL", strings.session),
            ("NEXT_PUBLIC_SUPABASE_URL", credentials.url),
            ("NEXT_PUBLIC_SUPABASE_ANON_KEY", credentials.anon_key),
        ]
        if credentials.service_role_key:
            secrets.append(("SUPABASE_SERVICE_ROLE_KEY", credentials.service_role_key))
        if credentials.access_token:
            secrets.append(("SUPABASE_ACCESS_TOKEN", credentials.access_token))
        for name, value in secrets:
            self._publish(name, value, state)
        self._console.print("[green]✅ GitHub secrets configured successfully[/]")

    def _configure_environments(self, credentials: CredentialSet, state: _RunState) -> None:
        """Optionally publish per-environment overrides."""

        if not self._prompter.confirm("🌍 Would you like to configure environment-specific secrets?"):
            return
        region = credentials.resolved_region(self._config.default_region)
        for env_name in self._config.environments:
            names = ENVIRONMENT_SECRETS[env_name]
            self._console.print(f"[blue]Configuring {env_name} environment:[/]")
            override = EnvironmentCredentials(
                name=env_name,
                project_ref=self._prompter.ask(f"{env_name} Supabase Project Reference ID"),
                db_password=self._prompter.ask(f"{env_name} Supabase Database Password", secret=True),
            )
            if not override.complete:
                LOG.info("Skipping %s: missing project reference or password", env_name)
                self._console.print(f"[yellow]⚠️  Skipping {env_name} environment configuration[/]")
                continue
            strings = derive_connection_strings(override.project_ref, override.db_password, region)
            self._publish(names.database_url, strings.transaction, state)
            self._publish(names.direct_url, strings.session, state)
            self._publish(names.project_ref, override.project_ref, state)
            state.environments.append(env_name)
            self._console.print(f"[green]✅ {env_name} environment configured[/]")

    def create_local_env(self, credentials: CredentialSet) -> Path:
        self._console.print(f"[yellow]💻 Creating local {escape(str(self._config.env_file))} file...[/]")
        content = render_local_env(
            supabase_url=credentials.url,
            anon_key=credentials.anon_key,
            project_name=self._config.project_name,
            company_name=self._config.company_name,
        )
        path = write_local_env(self._config.env_file, content)
        if path != self._config.env_file:
            self._console.print(
                f"[yellow]⚠️  {escape(str(self._config.env_file))} already exists. Created {escape(str(path))} instead.[/]"
            )
        self._console.print(f"[green]✅ Local environment file created: {escape(str(path))}[/]")
        self._console.print("[blue]   Update the DATABASE_URL values for your actual local setup[/]")
        return path

    def display_summary(self, result: WorkflowResult) -> None:
        console = self._console
        console.print()
        console.print("[green]🎉 Database secrets configuration completed![/]")
        console.print()
        console.print("[blue]📋 Summary of configured secrets:[/]")
        for name in result.published:
            console.print(f"[yellow]• {name}[/]")
        console.print()
        console.print("[blue]🔍 To view all secrets: gh secret list[/]")
        console.print()
        console.print("[blue]Next steps:[/]")
        for index, step in enumerate(NEXT_STEPS, start=1):
            console.print(f"[yellow]{index}. {step}[/]")

    def _publish(self, name: str, value: str, state: _RunState) -> None:
        self._store.set(name, value)
        state.published.append(name)
        LOG.debug("Published secret %s", name)


__all__ = ["NEXT_STEPS", "SecretsWorkflow", "WorkflowResult"]
