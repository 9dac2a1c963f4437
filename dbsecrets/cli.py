"""Command line entry point for dbsecrets."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from rich.console import Console
from rich.markup import escape

from .config import load_config
from .errors import DbSecretsError, PreflightError
from .prompts import ConsolePrompter, FixedAnswerPrompter, Prompter
from .secret_store import GitHubCliSecretStore, InMemorySecretStore, SecretStore
from .workflow import SecretsWorkflow

LOG = logging.getLogger(__name__)

DESCRIPTION = "Configure Database Secrets for GitHub Actions"
EPILOG = """\
This tool will interactively configure GitHub Secrets for Supabase integration.
Make sure you have the GitHub CLI installed and are authenticated.

Required information:
  • Supabase Project Reference ID
  • Supabase Database Password
  • Supabase Project URL
  • Supabase Anonymous Key
  • Supabase Service Role Key
  • Supabase Access Token
"""


def parse_args(argv: list[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="dbsecrets",
        description=DESCRIPTION,
        epilog=EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--config", type=Path, help="Path to a dbsecrets.toml file")
    parser.add_argument("--repo", help="Target repository (OWNER/REPO) passed to gh")
    parser.add_argument("--dry-run", action="store_true", help="Record secrets without calling gh")
    parser.add_argument("--no-env-file", action="store_true", help="Do not write the local env file")
    parser.add_argument("--verify", action="store_true", help="Check the direct connection URL is reachable")
    environments = parser.add_mutually_exclusive_group()
    environments.add_argument(
        "--environments",
        dest="environments",
        action="store_const",
        const=True,
        help="Configure per-environment secrets without asking",
    )
    environments.add_argument(
        "--no-environments",
        dest="environments",
        action="store_const",
        const=False,
        help="Skip per-environment secrets without asking",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=("DEBUG", "INFO", "WARNING", "ERROR"),
        help="Diagnostic log level (stderr)",
    )
    return parser.parse_args(argv)


def build_store(args: argparse.Namespace, repo: str | None) -> SecretStore:
    if args.dry_run:
        return InMemorySecretStore()
    return GitHubCliSecretStore(repo=repo)


def build_prompter(args: argparse.Namespace, console: Console) -> Prompter:
    prompter: Prompter = ConsolePrompter(console)
    if args.environments is not None:
        prompter = FixedAnswerPrompter(prompter, confirm_answer=args.environments)
    return prompter


def main(
    argv: list[str] | None = None,
    *,
    console: Console | None = None,
    prompter: Prompter | None = None,
    store: SecretStore | None = None,
) -> int:
    args = parse_args(sys.argv[1:] if argv is None else argv)
    logging.basicConfig(level=args.log_level, format="%(levelname)s %(name)s: %(message)s")
    console = console or Console()

    try:
        config = load_config(args.config)
        config = config.with_overrides(repo=args.repo)
        store = store or build_store(args, config.repo)
        prompter = prompter or build_prompter(args, console)
        workflow = SecretsWorkflow(
            config,
            store,
            prompter,
            console,
            write_env_file=not args.no_env_file,
            verify=args.verify,
        )
        console.print("[blue]🏁 Starting database secrets configuration...[/]")
        result = workflow.run()
    except PreflightError as exc:
        console.print(f"[red]❌ {escape(str(exc))}[/]")
        console.print(f"[blue]   {escape(exc.remediation)}[/]")
        return exc.exit_code
    except DbSecretsError as exc:
        LOG.debug("Run aborted", exc_info=True)
        console.print(f"[red]❌ {escape(str(exc))}[/]")
        return exc.exit_code
    except EOFError:
        console.print()
        console.print("[red]❌ No input available; aborting.[/]")
        return 1
    except KeyboardInterrupt:
        console.print()
        console.print("[red]Interrupted. Secrets published so far remain set.[/]")
        return 130

    if isinstance(store, InMemorySecretStore) and not result.skipped:
        console.print("[yellow]Dry run: no secrets were sent to GitHub.[/]")
    return 0


__all__ = ["main", "parse_args"]
