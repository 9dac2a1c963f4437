"""Tests for local environment file generation."""

from __future__ import annotations

from pathlib import Path

from dbsecrets.connection_strings import LOCAL_DATABASE_URL
from dbsecrets.envfile import render_local_env, target_path, write_local_env


def _content() -> str:
    return render_local_env(
        supabase_url="https://abc123.supabase.co",
        anon_key="anon-key",
        project_name="Acme Portal",
        company_name="Acme",
    )


def test_render_uses_key_value_lines() -> None:
    lines = [line for line in _content().splitlines() if line and not line.startswith("#")]

    assert dict(line.split("=", 1) for line in lines) == {
        "NEXT_PUBLIC_SUPABASE_URL": "https://abc123.supabase.co",
        "NEXT_PUBLIC_SUPABASE_ANON_KEY": "anon-key",
        "DATABASE_URL": LOCAL_DATABASE_URL,
        "DIRECT_URL": LOCAL_DATABASE_URL,
        "NEXT_PUBLIC_APP_NAME": "Acme Portal",
        "NEXT_PUBLIC_COMPANY_NAME": "Acme",
        "NODE_ENV": "development",
    }


def test_writes_canonical_path_when_absent(tmp_path: Path) -> None:
    env_path = tmp_path / ".env.local"

    written = write_local_env(env_path, _content())

    assert written == env_path
    assert "NODE_ENV=development" in env_path.read_text(encoding="utf-8")


def test_existing_file_is_left_untouched(tmp_path: Path) -> None:
    env_path = tmp_path / ".env.local"
    env_path.write_text("SECRET=keep-me\n", encoding="utf-8")

    written = write_local_env(env_path, _content())

    assert written == tmp_path / ".env.local.template"
    assert env_path.read_text(encoding="utf-8") == "SECRET=keep-me\n"
    assert "NEXT_PUBLIC_APP_NAME=Acme Portal" in written.read_text(encoding="utf-8")


def test_target_path_creates_missing_parents(tmp_path: Path) -> None:
    env_path = tmp_path / "web" / ".env.local"

    assert target_path(env_path) == env_path
    assert write_local_env(env_path, _content()).exists()
