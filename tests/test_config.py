"""Tests for ScriptConfig loading."""

from __future__ import annotations

from pathlib import Path

import pytest

from dbsecrets import config as config_module
from dbsecrets.config import ScriptConfig, load_config
from dbsecrets.errors import ConfigError


def test_load_config_returns_defaults_when_missing(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(config_module, "CONFIG_FILE", tmp_path / "dbsecrets.toml")

    result = load_config(environ={})

    assert result == ScriptConfig()
    assert result.provider_supported is True
    assert result.environments == ("staging", "production")


def test_load_config_reads_values(tmp_path: Path) -> None:
    config_path = tmp_path / "dbsecrets.toml"
    config_path.write_text(
        """
database_provider = "supabase"
project_name = "Acme Portal"
company_name = "Acme"
default_region = "eu-central-1"
env_file = "web/.env.local"
environments = ["production"]
repo = "acme/portal"
verify_timeout = 2
"""
    )

    result = load_config(config_path, environ={})

    assert result.project_name == "Acme Portal"
    assert result.company_name == "Acme"
    assert result.default_region == "eu-central-1"
    assert result.env_file == Path("web/.env.local")
    assert result.environments == ("production",)
    assert result.repo == "acme/portal"
    assert result.verify_timeout == 2.0


def test_environment_variables_override_file(tmp_path: Path) -> None:
    config_path = tmp_path / "dbsecrets.toml"
    config_path.write_text('database_provider = "supabase"\nproject_name = "From File"\n')

    result = load_config(
        config_path,
        environ={"DATABASE_PROVIDER": "planetscale", "PROJECT_NAME": "From Env", "GH_REPO": "acme/api"},
    )

    assert result.database_provider == "planetscale"
    assert result.provider_supported is False
    assert result.project_name == "From Env"
    assert result.repo == "acme/api"


def test_explicit_missing_file_is_an_error(tmp_path: Path) -> None:
    with pytest.raises(ConfigError):
        load_config(tmp_path / "nope.toml", environ={})


def test_load_config_handles_toml_errors(tmp_path: Path) -> None:
    config_path = tmp_path / "dbsecrets.toml"
    config_path.write_text("project_name = [unterminated")

    with pytest.raises(ConfigError):
        load_config(config_path, environ={})


def test_unknown_environment_is_rejected(tmp_path: Path) -> None:
    config_path = tmp_path / "dbsecrets.toml"
    config_path.write_text('environments = ["staging", "qa"]\n')

    with pytest.raises(ConfigError, match="qa"):
        load_config(config_path, environ={})


def test_provider_match_is_case_sensitive() -> None:
    assert ScriptConfig(database_provider="Supabase").provider_supported is False


def test_with_overrides_ignores_none() -> None:
    config = ScriptConfig(repo="acme/portal")

    assert config.with_overrides(repo=None).repo == "acme/portal"
    assert config.with_overrides(repo="acme/other").repo == "acme/other"


def test_empty_environment_variable_still_overrides(tmp_path: Path) -> None:
    config_path = tmp_path / "dbsecrets.toml"
    config_path.write_text('database_provider = "supabase"\n')

    result = load_config(config_path, environ={"DATABASE_PROVIDER": ""})

    assert result.database_provider == ""
    assert result.provider_supported is False
