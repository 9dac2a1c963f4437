"""Local environment file generation."""

from __future__ import annotations

import logging
from pathlib import Path

from .connection_strings import LOCAL_DATABASE_URL

LOG = logging.getLogger(__name__)

TEMPLATE_SUFFIX = ".template"

ENV_TEMPLATE = """# Local Development Environment Variables
# Generated by dbsecrets

# Supabase Configuration
NEXT_PUBLIC_SUPABASE_URL={supabase_url}
NEXT_PUBLIC_SUPABASE_ANON_KEY={anon_key}

# Database URLs (for local development - update for production)
DATABASE_URL={local_url}
DIRECT_URL={local_url}

# Application Configuration
NEXT_PUBLIC_APP_NAME={project_name}
NEXT_PUBLIC_COMPANY_NAME={company_name}

# Development Settings
NODE_ENV=development
"""


def render_local_env(
    *,
    supabase_url: str,
    anon_key: str,
    project_name: str,
    company_name: str,
) -> str:
    """Return the contents of the local environment file."""

    return ENV_TEMPLATE.format(
        supabase_url=supabase_url,
        anon_key=anon_key,
        local_url=LOCAL_DATABASE_URL,
        project_name=project_name,
        company_name=company_name,
    )


def target_path(env_path: Path) -> Path:
    """Pick the canonical path, or its template sibling if the former exists."""

    if env_path.exists():
        return env_path.with_name(env_path.name + TEMPLATE_SUFFIX)
    return env_path


def write_local_env(env_path: Path, content: str) -> Path:
    """Write ``content`` without clobbering an existing canonical file."""

    path = target_path(env_path)
    if path != env_path:
        LOG.info("%s already exists; writing %s instead", env_path, path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
    return path


__all__ = ["ENV_TEMPLATE", "TEMPLATE_SUFFIX", "render_local_env", "target_path", "write_local_env"]
