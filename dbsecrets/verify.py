"""Reachability check for derived connection strings."""

from __future__ import annotations

import asyncio
import logging
import time

import asyncpg

from .errors import VerificationError

LOG = logging.getLogger(__name__)


def check_connection(dsn: str, *, timeout: float = 5.0) -> int:
    """Open and close one connection to ``dsn``; return the latency in ms."""

    return asyncio.run(_check(dsn, timeout))


async def _check(dsn: str, timeout: float) -> int:
    started = time.perf_counter()
    try:
        conn = await asyncpg.connect(dsn=dsn, timeout=timeout)
    except Exception as exc:
        raise VerificationError(f"Failed to connect: {exc}") from exc
    try:
        await conn.fetchval("SELECT 1")
    except Exception as exc:
        raise VerificationError(f"Connected but query failed: {exc}") from exc
    finally:
        try:
            await conn.close()
        except Exception:  # pragma: no cover - best effort
            LOG.debug("Ignoring error while closing verification connection", exc_info=True)
    latency_ms = int((time.perf_counter() - started) * 1000)
    LOG.debug("Verification connection succeeded in %sms", latency_ms)
    return latency_ms


__all__ = ["check_connection"]
