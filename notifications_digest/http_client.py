"""Shared HTTP client helpers."""

from contextlib import asynccontextmanager
from typing import AsyncIterator

import httpx

DEFAULT_TIMEOUT = 30.0
GITHUB_API_VERSION = "2022-11-28"


def github_headers(token: str) -> dict[str, str]:
    """Headers for GitHub REST API calls."""
    return {
        "Authorization": f"Bearer {token}",
        "Accept": "application/vnd.github+json",
        "X-GitHub-Api-Version": GITHUB_API_VERSION,
    }


@asynccontextmanager
async def http_client(client: httpx.AsyncClient | None = None) -> AsyncIterator[httpx.AsyncClient]:
    """Yield the injected client, or a short-lived one that is closed afterwards."""
    if client is not None:
        yield client
        return
    async with httpx.AsyncClient(timeout=DEFAULT_TIMEOUT) as owned:
        yield owned
