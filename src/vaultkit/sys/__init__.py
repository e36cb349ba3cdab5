"""Sys helpers – mounts, auth methods, wrapping, policies and server health.

Usage::

    from vaultkit import sys

    await sys.mount.enable(client, "kv-test", "kv", options={"version": "2"})
    await sys.policy.set(client, "dev", 'path "secret/*" { capabilities = ["read"] }')
"""
from __future__ import annotations

from vaultkit.api.sys import ReadHealthRequest, ReadHealthResponse, ServerStatus
from vaultkit.client import VaultClient
from vaultkit.sys import auth, mount, policy, wrapping


async def health(client: VaultClient) -> ReadHealthResponse:
    """Return the ``sys/health`` body of an active, unsealed node."""
    return await client.execute_plain(ReadHealthRequest())


async def status(client: VaultClient) -> ServerStatus:
    return await client.status()


__all__ = ["auth", "health", "mount", "policy", "status", "wrapping"]
