"""HTTP adapter – httpx transport for the Vault API."""
from vaultkit.adapters.http.transport import HttpxTransport, RawResponse, build_ssl_context

__all__ = ["HttpxTransport", "RawResponse", "build_ssl_context"]
