"""Azure credential construction for the Azure DNS provider."""

from __future__ import annotations

import threading

from azure.identity import DefaultAzureCredential

_credentials: dict[str | None, DefaultAzureCredential] = {}
_lock = threading.Lock()


def get_credential(client_id: str | None = None) -> DefaultAzureCredential:
    """Return a cached DefaultAzureCredential, one per managed identity client ID."""
    with _lock:
        credential = _credentials.get(client_id)
        if credential is None:
            if client_id:
                credential = DefaultAzureCredential(managed_identity_client_id=client_id)
            else:
                credential = DefaultAzureCredential()
            _credentials[client_id] = credential
        return credential
