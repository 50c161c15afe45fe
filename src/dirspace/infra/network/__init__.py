from __future__ import annotations

"""
Network Communication Infrastructure.

Facade over the HTTP client used to drive a remote directory namespace.
"""

from dirspace.infra.network.common import DEFAULT_TIMEOUT, USER_AGENT, NamespaceClientError
from dirspace.infra.network.directory_client import DirectoryApiClient

__all__ = [
    "DirectoryApiClient",
    "NamespaceClientError",
    "DEFAULT_TIMEOUT",
    "USER_AGENT",
]
