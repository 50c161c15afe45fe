from __future__ import annotations

"""
Directory API Client.

Speaks to the HTTP service over 'requests' and exposes the same four
operations as the local engine, so command frontends can run against a
remote namespace transparently. Client errors (4xx) come back as failed
OperationResults carrying the server's message; transport failures and
server errors raise NamespaceClientError.
"""

import logging
from typing import Any, Dict, Optional

import requests

from dirspace.core.namespace.base import NamespaceBackend
from dirspace.domain.constants import DIRECTORY_ROUTE, ERROR_MESSAGES
from dirspace.domain.namespace_models import (
    ErrorKind,
    OperationResult,
    create_error_result,
    create_success_result,
)
from dirspace.infra.network.common import DEFAULT_TIMEOUT, USER_AGENT, NamespaceClientError

logger = logging.getLogger(__name__)

# Server-side status codes mapped back onto engine failure kinds
_STATUS_KIND_MAP: Dict[str, Dict[int, ErrorKind]] = {
    "create": {400: ErrorKind.DIRECTORY_EXISTS},
    "move": {400: ErrorKind.DIRECTORY_EXISTS, 404: ErrorKind.CANNOT_MOVE},
    "delete": {400: ErrorKind.INVALID_PATH, 404: ErrorKind.NOT_FOUND},
}


class DirectoryApiClient(NamespaceBackend):
    """
    HTTP client for the '/api/v1/directory' resource.

    Args:
        base_url: Service root, e.g. 'http://127.0.0.1:8000'.
        timeout: Per-request timeout in seconds.
        session: Optional pre-configured requests session.
    """

    def __init__(
            self,
            base_url: str,
            timeout: float = DEFAULT_TIMEOUT,
            session: Optional[requests.Session] = None,
    ) -> None:
        self._url = base_url.rstrip("/") + DIRECTORY_ROUTE
        self._timeout = timeout
        self._session = session or requests.Session()
        self._session.headers.update({"User-Agent": USER_AGENT})

    @property
    def url(self) -> str:
        return self._url

    # -------------------------------------------------------------------------
    # NAMESPACE OPERATIONS
    # -------------------------------------------------------------------------

    def create(self, path: Optional[str]) -> OperationResult:
        response = self._send("POST", json={"path": path})
        return self._to_result("create", response)

    def move(self, source_path: Optional[str], dest_path: Optional[str]) -> OperationResult:
        response = self._send("PATCH", json={"path": source_path, "destPath": dest_path})
        return self._to_result("move", response)

    def delete(self, path: Optional[str]) -> OperationResult:
        response = self._send("DELETE", params={"path": path})
        return self._to_result("delete", response)

    def list(self) -> str:
        response = self._send("GET")
        if not response.ok:
            raise NamespaceClientError(_error_message(response), response.status_code)
        return str(_json_body(response).get("structure", ""))

    def close(self) -> None:
        """Close the underlying HTTP session."""
        self._session.close()

    # -------------------------------------------------------------------------
    # TRANSPORT
    # -------------------------------------------------------------------------

    def _send(self, method: str, **kwargs: Any) -> requests.Response:
        logger.debug(f"Network: {method} {self._url}")
        try:
            return self._session.request(method, self._url, timeout=self._timeout, **kwargs)
        except requests.exceptions.Timeout:
            logger.warning(f"Network: {method} {self._url} timed out after {self._timeout}s.")
            raise NamespaceClientError(f"Request timed out after {self._timeout}s") from None
        except requests.exceptions.RequestException as e:
            logger.error(f"Network: Communication error with directory API: {e}")
            raise NamespaceClientError(f"Cannot reach directory API at {self._url}: {e}") from e

    def _to_result(self, operation: str, response: requests.Response) -> OperationResult:
        if response.ok:
            return create_success_result()

        if response.status_code >= 500:
            raise NamespaceClientError(_error_message(response), response.status_code)

        message = _error_message(response)
        kind = _STATUS_KIND_MAP[operation].get(response.status_code, ErrorKind.INVALID_PATH)
        if message in (ERROR_MESSAGES["INVALID_PATH"], ERROR_MESSAGES["MISSING_PATHS"]):
            kind = ErrorKind.INVALID_PATH
        elif message == ERROR_MESSAGES["MOVE_INTO_SELF"]:
            kind = ErrorKind.CANNOT_MOVE
        return create_error_result(kind, message)

# -----------------------------------------------------------------------------
# HELPERS
# -----------------------------------------------------------------------------

def _json_body(response: requests.Response) -> Dict[str, Any]:
    try:
        data = response.json()
    except ValueError:
        return {}
    return data if isinstance(data, dict) else {}


def _error_message(response: requests.Response) -> str:
    body = _json_body(response)
    return str(body.get("error") or f"HTTP {response.status_code}")
