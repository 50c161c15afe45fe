from __future__ import annotations

from dirspace.domain.constants import APP_NAME, APP_VERSION

USER_AGENT = f"{APP_NAME}-client/{APP_VERSION}"
DEFAULT_TIMEOUT = 10


class NamespaceClientError(RuntimeError):
    """Raised when the directory API cannot be reached or answers unexpectedly."""

    def __init__(self, message: str, status_code: int = 0) -> None:
        super().__init__(message)
        self.status_code = status_code
