from __future__ import annotations

"""
Base Definitions for Namespace Backends.

Provides the abstract interface shared by the in-process engine and the
remote HTTP client, so command frontends can drive either one.
"""

from abc import ABC, abstractmethod
from typing import Optional

from dirspace.domain.namespace_models import OperationResult


class NamespaceBackend(ABC):
    """
    Abstract base class for anything that can execute namespace operations.
    """

    @abstractmethod
    def create(self, path: Optional[str]) -> OperationResult:
        """Create a directory path."""

    @abstractmethod
    def move(self, source_path: Optional[str], dest_path: Optional[str]) -> OperationResult:
        """Move a directory under another directory."""

    @abstractmethod
    def delete(self, path: Optional[str]) -> OperationResult:
        """Delete a directory and its subtree."""

    @abstractmethod
    def list(self) -> str:
        """
        Render the namespace listing.

        Returns:
            str: Indented listing, empty when the namespace is empty.
        """

    def close(self) -> None:
        """Release resources held by the backend. No-op by default."""
