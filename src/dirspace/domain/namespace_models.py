from __future__ import annotations

"""
Namespace Domain Data Models.

Defines the recursive directory node held by the namespace engine and the
immutable result object returned by every engine operation. Factories keep
result construction uniform across the engine, the HTTP layer and the
network client.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Optional

# -----------------------------------------------------------------------------
# STRUCTURAL COMPONENTS
# -----------------------------------------------------------------------------

@dataclass(eq=False)
class DirectoryNode:
    """
    Represents one directory in the in-memory namespace.

    Attributes:
        name: Display name, case-preserved exactly as supplied at creation.
        children: Child nodes keyed by their exact (case-preserved) name.
    """
    name: str
    children: Dict[str, "DirectoryNode"] = field(default_factory=dict)

    def child_ignore_case(self, name: str) -> Optional["DirectoryNode"]:
        """Return the child whose name matches under case folding, if any."""
        folded = name.lower()
        for child_name, child in self.children.items():
            if child_name.lower() == folded:
                return child
        return None


class ErrorKind(str, Enum):
    """Failure categories reported by the namespace engine."""

    INVALID_PATH = "InvalidPath"
    DIRECTORY_EXISTS = "DirectoryExists"
    CANNOT_MOVE = "CannotMove"
    NOT_FOUND = "NotFound"

# -----------------------------------------------------------------------------
# RESULT MODELS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class OperationResult:
    """
    Outcome of a single namespace operation.

    Attributes:
        ok: Flag indicating success or failure.
        error: Descriptive, user-facing message in case of failure.
        kind: Failure category, None on success.
    """
    ok: bool
    error: str = ""
    kind: Optional[ErrorKind] = None


def create_success_result() -> OperationResult:
    """Create a successful operation result."""
    return OperationResult(ok=True)


def create_error_result(kind: ErrorKind, error: str) -> OperationResult:
    """
    Create a failed operation result.

    Args:
        kind: Failure category.
        error: Message to surface to the caller.

    Returns:
        OperationResult: An immutable error result object.
    """
    return OperationResult(ok=False, error=error, kind=kind)
