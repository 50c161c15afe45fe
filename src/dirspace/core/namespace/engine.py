from __future__ import annotations

"""
Namespace Engine.

Owns the in-memory directory tree and exposes the four public operations:
create, move, delete and list. Every operation validates before mutating,
so a failed call leaves the tree exactly as it was. Failures are returned
as OperationResult values rather than raised.

The engine is not thread-safe; callers that share one instance between
threads must serialize access themselves.
"""

import logging
from typing import List, Optional, Tuple

from dirspace.core.namespace.base import NamespaceBackend
from dirspace.core.namespace.paths import is_same_or_inside, parse_path
from dirspace.core.namespace.renderer import render_listing
from dirspace.domain.constants import DELETE_NOT_FOUND_TEMPLATE, ERROR_MESSAGES
from dirspace.domain.namespace_models import (
    DirectoryNode,
    ErrorKind,
    OperationResult,
    create_error_result,
    create_success_result,
)

logger = logging.getLogger(__name__)


class NamespaceEngine(NamespaceBackend):
    """
    In-memory directory namespace.

    Names are case-preserving for display and navigation, and
    case-insensitive for conflict detection between siblings.
    """

    def __init__(self) -> None:
        self._root = DirectoryNode(name="")

    # -------------------------------------------------------------------------
    # PUBLIC OPERATIONS
    # -------------------------------------------------------------------------

    def create(self, path: Optional[str]) -> OperationResult:
        """
        Create a directory, materializing any missing ancestors.

        Existing exact-case segments are reused, which makes repeated
        creation of the same path a successful no-op.

        Args:
            path: Slash-delimited directory path.

        Returns:
            OperationResult: Success, or InvalidPath / DirectoryExists.
        """
        segments = parse_path(path)
        if not segments:
            return self._reject("create", ErrorKind.INVALID_PATH, ERROR_MESSAGES["INVALID_PATH"], path)

        current = self._root
        for segment in segments:
            existing = current.children.get(segment)
            if existing is not None:
                current = existing
                continue

            # A new node has no children, so conflicts can only surface
            # before the first node of this call is attached.
            if current.child_ignore_case(segment) is not None:
                return self._reject(
                    "create", ErrorKind.DIRECTORY_EXISTS, ERROR_MESSAGES["DIRECTORY_EXISTS"], path
                )

            new_node = DirectoryNode(name=segment)
            current.children[segment] = new_node
            current = new_node

        logger.debug(f"Created directory path '{path}'")
        return create_success_result()

    def move(self, source_path: Optional[str], dest_path: Optional[str]) -> OperationResult:
        """
        Re-parent a directory, with its whole subtree, under another directory.

        Checks run in a fixed order: invalid paths, missing source, missing
        destination, destination inside the source, then a name conflict
        at the destination.

        Args:
            source_path: Path of the directory to move.
            dest_path: Path of the directory that becomes the new parent.

        Returns:
            OperationResult: Success, or InvalidPath / CannotMove / DirectoryExists.
        """
        source_segments = parse_path(source_path)
        dest_segments = parse_path(dest_path)
        if not source_segments or not dest_segments:
            return self._reject("move", ErrorKind.INVALID_PATH, ERROR_MESSAGES["INVALID_PATH"], source_path)

        source_node, source_parent = self._find_node(source_segments)
        if source_node is None or source_parent is None:
            return self._reject("move", ErrorKind.CANNOT_MOVE, ERROR_MESSAGES["CANNOT_MOVE"], source_path)

        dest_node, _ = self._find_node(dest_segments)
        if dest_node is None:
            return self._reject("move", ErrorKind.CANNOT_MOVE, ERROR_MESSAGES["CANNOT_MOVE"], dest_path)

        if dest_node is source_node or is_same_or_inside(dest_segments, source_segments):
            return self._reject("move", ErrorKind.CANNOT_MOVE, ERROR_MESSAGES["MOVE_INTO_SELF"], dest_path)

        if dest_node.child_ignore_case(source_node.name) is not None:
            return self._reject(
                "move", ErrorKind.DIRECTORY_EXISTS, ERROR_MESSAGES["DIRECTORY_EXISTS"], dest_path
            )

        del source_parent.children[source_node.name]
        dest_node.children[source_node.name] = source_node

        logger.debug(f"Moved directory '{source_path}' under '{dest_path}'")
        return create_success_result()

    def delete(self, path: Optional[str]) -> OperationResult:
        """
        Remove a directory and everything below it.

        Args:
            path: Slash-delimited directory path.

        Returns:
            OperationResult: Success, or InvalidPath / NotFound naming the
                             first missing segment.
        """
        segments = parse_path(path)
        if not segments:
            return self._reject("delete", ErrorKind.INVALID_PATH, ERROR_MESSAGES["INVALID_PATH"], path)

        current = self._root
        for segment in segments[:-1]:
            next_node = current.children.get(segment)
            if next_node is None:
                return self._reject_missing(path, segment)
            current = next_node

        last_segment = segments[-1]
        if last_segment not in current.children:
            return self._reject_missing(path, last_segment)

        del current.children[last_segment]

        logger.debug(f"Deleted directory '{path}'")
        return create_success_result()

    def list(self) -> str:
        """
        Render the namespace as an indented listing.

        Returns:
            str: One line per directory, siblings sorted by code point,
                 two spaces of indent per level; empty for an empty tree.
        """
        return render_listing(self._root)

    # -------------------------------------------------------------------------
    # READ HELPERS
    # -------------------------------------------------------------------------

    def exists(self, path: Optional[str]) -> bool:
        """Check whether a path resolves to a directory using exact-case lookup."""
        segments = parse_path(path)
        if not segments:
            return False
        node, _ = self._find_node(segments)
        return node is not None

    def count(self) -> int:
        """Count every materialized directory below the root."""
        count = 0
        pending: List[DirectoryNode] = [self._root]
        while pending:
            node = pending.pop()
            count += len(node.children)
            pending.extend(node.children.values())
        return count

    # -------------------------------------------------------------------------
    # PRIVATE HELPERS
    # -------------------------------------------------------------------------

    def _find_node(
            self,
            segments: List[str],
    ) -> Tuple[Optional[DirectoryNode], Optional[DirectoryNode]]:
        """
        Walk from the root following exact-case segments.

        Returns:
            Tuple of the terminal node (None if missing) and the last node
            reached before it.
        """
        current = self._root
        parent: Optional[DirectoryNode] = None

        for segment in segments:
            parent = current
            next_node = current.children.get(segment)
            if next_node is None:
                return None, parent
            current = next_node

        return current, parent

    def _reject(
            self,
            operation: str,
            kind: ErrorKind,
            message: str,
            path: Optional[str],
    ) -> OperationResult:
        logger.debug(f"Rejected {operation} for '{path}': {kind.value}")
        return create_error_result(kind, message)

    def _reject_missing(self, path: Optional[str], segment: str) -> OperationResult:
        message = DELETE_NOT_FOUND_TEMPLATE.format(path=path, segment=segment)
        return self._reject("delete", ErrorKind.NOT_FOUND, message, path)
