from __future__ import annotations

"""
Namespace Renderer.

Converts the in-memory directory tree into its indented text listing.
Siblings are ordered by plain code-point comparison, so 'Zeta' sorts
before 'alpha' and names are printed exactly as created. The walk uses an
explicit stack, so tree depth is bounded only by memory.
"""

from typing import List, Tuple

from dirspace.domain.constants import LIST_INDENT
from dirspace.domain.namespace_models import DirectoryNode

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def render_directory_tree(
        node: DirectoryNode,
        lines: List[str],
        depth: int = 0,
) -> None:
    """
    Transform a directory subtree into a list of strings, depth first.

    The node at depth 0 (the root) contributes no line; every other node
    contributes its name indented by two spaces per level below depth 1.

    Args:
        node: Subtree root to process.
        lines: Accumulator list for output strings.
        depth: Distance of the subtree root from the namespace root.
    """
    pending: List[Tuple[DirectoryNode, int]] = [(node, depth)]

    while pending:
        current, level = pending.pop()
        if level > 0:
            lines.append(f"{LIST_INDENT * (level - 1)}{current.name}")

        # Reverse order so the smallest name is popped first
        for name in sorted(current.children, reverse=True):
            pending.append((current.children[name], level + 1))


def render_listing(root: DirectoryNode) -> str:
    """Render the whole tree below the root as a newline-joined string."""
    lines: List[str] = []
    render_directory_tree(root, lines)
    return "\n".join(lines)
