from __future__ import annotations

"""
Namespace Path Utilities.

Splits slash-delimited paths into segments and answers containment
questions between paths. Navigation is always exact-case; containment is
checked case-insensitively because it guards against cycles between
directories that would collide under case folding.
"""

from typing import List, Optional, Sequence

from dirspace.domain.constants import PATH_SEPARATOR

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def parse_path(path: Optional[str]) -> List[str]:
    """
    Split a path string into its non-empty segments.

    Leading, trailing and repeated separators carry no meaning.

    Args:
        path: Raw path as supplied by the caller.

    Returns:
        List[str]: Ordered segments, empty when the path has no content.
    """
    if not path:
        return []
    return [segment for segment in path.split(PATH_SEPARATOR) if segment]


def join_segments(segments: Sequence[str]) -> str:
    """Join segments back into a canonical path without outer separators."""
    return PATH_SEPARATOR.join(segments)


def is_same_or_inside(candidate: Sequence[str], ancestor: Sequence[str]) -> bool:
    """
    Check whether a path equals or lies inside another path, ignoring case.

    The comparison is boundary-aware: 'ab' is not inside 'a'.

    Args:
        candidate: Segments of the path being tested.
        ancestor: Segments of the potential ancestor.

    Returns:
        bool: True if candidate is ancestor itself or one of its descendants.
    """
    folded_candidate = join_segments(candidate).lower()
    folded_ancestor = join_segments(ancestor).lower()

    if folded_candidate == folded_ancestor:
        return True
    return folded_candidate.startswith(folded_ancestor + PATH_SEPARATOR)
