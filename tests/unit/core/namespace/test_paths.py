from __future__ import annotations

"""
Unit tests for path parsing and containment checks.
"""

import pytest

from dirspace.core.namespace.paths import is_same_or_inside, join_segments, parse_path


@pytest.mark.parametrize("raw,expected", [
    ("fruits", ["fruits"]),
    ("fruits/apples", ["fruits", "apples"]),
    ("/fruits/apples/", ["fruits", "apples"]),
    ("fruits//apples", ["fruits", "apples"]),
    ("", []),
    ("///", []),
    (None, []),
])
def test_parse_path(raw, expected) -> None:
    assert parse_path(raw) == expected


def test_parse_path_keeps_case_and_inner_spaces() -> None:
    assert parse_path("My Docs/Reports") == ["My Docs", "Reports"]


def test_join_segments() -> None:
    assert join_segments(["a", "b", "c"]) == "a/b/c"
    assert join_segments([]) == ""


@pytest.mark.parametrize("candidate,ancestor,expected", [
    (["a"], ["a"], True),
    (["a", "b"], ["a"], True),
    (["a", "b", "c"], ["a"], True),
    (["A", "B"], ["a"], True),
    (["a"], ["A"], True),
    (["ab"], ["a"], False),
    (["a"], ["a", "b"], False),
    (["b", "a"], ["a"], False),
])
def test_is_same_or_inside(candidate, ancestor, expected) -> None:
    assert is_same_or_inside(candidate, ancestor) is expected
