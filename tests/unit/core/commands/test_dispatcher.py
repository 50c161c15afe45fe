from __future__ import annotations

"""
Unit tests for the Command Dispatcher.

Verifies:
1. Commands reach the backend with the right arguments.
2. Transcript blocks echo the command and show listings or failures.
3. Scripts skip comments and keep running after failures.
"""

from unittest.mock import MagicMock

from dirspace.core.commands.dispatcher import (
    CommandDispatcher,
    CommandOutcome,
    render_transcript,
)
from dirspace.core.namespace.base import NamespaceBackend
from dirspace.core.namespace.engine import NamespaceEngine
from dirspace.domain.constants import ERROR_MESSAGES
from dirspace.domain.namespace_models import create_success_result


def test_create_success_has_echo_only(engine: NamespaceEngine) -> None:
    outcome = CommandDispatcher(engine).run_line("create fruits")
    assert outcome.ok is True
    assert outcome.transcript == "> CREATE fruits"
    assert engine.exists("fruits")


def test_list_outputs_listing(produce_engine: NamespaceEngine) -> None:
    outcome = CommandDispatcher(produce_engine).run_line("LIST")
    assert outcome.ok is True
    assert outcome.output == produce_engine.list()
    assert outcome.transcript.startswith("> LIST\nfruits\n")


def test_list_on_empty_namespace(engine: NamespaceEngine) -> None:
    outcome = CommandDispatcher(engine).run_line("LIST")
    assert outcome.ok is True
    assert outcome.transcript == "> LIST"


def test_failed_operation_shows_message(engine: NamespaceEngine) -> None:
    outcome = CommandDispatcher(engine).run_line("DELETE vegetables")
    assert outcome.ok is False
    assert outcome.error == "Cannot delete vegetables - vegetables does not exist"
    assert outcome.transcript == (
        "> DELETE vegetables\nCannot delete vegetables - vegetables does not exist"
    )


def test_syntax_error_never_reaches_backend() -> None:
    backend = MagicMock(spec=NamespaceBackend)
    outcome = CommandDispatcher(backend).run_line("MOVE onlyone")

    assert outcome.ok is False
    assert outcome.error == ERROR_MESSAGES["MISSING_PATHS"]
    assert outcome.echo == ""
    backend.move.assert_not_called()


def test_blank_line_returns_none(engine: NamespaceEngine) -> None:
    assert CommandDispatcher(engine).run_line("   ") is None


def test_move_forwards_both_paths() -> None:
    backend = MagicMock(spec=NamespaceBackend)
    backend.move.return_value = create_success_result()

    CommandDispatcher(backend).run_line("MOVE fruits/apples vegetables")

    backend.move.assert_called_once_with("fruits/apples", "vegetables")


def test_backend_property(engine: NamespaceEngine) -> None:
    assert CommandDispatcher(engine).backend is engine


def test_run_script_skips_comments_and_continues(engine: NamespaceEngine) -> None:
    lines = [
        "# seed data",
        "CREATE fruits",
        "",
        "DELETE pears",
        "FROB x",
        "CREATE fruits/apples",
        "LIST",
    ]
    outcomes = CommandDispatcher(engine).run_script(lines)

    assert [o.ok for o in outcomes] == [True, False, False, True, True]
    assert outcomes[-1].output == "fruits\n  apples"


def test_render_transcript(engine: NamespaceEngine) -> None:
    outcomes = CommandDispatcher(engine).run_script([
        "CREATE fruits",
        "CREATE fruits/apples",
        "DELETE pears",
        "BOGUS",
        "LIST",
    ])
    assert render_transcript(outcomes) == "\n".join([
        "> CREATE fruits",
        "> CREATE fruits/apples",
        "> DELETE pears",
        "Cannot delete pears - pears does not exist",
        ERROR_MESSAGES["INVALID_COMMAND"],
        "> LIST",
        "fruits",
        "  apples",
    ])


def test_transcript_without_echo_falls_back_to_output() -> None:
    assert CommandOutcome(ok=True, output="fruits").transcript == "fruits"
    assert CommandOutcome(ok=True).transcript == ""
