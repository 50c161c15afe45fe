from __future__ import annotations

"""
Unit tests for the CLI application controller.

Verifies:
1. The interactive shell loop against in-memory streams.
2. Script execution, transcript output and exit codes.
3. Configuration dumping and subcommand routing.
"""

import io
import json
from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest
import requests

from dirspace.core.namespace.base import NamespaceBackend
from dirspace.core.namespace.engine import NamespaceEngine
from dirspace.infra.network import NamespaceClientError
from dirspace.interface.cli.app import main, run_shell


class _TtyInput(io.StringIO):
    """In-memory stdin that reports itself as a terminal."""

    def isatty(self) -> bool:
        return True

# -----------------------------------------------------------------------------
# INTERACTIVE SHELL
# -----------------------------------------------------------------------------

def test_shell_prints_listing_and_failures(engine: NamespaceEngine) -> None:
    stdin = io.StringIO(
        "CREATE fruits\n"
        "create fruits/apples\n"
        "DELETE pears\n"
        "\n"
        "LIST\n"
    )
    stdout = io.StringIO()

    code = run_shell(engine, stdin, stdout)

    assert code == 0
    assert stdout.getvalue() == (
        "Cannot delete pears - pears does not exist\n"
        "fruits\n"
        "  apples\n"
    )


def test_shell_stops_at_exit(engine: NamespaceEngine) -> None:
    stdin = io.StringIO("CREATE a\nexit\nCREATE b\n")
    run_shell(engine, stdin, io.StringIO())

    assert engine.exists("a")
    assert not engine.exists("b")


def test_shell_reports_syntax_errors(engine: NamespaceEngine) -> None:
    stdout = io.StringIO()
    run_shell(engine, io.StringIO("FLY away\nMOVE a\n"), stdout)

    lines = stdout.getvalue().splitlines()
    assert lines[0].startswith("Invalid command")
    assert lines[1] == "Both source and destination paths are required"


def test_shell_survives_remote_failures(capsys: pytest.CaptureFixture[str]) -> None:
    backend = MagicMock(spec=NamespaceBackend)
    backend.list.side_effect = [NamespaceClientError("connection refused"), "fruits"]
    stdout = io.StringIO()

    code = run_shell(backend, io.StringIO("LIST\nLIST\n"), stdout)

    assert code == 0
    assert stdout.getvalue() == "fruits\n"
    assert "connection refused" in capsys.readouterr().err


def test_shell_interactive_banner_and_prompt(engine: NamespaceEngine) -> None:
    stdin = _TtyInput("LIST\n")
    stdout = io.StringIO()

    run_shell(engine, stdin, stdout)

    output = stdout.getvalue()
    assert output.startswith("dirspace shell (local namespace)")
    assert "> " in output
    assert output.rstrip().endswith("Session closed.")

# -----------------------------------------------------------------------------
# SCRIPT RUNNER
# -----------------------------------------------------------------------------

@pytest.fixture
def script_file(tmp_path: Path) -> Path:
    script = tmp_path / "commands.txt"
    script.write_text(
        "# produce\n"
        "CREATE fruits\n"
        "CREATE fruits/apples\n"
        "MOVE fruits/apples vegetables\n"
        "LIST\n",
        encoding="utf-8",
    )
    return script


def test_run_prints_transcript(script_file: Path, capsys: pytest.CaptureFixture[str]) -> None:
    code = main(["--use-defaults", "run", str(script_file)])

    assert code == 0
    assert capsys.readouterr().out == (
        "> CREATE fruits\n"
        "> CREATE fruits/apples\n"
        "> MOVE fruits/apples vegetables\n"
        "Cannot move directory - path does not exist\n"
        "> LIST\n"
        "fruits\n"
        "  apples\n"
    )


def test_run_strict_fails_on_any_error(script_file: Path) -> None:
    assert main(["--use-defaults", "run", str(script_file), "--strict"]) == 1


def test_run_missing_script(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    code = main(["--use-defaults", "run", str(tmp_path / "nope.txt")])

    assert code == 2
    assert "Cannot read command script" in capsys.readouterr().err


def test_run_remote_transport_failure(script_file: Path, capsys: pytest.CaptureFixture[str]) -> None:
    client = MagicMock(spec=NamespaceBackend)
    client.create.side_effect = NamespaceClientError("timed out")

    with patch("dirspace.interface.cli.app.DirectoryApiClient", return_value=client) as factory:
        code = main(["--use-defaults", "run", str(script_file), "--remote", "http://remote:1"])

    assert code == 1
    factory.assert_called_once_with("http://remote:1", timeout=10.0)
    assert "timed out" in capsys.readouterr().err
    client.close.assert_called_once()


def test_run_remote_closes_http_session(script_file: Path) -> None:
    session = MagicMock(spec=requests.Session)
    session.headers = {}
    response = MagicMock(ok=True, status_code=200)
    response.json.return_value = {"message": "ok", "structure": "fruits"}
    session.request.return_value = response

    with patch("dirspace.infra.network.directory_client.requests.Session", return_value=session):
        code = main(["--use-defaults", "run", str(script_file), "--remote", "http://remote:1"])

    assert code == 0
    assert session.request.call_count == 4
    session.close.assert_called_once()


def test_shell_closes_backend_on_exit(monkeypatch: pytest.MonkeyPatch) -> None:
    client = MagicMock(spec=NamespaceBackend)
    monkeypatch.setattr("sys.stdin", io.StringIO("QUIT\n"))

    with patch("dirspace.interface.cli.app.DirectoryApiClient", return_value=client):
        assert main(["--use-defaults", "shell", "--remote"]) == 0

    client.close.assert_called_once()

# -----------------------------------------------------------------------------
# ROUTING AND CONFIGURATION
# -----------------------------------------------------------------------------

def test_no_command_returns_usage_error(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["--use-defaults"]) == 2
    assert "usage" in capsys.readouterr().err


def test_dump_config(capsys: pytest.CaptureFixture[str], monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("DIRSPACE_PORT", "8765")

    code = main(["--use-defaults", "--dump-config", "serve", "--host", "0.0.0.0"])

    assert code == 0
    conf = json.loads(capsys.readouterr().out)
    assert conf["port"] == 8765
    assert conf["host"] == "0.0.0.0"


def test_cli_overrides_beat_environment(capsys: pytest.CaptureFixture[str], monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("DIRSPACE_PORT", "8765")

    main(["--use-defaults", "--dump-config", "serve", "--port", "9100"])

    assert json.loads(capsys.readouterr().out)["port"] == 9100


def test_serve_delegates_to_server() -> None:
    with patch("dirspace.interface.http.server.run_server") as mock_run:
        code = main(["--use-defaults", "serve", "--port", "9100"])

    assert code == 0
    mock_run.assert_called_once_with("127.0.0.1", 9100, log_level="INFO")


def test_keyboard_interrupt_returns_130(script_file: Path) -> None:
    with patch("dirspace.interface.cli.app._run_script", side_effect=KeyboardInterrupt):
        assert main(["--use-defaults", "run", str(script_file)]) == 130


def test_save_config_persists_effective_settings(
        isolated_home: Path,
        capsys: pytest.CaptureFixture[str],
) -> None:
    code = main(["--use-defaults", "--save-config", "serve", "--port", "9200"])

    assert code == 0
    saved = json.loads((isolated_home / "config.json").read_text(encoding="utf-8"))
    assert saved["port"] == 9200
    assert "Configuration saved to" in capsys.readouterr().out

    # The saved file is picked up when defaults are not forced
    main(["--dump-config"])
    assert json.loads(capsys.readouterr().out)["port"] == 9200


def test_save_config_failure_returns_1(capsys: pytest.CaptureFixture[str]) -> None:
    with patch("dirspace.interface.cli.app.save_config", return_value=False):
        assert main(["--use-defaults", "--save-config"]) == 1
    assert "Could not write configuration" in capsys.readouterr().err
