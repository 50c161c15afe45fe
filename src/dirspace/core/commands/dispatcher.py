from __future__ import annotations

"""
Command Dispatcher.

Executes parsed text commands against any namespace backend (the local
engine or the HTTP client) and renders the transcript block shown to the
user:

    > CREATE fruits
    > LIST
    fruits
    > DELETE vegetables
    Cannot delete vegetables - vegetables does not exist
"""

import logging
from dataclasses import dataclass
from typing import Iterable, List, Optional

from dirspace.core.commands.parser import (
    Command,
    CommandSyntaxError,
    CommandType,
    format_echo,
    parse_command,
)
from dirspace.core.namespace.base import NamespaceBackend
from dirspace.domain.namespace_models import OperationResult

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# RESULT MODELS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class CommandOutcome:
    """
    Result of running one command line.

    Attributes:
        ok: Whether the command succeeded.
        echo: Normalized echo of the command ('> CREATE fruits'); empty for
              syntax errors, which never reach the backend.
        output: Listing for LIST, the failure message for failed operations.
        error: Message describing the failure, empty on success.
    """
    ok: bool
    echo: str = ""
    output: str = ""
    error: str = ""

    @property
    def transcript(self) -> str:
        if not self.output:
            return self.echo
        return f"{self.echo}\n{self.output}" if self.echo else self.output

# -----------------------------------------------------------------------------
# DISPATCHER
# -----------------------------------------------------------------------------

class CommandDispatcher:
    """Bridges text commands to a namespace backend."""

    def __init__(self, backend: NamespaceBackend):
        self._backend = backend

    @property
    def backend(self) -> NamespaceBackend:
        return self._backend

    def run_line(self, line: str) -> Optional[CommandOutcome]:
        """
        Parse and execute one command line.

        Args:
            line: Raw user input.

        Returns:
            Optional[CommandOutcome]: None for blank input.
        """
        try:
            command = parse_command(line)
        except CommandSyntaxError as e:
            logger.debug(f"Rejected command line '{line.strip()}': {e}")
            return CommandOutcome(ok=False, error=str(e))

        if command is None:
            return None
        return self.execute(command)

    def execute(self, command: Command) -> CommandOutcome:
        """Run an already-parsed command and format its transcript block."""
        echo = format_echo(command.raw)

        if command.type is CommandType.LIST:
            return CommandOutcome(ok=True, echo=echo, output=self._backend.list())

        result = self._apply(command)
        if result.ok:
            return CommandOutcome(ok=True, echo=echo)
        return CommandOutcome(ok=False, echo=echo, output=result.error, error=result.error)

    def run_script(self, lines: Iterable[str]) -> List[CommandOutcome]:
        """
        Execute a sequence of command lines in order.

        Blank lines and lines starting with '#' are skipped. Execution
        continues past failed commands.
        """
        outcomes: List[CommandOutcome] = []
        for line in lines:
            if line.strip().startswith("#"):
                continue
            outcome = self.run_line(line)
            if outcome is not None:
                outcomes.append(outcome)
        return outcomes

    def _apply(self, command: Command) -> OperationResult:
        if command.type is CommandType.CREATE:
            return self._backend.create(command.path)
        if command.type is CommandType.MOVE:
            return self._backend.move(command.path, command.dest_path)
        return self._backend.delete(command.path)


def render_transcript(outcomes: Iterable[CommandOutcome]) -> str:
    """Join transcript blocks; syntax errors appear as bare message lines."""
    blocks = [o.transcript or o.error for o in outcomes]
    return "\n".join(b for b in blocks if b)
