from __future__ import annotations

"""
Text Command Parser.

Translates free-text lines such as 'CREATE fruits/apples' or
'move a b' into structured commands. The keyword is case-insensitive;
arguments are whitespace-separated and kept verbatim.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional

from dirspace.domain.constants import ERROR_MESSAGES


class CommandType(str, Enum):
    """Supported namespace commands."""

    CREATE = "CREATE"
    MOVE = "MOVE"
    DELETE = "DELETE"
    LIST = "LIST"


class CommandSyntaxError(ValueError):
    """Raised when a command line cannot be mapped to a namespace operation."""


@dataclass(frozen=True)
class Command:
    """
    A parsed namespace command.

    Attributes:
        type: Operation to perform.
        args: Positional arguments in the order typed.
        raw: The original, stripped input line.
    """
    type: CommandType
    args: List[str] = field(default_factory=list)
    raw: str = ""

    @property
    def path(self) -> Optional[str]:
        return self.args[0] if self.args else None

    @property
    def dest_path(self) -> Optional[str]:
        return self.args[1] if len(self.args) > 1 else None

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def parse_command(line: str) -> Optional[Command]:
    """
    Parse a single command line.

    Args:
        line: Raw text as typed by the user.

    Returns:
        Optional[Command]: The parsed command, or None for blank input.

    Raises:
        CommandSyntaxError: Unknown keyword or missing arguments.
    """
    stripped = (line or "").strip()
    if not stripped:
        return None

    keyword, *args = stripped.split()
    try:
        command_type = CommandType(keyword.upper())
    except ValueError:
        raise CommandSyntaxError(ERROR_MESSAGES["INVALID_COMMAND"]) from None

    if command_type in (CommandType.CREATE, CommandType.DELETE) and not args:
        raise CommandSyntaxError(ERROR_MESSAGES["INVALID_PATH"])
    if command_type is CommandType.MOVE and len(args) < 2:
        raise CommandSyntaxError(ERROR_MESSAGES["MISSING_PATHS"])

    return Command(type=command_type, args=args, raw=stripped)


def format_echo(line: str) -> str:
    """Render the transcript echo of a command: '> KEYWORD arg1 arg2'."""
    parts = line.strip().split()
    if not parts:
        return ">"
    return " ".join([f"> {parts[0].upper()}"] + parts[1:])
