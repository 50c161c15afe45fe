from __future__ import annotations

"""
FileSystem Infrastructure Layer.

Provides cross-platform resolution of the application data directory and
a helper for reading command scripts. Script paths expand only a leading
~; other characters such as $ are taken literally.
The namespace itself never touches the disk; only configuration, logs and
input scripts do.
"""

import os
import sys
from typing import List

# -----------------------------------------------------------------------------
# GLOBAL CONSTANTS
# -----------------------------------------------------------------------------

APP_DIR_NAME = "dirspace"
UNIX_APP_DIR_NAME = ".dirspace"
HOME_ENV_VAR = "DIRSPACE_HOME"
STDIN_MARKER = "-"

# -----------------------------------------------------------------------------
# PATH RESOLUTION API
# -----------------------------------------------------------------------------

def get_user_data_dir() -> str:
    """
    Resolve the standard OS-specific directory for persistent application data.

    Automatically creates the hierarchy if it does not exist.
    Standards:
    - Explicit: $DIRSPACE_HOME
    - Windows: %LOCALAPPDATA%/dirspace
    - Linux/Mac: ~/.dirspace

    Returns:
        str: Absolute path to the application data directory.
    """
    path: str = os.environ.get(HOME_ENV_VAR, "").strip()

    # Windows specific resolution
    if not path and os.name == "nt":
        base = os.environ.get("LOCALAPPDATA") or os.environ.get("APPDATA")
        if base:
            path = os.path.join(base, APP_DIR_NAME)

    # Posix fallback (Linux/Mac)
    if not path:
        path = os.path.join(os.path.expanduser("~"), UNIX_APP_DIR_NAME)

    # Idempotent directory creation
    try:
        os.makedirs(path, exist_ok=True)
    except OSError:
        pass

    return os.path.abspath(path)

# -----------------------------------------------------------------------------
# SCRIPT INPUT API
# -----------------------------------------------------------------------------

def read_script_lines(source: str) -> List[str]:
    """
    Read a command script, one command per line.

    Args:
        source: File path, or '-' for standard input.

    Returns:
        List[str]: Raw lines without trailing newlines.

    Raises:
        OSError: The file cannot be opened or read.
    """
    if source == STDIN_MARKER:
        return sys.stdin.read().splitlines()

    with open(os.path.expanduser(source), "r", encoding="utf-8") as f:
        return f.read().splitlines()
