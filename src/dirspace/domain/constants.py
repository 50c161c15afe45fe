from __future__ import annotations

"""
Domain Constants and Static Message Catalogue.

Provides centralized access to the user-facing messages returned by the
namespace engine and its adapters, along with API routing and versioning
constants shared by the HTTP service and its client.
"""

from typing import Dict

APP_NAME = "dirspace"
APP_VERSION = "1.0.0"

PATH_SEPARATOR = "/"
LIST_INDENT = "  "

# HTTP surface
API_PREFIX = "/api/v1"
DIRECTORY_ROUTE = f"{API_PREFIX}/directory"

# -----------------------------------------------------------------------------
# MESSAGE CATALOGUE
# -----------------------------------------------------------------------------

ERROR_MESSAGES: Dict[str, str] = {
    "DIRECTORY_EXISTS": "Directory already exists - name conflict",
    "INVALID_PATH": "Invalid path provided",
    "CANNOT_MOVE": "Cannot move directory - path does not exist",
    "MOVE_INTO_SELF": "Cannot move directory - destination is inside source",
    "INVALID_REQUEST": "Invalid request format",
    "MISSING_PATHS": "Both source and destination paths are required",
    "INVALID_COMMAND": "Invalid command. Use CREATE, MOVE, DELETE, or LIST",
    "FAILED_RETRIEVE": "Failed to retrieve directories",
    "FAILED_CREATE": "Failed to create directory",
    "FAILED_UPDATE": "Failed to move directory",
    "FAILED_DELETE": "Failed to delete directory",
}

# Delete failures name the path as given and its first missing segment
DELETE_NOT_FOUND_TEMPLATE = "Cannot delete {path} - {segment} does not exist"

SUCCESS_MESSAGES: Dict[str, str] = {
    "DIRECTORY_CREATED": "Directory created successfully",
    "DIRECTORY_UPDATED": "Directory moved successfully",
    "DIRECTORY_REMOVED": "Directory deleted successfully",
}
