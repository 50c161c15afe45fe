from __future__ import annotations

"""
HTTP Service for the Directory Namespace.

Exposes the namespace engine as a single REST resource:

    GET    /api/v1/directory           -> list
    POST   /api/v1/directory           -> create   {"path"}
    PATCH  /api/v1/directory           -> move     {"path", "destPath"}
    DELETE /api/v1/directory?path=...  -> delete

Bodies are decoded by hand so malformed JSON maps to 415 rather than to
FastAPI's generic 422. All engine calls go through one lock held on the
application state; the engine itself is not thread-safe.
"""

import logging
import threading
from typing import Any, Dict, Optional

from fastapi import APIRouter, FastAPI, Query, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from dirspace.core.namespace.engine import NamespaceEngine
from dirspace.domain.constants import (
    APP_NAME,
    APP_VERSION,
    DIRECTORY_ROUTE,
    ERROR_MESSAGES,
    SUCCESS_MESSAGES,
)
from dirspace.domain.namespace_models import ErrorKind, OperationResult

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# RESPONSE MODELS
# -----------------------------------------------------------------------------

class MessageResponse(BaseModel):
    """Confirmation returned by successful mutations."""

    message: str


class ErrorResponse(BaseModel):
    """Failure payload shared by every endpoint."""

    error: str


class StructureResponse(BaseModel):
    """Namespace listing returned by GET."""

    structure: str

# -----------------------------------------------------------------------------
# APPLICATION FACTORY
# -----------------------------------------------------------------------------

def create_app(engine: Optional[NamespaceEngine] = None) -> FastAPI:
    """
    Build the FastAPI application around a namespace engine.

    Args:
        engine: Engine to serve; a fresh empty one is created if omitted.

    Returns:
        FastAPI: Configured application instance.
    """
    app = FastAPI(title=APP_NAME, version=APP_VERSION)
    app.state.engine = engine if engine is not None else NamespaceEngine()
    app.state.lock = threading.Lock()
    app.include_router(_build_router())
    return app


def _build_router() -> APIRouter:
    router = APIRouter(prefix=DIRECTORY_ROUTE, tags=["directory"])

    error_responses: Dict[int, Dict[str, Any]] = {
        400: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
        415: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    }

    @router.get("", response_model=StructureResponse, responses={500: {"model": ErrorResponse}})
    def list_directories(request: Request) -> JSONResponse:
        """Retrieve the full namespace listing."""
        try:
            with request.app.state.lock:
                structure = request.app.state.engine.list()
        except Exception:
            logger.exception("Failed to retrieve directories")
            return _error(500, ERROR_MESSAGES["FAILED_RETRIEVE"])
        return JSONResponse(status_code=200, content=StructureResponse(structure=structure).model_dump())

    @router.post("", status_code=201, response_model=MessageResponse, responses=error_responses)
    async def create_directory(request: Request) -> JSONResponse:
        """Create a directory path."""
        body = await _read_json(request)
        if body is None:
            return _error(415, ERROR_MESSAGES["INVALID_REQUEST"])

        path = body.get("path")
        if not _is_path(path):
            logger.warning("Missing path in create request")
            return _error(400, ERROR_MESSAGES["INVALID_PATH"])

        try:
            with request.app.state.lock:
                result = request.app.state.engine.create(path)
        except Exception:
            logger.exception("Unexpected error in create")
            return _error(500, ERROR_MESSAGES["FAILED_CREATE"])

        if not result.ok:
            logger.warning(f"Failed to create directory: {result.error}")
            return _error(400, result.error)

        logger.info(f"Created directory '{path}'")
        return _message(201, SUCCESS_MESSAGES["DIRECTORY_CREATED"])

    @router.patch("", response_model=MessageResponse, responses=error_responses)
    async def move_directory(request: Request) -> JSONResponse:
        """Move a directory under another directory."""
        body = await _read_json(request)
        if body is None:
            return _error(415, ERROR_MESSAGES["INVALID_REQUEST"])

        source, dest = body.get("path"), body.get("destPath")
        if not _is_path(source) or not _is_path(dest):
            logger.warning("Missing required paths in move request")
            return _error(400, ERROR_MESSAGES["MISSING_PATHS"])

        try:
            with request.app.state.lock:
                result = request.app.state.engine.move(source, dest)
        except Exception:
            logger.exception("Unexpected error in move")
            return _error(500, ERROR_MESSAGES["FAILED_UPDATE"])

        if not result.ok:
            logger.warning(f"Failed to move directory: {result.error}")
            return _error(_move_failure_status(result), result.error)

        logger.info(f"Moved directory '{source}' under '{dest}'")
        return _message(200, SUCCESS_MESSAGES["DIRECTORY_UPDATED"])

    @router.delete("", response_model=MessageResponse, responses=error_responses)
    def delete_directory(request: Request, path: Optional[str] = Query(default=None)) -> JSONResponse:
        """Delete a directory and its subtree."""
        if not path:
            logger.warning("Missing path in delete request")
            return _error(400, ERROR_MESSAGES["INVALID_PATH"])

        try:
            with request.app.state.lock:
                result = request.app.state.engine.delete(path)
        except Exception:
            logger.exception("Unexpected error in delete")
            return _error(500, ERROR_MESSAGES["FAILED_DELETE"])

        if not result.ok:
            logger.warning(f"Failed to delete directory: {result.error}")
            status = 404 if result.kind is ErrorKind.NOT_FOUND else 400
            return _error(status, result.error)

        logger.info(f"Deleted directory '{path}'")
        return _message(200, SUCCESS_MESSAGES["DIRECTORY_REMOVED"])

    return router

# -----------------------------------------------------------------------------
# HELPERS
# -----------------------------------------------------------------------------

async def _read_json(request: Request) -> Optional[Dict[str, Any]]:
    """Decode the request body; None signals an unparseable payload."""
    try:
        body = await request.json()
    except ValueError:
        logger.error("Invalid JSON in request")
        return None
    return body if isinstance(body, dict) else {}


def _is_path(value: Any) -> bool:
    return isinstance(value, str) and bool(value)


def _move_failure_status(result: OperationResult) -> int:
    # Only a missing source or destination is reported as not found
    if result.kind is ErrorKind.CANNOT_MOVE and result.error == ERROR_MESSAGES["CANNOT_MOVE"]:
        return 404
    return 400


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=ErrorResponse(error=message).model_dump())


def _message(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=MessageResponse(message=message).model_dump())
