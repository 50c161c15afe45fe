from __future__ import annotations

"""
HTTP Server Runner.

Binds the FastAPI application to a socket with uvicorn. Logging stays
under the package's own configuration: uvicorn is told not to install
its default logging config.
"""

import logging
from typing import Optional

import uvicorn

from dirspace.core.namespace.engine import NamespaceEngine
from dirspace.interface.http.app import create_app

logger = logging.getLogger(__name__)


def run_server(
        host: str,
        port: int,
        engine: Optional[NamespaceEngine] = None,
        log_level: str = "info",
) -> None:
    """
    Serve the directory API until interrupted.

    Args:
        host: Interface to bind.
        port: TCP port to bind.
        engine: Engine to serve; a fresh one is created if omitted.
        log_level: uvicorn log level name.
    """
    app = create_app(engine)
    logger.info(f"Serving directory API on http://{host}:{port}")
    uvicorn.run(app, host=host, port=port, log_level=log_level.lower(), log_config=None)
