"""
Entry point serving a filter chain in front of a backend over HTTP.
"""

import logging
import os
from typing import Optional

import uvicorn

from callflow.client.httpx_transport import HttpxTransport
from callflow.core.logging import setup_logging
from callflow.filter.chain import FilterChain
from callflow.filter.loader import load_filters_from_file
from callflow.filter.status_filter import StatusFilter
from callflow.server.app import create_app
from callflow.settings import Settings

logger = logging.getLogger(__name__)


def build_chain(settings: Settings, transport: Optional[HttpxTransport] = None) -> FilterChain:
    """
    Builds the chain served by `main`.

    Stages come from FILTERS_FILEPATH when set, otherwise a single StatusFilter
    configured from the environment. The target forwards calls to BACKEND_URL.
    """
    if transport is None:
        if not settings.get_backend_url():
            raise ValueError("BACKEND_URL must be set to serve a chain")
        transport = HttpxTransport.from_settings(settings)

    filepath = settings.get_filters_filepath()
    if filepath:
        stages = load_filters_from_file(filepath)
    else:
        stages = [StatusFilter.from_settings(settings)]

    return FilterChain(stages, transport, name="main")


def main():
    """Run the server."""
    settings = Settings()
    setup_logging(settings)

    host = os.getenv("HOST", "0.0.0.0")  # nosec B104
    port_str = os.getenv("PORT", "8000")
    try:
        port = int(port_str)
    except ValueError:
        raise ValueError(f"Invalid PORT value: {port_str}")

    chain = build_chain(settings)
    logger.info(f"Serving {chain!r} on {host}:{port}")
    uvicorn.run(create_app(chain, settings), host=host, port=port, log_level=settings.get_log_level().lower())


if __name__ == "__main__":
    main()
