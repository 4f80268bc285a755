"""FastAPI application for route discovery."""

import os

import uvicorn
from fastapi import FastAPI

from hyperroute import __version__
from hyperroute.api.endpoints import router
from hyperroute.logging_config import configure_logging

# Configuration from environment variables with sensible defaults
HOST = os.environ.get("HYPERROUTE_HOST", "0.0.0.0")
PORT = int(os.environ.get("HYPERROUTE_PORT", "8000"))
DEBUG = os.environ.get("HYPERROUTE_DEBUG", "false").lower() in ("true", "1", "yes")

app = FastAPI(
    title="Hyperliquid Asset Router",
    description="Multi-hop spot routing for Hyperliquid",
    version=__version__,
)

app.include_router(router)


@app.get("/health")
async def health() -> dict[str, object]:
    """Health check endpoint."""
    return {"status": "ok", "version": __version__}


def run() -> None:
    """Run the routing API server.

    Configuration via environment variables:
    - HYPERROUTE_HOST: Host to bind to (default: 0.0.0.0)
    - HYPERROUTE_PORT: Port to bind to (default: 8000)
    - HYPERROUTE_DEBUG: Enable debug logging and reload (default: false)
    """
    configure_logging(verbose=DEBUG)
    uvicorn.run(
        "hyperroute.api.main:app",
        host=HOST,
        port=PORT,
        reload=DEBUG,
    )


if __name__ == "__main__":
    run()
