"""
Application entry point for the Solana RPC gateway.

This module is a wrapper around the application defined in solana_gateway.app.
It provides a convenient entry point for running the API server.
"""

import uvicorn

from solana_gateway.app import app
from solana_gateway.config import get_server_config

__all__ = ["app"]

if __name__ == "__main__":
    server_config = get_server_config()

    uvicorn.run(
        "solana_gateway.app:app",
        host=server_config.host,
        port=server_config.port,
        log_level=server_config.log_level.lower(),
        reload=server_config.debug
    )
