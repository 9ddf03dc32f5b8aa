"""
FastAPI application for the Solana RPC gateway.

This module builds the application, sets up middleware, the route table
and error handlers, and manages the application lifecycle.
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from solana_gateway import __version__
from solana_gateway.config import get_gateway_config, get_server_config
from solana_gateway.error_handlers import register_error_handlers
from solana_gateway.logging_config import configure_logging, get_logger
from solana_gateway.routes import router

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Manage application lifecycle events.

    Args:
        app: The FastAPI application instance
    """
    server_config = get_server_config()
    configure_logging(server_config.log_level)

    gateway_config = get_gateway_config()
    logger.info(
        "Gateway starting",
        version=__version__,
        environment=server_config.environment,
        rpc_url=gateway_config.rpc_url,
        block_rpc_url=gateway_config.block_rpc_url,
        commitment=gateway_config.commitment
    )

    yield

    logger.info("Gateway shutting down")


def create_application() -> FastAPI:
    """
    Create and configure the FastAPI application.

    Returns:
        The configured FastAPI application
    """
    server_config = get_server_config()

    app = FastAPI(
        title="Solana RPC Gateway",
        description="Relays balance, account, block and airdrop requests to a Solana node",
        version=__version__,
        debug=server_config.debug,
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=server_config.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(router)
    register_error_handlers(app)

    @app.get("/health", tags=["system"])
    async def health_check():
        """Report that the gateway is up."""
        return {"status": "healthy"}

    return app


app = create_application()
