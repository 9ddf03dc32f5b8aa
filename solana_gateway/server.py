"""Process entry point: serve the gateway with uvicorn."""

import uvicorn

from solana_gateway.config import get_server_config
from solana_gateway.logging_config import get_logger

logger = get_logger(__name__)


def run_server() -> None:
    """Bind the configured address and serve the gateway until stopped."""
    server_config = get_server_config()
    logger.info("The server starts now", address=server_config.bind_address)

    try:
        uvicorn.run(
            "solana_gateway.app:app",
            host=server_config.host,
            port=server_config.port,
            log_level=server_config.log_level.lower(),
            reload=server_config.debug
        )
    except Exception as e:
        logger.critical("Failed to start server", error=str(e))
        raise
