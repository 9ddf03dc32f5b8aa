"""Configuration module for the Solana RPC gateway."""

# Standard library imports
import os
import re
from dataclasses import dataclass, field
from functools import lru_cache
from typing import Any, Callable, List, Optional

# Third-party library imports
from dotenv import load_dotenv

# Internal imports
from solana_gateway.constants import (
    COMMITMENT_LEVELS,
    DEFAULT_AIRDROP_POLL_INTERVAL,
    DEFAULT_HOST,
    DEFAULT_PORT,
    DEVNET_RPC_URL,
    LOCAL_RPC_URL,
)
from solana_gateway.errors import ConfigurationError

# Load environment variables from .env file
load_dotenv()


def get_env_var(key: str, default: Any = None,
                validator: Optional[Callable[[str], Any]] = None) -> Any:
    """Get and validate environment variable.

    Args:
        key: Environment variable name
        default: Default value if not present
        validator: Optional validation function

    Returns:
        The environment variable value or default

    Raises:
        ConfigurationError: If the value fails validation
    """
    value = os.environ.get(key)

    if value is None:
        return default

    if validator is not None:
        try:
            return validator(value)
        except ValueError as e:
            raise ConfigurationError(
                f"Invalid value for environment variable '{key}': {str(e)}",
                details={"setting": key, "value": value}
            )

    return value


def bool_validator(value: str) -> bool:
    """Convert a string flag to boolean."""
    return value.lower() in ("true", "1", "yes", "y", "on")


def int_validator(value: str) -> int:
    """Validate and convert string to integer.

    Raises:
        ValueError: If not a valid integer
    """
    try:
        return int(value)
    except ValueError:
        raise ValueError(f"'{value}' is not a valid integer")


def port_validator(value: str) -> int:
    """Validate a TCP port number."""
    port = int_validator(value)
    if not 0 < port < 65536:
        raise ValueError(f"'{value}' is not a valid port")
    return port


def interval_validator(value: str) -> float:
    """Validate a non-negative number of seconds."""
    try:
        seconds = float(value)
    except ValueError:
        raise ValueError(f"'{value}' is not a number")
    if seconds < 0:
        raise ValueError("interval must not be negative")
    return seconds


def url_validator(value: str) -> str:
    """Validate URL format.

    Raises:
        ValueError: If not a valid URL format
    """
    url_pattern = re.compile(
        r'^(https?):\/\/'  # http:// or https://
        r'(?:(?:[A-Z0-9](?:[A-Z0-9-]{0,61}[A-Z0-9])?\.)+(?:[A-Z]{2,6}\.?|[A-Z0-9-]{2,}\.?)|'  # domain
        r'localhost|'  # localhost
        r'\d{1,3}\.\d{1,3}\.\d{1,3}\.\d{1,3})'  # or IPv4
        r'(?::\d+)?'  # optional port
        r'(?:/?|[/?]\S+)$', re.IGNORECASE)

    if not url_pattern.match(value):
        raise ValueError(f"'{value}' is not a valid URL")
    return value


def commitment_validator(value: str) -> str:
    """Validate Solana commitment level.

    Raises:
        ValueError: If not a valid commitment level
    """
    if value.lower() not in COMMITMENT_LEVELS:
        raise ValueError(f"Commitment must be one of: {', '.join(COMMITMENT_LEVELS)}")
    return value.lower()


def log_level_validator(value: str) -> str:
    """Validate log level.

    Raises:
        ValueError: If not a valid log level
    """
    valid_levels = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
    upper_value = value.upper()
    if upper_value not in valid_levels:
        raise ValueError(f"Log level must be one of: {', '.join(valid_levels)}")
    return upper_value


def environment_validator(value: str) -> str:
    """Validate environment name.

    Raises:
        ValueError: If not a valid environment name
    """
    valid_environments = ("development", "testing", "staging", "production")
    if value.lower() not in valid_environments:
        raise ValueError(f"Environment must be one of: {', '.join(valid_environments)}")
    return value.lower()


def list_validator(value: str) -> List[str]:
    """Split a comma separated list, dropping empty items."""
    return [item.strip() for item in value.split(",") if item.strip()]


@dataclass
class GatewayConfig:
    """Upstream RPC settings used by the request handlers."""

    rpc_url: str = LOCAL_RPC_URL
    block_rpc_url: str = DEVNET_RPC_URL
    commitment: str = "confirmed"
    airdrop_poll_interval: float = DEFAULT_AIRDROP_POLL_INTERVAL


@lru_cache()
def get_gateway_config() -> GatewayConfig:
    """Get gateway configuration from environment variables.

    Returns:
        GatewayConfig instance

    Raises:
        ConfigurationError: If environment variables fail validation
    """
    return GatewayConfig(
        rpc_url=get_env_var("SOLANA_RPC_URL", LOCAL_RPC_URL, validator=url_validator),
        block_rpc_url=get_env_var("SOLANA_BLOCK_RPC_URL", DEVNET_RPC_URL,
                                  validator=url_validator),
        commitment=get_env_var("SOLANA_COMMITMENT", "confirmed",
                               validator=commitment_validator),
        airdrop_poll_interval=get_env_var("AIRDROP_POLL_INTERVAL",
                                          DEFAULT_AIRDROP_POLL_INTERVAL,
                                          validator=interval_validator)
    )


@dataclass
class ServerConfig:
    """Configuration for the HTTP server."""

    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT
    debug: bool = False
    environment: str = "development"
    log_level: str = "INFO"
    cors_origins: List[str] = field(default_factory=lambda: ["*"])

    @property
    def bind_address(self) -> str:
        """Get the bind address for the server."""
        return f"{self.host}:{self.port}"


@lru_cache()
def get_server_config() -> ServerConfig:
    """Get server configuration from environment variables.

    Returns:
        ServerConfig instance

    Raises:
        ConfigurationError: If environment variables fail validation
    """
    return ServerConfig(
        host=get_env_var("HOST", DEFAULT_HOST),
        port=get_env_var("PORT", DEFAULT_PORT, validator=port_validator),
        debug=get_env_var("DEBUG", False, validator=bool_validator),
        environment=get_env_var("ENVIRONMENT", "development", validator=environment_validator),
        log_level=get_env_var("LOG_LEVEL", "INFO", validator=log_level_validator),
        cors_origins=get_env_var("CORS_ORIGINS", ["*"], validator=list_validator)
    )
