"""Exception classes for the Solana RPC gateway."""

from enum import Enum
from typing import Any, Dict, Optional


class ErrorCode(Enum):
    """Error codes for gateway exceptions."""
    UNKNOWN_ERROR = 1000
    CONFIGURATION_ERROR = 1001
    VALIDATION_ERROR = 1002

    RPC_ERROR = 3000


class GatewayError(Exception):
    """Base exception class for all gateway errors."""

    def __init__(
        self,
        message: str,
        error_code: ErrorCode = ErrorCode.UNKNOWN_ERROR,
        details: Optional[Dict[str, Any]] = None
    ):
        """Initialize a new GatewayError.

        Args:
            message: Error message
            error_code: Error code from ErrorCode enum
            details: Additional error details
        """
        self.message = message
        self.error_code = error_code
        self.details = details or {}
        super().__init__(message)


class ConfigurationError(GatewayError):
    """Raised when the environment holds an invalid setting."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message, ErrorCode.CONFIGURATION_ERROR, details)


class InvalidPublicKeyError(GatewayError):
    """Raised when a string does not parse into a Solana public key."""

    def __init__(self, pubkey: str, reason: str):
        super().__init__(
            reason,
            ErrorCode.VALIDATION_ERROR,
            details={"pubkey": pubkey}
        )
        self.pubkey = pubkey


class RpcCallError(GatewayError):
    """Raised when the node answers a call without the requested value."""

    def __init__(self, message: str, method: Optional[str] = None):
        super().__init__(message, ErrorCode.RPC_ERROR, details={"method": method})
        self.method = method
