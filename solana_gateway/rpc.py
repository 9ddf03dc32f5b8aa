"""Helpers around the solana-py async RPC client."""

# Standard library imports
from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

# Third-party library imports
from solana.rpc.async_api import AsyncClient
from solana.rpc.commitment import Commitment
from solana.rpc.core import RPCException
from solders.pubkey import Pubkey
from solders.transaction_status import TransactionConfirmationStatus, TransactionStatus

# Internal imports
from solana_gateway.errors import InvalidPublicKeyError
from solana_gateway.logging_config import get_logger

logger = get_logger(__name__)

# JSON-RPC codes of the node errors solders parses into message types
RPC_ERROR_CODES = {
    "BlockCleanedUpMessage": -32001,
    "SendTransactionPreflightFailureMessage": -32002,
    "BlockNotAvailableMessage": -32004,
    "NodeUnhealthyMessage": -32005,
    "SlotSkippedMessage": -32007,
    "LongTermStorageSlotSkippedMessage": -32009,
    "KeyExcludedFromSecondaryIndexMessage": -32010,
    "BlockStatusNotAvailableYetMessage": -32014,
    "UnsupportedTransactionVersionMessage": -32015,
    "MinContextSlotNotReachedMessage": -32016,
    "InvalidParamsMessage": -32602,
}


@asynccontextmanager
async def open_client(endpoint: str, commitment: str) -> AsyncIterator[AsyncClient]:
    """Open a fresh RPC client and close it once the caller is done.

    Args:
        endpoint: JSON-RPC endpoint URL
        commitment: Default commitment level for the client's calls
    """
    client = AsyncClient(endpoint, commitment=Commitment(commitment))
    logger.debug("Opened RPC client", endpoint=endpoint.split("?")[0], commitment=commitment)
    try:
        yield client
    finally:
        await client.close()


def parse_pubkey(value: str) -> Pubkey:
    """Parse a base58 string into a public key.

    Raises:
        InvalidPublicKeyError: If the string is not a valid public key
    """
    try:
        return Pubkey.from_string(value)
    except ValueError as e:
        raise InvalidPublicKeyError(value, str(e))


def satisfies_commitment(status: Optional[TransactionStatus], commitment: str) -> bool:
    """Check whether a signature status has reached the given commitment.

    A missing status (the node has not seen the signature yet) and a
    transaction that failed both count as not confirmed.
    """
    if status is None or status.err is not None:
        return False

    if commitment == "finalized":
        return status.confirmations is None

    if commitment == "confirmed":
        if status.confirmation_status is not None:
            return status.confirmation_status != TransactionConfirmationStatus.Processed
        return status.confirmations is None or status.confirmations > 1

    return True


async def confirm_transaction(client: AsyncClient, signature, commitment: str) -> bool:
    """Ask the node whether a signature has reached the given commitment."""
    response = await client.get_signature_statuses([signature])
    return satisfies_commitment(response.value[0], commitment)


def describe_rpc_error(exc: Exception) -> str:
    """Readable text for a failed RPC call.

    solana-py raises ``RPCException`` with the node's parsed error object as
    its argument; its message (and code, where known) replace the object's
    repr.
    """
    if isinstance(exc, RPCException) and exc.args:
        error = exc.args[0]
        message = getattr(error, "message", None)
        if message is not None:
            code = getattr(error, "code", None)
            if code is None:
                code = RPC_ERROR_CODES.get(type(error).__name__)
            if code is not None:
                return f"RPC response error {code}: {message}"
            return message
    return str(exc)
