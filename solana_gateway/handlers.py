"""Request handlers for the gateway endpoints.

Each handler takes an already opened RPC client and the parsed request
input, makes its call(s) and maps the outcome to a success or error model.
Handlers never raise: bad input and RPC failures both come back as
``ErrorResponse``.
"""

# Standard library imports
import asyncio
import json

# Third-party library imports
from solana.rpc.async_api import AsyncClient

# Internal imports
from solana_gateway.constants import (
    BLOCK_MAX_SUPPORTED_TRANSACTION_VERSION,
    BLOCK_TRANSACTION_ENCODING,
    DEFAULT_AIRDROP_POLL_INTERVAL,
    LAMPORTS_PER_SOL,
)
from solana_gateway.errors import InvalidPublicKeyError, RpcCallError
from solana_gateway.logging_config import get_logger
from solana_gateway.models import (
    AccountInfoResult,
    AccountRecord,
    AirdropRequest,
    AirdropResponse,
    AirdropResult,
    BalanceResponse,
    BalanceResult,
    BlockResponse,
    BlockResult,
    ErrorResponse,
)
from solana_gateway.rpc import confirm_transaction, describe_rpc_error, parse_pubkey

logger = get_logger(__name__)


def lamports_to_sol(lamports: int) -> float:
    """Convert lamports to SOL."""
    return lamports / LAMPORTS_PER_SOL


def sol_to_lamports(sol: int) -> int:
    """Convert whole SOL to lamports."""
    return sol * LAMPORTS_PER_SOL


async def get_balance(client: AsyncClient, pubkey: str) -> BalanceResult:
    """Look up the SOL balance of an account."""
    try:
        key = parse_pubkey(pubkey)
    except InvalidPublicKeyError:
        logger.info("Rejected public key", pubkey=pubkey, endpoint="getBalance")
        return ErrorResponse(error="Wrong Pub key")

    try:
        response = await client.get_balance(key)
    except Exception as e:
        reason = describe_rpc_error(e)
        logger.warning("Balance lookup failed", pubkey=pubkey, error=reason)
        return ErrorResponse(error=f"RPC URL error: {reason}")

    balance = lamports_to_sol(response.value)
    logger.info("Balance fetched", pubkey=pubkey, sol=balance)
    return BalanceResponse(balance=balance)


async def get_account_info(client: AsyncClient, pubkey: str) -> AccountInfoResult:
    """Fetch the full account record for a public key."""
    try:
        key = parse_pubkey(pubkey)
    except InvalidPublicKeyError as e:
        logger.info("Rejected public key", pubkey=pubkey, endpoint="getAccountInfo")
        return ErrorResponse(error=f"Wrong Pub key {e}")

    try:
        response = await client.get_account_info(key)
        account = response.value
        if account is None:
            raise RpcCallError(f"AccountNotFound: pubkey={key}", method="getAccountInfo")
    except Exception as e:
        reason = describe_rpc_error(e)
        logger.warning("Account lookup failed", pubkey=pubkey, error=reason)
        return ErrorResponse(error=f"RPC Url error: {reason}")

    return AccountRecord(
        lamports=account.lamports,
        data=list(account.data),
        owner=str(account.owner),
        executable=account.executable,
        rent_epoch=account.rent_epoch,
    )


async def get_block(client: AsyncClient, slot_number: int) -> BlockResult:
    """Fetch the block produced in a slot, transactions encoded as base58.

    Transaction details are full, rewards are left at the node default and
    the node's default "finalized" commitment applies.
    """
    try:
        response = await client.get_block(
            slot_number,
            encoding=BLOCK_TRANSACTION_ENCODING,
            max_supported_transaction_version=BLOCK_MAX_SUPPORTED_TRANSACTION_VERSION,
        )
        block = response.value
        if block is None:
            raise RpcCallError(f"Block not available for slot {slot_number}", method="getBlock")
    except Exception as e:
        reason = describe_rpc_error(e)
        logger.warning("Block lookup failed", slot=slot_number, error=reason)
        return ErrorResponse(error=f"RPC Error: {reason}")

    return BlockResponse(json.loads(block.to_json()))


async def request_airdrop(
    client: AsyncClient,
    request: AirdropRequest,
    poll_interval: float = DEFAULT_AIRDROP_POLL_INTERVAL,
    commitment: str = "confirmed",
) -> AirdropResult:
    """Request an airdrop and wait until the node confirms it.

    The confirmation check repeats every ``poll_interval`` seconds with no
    attempt limit; it only stops on confirmation or when the check itself
    fails.
    """
    try:
        receiver = parse_pubkey(request.pubkey)
    except InvalidPublicKeyError as e:
        logger.info("Rejected public key", pubkey=request.pubkey, endpoint="requestAirdrop")
        return ErrorResponse(error=f"Invalid pubkey: {e}")

    lamports = sol_to_lamports(request.amount)
    try:
        response = await client.request_airdrop(receiver, lamports)
    except Exception as e:
        reason = describe_rpc_error(e)
        logger.warning("Airdrop request failed", pubkey=request.pubkey, error=reason)
        return ErrorResponse(error=f"Airdrop request failed: {reason}")

    signature = response.value
    logger.info("Airdrop requested", pubkey=request.pubkey, lamports=lamports,
                signature=str(signature))

    attempt = 0
    while True:
        attempt += 1
        try:
            confirmed = await confirm_transaction(client, signature, commitment)
        except Exception as e:
            reason = describe_rpc_error(e)
            logger.warning("Airdrop confirmation failed", signature=str(signature),
                           attempt=attempt, error=reason)
            return ErrorResponse(error=f"Error confirming transaction: {reason}")

        if confirmed:
            break

        logger.debug("Airdrop not confirmed yet", signature=str(signature), attempt=attempt)
        await asyncio.sleep(poll_interval)

    logger.info("Airdrop confirmed", signature=str(signature), attempts=attempt)
    return AirdropResponse(hash=str(signature))
