"""Route table for the gateway API."""

# Standard library imports
from typing import AsyncIterator

# Third-party library imports
from fastapi import APIRouter, Depends, Path
from solana.rpc.async_api import AsyncClient

# Internal imports
from solana_gateway import handlers
from solana_gateway.config import GatewayConfig, get_gateway_config
from solana_gateway.models import (
    AccountInfoResult,
    AirdropRequest,
    AirdropResult,
    BalanceResult,
    BlockResult,
)
from solana_gateway.rpc import open_client

router = APIRouter(tags=["solana"])


async def local_rpc_client(
    config: GatewayConfig = Depends(get_gateway_config),
) -> AsyncIterator[AsyncClient]:
    """Fresh client for the balance, account and airdrop endpoint."""
    async with open_client(config.rpc_url, config.commitment) as client:
        yield client


async def block_rpc_client(
    config: GatewayConfig = Depends(get_gateway_config),
) -> AsyncIterator[AsyncClient]:
    """Fresh client for the block lookup endpoint."""
    async with open_client(config.block_rpc_url, "finalized") as client:
        yield client


@router.get("/getBalance/{pubkey}", response_model=BalanceResult)
async def get_balance(pubkey: str, client: AsyncClient = Depends(local_rpc_client)):
    """Get the SOL balance of an account."""
    return await handlers.get_balance(client, pubkey)


@router.get("/getAccountInfo/{pubkey}", response_model=AccountInfoResult)
async def get_account_info(pubkey: str, client: AsyncClient = Depends(local_rpc_client)):
    """Get the raw account record of an account."""
    return await handlers.get_account_info(client, pubkey)


@router.get("/getBlock/{slot_number}", response_model=BlockResult)
async def get_block(
    slot_number: int = Path(..., ge=0, description="Slot to look up"),
    client: AsyncClient = Depends(block_rpc_client),
):
    """Get the block produced in a slot."""
    return await handlers.get_block(client, slot_number)


@router.post("/requestAirdrop", response_model=AirdropResult)
async def request_airdrop(
    request: AirdropRequest,
    client: AsyncClient = Depends(local_rpc_client),
    config: GatewayConfig = Depends(get_gateway_config),
):
    """Request an airdrop and wait for its confirmation."""
    return await handlers.request_airdrop(
        client,
        request,
        poll_interval=config.airdrop_poll_interval,
        commitment=config.commitment,
    )
