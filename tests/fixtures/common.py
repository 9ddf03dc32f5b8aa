"""Common test fixtures for the gateway tests.

This module provides fixtures and helpers reused across test modules.
"""

import json
from types import SimpleNamespace

import pytest
from unittest.mock import AsyncMock
from solana.rpc.async_api import AsyncClient
from solders.pubkey import Pubkey
from solders.signature import Signature
from solders.transaction_status import TransactionConfirmationStatus

from solana_gateway.config import get_gateway_config, get_server_config

VALID_PUBKEY = "11111111111111111111111111111111"
TOKEN_PROGRAM_ID = "TokenkegQfeZyiNwAJbNbGKPFXCWuBvf9Ss623VQ5DA"
INVALID_PUBKEYS = ["not-a-valid-key", "abc", "0OIl" * 11, ""]


def rpc_response(value):
    """Wrap a value the way solana-py responses carry it."""
    return SimpleNamespace(value=value)


def node_error(message, kind="SlotSkippedMessage", **attrs):
    """Build a parsed node error like the ones solders hands to RPCException."""
    return type(kind, (), dict(attrs, message=message))()


def signature_status(confirmation_status=TransactionConfirmationStatus.Confirmed,
                     confirmations=1, err=None):
    """Build a signature status as returned by getSignatureStatuses."""
    return SimpleNamespace(
        confirmation_status=confirmation_status,
        confirmations=confirmations,
        err=err,
    )


@pytest.fixture(autouse=True)
def clear_config_cache():
    """Make every test read configuration from a clean environment."""
    get_gateway_config.cache_clear()
    get_server_config.cache_clear()
    yield
    get_gateway_config.cache_clear()
    get_server_config.cache_clear()


@pytest.fixture
def sample_account():
    """Account record as solders exposes it."""
    return SimpleNamespace(
        lamports=1_500_000_000,
        data=b"\x01\x02\xff",
        owner=Pubkey.from_string(TOKEN_PROGRAM_ID),
        executable=False,
        rent_epoch=18446744073709551615,
    )


@pytest.fixture
def sample_block():
    """Block record as the node returns it."""
    return {
        "blockHeight": 300012,
        "blockTime": 1700000000,
        "blockhash": "5pWxsGYDN4WV2Hv2MnmMXq8M3bPq7t6XBjH4nC1wp3KQ",
        "parentSlot": 312344,
        "previousBlockhash": "EFkdhDYqLQAU9xyaz1sLoHMXUR5zaN6BLpz5k4dY97Dh",
        "transactions": [],
        "rewards": [],
    }


@pytest.fixture
def airdrop_signature():
    """Signature returned by requestAirdrop."""
    return Signature.default()


@pytest.fixture
def mock_rpc_client(sample_account, sample_block, airdrop_signature):
    """Create a mock RPC client with successful default answers."""
    client = AsyncMock(spec=AsyncClient)

    client.get_balance.return_value = rpc_response(2_500_000_000)
    client.get_account_info.return_value = rpc_response(sample_account)
    client.get_block.return_value = rpc_response(
        SimpleNamespace(to_json=lambda: json.dumps(sample_block))
    )
    client.request_airdrop.return_value = rpc_response(airdrop_signature)
    client.get_signature_statuses.return_value = rpc_response([signature_status()])

    return client
