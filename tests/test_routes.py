"""Tests for the HTTP route table."""

import httpx
import pytest
from fastapi.testclient import TestClient
from solders.pubkey import Pubkey

from solana_gateway.app import app
from solana_gateway.config import GatewayConfig, get_gateway_config
from solana_gateway.routes import block_rpc_client, local_rpc_client
from tests.fixtures.common import TOKEN_PROGRAM_ID, VALID_PUBKEY, rpc_response


@pytest.fixture
def client(mock_rpc_client):
    """Create a test client whose RPC clients are mocks."""
    app.dependency_overrides[local_rpc_client] = lambda: mock_rpc_client
    app.dependency_overrides[block_rpc_client] = lambda: mock_rpc_client
    app.dependency_overrides[get_gateway_config] = lambda: GatewayConfig(airdrop_poll_interval=0)
    yield TestClient(app)
    app.dependency_overrides.clear()


class TestHealthCheck:
    """Tests for /health endpoint."""

    def test_health_check(self, client):
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json() == {"status": "healthy"}


class TestGetBalanceRoute:
    """Tests for GET /getBalance/{pubkey}."""

    def test_success(self, client):
        response = client.get(f"/getBalance/{VALID_PUBKEY}")

        assert response.status_code == 200
        assert response.json() == {"balance": 2.5}

    def test_invalid_pubkey(self, client, mock_rpc_client):
        """Errors travel in the body with a 200 status."""
        response = client.get("/getBalance/not-a-key")

        assert response.status_code == 200
        assert response.json() == {"error": "Wrong Pub key"}
        mock_rpc_client.get_balance.assert_not_awaited()

    def test_rpc_failure(self, client, mock_rpc_client):
        mock_rpc_client.get_balance.side_effect = httpx.ConnectError("Connection refused")

        response = client.get(f"/getBalance/{VALID_PUBKEY}")

        assert response.json() == {"error": "RPC URL error: Connection refused"}


class TestGetAccountInfoRoute:
    """Tests for GET /getAccountInfo/{pubkey}."""

    def test_success(self, client):
        response = client.get(f"/getAccountInfo/{VALID_PUBKEY}")

        assert response.status_code == 200
        assert response.json() == {
            "lamports": 1_500_000_000,
            "data": [1, 2, 255],
            "owner": TOKEN_PROGRAM_ID,
            "executable": False,
            "rent_epoch": 18446744073709551615,
        }

    def test_missing_account(self, client, mock_rpc_client):
        mock_rpc_client.get_account_info.return_value = rpc_response(None)

        response = client.get(f"/getAccountInfo/{VALID_PUBKEY}")

        assert response.status_code == 200
        assert response.json() == {
            "error": f"RPC Url error: AccountNotFound: pubkey={VALID_PUBKEY}"
        }

    def test_invalid_pubkey(self, client, mock_rpc_client):
        response = client.get("/getAccountInfo/not-a-key")

        data = response.json()
        assert list(data) == ["error"]
        assert data["error"].startswith("Wrong Pub key")
        mock_rpc_client.get_account_info.assert_not_awaited()


class TestGetBlockRoute:
    """Tests for GET /getBlock/{slot_number}."""

    def test_success(self, client, mock_rpc_client, sample_block):
        response = client.get("/getBlock/312345")

        assert response.status_code == 200
        assert response.json() == sample_block
        assert mock_rpc_client.get_block.await_args.args[0] == 312345

    @pytest.mark.parametrize("slot", ["abc", "-1", "1.5"])
    def test_non_integer_slot_rejected(self, client, mock_rpc_client, slot):
        """Bad slots never reach the handler."""
        response = client.get(f"/getBlock/{slot}")

        assert response.status_code == 422
        assert list(response.json()) == ["error"]
        mock_rpc_client.get_block.assert_not_awaited()

    def test_rpc_failure(self, client, mock_rpc_client):
        mock_rpc_client.get_block.side_effect = httpx.ConnectError("Connection refused")

        response = client.get("/getBlock/312345")

        assert response.status_code == 200
        assert response.json() == {"error": "RPC Error: Connection refused"}


class TestRequestAirdropRoute:
    """Tests for POST /requestAirdrop."""

    def test_success(self, client, mock_rpc_client, airdrop_signature):
        response = client.post("/requestAirdrop", json={"pubkey": VALID_PUBKEY, "amount": 2})

        assert response.status_code == 200
        assert response.json() == {"hash": str(airdrop_signature)}
        mock_rpc_client.request_airdrop.assert_awaited_once_with(
            Pubkey.from_string(VALID_PUBKEY), 2_000_000_000
        )

    def test_invalid_pubkey(self, client, mock_rpc_client):
        response = client.post("/requestAirdrop", json={"pubkey": "nope", "amount": 2})

        assert response.status_code == 200
        assert response.json()["error"].startswith("Invalid pubkey: ")
        mock_rpc_client.request_airdrop.assert_not_awaited()

    @pytest.mark.parametrize("body", [
        {"pubkey": VALID_PUBKEY},
        {"amount": 1},
        {"pubkey": VALID_PUBKEY, "amount": -1},
        {"pubkey": VALID_PUBKEY, "amount": "lots"},
        {"pubkey": VALID_PUBKEY, "amount": "3"},
        {"pubkey": VALID_PUBKEY, "amount": 1.5},
        {"pubkey": VALID_PUBKEY, "amount": 3.0},
        {"pubkey": VALID_PUBKEY, "amount": True},
    ])
    def test_malformed_body_rejected(self, client, mock_rpc_client, body):
        response = client.post("/requestAirdrop", json=body)

        assert response.status_code == 422
        assert list(response.json()) == ["error"]
        mock_rpc_client.request_airdrop.assert_not_awaited()

    def test_wrong_method(self, client):
        response = client.get("/requestAirdrop")

        assert response.status_code == 405
        assert response.json() == {"error": "Method Not Allowed"}


def test_unknown_path(client):
    response = client.get("/getTransaction/abc")

    assert response.status_code == 404
    assert response.json() == {"error": "Not Found"}
