"""
Tests for the Solana JSON-RPC adapter.
"""

import base64

import httpx
import pytest
from unittest.mock import AsyncMock, MagicMock
from solders.hash import Hash
from solders.keypair import Keypair

from solana_agent_kit.adapters.rpc_adapter import SolanaRpcAdapter
from solana_agent_kit.domains.errors import RpcError, TransactionError

RPC_URL = "https://rpc.example.com"


def rpc_response(result=None, error=None, status_code=200):
    body = {"jsonrpc": "2.0", "id": 1}
    if error is not None:
        body["error"] = error
    else:
        body["result"] = result
    return httpx.Response(status_code, json=body)


@pytest.fixture
def http_client():
    client = MagicMock(spec=httpx.AsyncClient)
    client.post = AsyncMock()
    client.aclose = AsyncMock()
    return client


@pytest.fixture
def rpc(http_client):
    return SolanaRpcAdapter(
        RPC_URL, http_client=http_client, confirm_timeout=0.05, confirm_interval=0
    )


def sent_payload(http_client):
    return http_client.post.call_args.kwargs["json"]


class TestRequest:
    """Test suite for the JSON-RPC request path."""

    @pytest.mark.asyncio
    async def test_returns_result(self, rpc, http_client):
        http_client.post.return_value = rpc_response({"value": 5})

        result = await rpc.request("getBalance", ["addr"])

        assert result == {"value": 5}
        http_client.post.assert_awaited_once()
        assert http_client.post.call_args.args[0] == RPC_URL
        payload = sent_payload(http_client)
        assert payload["method"] == "getBalance"
        assert payload["params"] == ["addr"]
        assert payload["jsonrpc"] == "2.0"

    @pytest.mark.asyncio
    async def test_ids_increment(self, rpc, http_client):
        http_client.post.return_value = rpc_response(1)

        await rpc.request("getSlot")
        first = sent_payload(http_client)["id"]
        await rpc.request("getSlot")

        assert sent_payload(http_client)["id"] == first + 1

    @pytest.mark.asyncio
    async def test_json_rpc_error(self, rpc, http_client):
        http_client.post.return_value = rpc_response(
            error={"code": -32002, "message": "insufficient lamports", "data": {"logs": []}}
        )

        with pytest.raises(RpcError) as exc_info:
            await rpc.request("sendTransaction", [])

        assert exc_info.value.code == -32002
        assert exc_info.value.data == {"logs": []}

    @pytest.mark.asyncio
    async def test_rate_limited(self, rpc, http_client):
        http_client.post.return_value = httpx.Response(429, text="Too many requests")

        with pytest.raises(RpcError, match="rate limit") as exc_info:
            await rpc.request("getBalance", [])
        assert exc_info.value.code == 429

    @pytest.mark.asyncio
    async def test_http_error_status(self, rpc, http_client):
        http_client.post.return_value = httpx.Response(503, text="unavailable")

        with pytest.raises(RpcError, match="503"):
            await rpc.request("getBalance", [])

    @pytest.mark.asyncio
    async def test_transport_error(self, rpc, http_client):
        http_client.post.side_effect = httpx.ConnectError("connection refused")

        with pytest.raises(RpcError, match="transport error"):
            await rpc.request("getBalance", [])


class TestRpcMethods:
    """Test suite for the typed RPC helpers."""

    @pytest.mark.asyncio
    async def test_get_balance(self, rpc, http_client):
        http_client.post.return_value = rpc_response({"context": {}, "value": 1500})
        owner = Keypair().pubkey()

        assert await rpc.get_balance(owner) == 1500
        assert sent_payload(http_client)["params"] == [
            str(owner),
            {"commitment": "confirmed"},
        ]

    @pytest.mark.asyncio
    async def test_get_token_balance_sums_accounts(self, rpc, http_client):
        def account(ui_amount):
            return {
                "account": {
                    "data": {"parsed": {"info": {"tokenAmount": {"uiAmount": ui_amount}}}}
                }
            }

        http_client.post.return_value = rpc_response(
            {"value": [account(1.5), account(None), account(2)]}
        )

        assert await rpc.get_token_balance("owner", "mint") == 3.5

    @pytest.mark.asyncio
    async def test_get_latest_blockhash(self, rpc, http_client):
        blockhash = Hash.new_unique()
        http_client.post.return_value = rpc_response(
            {"value": {"blockhash": str(blockhash), "lastValidBlockHeight": 10}}
        )

        assert await rpc.get_latest_blockhash() == blockhash

    @pytest.mark.asyncio
    async def test_send_raw_transaction(self, rpc, http_client):
        http_client.post.return_value = rpc_response("sig")

        assert await rpc.send_raw_transaction(b"raw") == "sig"
        encoded, options = sent_payload(http_client)["params"]
        assert base64.b64decode(encoded) == b"raw"
        assert options["encoding"] == "base64"
        assert options["preflightCommitment"] == "confirmed"

    @pytest.mark.asyncio
    async def test_get_asset_uses_named_params(self, rpc, http_client):
        http_client.post.return_value = rpc_response({"id": "asset"})

        assert await rpc.get_asset("asset") == {"id": "asset"}
        payload = sent_payload(http_client)
        assert payload["method"] == "getAsset"
        assert payload["params"] == {"id": "asset"}

    @pytest.mark.asyncio
    async def test_aclose(self, rpc, http_client):
        await rpc.aclose()

        http_client.aclose.assert_awaited_once()


class TestConfirmTransaction:
    """Test suite for confirmation polling."""

    @pytest.mark.asyncio
    async def test_waits_for_commitment(self, rpc):
        rpc.get_signature_statuses = AsyncMock(
            side_effect=[
                [None],
                [{"confirmationStatus": "processed", "err": None}],
                [{"confirmationStatus": "confirmed", "err": None}],
            ]
        )

        status = await rpc.confirm_transaction("sig")

        assert status["confirmationStatus"] == "confirmed"
        assert rpc.get_signature_statuses.await_count == 3

    @pytest.mark.asyncio
    async def test_failed_transaction(self, rpc):
        rpc.get_signature_statuses = AsyncMock(
            return_value=[{"confirmationStatus": "confirmed", "err": {"InstructionError": [0, "Custom"]}}]
        )

        with pytest.raises(TransactionError) as exc_info:
            await rpc.confirm_transaction("sig")
        assert exc_info.value.signature == "sig"

    @pytest.mark.asyncio
    async def test_timeout(self, rpc):
        rpc.get_signature_statuses = AsyncMock(return_value=[None])

        with pytest.raises(TransactionError, match="not confirmed"):
            await rpc.confirm_transaction("sig")
