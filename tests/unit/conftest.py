"""
Shared fixtures for Solana Agent Kit unit tests.

The agent fixture wires mock wallet, RPC and HTTP adapters so that plugins
run their full flow without touching the network.
"""
import base64
import json
from typing import Any, Dict, List, Optional

import pytest
from unittest.mock import AsyncMock, MagicMock

from solders.hash import Hash
from solders.keypair import Keypair
from solders.message import MessageV0
from solders.signature import Signature
from solders.system_program import TransferParams, transfer
from solders.transaction import VersionedTransaction

from solana_agent_kit.adapters.http_adapter import ProtocolHttpAdapter
from solana_agent_kit.adapters.rpc_adapter import SolanaRpcAdapter
from solana_agent_kit.client.agent_kit import SolanaAgentKit
from solana_agent_kit.interfaces.providers.llm import LLMProvider
from solana_agent_kit.interfaces.providers.wallet import WalletAdapter
from solana_agent_kit.plugins.nft import NftPlugin
from solana_agent_kit.plugins.token import TokenPlugin

TEST_SIGNATURE = "5UfgJ5vVZxUxefDGqzqkVLHzHxVTyYH9StYyHKgvHYmXJgqJKxEqy9k4Rz9LpXrHF9kUZB7"


@pytest.fixture
def keypair():
    """Create a fresh keypair for the agent wallet."""
    return Keypair()


@pytest.fixture
def mock_wallet(keypair):
    """Create a wallet mock that really signs with the test keypair."""
    wallet = MagicMock(spec=WalletAdapter)
    wallet.public_key = keypair.pubkey()

    async def sign_message(message):
        return keypair.sign_message(message)

    async def sign_transaction(transaction):
        return transaction

    wallet.sign_message = AsyncMock(side_effect=sign_message)
    wallet.sign_transaction = AsyncMock(side_effect=sign_transaction)
    wallet.send_transaction = AsyncMock(return_value=TEST_SIGNATURE)
    return wallet


@pytest.fixture
def mock_connection():
    """Create an RPC adapter mock."""
    connection = MagicMock(spec=SolanaRpcAdapter)
    connection.get_latest_blockhash = AsyncMock(return_value=Hash.new_unique())
    connection.confirm_transaction = AsyncMock(
        return_value={"confirmationStatus": "confirmed", "err": None}
    )
    connection.get_balance = AsyncMock(return_value=2_500_000_000)
    connection.get_token_balance = AsyncMock(return_value=42.5)
    connection.get_token_decimals = AsyncMock(return_value=6)
    connection.request_airdrop = AsyncMock(return_value=TEST_SIGNATURE)
    connection.get_recent_performance_samples = AsyncMock(
        return_value=[{"numTransactions": 120000, "samplePeriodSecs": 60}]
    )
    connection.get_asset = AsyncMock(return_value={"id": "asset", "interface": "MplCoreCollection"})
    connection.aclose = AsyncMock()
    return connection


@pytest.fixture
def mock_http():
    """Create a protocol HTTP adapter mock."""
    http = MagicMock(spec=ProtocolHttpAdapter)
    http.get_json = AsyncMock()
    http.post_json = AsyncMock()
    http.aclose = AsyncMock()
    return http


@pytest.fixture
def config():
    """Sample agent configuration."""
    return {
        "plugins": {
            "jupiter": {},
            "lulo": {"api_key": "lulo_test_key"},
            "sns": {},
            "nft": {},
        }
    }


@pytest.fixture
def agent(mock_wallet, mock_connection, mock_http, config):
    """Create an agent with mocked collaborators and no plugins."""
    return SolanaAgentKit(mock_wallet, mock_connection, config=config, http=mock_http)


@pytest.fixture
def encoded_transaction(keypair):
    """Unsigned base64 transaction as returned by protocol APIs."""
    instruction = transfer(
        TransferParams(
            from_pubkey=keypair.pubkey(), to_pubkey=Keypair().pubkey(), lamports=1000
        )
    )
    message = MessageV0.try_compile(keypair.pubkey(), [instruction], [], Hash.new_unique())
    transaction = VersionedTransaction.populate(message, [Signature.default()])
    return base64.b64encode(bytes(transaction)).decode("utf-8")


@pytest.fixture
def tx_signature():
    """Signature returned by the mocked wallet and faucet."""
    return TEST_SIGNATURE


@pytest.fixture
def full_agent(agent):
    """Agent with the token and NFT plugins registered."""
    return agent.use(TokenPlugin()).use(NftPlugin())


def _text_turn(text: str) -> List[Dict[str, Any]]:
    return [{"type": "content", "delta": text}, {"type": "message_end"}]


def _tool_turn(
    name: str, arguments: Dict[str, Any], call_id: Optional[str] = "call_a"
) -> List[Dict[str, Any]]:
    encoded = json.dumps(arguments)
    half = len(encoded) // 2
    return [
        {"type": "tool_call_delta", "id": call_id, "index": 0, "name": name, "arguments_delta": ""},
        {"type": "tool_call_delta", "id": None, "index": 0, "name": None, "arguments_delta": encoded[:half]},
        {"type": "tool_call_delta", "id": None, "index": 0, "name": None, "arguments_delta": encoded[half:]},
        {"type": "message_end"},
    ]


class ScriptedLLM(LLMProvider):
    """LLM provider replaying one scripted event list per chat_stream call."""

    def __init__(self, script: List[List[Dict[str, Any]]]):
        self.script = list(script)
        self.calls: List[Dict[str, Any]] = []

    async def generate_text(
        self, prompt: str, system_prompt: str = "", model: Optional[str] = None
    ) -> str:
        return ""

    async def chat_stream(self, messages, model=None, tools=None):
        self.calls.append({"messages": [dict(m) for m in messages], "tools": tools})
        events = self.script.pop(0) if self.script else _text_turn("done")
        for event in events:
            yield event


@pytest.fixture
def text_turn():
    """Build the stream events of a plain text answer."""
    return _text_turn


@pytest.fixture
def tool_turn():
    """Build the stream events of a single streamed tool call."""
    return _tool_turn


@pytest.fixture
def scripted_llm():
    """Build an LLM provider that replays scripted stream events."""
    return ScriptedLLM
