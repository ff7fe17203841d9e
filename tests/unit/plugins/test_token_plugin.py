"""
Tests for the token plugin methods and actions.
"""

import struct

import pytest
from solders.keypair import Keypair
from solders.message import to_bytes_versioned
from solders.pubkey import Pubkey
from solders.transaction import VersionedTransaction

from solana_agent_kit.domains.tokens import (
    ASSOCIATED_TOKEN_PROGRAM_ID,
    SYSTEM_PROGRAM_ID,
    TOKEN_PROGRAM_ID,
    USDC_MINT,
)
from solana_agent_kit.domains.errors import RpcError
from solana_agent_kit.plugins.token import TokenPlugin
from solana_agent_kit.plugins.token.methods import get_associated_token_address


@pytest.fixture
def token_agent(agent):
    return agent.use(TokenPlugin())


def sent_transaction(mock_wallet) -> VersionedTransaction:
    return mock_wallet.send_transaction.call_args.args[0]


class TestTokenMethods:
    """Test suite for token plugin methods."""

    @pytest.mark.asyncio
    async def test_get_wallet_address(self, token_agent, keypair):
        assert await token_agent.methods.get_wallet_address() == str(keypair.pubkey())

    @pytest.mark.asyncio
    async def test_sol_balance(self, token_agent):
        assert await token_agent.methods.get_balance() == 2.5

    @pytest.mark.asyncio
    async def test_token_balance(self, token_agent, mock_connection, keypair):
        balance = await token_agent.methods.get_balance(USDC_MINT)

        assert balance == 42.5
        mock_connection.get_token_balance.assert_awaited_once_with(
            keypair.pubkey(), USDC_MINT
        )

    @pytest.mark.asyncio
    async def test_sol_transfer(
        self, token_agent, mock_wallet, mock_connection, keypair, tx_signature
    ):
        recipient = Keypair().pubkey()

        signature = await token_agent.methods.transfer(str(recipient), 1.5)

        assert signature == tx_signature
        tx = sent_transaction(mock_wallet)
        message = tx.message
        assert message.account_keys[0] == keypair.pubkey()
        assert recipient in message.account_keys
        instruction = message.instructions[0]
        assert message.account_keys[instruction.program_id_index] == SYSTEM_PROGRAM_ID
        # system transfer: u32 tag 2 then u64 lamports
        assert bytes(instruction.data) == struct.pack("<IQ", 2, 1_500_000_000)
        assert tx.signatures[0] == keypair.sign_message(to_bytes_versioned(message))
        mock_connection.confirm_transaction.assert_awaited_once_with(tx_signature)

    @pytest.mark.asyncio
    async def test_spl_transfer(self, token_agent, mock_wallet, keypair):
        recipient = Keypair().pubkey()

        await token_agent.methods.transfer(str(recipient), 2.5, USDC_MINT)

        message = sent_transaction(mock_wallet).message
        programs = [
            message.account_keys[ix.program_id_index] for ix in message.instructions
        ]
        assert programs == [ASSOCIATED_TOKEN_PROGRAM_ID, TOKEN_PROGRAM_ID]
        assert bytes(message.instructions[1].data) == struct.pack("<BQB", 12, 2_500_000, 6)
        assert get_associated_token_address(recipient, Pubkey.from_string(USDC_MINT)) in message.account_keys

    @pytest.mark.asyncio
    async def test_request_faucet_funds(
        self, token_agent, mock_connection, keypair, tx_signature
    ):
        signature = await token_agent.methods.request_faucet_funds()

        assert signature == tx_signature
        mock_connection.request_airdrop.assert_awaited_once_with(
            keypair.pubkey(), 5_000_000_000
        )
        mock_connection.confirm_transaction.assert_awaited_once_with(tx_signature)

    @pytest.mark.asyncio
    async def test_get_tps(self, token_agent):
        assert await token_agent.methods.get_tps() == 2000

    @pytest.mark.asyncio
    async def test_get_tps_without_samples(self, token_agent, mock_connection):
        mock_connection.get_recent_performance_samples.return_value = []

        with pytest.raises(ValueError):
            await token_agent.methods.get_tps()


class TestTokenActions:
    """Test suite for token plugin actions."""

    def test_registers_actions(self, token_agent):
        assert [a.name for a in token_agent.actions] == [
            "solana_get_wallet_address",
            "solana_balance",
            "solana_transfer",
            "solana_request_funds",
            "solana_get_tps",
        ]

    @pytest.mark.asyncio
    async def test_balance_action(self, token_agent):
        result = await token_agent.get_action("solana_balance").execute(token_agent, {})

        assert result["status"] == "success"
        assert result["balance"] == 2.5
        assert result["token"] == "SOL"

    @pytest.mark.asyncio
    async def test_transfer_action(self, token_agent, tx_signature):
        recipient = str(Keypair().pubkey())

        result = await token_agent.get_action("TRANSFER").execute(
            token_agent, {"to": recipient, "amount": 0.1}
        )

        assert result["status"] == "success"
        assert result["transaction"] == tx_signature
        assert result["recipient"] == recipient
        assert result["token"] == "SOL"

    @pytest.mark.asyncio
    async def test_transfer_action_rejects_zero_amount(self, token_agent, mock_wallet):
        result = await token_agent.get_action("solana_transfer").execute(
            token_agent, {"to": str(Keypair().pubkey()), "amount": 0}
        )

        assert result["code"] == "INVALID_INPUT"
        mock_wallet.send_transaction.assert_not_called()

    @pytest.mark.asyncio
    async def test_transfer_action_insufficient_funds(self, token_agent, mock_wallet):
        mock_wallet.send_transaction.side_effect = RpcError(
            "Transaction simulation failed: insufficient lamports"
        )

        result = await token_agent.get_action("solana_transfer").execute(
            token_agent, {"to": str(Keypair().pubkey()), "amount": 100}
        )

        assert result["status"] == "error"
        assert result["code"] == "INSUFFICIENT_FUNDS"
        assert "transaction" not in result

    @pytest.mark.asyncio
    async def test_wallet_address_rejects_params(self, token_agent):
        result = await token_agent.get_action("solana_get_wallet_address").execute(
            token_agent, {"unexpected": 1}
        )

        assert result["code"] == "INVALID_INPUT"

    @pytest.mark.asyncio
    async def test_tps_action(self, token_agent):
        result = await token_agent.get_action("GET_TPS").execute(token_agent, {})

        assert result["tps"] == 2000
        assert result["message"] == "Current Solana TPS: 2000.00"
