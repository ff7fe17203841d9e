"""
Tests for the action to tool-calling adapter.
"""

import pytest

from solana_agent_kit.plugins.token import TokenPlugin
from solana_agent_kit.services.tools import (
    create_openai_tools,
    execute_tool_call,
    parse_arguments,
)


@pytest.fixture
def token_agent(agent):
    return agent.use(TokenPlugin())


def test_create_openai_tools(token_agent):
    tools = create_openai_tools(token_agent.actions)

    assert len(tools) == len(token_agent.actions)
    transfer = next(t for t in tools if t["function"]["name"] == "solana_transfer")
    assert transfer["type"] == "function"
    assert transfer["function"]["description"].startswith("Transfer SOL")
    assert set(transfer["function"]["parameters"]["required"]) == {"to", "amount"}


def test_tool_parameters_use_aliases(token_agent):
    tools = create_openai_tools([token_agent.get_action("solana_balance")])

    assert "tokenAddress" in tools[0]["function"]["parameters"]["properties"]


class TestParseArguments:
    """Test suite for parse_arguments."""

    def test_json_string(self):
        assert parse_arguments('{"amount": 1}') == {"amount": 1}

    def test_empty(self):
        assert parse_arguments("") == {}
        assert parse_arguments(None) == {}

    def test_mapping_passthrough(self):
        assert parse_arguments({"a": 1}) == {"a": 1}

    def test_non_object(self):
        with pytest.raises(ValueError):
            parse_arguments("[1, 2]")

    def test_malformed(self):
        with pytest.raises(ValueError):
            parse_arguments("{not json")


class TestExecuteToolCall:
    """Test suite for execute_tool_call."""

    @pytest.mark.asyncio
    async def test_executes_action(self, token_agent):
        result = await execute_tool_call(token_agent, "solana_balance", "{}")

        assert result["status"] == "success"
        assert result["balance"] == 2.5

    @pytest.mark.asyncio
    async def test_resolves_simile(self, token_agent):
        result = await execute_tool_call(token_agent, "GET_TPS", None)

        assert result["tps"] == 2000

    @pytest.mark.asyncio
    async def test_unknown_tool(self, token_agent):
        result = await execute_tool_call(token_agent, "solana_launch_rocket", "{}")

        assert result == {
            "status": "error",
            "message": "Tool solana_launch_rocket not found",
            "code": "UNKNOWN_TOOL",
        }

    @pytest.mark.asyncio
    async def test_malformed_arguments(self, token_agent, mock_wallet):
        result = await execute_tool_call(token_agent, "solana_transfer", '{"to": ')

        assert result["status"] == "error"
        assert result["code"] == "INVALID_INPUT"
        mock_wallet.send_transaction.assert_not_called()
