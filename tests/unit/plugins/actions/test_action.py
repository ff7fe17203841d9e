"""
Tests for the Action implementation.
"""

import pytest
from unittest.mock import AsyncMock
from pydantic import BaseModel, Field

from solana_agent_kit.domains.errors import RpcError
from solana_agent_kit.domains.results import ActionResult
from solana_agent_kit.plugins.actions.action import Action, ActionExample
from solana_agent_kit.plugins.actions.types import PublicKeyStr


class PayInput(BaseModel):
    to: PublicKeyStr = Field(..., description="Recipient")
    amount: float = Field(..., gt=0)


RECIPIENT = "8x2dR8Mpzuz2YqyZyZjUbYWKSWesBo5jMx2Q9Y86udVk"


def make_action(handler):
    return Action(
        name="pay",
        description="Pay someone",
        schema=PayInput,
        handler=handler,
        similes=["PAY"],
        examples=[ActionExample(input={"to": RECIPIENT, "amount": 1})],
    )


class TestAction:
    """Test suite for Action."""

    def test_properties(self):
        action = make_action(AsyncMock())

        assert action.name == "pay"
        assert action.similes == ["PAY"]
        assert action.schema is PayInput
        assert action.examples[0].input["amount"] == 1

    def test_get_schema(self):
        schema = make_action(AsyncMock()).get_schema()

        assert schema["type"] == "object"
        assert set(schema["required"]) == {"to", "amount"}
        assert schema["properties"]["to"]["description"] == "Recipient"

    @pytest.mark.asyncio
    async def test_execute_success(self):
        handler = AsyncMock(return_value=ActionResult.success("paid", transaction="sig"))
        action = make_action(handler)

        result = await action.execute("agent", {"to": RECIPIENT, "amount": 2})

        assert result == {"status": "success", "message": "paid", "transaction": "sig"}
        agent, params = handler.call_args.args
        assert agent == "agent"
        assert params.amount == 2

    @pytest.mark.asyncio
    async def test_execute_accepts_dict_result(self):
        handler = AsyncMock(return_value={"status": "success", "message": "ok", "x": 1})

        result = await make_action(handler).execute(None, {"to": RECIPIENT, "amount": 1})

        assert result["x"] == 1

    @pytest.mark.asyncio
    async def test_invalid_input_skips_handler(self):
        handler = AsyncMock()

        result = await make_action(handler).execute(None, {"to": RECIPIENT, "amount": -1})

        assert result["status"] == "error"
        assert result["code"] == "INVALID_INPUT"
        assert "amount" in result["message"]
        handler.assert_not_called()

    @pytest.mark.asyncio
    async def test_invalid_public_key(self):
        handler = AsyncMock()

        result = await make_action(handler).execute(None, {"to": "not-a-key", "amount": 1})

        assert result["code"] == "INVALID_INPUT"
        handler.assert_not_called()

    @pytest.mark.asyncio
    async def test_missing_params(self):
        result = await make_action(AsyncMock()).execute(None, None)

        assert result["code"] == "INVALID_INPUT"

    @pytest.mark.asyncio
    async def test_handler_error_is_classified(self):
        handler = AsyncMock(side_effect=RpcError("insufficient lamports"))

        result = await make_action(handler).execute(None, {"to": RECIPIENT, "amount": 1})

        assert result == {
            "status": "error",
            "message": "insufficient lamports",
            "code": "INSUFFICIENT_FUNDS",
        }

    @pytest.mark.asyncio
    async def test_dict_result_without_status(self):
        handler = AsyncMock(return_value={"message": "forgot status"})

        result = await make_action(handler).execute(None, {"to": RECIPIENT, "amount": 1})

        assert result["status"] == "error"
        assert result["code"] == "INVALID_RESULT"
        assert "status" in result["message"]

    @pytest.mark.asyncio
    async def test_error_result_with_transaction(self):
        handler = AsyncMock(
            return_value={"status": "error", "message": "boom", "transaction": "sig"}
        )

        result = await make_action(handler).execute(None, {"to": RECIPIENT, "amount": 1})

        assert result["code"] == "INVALID_RESULT"
        assert "transaction" not in result

    @pytest.mark.asyncio
    async def test_non_dict_result(self):
        result = await make_action(AsyncMock(return_value=None)).execute(
            None, {"to": RECIPIENT, "amount": 1}
        )

        assert result["code"] == "INVALID_RESULT"

    @pytest.mark.asyncio
    async def test_repeated_invalid_call_returns_same_envelope(self):
        handler = AsyncMock()
        action = make_action(handler)
        params = {"to": "not-a-key", "amount": 0}

        first = await action.execute(None, params)
        second = await action.execute(None, params)

        assert first == second
        assert first["code"] == "INVALID_INPUT"
        assert params == {"to": "not-a-key", "amount": 0}
        handler.assert_not_called()
