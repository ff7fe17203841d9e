"""
Lulo plugin actions.
"""
from pydantic import BaseModel, ConfigDict, Field

from solana_agent_kit.domains.results import ActionResult
from solana_agent_kit.plugins.actions.action import Action, ActionExample
from solana_agent_kit.plugins.lulo import methods


class LendInput(BaseModel):
    model_config = ConfigDict(extra="forbid")

    amount: float = Field(..., gt=0, description="Amount of USDC to lend")


async def _lend(agent, params: LendInput) -> ActionResult:
    signature = await methods.lend_asset(agent, params.amount)
    return ActionResult.success(
        f"Successfully lent {params.amount} USDC",
        transaction=signature,
        amount=params.amount,
    )


LEND_ASSET_ACTION = Action(
    name="solana_lend_asset",
    similes=["LEND_ASSET", "lend USDC", "deposit for yield", "earn yield"],
    description="Lend USDC for yield using Lulo",
    schema=LendInput,
    handler=_lend,
    examples=[
        ActionExample(
            input={"amount": 100},
            output={"status": "success", "amount": 100},
            explanation="Lend 100 USDC on Lulo",
        )
    ],
)
