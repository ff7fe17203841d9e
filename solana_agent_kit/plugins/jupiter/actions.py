"""
Jupiter plugin actions.
"""
from pydantic import BaseModel, ConfigDict, Field

from solana_agent_kit.domains.results import ActionResult
from solana_agent_kit.domains.tokens import DEFAULT_SLIPPAGE_BPS, WRAPPED_SOL_MINT
from solana_agent_kit.plugins.actions.action import Action, ActionExample
from solana_agent_kit.plugins.actions.types import PublicKeyStr
from solana_agent_kit.plugins.jupiter import methods


class TradeInput(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="forbid")

    output_mint: PublicKeyStr = Field(
        ..., alias="outputMint", description="Mint of the token to receive"
    )
    input_amount: float = Field(
        ..., alias="inputAmount", gt=0, description="Amount of the input token to swap"
    )
    input_mint: PublicKeyStr = Field(
        WRAPPED_SOL_MINT,
        alias="inputMint",
        description="Mint of the token to sell, defaults to SOL",
    )
    slippage_bps: int = Field(
        DEFAULT_SLIPPAGE_BPS,
        alias="slippageBps",
        ge=0,
        le=10000,
        description="Slippage tolerance in basis points",
    )


class FetchPriceInput(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="forbid")

    token_address: PublicKeyStr = Field(
        ..., alias="tokenAddress", description="Mint of the token to price"
    )


class StakeInput(BaseModel):
    model_config = ConfigDict(extra="forbid")

    amount: float = Field(..., gt=0, description="Amount of SOL to stake")


async def _trade(agent, params: TradeInput) -> ActionResult:
    signature = await methods.trade(
        agent,
        params.output_mint,
        params.input_amount,
        params.input_mint,
        params.slippage_bps,
    )
    return ActionResult.success(
        "Trade executed successfully",
        transaction=signature,
        inputAmount=params.input_amount,
        inputToken=params.input_mint,
        outputToken=params.output_mint,
    )


async def _fetch_price(agent, params: FetchPriceInput) -> ActionResult:
    price = await methods.fetch_price(agent, params.token_address)
    return ActionResult.success(
        f"Price of {params.token_address} is {price} USDC",
        price=price,
        tokenAddress=params.token_address,
    )


async def _stake(agent, params: StakeInput) -> ActionResult:
    signature = await methods.stake_with_jup(agent, params.amount)
    return ActionResult.success(
        f"Staked {params.amount} SOL for jupSOL",
        transaction=signature,
        amount=params.amount,
    )


TRADE_ACTION = Action(
    name="solana_trade",
    similes=["TRADE", "swap tokens", "exchange tokens", "jupiter swap"],
    description=(
        "Swap tokens using Jupiter Exchange. The input token defaults to SOL and "
        "amounts are expressed in UI units of the input token"
    ),
    schema=TradeInput,
    handler=_trade,
    examples=[
        ActionExample(
            input={
                "outputMint": "EPjFWdd5AufqSSqeM2qN1xzybapC8G4wEGGkZwyTDt1v",
                "inputAmount": 1,
            },
            output={"status": "success", "inputAmount": 1, "outputToken": "EPjFWdd5AufqSSqeM2qN1xzybapC8G4wEGGkZwyTDt1v"},
            explanation="Swap 1 SOL for USDC",
        )
    ],
)

FETCH_PRICE_ACTION = Action(
    name="solana_fetch_price",
    similes=["FETCH_PRICE", "token price", "get price"],
    description="Fetch the current price of a Solana token in USDC using Jupiter",
    schema=FetchPriceInput,
    handler=_fetch_price,
)

STAKE_WITH_JUP_ACTION = Action(
    name="solana_stake",
    similes=["STAKE_WITH_JUP", "stake SOL", "get jupSOL"],
    description="Stake SOL with Jupiter to receive jupSOL",
    schema=StakeInput,
    handler=_stake,
)
