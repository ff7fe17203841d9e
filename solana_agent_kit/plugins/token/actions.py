"""
Token plugin actions.
"""
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from solana_agent_kit.domains.results import ActionResult
from solana_agent_kit.plugins.actions.action import Action, ActionExample
from solana_agent_kit.plugins.actions.types import PublicKeyStr
from solana_agent_kit.plugins.token import methods


class EmptyInput(BaseModel):
    model_config = ConfigDict(extra="forbid")


class BalanceInput(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="forbid")

    token_address: Optional[PublicKeyStr] = Field(
        None,
        alias="tokenAddress",
        description="Mint of the SPL token; omit for the SOL balance",
    )


class TransferInput(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="forbid")

    to: PublicKeyStr = Field(..., description="Recipient wallet address")
    amount: float = Field(..., gt=0, description="Amount to transfer in UI units")
    mint: Optional[PublicKeyStr] = Field(
        None, description="Mint of the SPL token; omit to transfer SOL"
    )


async def _wallet_address(agent, _: EmptyInput) -> ActionResult:
    address = await methods.get_wallet_address(agent)
    return ActionResult.success(f"Wallet address is {address}", address=address)


async def _balance(agent, params: BalanceInput) -> ActionResult:
    balance = await methods.get_balance(agent, params.token_address)
    unit = params.token_address or "SOL"
    return ActionResult.success(
        f"Balance is {balance} {unit}", balance=balance, token=unit
    )


async def _transfer(agent, params: TransferInput) -> ActionResult:
    signature = await methods.transfer(agent, params.to, params.amount, params.mint)
    return ActionResult.success(
        "Transfer completed successfully",
        transaction=signature,
        amount=params.amount,
        recipient=params.to,
        token=params.mint or "SOL",
    )


async def _request_funds(agent, _: EmptyInput) -> ActionResult:
    signature = await methods.request_faucet_funds(agent)
    return ActionResult.success(
        "Successfully requested faucet funds", transaction=signature
    )


async def _tps(agent, _: EmptyInput) -> ActionResult:
    tps = await methods.get_tps(agent)
    return ActionResult.success(f"Current Solana TPS: {tps:.2f}", tps=tps)


WALLET_ADDRESS_ACTION = Action(
    name="solana_get_wallet_address",
    similes=["WALLET_ADDRESS_ACTION", "wallet address", "my address"],
    description="Get the wallet address of the agent",
    schema=EmptyInput,
    handler=_wallet_address,
)

BALANCE_ACTION = Action(
    name="solana_balance",
    similes=["BALANCE_ACTION", "check balance", "get wallet balance"],
    description=(
        "Get the balance of the agent wallet in SOL, or of an SPL token when a "
        "token mint address is given"
    ),
    schema=BalanceInput,
    handler=_balance,
    examples=[
        ActionExample(
            input={},
            output={"status": "success", "balance": 100, "token": "SOL"},
            explanation="Get SOL balance of the wallet",
        ),
        ActionExample(
            input={"tokenAddress": "EPjFWdd5AufqSSqeM2qN1xzybapC8G4wEGGkZwyTDt1v"},
            output={"status": "success", "balance": 1000, "token": "USDC"},
            explanation="Get USDC balance of the wallet",
        ),
    ],
)

TRANSFER_ACTION = Action(
    name="solana_transfer",
    similes=["TRANSFER", "send tokens", "send SOL", "pay"],
    description="Transfer SOL or an SPL token to another wallet",
    schema=TransferInput,
    handler=_transfer,
    examples=[
        ActionExample(
            input={"to": "8x2dR8Mpzuz2YqyZyZjUbYWKSWesBo5jMx2Q9Y86udVk", "amount": 1},
            output={"status": "success", "transaction": "5UfgJ5vVZxUxefDGqzqkVLHzHxVTyYH9StYyHKgvHYmXJgqJKxEqy9k4Rz9LpXrHF9kUZB7", "amount": 1},
            explanation="Transfer 1 SOL to the recipient address",
        )
    ],
)

REQUEST_FUNDS_ACTION = Action(
    name="solana_request_funds",
    similes=["REQUEST_FUNDS", "faucet", "airdrop"],
    description="Request SOL from the faucet on devnet or testnet",
    schema=EmptyInput,
    handler=_request_funds,
)

GET_TPS_ACTION = Action(
    name="solana_get_tps",
    similes=["GET_TPS", "network speed", "transactions per second"],
    description="Get the current transactions per second of the Solana network",
    schema=EmptyInput,
    handler=_tps,
)
