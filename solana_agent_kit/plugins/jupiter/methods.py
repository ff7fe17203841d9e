"""
Jupiter plugin methods: swaps, token prices and jupSOL staking.

Transactions are built by Jupiter; the agent only signs, sends and confirms.
"""

import logging
from typing import Any, Dict, Optional

from solana_agent_kit.domains.tokens import (
    DEFAULT_SLIPPAGE_BPS,
    JUPSOL_MINT,
    WRAPPED_SOL_MINT,
)
from solana_agent_kit.services.transactions import (
    deserialize_transaction,
    send_and_confirm,
)

# Setup logger for this module
logger = logging.getLogger(__name__)

JUPITER_SWAP_API = "https://lite-api.jup.ag/swap/v1"
JUPITER_PRICE_API = "https://lite-api.jup.ag/price/v2"
JUPITER_STAKE_BLINK = "https://worker.jup.ag/blinks/swap"


def _config(agent) -> Dict[str, Any]:
    return agent.plugin_config("jupiter")


async def _base_units(agent, mint: str, amount: float) -> int:
    if mint == WRAPPED_SOL_MINT:
        decimals = 9
    else:
        decimals = await agent.connection.get_token_decimals(mint)
    return int(round(amount * 10**decimals))


async def get_quote(
    agent,
    output_mint: str,
    input_amount: float,
    input_mint: str = WRAPPED_SOL_MINT,
    slippage_bps: int = DEFAULT_SLIPPAGE_BPS,
) -> Dict[str, Any]:
    config = _config(agent)
    params: Dict[str, Any] = {
        "inputMint": input_mint,
        "outputMint": output_mint,
        "amount": await _base_units(agent, input_mint, input_amount),
        "slippageBps": slippage_bps,
        "onlyDirectRoutes": "false",
        "maxAccounts": 20,
    }
    if config.get("fee_bps"):
        params["platformFeeBps"] = int(config["fee_bps"])
    return await agent.http.get_json(
        f"{config.get('api_url', JUPITER_SWAP_API)}/quote", params=params
    )


async def trade(
    agent,
    output_mint: str,
    input_amount: float,
    input_mint: str = WRAPPED_SOL_MINT,
    slippage_bps: int = DEFAULT_SLIPPAGE_BPS,
) -> str:
    """Swap tokens through Jupiter.

    Args:
        output_mint: Mint of the token to receive
        input_amount: Amount to sell, in UI units of the input token
        input_mint: Mint of the token to sell, defaults to SOL
        slippage_bps: Slippage tolerance in basis points

    Returns:
        The confirmed transaction signature
    """
    config = _config(agent)
    quote = await get_quote(agent, output_mint, input_amount, input_mint, slippage_bps)

    body: Dict[str, Any] = {
        "quoteResponse": quote,
        "userPublicKey": str(agent.wallet.public_key),
        "wrapAndUnwrapSol": True,
        "dynamicComputeUnitLimit": True,
        "prioritizationFeeLamports": "auto",
    }
    if config.get("fee_account"):
        body["feeAccount"] = config["fee_account"]

    swap = await agent.http.post_json(
        f"{config.get('api_url', JUPITER_SWAP_API)}/swap", body=body
    )
    transaction = deserialize_transaction(swap["swapTransaction"])
    signature = await send_and_confirm(agent, transaction, sign=True)
    logger.info(
        f"Swapped {input_amount} of {input_mint} for {output_mint}: {signature}"
    )
    return signature


async def fetch_price(agent, token_id: str) -> str:
    """Price of a token in USDC as reported by Jupiter."""
    config = _config(agent)
    data = await agent.http.get_json(
        config.get("price_api_url", JUPITER_PRICE_API), params={"ids": token_id}
    )
    entry: Optional[Dict[str, Any]] = (data.get("data") or {}).get(token_id)
    if not entry or entry.get("price") is None:
        raise ValueError(f"Price data not available for token {token_id}")
    return str(entry["price"])


async def stake_with_jup(agent, amount: float) -> str:
    """Stake SOL for jupSOL through the Jupiter staking blink."""
    url = f"{JUPITER_STAKE_BLINK}/{WRAPPED_SOL_MINT}/{JUPSOL_MINT}/{amount}"
    response = await agent.http.post_json(
        url, body={"account": str(agent.wallet.public_key)}
    )
    transaction = deserialize_transaction(response["transaction"])
    signature = await send_and_confirm(agent, transaction, sign=True)
    logger.info(f"Staked {amount} SOL for jupSOL: {signature}")
    return signature

