"""
Lulo plugin methods: USDC lending through the Lulo (flexlend) API.
"""

import logging

from solana_agent_kit.domains.errors import ConfigError
from solana_agent_kit.domains.tokens import USDC_MINT
from solana_agent_kit.services.transactions import (
    deserialize_transaction,
    send_and_confirm,
)

# Setup logger for this module
logger = logging.getLogger(__name__)

LULO_API = "https://api.flexlend.fi"
DEFAULT_PRIORITY_FEE = 50000


async def lend_asset(agent, amount: float) -> str:
    """Deposit USDC into Lulo for yield.

    Returns:
        The confirmed transaction signature
    """
    config = agent.plugin_config("lulo")
    api_key = config.get("api_key")
    if not api_key:
        raise ConfigError("Lulo lending requires plugins.lulo.api_key (FLEXLEND_API_KEY)")

    owner = str(agent.wallet.public_key)
    response = await agent.http.post_json(
        f"{config.get('api_url', LULO_API)}/generate/account/deposit",
        params={"priorityFee": config.get("priority_fee", DEFAULT_PRIORITY_FEE)},
        headers={"x-wallet-pubkey": owner, "x-api-key": api_key},
        body={
            "owner": owner,
            "mintAddress": USDC_MINT,
            "depositAmount": str(amount),
        },
    )
    transactions = response["data"]["transactionMeta"]
    if not transactions:
        raise ValueError("Lulo returned no deposit transaction")

    transaction = deserialize_transaction(transactions[0]["transaction"])
    signature = await send_and_confirm(agent, transaction, sign=True)
    logger.info(f"Lent {amount} USDC on Lulo: {signature}")
    return signature
