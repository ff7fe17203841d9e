"""
Token plugin: wallet address, balances, transfers, faucet and TPS.
"""
from typing import Dict, List

from solana_agent_kit.interfaces.plugins.plugins import Action, Plugin, PluginMethod
from solana_agent_kit.plugins.token import actions, methods


class TokenPlugin(Plugin):
    """Core wallet and token operations."""

    @property
    def name(self) -> str:
        return "token"

    @property
    def description(self) -> str:
        return "Wallet address, SOL/SPL balances and transfers, faucet and network TPS"

    @property
    def methods(self) -> Dict[str, PluginMethod]:
        return {
            "get_wallet_address": methods.get_wallet_address,
            "get_balance": methods.get_balance,
            "transfer": methods.transfer,
            "request_faucet_funds": methods.request_faucet_funds,
            "get_tps": methods.get_tps,
        }

    @property
    def actions(self) -> List[Action]:
        return [
            actions.WALLET_ADDRESS_ACTION,
            actions.BALANCE_ACTION,
            actions.TRANSFER_ACTION,
            actions.REQUEST_FUNDS_ACTION,
            actions.GET_TPS_ACTION,
        ]
