"""
Jupiter plugin: token swaps, prices and jupSOL staking.
"""
from typing import Dict, List

from solana_agent_kit.interfaces.plugins.plugins import Action, Plugin, PluginMethod
from solana_agent_kit.plugins.jupiter import actions, methods


class JupiterPlugin(Plugin):
    """Jupiter aggregator integration."""

    @property
    def name(self) -> str:
        return "jupiter"

    @property
    def description(self) -> str:
        return "Token swaps, prices and jupSOL staking through Jupiter"

    @property
    def methods(self) -> Dict[str, PluginMethod]:
        return {
            "trade": methods.trade,
            "fetch_price": methods.fetch_price,
            "stake_with_jup": methods.stake_with_jup,
        }

    @property
    def actions(self) -> List[Action]:
        return [
            actions.TRADE_ACTION,
            actions.FETCH_PRICE_ACTION,
            actions.STAKE_WITH_JUP_ACTION,
        ]
