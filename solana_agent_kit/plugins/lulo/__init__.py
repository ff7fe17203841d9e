"""
Lulo plugin: USDC lending.
"""
from typing import Dict, List

from solana_agent_kit.interfaces.plugins.plugins import Action, Plugin, PluginMethod
from solana_agent_kit.plugins.lulo import actions, methods


class LuloPlugin(Plugin):
    """Lulo lending integration."""

    @property
    def name(self) -> str:
        return "lulo"

    @property
    def description(self) -> str:
        return "Lend USDC for yield through Lulo"

    @property
    def methods(self) -> Dict[str, PluginMethod]:
        return {"lend_asset": methods.lend_asset}

    @property
    def actions(self) -> List[Action]:
        return [actions.LEND_ASSET_ACTION]
