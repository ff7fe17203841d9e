"""
SNS plugin: Solana Name Service domain resolution.
"""
from typing import Dict, List

from solana_agent_kit.interfaces.plugins.plugins import Action, Plugin, PluginMethod
from solana_agent_kit.plugins.sns import actions, methods


class SnsPlugin(Plugin):
    """Solana Name Service integration."""

    @property
    def name(self) -> str:
        return "sns"

    @property
    def description(self) -> str:
        return "Resolve .sol domains to wallet addresses"

    @property
    def methods(self) -> Dict[str, PluginMethod]:
        return {"resolve_sol_domain": methods.resolve_sol_domain}

    @property
    def actions(self) -> List[Action]:
        return [actions.RESOLVE_SOL_DOMAIN_ACTION]
