"""
Action registry for the Solana Agent Kit.

This module implements the concrete ActionRegistry that keeps actions
addressable by name or simile while preserving registration order.
"""

import logging
from typing import Dict, List, Optional

from solana_agent_kit.domains.errors import PluginError
from solana_agent_kit.interfaces.plugins.plugins import (
    ActionRegistry as ActionRegistryInterface,
)
from solana_agent_kit.interfaces.plugins.plugins import Action

# Setup logger for this module
logger = logging.getLogger(__name__)


class ActionRegistry(ActionRegistryInterface):
    """Instance-based registry of actions."""

    def __init__(self):
        """Initialize an empty action registry."""
        self._actions: Dict[str, Action] = {}  # name -> action, insertion ordered

    def __len__(self) -> int:
        return len(self._actions)

    def __contains__(self, name: str) -> bool:
        return self.get_action(name) is not None

    def check_available(self, actions: List[Action]) -> None:
        """Raise PluginError if any of the actions would collide on name."""
        seen = set()
        for action in actions:
            if action.name in self._actions or action.name in seen:
                raise PluginError(f"Action {action.name} is already registered")
            seen.add(action.name)

    def register_action(self, action: Action) -> None:
        """Register an action with this registry."""
        self.check_available([action])
        self._actions[action.name] = action
        logger.info(f"Successfully registered action: {action.name}")

    def get_action(self, name: str) -> Optional[Action]:
        """Get an action by name, falling back to similes."""
        action = self._actions.get(name)
        if action is not None:
            return action
        for candidate in self._actions.values():
            if name in candidate.similes:
                return candidate
        return None

    def list_all_actions(self) -> List[Action]:
        """List all registered actions in registration order."""
        return list(self._actions.values())

    def list_action_names(self) -> List[str]:
        return list(self._actions.keys())
