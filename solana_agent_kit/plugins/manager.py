"""
Plugin manager for the Solana Agent Kit.

This module implements the concrete PluginManager that registers plugins on
an agent, owns the method table and discovers third-party plugins through
entry points.
"""

import importlib.metadata
import logging
from typing import Any, Dict, List, Optional, Set

from solana_agent_kit.domains.errors import PluginError
from solana_agent_kit.interfaces.plugins.plugins import (
    PluginManager as PluginManagerInterface,
)
from solana_agent_kit.interfaces.plugins.plugins import Plugin, PluginMethod
from solana_agent_kit.plugins.registry import ActionRegistry

# Setup logger for this module
logger = logging.getLogger(__name__)

ENTRY_POINT_GROUP = "solana_agent_kit.plugins"


class PluginManager(PluginManagerInterface):
    """Manager for registering and discovering plugins on one agent."""

    def __init__(self, agent: Any, action_registry: Optional[ActionRegistry] = None):
        """Initialize for an agent with an optional action registry."""
        self.agent = agent
        self.action_registry = action_registry or ActionRegistry()
        self._plugins: Dict[str, Plugin] = {}
        self._methods: Dict[str, PluginMethod] = {}
        self._loaded_entry_points: Set[str] = set()

    def register_plugin(self, plugin: Plugin) -> None:
        """Register a plugin's methods and actions.

        Registration is all-or-nothing: any name collision or initialization
        failure leaves the manager untouched.

        Raises:
            PluginError: if the plugin cannot be registered
        """
        name = plugin.name
        if name in self._plugins:
            raise PluginError(f"Plugin {name} is already registered")

        methods = dict(plugin.methods)
        actions = list(plugin.actions)

        clashes = sorted(set(methods) & set(self._methods))
        if clashes:
            raise PluginError(
                f"Plugin {name} redefines methods already registered: {clashes}"
            )
        self.action_registry.check_available(actions)

        try:
            plugin.initialize(self.agent)
        except Exception as e:
            logger.error(f"Error initializing plugin {name}: {e}")
            raise PluginError(f"Plugin {name} failed to initialize: {e}") from e

        self._methods.update(methods)
        for action in actions:
            self.action_registry.register_action(action)
        self._plugins[name] = plugin
        logger.info(
            f"Successfully registered plugin {name} with {len(methods)} methods and {len(actions)} actions"
        )

    def load_plugins(self) -> List[str]:
        """Load all plugins exposed through entry points.

        Returns:
            List of loaded entry point names
        """
        loaded_plugins = []

        for entry_point in importlib.metadata.entry_points(group=ENTRY_POINT_GROUP):
            entry_point_id = f"{entry_point.name}:{entry_point.value}"
            if entry_point_id in self._loaded_entry_points:
                logger.info(f"Skipping already loaded plugin: {entry_point.name}")
                continue

            try:
                logger.info(f"Found plugin entry point: {entry_point.name}")
                plugin_factory = entry_point.load()
                self.register_plugin(plugin_factory())
                self._loaded_entry_points.add(entry_point_id)
                loaded_plugins.append(entry_point.name)
            except Exception as e:
                logger.error(f"Error loading plugin {entry_point.name}: {e}")

        return loaded_plugins

    def get_plugin(self, name: str) -> Optional[Plugin]:
        """Get a plugin by name."""
        return self._plugins.get(name)

    def list_plugins(self) -> List[Dict[str, Any]]:
        """List all registered plugins with their details."""
        return [
            {
                "name": plugin.name,
                "description": plugin.description,
                "methods": sorted(plugin.methods),
                "actions": [action.name for action in plugin.actions],
            }
            for plugin in self._plugins.values()
        ]

    async def aclose(self) -> None:
        """Close registered plugins, most recently registered first."""
        for plugin in reversed(list(self._plugins.values())):
            await plugin.aclose()

    def get_method(self, name: str) -> Optional[PluginMethod]:
        return self._methods.get(name)

    def method_names(self) -> List[str]:
        return list(self._methods)
