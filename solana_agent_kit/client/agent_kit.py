"""
Agent client for the Solana Agent Kit.

The agent holds the wallet, the RPC connection and configuration. Plugins
are registered with ``use`` and their methods are reachable under
``agent.methods``.
"""

import functools
import importlib.util
import json
import logging
from types import TracebackType
from typing import Any, Callable, Dict, List, Optional

from solana_agent_kit.adapters.http_adapter import ProtocolHttpAdapter
from solana_agent_kit.adapters.rpc_adapter import SolanaRpcAdapter
from solana_agent_kit.interfaces.plugins.plugins import Action, Plugin
from solana_agent_kit.interfaces.providers.wallet import WalletAdapter
from solana_agent_kit.plugins.manager import PluginManager

# Setup logger for this module
logger = logging.getLogger(__name__)


def load_config(config_path: str) -> Dict[str, Any]:
    """Load configuration from a JSON file or a Python file defining ``config``."""
    if config_path.endswith(".json"):
        with open(config_path, "r") as f:
            return json.load(f)

    # Assume it's a Python file
    spec = importlib.util.spec_from_file_location("config", config_path)
    if spec is None or spec.loader is None:
        raise FileNotFoundError(config_path)
    config_module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(config_module)
    return config_module.config


class MethodNamespace:
    """Attribute access to registered plugin methods with the agent bound."""

    def __init__(self, agent: "SolanaAgentKit"):
        self._agent = agent

    def __getattr__(self, name: str) -> Callable[..., Any]:
        if name.startswith("_"):
            raise AttributeError(name)
        method = self._agent.plugin_manager.get_method(name)
        if method is None:
            raise AttributeError(f"No plugin method named '{name}' is registered")
        return functools.partial(method, self._agent)

    def __contains__(self, name: str) -> bool:
        return self._agent.plugin_manager.get_method(name) is not None

    def __dir__(self) -> List[str]:
        return self._agent.plugin_manager.method_names()


class SolanaAgentKit:
    """Agent holding a wallet and RPC connection, extended through plugins.

    Usage::

        agent = SolanaAgentKit(wallet, connection).use(TokenPlugin()).use(JupiterPlugin())
        balance = await agent.methods.get_balance()
    """

    def __init__(
        self,
        wallet: WalletAdapter,
        connection: SolanaRpcAdapter,
        config: Optional[Dict[str, Any]] = None,
        http: Optional[ProtocolHttpAdapter] = None,
    ):
        self.wallet = wallet
        self.connection = connection
        self.config = config or {}
        self.http = http or ProtocolHttpAdapter()
        self.plugin_manager = PluginManager(self)
        self.methods = MethodNamespace(self)

    async def __aenter__(self) -> "SolanaAgentKit":
        return self

    async def __aexit__(
        self,
        exc_type: Optional[type],
        exc_val: Optional[BaseException],
        exc_tb: Optional[TracebackType],
    ) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self.plugin_manager.aclose()
        await self.http.aclose()
        await self.connection.aclose()

    def use(self, plugin: Plugin) -> "SolanaAgentKit":
        """Register a plugin and return the agent for chaining.

        Raises:
            PluginError: if the plugin collides with what is already registered
        """
        self.plugin_manager.register_plugin(plugin)
        return self

    @property
    def actions(self) -> List[Action]:
        """All registered actions, in registration order."""
        return self.plugin_manager.action_registry.list_all_actions()

    def get_action(self, name: str) -> Optional[Action]:
        return self.plugin_manager.action_registry.get_action(name)

    def plugin_config(self, plugin_name: str) -> Dict[str, Any]:
        """Return the ``plugins.<name>`` configuration section."""
        return self.config.get("plugins", {}).get(plugin_name, {})
