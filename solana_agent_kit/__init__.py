"""
Solana Agent Kit - Solana and DeFi protocol actions for AI agents.

This package wraps Solana RPC endpoints and protocol HTTP APIs behind a
plugin-registered method/action interface that language-model tooling can call.
"""

# Client interface (main entry point)
from solana_agent_kit.client.agent_kit import SolanaAgentKit

# Factory for creating agents from configuration
from solana_agent_kit.factories.agent_factory import SolanaAgentKitFactory

# Plugin and action building blocks
from solana_agent_kit.interfaces.plugins.plugins import Plugin
from solana_agent_kit.plugins.actions.action import Action
from solana_agent_kit.plugins.manager import PluginManager
from solana_agent_kit.plugins.registry import ActionRegistry

# Tool adapters and evaluation
from solana_agent_kit.services.tools import create_openai_tools, execute_tool_call
from solana_agent_kit.services.evals import run_complex_eval, load_dataset

# Package metadata
__all__ = [
    # Main client interfaces
    "SolanaAgentKit",
    # Factories
    "SolanaAgentKitFactory",
    # Plugins
    "Plugin",
    "Action",
    "PluginManager",
    "ActionRegistry",
    # Tools
    "create_openai_tools",
    "execute_tool_call",
    # Evals
    "run_complex_eval",
    "load_dataset",
]
