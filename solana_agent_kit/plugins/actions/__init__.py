"""
Actions for the Solana Agent Kit.

This package contains the base Action class that plugins instantiate.
"""

from solana_agent_kit.plugins.actions.action import Action, ActionExample

__all__ = ["Action", "ActionExample"]
