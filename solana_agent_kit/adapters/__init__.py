"""
Adapters for external systems and services.

These adapters implement the interfaces defined in solana_agent_kit.interfaces
and provide concrete access to Solana RPC, protocol HTTP APIs, wallets and
language models.
"""
