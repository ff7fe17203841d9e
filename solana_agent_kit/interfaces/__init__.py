"""
Abstract interfaces for the Solana Agent Kit.

These interfaces define the contracts that concrete implementations
must adhere to:
- Plugin interfaces for capability bundles and their actions
- Provider interfaces for wallets, RPC connections and language models
"""
