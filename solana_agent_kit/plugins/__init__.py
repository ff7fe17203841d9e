"""
Plugin system for the Solana Agent Kit.

This package provides plugin management, action registration, plugin discovery
and the built-in protocol plugins.
"""
