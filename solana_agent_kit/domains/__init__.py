"""
Domain models for the Solana Agent Kit.

This package contains the value types passed across the plugin/action
boundary: result envelopes, errors and evaluation datasets.
"""
