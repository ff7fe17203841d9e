"""
Factories for wiring Solana Agent Kit components from configuration.
"""
