"""
Client entry points for the Solana Agent Kit.
"""
