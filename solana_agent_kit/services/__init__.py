"""
Services for the Solana Agent Kit.

Transaction glue, tool adapters, the tool-calling conversation runtime
and the evaluation harness.
"""
