"""
Bundled multi-turn evaluation datasets.
"""
