"""
Records - typed values decoded from JSON-RPC results.

models holds the dataclasses, decode turns raw results into them.
"""
