"""
Wire - the JSON-RPC layer of ethnode.

Quantity codec, request/response envelopes, and the transport and logger
capabilities the client dispatches through.
"""
