"""
Facade - one method per remote procedure, grouped by namespace.

- web3: client version and hashing
- net:  network status
- eth:  chain state, blocks, transactions and filters

Methods only format parameters and pick the decoder for the result.
"""
