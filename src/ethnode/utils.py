from __future__ import annotations

ETH1 = 10**18


def eth1() -> int:
    """One ether in wei."""
    return ETH1


def to_ether(wei: int) -> float:
    return wei / ETH1
