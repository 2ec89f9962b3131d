"""
Client configuration.

The endpoint and debug flag come from the environment, optionally seeded
from ~/.ethnode/.env. Process environment always wins over the file.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING, Optional

from dotenv import load_dotenv

if TYPE_CHECKING:
    from .client import EthClient
    from .wire.transport import HttpPoster, LineLogger

DEFAULT_RPC_URL = "http://127.0.0.1:8545"

ETHNODE_DIR = Path.home() / ".ethnode"
ETHNODE_ENV = ETHNODE_DIR / ".env"

_TRUTHY = {"1", "true", "yes", "on"}


def load_env(env_path: Optional[Path] = None) -> None:
    env_path = env_path or ETHNODE_ENV
    if env_path.exists():
        load_dotenv(env_path, override=False)


def get_rpc_url() -> str:
    """Get the RPC URL from environment or default."""
    load_env()
    return os.environ.get("ETH_RPC_URL", DEFAULT_RPC_URL)


def get_debug() -> bool:
    load_env()
    return os.environ.get("ETHNODE_DEBUG", "").strip().lower() in _TRUTHY


@dataclass(frozen=True)
class ClientConfig:
    endpoint: str = DEFAULT_RPC_URL
    debug: bool = False

    @classmethod
    def from_env(cls, env_path: Optional[Path] = None) -> "ClientConfig":
        load_env(env_path)
        return cls(endpoint=get_rpc_url(), debug=get_debug())

    def create_client(
        self,
        http_client: Optional["HttpPoster"] = None,
        logger: Optional["LineLogger"] = None,
    ) -> "EthClient":
        from .client import EthClient

        return EthClient(self.endpoint, http_client=http_client, logger=logger, debug=self.debug)
