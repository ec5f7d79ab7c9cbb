"""Object type fetching from chain."""

from .client import ChainClient
from .fetcher import Fetcher
from .sui_adapter import SuiChainClient

__all__ = ["ChainClient", "Fetcher", "SuiChainClient"]
