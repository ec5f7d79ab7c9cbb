"""Sui full node access."""

from .sui_client import SuiClient, Checkpoint, SuiError, SuiConnectionError, SuiQueryError, SuiObjectNotFound

__all__ = ["SuiClient", "Checkpoint", "SuiError", "SuiConnectionError", "SuiQueryError", "SuiObjectNotFound"]
