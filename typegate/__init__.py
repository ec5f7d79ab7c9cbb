"""
Move type name decomposition and type gating for Sui.

Structure:
    typegate/
    ├── types.py          # TypeSignature
    ├── parsing/          # Scanner, generics, fully-qualified names, queries
    ├── gate.py           # Presented vs required type checks
    ├── blockchain/       # Sui JSON-RPC client
    └── fetching/         # Object type fetching

Usage:
    from typegate import TypeSignature, TypeGate
    from typegate.parsing import decompose, decompose_struct, is_same_type
    from typegate.blockchain import SuiClient
    from typegate.fetching import Fetcher, SuiChainClient
"""

from .types import TypeSignature, NO_ADDRESS
from .gate import TypeGate

__all__ = [
    # Types
    "TypeSignature",
    "NO_ADDRESS",
    # Gate
    "TypeGate",
]
