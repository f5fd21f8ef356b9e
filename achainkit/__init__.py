"""Wallet-side helpers for an Achain-style blockchain node: request text, reply routing, parsing, state and input checks."""

__version__ = "0.1.0"

__all__ = [
    "accounts",
    "animation",
    "checks",
    "datastore",
    "dispatch",
    "models",
    "parsing",
    "rpc",
]