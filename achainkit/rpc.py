"""Building JSON-RPC request strings for the wallet node."""

from __future__ import annotations

from collections.abc import Iterable


def to_json_format(request_id: str, method: str, params: Iterable[str] = ()) -> str:
    """Return a JSON-RPC 2.0 request with every parameter sent as a string.

    Values are placed into the text as given, without escaping, so the
    result is exactly what the node expects for plain identifiers.
    """
    quoted = ",".join(f'"{param}"' for param in params)
    return (
        f'{{"jsonrpc":"2.0","id":"{request_id}",'
        f'"method":"{method}","params":[{quoted}]}}'
    )