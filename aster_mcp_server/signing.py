"""Request signing for the exchange's private endpoints.

The exchange authenticates a request by recomputing an HMAC-SHA256 over the
exact query string it receives. encode_params() therefore produces the string
that is both signed and sent, so the two can never drift apart.
"""
import hashlib
import hmac
import json
import time
from typing import Any, Mapping
from urllib.parse import urlencode


def now_ms() -> int:
    """Current Unix time in milliseconds."""
    return int(time.time() * 1000)


def _integral(value: Any) -> Any:
    if isinstance(value, float) and value.is_integer():
        return int(value)
    if isinstance(value, dict):
        return {key: _integral(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [_integral(item) for item in value]
    return value


def compact_json(value: Any) -> str:
    """Whitespace-free JSON with non-ASCII kept as is and 1.0 written as 1."""
    return json.dumps(_integral(value), separators=(",", ":"), ensure_ascii=False)


def format_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, (list, tuple, dict)):
        return compact_json(value)
    return str(value)


def encode_params(params: Mapping[str, Any]) -> str:
    """URL-encode ``params`` as ``k=v&...`` in insertion order, skipping None values."""
    return urlencode(
        [(key, format_value(value)) for key, value in params.items() if value is not None]
    )


def sign(query: str, secret: str) -> str:
    """Lowercase hex HMAC-SHA256 of ``query`` keyed with ``secret``."""
    return hmac.new(
        secret.encode("utf-8"),
        query.encode("utf-8"),
        hashlib.sha256,
    ).hexdigest()
