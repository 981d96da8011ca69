"""Tests for query string encoding and HMAC signing."""
from __future__ import annotations

import hashlib
import hmac

import pytest

from aster_mcp_server.signing import compact_json, encode_params, format_value, now_ms, sign


class TestEncodeParams:
    """encode_params produces the exact string that is signed and sent."""

    def test_preserves_insertion_order(self):
        params = {"symbol": "BTCUSDT", "side": "BUY", "type": "MARKET", "quantity": 1}
        assert encode_params(params) == "symbol=BTCUSDT&side=BUY&type=MARKET&quantity=1"

    def test_empty_mapping_gives_empty_string(self):
        assert encode_params({}) == ""

    def test_skips_none_values(self):
        assert encode_params({"symbol": "BTCUSDT", "limit": None}) == "symbol=BTCUSDT"

    def test_url_encodes_reserved_characters(self):
        encoded = encode_params({"batchOrders": '[{"symbol":"BTCUSDT"}]'})
        assert encoded == "batchOrders=%5B%7B%22symbol%22%3A%22BTCUSDT%22%7D%5D"

    def test_spaces_are_plus_encoded(self):
        assert encode_params({"note": "a b"}) == "note=a+b"


class TestFormatValue:
    @pytest.mark.parametrize("value,expected", [
        (True, "true"),
        (False, "false"),
        (1, "1"),
        (1.0, "1"),
        (0.5, "0.5"),
        ("GTC", "GTC"),
        ([1, 2], "[1,2]"),
        ({"a": 1}, '{"a":1}'),
    ])
    def test_format_value(self, value, expected):
        assert format_value(value) == expected


class TestCompactJson:
    def test_keeps_non_ascii(self):
        assert compact_json(["BTC\u00dc"]) == '["BTC\u00dc"]'

    def test_nested_integral_floats_lose_fraction(self):
        value = [{"quantity": 1.0, "price": 2.5, "reduceOnly": True}]
        assert compact_json(value) == '[{"quantity":1,"price":2.5,"reduceOnly":true}]'

    def test_format_value_uses_compact_json(self):
        assert format_value({"q": [3.0]}) == '{"q":[3]}'


class TestSign:
    def test_matches_documented_example(self):
        """Reference vector from the exchange API documentation."""
        secret = "NhqPtmdSJYdKjVHjA7PZj4Mge3R5YNiP1e3UZjInClVN65XAbvqqM6A7H5fATj0j"
        query = (
            "symbol=LTCBTC&side=BUY&type=LIMIT&timeInForce=GTC&quantity=1"
            "&price=0.1&recvWindow=5000&timestamp=1499827319559"
        )
        assert sign(query, secret) == (
            "c8db56825ae71d6d79447849e617115f4a920fa2acdcab2b053c4b2838bd6b71"
        )

    def test_is_lowercase_hex_sha256(self):
        signature = sign("timestamp=1", "S")
        assert signature == hmac.new(b"S", b"timestamp=1", hashlib.sha256).hexdigest()
        assert len(signature) == 64
        assert signature == signature.lower()

    def test_changes_with_any_parameter(self):
        base = sign("symbol=BTCUSDT&timestamp=1", "S")
        assert sign("symbol=ETHUSDT&timestamp=1", "S") != base
        assert sign("symbol=BTCUSDT&timestamp=2", "S") != base
        assert sign("symbol=BTCUSDT&timestamp=1", "T") != base


def test_now_ms_is_integer_milliseconds():
    value = now_ms()
    assert isinstance(value, int)
    # Sanity: after 2020-01-01 in milliseconds
    assert value > 1577836800000
