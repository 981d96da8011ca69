"""Market data tools - public GET endpoints, never signed."""
from ..models import ToolDefinition, empty_schema

_SYMBOL = {"type": "string", "description": "Trading symbol"}
_START_TIME = {"type": "number", "description": "Start time in ms"}
_END_TIME = {"type": "number", "description": "End time in ms"}


def _limit(default: int, maximum: int) -> dict:
    return {
        "type": "number",
        "description": f"Number of results. Default {default}, max {maximum}.",
    }


def _symbol_only() -> dict:
    return {"type": "object", "properties": {"symbol": dict(_SYMBOL)}}


def _market(name: str, description: str, path: str, schema: dict) -> ToolDefinition:
    return ToolDefinition(
        name=name, description=description, method="GET", path=path, input_schema=schema
    )


MARKET_DATA_TOOLS: list[ToolDefinition] = [
    _market("ping", "Test connectivity to the Rest API.", "/fapi/v1/ping", empty_schema()),
    _market("time", "Get the current server time.", "/fapi/v1/time", empty_schema()),
    _market(
        "exchangeInfo",
        "Get current exchange trading rules and symbol information.",
        "/fapi/v1/exchangeInfo",
        empty_schema(),
    ),
    _market(
        "depth",
        "Get the order book for a symbol.",
        "/fapi/v1/depth",
        {
            "type": "object",
            "properties": {
                "symbol": {"type": "string", "description": "Trading symbol, e.g., BTCUSDT"},
                "limit": _limit(500, 1000),
            },
            "required": ["symbol"],
        },
    ),
    _market(
        "trades",
        "Get recent market trades.",
        "/fapi/v1/trades",
        {
            "type": "object",
            "properties": {"symbol": dict(_SYMBOL), "limit": _limit(500, 1000)},
            "required": ["symbol"],
        },
    ),
    _market(
        "historicalTrades",
        "Get older market historical trades.",
        "/fapi/v1/historicalTrades",
        {
            "type": "object",
            "properties": {
                "symbol": dict(_SYMBOL),
                "limit": _limit(500, 1000),
                "fromId": {"type": "number", "description": "TradeId to fetch from."},
            },
            "required": ["symbol"],
        },
    ),
    _market(
        "aggTrades",
        "Get compressed, aggregate market trades.",
        "/fapi/v1/aggTrades",
        {
            "type": "object",
            "properties": {
                "symbol": dict(_SYMBOL),
                "fromId": {
                    "type": "number",
                    "description": "ID to get aggregate trades from INCLUSIVE.",
                },
                "startTime": {
                    "type": "number",
                    "description": "Timestamp in ms to get aggregate trades from INCLUSIVE.",
                },
                "endTime": {
                    "type": "number",
                    "description": "Timestamp in ms to get aggregate trades until INCLUSIVE.",
                },
                "limit": _limit(500, 1000),
            },
            "required": ["symbol"],
        },
    ),
    _market(
        "klines",
        "Get Kline/candlestick bars for a symbol.",
        "/fapi/v1/klines",
        {
            "type": "object",
            "properties": {
                "symbol": dict(_SYMBOL),
                "interval": {
                    "type": "string",
                    "description": "Kline interval (e.g., 1m, 5m, 1h, 1d)",
                },
                "startTime": dict(_START_TIME),
                "endTime": dict(_END_TIME),
                "limit": _limit(500, 1500),
            },
            "required": ["symbol", "interval"],
        },
    ),
    _market(
        "indexPriceKlines",
        "Kline/candlestick bars for the index price of a pair.",
        "/fapi/v1/indexPriceKlines",
        {
            "type": "object",
            "properties": {
                "pair": {"type": "string", "description": "Trading pair, e.g., BTCUSDT"},
                "interval": {"type": "string", "description": "Kline interval"},
                "startTime": dict(_START_TIME),
                "endTime": dict(_END_TIME),
                "limit": _limit(500, 1500),
            },
            "required": ["pair", "interval"],
        },
    ),
    _market(
        "markPriceKlines",
        "Kline/candlestick bars for the mark price of a symbol.",
        "/fapi/v1/markPriceKlines",
        {
            "type": "object",
            "properties": {
                "symbol": dict(_SYMBOL),
                "interval": {"type": "string", "description": "Kline interval"},
                "startTime": dict(_START_TIME),
                "endTime": dict(_END_TIME),
                "limit": _limit(500, 1500),
            },
            "required": ["symbol", "interval"],
        },
    ),
    _market(
        "premiumIndex", "Get Mark Price and Funding Rate.", "/fapi/v1/premiumIndex", _symbol_only()
    ),
    _market(
        "fundingRate",
        "Get funding rate history.",
        "/fapi/v1/fundingRate",
        {
            "type": "object",
            "properties": {
                "symbol": dict(_SYMBOL),
                "startTime": dict(_START_TIME),
                "endTime": dict(_END_TIME),
                "limit": _limit(100, 1000),
            },
        },
    ),
    _market("fundingInfo", "Get funding rate config.", "/fapi/v1/fundingInfo", _symbol_only()),
    _market(
        "ticker_24hr",
        "24 hour rolling window price change statistics.",
        "/fapi/v1/ticker/24hr",
        _symbol_only(),
    ),
    _market(
        "ticker_price",
        "Latest price for a symbol or symbols.",
        "/fapi/v1/ticker/price",
        _symbol_only(),
    ),
    _market(
        "ticker_bookTicker",
        "Best price/qty on the order book for a symbol or symbols.",
        "/fapi/v1/ticker/bookTicker",
        _symbol_only(),
    ),
]
