"""Account and trade tools - every call is signed with the client's key pair."""
from typing import Any

from ..models import ToolDefinition, empty_schema

_STR = {"type": "string"}
_NUM = {"type": "number"}
_POSITION_SIDE = {"type": "string", "enum": ["BOTH", "LONG", "SHORT"]}


def _props(required: tuple[str, ...] = (), **properties: Any) -> dict[str, Any]:
    schema: dict[str, Any] = {
        "type": "object",
        "properties": {name: dict(spec) for name, spec in properties.items()},
    }
    if required:
        schema["required"] = list(required)
    return schema


def _signed(
    name: str, description: str, method: str, path: str, schema: dict, **extra: Any
) -> ToolDefinition:
    return ToolDefinition(
        name=name,
        description=description,
        method=method,
        path=path,
        signed=True,
        input_schema=schema,
        **extra,
    )


def _order_lookup() -> dict[str, Any]:
    return _props(("symbol",), symbol=_STR, orderId=_NUM, origClientOrderId=_STR)


ACCOUNT_TOOLS: list[ToolDefinition] = [
    _signed(
        "setPositionMode",
        "Change user's position mode (Hedge Mode or One-way Mode).",
        "POST",
        "/fapi/v1/positionSide/dual",
        _props(
            ("dualSidePosition",),
            dualSidePosition={
                "type": "string",
                "description": '"true" for Hedge Mode; "false" for One-way Mode',
            },
        ),
    ),
    _signed(
        "getPositionMode",
        "Get user's position mode.",
        "GET",
        "/fapi/v1/positionSide/dual",
        empty_schema(),
    ),
    _signed(
        "setMultiAssetsMode",
        "Change user's Multi-Assets mode.",
        "POST",
        "/fapi/v1/multiAssetsMargin",
        _props(
            ("multiAssetsMargin",),
            multiAssetsMargin={
                "type": "string",
                "description": '"true" for Multi-Assets Mode; "false" for Single-Asset Mode',
            },
        ),
    ),
    _signed(
        "getMultiAssetsMode",
        "Get user's Multi-Assets mode.",
        "GET",
        "/fapi/v1/multiAssetsMargin",
        empty_schema(),
    ),
    _signed(
        "placeOrder",
        "Send in a new order.",
        "POST",
        "/fapi/v1/order",
        _props(
            ("symbol", "side", "type"),
            symbol=_STR,
            side={"type": "string", "enum": ["BUY", "SELL"]},
            positionSide=_POSITION_SIDE,
            type={
                "type": "string",
                "enum": [
                    "LIMIT",
                    "MARKET",
                    "STOP",
                    "STOP_MARKET",
                    "TAKE_PROFIT",
                    "TAKE_PROFIT_MARKET",
                    "TRAILING_STOP_MARKET",
                ],
            },
            timeInForce={"type": "string", "enum": ["GTC", "IOC", "FOK", "GTX"]},
            quantity=_NUM,
            price=_NUM,
            stopPrice=_NUM,
        ),
    ),
    _signed(
        "placeBatchOrders",
        "Place multiple orders.",
        "POST",
        "/fapi/v1/batchOrders",
        _props(
            ("batchOrders",),
            batchOrders={
                "type": "array",
                "items": _props(
                    ("symbol", "side", "type", "quantity"),
                    symbol=_STR,
                    side={"type": "string", "enum": ["BUY", "SELL"]},
                    type=_STR,
                    quantity=_NUM,
                    price=_NUM,
                ),
            },
        ),
        json_fields=("batchOrders",),
        require_any=("batchOrders",),
        missing_message="batchOrders is required.",
    ),
    _signed(
        "transferAsset",
        "Transfer between futures and spot.",
        "POST",
        "/fapi/v1/asset/wallet/transfer",
        _props(
            ("asset", "amount", "clientTranId", "kindType"),
            asset=_STR,
            amount=_NUM,
            clientTranId=_STR,
            kindType={"type": "string", "enum": ["FUTURE_SPOT", "SPOT_FUTURE"]},
        ),
    ),
    _signed("queryOrder", "Check an order's status.", "GET", "/fapi/v1/order", _order_lookup()),
    _signed("cancelOrder", "Cancel an active order.", "DELETE", "/fapi/v1/order", _order_lookup()),
    _signed(
        "cancelAllOpenOrders",
        "Cancel all open orders on a symbol.",
        "DELETE",
        "/fapi/v1/allOpenOrders",
        _props(("symbol",), symbol=_STR),
    ),
    _signed(
        "cancelBatchOrders",
        "Cancel multiple orders.",
        "DELETE",
        "/fapi/v1/batchOrders",
        _props(
            ("symbol",),
            symbol=_STR,
            orderIdList={"type": "array", "items": {"type": "number"}},
            origClientOrderIdList={"type": "array", "items": {"type": "string"}},
        ),
        json_fields=("orderIdList", "origClientOrderIdList"),
        require_any=("orderIdList", "origClientOrderIdList"),
        missing_message="Either orderIdList or origClientOrderIdList is required.",
    ),
    _signed(
        "countdownCancelAll",
        "Auto-cancel all open orders.",
        "POST",
        "/fapi/v1/countdownCancelAll",
        _props(
            ("symbol", "countdownTime"),
            symbol=_STR,
            countdownTime={"type": "number", "description": "Countdown time in milliseconds."},
        ),
    ),
    _signed(
        "queryOpenOrder",
        "Query current open order.",
        "GET",
        "/fapi/v1/openOrder",
        _order_lookup(),
    ),
    _signed(
        "getAllOpenOrders",
        "Get all open orders on a symbol.",
        "GET",
        "/fapi/v1/openOrders",
        _props(symbol=_STR),
    ),
    _signed(
        "getAllOrders",
        "Get all account orders; active, canceled, or filled.",
        "GET",
        "/fapi/v1/allOrders",
        _props(
            ("symbol",),
            symbol=_STR,
            orderId=_NUM,
            startTime=_NUM,
            endTime=_NUM,
            limit=_NUM,
        ),
    ),
    _signed("getBalance", "Get futures account balance.", "GET", "/fapi/v2/balance", empty_schema()),
    _signed(
        "getAccountInfo",
        "Get current account information.",
        "GET",
        "/fapi/v4/account",
        empty_schema(),
    ),
    _signed(
        "setLeverage",
        "Change user's initial leverage.",
        "POST",
        "/fapi/v1/leverage",
        _props(
            ("symbol", "leverage"),
            symbol=_STR,
            leverage={"type": "number", "minimum": 1, "maximum": 125},
        ),
    ),
    _signed(
        "setMarginType",
        "Change margin type.",
        "POST",
        "/fapi/v1/marginType",
        _props(
            ("symbol", "marginType"),
            symbol=_STR,
            marginType={"type": "string", "enum": ["ISOLATED", "CROSSED"]},
        ),
    ),
    _signed(
        "modifyPositionMargin",
        "Modify isolated position margin.",
        "POST",
        "/fapi/v1/positionMargin",
        _props(
            ("symbol", "amount", "type"),
            symbol=_STR,
            positionSide=_POSITION_SIDE,
            amount=_NUM,
            type={"type": "number", "enum": [1, 2], "description": "1: Add, 2: Reduce"},
        ),
    ),
    _signed(
        "getPositionMarginHistory",
        "Get position margin change history.",
        "GET",
        "/fapi/v1/positionMargin/history",
        _props(
            ("symbol",),
            symbol=_STR,
            type={"type": "number", "enum": [1, 2]},
            startTime=_NUM,
            endTime=_NUM,
            limit=_NUM,
        ),
    ),
    _signed(
        "getPositionInfo",
        "Get current position information.",
        "GET",
        "/fapi/v2/positionRisk",
        _props(symbol=_STR),
    ),
    _signed(
        "getTradeList",
        "Get trades for a specific account and symbol.",
        "GET",
        "/fapi/v1/userTrades",
        _props(
            ("symbol",),
            symbol=_STR,
            startTime=_NUM,
            endTime=_NUM,
            fromId=_NUM,
            limit=_NUM,
        ),
    ),
    _signed(
        "getIncomeHistory",
        "Get income history.",
        "GET",
        "/fapi/v1/income",
        _props(symbol=_STR, incomeType=_STR, startTime=_NUM, endTime=_NUM, limit=_NUM),
    ),
    _signed(
        "getLeverageBrackets",
        "Get notional and leverage brackets.",
        "GET",
        "/fapi/v1/leverageBracket",
        _props(symbol=_STR),
    ),
    _signed(
        "getAdlQuantile",
        "Get Position ADL Quantile Estimation.",
        "GET",
        "/fapi/v1/adlQuantile",
        _props(symbol=_STR),
    ),
    _signed(
        "getForceOrders",
        "Get user's force orders.",
        "GET",
        "/fapi/v1/forceOrders",
        _props(
            symbol=_STR,
            autoCloseType={"type": "string", "enum": ["LIQUIDATION", "ADL"]},
            startTime=_NUM,
            endTime=_NUM,
            limit=_NUM,
        ),
    ),
    _signed(
        "getCommissionRate",
        "Get user's commission rate.",
        "GET",
        "/fapi/v1/commissionRate",
        _props(("symbol",), symbol=_STR),
    ),
]
