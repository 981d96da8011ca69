"""Static tool catalog: market data tools first, then account/trade tools."""

from .market_data import MARKET_DATA_TOOLS
from .account import ACCOUNT_TOOLS

ALL_TOOLS = [*MARKET_DATA_TOOLS, *ACCOUNT_TOOLS]

__all__ = ["ALL_TOOLS", "MARKET_DATA_TOOLS", "ACCOUNT_TOOLS"]
