"""
BTC-e Exchange Descriptor

API:
    GET https://btc-e.com/api/2/{pair}/ticker

    The pair goes into the path in lowercase (e.g. "btc_usd").

Response Format:
    {
      "ticker": {
        "high": 29500.0,
        "low": 28500.0,
        "avg": 29000.0,
        "vol": 1523000.5,
        "vol_cur": 52.5,
        "last": 29200.0,
        "buy": 29210.0,
        "sell": 29190.0,
        "updated": 1609459200,
        "server_time": 1609459201
      }
    }

Numbers already arrive as JSON numbers, so the ticker is returned as is.
"""

from typing import Any, Optional

from cryptick.core.exchange_interface import ExchangeDescriptor


class BtceExchange(ExchangeDescriptor):
    """BTC-e public ticker (pair required)."""

    name = "btce"
    base_url = "https://btc-e.com/api/2"
    http_method = "GET"
    pair_required = True
    pair_example = "btc_usd"

    def build_url(self, pair: Optional[str] = None) -> str:
        return f"{self.base_url}/{pair.lower()}/ticker"

    def parse_ticker(self, body: Any, pair: Optional[str] = None) -> Any:
        return body.get("ticker")
