"""
Bter Exchange Descriptor

API:
    GET http://data.bter.com/api/1/ticker/{pair}

    The pair is appended unchanged (e.g. "doge_btc").

Response Format:
    {
      "result": "true",
      "last": "0.00000052",
      "high": "0.00000055",
      "low": "0.00000050",
      "avg": "0.00000052",
      "sell": "0.00000053",
      "buy": "0.00000052",
      "vol_doge": 123456789.5,
      "vol_btc": "64.2"
    }

The "result" status flag is dropped and the remaining string prices are
normalized to floats.
"""

from typing import Any, Optional

from cryptick.core.exchange_interface import ExchangeDescriptor
from cryptick.core.normalizer import normalize


class BterExchange(ExchangeDescriptor):
    """Bter public ticker (pair required)."""

    name = "bter"
    base_url = "http://data.bter.com/api/1/ticker"
    http_method = "GET"
    pair_required = True
    pair_example = "doge_btc"

    def build_url(self, pair: Optional[str] = None) -> str:
        return f"{self.base_url}/{pair}"

    def parse_ticker(self, body: Any, pair: Optional[str] = None) -> Any:
        return normalize({k: v for k, v in body.items() if k != "result"})
