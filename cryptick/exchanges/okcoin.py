"""
OKCoin Exchange Descriptor

API:
    GET https://www.okcoin.com/api/ticker.do?symbol={pair}

    The lowercased pair is appended straight to the query string
    (e.g. "ltc_cny").

Response Format:
    {
      "ticker": {
        "buy": "33.15",
        "high": "34.15",
        "last": "33.15",
        "low": "32.05",
        "sell": "33.16",
        "vol": "10532696.39199642"
      }
    }
"""

from typing import Any, Optional

from cryptick.core.exchange_interface import ExchangeDescriptor
from cryptick.core.normalizer import normalize


class OkcoinExchange(ExchangeDescriptor):
    """OKCoin ticker (pair required)."""

    name = "okcoin"
    base_url = "https://www.okcoin.com/api/ticker.do?symbol="
    http_method = "GET"
    pair_required = True
    pair_example = "ltc_cny"

    def build_url(self, pair: Optional[str] = None) -> str:
        return f"{self.base_url}{pair.lower()}"

    def parse_ticker(self, body: Any, pair: Optional[str] = None) -> Any:
        return normalize(body.get("ticker"))
