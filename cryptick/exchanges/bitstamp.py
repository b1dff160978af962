"""
Bitstamp Exchange Descriptor

API:
    GET https://www.bitstamp.net/api/ticker/

    Only the BTC/USD book is served from this endpoint.

Response Format:
    {
      "high": "29500.00",
      "last": "29200.00",
      "timestamp": "1609459200",
      "bid": "29190.00",
      "vwap": "29050.12",
      "volume": "10234.56789012",
      "low": "28500.00",
      "ask": "29210.00"
    }

Compatibility note:
    build_options() always sets the pair to "btc_usd", whatever the caller
    asked for. The endpoint has a single book, so the pair cannot select
    anything here; the override is kept so existing callers see the same
    request options as before.
"""

from typing import Any, Dict, Optional

from cryptick.core.exchange_interface import ExchangeDescriptor
from cryptick.core.normalizer import normalize

FIXED_PAIR = "btc_usd"


class BitstampExchange(ExchangeDescriptor):
    """Bitstamp BTC/USD ticker (pair ignored)."""

    name = "bitstamp"
    base_url = "https://www.bitstamp.net/api/ticker/"
    http_method = "GET"

    def build_url(self, pair: Optional[str] = None) -> str:
        return self.base_url

    def build_options(self, pair: Optional[str] = None) -> Optional[Dict[str, Any]]:
        return {"pair": FIXED_PAIR, "method": self.http_method}

    def parse_ticker(self, body: Any, pair: Optional[str] = None) -> Any:
        return normalize(body)
