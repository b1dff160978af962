"""
Bitcoincharts Descriptors

Two read-only endpoints, both cached server-side and documented as allowing
at most one query every 15 minutes. The limit is recorded on the descriptor
and is not enforced here.

Weighted prices:
    GET http://api.bitcoincharts.com/v1/weighted_prices.json

    {
      "USD": {"7d": "29012.11", "30d": "27100.42", "24h": "29150.03"},
      "EUR": {"7d": "23800.90", "30d": "22250.17", "24h": "23910.55"},
      "timestamp": 1609459200
    }

Markets:
    GET http://api.bitcoincharts.com/v1/markets.json

    [
      {"symbol": "bitstampUSD", "currency": "USD", "bid": 29190.0,
       "ask": 29210.0, "latest_trade": 1609459199, "close": 29200.0, ...},
      ...
    ]

    Markets records are returned exactly as received, without numeric
    normalization.
"""

from typing import Any, Optional

from cryptick.core.exchange_interface import ExchangeDescriptor
from cryptick.core.normalizer import normalize

BITCOINCHARTS_LIMITS = "Max queries, once every 15 minutes"


class BitcoinchartsWeightedPricesExchange(ExchangeDescriptor):
    """Bitcoincharts weighted prices per currency (pair optional)."""

    name = "bitcoincharts-weighted-prices"
    base_url = "http://api.bitcoincharts.com/v1/weighted_prices.json"
    http_method = "GET"
    limits = BITCOINCHARTS_LIMITS

    def build_url(self, pair: Optional[str] = None) -> str:
        return self.base_url

    def parse_ticker(self, body: Any, pair: Optional[str] = None) -> Any:
        if pair is None:
            return normalize(body)
        wanted = ("timestamp", pair.upper())
        return normalize({k: v for k, v in body.items() if k in wanted})


class BitcoinchartsMarketsExchange(ExchangeDescriptor):
    """Bitcoincharts market list (pair optional, matched case-sensitively)."""

    name = "bitcoincharts-markets"
    base_url = "http://api.bitcoincharts.com/v1/markets.json"
    http_method = "GET"
    limits = BITCOINCHARTS_LIMITS

    def build_url(self, pair: Optional[str] = None) -> str:
        return self.base_url

    def parse_ticker(self, body: Any, pair: Optional[str] = None) -> Any:
        if pair is None:
            return body
        return next(
            (market for market in body if market.get("symbol") == pair),
            None
        )
