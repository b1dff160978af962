"""
cryptick: current-price tickers from cryptocurrency exchanges.

Usage:
    import cryptick

    ticker = await cryptick.fetch_ticker("btce", "btc_usd")
    cryptick.build_url("okcoin", "LTC_CNY")
    cryptick.update_default_options(user_agent="my-bot 1.0")

For many requests, reuse one session:

    async with cryptick.TickerClient() as client:
        a = await client.fetch_ticker("bitstamp")
        b = await client.fetch_ticker("bter", "doge_btc")
"""

from typing import Any, List, Optional

from cryptick.core.config import default_options
from cryptick.core.errors import (
    EmptyResponseError,
    HttpStatusError,
    MalformedResponseError,
    MissingPairError,
    TickerError,
    TransportError,
    UnknownExchangeError,
)
from cryptick.core.exchange_interface import ExchangeDescriptor
from cryptick.core.exchange_manager import ExchangeManager, get_manager
from cryptick.core.normalizer import normalize
from cryptick.core.request_builder import RequestBuilder
from cryptick.core.schemas import DefaultOptions, RequestOptions
from cryptick.core.ticker import TickerClient, fetch_ticker

__version__ = "0.1.3"


def build_url(exchange: str, pair: Optional[str] = None) -> str:
    """Request URL for an exchange and pair."""
    return RequestBuilder().build_url(exchange, pair)


def build_options(exchange: str, pair: Optional[str] = None) -> RequestOptions:
    """Request options for an exchange and pair."""
    return RequestBuilder().build_options(exchange, pair)


def update_default_options(**changes: Any) -> DefaultOptions:
    """Change the process-wide default request options."""
    return default_options.update(**changes)


def list_exchanges() -> List[str]:
    """Identifiers of all registered exchanges."""
    return get_manager().list_exchanges()


__all__ = [
    "fetch_ticker",
    "build_url",
    "build_options",
    "update_default_options",
    "list_exchanges",
    "normalize",
    "TickerClient",
    "ExchangeDescriptor",
    "ExchangeManager",
    "DefaultOptions",
    "RequestOptions",
    "TickerError",
    "UnknownExchangeError",
    "MissingPairError",
    "TransportError",
    "HttpStatusError",
    "EmptyResponseError",
    "MalformedResponseError",
]
