"""
Request Builder

Turns an (exchange, pair) request into a URL and RequestOptions.

validate() runs before anything touches the network: an unknown exchange or
a missing required pair is rejected here.

Option precedence (later wins):
    1. DefaultOptions (headers, TLS flag, keep-alive)
    2. {pair, exchange, method=descriptor.http_method}
    3. descriptor.build_options(pair)

Example:
    >>> builder = RequestBuilder()
    >>> builder.build_url("btce", "BTC_USD")
    'https://btc-e.com/api/2/btc_usd/ticker'
    >>> builder.build_options("havelock", "AMHASH1").method
    'POST'
"""

from typing import Optional

from cryptick.core.config import DefaultOptionsStore, default_options
from cryptick.core.errors import MissingPairError
from cryptick.core.exchange_interface import ExchangeDescriptor
from cryptick.core.exchange_manager import ExchangeManager, get_manager
from cryptick.core.logging import get_logger
from cryptick.core.schemas import RequestOptions

logger = get_logger(__name__)


class RequestBuilder:
    """
    Builds URLs and options for ticker requests.

    Attributes:
        manager: Registry used to resolve exchange identifiers
        defaults: Store holding the default request options
    """

    def __init__(
        self,
        manager: Optional[ExchangeManager] = None,
        defaults: Optional[DefaultOptionsStore] = None
    ):
        self.manager = manager if manager is not None else get_manager()
        self.defaults = defaults if defaults is not None else default_options

    def validate(self, exchange: str, pair: Optional[str] = None) -> ExchangeDescriptor:
        """
        Check that a request can be made.

        Args:
            exchange: Exchange identifier
            pair: Trading pair (required by some exchanges)

        Returns:
            The exchange's descriptor

        Raises:
            UnknownExchangeError: If the exchange is not registered
            MissingPairError: If the exchange needs a pair and none was given
        """
        descriptor = self.manager.get_exchange(exchange)

        if descriptor.pair_required and pair is None:
            logger.warning(f"Rejected {descriptor.name} request: no currency pair given")
            raise MissingPairError(descriptor.name, descriptor.pair_example)

        return descriptor

    def build_url(self, exchange: str, pair: Optional[str] = None) -> str:
        """
        Build the request URL for an exchange.

        Raises:
            UnknownExchangeError: If the exchange is not registered
            MissingPairError: If the exchange needs a pair and none was given
        """
        return self.validate(exchange, pair).build_url(pair)

    def build_options(self, exchange: str, pair: Optional[str] = None) -> RequestOptions:
        """
        Build the options for one request.

        Raises:
            UnknownExchangeError: If the exchange is not registered
        """
        descriptor = self.manager.get_exchange(exchange)

        merged = self.defaults.get().model_dump()
        merged.update({
            "pair": pair,
            "exchange": descriptor.name,
            "method": descriptor.http_method,
        })
        merged.update(descriptor.build_options(pair) or {})

        return RequestOptions(**merged)
